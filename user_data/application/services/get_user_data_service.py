import structlog

from ..dtos import UserDataDTO
from ..ports.inbound import GetUserDataUseCase
from ..ports.outbound import UserRecordRepository

logger = structlog.get_logger()


class GetUserDataService(GetUserDataUseCase):
    """Service implementing the get user data use case."""

    def __init__(self, repository: UserRecordRepository) -> None:
        self._repository = repository

    def execute(self, user_id: str) -> UserDataDTO | None:
        """Get user data by ID, keeping only string attributes."""
        record = self._repository.get_by_user_id(user_id)
        if record is None:
            return None

        dropped = record.dropped_attribute_names()
        if dropped:
            logger.debug("Non-string attributes omitted", attributes=sorted(dropped))

        return UserDataDTO(record.project_strings())
