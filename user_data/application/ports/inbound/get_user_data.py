from abc import ABC, abstractmethod

from ...dtos import UserDataDTO


class GetUserDataUseCase(ABC):
    """Input port for retrieving a user's stored data."""

    @abstractmethod
    def execute(self, user_id: str) -> UserDataDTO | None:
        """Get the string attributes of a user record, None if there is no record."""
        ...
