"""
Outbound port for user record lookups.

Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod

from ....domain.entities import UserRecord


class UserDataUnavailableError(Exception):
    """Raised when the backing store cannot be read."""

    pass


class UserRecordRepository(ABC):
    """Output port for reading user records by key."""

    @abstractmethod
    def get_by_user_id(self, user_id: str) -> UserRecord | None:
        """
        Point lookup of a single record.

        Args:
            user_id: Primary key of the record

        Returns:
            The record, or None if no record exists for the key

        Raises:
            UserDataUnavailableError: If the store could not be queried
        """
        ...
