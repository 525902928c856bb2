from .user_record_repository import UserDataUnavailableError, UserRecordRepository

__all__ = ["UserRecordRepository", "UserDataUnavailableError"]
