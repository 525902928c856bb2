from .user_record import UserRecord

__all__ = ["UserRecord"]
