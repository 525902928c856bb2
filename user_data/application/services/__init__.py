from .get_user_data_service import GetUserDataService

__all__ = ["GetUserDataService"]
