from .get_user_data import GetUserDataUseCase

__all__ = ["GetUserDataUseCase"]
