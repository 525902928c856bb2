from .user_data_dto import ErrorResponseDTO, UserDataDTO

__all__ = ["ErrorResponseDTO", "UserDataDTO"]
