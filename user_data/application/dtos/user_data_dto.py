from pydantic import BaseModel, RootModel


class UserDataDTO(RootModel[dict[str, str]]):
    """DTO for a projected user record (attribute name to string value)."""


class ErrorResponseDTO(BaseModel):
    """DTO for error responses."""

    message: str
