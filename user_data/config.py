from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Function settings loaded from environment."""

    # Service
    service_name: str = "user-data-api"
    log_level: str = "INFO"

    # AWS
    region: str = Field(..., pattern=r"^[a-z]{2}(-[a-z]+)+-\d+$")
    table_name: str = Field(..., min_length=1)
    aws_endpoint_url: str | None = None  # For LocalStack

    class Config:
        env_file = ".env"
        case_sensitive = False
