from pydantic import Field
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # e.g. mongodb://localhost:27017/accounts, database name is the path
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    debug: bool = False
    jwt_secret: str  # HS256 signing secret for session tokens
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)  # bcrypt cost factor
    token_ttl_seconds: int = Field(default=3600, gt=0)
    cors_origins: list[str] = []

    model_config = {
        "env_file": [".env"],
        "env_prefix": "ACCOUNTS_",
        "extra": "ignore",
    }
