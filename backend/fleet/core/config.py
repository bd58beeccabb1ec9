from pydantic import field_validator
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    database_url: str
    jwt_secret: str
    jwt_alg: str = "HS256"
    jwt_expires_min: int = 1440
    cors_origins: str = ""

    port: int = 3000
    upload_dir: str = "uploads"
    public_dir: str = "public"
    log_level: str = "INFO"

    @field_validator("database_url")
    @classmethod
    def database_url_driver(cls, v: str):
        # hosted postgres hands out bare postgres:// urls
        for prefix in ("postgres://", "postgresql://"):
            if v.startswith(prefix):
                return "postgresql+psycopg://" + v[len(prefix):]
        return v

    @field_validator("jwt_secret")
    @classmethod
    def jwt_secret_required(cls, v: str):
        if not v.strip():
            raise ValueError("JWT_SECRET must not be empty")
        return v

    class Config:
        env_prefix = ""
        case_sensitive = False
        env_file = ".env"

settings = Settings()
