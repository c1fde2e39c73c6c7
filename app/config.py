from pydantic_settings import BaseSettings
from pydantic import Field

PROD_LIKE_ENVS = {"prod", "production", "stage", "staging"}

class Settings(BaseSettings):
    app_name: str = Field("Portfolio API", alias="APP_NAME")
    app_env: str = Field("dev", alias="APP_ENV")
    secret_key: str | None = Field(default=None, alias="SECRET_KEY")
    access_token_expire_minutes: int = Field(60 * 24 * 7, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    database_url: str | None = Field(default=None, alias="DATABASE_URL")

    auth_cookie_name: str = Field("auth-token", alias="AUTH_COOKIE_NAME")
    auth_cookie_secure: bool | None = Field(default=None, alias="AUTH_COOKIE_SECURE")

    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ALLOW_ORIGINS")
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization"]

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # seeds the first admin account on startup when both are set
    admin_email: str | None = Field(default=None, alias="ADMIN_EMAIL")
    admin_password: str | None = Field(default=None, alias="ADMIN_PASSWORD")
    admin_fullname: str = Field("Administrator", alias="ADMIN_FULLNAME")

    class Config:
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True

    @property
    def is_prod_like(self) -> bool:
        return (self.app_env or "").lower() in PROD_LIKE_ENVS

    @property
    def cookie_secure(self) -> bool:
        if self.auth_cookie_secure is None:
            return self.is_prod_like
        return self.auth_cookie_secure

    @property
    def cookie_max_age(self) -> int:
        return self.access_token_expire_minutes * 60

settings = Settings()
