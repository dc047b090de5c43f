from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BUSINESS_NAME: str = "Maison Cilia"
    BUSINESS_ADDRESS: str = "Ivry-sur-Seine, Paris"
    FRONTEND_URL: str = "http://localhost:5500"
    CORS_ORIGINS: list[str] = ["*"]

    ADMIN_PASSWORD: str = ""

    STORE_PROVIDER: str = "json"  # "json", "redis", "memory"
    DATA_FILE: str = "./data/data.json"
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_PREFIX: str = "salon"

    STRIPE_SECRET_KEY: str | None = None
    DEPOSIT_AMOUNT_CENTS: int = 1000
    DEPOSIT_CURRENCY: str = "eur"

    SMTP_HOST: str = "smtp-relay.brevo.com"
    SMTP_PORT: int = 587
    SMTP_USER: str | None = None
    SMTP_PASSWORD: str | None = None
    MAIL_FROM: str = "Maison Cilia <contact@maisoncilia.com>"


settings = Settings()
