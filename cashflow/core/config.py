from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Cash Flow Simplifier"
    LOG_LEVEL: str = "INFO"
    MAX_TRANSACTIONS: int = 10_000
    AMOUNT_LIMIT: int = 2**63 - 1

    class Config:
        env_file = ".env"

settings = Settings()
