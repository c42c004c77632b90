from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DEFAULT_HORIZON_CAP_MONTHS: int = 600
    DEFAULT_EPSILON: float = 0.01
    MATERIALITY_THRESHOLD_PCT: float = 1.0
    NON_AMORTIZING_MARGIN: float = 0.01
    DTI_EXCELLENT_MAX: float = 20.0
    DTI_GOOD_MAX: float = 36.0
    DTI_MANAGEABLE_MAX: float = 43.0
    CURRENCY_CODE: str = "INR"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "DEBT_ENGINE_"}


settings = Settings()
