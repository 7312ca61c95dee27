"""Configuration management using Pydantic Settings"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExampleLoan(BaseModel):
    """Loan shown before the interactive override"""

    principal: float = 1000.0  # Loan amount
    interest: float = 400.0  # Total interest charged
    term_years: int = Field(default=1, gt=0)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Service
    service_name: str = "console-kit"
    log_level: str = "WARNING"

    # Usury check
    usury_threshold_percent: float = 20.0  # Legal usury threshold (20% APR)
    example_loan: ExampleLoan = Field(default_factory=ExampleLoan)


settings = Settings()
