"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "guarantor-risk"
    log_level: str = "INFO"

    # Scoring
    default_strategy: Literal["weighted", "dcr"] = "dcr"

    # Worst-case scenarios
    worst_vacancy_rate: float = 0.20
    rate_increase: float = 0.02  # Added to the current interest rate

    # Interest-hike repayment estimate. hike_estimator also picks the worst-case
    # driver's estimator; the driver's linear factor is fixed at 1.0 (loan x rate
    # increase) while hike_repayment_factor only applies to the weighted model.
    hike_estimator: Literal["linear", "amortized"] = "linear"
    hike_repayment_factor: float = 0.7  # Linear approximation, not amortization
    default_remaining_years: int = 20


settings = Settings()
