from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings"]

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Runtime configuration, read from APISUITE_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="APISUITE_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    jsonplaceholder_url: str = "https://jsonplaceholder.typicode.com"
    restcountries_url: str = "https://restcountries.com/v3.1"
    httpbin_url: str = "https://httpbin.org"

    request_timeout: float = Field(30.0, gt=0, description="Per-request timeout in seconds")
    log_level: LogLevel = "INFO"
    log_file: Path | None = Field(None, description="Extra DEBUG log of the test session")

    ci: bool = Field(False, validation_alias=AliasChoices("APISUITE_CI", "CI"))
    retries: int | None = Field(
        None, ge=0, description="Re-runs of failed tests; defaults to 2 on CI, 0 locally"
    )

    tests_dir: Path = Path("tests/e2e")
    allure_results_dir: Path = Path("allure-results")
    allure_report_dir: Path = Path("allure-report")

    @field_validator("ci", mode="before")
    @classmethod
    def _blank_ci_is_false(cls, value):
        # CI runners sometimes export the variable with an empty value
        if isinstance(value, str) and not value.strip():
            return False
        return value

    @property
    def rerun_count(self) -> int:
        if self.retries is not None:
            return self.retries
        return 2 if self.ci else 0
