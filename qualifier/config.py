"""
Configuration settings for the qualifier flow runner.

Uses Pydantic Settings to load environment variables for the remote endpoints,
candidate identity, artifact locations, output file and logging. Values are
treated as opaque strings by the flow; the only interpretation done here is
joining relative endpoint paths onto the API base URL.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from qualifier.domain.models import IdentityPayload


class Settings(BaseSettings):
    # Remote service
    api_base_url: str = Field("http://localhost:8080", alias="API_BASE_URL")
    generate_endpoint: str = Field("/hiring/generateWebhook", alias="APP_ENDPOINTS_GENERATE")
    submit_fallback_endpoint: str = Field(
        "/hiring/testWebhook", alias="APP_ENDPOINTS_SUBMIT_FALLBACK"
    )
    final_query_field: str = Field("finalQuery", alias="APP_FINAL_QUERY_FIELD")
    request_timeout_seconds: float = Field(30.0, alias="REQUEST_TIMEOUT_SECONDS")

    # Candidate identity
    candidate_name: str = Field("Jane Doe", alias="APP_CANDIDATE_NAME")
    candidate_reg_no: str = Field("REG12347", alias="APP_CANDIDATE_REG_NO")
    candidate_email: str = Field("jane.doe@example.com", alias="APP_CANDIDATE_EMAIL")

    # Artifacts
    sql_q1: str = Field("resource:q1.sql", alias="APP_SQL_Q1")
    sql_q2: str = Field("resource:q2.sql", alias="APP_SQL_Q2")
    output_store_file: str = Field("final_query.sql", alias="APP_OUTPUT_STORE_FILE")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    def identity(self) -> IdentityPayload:
        """Build the registration payload from the configured candidate fields."""
        return IdentityPayload(
            name=self.candidate_name,
            registration_id=self.candidate_reg_no,
            email=self.candidate_email,
        )

    def resolve_url(self, path: str) -> str:
        """
        Join a relative endpoint path onto `api_base_url`.

        Absolute URLs (anything carrying a scheme) are returned unchanged.
        """
        if "://" in path:
            return path
        return f"{self.api_base_url.rstrip('/')}/{path.lstrip('/')}"

    @property
    def generate_url(self) -> str:
        return self.resolve_url(self.generate_endpoint)

    @property
    def submit_fallback_url(self) -> str:
        return self.resolve_url(self.submit_fallback_endpoint)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
