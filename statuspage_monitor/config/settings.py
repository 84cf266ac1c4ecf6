"""Typed runtime settings with dotenv support and startup validation."""

from __future__ import annotations

import json
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from statuspage_monitor.domain import ProbeRequest


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the health probe and status-page propagation.

    Environment variable names map directly to field names in uppercase.
    Example: `status_page_api_key` reads from `STATUS_PAGE_API_KEY`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Minimum log level for the console sink.
        status_page_api_key: Statuspage.io API key sent as `OAuth` authorization.
        status_page_page_id: Default Statuspage.io page id.
        status_page_base_url: Base URL of the Statuspage.io pages endpoint.
        status_page_max_workers: Thread pool size for batch component updates.
        component_ids: Default comma separated component ids.
        api_url: Probe target URL.
        api_method: Probe HTTP method.
        api_headers: JSON-encoded probe headers mapping.
        api_post_body: JSON-encoded probe body.
        api_query_string: JSON-encoded probe query parameters mapping.
        request_timeout_seconds: Outbound HTTP timeout in seconds.
        stage: Deployment stage used to derive the status-update function name.
        status_update_function_name: Remote status-update function name override.
        status_update_invocation_type: Lambda invocation type.
        aws_region: AWS region hosting the status-update function.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    status_page_api_key: str = Field(min_length=1)
    status_page_page_id: str = Field(min_length=1)
    status_page_base_url: str = Field(default="https://api.statuspage.io/v1/pages", min_length=1)
    status_page_max_workers: int = Field(default=8, ge=1)
    component_ids: str = Field(default="")
    api_url: str = Field(default="")
    api_method: str = Field(default="GET")
    api_headers: str = Field(default="")
    api_post_body: str = Field(default="")
    api_query_string: str = Field(default="")
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    stage: str = Field(default="dev", min_length=1)
    status_update_function_name: str = Field(default="")
    status_update_invocation_type: str = Field(default="RequestResponse")
    aws_region: str = Field(default="us-west-2", min_length=1)

    @field_validator("status_page_api_key", "status_page_page_id", "stage")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("status_update_invocation_type")
    @classmethod
    def _validate_invocation_type(cls, value: str) -> str:
        if value not in {"RequestResponse", "Event", "DryRun"}:
            raise ValueError("status_update_invocation_type must be RequestResponse, Event or DryRun")
        return value

    @field_validator("log_level", "api_method")
    @classmethod
    def _normalize_upper(cls, value: str) -> str:
        return value.strip().upper()

    def settings_status_update_function_name(self) -> str:
        """Return the configured remote function name or the stage-derived default.

        Returns:
            str: Lambda function name used for status-page propagation.
        """

        configured_name = self.status_update_function_name.strip()
        if configured_name:
            return configured_name
        return f"status-page-update-{self.stage}-http"


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_parse_json_setting(name: str, raw_value: str | None) -> Any:
    """Decode one JSON-encoded setting value.

    Args:
        name: Setting name used in error messages.
        raw_value: Raw setting text.

    Returns:
        Any: Decoded JSON value, or None when the setting is blank.

    Raises:
        SettingsLoadError: Raised when the value is not valid JSON.
    """

    if raw_value is None or not raw_value.strip():
        return None

    try:
        return json.loads(raw_value)
    except json.JSONDecodeError as error:
        raise SettingsLoadError(f"Setting {name} must hold valid JSON. Details: {error}") from error


def config_build_probe_defaults(settings: AppSettings) -> ProbeRequest:
    """Build process-level probe defaults from runtime settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        ProbeRequest: Default probe request with decoded headers, body and query.

    Raises:
        SettingsLoadError: Raised when a JSON-encoded probe setting is malformed.
    """

    return ProbeRequest(
        url=settings.api_url.strip() or None,
        method=settings.api_method or "GET",
        headers=config_parse_json_setting("API_HEADERS", settings.api_headers),
        data=config_parse_json_setting("API_POST_BODY", settings.api_post_body),
        params=config_parse_json_setting("API_QUERY_STRING", settings.api_query_string),
    )
