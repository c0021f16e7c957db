"""Run configuration.

Values come from CLI options backed by environment variables (and a
.env file); this model validates them before any network call is made.
"""

from pathlib import Path

from pydantic import BaseModel, ValidationError, model_validator

from postman_docs_sync.errors import ConfigError

DEFAULT_BASE_URL = "https://api.getpostman.com"
DEFAULT_OUTPUT_DIR = Path("api-documentation")


class SyncConfig(BaseModel):
    """Settings for one sync run."""

    api_key: str | None = None
    workspace_name: str | None = None
    collection_name: str | None = None
    collection_id: str | None = None
    output_dir: Path = DEFAULT_OUTPUT_DIR
    endpoints_dir: Path | None = None  # None disables endpoint modules
    base_url: str = DEFAULT_BASE_URL

    @model_validator(mode="after")
    def _check_required(self) -> "SyncConfig":
        if not self.api_key:
            raise ValueError("POSTMAN_API_KEY is required")
        if not self.collection_name and not self.collection_id:
            raise ValueError("Please provide either COLLECTION_ID or COLLECTION_NAME")
        return self


def build_config(**values) -> SyncConfig:
    """Validate settings, raising ConfigError with a readable message."""
    try:
        return SyncConfig(**values)
    except ValidationError as e:
        raise ConfigError(_first_error(e)) from e


def _first_error(error: ValidationError) -> str:
    detail = error.errors()[0]
    cause = detail.get("ctx", {}).get("error")
    if cause is not None:
        return str(cause)
    location = ".".join(str(part) for part in detail.get("loc", ()))
    return f"{location}: {detail['msg']}" if location else detail["msg"]
