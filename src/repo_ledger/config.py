"""Settings for rendering commit descriptions and history."""

from pydantic import BaseModel, Field

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d at %H:%M:%S %Z"


class LedgerSettings(BaseModel):
    """Presentation settings shared by a repository and its commits."""

    timestamp_format: str = Field(default=DEFAULT_TIMESTAMP_FORMAT, min_length=1)
    history_separator: str = "\n"

    model_config = {"frozen": True}


DEFAULT_SETTINGS = LedgerSettings()
