"""Preview settings with environment variable support."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pygments.styles import get_all_styles


class PreviewSettings(BaseSettings):
    """Settings of the preview command line front end."""

    highlight_style: str = Field(default="default")
    page_title: str = Field(default="Preview")
    verbose: bool = False
    json_logs: bool = False

    @field_validator("highlight_style")
    @classmethod
    def known_style(cls, v: str) -> str:
        if v not in set(get_all_styles()):
            raise ValueError(f"unknown Pygments style: {v}")
        return v

    model_config = SettingsConfigDict(env_prefix="TEXTPREVIEW_")
