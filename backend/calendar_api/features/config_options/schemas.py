"""
Config options feature: Schemas for the options endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field


class ConfigOption(BaseModel):
    """A display label key paired with its value (e.g. a schedule file path)."""
    model_config = ConfigDict(populate_by_name=True)

    label_key: str = Field(alias="labelKey")
    value: str


class ConfigResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    config_options: list[ConfigOption] = Field(alias="configOptions")
