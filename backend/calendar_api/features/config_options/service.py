"""
Config options feature: loads selectable options from a YAML file.

Expected file shape:

    configOptions:
      - labelKey: config.botolaD1
        value: schBotolaD1/SchMoroccoD1.properties

If the file cannot be loaded, a fixed default list is returned instead and
the caller cannot tell the difference.
"""

import logging
from pathlib import Path

import yaml

from calendar_api.config import PACKAGE_DIR
from calendar_api.core.exceptions import ConfigLoadError
from calendar_api.features.config_options.schemas import ConfigOption, ConfigResponse

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_OPTIONS = [
    ("config.botolaD1", "schBotolaD1/SchMoroccoD1.properties"),
    ("config.botolaD2", "schBotolaD2/SchMoroccoD2.properties"),
    ("config.cnpff1", "schCNPFF1/MoroccoCNPFF1.properties"),
    ("config.cnpff2", "schCNPFF2/MoroccoCNPFF2.properties"),
]


def resolve_config_path(config_file: str) -> Path:
    """Absolute paths are kept; relative ones are taken from the package directory."""
    path = Path(config_file)
    return path if path.is_absolute() else PACKAGE_DIR / path


class ConfigService:
    """Reads config options on every call; nothing is cached."""

    def __init__(self, config_file: str = "config-options.yml"):
        self.config_file = str(resolve_config_path(config_file))

    def load_config_options(self) -> ConfigResponse:
        """Strict loader.

        Raises:
            ConfigLoadError: If the file is missing, unreadable, not valid YAML,
                or does not contain a `configOptions` list of labelKey/value maps.
        """
        path = Path(self.config_file)
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(self.config_file, str(e))

        if not isinstance(data, dict):
            raise ConfigLoadError(self.config_file, "top level is not a mapping")

        entries = data.get("configOptions")
        if not isinstance(entries, list):
            raise ConfigLoadError(self.config_file, "'configOptions' is missing or not a list")

        options = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict) or entry.get("labelKey") is None or entry.get("value") is None:
                raise ConfigLoadError(self.config_file, f"entry {i} needs 'labelKey' and 'value'")
            options.append(ConfigOption(label_key=str(entry["labelKey"]), value=str(entry["value"])))

        return ConfigResponse(config_options=options)

    def get_default_config(self) -> ConfigResponse:
        """The hardcoded fallback list."""
        return ConfigResponse(
            config_options=[
                ConfigOption(label_key=label_key, value=value)
                for label_key, value in DEFAULT_CONFIG_OPTIONS
            ]
        )

    def get_config_options(self) -> ConfigResponse:
        """Options from the file, or the default list if it cannot be loaded."""
        try:
            return self.load_config_options()
        except ConfigLoadError as e:
            logger.warning(f"{e.message}: {e.detail}. Using default options.")
            return self.get_default_config()
