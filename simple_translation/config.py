"""Module for the Config class."""
import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

from simple_translation.exceptions import UnsupportedConfigFormatError
from simple_translation.parser import Parser
from simple_translation.translation import Translation
from simple_translation.types import DEFAULT_LANGUAGE, LanguageCode

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


class Config:
    """A class to store the configuration."""

    def __init__(self) -> None:
        self.default_language: LanguageCode = DEFAULT_LANGUAGE
        self.logging_config: dict[str, Any] | None = None

    def __parse_yaml(self, yaml_path: Path) -> None:
        """Parse a YAML configuration file."""
        with open(yaml_path, encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}
        self.default_language = str(
            config.get("default_language", self.default_language)
        )
        self.logging_config = config.get("logging", self.logging_config)

    def parse(self, config_path: Path) -> None:
        """Parse a configuration file."""
        if config_path.suffix in _YAML_SUFFIXES:
            self.__parse_yaml(config_path)
        else:
            raise UnsupportedConfigFormatError(config_path)

    def setup_logging(self) -> None:
        """Configure logging from the logging section, or with basic defaults."""
        if self.logging_config is None:
            logging.basicConfig(level=logging.WARNING)
            return

        try:
            logging.config.dictConfig(self.logging_config)
        except (ValueError, TypeError, AttributeError, ImportError) as e:
            logging.basicConfig(level=logging.WARNING)
            logger.warning("Invalid logging configuration, using defaults: %s", e)

    def create_translation(self, parser: Parser | None = None) -> Translation:
        """Create a translation registry using the configured default language."""
        return Translation(default_language=self.default_language, parser=parser)
