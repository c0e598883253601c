"""
Configuration management using Pydantic Settings.

Two configuration objects are provided:
- ScannerConfig: naming rules and fixed report texts, loaded from
  config/scanner.yaml when present (defaults otherwise)
- AppConfig: runtime settings (output path, input encodings, log level)
  loaded from environment variables and .env
"""

from pathlib import Path
from typing import List, Optional
import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_NO_MATCH_MESSAGE = (
    "No data blocks matched the search terms, or no search terms provided."
)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ScannerConfig(BaseSettings):
    """
    Naming and rendering rules for DataBlock extraction.

    Loaded automatically from config/scanner.yaml. Unlike the runtime
    settings, a missing file is not an error: the built-in defaults match
    the behaviour of Argos exports.

    Attributes:
        placeholder_names: Block names treated as "no real name"
            (compared case-insensitively)
        unnamed_block_prefix: Prefix of the positional fallback name
        unnamed_report_name: Label used for a Report without Name attribute
        no_match_message: Sole report line when nothing matched

    Example:
        >>> config = ScannerConfig()
        >>> config.is_placeholder('MAIN')
        True
        >>> config.is_placeholder('Payroll')
        False
    """

    placeholder_names: List[str] = Field(
        default_factory=lambda: ["Main"],
        description="Names that a <Name> sub-element is allowed to override"
    )
    unnamed_block_prefix: str = Field(
        default="UnnamedDataBlock_",
        description="Fallback name prefix, followed by a 1-based counter"
    )
    unnamed_report_name: str = Field(
        default="(Unnamed Report)",
        description="Name recorded for a Report without Name attribute"
    )
    no_match_message: str = Field(
        default=DEFAULT_NO_MATCH_MESSAGE,
        description="Report content when no DataBlock matched"
    )

    model_config = SettingsConfigDict(
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: dict) -> dict:
        """
        Load configuration from config/scanner.yaml if not already provided.

        Values passed explicitly (e.g., from tests) win over the file.
        """
        if data:
            return data

        current_file = Path(__file__)
        project_root = current_file.parent.parent.parent  # src/argos_search/config.py -> root
        config_path = project_root / 'config' / 'scanner.yaml'

        if not config_path.exists():
            # Try alternative: relative to current working directory
            config_path = Path('config/scanner.yaml')

        if not config_path.exists():
            return {}

        with open(config_path, 'r', encoding='utf-8') as f:
            yaml_data = yaml.safe_load(f) or {}

        return {
            key: value for key, value in yaml_data.items()
            if key in cls.model_fields
        }

    def is_placeholder(self, name: Optional[str]) -> bool:
        """
        Check whether a block name counts as unnamed.

        Args:
            name: Current block name (may be empty or None)

        Returns:
            True for empty names and placeholder names, False otherwise
        """
        if not name:
            return True
        lowered = name.lower()
        return any(lowered == p.lower() for p in self.placeholder_names)


# Singleton pattern - loaded once, cached forever
_scanner_config: Optional[ScannerConfig] = None


def get_scanner_config() -> ScannerConfig:
    """
    Get global scanner config instance (lazy-loaded singleton).

    Returns:
        Singleton ScannerConfig instance
    """
    global _scanner_config
    if _scanner_config is None:
        _scanner_config = ScannerConfig()
    return _scanner_config


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Environment Variables (from .env):
        ARGOS_SEARCH_OUTPUT_PATH: Report file (default: SearchMatches.txt)
        ARGOS_SEARCH_INPUT_ENCODINGS: JSON list of encodings to try in order
        ARGOS_SEARCH_LOG_LEVEL: Logging level used by the CLI

    Example:
        >>> config = get_app_config()
        >>> config.output_path
        'SearchMatches.txt'
        >>> config.input_encodings
        ['utf-8-sig', 'cp1252']
    """

    output_path: str = Field(
        default="SearchMatches.txt",
        description="Path of the text report, overwritten on every run"
    )

    input_encodings: List[str] = Field(
        default_factory=lambda: ["utf-8-sig", "cp1252"],
        min_length=1,
        description="Encodings tried in order when reading the export file"
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level name for the command line tool"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to an upper-case standard logging level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: '{v}'. Expected one of {list(LOG_LEVELS)}"
            )
        return level

    model_config = SettingsConfigDict(
        env_prefix='ARGOS_SEARCH_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )


# Singleton pattern - loaded once, cached forever
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Returns:
        Singleton AppConfig instance

    Example:
        >>> config = get_app_config()
        >>> config2 = get_app_config()
        >>> config is config2  # Same instance
        True
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
