"""Configuration management for the GenBank XML tool."""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from .errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_dir: str = "."
    log_file: Optional[str] = None
    colors: bool = True


@dataclass
class EntrezConfig:
    """NCBI Entrez settings used when fetching GenBank XML."""
    email: str = "user@example.com"
    api_key: Optional[str] = None
    database: str = "nuccore"


@dataclass
class Config:
    """Main configuration container."""
    logging: LoggingConfig
    entrez: EntrezConfig

    @classmethod
    def default(cls) -> 'Config':
        """Create default configuration."""
        return cls(
            logging=LoggingConfig(),
            entrez=EntrezConfig()
        )

    @classmethod
    def from_file(cls, path: Path) -> 'Config':
        """Load configuration from JSON file.

        Raises:
            ConfigError: If the file can't be read, isn't valid JSON, or has
                unknown settings
        """
        if not path.exists():
            return cls.default()

        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigError(str(path), str(e)) from e

        if not isinstance(data, dict):
            raise ConfigError(str(path), "expected a JSON object")

        try:
            return cls(
                logging=LoggingConfig(**data.get('logging', {})),
                entrez=EntrezConfig(**data.get('entrez', {}))
            )
        except TypeError as e:
            raise ConfigError(str(path), str(e)) from e

    def validate(self) -> None:
        """Check settings that are only used after loading.

        Raises:
            ConfigError: If the log level is not a known level name
        """
        if str(self.logging.level).upper() not in LOG_LEVELS:
            raise ConfigError(
                "log level",
                f"{self.logging.level!r} is not one of {', '.join(LOG_LEVELS)}"
            )

    def to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            'logging': asdict(self.logging),
            'entrez': asdict(self.entrez)
        }

        with open(path, 'w') as f:
            json.dump(data, f, indent=2)

    def merge_env_vars(self) -> None:
        """Merge environment variables into configuration."""
        if os.getenv('PARSE_GB_XML_LOG_LEVEL'):
            self.logging.level = os.getenv('PARSE_GB_XML_LOG_LEVEL')
        if os.getenv('PARSE_GB_XML_LOG_DIR'):
            self.logging.log_dir = os.getenv('PARSE_GB_XML_LOG_DIR')

        if os.getenv('NCBI_API_KEY'):
            self.entrez.api_key = os.getenv('NCBI_API_KEY')
        if os.getenv('EMAIL'):
            self.entrez.email = os.getenv('EMAIL')

    def merge_cli_args(self, **kwargs) -> None:
        """Merge CLI arguments into configuration."""
        if kwargs.get('verbose'):
            self.logging.level = 'DEBUG'
        if kwargs.get('log_file'):
            self.logging.log_file = kwargs['log_file']

        if kwargs.get('api_key'):
            self.entrez.api_key = kwargs['api_key']
        if kwargs.get('email'):
            self.entrez.email = kwargs['email']


@dataclass
class RunConfig:
    """Paths for one conversion run."""
    xml: Path
    genomes: Path
    peptides: Path

    def describe(self) -> str:
        """One-line description of the resolved configuration."""
        return f"config: xml={self.xml}, genomes={self.genomes}, peptides={self.peptides}"


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    locations = [
        Path.home() / '.parse_gb_xml' / 'config.json',
        Path.home() / '.config' / 'parse_gb_xml' / 'config.json',
        Path('.parse_gb_xml.json')
    ]

    for path in locations:
        if path.exists():
            return path

    return Path.home() / '.parse_gb_xml' / 'config.json'


def create_example_config(path: Optional[Path] = None) -> Path:
    """Create an example configuration file."""
    if path is None:
        path = Path('parse_gb_xml.config.example.json')

    config = Config.default()

    config.entrez.api_key = "your_api_key_here"
    config.entrez.email = "your_email@example.com"
    config.logging.log_file = "parse_gb_xml.log"

    config.to_file(path)
    return path
