"""Config file loader (YAML)

Reads config.yml and turns it into dataclasses. Missing sections or keys fall
back to the built-in defaults.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field, asdict
from converter_validator.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yml"


@dataclass
class ValidationConfig:
    """Validation rules"""
    records_key: str = "converters"
    min_word_count: int = 1000
    special_sections: List[str] = field(default_factory=lambda: ["converter", "faq", "faqs"])


@dataclass
class LoggingConfig:
    """Logging settings"""
    file_level: str = "DEBUG"
    console_level: str = "WARNING"
    log_dir: str = "data/logs"


@dataclass
class ReportConfig:
    """Console report settings"""
    show_structure_guide: bool = True


@dataclass
class Config:
    """Full configuration"""
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


def default_config() -> Config:
    """Built-in defaults, used when no config file exists"""
    return Config()


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Keys of one config section; empty (null) values keep their defaults"""
    values = data.get(name) or {}
    if not isinstance(values, dict):
        raise TypeError(f"Config section '{name}' must be a mapping")
    return {key: value for key, value in values.items() if value is not None}


def _from_dict(data: Any) -> Config:
    if not isinstance(data, dict):
        raise TypeError("Config file must contain a mapping of sections")
    return Config(
        validation=ValidationConfig(**_section(data, "validation")),
        logging=LoggingConfig(**_section(data, "logging")),
        report=ReportConfig(**_section(data, "report"))
    )


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
    """Load config.yml

    Args:
        config_path: config file path

    Returns:
        Config object

    Raises:
        FileNotFoundError: config file does not exist
        yaml.YAMLError: YAML parse error
        TypeError: unknown key, or a section that is not a mapping
    """
    path = Path(config_path)
    if not path.exists():
        logger.error(f"Config file not found: {config_path}")
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.debug(f"Loading config from: {config_path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    config = _from_dict(data)

    logger.info(
        f"✅ Config loaded: records_key={config.validation.records_key}, "
        f"min_word_count={config.validation.min_word_count}"
    )
    return config


# Global config instance (singleton)
_config: Optional[Config] = None


def get_config(config_path: Optional[str] = None) -> Config:
    """Return the global config instance (singleton)

    An explicit `config_path` is always loaded (and must exist). Without one,
    the default path is used when present, built-in defaults otherwise.

    Example:
        >>> from converter_validator.config.loader import get_config
        >>> config = get_config()
        >>> print(config.validation.min_word_count)
    """
    global _config
    if config_path is not None:
        _config = load_config(config_path)
    elif _config is None:
        if Path(DEFAULT_CONFIG_PATH).exists():
            _config = load_config(DEFAULT_CONFIG_PATH)
        else:
            logger.debug(f"No {DEFAULT_CONFIG_PATH}, using built-in defaults")
            _config = default_config()
    return _config


def save_config(config: Config, config_path: str = DEFAULT_CONFIG_PATH) -> None:
    """Save config.yml

    Args:
        config: Config object
        config_path: config file path
    """
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(asdict(config), f, allow_unicode=True, default_flow_style=False, sort_keys=False)

    logger.info(f"✅ Config saved: {config_path}")
