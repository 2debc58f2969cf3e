"""Config loader tests"""

import pytest
import yaml
from converter_validator.config import loader
from converter_validator.config.loader import (
    Config,
    default_config,
    get_config,
    load_config,
    save_config,
)
from converter_validator.utils.logger import get_logger

logger = get_logger(__name__)


def test_defaults():
    """Built-in defaults"""
    config = default_config()
    assert config.validation.records_key == "converters"
    assert config.validation.min_word_count == 1000
    assert config.validation.special_sections == ["converter", "faq", "faqs"]
    assert config.logging.console_level == "WARNING"
    assert config.report.show_structure_guide is True


def test_partial_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("validation:\n  min_word_count: 1500\nreport:\n", encoding="utf-8")

    config = load_config(str(path))
    logger.info(f"✅ min_word_count: {config.validation.min_word_count}")

    assert config.validation.min_word_count == 1500
    assert config.validation.records_key == "converters"
    assert config.logging.log_dir == "data/logs"
    assert config.report.show_structure_guide is True


def test_empty_file(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == Config()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yml"))


def test_unknown_key(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("validation:\n  min_words: 10\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_config(str(path))


def test_null_values_keep_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("validation:\n  special_sections:\n  min_word_count: 1200\nlogging:\n  log_dir:\n", encoding="utf-8")

    config = load_config(str(path))
    assert config.validation.special_sections == ["converter", "faq", "faqs"]
    assert config.validation.min_word_count == 1200
    assert config.logging.log_dir == "data/logs"


def test_sections_must_be_mappings(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("- validation\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_config(str(path))

    path.write_text("validation: strict\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_config(str(path))


def test_broken_yaml(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("validation: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_config(str(path))


def test_save_and_reload(tmp_path):
    config = default_config()
    config.validation.min_word_count = 800
    config.validation.special_sections = ["converter"]
    path = tmp_path / "nested" / "config.yml"

    save_config(config, str(path))
    assert load_config(str(path)) == config


def test_get_config_singleton(tmp_path, monkeypatch):
    """Without config/config.yml the defaults are used, and the instance is reused"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(loader, "_config", None)

    first = get_config()
    assert first == default_config()
    assert get_config() is first

    path = tmp_path / "other.yml"
    path.write_text("validation:\n  records_key: tools\n", encoding="utf-8")
    assert get_config(str(path)).validation.records_key == "tools"
    assert get_config().validation.records_key == "tools"
