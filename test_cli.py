"""CLI tests"""

import json
import logging
import pytest
from typer.testing import CliRunner
from converter_validator.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Logs and default config lookups stay inside tmp_path"""
    monkeypatch.chdir(tmp_path)
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()


def test_help():
    """Help output"""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "validate" in result.stdout


def test_validate_without_path_prints_usage():
    result = runner.invoke(app, ["validate"])
    assert result.exit_code == 1
    assert "Usage: converter-validator [validate]" in result.stdout


def test_no_arguments_prints_usage():
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "Usage: converter-validator [validate]" in result.stdout


def test_bare_path_runs_validate(write_document, valid_record, make_record):
    path = write_document({"converters": [valid_record]})
    result = runner.invoke(app, [path])
    assert result.exit_code == 0
    assert "All converters passed validation!" in result.stdout

    path = write_document({"converters": [make_record(featured="no")]}, name="bad.json")
    result = runner.invoke(app, [path, "--no-guide"])
    assert result.exit_code == 1
    assert "Validation failed!" in result.stdout


def test_validate_passing_document(write_document, valid_record):
    path = write_document({"converters": [valid_record]})
    result = runner.invoke(app, ["validate", path])
    assert result.exit_code == 0
    assert "All converters passed validation!" in result.stdout


def test_validate_failing_document(write_document, make_record):
    path = write_document({"converters": [make_record(id="broken", conversions={"g": {"g": 2}})]})
    result = runner.invoke(app, ["validate", path])
    assert result.exit_code == 1
    assert "Self-conversion" in result.stdout
    assert "Validation failed!" in result.stdout


def test_structure_guide_for_failing_section(write_document, make_record):
    record = make_record(
        id="qr",
        contentSequence=["hero", "quickReference"],
        contentSections={"hero": {"title": "T"}, "quickReference": {"title": "Q", "items": []}},
    )
    path = write_document({"converters": [record]})

    result = runner.invoke(app, ["validate", path])
    assert result.exit_code == 1
    assert "STRUCTURE GUIDE" in result.stdout
    assert "QUICKREFERENCE structure:" in result.stdout

    result = runner.invoke(app, ["validate", path, "--no-guide"])
    assert result.exit_code == 1
    assert "STRUCTURE GUIDE" not in result.stdout


def test_missing_file():
    result = runner.invoke(app, ["validate", "does-not-exist.json"])
    assert result.exit_code == 1
    assert "File not found" in result.stdout


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[1, 2", encoding="utf-8")
    result = runner.invoke(app, ["validate", str(path)])
    assert result.exit_code == 1
    assert "Error reading or parsing file" in result.stdout


def test_missing_converters_array(write_document):
    path = write_document({})
    result = runner.invoke(app, ["validate", path])
    assert result.exit_code == 1
    assert "array not found" in result.stdout
    assert "VALIDATION SUMMARY" not in result.stdout


def test_empty_converters_array(write_document):
    path = write_document({"converters": []})
    result = runner.invoke(app, ["validate", path])
    assert result.exit_code == 0


def test_json_report(write_document, make_record, tmp_path):
    path = write_document({"converters": [make_record(id="ok"), make_record(id="bad", featured="x")]})
    out = tmp_path / "reports" / "report.json"

    result = runner.invoke(app, ["validate", path, "--json-out", str(out)])
    assert result.exit_code == 1

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["isValid"] is False
    assert data["failedIds"] == ["bad"]
    assert data["total"] == 2
    assert data["errors"] == {"bad": ['"featured" must be a boolean']}


def test_config_option(write_document, make_record, tmp_path):
    config = tmp_path / "strict.yml"
    config.write_text("validation:\n  records_key: tools\n  min_word_count: 5000\n", encoding="utf-8")
    path = write_document({"tools": [make_record()]})

    result = runner.invoke(app, ["validate", path, "--config", str(config)])
    assert result.exit_code == 1
    assert "NEEDS 3996 MORE" in result.stdout


def test_missing_config_file(write_document, valid_record):
    path = write_document({"converters": [valid_record]})
    result = runner.invoke(app, ["validate", path, "--config", "nope.yml"])
    assert result.exit_code == 1
    assert "Invalid config" in result.stdout


def test_config_with_empty_values(write_document, valid_record, tmp_path):
    """Keys left empty in config.yml keep their defaults"""
    config = tmp_path / "empty.yml"
    config.write_text("validation:\n  special_sections:\n  min_word_count:\n", encoding="utf-8")
    path = write_document({"converters": [valid_record]})

    result = runner.invoke(app, ["validate", path, "--config", str(config)])
    assert result.exit_code == 0
    assert "All converters passed validation!" in result.stdout


def test_config_that_is_not_a_mapping(write_document, valid_record, tmp_path):
    config = tmp_path / "list.yml"
    config.write_text("- validation\n- logging\n", encoding="utf-8")
    path = write_document({"converters": [valid_record]})

    result = runner.invoke(app, ["validate", path, "--config", str(config)])
    assert result.exit_code == 1
    assert "Invalid config" in result.stdout


def test_guide_lists_sections():
    result = runner.invoke(app, ["guide"])
    assert result.exit_code == 0
    assert "comparisonTable" in result.stdout


def test_guide_for_one_section():
    result = runner.invoke(app, ["guide", "tips"])
    assert result.exit_code == 0
    assert "required keys: title" in result.stdout


def test_guide_unknown_section():
    result = runner.invoke(app, ["guide", "madeUpSection"])
    assert result.exit_code == 1
    assert "Unknown section" in result.stdout
