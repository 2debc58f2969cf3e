"""Record validator tests

Top-level checks, accumulation across independent checks, word count gate
"""

from conftest import filler
from converter_validator.config.loader import ValidationConfig
from converter_validator.validation.record import RecordValidator, validate_record


def test_valid_record_passes(valid_record):
    result = validate_record(valid_record)
    assert result.errors == []
    assert result.warnings == []
    assert result.is_valid
    assert result.word_count == 1004
    assert result.record_id == "grams-converter"


def test_self_conversion_mismatch_is_the_only_error(make_record):
    result = validate_record(make_record(conversions={"g": {"g": 2}}))
    assert result.errors == ['Self-conversion for "g" must be 1 (got: 2)']


def test_errors_accumulate(make_record):
    """Missing defaults.from and a short description are both reported"""
    record = make_record(defaults={"value": 1, "to": "g"}, description="Too short")
    result = validate_record(record)

    assert '"defaults.from" is required' in result.errors
    assert any(e.startswith("Low content volume: Only 6 words") for e in result.errors)
    assert len(result.errors) == 2


def test_word_count_error_names_the_deficit(make_record):
    result = validate_record(make_record(description=filler(900)))
    assert result.word_count == 904
    assert result.errors == [
        "Low content volume: Only 904 words (minimum 1000 words required, 96 more needed)"
    ]


def test_word_count_threshold_is_configurable(make_record):
    record = make_record(description=filler(10))
    assert validate_record(record, config=ValidationConfig(min_word_count=10)).errors == []


def test_missing_sections_do_not_stop_other_checks(make_record):
    record = make_record(description="short")
    del record["contentSections"]
    result = validate_record(record)
    assert result.errors[0] == 'Missing required field: "contentSections"'
    assert result.errors[-1].startswith("Low content volume: Only 4 words")


def test_missing_required_field(valid_record):
    del valid_record["slug"]
    assert validate_record(valid_record).errors == ['Missing required field: "slug"']


def test_sequence_sections_must_exist(make_record):
    """hero is checked too; only converter/faq/faqs are exempt"""
    record = make_record(contentSequence=["hero", "converter", "quickReference", "faq"], contentSections={})
    assert validate_record(record).errors == [
        'Section "hero" in contentSequence not found in contentSections',
        'Section "quickReference" in contentSequence not found in contentSections',
    ]


def test_unknown_section_even_if_not_in_sequence(make_record):
    record = make_record(contentSections={"hero": {"title": "T"}, "madeUpSection": {}})
    assert validate_record(record).errors == ['Unknown section: "madeUpSection" in contentSections']


def test_content_sequence_rules(make_record):
    assert validate_record(make_record(contentSequence=[])).errors == ['"contentSequence" cannot be empty']
    assert validate_record(make_record(contentSequence=["converter"])).errors == [
        '"contentSequence" must include "hero" section'
    ]
    assert validate_record(make_record(contentSequence="hero")).errors == ['"contentSequence" must be an array']
    assert validate_record(make_record(contentSequence=["hero", 3])).errors == [
        '"contentSequence"[1] must be a string (got number)'
    ]


def test_content_sections_must_be_object(make_record):
    record = make_record(contentSections=[{"title": "T"}])
    assert validate_record(record).errors == ['"contentSections" must be an object']


def test_extra_top_level_key_only_warns(make_record):
    result = validate_record(make_record(seoNotes="internal"))
    assert result.errors == []
    assert result.warnings == ['grams-converter: Additional key "seoNotes" found (allowed but not in template)']


def test_conversion_representation(make_record):
    formulas = [{"from": "g", "to": "g", "formula": "x"}]

    both = validate_record(make_record(conversionFormulas=formulas))
    assert both.errors == []
    assert both.warnings == ['grams-converter: Has both "conversions" and "conversionFormulas" - using "conversions"']

    neither = make_record()
    del neither["conversions"]
    assert validate_record(neither).errors == ['Must have either "conversions" object or "conversionFormulas" array']


def test_formulas_skip_matrix_check(make_record):
    record = make_record(
        supportedUnits=["celsius", "fahrenheit"],
        conversionFormulas=[
            {"from": "celsius", "to": "fahrenheit", "formula": "x * 9/5 + 32"},
            {"from": "fahrenheit", "to": "celsius"},
        ],
        ingredientFormulas=[{"from": "cup", "to": "gram", "formula": "x * 125"}],
    )
    del record["conversions"]
    assert validate_record(record).errors == [
        '"conversionFormulas[1]" missing required key: "formula"',
        '"ingredientFormulas[0]" missing required key: "ingredient"',
    ]


def test_array_fields_and_featured(make_record):
    record = make_record(keywords="grams", categories={"a": 1}, featured="yes", ingredientFormulas="none")
    assert validate_record(record).errors == [
        '"keywords" must be an array',
        '"categories" must be an array',
        '"ingredientFormulas" must be an array',
        '"featured" must be a boolean',
    ]


def test_defaults_and_units(make_record):
    assert validate_record(make_record(defaults=[1, "g", "g"])).errors == ['"defaults" must be an object']
    assert validate_record(make_record(supportedUnits=[])).errors == ['"supportedUnits" cannot be empty']
    assert validate_record(make_record(supportedUnits="g")).errors == ['"supportedUnits" must be an array']


def test_top_level_faqs(make_record):
    assert validate_record(make_record(faqs=[])).errors == ['"faqs" array cannot be empty']

    record = make_record(faqs=[{"question": "Why?", "answer": ""}, "plain", {"answer": "Because."}])
    assert validate_record(record).errors == [
        '"faqs"[0] missing required field: "answer"',
        '"faqs"[1] must be an object',
        '"faqs"[2] missing required field: "question"',
    ]


def test_record_must_be_object():
    result = RecordValidator().validate(["not", "a", "record"], index=3)
    assert result.record_id == "converter-3"
    assert result.errors == ["Converter record must be an object (got array)"]
    assert result.word_count == 0


def test_placeholder_id(make_record):
    record = make_record(id="")
    result = validate_record(record, index=5)
    assert result.record_id == "converter-5"


def test_special_sections_are_configurable(make_record):
    config = ValidationConfig(special_sections=["converter"])
    record = make_record(contentSequence=["hero", "faq"])
    assert validate_record(record, config=config).errors == [
        'Section "faq" in contentSequence not found in contentSections'
    ]
