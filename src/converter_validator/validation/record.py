"""Converter record validator

Runs every record-level check in a fixed order and accumulates all problems
in one pass. No check stops another: a record missing `contentSections` still
gets its defaults, units, FAQs and word count checked.
"""

from typing import Any, Dict, List, Optional
from converter_validator.config.loader import ValidationConfig
from converter_validator.utils.json_types import json_type_name
from converter_validator.utils.logger import get_logger
from converter_validator.utils.text_counter import count_record_words
from converter_validator.validation.matrix import check_conversion_matrix
from converter_validator.validation.models import RecordResult
from converter_validator.validation.sections import validate_section

logger = get_logger(__name__)

TOP_LEVEL_REQUIRED_KEYS = (
    "id",
    "slug",
    "title",
    "description",
    "keywords",
    "categories",
    "manualRelatedLinks",
    "featured",
    "contentSequence",
    "defaults",
    "supportedUnits",
    "faqs",
    "contentSections",
)

TOP_LEVEL_OPTIONAL_KEYS = (
    "conversions",
    "conversionFormulas",
    "ingredientFormulas",
)

ALL_TOP_LEVEL_KEYS = TOP_LEVEL_REQUIRED_KEYS + TOP_LEVEL_OPTIONAL_KEYS

# Fields that must be arrays whenever they are present
ARRAY_FIELDS = (
    "keywords",
    "categories",
    "manualRelatedLinks",
    "supportedUnits",
    "conversionFormulas",
    "ingredientFormulas",
    "faqs",
)

# Keys the rendering layer looks formulas up by
FORMULA_ITEM_KEYS = {
    "conversionFormulas": ("from", "to", "formula"),
    "ingredientFormulas": ("ingredient", "from", "to", "formula"),
}

DEFAULTS_REQUIRED_KEYS = ("value", "from", "to")

REQUIRED_SECTION = "hero"


def record_display_id(record: Any, index: int) -> str:
    """Record id for reports, `converter-<index>` when missing or empty"""
    if isinstance(record, dict):
        record_id = record.get("id")
        if record_id not in (None, ""):
            return str(record_id)
    return f"converter-{index}"


class RecordValidator:
    """Validator for a single converter record"""

    def __init__(self, config: Optional[ValidationConfig] = None):
        """
        Args:
            config: validation settings (defaults when None)
        """
        self.config = config or ValidationConfig()

    def validate(self, record: Any, index: int = 0) -> RecordResult:
        """Validate one record

        Args:
            record: decoded converter record
            index: position in the input array (for the placeholder id)

        Returns:
            RecordResult with errors, warnings and word count
        """
        result = RecordResult(record_id=record_display_id(record, index), index=index)

        if not isinstance(record, dict):
            result.errors.append(f"Converter record must be an object (got {json_type_name(record)})")
            return result

        # 1. Required top-level keys (extra keys only warn)
        self._check_required_fields(record, result)

        # 2. conversions / conversionFormulas
        has_conversions = self._check_conversion_source(record, result)

        # 3. Array-typed fields
        self._check_array_fields(record, result.errors)

        # 4. featured
        if "featured" in record and not isinstance(record["featured"], bool):
            result.errors.append('"featured" must be a boolean')

        # 5. contentSequence
        self._check_content_sequence(record, result.errors)

        # 6. contentSections
        self._check_content_sections(record, result.errors)

        # 7. defaults
        self._check_defaults(record, result.errors)

        # 8. supportedUnits (+ conversion matrix)
        self._check_supported_units(record, has_conversions, result.errors)

        # 9. Top-level FAQs
        self._check_faqs(record, result.errors)

        # 10. Word count gate
        self._check_word_count(record, result)

        logger.debug(f"{result.record_id}: {len(result.errors)} error(s), {result.word_count} words")
        return result

    def _check_required_fields(self, record: Dict[str, Any], result: RecordResult) -> None:
        for key in TOP_LEVEL_REQUIRED_KEYS:
            if key not in record:
                result.errors.append(f'Missing required field: "{key}"')

        for key in record:
            if key not in ALL_TOP_LEVEL_KEYS:
                result.warnings.append(
                    f'{result.record_id}: Additional key "{key}" found (allowed but not in template)'
                )

    def _check_conversion_source(self, record: Dict[str, Any], result: RecordResult) -> bool:
        """Returns True when the conversions matrix is the active representation"""
        has_conversions = isinstance(record.get("conversions"), dict)
        has_formulas = isinstance(record.get("conversionFormulas"), list)

        if not has_conversions and not has_formulas:
            result.errors.append('Must have either "conversions" object or "conversionFormulas" array')

        if has_conversions and has_formulas:
            result.warnings.append(
                f'{result.record_id}: Has both "conversions" and "conversionFormulas" - using "conversions"'
            )

        return has_conversions

    def _check_array_fields(self, record: Dict[str, Any], errors: List[str]) -> None:
        for key in ARRAY_FIELDS:
            if key in record and not isinstance(record[key], list):
                errors.append(f'"{key}" must be an array')

        for key, required in FORMULA_ITEM_KEYS.items():
            formulas = record.get(key)
            if not isinstance(formulas, list):
                continue
            for index, formula in enumerate(formulas):
                path = f"{key}[{index}]"
                if not isinstance(formula, dict):
                    errors.append(f'"{path}" must be an object')
                    continue
                for item_key in required:
                    if item_key not in formula:
                        errors.append(f'"{path}" missing required key: "{item_key}"')

    def _check_content_sequence(self, record: Dict[str, Any], errors: List[str]) -> None:
        if "contentSequence" not in record:
            return

        sequence = record["contentSequence"]
        if not isinstance(sequence, list):
            errors.append('"contentSequence" must be an array')
            return

        if not sequence:
            errors.append('"contentSequence" cannot be empty')
            return

        for index, name in enumerate(sequence):
            if not isinstance(name, str):
                errors.append(f'"contentSequence"[{index}] must be a string (got {json_type_name(name)})')

        if REQUIRED_SECTION not in sequence:
            errors.append(f'"contentSequence" must include "{REQUIRED_SECTION}" section')

    def _check_content_sections(self, record: Dict[str, Any], errors: List[str]) -> None:
        if "contentSections" not in record:
            return

        sections = record["contentSections"]
        if not isinstance(sections, dict):
            errors.append('"contentSections" must be an object')
            return

        # Every non-special section named in the sequence must exist
        sequence = record.get("contentSequence")
        if isinstance(sequence, list):
            for name in sequence:
                if not isinstance(name, str) or name in self.config.special_sections:
                    continue
                if sections.get(name) is None:
                    errors.append(f'Section "{name}" in contentSequence not found in contentSections')

        # Every present section is checked against its schema
        for name, data in sections.items():
            errors.extend(validate_section(name, data))

    def _check_defaults(self, record: Dict[str, Any], errors: List[str]) -> None:
        if "defaults" not in record:
            return

        defaults = record["defaults"]
        if not isinstance(defaults, dict):
            errors.append('"defaults" must be an object')
            return

        for key in DEFAULTS_REQUIRED_KEYS:
            if key not in defaults:
                errors.append(f'"defaults.{key}" is required')

    def _check_supported_units(self, record: Dict[str, Any], has_conversions: bool, errors: List[str]) -> None:
        units = record.get("supportedUnits")
        # Absence and non-array values are reported by steps 1 and 3
        if not isinstance(units, list):
            return

        if not units:
            errors.append('"supportedUnits" cannot be empty')
            return

        for index, unit in enumerate(units):
            if not isinstance(unit, str):
                errors.append(f'"supportedUnits"[{index}] must be a string (got {json_type_name(unit)})')

        if has_conversions:
            errors.extend(check_conversion_matrix(units, record["conversions"]))

    def _check_faqs(self, record: Dict[str, Any], errors: List[str]) -> None:
        faqs = record.get("faqs")
        if not isinstance(faqs, list):
            return

        if not faqs:
            errors.append('"faqs" array cannot be empty')
            return

        for index, faq in enumerate(faqs):
            if not isinstance(faq, dict):
                errors.append(f'"faqs"[{index}] must be an object')
                continue
            if not faq.get("question"):
                errors.append(f'"faqs"[{index}] missing required field: "question"')
            if not faq.get("answer"):
                errors.append(f'"faqs"[{index}] missing required field: "answer"')

    def _check_word_count(self, record: Dict[str, Any], result: RecordResult) -> None:
        minimum = self.config.min_word_count
        result.word_count = count_record_words(record)

        if result.word_count < minimum:
            deficit = minimum - result.word_count
            result.errors.append(
                f"Low content volume: Only {result.word_count} words "
                f"(minimum {minimum} words required, {deficit} more needed)"
            )


def validate_record(record: Any, index: int = 0, config: Optional[ValidationConfig] = None) -> RecordResult:
    """Validate one converter record with the given (or default) settings"""
    return RecordValidator(config).validate(record, index)
