"""Collection validator

Validates a records array in input order and aggregates a ValidationReport.
A failing record never stops the run; only a malformed document container is
fatal (raised by `load_document`).
"""

from collections import Counter
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union
from converter_validator.config.loader import ValidationConfig
from converter_validator.utils.logger import get_logger
from converter_validator.validation.document import load_document
from converter_validator.validation.models import RecordResult, ValidationReport
from converter_validator.validation.record import RecordValidator

logger = get_logger(__name__)


class ConverterValidator:
    """Validator for a whole converters array

    Holds configuration only; every call starts with fresh accumulators, so
    one instance can be reused across runs.
    """

    def __init__(self, config: Optional[ValidationConfig] = None):
        """
        Args:
            config: validation settings (defaults when None)
        """
        self.config = config or ValidationConfig()
        self.record_validator = RecordValidator(self.config)

    def validate_converters(self, converters: Sequence[Any]) -> ValidationReport:
        """Validate every record and build the report

        Args:
            converters: decoded records array

        Returns:
            ValidationReport (failed ids and word counts in input order)
        """
        logger.info(f"🔍 Validating {len(converters)} converter(s)")
        report = ValidationReport(total=len(converters), min_word_count=self.config.min_word_count)

        for index, converter in enumerate(converters):
            result = self.record_validator.validate(converter, index)
            report.results.append(result)
            report.word_counts[result.record_id] = result.word_count
            report.warnings.extend(result.warnings)

            if result.is_valid:
                logger.debug(f"✅ {result.record_id}: Valid")
            else:
                logger.debug(f"❌ {result.record_id}: {len(result.errors)} error(s)")
                report.failed_ids.append(result.record_id)
                report.errors.setdefault(result.record_id, []).extend(result.errors)

        report.warnings.extend(self._cross_record_warnings(converters, report.results))

        logger.info(f"Validation finished: {report.valid}/{report.total} valid, {report.failed} failed")
        return report

    def _cross_record_warnings(self, converters: Sequence[Any], results: List[RecordResult]) -> List[str]:
        """Duplicate ids and related links that point nowhere"""
        warnings: List[str] = []
        ids = [
            str(converter["id"])
            for converter in converters
            if isinstance(converter, dict) and converter.get("id") not in (None, "")
        ]

        for record_id, count in Counter(ids).items():
            if count > 1:
                warnings.append(f'Duplicate converter id "{record_id}" used by {count} records')

        known_ids = set(ids)
        for converter, result in zip(converters, results):
            if not isinstance(converter, dict):
                continue
            links = converter.get("manualRelatedLinks")
            if not isinstance(links, list):
                continue
            for link in links:
                if not isinstance(link, str):
                    continue
                if link == result.record_id:
                    warnings.append(f'{result.record_id}: "manualRelatedLinks" links to itself')
                elif link not in known_ids:
                    warnings.append(
                        f'{result.record_id}: "manualRelatedLinks" entry "{link}" does not match any converter id'
                    )

        return warnings


def validate_converters_file(
    path: Union[str, Path],
    config: Optional[ValidationConfig] = None
) -> ValidationReport:
    """Load a converters JSON file and validate its records

    Raises:
        DocumentError: the file cannot be read, parsed, or has no records array
    """
    config = config or ValidationConfig()
    records = load_document(path, config.records_key)
    return ConverterValidator(config).validate_converters(records)
