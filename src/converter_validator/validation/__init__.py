"""Converter record validation

Usage:
    from converter_validator.validation import ConverterValidator

    report = ConverterValidator().validate_converters(records)
    if not report.is_valid:
        print(report.failed_ids)
"""

from converter_validator.validation.models import RecordResult, ValidationReport
from converter_validator.validation.record import RecordValidator, validate_record
from converter_validator.validation.validator import ConverterValidator, validate_converters_file

__all__ = [
    "ConverterValidator",
    "RecordValidator",
    "RecordResult",
    "ValidationReport",
    "validate_record",
    "validate_converters_file",
]
