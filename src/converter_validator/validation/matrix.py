"""Conversion matrix completeness check

Every ordered pair of supported units (self-pairs included) must carry an
explicit numeric factor, and every self factor must be exactly 1. Reciprocal
or chained values are not inferred.
"""

from typing import Any, Dict, List, Sequence
from converter_validator.utils.json_types import format_value, is_number


def check_conversion_matrix(supported_units: Sequence[Any], conversions: Dict[str, Any]) -> List[str]:
    """Validate a conversion matrix against the supported units

    Args:
        supported_units: unit names
        conversions: unit -> unit -> factor mapping

    Returns:
        list of error strings (empty when the matrix is complete)
    """
    errors: List[str] = []
    units = [unit for unit in supported_units if isinstance(unit, str)]
    if not units:
        return errors

    # 1. Every unit has a row
    for unit in units:
        row = conversions.get(unit)
        if row is None:
            errors.append(f'Missing conversion entry for unit: "{unit}"')
        elif not isinstance(row, dict):
            errors.append(f'Conversion entry for unit "{unit}" must be an object')

    # 2. Every ordered pair is defined and numeric
    for from_unit in units:
        row = conversions.get(from_unit)
        row = row if isinstance(row, dict) else {}
        for to_unit in units:
            if to_unit not in row:
                errors.append(f'Missing conversion: "{from_unit}" → "{to_unit}"')
            elif not is_number(row[to_unit]):
                errors.append(
                    f'Conversion "{from_unit}" → "{to_unit}" must be a number (got: {format_value(row[to_unit])})'
                )

    # 3. Self-conversion is exactly 1
    for unit in units:
        row = conversions.get(unit)
        if not isinstance(row, dict) or unit not in row:
            continue
        value = row[unit]
        if not (is_number(value) and value == 1):
            errors.append(f'Self-conversion for "{unit}" must be 1 (got: {format_value(value)})')

    return errors
