"""Per-section validation

Dispatches a contentSections entry to its schema and collects every problem
found: required keys, section rules, array fields and their elements.
"""

from typing import Any, List
from converter_validator.schema.sections import ArrayField, SectionSchema, get_section_schema
from converter_validator.utils.logger import get_logger

logger = get_logger(__name__)

SECTIONS_PATH = "contentSections"

# Widget slot rendered from the conversion data itself; it has no content body
WIDGET_SECTION = "converter"


def section_path(name: str) -> str:
    return f"{SECTIONS_PATH}.{name}"


def validate_array_field(array: ArrayField, value: Any, path: str, errors: List[str]) -> None:
    """Check one array field of a section

    Args:
        array: field descriptor
        value: the field value from the section body
        path: location of the field, e.g. contentSections.tips.tips
        errors: accumulator
    """
    if not isinstance(value, list):
        errors.append(f'"{path}" must be an array')
        return

    if array.min_items and len(value) < array.min_items:
        errors.append(f'"{path}" must have at least {array.min_items} items (has {len(value)})')

    if array.item is not None:
        for index, item in enumerate(value):
            array.item.check(item, f"{path}[{index}]", errors)


def _check_schema(schema: SectionSchema, data: dict, errors: List[str]) -> None:
    path = section_path(schema.name)

    # 1. Required keys
    for key in schema.required_keys:
        if key not in data:
            errors.append(f'{path} missing required key: "{key}"')

    # 2. Section rules
    for rule in schema.rules:
        try:
            rule.check(data, path, errors)
        except Exception as e:
            logger.warning(f"Section rule {type(rule).__name__} failed on {schema.name}: {e}")
            errors.append(f"Error validating {schema.name}: {e}")

    # 3. Array fields
    for array in schema.arrays:
        if array.name not in data:
            continue
        try:
            validate_array_field(array, data[array.name], f"{path}.{array.name}", errors)
        except Exception as e:
            logger.warning(f"Item rule failed on {schema.name}.{array.name}: {e}")
            errors.append(f"Error validating {schema.name}: {e}")


def validate_section(name: str, data: Any) -> List[str]:
    """Validate one contentSections entry

    Args:
        name: section name (key in contentSections)
        data: section body

    Returns:
        list of error strings (empty when valid)
    """
    errors: List[str] = []

    if name == WIDGET_SECTION:
        return errors

    schema = get_section_schema(name)
    if schema is None:
        errors.append(f'Unknown section: "{name}" in {SECTIONS_PATH}')
        return errors

    if not isinstance(data, dict):
        errors.append(f'Section "{name}" must be an object')
        return errors

    _check_schema(schema, data, errors)
    return errors
