"""Item and section rules used by the section schema table

Item rules check one element of an array field. Section rules check
cross-field conditions that do not fit the key/array model. Both append
`"<path> <problem>"` strings to the error list they are given.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple
from converter_validator.utils.json_types import json_type_name


class ItemRule(ABC):
    """Shape of a single array element"""

    @abstractmethod
    def check(self, item: Any, path: str, errors: List[str]) -> None:
        """Append problems of `item` (located at `path`) to `errors`"""

    @abstractmethod
    def describe(self) -> str:
        """One-line description for the structure guide"""


class StringItem(ItemRule):
    def check(self, item: Any, path: str, errors: List[str]) -> None:
        if not isinstance(item, str):
            errors.append(f'"{path}" must be a string (got {json_type_name(item)})')

    def describe(self) -> str:
        return "string"


class StringOrObjectItem(ItemRule):
    def check(self, item: Any, path: str, errors: List[str]) -> None:
        if not isinstance(item, (str, dict)):
            errors.append(f'"{path}" must be a string or object')

    def describe(self) -> str:
        return "string or object"


class ObjectItem(ItemRule):
    """Object element with required keys"""

    def __init__(self, required_keys: Sequence[str] = (), optional_keys: Sequence[str] = ()):
        self.required_keys: Tuple[str, ...] = tuple(required_keys)
        self.optional_keys: Tuple[str, ...] = tuple(optional_keys)

    def check(self, item: Any, path: str, errors: List[str]) -> None:
        if not isinstance(item, dict):
            errors.append(f'"{path}" must be an object')
            return
        self.check_keys(item, path, errors)

    def check_keys(self, item: Dict[str, Any], path: str, errors: List[str]) -> None:
        for key in self.required_keys:
            if key not in item:
                errors.append(f'"{path}" missing required key: "{key}"')

    def describe(self) -> str:
        text = "object"
        if self.required_keys:
            text += f" (required: {', '.join(self.required_keys)})"
        if self.optional_keys:
            text += f" (optional: {', '.join(self.optional_keys)})"
        return text


class QuickReferenceItem(ObjectItem):
    """Quick-reference row: an ingredient plus at least one value column

    Different converters use different value keys (cup/grams, celsius/gasMark,
    ...), so only `ingredient` is fixed.
    """

    NON_VALUE_KEYS = ("ingredient", "icon", "tip")

    def __init__(self):
        super().__init__(
            required_keys=["ingredient"],
            optional_keys=[
                "cup", "grams", "icon", "tip", "tablespoon", "teaspoon",
                "celsius", "fahrenheit", "gasMark", "ml", "ounce", "pound"
            ]
        )

    def check_keys(self, item: Dict[str, Any], path: str, errors: List[str]) -> None:
        super().check_keys(item, path, errors)
        value_keys = [key for key in item if key not in self.NON_VALUE_KEYS]
        if not value_keys:
            errors.append(f'"{path}" must have at least one conversion value (cup, grams, celsius, etc.)')

    def describe(self) -> str:
        return 'object with "ingredient" and at least one value key (cup, grams, celsius, ...)'


class TableRowItem(ItemRule):
    """Comparison-table row; keys need not match the column headers"""

    def check(self, item: Any, path: str, errors: List[str]) -> None:
        if not isinstance(item, dict):
            errors.append(f'"{path}" must be an object')
        elif not item:
            errors.append(f'"{path}" must have at least one key')

    def describe(self) -> str:
        return "non-empty object"


class SectionRule(ABC):
    """Cross-field rule evaluated on a whole section body"""

    @abstractmethod
    def check(self, section: Dict[str, Any], path: str, errors: List[str]) -> None:
        """Append problems of `section` (located at `path`) to `errors`"""

    @abstractmethod
    def describe(self) -> str:
        """One-line description for the structure guide"""


def _has_array(section: Dict[str, Any], key: str) -> bool:
    return isinstance(section.get(key), list)


class PairedArrays(SectionRule):
    """Two array fields that must appear together or not at all"""

    def __init__(self, first: str, second: str):
        self.first = first
        self.second = second

    def check(self, section: Dict[str, Any], path: str, errors: List[str]) -> None:
        has_first = _has_array(section, self.first)
        has_second = _has_array(section, self.second)
        if has_first and not has_second:
            errors.append(f'"{path}" has {self.first} but no {self.second}')
        if has_second and not has_first:
            errors.append(f'"{path}" has {self.second} but no {self.first}')

    def describe(self) -> str:
        return f'"{self.first}" and "{self.second}" must both exist or both be absent'


class OneOfArrays(SectionRule):
    """At least one of the named array fields must be present"""

    def __init__(self, *names: str):
        self.names = names

    def check(self, section: Dict[str, Any], path: str, errors: List[str]) -> None:
        if not any(_has_array(section, name) for name in self.names):
            quoted = " or ".join(f'"{name}"' for name in self.names)
            errors.append(f'"{path}" must have either {quoted} array')

    def describe(self) -> str:
        quoted = " or ".join(f'"{name}"' for name in self.names)
        return f"needs {quoted} (or both)"
