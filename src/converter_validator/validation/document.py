"""Input document loading

The only place that touches the filesystem during a run. Container-level
problems are fatal and raised as DocumentError subclasses.
"""

import json
from pathlib import Path
from typing import Any, List, Union
from converter_validator.exceptions import (
    DocumentNotFoundError,
    DocumentParseError,
    RecordsArrayMissingError,
)
from converter_validator.utils.logger import get_logger

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal: {name}")


def extract_records(data: Any, records_key: str = "converters") -> List[Any]:
    """Return the records array of a decoded document

    Raises:
        RecordsArrayMissingError: document is not an object or the key does not hold an array
    """
    if not isinstance(data, dict) or not isinstance(data.get(records_key), list):
        raise RecordsArrayMissingError(records_key)
    return data[records_key]


def load_document(path: Union[str, Path], records_key: str = "converters") -> List[Any]:
    """Read a converters JSON file and return its records

    Args:
        path: JSON file path
        records_key: top-level key holding the records array

    Returns:
        list of records (not yet validated)

    Raises:
        DocumentNotFoundError: file does not exist
        DocumentParseError: file is unreadable or not valid JSON
        RecordsArrayMissingError: no records array under `records_key`
    """
    file_path = Path(path).resolve()
    if not file_path.is_file():
        raise DocumentNotFoundError(str(file_path))

    logger.info(f"📂 Reading file: {file_path}")
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f, parse_constant=_reject_constant)
    except (OSError, ValueError, RecursionError) as e:
        raise DocumentParseError(str(file_path), str(e)) from e

    try:
        records = extract_records(data, records_key)
    except RecordsArrayMissingError as e:
        e.path = str(file_path)
        raise

    logger.info(f"📊 Found {len(records)} record(s) in file")
    return records
