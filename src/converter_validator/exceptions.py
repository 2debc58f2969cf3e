"""Fatal document-level errors

Record problems are never raised; they are collected as error strings.
Only a document that cannot be validated at all ends the run.
"""

from typing import Optional


class ConverterValidatorError(Exception):
    """Base class for converter-validator errors"""


class DocumentError(ConverterValidatorError):
    """Input document cannot be validated"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class DocumentNotFoundError(DocumentError):
    """Input file does not exist"""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}", path)


class DocumentParseError(DocumentError):
    """Input file is unreadable or not valid JSON"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Error reading or parsing file: {reason}", path)
        self.reason = reason


class RecordsArrayMissingError(DocumentError):
    """Document has no records array under the expected key"""

    def __init__(self, records_key: str = "converters", path: Optional[str] = None):
        super().__init__(f'Invalid file structure: "{records_key}" array not found', path)
        self.records_key = records_key
