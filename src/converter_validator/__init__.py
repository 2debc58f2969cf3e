"""Converter Validator

Schema checks for the converter JSON that feeds the conversion-calculator site.
"""

__version__ = "1.0.0"
