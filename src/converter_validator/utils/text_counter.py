"""Word counting for the content-volume gate

Tokens are runs of non-whitespace. No stemming, no de-duplication.
"""

from typing import Any, Dict


def count_words(text: Any) -> int:
    """Count whitespace-separated tokens

    Args:
        text: value to count; anything but a string counts as 0

    Returns:
        number of tokens
    """
    if not isinstance(text, str):
        return 0
    return len(text.split())


def count_nested_words(value: Any) -> int:
    """Sum word counts of every string leaf under `value`

    Lists are walked element-wise, dicts value-wise; numbers, booleans and
    None are ignored.
    """
    if isinstance(value, str):
        return count_words(value)
    if isinstance(value, dict):
        return sum(count_nested_words(v) for v in value.values())
    if isinstance(value, list):
        return sum(count_nested_words(v) for v in value)
    return 0


def count_record_words(record: Dict[str, Any]) -> int:
    """Total words of a converter record

    Counts title, description, all string leaves of contentSections and the
    question/answer text of the top-level faqs.

    Args:
        record: converter record (decoded JSON)

    Returns:
        total word count
    """
    if not isinstance(record, dict):
        return 0

    total = count_words(record.get("title"))
    total += count_words(record.get("description"))

    sections = record.get("contentSections")
    if isinstance(sections, (dict, list)):
        total += count_nested_words(sections)

    faqs = record.get("faqs")
    if isinstance(faqs, list):
        for faq in faqs:
            if isinstance(faq, dict):
                total += count_words(faq.get("question"))
                total += count_words(faq.get("answer"))

    return total
