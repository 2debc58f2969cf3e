"""Shared fixtures for converter validator tests"""

import copy
import json
import pytest


def filler(words: int) -> str:
    """`words` whitespace-separated tokens of filler text"""
    return " ".join(["lorem"] * words)


BASE_RECORD = {
    "id": "grams-converter",
    "slug": "grams-converter",
    "title": "Grams",
    "description": filler(1000),
    "keywords": ["grams"],
    "categories": ["weight"],
    "manualRelatedLinks": [],
    "featured": False,
    "contentSequence": ["hero"],
    "defaults": {"value": 1, "from": "g", "to": "g"},
    "supportedUnits": ["g"],
    "faqs": [{"question": "Why?", "answer": "Because."}],
    "contentSections": {"hero": {"title": "T"}},
    "conversions": {"g": {"g": 1}},
}


@pytest.fixture
def valid_record():
    """Record that passes every check (1004 words)"""
    return copy.deepcopy(BASE_RECORD)


@pytest.fixture
def make_record():
    """Factory: base record with top-level overrides applied"""
    def _make(**overrides):
        record = copy.deepcopy(BASE_RECORD)
        record.update(overrides)
        return record
    return _make


@pytest.fixture
def write_document(tmp_path):
    """Write a JSON document to tmp_path and return its path as str"""
    def _write(data, name="converters.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write
