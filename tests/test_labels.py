# tests/test_labels.py

from __future__ import annotations

from taskbell.tasks.labels import (
    available_locales,
    category_label,
    parse_category,
    parse_priority,
    priority_label,
)
from taskbell.tasks.task_models import Category, Priority


def test_labels_are_separate_from_identifiers() -> None:
    assert Priority.HIGH.value == "High"
    assert priority_label(Priority.HIGH, "tr") == "Yüksek"
    assert category_label(Category.LEARNING, "tr") == "Öğrenme"
    assert category_label(Category.LEARNING, "en") == "Learning"


def test_unknown_locale_falls_back_to_english() -> None:
    assert priority_label(Priority.LOW, "xx") == "Low"
    assert category_label(Category.HOME, None) == "Home"


def test_every_member_has_a_label_in_every_locale() -> None:
    for loc in available_locales():
        for p in Priority:
            assert priority_label(p, loc)
        for c in Category:
            assert category_label(c, loc)


def test_parse_accepts_identifiers_names_and_labels() -> None:
    assert parse_priority("high") is Priority.HIGH
    assert parse_priority("MEDIUM") is Priority.MEDIUM
    assert parse_priority("Düşük") is Priority.LOW
    assert parse_category("eğlence", "tr") is Category.ENTERTAINMENT
    assert parse_category("Entertainment") is Category.ENTERTAINMENT


def test_parse_unknown_returns_none() -> None:
    assert parse_priority("urgent") is None
    assert parse_category("") is None
