# src/taskbell/tasks/labels.py

"""Display labels for enum identifiers, resolved at the presentation boundary."""

from __future__ import annotations

from .task_models import Category, Priority

DEFAULT_LOCALE = "en"

_PRIORITY_LABELS: dict[str, dict[Priority, str]] = {
    "en": {
        Priority.HIGH: "High",
        Priority.MEDIUM: "Medium",
        Priority.LOW: "Low",
    },
    "tr": {
        Priority.HIGH: "Yüksek",
        Priority.MEDIUM: "Orta",
        Priority.LOW: "Düşük",
    },
}

_CATEGORY_LABELS: dict[str, dict[Category, str]] = {
    "en": {
        Category.WORK: "Work",
        Category.HOME: "Home",
        Category.LEARNING: "Learning",
        Category.ENTERTAINMENT: "Entertainment",
    },
    "tr": {
        Category.WORK: "İş",
        Category.HOME: "Ev",
        Category.LEARNING: "Öğrenme",
        Category.ENTERTAINMENT: "Eğlence",
    },
}


def available_locales() -> list[str]:
    return sorted(_PRIORITY_LABELS)


def _table(tables: dict[str, dict], locale: str | None) -> dict:
    key = (locale or DEFAULT_LOCALE).strip().lower()
    return tables.get(key) or tables[DEFAULT_LOCALE]


def priority_label(priority: Priority, locale: str | None = None) -> str:
    return _table(_PRIORITY_LABELS, locale)[priority]


def category_label(category: Category, locale: str | None = None) -> str:
    return _table(_CATEGORY_LABELS, locale)[category]


def parse_priority(text: str, locale: str | None = None) -> Priority | None:
    """Accept an identifier ("High") or a display label in any known locale."""
    return _parse(text, Priority, _PRIORITY_LABELS, locale)


def parse_category(text: str, locale: str | None = None) -> Category | None:
    return _parse(text, Category, _CATEGORY_LABELS, locale)


def _parse(text, enum_cls, tables, locale):
    needle = (text or "").strip().casefold()
    if not needle:
        return None

    for member in enum_cls:
        if member.value.casefold() == needle or member.name.casefold() == needle:
            return member

    # Preferred locale first, then the rest.
    order = [_table(tables, locale)] + [t for t in tables.values()]
    for table in order:
        for member, label in table.items():
            if label.casefold() == needle:
                return member
    return None
