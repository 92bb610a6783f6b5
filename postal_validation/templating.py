"""Подстановка значений в шаблоны сообщений об ошибках."""

from __future__ import annotations

from typing import Iterable, List, Mapping

SEPARATOR = ", "


def unique(values: Iterable[str | None], skip_empty: bool = False) -> List[str]:
    """Убирает повторы, сохраняя порядок первого появления."""

    seen: List[str] = []
    for value in values:
        if skip_empty and not value:
            continue
        if value is None:
            value = ""
        if value not in seen:
            seen.append(value)
    return seen


def join_unique(values: Iterable[str | None], skip_empty: bool = False) -> str:
    return SEPARATOR.join(unique(values, skip_empty=skip_empty))


def replace_placeholders(message: str, replacements: Mapping[str, str]) -> str:
    """Заменяет плейсхолдеры вида ``:name``; отсутствующие в шаблоне пропускаются."""

    for placeholder, value in replacements.items():
        message = message.replace(placeholder, value)
    return message
