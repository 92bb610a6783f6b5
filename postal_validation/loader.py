"""Загрузка таблицы форматов почтовых индексов из YAML."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Sequence

import yaml

from .base import normalize_country_code
from .errors import RuleTableError
from .logging_manager import get_logger

logger = get_logger(__name__)

DELIMITED_PATTERN = re.compile(r"^/(?P<body>.*)/(?P<flags>[a-zA-Z]*)$", re.DOTALL)

_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,
}


def formats_path() -> Path:
    """Возвращает путь до поставляемой таблицы форматов."""

    return Path(__file__).resolve().parent / "resources" / "formats.yaml"


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Компилирует шаблон, понимая форму ``/body/flags``."""

    match = DELIMITED_PATTERN.match(pattern)
    if not match:
        return re.compile(pattern)

    flags = 0
    for letter in match.group("flags"):
        if letter not in _FLAG_MAP:
            raise re.error(f"unknown pattern modifier '{letter}'")
        flags |= _FLAG_MAP[letter]
    return re.compile(match.group("body"), flags)


def _parse_entry(code: str, raw: object) -> dict | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise RuleTableError(f"Rule for '{code}' must be a mapping or null")

    entry: dict = {}
    for key in ("pattern", "example"):
        value = raw.get(key)
        if value is not None and not isinstance(value, str):
            raise RuleTableError(f"Rule '{key}' for '{code}' must be a string")
        entry[key] = value

    if entry["pattern"] is not None:
        try:
            compile_pattern(entry["pattern"])
        except re.error as exc:
            raise RuleTableError(f"Invalid pattern for '{code}': {exc}") from exc
    return entry


def load_rules(
    path: Path | None = None,
    allowed_countries: Sequence[str] | None = None,
) -> Dict[str, dict | None]:
    """Читает YAML с форматами и готовит таблицу правил."""

    path = Path(path) if path is not None else formats_path()
    allow = {normalize_country_code(c) for c in allowed_countries} if allowed_countries else None

    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise RuleTableError(f"Rule table {path} must be a mapping of country codes")

    rules: Dict[str, dict | None] = {}
    for raw_code, raw in data.items():
        code = normalize_country_code(raw_code)
        if allow and code not in allow:
            continue
        rules[code] = _parse_entry(code, raw)

    logger.debug("Loaded %d postal code rules from %s", len(rules), path)
    return rules
