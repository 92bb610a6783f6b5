"""Логгеры пакета валидации почтовых индексов."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "postal_validation"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Возвращает логгер модуля внутри иерархии пакета."""

    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO, fmt: str | None = None) -> logging.Logger:
    """Подключает консольный вывод для приложений, использующих пакет."""

    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or LOG_FORMAT))
        root.addHandler(handler)
    return root
