"""Доступ к данным формы, переданным вместе с проверяемым полем."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from .errors import UnsupportedDatasetSourceError

_MISSING = object()


@runtime_checkable
class DataSource(Protocol):
    """Объект, умеющий отдать плоский словарь ``поле -> значение``."""

    def get_data(self) -> Mapping[str, Any]: ...


def extract_data(source: Any) -> Mapping[str, Any]:
    """Возвращает данные формы или падает, если источник не распознан."""

    if isinstance(source, Mapping):
        return source
    if isinstance(source, DataSource):
        data = source.get_data()
        if isinstance(data, Mapping):
            return data
    raise UnsupportedDatasetSourceError(source)


def data_get(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Читает значение по ключу, поддерживая точечную запись ``address.country``."""

    if key in data:
        return data[key]

    current: Any = data
    for segment in key.split("."):
        if isinstance(current, Mapping):
            current = current.get(segment, _MISSING)
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)) and segment.isdigit():
            index = int(segment)
            current = current[index] if index < len(current) else _MISSING
        else:
            return default
        if current is _MISSING:
            return default
    return current


def is_filled(data: Mapping[str, Any], key: str) -> bool:
    """Проверка обязательного поля: ``None`` и пустая после strip строка не считаются."""

    value = data_get(data, key)
    if value is None:
        return False
    if isinstance(value, str) and value.strip() == "":
        return False
    return True
