"""Shared debug rendering for transfer objects (DTOs).

Every DTO is declared with ``@transfer_object``: it becomes a frozen dataclass
whose ``str()`` is a JSON rendering of all its fields, nested objects included.
The rendering is meant for logs only; HTTP payloads go through the response
schemas.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter

_T = TypeVar("_T")


@lru_cache(maxsize=None)
def _adapter_for(value_type: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(value_type)


def to_debug_string(value: object) -> str:
    return _adapter_for(type(value)).dump_json(value).decode("utf-8")


def transfer_object(cls: type[_T]) -> type[_T]:
    data_cls = dataclass(frozen=True)(cls)
    data_cls.__str__ = to_debug_string  # type: ignore[method-assign,assignment]
    return data_cls
