# src/atlas_settings/core/conversion/types.py
"""
Tipos canônicos de conversão do Atlas Settings.

Este módulo define o catálogo fechado de tipos alvo suportados pela
camada de conversão (`SettingType`) e a resolução entre tipos Python
(anotações ou valores semente) e esses tipos alvo.

Componentes principais:
    - SettingType      → enum dos tipos alvo (string, bool, int32, ...)
    - Int32 / UInt32 / Int64 / UInt64 / Float32
                       → aliases `Annotated` para declarar largura explícita
    - resolve_annotation → anotação de campo → (SettingType, enum_type)
    - infer_setting_type → valor semente → (SettingType, enum_type)

Decisões arquiteturais:
    - `int` sem anotação explícita é INT32 e `float` é DOUBLE
    - `bool` é verificado antes de `int` (bool é subclasse de int)
    - `Optional[X]` resolve para X
    - Anotações não suportadas resolvem para `None` (sem tipo alvo)

Limites explícitos:
    - Não converte valores (ver `parsers`)
    - Não inspeciona registros (ver `binding.descriptors`)
"""

from __future__ import annotations

import datetime as _dt
import typing
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Tuple, Type

try:  # Python >= 3.10
    from types import UnionType as _UnionType
except ImportError:  # pragma: no cover
    _UnionType = None  # type: ignore[assignment]


class SettingType(str, Enum):
    """
    Tipos alvo suportados na conversão de settings.

    Os valores são strings estáveis, usadas em mensagens de erro e
    relatórios de binding.
    """
    STRING = "string"
    BOOL = "bool"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    TIMESPAN = "timespan"
    DATETIME = "datetime"
    ENUM = "enum"


Int32 = typing.Annotated[int, SettingType.INT32]
UInt32 = typing.Annotated[int, SettingType.UINT32]
Int64 = typing.Annotated[int, SettingType.INT64]
UInt64 = typing.Annotated[int, SettingType.UINT64]
Float32 = typing.Annotated[float, SettingType.FLOAT]


_PLAIN_TYPES = {
    str: SettingType.STRING,
    bool: SettingType.BOOL,
    int: SettingType.INT32,
    float: SettingType.DOUBLE,
    Decimal: SettingType.DECIMAL,
    _dt.timedelta: SettingType.TIMESPAN,
    _dt.datetime: SettingType.DATETIME,
}

Resolved = Tuple[Optional[SettingType], Optional[Type[Enum]]]


def _strip_optional(annotation: Any) -> Any:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or (_UnionType is not None and origin is _UnionType):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def resolve_annotation(annotation: Any) -> Resolved:
    """
    Resolve a anotação de um campo para o tipo alvo de conversão.

    Args:
        annotation: anotação já avaliada (ex.: via `typing.get_type_hints`
            com `include_extras=True`).

    Returns:
        (SettingType, enum_type): `enum_type` só é preenchido para ENUM.
        `(None, None)` quando a anotação não é suportada.
    """
    annotation = _strip_optional(annotation)

    if typing.get_origin(annotation) is typing.Annotated:
        base, *extras = typing.get_args(annotation)
        for extra in extras:
            if isinstance(extra, SettingType):
                if extra is SettingType.ENUM:
                    break
                return extra, None
        annotation = _strip_optional(base)

    if isinstance(annotation, type):
        if issubclass(annotation, Enum):
            return SettingType.ENUM, annotation
        for py_type, kind in _PLAIN_TYPES.items():
            if annotation is py_type:
                return kind, None
    return None, None


def infer_setting_type(value: Any) -> Resolved:
    """Deriva o tipo alvo a partir de um valor semente (ex.: `get_value`)."""
    if isinstance(value, Enum):
        return SettingType.ENUM, type(value)
    if isinstance(value, bool):
        return SettingType.BOOL, None
    if isinstance(value, int):
        return SettingType.INT32, None
    if isinstance(value, float):
        return SettingType.DOUBLE, None
    if isinstance(value, Decimal):
        return SettingType.DECIMAL, None
    if isinstance(value, _dt.timedelta):
        return SettingType.TIMESPAN, None
    if isinstance(value, _dt.datetime):
        return SettingType.DATETIME, None
    if isinstance(value, str):
        return SettingType.STRING, None
    return None, None


def type_label(kind: Optional[SettingType], enum_type: Optional[Type[Enum]] = None) -> str:
    if kind is SettingType.ENUM and enum_type is not None:
        return enum_type.__name__
    if kind is None:
        return "unsupported"
    return kind.value
