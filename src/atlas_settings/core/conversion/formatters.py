# src/atlas_settings/core/conversion/formatters.py
"""
Formatação round-trip de valores tipados para settings brutos.

Este módulo gera a representação textual canônica de um valor tipado,
de forma que o parser correspondente, sob a mesma Culture, reconstrua
um valor observavelmente igual ao original.

Decisões arquiteturais:
    - float/double usam a representação mais curta que faz round-trip
      (estilo "R"), nunca o formato geral do locale
    - bool usa `True`/`False`
    - timespan usa `[-][d.]hh:mm:ss[.fffffff]`
    - datetime usa ISO 8601
    - enum usa o nome do membro

Limites explícitos:
    - Não escreve no store (o core nunca muta o store)
"""

from __future__ import annotations

import datetime as _dt
import math
from decimal import Decimal
from enum import Enum
from typing import Any

from .culture import Culture, INVARIANT_CULTURE


def _localize(text: str, culture: Culture) -> str:
    if culture.decimal_separator != ".":
        text = text.replace(".", culture.decimal_separator)
    # o sinal do expoente (1e-05) permanece ASCII
    if culture.negative_sign != "-" and text.startswith("-"):
        text = culture.negative_sign + text[1:]
    return text


def format_timespan(value: _dt.timedelta) -> str:
    negative = value < _dt.timedelta(0)
    value = abs(value)
    hours, rest = divmod(value.seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if value.days:
        text = f"{value.days}.{text}"
    if value.microseconds:
        text = f"{text}.{value.microseconds * 10:07d}"
    return f"-{text}" if negative else text


def format_value(value: Any, culture: Culture = INVARIANT_CULTURE) -> str:
    """
    Gera a string canônica de `value` para a Culture informada.

    Raises:
        TypeError: se o tipo de `value` não for suportado.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, int):
        return _localize(str(value), culture)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _localize(repr(value), culture)
    if isinstance(value, Decimal):
        return _localize(str(value), culture)
    if isinstance(value, _dt.timedelta):
        return format_timespan(value)
    if isinstance(value, (_dt.datetime, _dt.date)):
        return value.isoformat()
    raise TypeError(f"Unsupported setting value type: {type(value).__name__}")
