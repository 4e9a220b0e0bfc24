# src/atlas_settings/core/conversion/parsers.py
"""
Parsers canônicos de settings brutos para valores tipados.

Este módulo implementa as regras de conversão string → tipo alvo usadas
pelo acessor tipado e pelo binder de registros. Cada parser retorna o
valor convertido ou `None` quando o texto não representa um valor válido
do tipo alvo (nenhum parser levanta exceção por dado inválido).

Regras (v1):
    - bool: literais `true`/`false` sem distinção de caixa; sem fallback 0/1
    - inteiros: estilo numérico permissivo sob a Culture (espaços, sinal
      à esquerda ou à direita, parênteses, símbolo monetário, separador de
      milhar, ponto decimal com fração nula, expoente); o valor precisa
      caber na largura/sinal do tipo alvo
    - float/double/decimal: mesmo estilo permissivo; float é precisão
      simples; overflow é falha
    - timespan: gramática `[-]{d | [d.]hh:mm[:ss[.fffffff]]}`, independente de Culture
    - datetime: parser flexível (python-dateutil), ordem dia/mês pela Culture
    - enum: nome de membro declarado, sem distinção de caixa, após trim

Invariantes:
    - Um parser nunca fabrica valor a partir de texto vazio
    - A mesma Culture é aplicada a todo texto numérico

Limites explícitos:
    - Não aplica defaults
    - Não remove aspas (ver `unbox`)
    - Não consulta store
"""

from __future__ import annotations

import datetime as _dt
import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from functools import lru_cache
from typing import Any, Optional, Type

import numpy as np
from dateutil import parser as date_parser

from .culture import Culture, INVARIANT_CULTURE
from .types import SettingType


_INTEGER_LIMITS = {
    SettingType.INT32: np.iinfo(np.int32),
    SettingType.UINT32: np.iinfo(np.uint32),
    SettingType.INT64: np.iinfo(np.int64),
    SettingType.UINT64: np.iinfo(np.uint64),
}

# ±(2^96 - 1), faixa de um decimal de 96 bits
_DECIMAL_MAX = Decimal(2 ** 96 - 1)

_SPECIAL_FLOATS = {
    "infinity": float("inf"),
    "+infinity": float("inf"),
    "-infinity": float("-inf"),
    "∞": float("inf"),
    "-∞": float("-inf"),
    "nan": float("nan"),
}

_TIMESPAN_RE = re.compile(
    r"^\s*(?P<neg>-)?"
    r"(?:(?P<days_only>\d{1,8})"
    r"|(?:(?P<days>\d{1,8})\.)?(?P<hours>\d{1,2}):(?P<minutes>\d{1,2})"
    r"(?::(?P<seconds>\d{1,2})(?:\.(?P<fraction>\d{1,7}))?)?)"
    r"\s*$"
)


def _is_blank(text: Optional[str]) -> bool:
    return text is None or text.strip() == ""


@lru_cache(maxsize=32)
def _number_body_re(culture: Culture) -> "re.Pattern[str]":
    group = re.escape(culture.group_separator) if culture.group_separator else ""
    integral = rf"\d(?:\d|{group})*" if group else r"\d+"
    decimal = re.escape(culture.decimal_separator)
    return re.compile(
        rf"^(?P<int>{integral})?(?:{decimal}(?P<frac>\d*))?(?:[eE](?P<exp>[+-]?\d+))?$"
    )


def _strip_currency(text: str, culture: Culture) -> str:
    symbol = culture.currency_symbol
    if symbol and text.startswith(symbol):
        text = text[len(symbol):].strip()
    if symbol and text.endswith(symbol):
        text = text[: -len(symbol)].strip()
    return text


def parse_number(text: Optional[str], culture: Culture = INVARIANT_CULTURE) -> Optional[Decimal]:
    """
    Interpreta um número no estilo permissivo da Culture.

    Returns:
        Decimal exato do texto, ou None quando o texto não é numérico.
    """
    if _is_blank(text):
        return None

    s = text.strip()
    negative = False
    parenthesized = False

    if s.startswith("(") and s.endswith(")"):
        parenthesized = True
        negative = True
        s = s[1:-1].strip()

    s = _strip_currency(s, culture)

    signed = False
    for sign, is_negative in ((culture.negative_sign, True), (culture.positive_sign, False)):
        if sign and s.startswith(sign):
            s = s[len(sign):].strip()
            signed = True
        elif sign and s.endswith(sign):
            s = s[: -len(sign)].strip()
            signed = True
        else:
            continue
        negative = is_negative
        break

    if signed and parenthesized:
        return None

    s = _strip_currency(s, culture)

    match = _number_body_re(culture).match(s)
    if match is None or not (match.group("int") or match.group("frac")):
        return None

    integral = (match.group("int") or "0")
    if culture.group_separator:
        integral = integral.replace(culture.group_separator, "")
    literal = f"{integral}.{match.group('frac') or '0'}"
    if match.group("exp"):
        literal += f"e{match.group('exp')}"

    try:
        value = Decimal(literal)
    except InvalidOperation:
        return None
    return value.copy_negate() if negative else value


def parse_bool(text: Optional[str]) -> Optional[bool]:
    if _is_blank(text):
        return None
    s = text.strip().lower()
    if s == "true":
        return True
    if s == "false":
        return False
    return None


def parse_integer(
    text: Optional[str],
    kind: SettingType = SettingType.INT32,
    culture: Culture = INVARIANT_CULTURE,
) -> Optional[int]:
    """Interpreta um inteiro e valida a faixa de `kind` (int32, uint32, int64, uint64)."""
    limits = _INTEGER_LIMITS[kind]
    value = parse_number(text, culture)
    if value is None:
        return None
    # uint64 tem 20 dígitos; evita materializar expoentes gigantes
    if value and value.adjusted() > 20:
        return None
    if value != value.to_integral_value():
        return None
    result = int(value)
    if result < int(limits.min) or result > int(limits.max):
        return None
    return result


def _parse_binary_float(text: Optional[str], culture: Culture) -> Optional[float]:
    if _is_blank(text):
        return None
    special = _SPECIAL_FLOATS.get(text.strip().lower())
    if special is not None:
        return special
    value = parse_number(text, culture)
    if value is None:
        return None
    result = float(value)
    if np.isinf(result):
        return None
    return result


def parse_double(text: Optional[str], culture: Culture = INVARIANT_CULTURE) -> Optional[float]:
    return _parse_binary_float(text, culture)


def parse_float(text: Optional[str], culture: Culture = INVARIANT_CULTURE) -> Optional[float]:
    """Precisão simples: o valor é arredondado para float32 (overflow é falha)."""
    result = _parse_binary_float(text, culture)
    if result is None:
        return None
    if np.isinf(result) or np.isnan(result):
        return result
    with np.errstate(over="ignore"):
        single = np.float32(result)
    if np.isinf(single):
        return None
    return float(single)


def parse_decimal(text: Optional[str], culture: Culture = INVARIANT_CULTURE) -> Optional[Decimal]:
    value = parse_number(text, culture)
    if value is None:
        return None
    if value and value.adjusted() > 28:
        return None
    if value.copy_abs() > _DECIMAL_MAX:
        return None
    return value


def parse_timespan(text: Optional[str]) -> Optional[_dt.timedelta]:
    """
    Interpreta uma duração na gramática `[-]{d | [d.]hh:mm[:ss[.fffffff]]}`.

    Dias aceitam até 8 dígitos. A fração aceita até 7 dígitos (ticks de
    100ns) e é arredondada para microssegundos, a resolução de
    `datetime.timedelta`.
    """
    if _is_blank(text):
        return None
    match = _TIMESPAN_RE.match(text)
    if match is None:
        return None

    try:
        if match.group("days_only") is not None:
            result = _dt.timedelta(days=int(match.group("days_only")))
        else:
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes"))
            seconds = int(match.group("seconds") or 0)
            if hours > 23 or minutes > 59 or seconds > 59:
                return None
            ticks = int((match.group("fraction") or "").ljust(7, "0"))
            result = _dt.timedelta(
                days=int(match.group("days") or 0),
                hours=hours,
                minutes=minutes,
                seconds=seconds,
                microseconds=round(ticks / 10),
            )
    except (OverflowError, ValueError):
        return None

    return -result if match.group("neg") else result


def parse_datetime(text: Optional[str], culture: Culture = INVARIANT_CULTURE) -> Optional[_dt.datetime]:
    """ISO 8601 primeiro; demais layouts via dateutil com a ordem dia/mês da Culture."""
    if _is_blank(text):
        return None
    s = text.strip()
    try:
        return _dt.datetime.fromisoformat(s)
    except ValueError:
        pass
    try:
        return date_parser.parse(s, dayfirst=culture.dayfirst)
    except (ValueError, OverflowError):
        return None


def parse_enum(text: Optional[str], enum_type: Type[Enum]) -> Optional[Enum]:
    """Resolve um membro pelo nome declarado; caixa exata tem prioridade."""
    if _is_blank(text):
        return None
    name = text.strip()
    members = enum_type.__members__
    if name in members:
        return members[name]
    folded = name.casefold()
    for member_name, member in members.items():
        if member_name.casefold() == folded:
            return member
    return None


def convert(
    text: Optional[str],
    kind: Optional[SettingType],
    culture: Culture = INVARIANT_CULTURE,
    enum_type: Optional[Type[Enum]] = None,
) -> Optional[Any]:
    """
    Converte um setting bruto para `kind`.

    Ponto único de despacho usado pelo acessor tipado e pelo binder.
    Retorna None quando a conversão não é possível, inclusive para
    `kind` ausente (tipo não suportado) e ENUM sem `enum_type`.
    """
    if text is None or kind is None:
        return None
    if kind is SettingType.STRING:
        return text
    if kind is SettingType.BOOL:
        return parse_bool(text)
    if kind in _INTEGER_LIMITS:
        return parse_integer(text, kind, culture)
    if kind is SettingType.FLOAT:
        return parse_float(text, culture)
    if kind is SettingType.DOUBLE:
        return parse_double(text, culture)
    if kind is SettingType.DECIMAL:
        return parse_decimal(text, culture)
    if kind is SettingType.TIMESPAN:
        return parse_timespan(text)
    if kind is SettingType.DATETIME:
        return parse_datetime(text, culture)
    if kind is SettingType.ENUM:
        if enum_type is None:
            return None
        return parse_enum(text, enum_type)
    return None
