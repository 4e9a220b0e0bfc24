# src/atlas_settings/core/conversion/__init__.py
"""
Camada de conversão do Atlas Settings.

Reúne o contexto de conversão (Culture), o catálogo de tipos alvo,
os parsers string → tipo, a formatação round-trip e o unboxing de
valores entre aspas.

Princípios fundamentais:
    - Conversão é pura: nenhuma consulta ao store, nenhum efeito colateral
    - Falha de conversão é sinalizada por `None`, nunca por valor fabricado
"""

from .culture import Culture, INVARIANT_CULTURE
from .formatters import format_timespan, format_value
from .parsers import (
    convert,
    parse_bool,
    parse_datetime,
    parse_decimal,
    parse_double,
    parse_enum,
    parse_float,
    parse_integer,
    parse_number,
    parse_timespan,
)
from .types import (
    Float32,
    Int32,
    Int64,
    SettingType,
    UInt32,
    UInt64,
    infer_setting_type,
    resolve_annotation,
    type_label,
)
from .unbox import decode_escape_sequences, unbox_text

__all__ = [
    "Culture",
    "INVARIANT_CULTURE",
    "SettingType",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    "Float32",
    "convert",
    "decode_escape_sequences",
    "format_timespan",
    "format_value",
    "infer_setting_type",
    "parse_bool",
    "parse_datetime",
    "parse_decimal",
    "parse_double",
    "parse_enum",
    "parse_float",
    "parse_integer",
    "parse_number",
    "parse_timespan",
    "resolve_annotation",
    "type_label",
    "unbox_text",
]
