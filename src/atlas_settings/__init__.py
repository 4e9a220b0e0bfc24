# src/atlas_settings/__init__.py
"""
Atlas Settings — camada tipada de acesso a settings.

Este pacote raiz define o namespace público do Atlas Settings: um
contrato de leitura de seções e settings brutos, mais uma camada de
acesso tipado que converte strings em tipos primitivos, enums e
registros completos, com semântica explícita de defaults e de sucesso
parcial.

Arquitetura em alto nível:
    - core.store      → contrato de store e stores de referência
    - core.conversion → regras de conversão string → tipo
    - core.reader     → acessor tipado (read_*, get_*, read_enum_list)
    - core.binding    → binder de registros por tabela de descritores

Exemplo:
    store = MemorySettings({"server": ["port=8080", "debug=true"]})
    reader = SettingsReader(store)
    reader.read_int32("server", "port")       # 8080
    reader.read_bool("server", "verbose", False)  # False
"""

from .core.binding import BindReport, FieldDescriptor, bindable, register_record
from .core.conversion import (
    Culture,
    Float32,
    INVARIANT_CULTURE,
    Int32,
    Int64,
    SettingType,
    UInt32,
    UInt64,
    format_value,
    unbox_text,
)
from .core.errors import (
    EmptyRecordError,
    FieldBindingError,
    InvalidSettingValueError,
    NullRecordError,
    ReloadError,
    SettingsError,
    UnsetSettingError,
)
from .core.reader import SettingResult, SettingsReader, SettingsTrace
from .core.store import FileSettings, MemorySettings, SettingsStore

__all__ = [
    "SettingsReader",
    "SettingResult",
    "SettingsTrace",
    "SettingsStore",
    "MemorySettings",
    "FileSettings",
    "Culture",
    "INVARIANT_CULTURE",
    "SettingType",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    "Float32",
    "format_value",
    "unbox_text",
    "BindReport",
    "FieldDescriptor",
    "bindable",
    "register_record",
    "SettingsError",
    "UnsetSettingError",
    "InvalidSettingValueError",
    "NullRecordError",
    "EmptyRecordError",
    "FieldBindingError",
    "ReloadError",
]
