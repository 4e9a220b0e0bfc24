# src/atlas_settings/core/store/__init__.py
"""
Stores de settings do Atlas Settings.

Este pacote define o contrato consumido pelo core (`SettingsStore`) e
dois stores de referência que o satisfazem:
    - MemorySettings → linhas INI em memória
    - FileSettings   → documento YAML/JSON recarregável

O core depende apenas do contrato; os stores concretos são adapters.
"""

from .contract import SettingsStore
from .errors import (
    InvalidSettingsRootTypeError,
    SettingsFileNotFoundError,
    UnsupportedSettingsFormatError,
)
from .file import FileSettings
from .memory import MemorySettings

__all__ = [
    "SettingsStore",
    "MemorySettings",
    "FileSettings",
    "SettingsFileNotFoundError",
    "UnsupportedSettingsFormatError",
    "InvalidSettingsRootTypeError",
]
