# src/atlas_settings/core/reader/__init__.py
"""
Acessor tipado do Atlas Settings.

Componentes principais:
    - SettingsReader → leituras tipadas, gets sem exceção, binder e listas de enums
    - SettingResult  → resultado imutável de uma leitura (valor ou erro)
    - SettingsTrace  → log estruturado de eventos não fatais
"""

from .reader import SettingsReader
from .result import SettingResult
from .trace import SettingsTrace

__all__ = ["SettingsReader", "SettingResult", "SettingsTrace"]
