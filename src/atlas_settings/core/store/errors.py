# src/atlas_settings/core/store/errors.py
"""
Exceções dos stores de referência do Atlas Settings.

Estas exceções cobrem falhas estruturais ao carregar um store a partir
de arquivo. Falhas durante `reload()` são sempre reembaladas em
`ReloadError`, o único erro de store conhecido pelo core.

Invariantes:
    - Todas herdam de `SettingsError`
    - Nenhuma realiza fallback ou recovery
"""

from __future__ import annotations

from ..errors import SettingsError


class SettingsFileNotFoundError(SettingsError):
    """
    Exceção levantada quando o arquivo de settings não existe.

    Decisões arquiteturais:
        - O arquivo é obrigatório no momento do carregamento
        - Nenhum store vazio é criado implicitamente
    """


class UnsupportedSettingsFormatError(SettingsError):
    """
    Exceção levantada quando a extensão do arquivo não é suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidSettingsRootTypeError(SettingsError):
    """
    Exceção levantada quando a estrutura do documento não é um mapa de seções.

    A raiz deve ser um dicionário `seção -> conteúdo`, onde o conteúdo é
    um dicionário de settings ou uma lista de linhas brutas.
    """
