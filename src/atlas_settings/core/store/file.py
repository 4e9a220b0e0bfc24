# src/atlas_settings/core/store/file.py
"""
Store de settings carregado de arquivo YAML ou JSON.

`FileSettings` materializa um documento de configuração como seções de
linhas brutas e suporta recarga explícita. É o único ponto do projeto
que realiza I/O; o core consome apenas o contrato `SettingsStore`.

Estrutura esperada do documento:
    secao_a:            # seção de settings
      timeout: 30
      name: "atlas"
    secao_b:            # seção de linhas (ex.: lista de enums)
      - Red
      - Green

Formatos suportados (v1):
    - YAML (.yaml, .yml)
    - JSON (.json)

Decisões arquiteturais:
    - O arquivo deve existir no momento do carregamento
    - Arquivos vazios são interpretados como store sem seções
    - Escalares são convertidos para texto com a formatação round-trip
    - `reload()` troca o conteúdo de forma atômica: em caso de falha o
      conteúdo anterior é preservado e `ReloadError` é levantada

Limites explícitos:
    - Não realiza merge de múltiplos arquivos
    - Não observa mudanças no arquivo (recarga é sempre explícita)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Union

import yaml  # PyYAML

from ..conversion.culture import Culture, INVARIANT_CULTURE
from ..errors import ReloadError, SettingsError
from .errors import (
    InvalidSettingsRootTypeError,
    SettingsFileNotFoundError,
    UnsupportedSettingsFormatError,
)
from .memory import MemorySettings, section_lines


# extensão → parser do documento
_DOCUMENT_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def _load_sections(path: Path, culture: Culture) -> Dict[str, List[str]]:
    """
    Lê o documento de `path` e o materializa como seções de linhas brutas.

    Raises:
        UnsupportedSettingsFormatError: se a extensão não for suportada.
        SettingsFileNotFoundError: se o arquivo não existir.
        InvalidSettingsRootTypeError: se a raiz não for um mapa de seções
            ou alguma seção não for mapa, lista ou vazia.
    """
    parse = _DOCUMENT_PARSERS.get(path.suffix.lower())
    if parse is None:
        raise UnsupportedSettingsFormatError(
            f"Formato de settings não suportado: {path.suffix or '(sem extensão)'}"
        )

    try:
        document = parse(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise SettingsFileNotFoundError(f"Arquivo de settings não encontrado: {path}") from e

    if document is None:
        return {}
    if not isinstance(document, Mapping):
        raise InvalidSettingsRootTypeError(
            f"{path}: esperado mapa de seções, recebido {type(document).__name__}"
        )

    sections: Dict[str, List[str]] = {}
    for section, content in document.items():
        try:
            sections[str(section)] = section_lines(content, culture)
        except TypeError as e:
            raise InvalidSettingsRootTypeError(f"Seção [{section}] inválida em {path}: {e}") from e
    return sections


class FileSettings(MemorySettings):
    """
    Store de settings respaldado por um arquivo YAML/JSON recarregável.

    Args:
        path: caminho do arquivo.
        culture: contexto de conversão usado para formatar escalares e
            exposto ao leitor tipado.
    """

    can_reload = True

    def __init__(self, path: Union[str, Path], *, culture: Culture = INVARIANT_CULTURE) -> None:
        self.path = Path(path)
        super().__init__(_load_sections(self.path, culture), name=str(self.path), culture=culture)

    def reload(self) -> None:
        try:
            sections = _load_sections(self.path, self.culture)
        except SettingsError as e:
            raise ReloadError(self.name, str(e)) from e
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ReloadError(self.name, f"{type(e).__name__}: {e}") from e
        self._sections = sections
