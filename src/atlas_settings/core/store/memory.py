# src/atlas_settings/core/store/memory.py
"""
Store em memória baseado em linhas no estilo INI.

`MemorySettings` é o store de referência do Atlas Settings: cada seção
é uma lista ordenada de linhas brutas (`chave=valor`, comentários
iniciados por `#` ou `;`, linhas vazias). É usado em testes e como base
de stores que materializam seu conteúdo em memória (ex.: `FileSettings`).

Decisões arquiteturais:
    - A primeira ocorrência de uma chave vence
    - Chave e valor são aparados (strip) na leitura
    - Seção ausente lê como lista vazia; setting ausente lê como None
    - O conteúdo é copiado na construção (o chamador não muta o store)

Limites explícitos:
    - Não interpreta texto INI completo (cabeçalhos de seção)
    - Não converte valores
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..conversion.culture import Culture, INVARIANT_CULTURE
from ..conversion.formatters import format_value
from ..errors import ReloadError

_COMMENT_PREFIXES = ("#", ";")

SectionContent = Union[Mapping[str, Any], Sequence[Any], None]


def is_comment_or_blank(line: str) -> bool:
    stripped = line.strip()
    return stripped == "" or stripped.startswith(_COMMENT_PREFIXES)


def section_lines(content: SectionContent, culture: Culture = INVARIANT_CULTURE) -> List[str]:
    """
    Materializa o conteúdo de uma seção como linhas brutas.

    - dict  → uma linha `chave=valor` por item (valores None são omitidos)
    - lista → um item formatado por linha
    - None  → seção vazia

    Raises:
        TypeError: se o conteúdo ou algum valor não for suportado.
    """
    if content is None:
        return []
    if isinstance(content, Mapping):
        return [
            f"{key}={format_value(value, culture)}"
            for key, value in content.items()
            if value is not None
        ]
    if isinstance(content, (str, bytes)):
        raise TypeError(f"Section content must be a mapping or a list, got {type(content).__name__}")
    return [format_value(item, culture) for item in content if item is not None]


class MemorySettings:
    """
    Store de settings mantido em memória.

    Args:
        sections: mapa `seção -> linhas brutas`.
        name: nome legível do store.
        culture: contexto de conversão exposto ao leitor tipado.
    """

    can_reload = False

    def __init__(
        self,
        sections: Mapping[str, Sequence[str]],
        *,
        name: str = "memory",
        culture: Culture = INVARIANT_CULTURE,
    ) -> None:
        self.name = name
        self.culture = culture
        self._sections: Dict[str, List[str]] = {
            str(section): [str(line) for line in lines]
            for section, lines in sections.items()
        }

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, SectionContent],
        *,
        name: str = "memory",
        culture: Culture = INVARIANT_CULTURE,
    ) -> "MemorySettings":
        """Constrói o store a partir de valores tipados, formatados com `culture`."""
        return cls(
            {section: section_lines(content, culture) for section, content in data.items()},
            name=name,
            culture=culture,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, sections={len(self._sections)})"

    def get_section_names(self) -> List[str]:
        return list(self._sections)

    def has_section(self, section: str) -> bool:
        return section in self._sections

    def read_section(self, section: str, remove: bool = True) -> List[str]:
        lines = self._sections.get(section, [])
        if remove:
            return [line for line in lines if not is_comment_or_blank(line)]
        return list(lines)

    def read_setting(self, section: str, name: str) -> Optional[str]:
        for line in self._sections.get(section, []):
            if is_comment_or_blank(line) or "=" not in line:
                continue
            key, value = line.split("=", 1)
            if key.strip() == name:
                return value.strip()
        return None

    def reload(self) -> None:
        raise ReloadError(self.name, "in-memory settings cannot be reloaded")
