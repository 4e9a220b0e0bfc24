# src/atlas_settings/core/store/contract.py
"""
Contrato canônico de Store do Atlas Settings.

Este módulo define o protocolo que qualquer store de settings deve
satisfazer para ser consumido pelo `SettingsReader`.

Um store é a fonte bruta de settings: ele conhece seções, linhas e
pares chave/valor em forma de string, mas nada sabe sobre tipos.
O parser concreto (INI, YAML, banco, ...) é externo ao core.

Responsabilidades de um Store:
    - enumerar seções e informar se uma seção existe
    - listar as linhas brutas de uma seção
    - retornar o valor bruto de um setting (ou None)
    - expor a Culture usada na conversão
    - opcionalmente recarregar seu conteúdo

Princípios fundamentais:
    - O core nunca muta o store
    - Conformidade é garantida por duck typing (@runtime_checkable)
    - Cada chamada é tratada como um snapshot consistente

Limites explícitos:
    - Não converte valores
    - Não aplica defaults
    - Não define política de concorrência
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from ..conversion.culture import Culture


@runtime_checkable
class SettingsStore(Protocol):
    """
    Contrato canônico de um store de settings.

    Atributos obrigatórios:
        - name: nome legível do store (ex.: caminho do arquivo)
        - culture: contexto de conversão aplicado pelo leitor tipado
        - can_reload: indica se `reload()` é suportado

    Invariantes:
        - `read_setting` retorna None para setting ou seção ausente
        - nomes de settings diferenciam maiúsculas de minúsculas
        - `reload()` falha com `ReloadError` e nunca deixa o store parcial
    """
    name: str
    culture: Culture
    can_reload: bool

    def get_section_names(self) -> List[str]:
        """Retorna os nomes de todas as seções."""
        ...

    def has_section(self, section: str) -> bool:
        """Indica se a seção existe."""
        ...

    def read_section(self, section: str, remove: bool = True) -> List[str]:
        """Retorna as linhas brutas da seção; `remove` descarta comentários e linhas vazias."""
        ...

    def read_setting(self, section: str, name: str) -> Optional[str]:
        """Retorna o valor bruto do setting ou None."""
        ...

    def reload(self) -> None:
        """Recarrega o conteúdo do store."""
        ...
