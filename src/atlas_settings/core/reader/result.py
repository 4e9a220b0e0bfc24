# src/atlas_settings/core/reader/result.py
"""
Resultado imutável de uma leitura tipada.

`SettingResult` é a forma "resultado" de uma leitura: carrega o valor
convertido ou o erro estruturado que a leitura produziria, sem levantar
exceção. Os métodos `read_*` do leitor são `read_result(...).unwrap()`.

Decisões arquiteturais:
    - Exatamente um de `value`/`error` é significativo
    - `from_default` distingue valor lido de default aplicado
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from ..errors import SettingsError

T = TypeVar("T")


@dataclass(frozen=True)
class SettingResult(Generic[T]):
    """
    Resultado de `SettingsReader.read_result`.

    Campos:
        - section / name: setting consultado
        - value: valor convertido (ou default aplicado)
        - error: erro estruturado quando a leitura falhou
        - raw: valor bruto encontrado no store (None quando ausente)
        - from_default: True quando `value` veio do default
    """

    section: str
    name: str
    value: Optional[T] = None
    error: Optional[SettingsError] = None
    raw: Optional[str] = None
    from_default: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Retorna o valor ou levanta o erro carregado."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, fallback: Any) -> Any:
        return self.value if self.error is None else fallback
