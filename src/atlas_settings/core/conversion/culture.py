# src/atlas_settings/core/conversion/culture.py
"""
Contexto de conversão (Culture) do Atlas Settings.

Uma `Culture` descreve as regras textuais usadas para converter settings
numéricos e de data/hora. Para o core ela é um valor opaco: é exposta
pelo store e aplicada de forma consistente tanto no parse de valores
brutos quanto na geração de strings (formatação round-trip).

Decisões arquiteturais:
    - A Culture é imutável (frozen)
    - `INVARIANT_CULTURE` é o contexto padrão de todo store
    - Seleção de locale não é responsabilidade do core; `from_locale`
      apenas materializa o locale já ativo no processo

Invariantes:
    - Separador decimal e separador de grupo nunca são iguais
"""

from __future__ import annotations

import locale
from dataclasses import dataclass


@dataclass(frozen=True)
class Culture:
    """
    Regras de formatação e parse aplicadas a settings numéricos e de data.

    Campos:
        - name: identificador legível (ex.: "invariant", "de-DE")
        - decimal_separator: separador decimal
        - group_separator: separador de milhar
        - positive_sign / negative_sign: símbolos de sinal
        - currency_symbol: símbolo monetário aceito em números
        - dayfirst: ordem dia/mês ao interpretar datas ambíguas
    """

    name: str = "invariant"
    decimal_separator: str = "."
    group_separator: str = ","
    positive_sign: str = "+"
    negative_sign: str = "-"
    currency_symbol: str = "¤"
    dayfirst: bool = False

    def __post_init__(self) -> None:
        if not self.decimal_separator:
            raise ValueError("decimal_separator must be a non-empty string")
        if self.decimal_separator == self.group_separator:
            raise ValueError(
                f"Culture {self.name}: decimal and group separators must differ"
            )

    @classmethod
    def from_locale(cls, *, dayfirst: bool = False) -> "Culture":
        """Materializa a Culture a partir do locale numérico ativo no processo."""
        conv = locale.localeconv()
        decimal_separator = conv.get("decimal_point") or "."
        group_separator = conv.get("thousands_sep") or ""
        if group_separator == decimal_separator:
            group_separator = ""
        return cls(
            name=locale.setlocale(locale.LC_NUMERIC) or "C",
            decimal_separator=decimal_separator,
            group_separator=group_separator,
            positive_sign=conv.get("positive_sign") or "+",
            negative_sign=conv.get("negative_sign") or "-",
            currency_symbol=conv.get("currency_symbol") or "¤",
            dayfirst=dayfirst,
        )


INVARIANT_CULTURE = Culture()
