# src/atlas_settings/core/errors.py
"""
Exceções canônicas da camada de acesso a settings do Atlas Settings.

Este módulo define a hierarquia oficial de exceções levantadas pelo
acessor tipado (`SettingsReader`) e pelo binder de registros.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Toda exceção carrega dados estruturados (`details`) para diagnóstico
    - Mensagens são curtas, humanas e objetivas

Taxonomia:
    - UnsetSettingError        → setting obrigatório ausente e sem default
    - InvalidSettingValueError → valor presente que não converte para o tipo alvo
    - NullRecordError          → registro alvo ausente (None)
    - EmptyRecordError         → registro alvo sem nenhum campo bindável
    - FieldBindingError        → falha de conversão de um campo em modo estrito
    - ReloadError              → falha de recarga do store (propagada sem interpretação)

Invariantes:
    - Todas as exceções herdam de `SettingsError`
    - Nenhuma exceção realiza fallback ou recovery

Limites explícitos:
    - Não registra eventos (responsabilidade do SettingsTrace)
    - Não depende do store concreto
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class SettingsError(Exception):
    """
    Exceção base para erros da camada de settings.

    Todas as exceções levantadas durante leitura, conversão e binding
    de settings devem herdar desta classe, permitindo captura genérica.

    Atributos:
        - message: mensagem curta e humana
        - details: dados estruturados relevantes para diagnóstico
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})

    def __str__(self) -> str:
        return self.message


class UnsetSettingError(SettingsError):
    """
    Exceção levantada quando um setting obrigatório não está presente.

    Um setting é considerado obrigatório quando a leitura tipada é feita
    sem valor default. Ausência e string vazia são tratadas da mesma forma.

    Invariantes:
        - Nunca é convertida em valor default pelo core
    """

    def __init__(self, section: str, name: str) -> None:
        super().__init__(
            f"Section [{section}] Setting {name} is unset!",
            {"section": section, "name": name},
        )
        self.section = section
        self.name = name


class InvalidSettingValueError(SettingsError):
    """
    Exceção levantada quando um setting presente não converte para o tipo alvo.

    Decisões arquiteturais:
        - O default de uma leitura cobre apenas ausência, nunca dado inválido
        - O valor bruto é preservado para diagnóstico
    """

    def __init__(self, section: str, name: str, raw: str, target_type: str) -> None:
        super().__init__(
            f"Section [{section}] Setting {name} has invalid {target_type} value {raw!r}",
            {"section": section, "name": name, "raw": raw, "target_type": target_type},
        )
        self.section = section
        self.name = name
        self.raw = raw
        self.target_type = target_type


class NullRecordError(SettingsError, ValueError):
    """Registro alvo do binder é None."""

    def __init__(self, section: str) -> None:
        super().__init__(
            f"Cannot bind section [{section}] into a missing record",
            {"section": section},
        )
        self.section = section


class EmptyRecordError(SettingsError, ValueError):
    """
    Exceção levantada quando o registro alvo não possui campos bindáveis.

    Um registro sem campos não define contrato algum para a seção,
    o que é tratado como uso incorreto do binder.
    """

    def __init__(self, record_type: str, section: str) -> None:
        super().__init__(
            f"Record {record_type} does not have any fields to bind from section [{section}]",
            {"record_type": record_type, "section": section},
        )
        self.record_type = record_type
        self.section = section


class FieldBindingError(SettingsError):
    """
    Exceção levantada quando um campo não pode ser convertido em modo estrito.

    Interrompe o binding dos campos restantes da chamada.
    """

    def __init__(self, section: str, field: str, raw: str, target_type: str) -> None:
        super().__init__(
            f"Invalid field value {raw!r} for field {target_type} {field} in section [{section}]",
            {"section": section, "field": field, "raw": raw, "target_type": target_type},
        )
        self.section = section
        self.field = field
        self.raw = raw
        self.target_type = target_type


class ReloadError(SettingsError):
    """
    Exceção levantada por um store quando a recarga falha.

    O core não interpreta esta exceção: ela é propagada ao chamador
    exatamente como produzida pelo store.
    """

    def __init__(self, store_name: str, reason: str) -> None:
        super().__init__(
            f"Settings {store_name} could not be reloaded: {reason}",
            {"store": store_name, "reason": reason},
        )
        self.store_name = store_name
        self.reason = reason
