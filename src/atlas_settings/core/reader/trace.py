# src/atlas_settings/core/reader/trace.py
"""
SettingsTrace — log estruturado de leitura de settings.

O trace é o registro explícito dos eventos não fatais produzidos pelo
leitor tipado: campos ignorados ou inválidos durante o binding, linhas
descartadas em listas de enums, recargas do store.

Cada evento é um dicionário serializável:
    - source: nome do store
    - level: "info" | "warning" | "error"
    - message: mensagem curta
    - timestamp: UTC ISO 8601
    - campos extras nomeados (section, field, raw, ...)

Princípios fundamentais:
    - Nenhum evento é emitido implicitamente fora do leitor
    - A ordem de `events` reflete a ordem real das leituras
    - Warnings são agrupados por seção
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class SettingsTrace:
    """
    Registro de eventos e warnings de um `SettingsReader`.

    Campos:
        - source: identificação do store de origem
        - events: log estruturado, em ordem de emissão
        - warnings: mensagens de warning por seção
    """

    source: str
    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "source": self.source,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, section: str, message: str, **extra: Any) -> None:
        """Registra um warning da seção e o espelha no log como evento `warning`."""
        if section not in self.warnings:
            self.warnings[section] = []
        self.warnings[section].append(message)
        self.log(level="warning", message=message, section=section, **extra)

    def warnings_for(self, section: str) -> List[str]:
        return list(self.warnings.get(section, []))

    def clear(self) -> None:
        self.events.clear()
        self.warnings.clear()
