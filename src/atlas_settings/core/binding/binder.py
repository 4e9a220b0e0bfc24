# src/atlas_settings/core/binding/binder.py
"""
Binder canônico de registros do Atlas Settings.

Este módulo implementa o preenchimento de um registro a partir das
settings de uma seção: para cada campo descrito na tabela do tipo, o
setting de mesmo nome é lido, desencaixotado (sem decodificar escapes)
e convertido para o tipo alvo do campo.

Política de binding (v1):
    - registro None → NullRecordError
    - registro sem campos → EmptyRecordError (modo estrito) ou falha
      reportada (modo tolerante), sem mutação
    - setting ausente ou vazio → campo ignorado, mantém o valor atual,
      warning registrado (nunca levanta exceção)
    - falha de conversão → FieldBindingError (modo estrito, interrompe os
      campos restantes) ou campo marcado como falho (modo tolerante)
    - o resultado é bem-sucedido sse nenhum campo presente falhou

Decisões arquiteturais:
    - Falhas de campo são isoladas: o modo tolerante nunca aborta a passada
    - O resultado por campo é retido em `BindReport`
    - Registros frozen nunca são mutados; o report carrega a cópia preenchida

Limites explícitos:
    - Não cria settings nem muta o store
    - Não valida semântica além da conversão de tipos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

from ..conversion.parsers import convert
from ..conversion.unbox import unbox_text
from ..errors import EmptyRecordError, FieldBindingError, NullRecordError
from .descriptors import describe_record

if TYPE_CHECKING:
    from ..reader.reader import SettingsReader


@dataclass(frozen=True)
class FieldFailure:
    """Campo presente cujo valor não converteu para o tipo alvo."""

    field: str
    raw: str
    target_type: str


@dataclass
class BindReport:
    """
    Resultado detalhado de um binding.

    Campos:
        - section: seção lida
        - record_type: nome do tipo do registro
        - record: registro resultante (o próprio, ou a cópia para frozen)
        - bound: campos convertidos e gravados
        - skipped: campos sem setting (mantêm o valor anterior)
        - failed: campos presentes que falharam na conversão
        - empty: o registro não possui campos bindáveis
    """

    section: str
    record_type: str
    record: Any = None
    bound: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[FieldFailure] = field(default_factory=list)
    empty: bool = False

    @property
    def ok(self) -> bool:
        return not self.empty and not self.failed


class ObjectBinder:
    """Executa o binding de registros usando o store e o trace de um leitor."""

    def __init__(self, reader: "SettingsReader") -> None:
        self._reader = reader

    def bind(
        self,
        section: str,
        record: Any,
        *,
        throw_on_error: bool = False,
        in_place: bool = True,
    ) -> BindReport:
        """
        Preenche `record` a partir da seção `section`.

        Args:
            section: seção de origem.
            record: registro alvo.
            throw_on_error: modo estrito (levanta na primeira falha de campo).
            in_place: exige mutação in-place; registros frozen são rejeitados.

        Raises:
            NullRecordError: se `record` for None.
            TypeError: se `in_place` e o registro for frozen.
            EmptyRecordError: registro sem campos, em modo estrito.
            FieldBindingError: falha de conversão, em modo estrito.
        """
        if record is None:
            raise NullRecordError(section)

        reader = self._reader
        trace = reader.trace
        descriptor = describe_record(type(record))

        if in_place and descriptor.frozen:
            raise TypeError(
                f"Record {descriptor.type_name} is frozen and cannot be bound in place; use bind_record"
            )

        report = BindReport(section=section, record_type=descriptor.type_name, record=record)

        if not descriptor.fields:
            if throw_on_error:
                raise EmptyRecordError(descriptor.type_name, section)
            report.empty = True
            trace.add_warning(
                section=section,
                message=f"No field in section {section}!",
                record_type=descriptor.type_name,
            )
            return report

        pending: Dict[str, Any] = {}
        for fd in descriptor.fields:
            raw = reader.read_setting(section, fd.name)
            if raw is None or raw == "":
                report.skipped.append(fd.name)
                trace.add_warning(
                    section=section,
                    message=f"Field is not set, using default value: {fd.target_type} {fd.name}",
                    field=fd.name,
                )
                continue

            text = unbox_text(raw, decode_escapes=False)
            value = convert(text, fd.kind, reader.culture, fd.enum_type)
            if value is None:
                if throw_on_error:
                    raise FieldBindingError(section, fd.name, text, fd.target_type)
                report.failed.append(FieldFailure(field=fd.name, raw=text, target_type=fd.target_type))
                trace.add_warning(
                    section=section,
                    message=f"Invalid field value {text} for field {fd.target_type} {fd.name}",
                    field=fd.name,
                    raw=text,
                )
                continue

            if descriptor.frozen:
                pending[fd.name] = value
            else:
                fd.set(record, value)
            report.bound.append(fd.name)

        if descriptor.frozen:
            report.record = descriptor.with_values(record, pending)

        trace.log(
            level="info" if report.ok else "warning",
            message=f"section [{section}] bound into {descriptor.type_name}",
            section=section,
            bound=len(report.bound),
            skipped=len(report.skipped),
            failed=len(report.failed),
        )
        return report
