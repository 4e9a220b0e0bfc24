# src/atlas_settings/core/reader/reader.py
"""
SettingsReader — acessor tipado canônico do Atlas Settings.

Este módulo define o `SettingsReader`, a camada que converte settings
brutos de um `SettingsStore` em valores tipados, com política explícita
de defaults, e que expõe o binder de registros.

Formas de chamada:
    - read_<tipo>(section, name, default=None) → valor ou exceção
    - read_result(section, name, kind, ...)   → SettingResult (valor ou erro)
    - get_<tipo>(section, name, value)        → (encontrado, valor); nunca falha
    - bind_object / bind_record / read_record / try_read_record → registros
    - read_enum_list(enum_type, section)      → lista de enums da seção

Política de defaults (v1):
    - setting ausente (ou vazio) + default → default
    - setting ausente sem default          → UnsetSettingError
    - setting presente e válido            → valor convertido
    - setting presente e inválido          → InvalidSettingValueError
      (o default cobre apenas ausência, nunca dado inválido)

Princípios fundamentais:
    - O leitor nunca muta o store
    - Nenhum valor é fabricado sem informação
    - Eventos não fatais são registrados no `SettingsTrace`

Limites explícitos:
    - Não interpreta formatos de arquivo
    - Não faz merge de stores nem overlay de ambiente
    - Não recarrega o store implicitamente
"""

from __future__ import annotations

import datetime as _dt
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, Tuple, Type, TypeVar, Union

from ..binding.binder import BindReport, ObjectBinder
from ..binding.descriptors import describe_record
from ..conversion.culture import Culture
from ..conversion.parsers import convert, parse_enum
from ..conversion.types import SettingType, infer_setting_type, type_label
from ..errors import InvalidSettingValueError, UnsetSettingError
from ..store.contract import SettingsStore
from .result import SettingResult
from .trace import SettingsTrace

E = TypeVar("E", bound=Enum)
R = TypeVar("R")


class SettingsReader:
    """
    Acessor tipado sobre um `SettingsStore`.

    Args:
        store: store de origem (qualquer objeto que satisfaça `SettingsStore`).
        trace: trace de eventos; um novo é criado quando omitido.

    Raises:
        TypeError: se `store` não satisfizer o contrato.
    """

    def __init__(self, store: SettingsStore, *, trace: Optional[SettingsTrace] = None) -> None:
        if not isinstance(store, SettingsStore):
            raise TypeError(f"store must satisfy SettingsStore, got {type(store).__name__}")
        self.store = store
        self.trace = trace if trace is not None else SettingsTrace(source=store.name)
        self._binder = ObjectBinder(self)

    def __repr__(self) -> str:
        return f"SettingsReader({self.store!r})"

    # -----------------------------
    # Store contract (pass-through)
    # -----------------------------
    @property
    def name(self) -> str:
        return self.store.name

    @property
    def culture(self) -> Culture:
        return self.store.culture

    @property
    def can_reload(self) -> bool:
        return bool(self.store.can_reload)

    def reload(self) -> None:
        """Recarrega o store; `ReloadError` é propagada sem interpretação."""
        self.store.reload()
        self.trace.log(level="info", message="settings reloaded")

    def get_section_names(self) -> List[str]:
        return list(self.store.get_section_names())

    def has_section(self, section: str) -> bool:
        return self.store.has_section(section)

    def read_section(self, section: str, remove: bool = True) -> List[str]:
        return list(self.store.read_section(section, remove))

    def read_setting(self, section: str, name: str) -> Optional[str]:
        return self.store.read_setting(section, name)

    def _raw(self, section: str, name: str) -> Optional[str]:
        raw = self.store.read_setting(section, name)
        return raw if raw else None

    # -----------------------------
    # Result-shaped reads
    # -----------------------------
    def read_result(
        self,
        section: str,
        name: str,
        kind: Union[SettingType, str],
        default: Any = None,
        *,
        enum_type: Optional[Type[Enum]] = None,
    ) -> SettingResult:
        """
        Lê e converte um setting sem levantar exceção.

        Args:
            section / name: setting consultado.
            kind: tipo alvo.
            default: valor usado quando o setting está ausente (None = obrigatório).
            enum_type: classe do enum quando `kind` é ENUM (inferida do default
                quando omitida).

        Returns:
            SettingResult com o valor ou com o erro que `unwrap()` levantaria.

        Raises:
            TypeError: ENUM sem `enum_type` determinável.
        """
        kind = SettingType(kind)
        if kind is SettingType.ENUM and enum_type is None:
            if not isinstance(default, Enum):
                raise TypeError("enum_type is required to read an enum setting")
            enum_type = type(default)

        raw = self._raw(section, name)
        if raw is None:
            if default is None:
                return SettingResult(section=section, name=name, error=UnsetSettingError(section, name))
            return SettingResult(section=section, name=name, value=default, from_default=True)

        value = convert(raw, kind, self.culture, enum_type)
        if value is None:
            error = InvalidSettingValueError(section, name, raw, type_label(kind, enum_type))
            return SettingResult(section=section, name=name, error=error, raw=raw)
        return SettingResult(section=section, name=name, value=value, raw=raw)

    # -----------------------------
    # Throwing reads
    # -----------------------------
    def read_string(self, section: str, name: str, default: Optional[str] = None) -> str:
        return self.read_result(section, name, SettingType.STRING, default).unwrap()

    def read_bool(self, section: str, name: str, default: Optional[bool] = None) -> bool:
        return self.read_result(section, name, SettingType.BOOL, default).unwrap()

    def read_int32(self, section: str, name: str, default: Optional[int] = None) -> int:
        return self.read_result(section, name, SettingType.INT32, default).unwrap()

    def read_uint32(self, section: str, name: str, default: Optional[int] = None) -> int:
        return self.read_result(section, name, SettingType.UINT32, default).unwrap()

    def read_int64(self, section: str, name: str, default: Optional[int] = None) -> int:
        return self.read_result(section, name, SettingType.INT64, default).unwrap()

    def read_uint64(self, section: str, name: str, default: Optional[int] = None) -> int:
        return self.read_result(section, name, SettingType.UINT64, default).unwrap()

    def read_float(self, section: str, name: str, default: Optional[float] = None) -> float:
        return self.read_result(section, name, SettingType.FLOAT, default).unwrap()

    def read_double(self, section: str, name: str, default: Optional[float] = None) -> float:
        return self.read_result(section, name, SettingType.DOUBLE, default).unwrap()

    def read_decimal(self, section: str, name: str, default: Optional[Decimal] = None) -> Decimal:
        return self.read_result(section, name, SettingType.DECIMAL, default).unwrap()

    def read_timespan(
        self, section: str, name: str, default: Optional[_dt.timedelta] = None
    ) -> _dt.timedelta:
        return self.read_result(section, name, SettingType.TIMESPAN, default).unwrap()

    def read_datetime(
        self, section: str, name: str, default: Optional[_dt.datetime] = None
    ) -> _dt.datetime:
        return self.read_result(section, name, SettingType.DATETIME, default).unwrap()

    def read_enum(self, enum_type: Type[E], section: str, name: str, default: Optional[E] = None) -> E:
        return self.read_result(section, name, SettingType.ENUM, default, enum_type=enum_type).unwrap()

    # -----------------------------
    # Non-throwing reads (seed in, value out)
    # -----------------------------
    def get_value(
        self,
        section: str,
        name: str,
        value: Any,
        kind: Optional[Union[SettingType, str]] = None,
    ) -> Tuple[bool, Any]:
        """
        Tenta ler um setting, usando `value` como semente.

        O tipo alvo é `kind` quando informado; caso contrário é derivado
        do tipo da semente (para enums, a classe da semente). Nunca levanta
        exceção por setting ausente ou inválido.

        Returns:
            (True, valor convertido) ou (False, `value` inalterado).
        """
        enum_type: Optional[Type[Enum]] = None
        if kind is None:
            resolved, enum_type = infer_setting_type(value)
        else:
            resolved = SettingType(kind)
            if resolved is SettingType.ENUM and isinstance(value, Enum):
                enum_type = type(value)
        if resolved is None:
            return False, value

        raw = self._raw(section, name)
        if raw is None:
            return False, value
        parsed = convert(raw, resolved, self.culture, enum_type)
        if parsed is None:
            return False, value
        return True, parsed

    def get_string(self, section: str, name: str, value: str) -> Tuple[bool, str]:
        return self.get_value(section, name, value, SettingType.STRING)

    def get_bool(self, section: str, name: str, value: bool) -> Tuple[bool, bool]:
        return self.get_value(section, name, value, SettingType.BOOL)

    def get_int32(self, section: str, name: str, value: int) -> Tuple[bool, int]:
        return self.get_value(section, name, value, SettingType.INT32)

    def get_uint32(self, section: str, name: str, value: int) -> Tuple[bool, int]:
        return self.get_value(section, name, value, SettingType.UINT32)

    def get_int64(self, section: str, name: str, value: int) -> Tuple[bool, int]:
        return self.get_value(section, name, value, SettingType.INT64)

    def get_uint64(self, section: str, name: str, value: int) -> Tuple[bool, int]:
        return self.get_value(section, name, value, SettingType.UINT64)

    def get_float(self, section: str, name: str, value: float) -> Tuple[bool, float]:
        return self.get_value(section, name, value, SettingType.FLOAT)

    def get_double(self, section: str, name: str, value: float) -> Tuple[bool, float]:
        return self.get_value(section, name, value, SettingType.DOUBLE)

    def get_decimal(self, section: str, name: str, value: Decimal) -> Tuple[bool, Decimal]:
        return self.get_value(section, name, value, SettingType.DECIMAL)

    def get_timespan(
        self, section: str, name: str, value: _dt.timedelta
    ) -> Tuple[bool, _dt.timedelta]:
        return self.get_value(section, name, value, SettingType.TIMESPAN)

    def get_datetime(self, section: str, name: str, value: _dt.datetime) -> Tuple[bool, _dt.datetime]:
        return self.get_value(section, name, value, SettingType.DATETIME)

    def get_enum(self, section: str, name: str, value: E) -> Tuple[bool, E]:
        """
        Tenta ler um enum cujo tipo é o da semente `value`.

        Raises:
            TypeError: se `value` não for membro de um Enum.
        """
        if not isinstance(value, Enum):
            raise TypeError(f"get_enum requires an Enum seed, got {type(value).__name__}")
        return self.get_value(section, name, value, SettingType.ENUM)

    # -----------------------------
    # Sections as enum lists
    # -----------------------------
    def read_enum_list(self, enum_type: Type[E], section: str, throw_on_error: bool = True) -> List[E]:
        """
        Interpreta cada linha útil da seção como um membro de `enum_type`.

        Linhas inválidas levantam `InvalidSettingValueError` em modo estrito;
        no modo tolerante são descartadas e registradas como warning.
        """
        result: List[E] = []
        for index, line in enumerate(self.read_section(section, True), start=1):
            member = parse_enum(line, enum_type)
            if member is None:
                if throw_on_error:
                    raise InvalidSettingValueError(section, f"#{index}", line, enum_type.__name__)
                self.trace.add_warning(
                    section=section,
                    message=f"Ignoring Invalid Enum Value: {line}, Section: {section}",
                    raw=line,
                )
                continue
            result.append(member)  # type: ignore[arg-type]
        return result

    # -----------------------------
    # Records
    # -----------------------------
    def bind_report(self, section: str, record: Any, throw_on_error: bool = False) -> BindReport:
        """Preenche `record` in-place e retorna o relatório por campo."""
        return self._binder.bind(section, record, throw_on_error=throw_on_error)

    def bind_object(self, section: str, record: Any, throw_on_error: bool = False) -> bool:
        """
        Preenche `record` in-place a partir de `section`.

        Returns:
            True sse nenhum campo presente falhou na conversão.
        """
        return self.bind_report(section, record, throw_on_error).ok

    def bind_record(self, section: str, record: R, throw_on_error: bool = False) -> Tuple[bool, R]:
        """Como `bind_object`, aceitando registros frozen; retorna (ok, registro)."""
        report = self._binder.bind(section, record, throw_on_error=throw_on_error, in_place=False)
        return report.ok, report.record

    def try_read_record(
        self, record_type: Type[R], section: str, throw_on_error: bool = False
    ) -> Tuple[bool, R]:
        """Instancia `record_type` com valores zero e o preenche a partir de `section`."""
        record = describe_record(record_type).new_instance()
        return self.bind_record(section, record, throw_on_error)

    def read_record(self, record_type: Type[R], section: str, throw_on_error: bool = True) -> R:
        """Instancia `record_type`, preenche a partir de `section` e retorna o registro."""
        _, record = self.try_read_record(record_type, section, throw_on_error)
        return record
