# src/atlas_settings/core/binding/descriptors.py
"""
Tabelas de descritores de campos para registros bindáveis.

O binder de registros não inspeciona objetos arbitrários em tempo de
leitura: cada tipo bindável possui uma tabela explícita de descritores
(nome do campo → getter/setter + tipo alvo), construída uma única vez
por tipo e mantida em cache.

Formas de obter uma tabela:
    - `@bindable` em uma dataclass (anotações resolvidas uma vez)
    - `register_record(cls, fields)` para classes comuns
    - `describe_record(cls)` constrói sob demanda para dataclasses não
      registradas e retorna tabela vazia para os demais tipos

Decisões arquiteturais:
    - Nome do campo == nome do setting (sem transformação)
    - Campos não públicos (prefixo `_`) fazem parte da tabela
    - Anotação não suportada gera descritor sem tipo alvo: a conversão
      desse campo sempre falha (falha de campo, não de construção)
    - Dataclasses frozen são o análogo de tipos-valor: nunca são mutadas
      in-place, o binder produz uma cópia

Invariantes:
    - A ordem dos descritores é a ordem de declaração dos campos
    - Uma tabela registrada nunca é reconstruída implicitamente
"""

from __future__ import annotations

import copy
import dataclasses
import datetime as _dt
import sys
import typing
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Type, TypeVar, Union

from ..conversion.types import SettingType, resolve_annotation, type_label

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]

R = TypeVar("R")

_ZERO_VALUES: Dict[SettingType, Any] = {
    SettingType.STRING: "",
    SettingType.BOOL: False,
    SettingType.INT32: 0,
    SettingType.UINT32: 0,
    SettingType.INT64: 0,
    SettingType.UINT64: 0,
    SettingType.FLOAT: 0.0,
    SettingType.DOUBLE: 0.0,
    SettingType.DECIMAL: Decimal(0),
    SettingType.TIMESPAN: _dt.timedelta(0),
    SettingType.DATETIME: _dt.datetime.min,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Descritor de um campo bindável.

    Campos:
        - name: nome do campo e do setting correspondente
        - kind: tipo alvo da conversão (None quando não suportado)
        - enum_type: classe do enum quando `kind` é ENUM
        - getter / setter: acesso ao campo (padrão: getattr/setattr)
        - required: o construtor exige valor para este campo
    """

    name: str
    kind: Optional[SettingType]
    enum_type: Optional[Type[Enum]] = None
    getter: Optional[Getter] = field(default=None, compare=False)
    setter: Optional[Setter] = field(default=None, compare=False)
    required: bool = False

    @property
    def target_type(self) -> str:
        return type_label(self.kind, self.enum_type)

    def get(self, record: Any) -> Any:
        if self.getter is not None:
            return self.getter(record)
        return getattr(record, self.name)

    def set(self, record: Any, value: Any) -> None:
        if self.setter is not None:
            self.setter(record, value)
        else:
            setattr(record, self.name, value)

    def zero_value(self) -> Any:
        if self.kind is SettingType.ENUM and self.enum_type is not None:
            return next(iter(self.enum_type))
        return _ZERO_VALUES.get(self.kind) if self.kind is not None else None


@dataclass(frozen=True)
class RecordDescriptor:
    """Tabela de descritores de um tipo bindável."""

    record_type: type
    fields: Tuple[FieldDescriptor, ...] = ()
    frozen: bool = False

    @property
    def type_name(self) -> str:
        return self.record_type.__name__

    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def new_instance(self) -> Any:
        """Instancia o registro com valores zero para os campos obrigatórios."""
        kwargs = {f.name: f.zero_value() for f in self.fields if f.required}
        return self.record_type(**kwargs)

    def with_values(self, record: R, values: Mapping[str, Any]) -> R:
        """
        Aplica `values` ao registro.

        Registros mutáveis são alterados in-place e retornados; registros
        frozen são copiados e a cópia recebe os valores.
        """
        if not values:
            return record
        if self.frozen:
            clone = copy.copy(record)
            for name, value in values.items():
                object.__setattr__(clone, name, value)
            return clone
        by_name = {f.name: f for f in self.fields}
        for name, value in values.items():
            by_name[name].set(record, value)
        return record


_REGISTRY: Dict[type, RecordDescriptor] = {}


def _local_names(cls: type) -> Dict[str, Any]:
    """Nomes visíveis para anotações de classes locais: a própria classe e os tipos dos defaults."""
    module = sys.modules.get(cls.__module__)
    module_names = vars(module) if module is not None else {}
    names: Dict[str, Any] = {}
    candidates = [cls] + [
        type(f.default)
        for f in dataclasses.fields(cls)
        if f.default is not dataclasses.MISSING and f.default is not None
    ]
    for candidate in candidates:
        if candidate.__name__ not in module_names:
            names.setdefault(candidate.__name__, candidate)
    return names


def _resolve_hints(cls: type) -> Dict[str, Any]:
    """
    Avalia as anotações dos campos de `cls`.

    Anotações em string (ex.: `from __future__ import annotations`) são
    resolvidas contra o módulo da classe e, para classes definidas dentro
    de funções, contra os tipos dos defaults. Quando a resolução do
    conjunto falha, cada campo é resolvido isoladamente: apenas o campo
    irresolvível fica sem tipo alvo.
    """
    localns = _local_names(cls)
    try:
        return typing.get_type_hints(cls, localns=localns, include_extras=True)
    except (NameError, TypeError):
        pass

    hints: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if not isinstance(f.type, str):
            hints[f.name] = f.type
            continue
        holder = type(
            f"_{cls.__name__}_{f.name}",
            (),
            {"__annotations__": {f.name: f.type}, "__module__": cls.__module__},
        )
        try:
            hints[f.name] = typing.get_type_hints(holder, localns=localns, include_extras=True)[f.name]
        except (NameError, TypeError, SyntaxError):
            continue
    return hints


def _dataclass_descriptor(cls: type) -> RecordDescriptor:
    hints = _resolve_hints(cls)

    fields = []
    for f in dataclasses.fields(cls):
        kind, enum_type = resolve_annotation(hints.get(f.name, f.type))
        required = (
            f.init
            and f.default is dataclasses.MISSING
            and f.default_factory is dataclasses.MISSING  # type: ignore[misc]
        )
        fields.append(FieldDescriptor(name=f.name, kind=kind, enum_type=enum_type, required=required))

    params = getattr(cls, "__dataclass_params__", None)
    return RecordDescriptor(
        record_type=cls,
        fields=tuple(fields),
        frozen=bool(params is not None and params.frozen),
    )


def bindable(cls: Type[R]) -> Type[R]:
    """
    Decorator que registra a tabela de descritores de uma dataclass.

    Raises:
        TypeError: se `cls` não for uma dataclass.
    """
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"@bindable requires a dataclass, got {cls!r}")
    _REGISTRY[cls] = _dataclass_descriptor(cls)
    return cls


FieldSpec = Union[SettingType, Type[Enum], FieldDescriptor]


def register_record(
    record_type: type,
    fields: Union[Mapping[str, FieldSpec], Iterable[FieldDescriptor]],
    *,
    frozen: bool = False,
) -> RecordDescriptor:
    """
    Registra explicitamente a tabela de descritores de `record_type`.

    Args:
        record_type: classe do registro (construível sem argumentos).
        fields: mapa `nome -> SettingType | classe Enum | FieldDescriptor`
            ou sequência de `FieldDescriptor`.
        frozen: o registro não aceita mutação in-place.

    Returns:
        A tabela registrada (substitui um registro anterior do mesmo tipo).
    """
    if isinstance(fields, Mapping):
        items = []
        for name, spec in fields.items():
            if isinstance(spec, FieldDescriptor):
                items.append(spec)
            elif isinstance(spec, SettingType):
                items.append(FieldDescriptor(name=name, kind=spec))
            elif isinstance(spec, type) and issubclass(spec, Enum):
                items.append(FieldDescriptor(name=name, kind=SettingType.ENUM, enum_type=spec))
            else:
                raise TypeError(f"Invalid field spec for {name!r}: {spec!r}")
    else:
        items = list(fields)

    names = [f.name for f in items]
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate field names for {record_type.__name__}: {names}")

    descriptor = RecordDescriptor(record_type=record_type, fields=tuple(items), frozen=frozen)
    _REGISTRY[record_type] = descriptor
    return descriptor


def describe_record(record_type: type) -> RecordDescriptor:
    """Retorna a tabela de `record_type`, construindo-a uma vez quando necessário."""
    descriptor = _REGISTRY.get(record_type)
    if descriptor is None:
        if dataclasses.is_dataclass(record_type):
            descriptor = _dataclass_descriptor(record_type)
        else:
            descriptor = RecordDescriptor(record_type=record_type)
        _REGISTRY[record_type] = descriptor
    return descriptor
