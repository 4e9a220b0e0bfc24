# src/atlas_settings/core/binding/__init__.py
"""
Binding de registros do Atlas Settings.

Preenche registros do chamador a partir de uma seção de settings,
campo a campo, com isolamento de falhas por campo.

Componentes principais:
    - descriptors → tabelas explícitas de campos por tipo bindável
    - binder      → algoritmo de binding e BindReport
"""

from .binder import BindReport, FieldFailure, ObjectBinder
from .descriptors import (
    FieldDescriptor,
    RecordDescriptor,
    bindable,
    describe_record,
    register_record,
)

__all__ = [
    "BindReport",
    "FieldFailure",
    "ObjectBinder",
    "FieldDescriptor",
    "RecordDescriptor",
    "bindable",
    "describe_record",
    "register_record",
]
