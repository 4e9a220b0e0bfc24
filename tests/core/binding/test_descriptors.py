# tests/core/binding/test_descriptors.py
"""
Testes das tabelas de descritores de campos.

Os testes asseguram que:
- dataclasses geram uma tabela na ordem de declaração dos campos
- anotações `Annotated` definem a largura explícita de inteiros e floats
- campos não públicos fazem parte da tabela
- classes comuns só são bindáveis via `register_record`
- registros frozen são copiados, nunca mutados

Decisões arquiteturais:
    - A tabela é construída uma única vez por tipo e mantida em cache
"""

from dataclasses import dataclass
from datetime import datetime

import pytest

from atlas_settings import FieldDescriptor, SettingType, bindable, register_record
from atlas_settings.core.binding.descriptors import describe_record
from tests.fixtures.records import (
    AllTypes,
    Color,
    LegacyRecord,
    NoFields,
    Point,
    RequiredFields,
    WithUnsupported,
)


def test_dataclass_table_follows_declaration_order():
    descriptor = describe_record(AllTypes)

    assert descriptor.field_names() == (
        "name", "enabled", "count", "size", "offset", "total", "ratio",
        "precise", "price", "interval", "started", "color", "nickname", "_secret",
    )
    kinds = {f.name: f.kind for f in descriptor.fields}
    assert kinds["count"] is SettingType.INT32
    assert kinds["size"] is SettingType.UINT32
    assert kinds["offset"] is SettingType.INT64
    assert kinds["total"] is SettingType.UINT64
    assert kinds["ratio"] is SettingType.FLOAT
    assert kinds["precise"] is SettingType.DOUBLE
    assert kinds["nickname"] is SettingType.STRING
    assert kinds["_secret"] is SettingType.STRING


def test_table_is_cached():
    assert describe_record(AllTypes) is describe_record(AllTypes)


def test_enum_and_unsupported_fields():
    color = describe_record(AllTypes).fields[11]
    assert (color.kind, color.enum_type, color.target_type) == (SettingType.ENUM, Color, "Color")

    tags = describe_record(WithUnsupported).fields[0]
    assert tags.kind is None
    assert tags.target_type == "unsupported"


def test_frozen_and_required_fields():
    descriptor = describe_record(Point)
    assert descriptor.frozen is True
    assert [f.required for f in descriptor.fields] == [True, True, False]


def test_new_instance_uses_zero_values_for_required_fields():
    assert describe_record(RequiredFields).new_instance() == RequiredFields(name="", port=0, color=Color.RED)
    assert describe_record(Point).new_instance() == Point(x=0, y=0)


def test_zero_values():
    assert FieldDescriptor(name="d", kind=SettingType.DATETIME).zero_value() == datetime.min
    assert FieldDescriptor(name="e", kind=SettingType.ENUM, enum_type=Color).zero_value() is Color.RED
    assert FieldDescriptor(name="u", kind=None).zero_value() is None


def test_with_values_copies_frozen_records():
    descriptor = describe_record(Point)
    original = Point(x=1, y=2)

    updated = descriptor.with_values(original, {"y": 5})

    assert updated == Point(x=1, y=5)
    assert original == Point(x=1, y=2)
    assert descriptor.with_values(original, {}) is original


def test_plain_class_has_empty_table():
    class Plain:
        value = 1

    assert describe_record(Plain).fields == ()


def test_bindable_requires_dataclass():
    with pytest.raises(TypeError):
        bindable(LegacyRecord)


def test_no_fields_dataclass():
    assert describe_record(NoFields).fields == ()


def test_register_record_from_mapping():
    descriptor = register_record(LegacyRecord, {"level": SettingType.INT64, "mode": Color})

    assert describe_record(LegacyRecord) is descriptor
    assert [(f.name, f.kind, f.enum_type) for f in descriptor.fields] == [
        ("level", SettingType.INT64, None),
        ("mode", SettingType.ENUM, Color),
    ]


def test_register_record_rejects_duplicates_and_invalid_specs():
    class Target:
        pass

    with pytest.raises(ValueError):
        register_record(
            Target,
            [FieldDescriptor(name="a", kind=SettingType.STRING), FieldDescriptor(name="a", kind=SettingType.BOOL)],
        )
    with pytest.raises(TypeError):
        register_record(Target, {"a": int})


def test_field_descriptor_custom_accessors():
    store = {}
    fd = FieldDescriptor(
        name="x",
        kind=SettingType.INT32,
        getter=lambda record: store.get("x"),
        setter=lambda record, value: store.__setitem__("x", value),
    )

    fd.set(object(), 3)

    assert fd.get(object()) == 3


@dataclass
class _Late:
    value: "int" = 0


def test_string_annotations_are_resolved():
    assert describe_record(_Late).fields[0].kind is SettingType.INT32
