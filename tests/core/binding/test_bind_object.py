# tests/core/binding/test_bind_object.py
"""
Testes do binder de registros (`bind_object` / `bind_report`).

Este módulo valida o preenchimento in-place de registros a partir de
uma seção de settings.

Os testes asseguram que:
- campos ausentes ou vazios mantêm o valor atual e geram warning
- falhas de conversão são isoladas por campo no modo tolerante
- o modo estrito interrompe o binding na primeira falha
- o resultado é bem-sucedido sse nenhum campo presente falhou
- valores entre aspas são desencaixotados sem decodificar escapes

Decisões arquiteturais:
    - Registro None e registro sem campos são uso incorreto do binder
    - Registros frozen não são aceitos para mutação in-place

Invariantes:
    - O store nunca é mutado pelo binding
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Optional

import numpy as np
import pytest

try:
    from atlas_settings import (
        EmptyRecordError,
        FieldBindingError,
        MemorySettings,
        NullRecordError,
        SettingsReader,
        SettingType,
        register_record,
    )
except Exception as e:  # noqa: BLE001
    SettingsReader = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None

from tests.fixtures.records import (
    AllTypes,
    Color,
    LegacyRecord,
    NoFields,
    Point,
    ServerSettings,
    WithUnsupported,
)


def _require_imports():
    """
    Garante que o leitor tipado e o binder estejam disponíveis para os testes.

    Falha imediatamente quando os módulos não podem ser importados,
    evitando mensagens indiretas nos testes funcionais.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing binder modules. Implement:\n"
            "- src/atlas_settings/core/binding/binder.py (ObjectBinder)\n"
            "- src/atlas_settings/core/binding/descriptors.py (field tables)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def _reader(**sections) -> "SettingsReader":
    return SettingsReader(MemorySettings(sections, name="bind-test"))


def test_partial_success_reports_false_and_keeps_other_fields():
    """
    Verifica o sucesso parcial de um binding tolerante.

    Registro com 3 campos: um válido, um ausente e um inválido.
    Apenas o campo válido é alterado e o resultado é False.

    Invariantes:
        - O campo ausente mantém o valor anterior
        - O campo inválido mantém o valor anterior
        - Nenhuma exceção é levantada
    """
    _require_imports()
    reader = _reader(server=["host=example.org", "timeout=abc"])
    record = ServerSettings()

    assert reader.bind_object("server", record) is False

    assert record == ServerSettings(host="example.org", port=80, timeout=1.5)


def test_bind_report_details():
    _require_imports()
    reader = _reader(server=["host=example.org", "timeout=abc"])

    report = reader.bind_report("server", ServerSettings())

    assert report.ok is False
    assert report.record_type == "ServerSettings"
    assert report.bound == ["host"]
    assert report.skipped == ["port"]
    assert [(f.field, f.raw, f.target_type) for f in report.failed] == [("timeout", "abc", "double")]
    assert reader.trace.warnings_for("server") == [
        "Field is not set, using default value: int32 port",
        "Invalid field value abc for field double timeout",
    ]
    summary = reader.trace.events[-1]
    assert summary["level"] == "warning"
    assert (summary["bound"], summary["skipped"], summary["failed"]) == (1, 1, 1)


def test_absent_fields_do_not_fail_the_binding():
    _require_imports()
    reader = _reader(server=["port=9000", "host="])
    record = ServerSettings()

    assert reader.bind_object("server", record) is True
    assert record == ServerSettings(host="localhost", port=9000, timeout=1.5)


def test_strict_mode_raises_on_first_failure():
    _require_imports()
    reader = _reader(server=["host=example.org", "port=http", "timeout=abc"])
    record = ServerSettings()

    with pytest.raises(FieldBindingError) as exc:
        reader.bind_object("server", record, throw_on_error=True)

    assert exc.value.field == "port"
    assert exc.value.raw == "http"
    assert exc.value.target_type == "int32"
    # campos anteriores à falha já foram gravados
    assert record.host == "example.org"
    assert record.timeout == 1.5


def test_binds_every_supported_type():
    _require_imports()
    reader = _reader(
        all=[
            "name='hello\\n'",
            "enabled=true",
            "count=-5",
            "size=4000000000",
            "offset=-9000000000",
            "total=18446744073709551615",
            "ratio=0.1",
            "precise=0.1",
            "price=\"19.99\"",
            "interval=00:01:30",
            "started=2024-03-01 10:30",
            "color=blue",
            "nickname=atlas",
            "_secret=s3cr3t",
        ]
    )
    record = AllTypes()

    report = reader.bind_report("all", record)

    assert report.ok, report.failed
    assert report.skipped == []
    assert record.name == "hello\\n"
    assert record.enabled is True
    assert record.count == -5
    assert record.size == 4000000000
    assert record.offset == -9000000000
    assert record.total == 18446744073709551615
    assert record.ratio == float(np.float32(0.1))
    assert record.precise == 0.1
    assert record.price == Decimal("19.99")
    assert record.interval == timedelta(minutes=1, seconds=30)
    assert record.started == datetime(2024, 3, 1, 10, 30)
    assert record.color is Color.BLUE
    assert record.nickname == "atlas"
    assert record._secret == "s3cr3t"


@pytest.mark.parametrize(
    "line, field",
    [
        ("size=-1", "size"),
        ("count=2147483648", "count"),
        ("ratio=1e39", "ratio"),
        ("color=purple", "color"),
        ("enabled=1", "enabled"),
    ],
)
def test_field_width_and_format_failures(line, field):
    _require_imports()
    report = _reader(all=[line]).bind_report("all", AllTypes())
    assert [f.field for f in report.failed] == [field]


def test_unsupported_field_type_fails_only_that_field():
    _require_imports()
    reader = _reader(s=["tags=a,b", "level=3"])
    record = WithUnsupported()

    report = reader.bind_report("s", record)

    assert report.ok is False
    assert report.failed[0].target_type == "unsupported"
    assert record.level == 3
    assert record.tags == []


def test_null_record_raises():
    _require_imports()
    with pytest.raises(NullRecordError):
        _reader(s=["a=1"]).bind_object("s", None)
    with pytest.raises(ValueError):
        _reader(s=["a=1"]).bind_object("s", None, throw_on_error=True)


def test_empty_record():
    """
    Verifica o tratamento de um registro sem campos.

    Modo estrito levanta EmptyRecordError; modo tolerante retorna False
    e registra warning da seção, sem mutação.
    """
    _require_imports()
    reader = _reader(s=["a=1"])

    with pytest.raises(EmptyRecordError):
        reader.bind_object("s", NoFields(), throw_on_error=True)

    assert reader.bind_object("s", NoFields()) is False
    assert reader.trace.warnings_for("s") == ["No field in section s!"]


def test_frozen_record_cannot_be_bound_in_place():
    _require_imports()
    with pytest.raises(TypeError):
        _reader(p=["x=1"]).bind_object("p", Point(x=0, y=0))


def test_registered_plain_class():
    _require_imports()
    register_record(LegacyRecord, {"level": SettingType.INT32, "mode": Color})
    reader = _reader(legacy=["level=7", "mode=GREEN"])
    record = LegacyRecord()

    assert reader.bind_object("legacy", record) is True
    assert (record.level, record.mode) == (7, Color.GREEN)


def test_store_is_not_mutated_by_binding():
    _require_imports()
    reader = _reader(server=["host=example.org", "timeout=abc"])
    reader.bind_object("server", ServerSettings())
    assert reader.read_section("server") == ["host=example.org", "timeout=abc"]


def test_binds_dataclass_defined_in_function():
    """
    Verifica o binding de um registro declarado dentro de uma função.

    As anotações são strings que referenciam um enum local. Apenas o
    campo cuja anotação não pode ser resolvida fica sem tipo alvo; os
    demais são convertidos normalmente.
    """
    _require_imports()

    class Level(Enum):
        LOW = 1
        HIGH = 2

    @dataclass
    class LocalSettings:
        port: "int" = 0
        level: "Level" = Level.LOW
        label: "Optional[str]" = None
        extra: "UndefinedName" = ""  # noqa: F821

    reader = _reader(local=["port=8080", "level=high", "label=edge", "extra=x"])
    record = LocalSettings()

    report = reader.bind_report("local", record)

    assert report.bound == ["port", "level", "label"]
    assert [(f.field, f.target_type) for f in report.failed] == [("extra", "unsupported")]
    assert (record.port, record.level, record.label, record.extra) == (8080, Level.HIGH, "edge", "")
