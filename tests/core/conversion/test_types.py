# tests/core/conversion/test_types.py
"""
Testes da resolução de tipos alvo.

Os testes asseguram que:
- anotações de campo resolvem para o SettingType correto
- `int`/`float` sem largura explícita são int32/double
- valores semente derivam o tipo alvo, com bool antes de int
- anotações não suportadas resolvem para (None, None)
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional

import pytest

from atlas_settings import Float32, Int32, Int64, SettingType, UInt32, UInt64
from atlas_settings.core.conversion.types import infer_setting_type, resolve_annotation, type_label
from tests.fixtures.records import Color


@pytest.mark.parametrize(
    "annotation, expected",
    [
        (str, SettingType.STRING),
        (bool, SettingType.BOOL),
        (int, SettingType.INT32),
        (float, SettingType.DOUBLE),
        (Decimal, SettingType.DECIMAL),
        (timedelta, SettingType.TIMESPAN),
        (datetime, SettingType.DATETIME),
        (Int32, SettingType.INT32),
        (UInt32, SettingType.UINT32),
        (Int64, SettingType.INT64),
        (UInt64, SettingType.UINT64),
        (Float32, SettingType.FLOAT),
        (Optional[int], SettingType.INT32),
        (Optional[UInt64], SettingType.UINT64),
    ],
)
def test_resolve_annotation(annotation, expected):
    assert resolve_annotation(annotation) == (expected, None)


def test_resolve_enum_annotation():
    assert resolve_annotation(Color) == (SettingType.ENUM, Color)
    assert resolve_annotation(Optional[Color]) == (SettingType.ENUM, Color)


@pytest.mark.parametrize("annotation", [List[str], dict, object, Optional[List[int]]])
def test_unsupported_annotation(annotation):
    assert resolve_annotation(annotation) == (None, None)


def test_infer_setting_type_from_seed():
    assert infer_setting_type(True) == (SettingType.BOOL, None)
    assert infer_setting_type(7) == (SettingType.INT32, None)
    assert infer_setting_type(7.0) == (SettingType.DOUBLE, None)
    assert infer_setting_type("x") == (SettingType.STRING, None)
    assert infer_setting_type(Color.RED) == (SettingType.ENUM, Color)
    assert infer_setting_type(object()) == (None, None)


def test_type_label():
    assert type_label(SettingType.UINT64) == "uint64"
    assert type_label(SettingType.ENUM, Color) == "Color"
    assert type_label(None) == "unsupported"
