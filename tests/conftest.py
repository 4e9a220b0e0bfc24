# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Settings.

Este módulo define fixtures reutilizáveis que fornecem:
- um store em memória com seções determinísticas
- um leitor tipado (`SettingsReader`) sobre esse store
- uma Culture alternativa (vírgula decimal, dia antes do mês)

O objetivo destas fixtures é permitir testes do core (conversão,
leitor tipado e binder) sem depender de:
- filesystem
- locale do processo
- variáveis de ambiente

Decisões arquiteturais:
    - O conteúdo do store é declarado como linhas brutas (`chave=valor`)
    - Imports do core são realizados de forma lazy, como nos demais fixtures
    - Cada teste recebe um store novo (sem estado compartilhado)

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture depende de ordem de execução
"""

import pytest


@pytest.fixture
def settings_sections() -> dict:
    """
    Seções brutas usadas pela maioria dos testes do leitor.

    Returns:
        dict: mapa `seção -> linhas`, incluindo comentários e linhas vazias.
    """
    return {
        "server": [
            "# servidor principal",
            "host=example.org",
            "port=8080",
            "timeout=2.5",
            "",
            "port=9090",
        ],
        "values": [
            "pi=3.14",
            "count=abc",
            "enabled=TRUE",
            "flag=1",
            "big=4294967296",
            "negative=-12",
            "money=(1,234.50)",
            "ratio=0.1",
            "price=19.99",
            "interval=1.02:03:04.5",
            "started=2024-03-01T10:30:00",
            "color=green",
            "quoted=\"hello\"",
            "blank=",
            "spaced =  padded value  ",
        ],
        "colors": [
            "; cores aceitas",
            "Red",
            "green",
            "bogus",
        ],
        "empty": [],
    }


@pytest.fixture
def memory_store(settings_sections):
    from atlas_settings import MemorySettings

    return MemorySettings(settings_sections, name="test-settings")


@pytest.fixture
def reader(memory_store):
    """
    Leitor tipado determinístico sobre `memory_store`.

    O trace é criado pelo próprio leitor e pode ser inspecionado via
    `reader.trace` nos testes de binding e de listas de enums.
    """
    from atlas_settings import SettingsReader

    return SettingsReader(memory_store)


@pytest.fixture
def comma_culture():
    """Culture com vírgula decimal, ponto de milhar e dia antes do mês."""
    from atlas_settings import Culture

    return Culture(
        name="pt-BR",
        decimal_separator=",",
        group_separator=".",
        currency_symbol="R$",
        dayfirst=True,
    )
