# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Atlas Settings.

Estes testes garantem apenas que o pacote é importável e que o
namespace público expõe os pontos de entrada documentados.

Limites explícitos:
    - Não testar lógica de conversão ou binding
    - Não acumular asserts funcionais
"""


def test_smoke():
    """Sentinela mínima: o pytest descobre e executa testes."""
    assert True


def test_public_namespace_is_importable():
    import atlas_settings

    for name in atlas_settings.__all__:
        assert hasattr(atlas_settings, name), name
