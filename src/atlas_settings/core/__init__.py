# src/atlas_settings/core/__init__.py
"""
Core do Atlas Settings.

Este pacote contém a implementação canônica da camada de acesso a
settings: o contrato de store consumido, a conversão string → tipo,
o acessor tipado e o binder de registros.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de I/O (I/O pertence aos stores concretos)
    - orientado a contratos explícitos

Componentes principais:
    - store      → contrato `SettingsStore` e stores de referência
    - conversion → Culture, tipos alvo, parsers, formatação e unboxing
    - reader     → `SettingsReader`, `SettingResult`, `SettingsTrace`
    - binding    → descritores de campos e binder de registros

Limites explícitos:
    - Não é um framework de configuração (sem merge, sem overlay de ambiente)
    - Não observa mudanças no store
"""
