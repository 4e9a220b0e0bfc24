# src/atlas_settings/core/conversion/unbox.py
"""
Unboxing de settings brutos.

Um valor bruto pode chegar "encaixotado" entre aspas (`"..."` ou `'...'`).
O unboxing remove um único par de aspas correspondentes e, quando
solicitado, decodifica sequências de escape internas.

Decisões arquiteturais:
    - Apenas aspas iguais nas duas pontas são removidas
    - Escapes desconhecidos são preservados literalmente
    - O binder de registros usa `decode_escapes=False`
"""

from __future__ import annotations

import re

_QUOTES = ('"', "'")

_ESCAPES = {
    "\\": "\\",
    '"': '"',
    "'": "'",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}

_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)


def _decode(match: "re.Match[str]") -> str:
    token = match.group(1)
    if len(token) == 5 and token[0] == "u":
        return chr(int(token[1:], 16))
    return _ESCAPES.get(token, match.group(0))


def decode_escape_sequences(text: str) -> str:
    return _ESCAPE_RE.sub(_decode, text)


def unbox_text(text: str, decode_escapes: bool = True) -> str:
    """
    Remove aspas envolventes de `text`.

    Args:
        text: valor bruto.
        decode_escapes: decodifica escapes do conteúdo desencaixotado.

    Returns:
        O conteúdo sem as aspas; o texto original quando não está entre aspas.
    """
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        text = text[1:-1]
        if decode_escapes:
            text = decode_escape_sequences(text)
    return text
