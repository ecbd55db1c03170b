"""
Class-name escaping for generated selectors.

escape_class_name follows the CSSOM ``CSS.escape`` serialization, so a
generated name such as ``-m-4`` stays readable while names that would not be
valid identifiers (``0.5``, ``4``, ``-4``) are escaped. It is the default
selector-escaping capability; hosts may inject their own.
"""

from __future__ import annotations

from collections.abc import Callable

Escaper = Callable[[str], str]


def escape_class_name(name: str) -> str:
    """Return *name* escaped for use as a CSS class selector (without the dot)."""
    out: list[str] = []
    length = len(name)
    for index, char in enumerate(name):
        code = ord(char)
        if code == 0:
            out.append("\ufffd")
        elif 0x01 <= code <= 0x1F or code == 0x7F:
            out.append(_hex_escape(char))
        elif index == 0 and char.isdigit() and char.isascii():
            out.append(_hex_escape(char))
        elif index == 1 and char.isdigit() and char.isascii() and name[0] == "-":
            out.append(_hex_escape(char))
        elif index == 0 and char == "-" and length == 1:
            out.append("\\-")
        elif code >= 0x80 or char in "-_" or (char.isascii() and char.isalnum()):
            out.append(char)
        else:
            out.append("\\" + char)
    return "".join(out)


def _hex_escape(char: str) -> str:
    return f"\\{ord(char):x} "
