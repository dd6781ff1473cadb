"""A small printf: %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional

from solong.libft.chars import itoa

_UINT_MOD = 1 << 32
_INT_MAX = (1 << 31) - 1
_UINTPTR_MOD = 1 << 64


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _as_signed32(n: int) -> int:
    n %= _UINT_MOD
    return n - _UINT_MOD if n > _INT_MAX else n


def format_dec(n: int) -> str:
    """Return ``n`` as a signed 32-bit decimal, wrapping values out of range."""
    return itoa(_as_signed32(_require_int(n, "d")))


def format_unsigned(n: int) -> str:
    """Return ``n`` as an unsigned 32-bit decimal, wrapping values out of range."""
    return str(_require_int(n, "u") % _UINT_MOD)


def format_hex(n: int, upper: bool = False) -> str:
    """Return ``n`` as unsigned 32-bit hexadecimal, without prefix."""
    value = _require_int(n, "X" if upper else "x") % _UINT_MOD
    return format(value, "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """Return an address as ``0x`` and lower-case hex, or ``(nil)`` for a null one."""
    if address is None:
        return "(nil)"
    value = _require_int(address, "p") % _UINTPTR_MOD
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


def format_str(s: Optional[str]) -> str:
    """Return ``s`` itself, or ``(null)`` for None."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"%s expects a string or None, got {type(s).__name__}")
    return s


def _format_char(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"%c expects a single character, got {c!r}")
        return c
    return chr(_require_int(c, "c") & 0xFF)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_dec,
    "i": format_dec,
    "u": format_unsigned,
    "x": lambda v: format_hex(v, False),
    "X": lambda v: format_hex(v, True),
}


def sformat(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    An unknown conversion letter is dropped together with its ``%``; a lone
    ``%`` at the very end is dropped too. Surplus arguments are ignored and
    too few raise TypeError.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded ``fmt`` to standard output and return its length."""
    text = sformat(fmt, *args)
    sys.stdout.write(text)
    return len(text)