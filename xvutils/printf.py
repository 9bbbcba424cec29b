"""Minimal printf-style formatting: %d, %l, %x, %p, %s, %c and %%."""

import sys

_DIGITS = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _int32(value):
    """Truncate an integer to a signed 32-bit value."""
    value = int(value) & _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _printint(xx, base, signed):
    negative = signed and xx < 0
    x = (-xx if negative else xx) & _MASK32
    digits = []
    while True:
        digits.append(_DIGITS[x % base])
        x //= base
        if x == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def _string(value):
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _char(value):
    if isinstance(value, str):
        return value[:1]
    return chr(int(value) & 0xFF)


def format(fmt, *args):
    """Render fmt with args the way the small user-space printf does.

    Unknown conversions are echoed as-is to draw attention; a lone
    trailing '%' is dropped.
    """
    values = iter(args)

    def take():
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    pieces = []
    chars = iter(fmt)
    for c in chars:
        if c != "%":
            pieces.append(c)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "d":
            pieces.append(_printint(_int32(take()), 10, True))
        elif spec == "l":
            pieces.append(_printint(_int32(take()), 10, False))
        elif spec == "x":
            pieces.append(_printint(_int32(take()), 16, False))
        elif spec == "p":
            pieces.append(f"0x{int(take()) & _MASK64:016X}")
        elif spec == "s":
            pieces.append(_string(take()))
        elif spec == "c":
            pieces.append(_char(take()))
        elif spec == "%":
            pieces.append("%")
        else:
            pieces.append("%" + spec)
    return "".join(pieces)


def fprintf(stream, fmt, *args):
    """Write the formatted text to stream."""
    stream.write(format(fmt, *args))


def printf(fmt, *args):
    """Write the formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)