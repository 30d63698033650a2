"""
Visitor identity tokens derived from IPv4 addresses.

The token is a cheap pseudo-identity used to deduplicate likes and to
authorize visitor comment deletion. It is lossy (the octet boundaries are
dropped before parsing, so ``1.11.1.1`` and ``11.1.1.1`` share a token) and
offers no protection against spoofed addresses.

Tokens must stay byte-identical to the ones already persisted, so the integer
arithmetic follows 32-bit signed semantics:

>>> encode_ip("192.168.1.1")
'mvrkm'
>>> encode_ip("255.255.255.255")
'-9rmk42'
"""

from math import isfinite
from re import compile as re_compile

# Leading zeros are dropped so only significant digits reach int()
_LEADING_INT = re_compile(r"\s*([+-]?)0*(\d+)")
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

INT32_MODULUS = 1 << 32
INT32_MAX = (1 << 31) - 1


def parse_int_prefix(text: str | None) -> int | None:
    """
    Parse the leading base-10 integer of a string.

    Leading whitespace and a sign are accepted, parsing stops at the first
    non-digit. Returns None when no digit leads the string, and also when the
    digit run is beyond the range of a double (where ``parseInt`` would give
    ``Infinity``), so arbitrarily long input never reaches ``int()``.

    Examples
    --------
    >>> parse_int_prefix("42abc")
    42
    >>> parse_int_prefix("abc") is None
    True
    >>> parse_int_prefix("9" * 5000) is None
    True
    """
    if text is None:
        return None
    found = _LEADING_INT.match(text)
    if not found:
        return None
    sign, digits = found.groups()
    if not isfinite(float(digits)):
        return None
    return int(sign + digits)


def to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value %= INT32_MODULUS
    return value - INT32_MODULUS if value > INT32_MAX else value


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_DIGITS[rem])
    return sign + "".join(reversed(digits))


def encode_ip(ip: str) -> str:
    """
    Encode a dotted IPv4 string into a short base-36 token.

    The octets are concatenated, parsed as one integer, shifted left by one
    bit and rendered in base 36. Input without a leading number, or with a
    number too long to represent, encodes to ``"0"``. Numbers above 2**53 are
    rounded to a double first, as a JavaScript number would be.

    Args:
        ip: Dotted-quad address, e.g. ``"192.168.1.1"``.

    Returns:
        The visitor token.
    """
    number = parse_int_prefix("".join(ip.split(".")))
    if number is None:
        return "0"
    return to_base36(to_int32(to_int32(int(float(number))) << 1))
