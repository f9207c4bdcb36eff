# digits.py

"""
Decimal conversion for integers of any size.

str() and int() refuse numbers longer than the interpreter's digit limit
(4300 by default), so large values are split into halves around a power of
ten and converted piecewise.
"""

# Well below the interpreter's smallest allowed limit (640)
_CHUNK = 600

_LOG10_2 = 0.30102999566398


def _unsigned_to_str(n, width=0):
    if n < 10 ** _CHUNK:
        text = str(n)
        return text.zfill(width) if width else text
    # estimate never exceeds the true digit count, so high is never 0
    half = int(n.bit_length() * _LOG10_2) // 2
    high, low = divmod(n, 10 ** half)
    return _unsigned_to_str(high, width - half if width else 0) + _unsigned_to_str(low, half)


def int_to_ascii(n):
    """Returns the decimal ASCII form of *n*, with a leading '-' if negative."""
    if n < 0:
        return b'-' + _unsigned_to_str(-n).encode('ascii')
    return _unsigned_to_str(n).encode('ascii')


def ascii_to_int(digits):
    """Parses an unsigned run of ASCII digits."""
    if len(digits) <= _CHUNK:
        return int(digits)
    half = len(digits) // 2
    return ascii_to_int(digits[:-half]) * 10 ** half + ascii_to_int(digits[-half:])
