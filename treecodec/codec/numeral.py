"""
Positional numeral helpers shared by the Prüfer ordinals.

Python ``int`` is arbitrary precision, so every conversion here is exact for
tree counts far beyond 64 bits (``n**(n-2)`` passes ``2**64`` near ``n = 20``).
"""


def _check_base(base: int) -> None:
    if base < 2:
        raise ValueError(f"base must be >= 2. Got {base}.")


def to_digits(value: int, base: int) -> list[int]:
    """
    Represent a nonnegative integer in base ``base``.

    The most-significant digit comes first and there is always at least one
    digit, so ``to_digits(0, b) == [0]``.
    """
    _check_base(base)
    if value < 0:
        raise ValueError(f"value must be >= 0. Got {value}.")
    x = int(value)
    digits: list[int] = [x % base]
    x //= base
    while x > 0:
        digits.append(x % base)
        x //= base
    digits.reverse()
    return digits


def from_digits(digits: list[int], base: int) -> int:
    """Inverse of ``to_digits``: ``sum(d_i * base**(len - 1 - i))``."""
    _check_base(base)
    total = 0
    for digit in digits:
        total = total * base + int(digit)
    return total


def to_fixed_digits(value: int, num_digits: int, base: int) -> list[int]:
    """
    Represent a nonnegative integer in base ``base`` with fixed length ``num_digits``.

    Leading zero digits pad short values. Raises ``ValueError`` if ``value``
    does not fit in ``num_digits`` digits.
    """
    digits = to_digits(value, base)
    if num_digits == 0 and value == 0:
        return []
    if len(digits) > num_digits:
        raise ValueError(f"{value} needs {len(digits)} base-{base} digits, more than {num_digits}.")
    return [0] * (num_digits - len(digits)) + digits
