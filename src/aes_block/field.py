"""
Arithmetic in the AES Galois field GF(2^8).

Elements are bytes (ints 0..255) read as polynomials over GF(2):
bit i is the coefficient of x^i.  Addition and subtraction are XOR;
multiplication is polynomial multiplication reduced modulo the AES
polynomial x^8 + x^4 + x^3 + x + 1 (0x11B).
"""

# x^8 + x^4 + x^3 + x + 1
REDUCER = 0x11B
REDUCER_BIT_COUNT = 9

BYTE_BITS = 8


def field_add(a: int, b: int) -> int:
    """Add two field elements."""
    return a ^ b


def field_sub(a: int, b: int) -> int:
    """Subtract b from a (identical to addition in characteristic 2)."""
    return a ^ b


def _carryless_mul(a: int, b: int) -> int:
    """
    Phase 1 of field_mul: multiply without carries.

    Returns a value of up to 15 bits.
    """
    result = 0
    for i in range(BYTE_BITS):
        if b & (1 << i):
            result ^= a << i
    return result


def _reduce(value: int) -> int:
    """
    Phase 2 of field_mul: reduce a product modulo REDUCER.

    Walks from the highest set bit down, XORing the reducer shifted
    under every set bit above position 7.
    """
    bit_count = value.bit_length()
    diff = bit_count - REDUCER_BIT_COUNT

    while diff >= 0:
        if value >> (bit_count - 1) & 1:
            value ^= REDUCER << diff
        bit_count -= 1
        diff -= 1

    return value


def field_mul(a: int, b: int) -> int:
    """
    Multiply two field elements.

    Args:
        a: first byte
        b: second byte

    Returns:
        Product of a and b in GF(2^8), always 0..255
    """
    return _reduce(_carryless_mul(a, b))


def xtime(a: int) -> int:
    """Multiply by x in GF(2^8)."""
    return ((a << 1) ^ 0x1b) & 0xff if a & 0x80 else (a << 1) & 0xff


def field_pow(a: int, n: int) -> int:
    """Raise a to the non-negative integer power n."""
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}")
    result = 1
    for _ in range(n):
        result = field_mul(result, a)
    return result
