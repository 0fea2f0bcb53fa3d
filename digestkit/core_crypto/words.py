"""
32-bit Word Arithmetic

Every register, schedule entry and constant in MD5, SHA-1 and SHA-256 is a
32-bit unsigned integer. Python integers are unbounded, so each helper masks
its result back into [0, 2^32). Overflow is silent wraparound, never an error.
"""

# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF
WORD_BITS = 32


def add32(*values: int) -> int:
    """Sum any number of words modulo 2^32."""
    return sum(values) & MASK_32


def rotl(value: int, amount: int) -> int:
    """Left rotate a 32-bit integer by the specified amount."""
    amount %= WORD_BITS
    value &= MASK_32
    return ((value << amount) | (value >> (WORD_BITS - amount))) & MASK_32


def rotr(value: int, amount: int) -> int:
    """Right rotate a 32-bit integer by the specified amount."""
    amount %= WORD_BITS
    value &= MASK_32
    return ((value >> amount) | (value << (WORD_BITS - amount))) & MASK_32


def shr(value: int, amount: int) -> int:
    """Logical right shift (zero fill)."""
    return (value & MASK_32) >> amount


def not32(value: int) -> int:
    """Bitwise complement restricted to 32 bits."""
    return ~value & MASK_32


def byteswap32(value: int) -> int:
    """Reverse the byte order of a 32-bit word."""
    return int.from_bytes((value & MASK_32).to_bytes(4, byteorder='big'), byteorder='little')
