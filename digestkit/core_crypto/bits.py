"""
Message Preprocessing (Merkle-Damgard Padding)

Turns a message into a padded bit sequence and slices it into 512-bit blocks.

Components:
- BitPacker: bytes -> bit string, 8 bits per byte, most significant bit first
- Padder: appends '1', Z zero bits and the 64-bit length field
- BlockSplitter: 512-bit blocks, each sixteen 32-bit words

Bits are kept as a str of '0'/'1' characters. This makes every step of the
padding rule visible, and lets the padder work for bit lengths that are not a
multiple of 8.

Padding rules:
1. Append bit '1' to the message
2. Append Z zeros, Z = (512 - 64 - 1 - L) mod 512
3. Append L as a 64-bit integer: big-endian for SHA-1/SHA-256,
   little-endian for MD5
"""

from typing import List

from .words import WORD_BITS, byteswap32


BLOCK_BITS = 512
LENGTH_FIELD_BITS = 64

BYTE_ORDERS = ('big', 'little')


class InvariantError(AssertionError):
    """
    Raised when an internal invariant of the hash pipeline is violated.

    This always signals a defect in the implementation, never bad input.
    """
    pass


def _check_byteorder(byteorder: str) -> None:
    if byteorder not in BYTE_ORDERS:
        raise ValueError(f"byteorder must be 'big' or 'little', got {byteorder!r}")


# ============================================================================
# BitPacker
# ============================================================================

def to_bits(message: bytes) -> str:
    """
    Convert a byte sequence into its bit representation.

    Example:
        >>> to_bits(b"a")
        '01100001'
    """
    return ''.join(format(byte, '08b') for byte in message)


def bits_to_bytes(bits: str) -> bytes:
    """Pack a bit string (MSB first) back into bytes."""
    if len(bits) % 8 != 0:
        raise ValueError(f"Bit string length must be a multiple of 8, got {len(bits)}")
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))


# ============================================================================
# Padder
# ============================================================================

def zero_padding_length(bit_length: int) -> int:
    """Number of '0' bits placed between the '1' bit and the length field."""
    return (BLOCK_BITS - LENGTH_FIELD_BITS - 1 - bit_length) % BLOCK_BITS


def encode_length(bit_length: int, byteorder: str) -> str:
    """
    Encode the message bit-length as the 64-bit trailing field.

    The conversion goes through int.to_bytes with an explicit byte order,
    so the result does not depend on the host's endianness.

    Args:
        bit_length: Original message length in bits (reduced mod 2^64)
        byteorder: 'big' (SHA family) or 'little' (MD5)

    Returns:
        64-character bit string
    """
    _check_byteorder(byteorder)
    field = (bit_length % (1 << LENGTH_FIELD_BITS)).to_bytes(
        LENGTH_FIELD_BITS // 8, byteorder=byteorder
    )
    return to_bits(field)


def decode_length(padded: str, byteorder: str) -> int:
    """Read the original bit-length back out of a padded message."""
    _check_byteorder(byteorder)
    field = bits_to_bytes(padded[-LENGTH_FIELD_BITS:])
    return int.from_bytes(field, byteorder=byteorder)


def pad_bits(bits: str, byteorder: str) -> str:
    """
    Apply the Merkle-Damgard padding rule to an arbitrary bit string.

    Args:
        bits: Message bits ('0'/'1' characters)
        byteorder: Byte order of the length field

    Returns:
        Padded bit string whose length is a multiple of 512
    """
    bit_length = len(bits)
    padded = (
        bits
        + '1'
        + '0' * zero_padding_length(bit_length)
        + encode_length(bit_length, byteorder)
    )

    if len(padded) % BLOCK_BITS != 0:
        raise InvariantError(
            f"Padded length {len(padded)} is not a multiple of {BLOCK_BITS}"
        )
    return padded


def pad_message(message: bytes, byteorder: str) -> str:
    """Pad a byte message; see pad_bits."""
    return pad_bits(to_bits(message), byteorder)


def block_count(byte_length: int) -> int:
    """Number of 512-bit blocks the padded form of a message occupies."""
    bit_length = byte_length * 8
    return (bit_length + 1 + zero_padding_length(bit_length) + LENGTH_FIELD_BITS) // BLOCK_BITS


# ============================================================================
# BlockSplitter
# ============================================================================

def split_blocks(padded: str) -> List[str]:
    """Slice a padded bit string into 512-bit blocks."""
    if len(padded) % BLOCK_BITS != 0:
        raise InvariantError(
            f"Cannot split {len(padded)} bits into {BLOCK_BITS}-bit blocks"
        )
    return [padded[i:i + BLOCK_BITS] for i in range(0, len(padded), BLOCK_BITS)]


def block_words(block: str, byteorder: str) -> List[int]:
    """
    Convert a 512-bit block into sixteen 32-bit words.

    Words are read big-endian from the bit string. For byteorder='little'
    (MD5) every word is byte-swapped, so the first byte of each 4-byte group
    becomes the least significant.
    """
    _check_byteorder(byteorder)
    if len(block) != BLOCK_BITS:
        raise InvariantError(f"Block must be {BLOCK_BITS} bits, got {len(block)}")

    words = [int(block[i:i + WORD_BITS], 2) for i in range(0, BLOCK_BITS, WORD_BITS)]
    if byteorder == 'little':
        words = [byteswap32(word) for word in words]
    return words
