"""
MD5 Hash Implementation (From Scratch)

Implements MD5 as defined in RFC 1321 on top of the shared Merkle-Damgard
engine. MD5 is reproduced for its arithmetic structure; it is broken and must
not be used for security.

Differences from the SHA family:
- The padding length field is little-endian
- Block words are read little-endian
- No schedule expansion: round i reads word g(i) of the block
- Digest words are emitted little-endian
"""

from typing import List, Optional

from .constants import MD5_INITIAL_STATE, MD5_K, MD5_ROTATIONS
from .merkle_damgard import HashAlgorithm, RoundParameters, hash_message, hash_state, digest_bytes
from .words import add32, not32, rotl
from ..integration.tracing import Tracer


ROUNDS = 64
SCHEDULE_LENGTH = 16


def _f(b: int, c: int, d: int) -> int:
    """Round 1: if b then c else d (bitwise)."""
    return (b & c) | (not32(b) & d)


def _g(b: int, c: int, d: int) -> int:
    """Round 2: if d then b else c (bitwise)."""
    return (b & d) | (c & not32(d))


def _h(b: int, c: int, d: int) -> int:
    """Round 3: parity."""
    return b ^ c ^ d


def _i(b: int, c: int, d: int) -> int:
    """Round 4."""
    return c ^ (b | not32(d))


ROUND_FUNCTIONS = (_f, _g, _h, _i)


def schedule_index(index: int) -> int:
    """Which of the block's 16 words round `index` consumes."""
    if index < 16:
        return index
    if index < 32:
        return (5 * index + 1) % 16
    if index < 48:
        return (3 * index + 5) % 16
    return (7 * index) % 16


def expand_schedule(words: List[int]) -> List[int]:
    """MD5 uses the block words directly (already little-endian)."""
    return list(words)


def _build_round_parameters(index: int) -> RoundParameters:
    return RoundParameters(
        index=index,
        stage=index // 16,
        schedule_index=schedule_index(index),
        constant=MD5_K[index],
        rotation=MD5_ROTATIONS[index],
    )


ROUND_TABLE = tuple(_build_round_parameters(i) for i in range(ROUNDS))


def round_parameters(index: int) -> RoundParameters:
    """Precomputed parameters for round `index`."""
    return ROUND_TABLE[index]


def round_step(registers: List[int], word: int, params: RoundParameters) -> List[int]:
    """
    One MD5 operation on registers [A, B, C, D].

    B' = B + ((A + F(B, C, D) + M[g] + K[i]) <<< s[i])

    The register array is then rotated right by one: D moves into A's slot,
    B' takes B's slot, and B, C shift into C and D.
    """
    a, b, c, d = registers
    f = ROUND_FUNCTIONS[params.stage](b, c, d)
    new_b = add32(b, rotl(add32(a, f, params.constant, word), params.rotation))
    return [d, new_b, b, c]


ALGORITHM = HashAlgorithm(
    name='md5',
    initial_state=MD5_INITIAL_STATE,
    length_byteorder='little',
    word_byteorder='little',
    schedule_length=SCHEDULE_LENGTH,
    rounds=ROUNDS,
    expand_schedule=expand_schedule,
    round_table=ROUND_TABLE,
    round_step=round_step,
)


def md5(data: bytes, tracer: Optional[Tracer] = None) -> bytes:
    """
    Compute the MD5 hash of the input data.

    Returns:
        128-bit (16-byte) digest as bytes
    """
    return digest_bytes(ALGORITHM, hash_state(ALGORITHM, data, tracer))


def md5_hex(data: bytes, tracer: Optional[Tracer] = None) -> str:
    """
    Compute MD5 hash and return as hexadecimal string.

    Example:
        >>> md5_hex(b"")
        'd41d8cd98f00b204e9800998ecf8427e'
    """
    return hash_message(ALGORITHM, data, tracer)


def md5_string(text: str, encoding: str = 'utf-8') -> bytes:
    """Compute MD5 hash of a string."""
    return md5(text.encode(encoding))


digest = md5_hex
