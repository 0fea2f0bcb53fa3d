"""
SHA-1 Hash Implementation (From Scratch)

Implements SHA-1 as defined in FIPS 180-4. Like MD5 it is kept for its
structure, not for security.

Components:
- Message Schedule: 16 words expanded to 80 with a 1-bit left rotation
- Compression: 80 rounds in four stages of 20, each stage with its own
  boolean function and constant
- Output: 160-bit (20-byte) digest, big-endian words
"""

from typing import List, Optional

from .constants import SHA1_INITIAL_STATE, SHA1_K
from .merkle_damgard import HashAlgorithm, RoundParameters, hash_message, hash_state, digest_bytes
from .words import add32, not32, rotl
from ..integration.tracing import Tracer


ROUNDS = 80


def _ch(x: int, y: int, z: int) -> int:
    """Choice function: rounds 0-19."""
    return (x & y) | (not32(x) & z)


def _parity(x: int, y: int, z: int) -> int:
    """Parity function: rounds 20-39 and 60-79."""
    return x ^ y ^ z


def _maj(x: int, y: int, z: int) -> int:
    """Majority function: rounds 40-59."""
    return (x & y) | (x & z) | (y & z)


ROUND_FUNCTIONS = (_ch, _parity, _maj, _parity)


def expand_schedule(words: List[int]) -> List[int]:
    """
    Expand 16 words into 80 words for the message schedule.

    For i from 16 to 79:
        W[i] = (W[i-3] ^ W[i-8] ^ W[i-14] ^ W[i-16]) <<< 1
    """
    w = list(words)
    for i in range(16, ROUNDS):
        w.append(rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
    return w


def _build_round_parameters(index: int) -> RoundParameters:
    stage = index // 20
    return RoundParameters(
        index=index,
        stage=stage,
        schedule_index=index,
        constant=SHA1_K[stage],
    )


ROUND_TABLE = tuple(_build_round_parameters(i) for i in range(ROUNDS))


def round_parameters(index: int) -> RoundParameters:
    """Precomputed parameters for round `index`."""
    return ROUND_TABLE[index]


def round_step(registers: List[int], word: int, params: RoundParameters) -> List[int]:
    """One SHA-1 round on registers [A, B, C, D, E]."""
    a, b, c, d, e = registers
    f = ROUND_FUNCTIONS[params.stage](b, c, d)
    temp = add32(rotl(a, 5), f, e, params.constant, word)
    return [temp, a, rotl(b, 30), c, d]


ALGORITHM = HashAlgorithm(
    name='sha1',
    initial_state=SHA1_INITIAL_STATE,
    length_byteorder='big',
    word_byteorder='big',
    schedule_length=ROUNDS,
    rounds=ROUNDS,
    expand_schedule=expand_schedule,
    round_table=ROUND_TABLE,
    round_step=round_step,
)


def sha1(data: bytes, tracer: Optional[Tracer] = None) -> bytes:
    """Compute the SHA-1 hash of the input data as 20 bytes."""
    return digest_bytes(ALGORITHM, hash_state(ALGORITHM, data, tracer))


def sha1_hex(data: bytes, tracer: Optional[Tracer] = None) -> str:
    """
    Compute SHA-1 hash and return as hexadecimal string.

    Example:
        >>> sha1_hex(b"abc")
        'a9993e364706816aba3e25717850c26c9cd0d89d'
    """
    return hash_message(ALGORITHM, data, tracer)


def sha1_string(text: str, encoding: str = 'utf-8') -> bytes:
    """Compute SHA-1 hash of a string."""
    return sha1(text.encode(encoding))


digest = sha1_hex
