"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4.
This implementation avoids using hashlib and builds the algorithm on the
shared Merkle-Damgard engine.

Components:
- Padding: Pads message to multiple of 512 bits (big-endian length)
- Message Schedule: Expands 16 words to 64 words
- Compression: 64 rounds of compression function
- Output: 256-bit (32-byte) digest
"""

from typing import List, Optional

from .constants import SHA256_INITIAL_STATE, SHA256_K
from .merkle_damgard import HashAlgorithm, RoundParameters, hash_message, hash_state, digest_bytes
from .words import add32, not32, rotr, shr
from ..integration.tracing import Tracer


ROUNDS = 64


def _ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return (x & y) ^ (not32(x) & z)


def _maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def _sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return rotr(x, 7) ^ rotr(x, 18) ^ shr(x, 3)


def _sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return rotr(x, 17) ^ rotr(x, 19) ^ shr(x, 10)


def _big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def _big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


def expand_schedule(words: List[int]) -> List[int]:
    """
    Expand 16 words into 64 words for the message schedule.

    For i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    w = list(words)
    for i in range(16, ROUNDS):
        w.append(add32(w[i - 16], _sigma0(w[i - 15]), w[i - 7], _sigma1(w[i - 2])))
    return w


def _build_round_parameters(index: int) -> RoundParameters:
    return RoundParameters(
        index=index,
        stage=0,
        schedule_index=index,
        constant=SHA256_K[index],
    )


ROUND_TABLE = tuple(_build_round_parameters(i) for i in range(ROUNDS))


def round_parameters(index: int) -> RoundParameters:
    """Precomputed parameters for round `index`."""
    return ROUND_TABLE[index]


def round_step(registers: List[int], word: int, params: RoundParameters) -> List[int]:
    """
    One SHA-256 round on registers [a, b, c, d, e, f, g, h].

    t1 = h + Σ1(e) + Ch(e, f, g) + K[i] + W[i]
    t2 = Σ0(a) + Maj(a, b, c)

    h is retired; t1 + t2 enters at a and d + t1 replaces e.
    """
    a, b, c, d, e, f, g, h = registers
    t1 = add32(h, _big_sigma1(e), _ch(e, f, g), params.constant, word)
    t2 = add32(_big_sigma0(a), _maj(a, b, c))
    return [add32(t1, t2), a, b, c, add32(d, t1), e, f, g]


ALGORITHM = HashAlgorithm(
    name='sha256',
    initial_state=SHA256_INITIAL_STATE,
    length_byteorder='big',
    word_byteorder='big',
    schedule_length=ROUNDS,
    rounds=ROUNDS,
    expand_schedule=expand_schedule,
    round_table=ROUND_TABLE,
    round_step=round_step,
)


def sha256(data: bytes, tracer: Optional[Tracer] = None) -> bytes:
    """
    Compute the SHA-256 hash of the input data.
    
    Args:
        data: Input bytes to hash
        tracer: Optional round tracer
        
    Returns:
        256-bit (32-byte) digest as bytes
        
    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return digest_bytes(ALGORITHM, hash_state(ALGORITHM, data, tracer))


def sha256_hex(data: bytes, tracer: Optional[Tracer] = None) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.
    
    Args:
        data: Input bytes to hash
        tracer: Optional round tracer
        
    Returns:
        64-character hexadecimal string
    """
    return hash_message(ALGORITHM, data, tracer)


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute SHA-256 hash of a string.
    
    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)
        
    Returns:
        256-bit (32-byte) digest as bytes
    """
    return sha256(text.encode(encoding))


digest = sha256_hex
