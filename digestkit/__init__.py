# digestkit
"""
Byte-to-digest hashing with MD5, SHA-1 and SHA-256, built from scratch on
one Merkle-Damgard engine.

Example:
    >>> from digestkit import hexdigest
    >>> hexdigest('sha1', b'abc')
    'a9993e364706816aba3e25717850c26c9cd0d89d'

These algorithms are reproduced for study. MD5 and SHA-1 are broken; use
hashlib for anything security related.
"""

from typing import Dict, Optional

from .core_crypto import md5 as _md5, sha1 as _sha1, sha256 as _sha256
from .core_crypto.bits import InvariantError
from .core_crypto.merkle_damgard import HashAlgorithm, hash_message
from .core_crypto.md5 import md5, md5_hex, md5_string
from .core_crypto.sha1 import sha1, sha1_hex, sha1_string
from .core_crypto.sha256 import sha256, sha256_hex, sha256_string
from .integration.tracing import Tracer


__version__ = '1.0.0'

ALGORITHMS: Dict[str, HashAlgorithm] = {
    'md5': _md5.ALGORITHM,
    'sha1': _sha1.ALGORITHM,
    'sha256': _sha256.ALGORITHM,
}


def get_algorithm(name: str) -> HashAlgorithm:
    """Look up an algorithm by name ('sha-256' and 'SHA256' both work)."""
    key = name.lower().replace('-', '').replace('_', '')
    try:
        return ALGORITHMS[key]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm {name!r}; expected one of {', '.join(ALGORITHMS)}"
        ) from None


def hexdigest(name: str, message: bytes, tracer: Optional[Tracer] = None) -> str:
    """Hash `message` with the named algorithm and return lowercase hex."""
    return hash_message(get_algorithm(name), message, tracer)


__all__ = [
    'ALGORITHMS',
    'HashAlgorithm',
    'InvariantError',
    'Tracer',
    'get_algorithm',
    'hexdigest',
    'md5',
    'md5_hex',
    'md5_string',
    'sha1',
    'sha1_hex',
    'sha1_string',
    'sha256',
    'sha256_hex',
    'sha256_string',
]
