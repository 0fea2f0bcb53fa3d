# Core Cryptography Module
"""
Merkle-Damgard hash implementations:
- MD5 (RFC 1321)
- SHA-1 (FIPS 180-4)
- SHA-256 (FIPS 180-4)

All three share the padding, block splitting and compression driver in
bits.py and merkle_damgard.py.
"""
