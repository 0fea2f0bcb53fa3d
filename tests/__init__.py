# digestkit Test Suite
"""
Unit and integration tests for the hash engine.

Run with: pytest
Reference digests come from the `cryptography` package (pip install .[test]).
"""
