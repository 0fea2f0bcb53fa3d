#!/usr/bin/env python
"""
DIGESTKIT LIVE DEMO

Prints MD5, SHA-1 and SHA-256 digests for a few sample messages, or for the
messages given on the command line.

Set DIGESTKIT_TRACE=1 to log every compression round.

    python live_demo.py
    DIGESTKIT_TRACE=1 python live_demo.py abc
"""

import logging
import sys

from digestkit import hexdigest, ALGORITHMS
from digestkit.config import get_settings


DEFAULT_MESSAGES = ["", "1", "abc", "The quick brown fox jumps over the lazy dog"]


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def main(argv=None):
    settings = get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    messages = argv if argv else DEFAULT_MESSAGES

    print_header("DIGESTKIT - MERKLE-DAMGARD HASHES")
    for raw_message in messages:
        print(f"\n  Raw: {raw_message!r}")
        data = raw_message.encode('utf-8')
        for name in ALGORITHMS:
            print(f"    {name.upper():<7} {hexdigest(name, data)}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
