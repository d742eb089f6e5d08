"""Truncated SHA-1 content fingerprints for change detection"""

import hashlib


FINGERPRINT_BYTES = 6


def fingerprint(data: bytes, size: int = FINGERPRINT_BYTES) -> str:
    """Return the first `size` bytes of the SHA-1 digest as lowercase hex.

    Short and human-scannable; not suitable where uniqueness matters.
    """
    return hashlib.sha1(data).digest()[:size].hex()
