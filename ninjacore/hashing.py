"""MurmurHash2, used to hash path strings."""

from __future__ import annotations

__all__ = ["murmur_hash2"]

_SEED = 0xDECAFBAD
_M = 0x5BD1E995
_R = 24
_MASK = 0xFFFFFFFF


def murmur_hash2(data: bytes | str) -> int:
    """Return the 32-bit MurmurHash2 of data (str is hashed as UTF-8)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    length = len(data)
    h = (_SEED ^ length) & _MASK

    body_end = length - length % 4
    for offset in range(0, body_end, 4):
        k = int.from_bytes(data[offset:offset + 4], "little")
        k = (k * _M) & _MASK
        k ^= k >> _R
        k = (k * _M) & _MASK
        h = (h * _M) & _MASK
        h ^= k

    tail = data[body_end:]
    if tail:
        for shift, byte in reversed(list(enumerate(tail))):
            h ^= byte << (8 * shift)
        h = (h * _M) & _MASK

    h ^= h >> 13
    h = (h * _M) & _MASK
    h ^= h >> 15
    return h