"""Deterministic random ski maps for benchmarks and demos."""

from __future__ import annotations

import hashlib

import numpy as np

from skimap.config import DEFAULT_MAX_ELEVATION


def _normalize_seed(seed: int) -> int:
    return int(seed) & ((1 << 64) - 1)


def derive_seed(seed: int, key: str, *, namespace: str = "skimap-v1") -> int:
    """Derive a child seed so different map sizes never share a stream."""

    payload = f"{namespace}:{_normalize_seed(seed)}:{key}".encode("utf-8")
    digest = hashlib.blake2b(payload, digest_size=8, person=b"skimap00").digest()
    return int.from_bytes(digest, byteorder="big", signed=False)


def random_elevations(
    width: int,
    height: int,
    *,
    max_elevation: int = DEFAULT_MAX_ELEVATION,
    seed: int = 0,
) -> np.ndarray:
    """Uniform integer elevations in ``[0, max_elevation]`` with shape ``(height, width)``."""

    if width < 0 or height < 0:
        raise ValueError("width and height must be non-negative")
    if max_elevation < 0:
        raise ValueError("max_elevation must be non-negative")

    child = derive_seed(seed, f"{width}x{height}:{max_elevation}")
    generator = np.random.Generator(np.random.PCG64(np.uint64(child)))
    return generator.integers(0, max_elevation, size=(height, width), endpoint=True, dtype=np.int32)
