"""Byte-buffer operations on mutable ``bytearray`` objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_span(buf: Buffer, n: int, start: int = 0) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if start < 0 or start + n > len(buf):
        raise ValueError(
            f"span of {n} bytes at offset {start} exceeds buffer of {len(buf)} bytes"
        )


def memalloc(size: int) -> bytearray:
    """Return a new zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"negative size {size}")
    return bytearray(size)


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_span(buf, n)
    buf[:n] = bytes(n)


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``c`` taken as an unsigned byte."""
    _check_span(buf, length)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_span(dst, n)
    _check_span(src, n)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: Buffer, c: int, n: int) -> Optional[int]:
    """Copy up to ``n`` bytes, stopping after the first byte equal to ``c``.

    Returns the index in ``dst`` just past the copied ``c``, or None if
    ``c`` was not met within ``n`` bytes.
    """
    _check_span(dst, n)
    _check_span(src, n)
    stop = bytes(src[:n]).find(c & 0xFF)
    count = n if stop < 0 else stop + 1
    dst[:count] = bytes(src[:count])
    return None if stop < 0 else count


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes from offset ``src`` to offset ``dst`` of ``buf``; overlap is safe."""
    _check_span(buf, length, src)
    _check_span(buf, length, dst)
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _check_span(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0