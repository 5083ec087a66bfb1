"""Copying and appending NUL-terminated strings inside fixed-size ``bytearray`` buffers."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _string(src: Buffer) -> bytes:
    """Bytes of ``src`` up to, not including, its first NUL."""
    data = bytes(src)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _end(buf: bytearray) -> int:
    end = buf.find(0)
    if end < 0:
        raise ValueError("buffer holds no NUL terminator")
    return end


def _ensure_room(buf: bytearray, needed: int) -> None:
    if needed > len(buf):
        raise ValueError(f"need {needed} bytes but buffer holds {len(buf)}")


def strcpy(dst: bytearray, src: Buffer) -> bytearray:
    """Copy the string in ``src`` and its terminator to the start of ``dst``."""
    text = _string(src)
    _ensure_room(dst, len(text) + 1)
    dst[:len(text) + 1] = text + b"\0"
    return dst


def strncpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy at most ``n`` bytes of ``src``, padding with NULs up to ``n``.

    No terminator is added when ``src`` is ``n`` bytes or longer.
    """
    if n < 0:
        raise ValueError(f"negative length {n}")
    _ensure_room(dst, n)
    dst[:n] = _string(src)[:n].ljust(n, b"\0")
    return dst


def strcat(dst: bytearray, src: Buffer) -> bytearray:
    """Append the string in ``src`` to the string in ``dst``."""
    start = _end(dst)
    text = _string(src)
    _ensure_room(dst, start + len(text) + 1)
    dst[start:start + len(text) + 1] = text + b"\0"
    return dst


def strncat(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Append at most ``n`` bytes of ``src`` to ``dst``, always terminating."""
    if n < 0:
        raise ValueError(f"negative length {n}")
    start = _end(dst)
    text = _string(src)[:n]
    _ensure_room(dst, start + len(text) + 1)
    dst[start:start + len(text) + 1] = text + b"\0"
    return dst


def strlcat(dst: bytearray, src: Buffer, size: int) -> int:
    """Append ``src`` to ``dst`` without writing past ``size`` bytes.

    Returns the length of the string it tried to create: the initial length
    of ``dst`` (capped at ``size``) plus the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    _ensure_room(dst, size)
    text = _string(src)
    head = dst.find(0, 0, size)
    dst_len = size if head < 0 else head
    if dst_len == size:
        return size + len(text)
    copied = text[:size - dst_len - 1]
    dst[dst_len:dst_len + len(copied) + 1] = copied + b"\0"
    return dst_len + len(text)


def strclr(buf: Optional[bytearray]) -> None:
    """Zero every byte of the string held in ``buf``; a missing buffer is ignored."""
    if buf is None:
        return
    end = buf.find(0)
    if end < 0:
        end = len(buf)
    buf[:end] = bytes(end)