"""Pixel statistics and row flipping for packed 8-bit image buffers."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]

RGB_CHANNELS = 3
MIN_CONTRAST = 30


def _rgb_samples(data: Buffer, width: int, height: int) -> bytes:
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")
    count = width * height * RGB_CHANNELS
    samples = bytes(data)
    if len(samples) < count:
        raise ValueError(
            f"buffer holds {len(samples)} bytes, {count} needed for {width}x{height} RGB"
        )
    return samples[:count]


def calculate_color_variance(data: Buffer, width: int, height: int) -> float:
    """Variance of all RGB channel values of a packed RGB24 image."""
    samples = _rgb_samples(data, width, height)
    count = len(samples)
    if count == 0:
        raise ValueError("cannot compute the variance of an empty image")
    total = sum(samples)
    total_sq = sum(value * value for value in samples)
    return (total_sq * count - total * total) / (count * count)


def is_frame_valid(data: Buffer, width: int, height: int) -> bool:
    """True when the RGB values span more than a flat black or white frame."""
    samples = _rgb_samples(data, width, height)
    if not samples:
        return False
    return max(samples) - min(samples) > MIN_CONTRAST


def flip_vertically(data: Buffer, width: int, height: int, channels: int) -> bytes:
    """Return the image with its rows in reverse order."""
    if width < 0 or height < 0 or channels < 0:
        raise ValueError("image dimensions must not be negative")
    stride = width * channels
    size = stride * height
    pixels = bytes(data)
    if len(pixels) < size:
        raise ValueError(f"buffer holds {len(pixels)} bytes, {size} needed")
    if stride == 0:
        return pixels
    rows = [pixels[start:start + stride] for start in range(0, size, stride)]
    return b"".join(reversed(rows)) + pixels[size:]