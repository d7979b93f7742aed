"""RGBA channel definitions and single-channel extraction."""

from enum import Enum
from typing import NamedTuple

import numpy as np

OPAQUE = 255


class Channel(Enum):
    """Pixel components, valued by their index in an RGBA buffer."""

    R = 0
    G = 1
    B = 2
    A = 3


class Pixel(NamedTuple):
    r: int
    g: int
    b: int
    a: int


def extract(pixel: Pixel, channel: Channel) -> Pixel:
    """
    Convert a pixel into an opaque grayscale pixel of one component.

    Args:
        pixel: Source pixel.
        channel: Component to keep.

    Returns:
        Pixel with R=G=B set to the selected component and A=255.
    """
    value = pixel[channel.value]
    return Pixel(value, value, value, OPAQUE)


def extract_plane(rgba: np.ndarray, channel: Channel) -> np.ndarray:
    """
    Vectorized form of `extract` over a whole image.

    Args:
        rgba: Image buffer of shape (H, W, 4), dtype uint8.
        channel: Component to keep.

    Returns:
        New (H, W, 4) uint8 buffer with R=G=B=component and A=255.
        The source buffer is only read.
    """
    if rgba.ndim != 3 or rgba.shape[2] != 4:
        raise ValueError(f"Expected an (H, W, 4) RGBA array, got shape {rgba.shape}")

    height, width = rgba.shape[:2]
    plane = np.empty((height, width, 4), dtype=np.uint8)
    plane[..., :3] = rgba[..., channel.value, np.newaxis]
    plane[..., 3] = OPAQUE
    return plane
