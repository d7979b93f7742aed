"""Image splitter module for RGBA channel maps."""

from pathlib import Path
from typing import Dict, Union

import numpy as np
from PIL import Image

from .channels import Channel, extract_plane

OUTPUT_FORMAT = "PNG"

# Single-band modes wider than 8 bits, scaled or clipped down before RGBA conversion
_WIDE_GRAY_MODES = ("I;16", "I;16L", "I;16B", "I;16N")
_CLIPPED_GRAY_MODES = ("I", "F")

_UINT16_MAX = 65535


def _holds_16bit_gray(image: Image.Image, values: np.ndarray) -> bool:
    """Mode I images carrying 16-bit samples, as some Pillow versions decode 16-bit PNGs."""
    if image.mode != "I" or values.size == 0:
        return False
    return values.min() >= 0 and 255 < values.max() <= _UINT16_MAX


def to_rgba(image: Image.Image) -> np.ndarray:
    """
    Convert a decoded image of any mode into an RGBA buffer.

    Args:
        image: Decoded Pillow image.

    Returns:
        Contiguous uint8 array of shape (H, W, 4). Images without an
        alpha band come out fully opaque.
    """
    if image.mode in _WIDE_GRAY_MODES:
        gray = (np.asarray(image, dtype=np.uint32) // 257).astype(np.uint8)
        image = Image.fromarray(gray)
    elif image.mode in _CLIPPED_GRAY_MODES:
        values = np.asarray(image)
        if _holds_16bit_gray(image, values):
            gray = (values.astype(np.uint32) // 257).astype(np.uint8)
        else:
            gray = np.clip(values, 0, 255).astype(np.uint8)
        image = Image.fromarray(gray)

    if image.mode != "RGBA":
        image = image.convert("RGBA")

    return np.ascontiguousarray(np.asarray(image, dtype=np.uint8))


def split_channels(rgba: np.ndarray) -> Dict[Channel, np.ndarray]:
    """
    Split an RGBA buffer into one grayscale image per channel.

    Args:
        rgba: Source image of shape (H, W, 4). Read only, never copied.

    Returns:
        Dict mapping each Channel to an independent (H, W, 4) uint8 array.
    """
    return {channel: extract_plane(rgba, channel) for channel in Channel}


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Decode an image file (first frame) into an RGBA buffer."""
    with Image.open(path) as img:
        img.load()
        return to_rgba(img)


def save_channel(plane: np.ndarray, path: Union[str, Path]) -> Path:
    """Save a channel image as an 8-bit grayscale PNG."""
    path = Path(path)
    gray = np.ascontiguousarray(plane[..., 0])
    Image.fromarray(gray).save(path, format=OUTPUT_FORMAT)
    return path


def split_image(path: Union[str, Path]) -> Dict[Channel, np.ndarray]:
    """Load an image file and split it into its four channel images."""
    return split_channels(load_image(path))
