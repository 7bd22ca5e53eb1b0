# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Image loading for palette extraction.

Accepts raw bytes, file paths, http(s) URLs, data URLs and open PIL images.
Every image is normalized to RGBA and shrunk so its longer edge is at most
MAX_EDGE pixels. Failures surface as ImageDecodeFailure, chained to the
underlying error.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
from pathlib import Path
from typing import Union
from urllib.parse import unquote_to_bytes

import numpy as np
import requests
from numpy.typing import NDArray
from PIL import Image, ImageCms

from palettekit.errors import ImageDecodeFailure


logger = logging.getLogger(__name__)


# Longer edge after resizing
MAX_EDGE = 200

# Seconds before a URL fetch is abandoned
FETCH_TIMEOUT = 10

ImageSource = Union[bytes, bytearray, str, Path, Image.Image]


def load_image(source: ImageSource) -> Image.Image:
    """
    Decode an image source into a resized RGBA PIL image.

    Args:
        source: One of:
            - bytes: encoded image data (PNG, JPEG, ...)
            - str or Path: file path
            - str starting with http:// or https://: fetched with requests
            - str starting with data:: base64 (or percent-encoded) payload
            - PIL.Image.Image: used as-is (not modified)

    Returns:
        RGBA image whose longer edge is at most MAX_EDGE pixels

    Raises:
        ImageDecodeFailure: Unreadable, corrupt or unreachable image
    """
    try:
        if isinstance(source, Image.Image):
            img = source
        else:
            img = Image.open(io.BytesIO(_read_bytes(source)))
            img.load()
        rgba = _to_srgb_rgba(img)
    except ImageDecodeFailure:
        raise
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageDecodeFailure(f"Could not decode image: {e}") from e

    return _shrink(rgba)


def _read_bytes(source: Union[bytes, bytearray, str, Path]) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)

    if isinstance(source, str):
        if source.startswith(("http://", "https://")):
            return _fetch(source)
        if source.startswith("data:"):
            return _decode_data_url(source)

    if isinstance(source, (str, Path)):
        return Path(source).read_bytes()

    raise TypeError(
        f"Expected bytes, path, URL or PIL image, got {type(source).__name__}"
    )


def _fetch(url: str) -> bytes:
    logger.debug("Fetching image from %s", url)
    try:
        response = requests.get(url, timeout=FETCH_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        raise ImageDecodeFailure(f"Could not fetch image from {url}: {e}") from e
    return response.content


def _decode_data_url(url: str) -> bytes:
    """Decode `data:[<mediatype>][;base64],<data>`."""
    header, sep, payload = url[len("data:"):].partition(",")
    if not sep:
        raise ImageDecodeFailure("Malformed data URL: missing ','")

    if header.endswith(";base64"):
        try:
            return base64.b64decode(payload, validate=False)
        except binascii.Error as e:
            raise ImageDecodeFailure(f"Malformed base64 in data URL: {e}") from e

    return unquote_to_bytes(payload)


def _to_srgb_rgba(img: Image.Image) -> Image.Image:
    """
    Convert to RGBA, remapping embedded ICC profiles to sRGB.

    convert('RGBA') alone does NOT remap from embedded profiles (Display P3,
    Adobe RGB), so pixels would read as shifted colors.
    """
    rgba = img.convert("RGBA")

    icc = img.info.get("icc_profile")
    if not icc:
        return rgba

    try:
        embedded = ImageCms.ImageCmsProfile(io.BytesIO(icc))
        srgb = ImageCms.createProfile("sRGB")
        return ImageCms.profileToProfile(rgba, embedded, srgb, outputMode="RGBA")
    except (ImageCms.PyCMSError, OSError, ValueError) as e:
        # Unusable profile: keep the untagged pixel values
        logger.debug("Ignoring embedded ICC profile: %s", e)
        return rgba


def fit_size(width: int, height: int, max_edge: int = MAX_EDGE) -> tuple[int, int]:
    """
    Target size with the longer edge capped at max_edge.

    Aspect ratio is preserved and images are never upscaled.
    """
    if width > height:
        if width > max_edge:
            return max_edge, max(1, round(height * max_edge / width))
    elif height > max_edge:
        return max(1, round(width * max_edge / height)), max_edge
    return width, height


def _shrink(img: Image.Image) -> Image.Image:
    size = fit_size(*img.size)
    if size == img.size:
        return img
    return img.resize(size, Image.Resampling.LANCZOS)


def image_pixels(img: Image.Image) -> NDArray[np.uint8]:
    """Flatten an RGBA image into an (N, 4) uint8 array in row-major order."""
    return np.asarray(img.convert("RGBA"), dtype=np.uint8).reshape(-1, 4)
