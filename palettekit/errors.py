# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Error taxonomy for palettekit.

Zero usable pixels during image extraction is not an error: the extractor
returns an empty list.
"""

from __future__ import annotations


class PaletteKitError(Exception):
    """Base class for all palettekit errors."""


class InvalidColorFormat(PaletteKitError, ValueError):
    """The input string is not a recognized hex/rgb/hsl/oklch literal."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unrecognized color format: {value!r}")


class ImageDecodeFailure(PaletteKitError, ValueError):
    """The image could not be fetched, read or decoded."""


class GamutClampError(PaletteKitError, RuntimeError):
    """Chroma reduction failed to bring an OKLCH color into sRGB."""
