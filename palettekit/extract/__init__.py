# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palette extraction from images.

All clustering is pixel-based and deterministic for a fixed seed.
"""

from palettekit.extract.extract import (
    extract_clusters,
    extract_colors,
    extract_colors_async,
)
from palettekit.extract.kmeans import Cluster
from palettekit.extract.loader import load_image

__all__ = [
    "extract_colors",
    "extract_colors_async",
    "extract_clusters",
    "Cluster",
    "load_image",
]
