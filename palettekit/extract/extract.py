# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Image-to-palette extraction API.

Pipeline: decode → resize (≤ 200 px) → stride-sample and filter pixels →
k-means++ / Lloyd clustering in sRGB → colors ordered by cluster size.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Optional

from palettekit.extract.kmeans import Cluster, cluster_pixels, sample_pixels
from palettekit.extract.loader import ImageSource, image_pixels, load_image
from palettekit.model.color import clamp_int, from_rgb
from palettekit.schema import ColorResult


logger = logging.getLogger(__name__)


DEFAULT_COLOR_COUNT = 8
MIN_COLOR_COUNT = 2
MAX_COLOR_COUNT = 20

# Fixed by default so the same image always yields the same palette
DEFAULT_SEED = 42


def extract_clusters(
    source: ImageSource,
    color_count: int = DEFAULT_COLOR_COUNT,
    *,
    seed: Optional[int] = DEFAULT_SEED,
) -> list[Cluster]:
    """
    Decode an image and cluster its usable pixels.

    Args:
        source: Bytes, path, http(s) URL, data URL or PIL image
        color_count: Requested clusters, clamped to [2, 20]
        seed: k-means++ seed; None for a non-reproducible run

    Returns:
        Clusters sorted by member count, largest first. Empty when the image
        has no usable pixels (fully transparent, or only near-black/white).

    Raises:
        ImageDecodeFailure: The source could not be read or decoded
    """
    k = clamp_int(color_count, MIN_COLOR_COUNT, MAX_COLOR_COUNT)

    img = load_image(source)
    pixels = sample_pixels(image_pixels(img))

    if len(pixels) == 0:
        logger.info(
            "No usable pixels in %dx%d image; returning empty palette", *img.size
        )
        return []

    clusters = cluster_pixels(pixels, k, seed=seed)
    logger.debug(
        "Clustered %d sampled pixels into %d colors (k=%d)",
        len(pixels),
        len(clusters),
        k,
    )
    return clusters


def extract_colors(
    source: ImageSource,
    color_count: int = DEFAULT_COLOR_COUNT,
    *,
    seed: Optional[int] = DEFAULT_SEED,
) -> list[ColorResult]:
    """
    Extract the dominant colors of an image.

    Example::

        from palettekit import extract_colors

        colors = extract_colors("photo.jpg", 6)
        [c.hex for c in colors]

    Returns:
        At most color_count colors (clamped to [2, 20]), most frequent
        first. Cluster centers are rounded half-up to integer channels.
    """
    return [
        from_rgb(*cluster.center)
        for cluster in extract_clusters(source, color_count, seed=seed)
    ]


async def extract_colors_async(
    source: ImageSource,
    color_count: int = DEFAULT_COLOR_COUNT,
    *,
    seed: Optional[int] = DEFAULT_SEED,
) -> list[ColorResult]:
    """
    Awaitable extract_colors.

    Decoding (including URL fetches) and clustering run in the loop's
    default executor, so the event loop is not blocked.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None,
        functools.partial(extract_colors, source, color_count, seed=seed),
    )
