# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Pixel sampling and k-means clustering in sRGB.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray


# Stride sampling keeps roughly this many pixels
SAMPLE_TARGET = 10_000

# Pixels below this alpha are treated as transparent
MIN_ALPHA = 128

# Mean channel brightness outside this range is near-black/near-white
MIN_BRIGHTNESS = 5
MAX_BRIGHTNESS = 250

LLOYD_ITERATIONS = 10


@dataclass(frozen=True, slots=True)
class Cluster:
    """
    A group of similar pixels.

    Attributes:
        center: Mean (r, g, b) of member pixels, 0-255 floats
        count: Number of member pixels
    """
    center: tuple[float, float, float]
    count: int


def sample_pixels(rgba: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Stride-sample usable pixels.

    Takes every max(1, N // SAMPLE_TARGET)-th pixel, then drops transparent
    pixels (alpha < 128) and near-black or near-white pixels (mean of
    r, g, b below 5 or above 250).

    Args:
        rgba: (N, 4) uint8 array

    Returns:
        (M, 3) float64 array of RGB values, M may be 0
    """
    stride = max(1, len(rgba) // SAMPLE_TARGET)
    sampled = rgba[::stride]

    rgb = sampled[:, :3].astype(np.float64)
    brightness = rgb.sum(axis=1) / 3.0
    usable = (
        (sampled[:, 3] >= MIN_ALPHA)
        & (brightness >= MIN_BRIGHTNESS)
        & (brightness <= MAX_BRIGHTNESS)
    )
    return rgb[usable]


def _squared_distances(
    data: NDArray[np.float64],
    centroids: NDArray[np.float64],
) -> NDArray[np.float64]:
    """(N, k) squared Euclidean distances via broadcasting."""
    return np.sum(
        (data[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2,
        axis=2,
    )


def _kmeans_plus_plus(
    data: NDArray[np.float64],
    k: int,
    rng: np.random.Generator,
) -> NDArray[np.float64]:
    n, d = data.shape
    centroids = np.empty((k, d), dtype=np.float64)

    # First centroid: uniform
    centroids[0] = data[rng.integers(n)]

    # Remaining: weighted by squared distance to the nearest chosen centroid
    for i in range(1, k):
        dists = np.min(_squared_distances(data, centroids[:i]), axis=1)
        total = dists.sum()
        if total == 0:
            centroids[i] = data[rng.integers(n)]
        else:
            centroids[i] = data[rng.choice(n, p=dists / total)]

    return centroids


def kmeans(
    data: NDArray[np.float64],
    k: int,
    iterations: int = LLOYD_ITERATIONS,
    seed: Optional[int] = None,
) -> tuple[NDArray[np.float64], NDArray[np.int64]]:
    """
    Vectorized k-means with k-means++ initialization.

    Runs a fixed number of Lloyd iterations (stopping early only when the
    assignment stops changing), then assigns every point once more against
    the final centroids. Ties go to the lowest centroid index.

    Args:
        data: Array of shape (N, D), N >= k
        k: Number of clusters
        iterations: Lloyd iterations
        seed: Random seed

    Returns:
        (centroids, labels) where:
        - centroids: (k, D) array of cluster centers
        - labels: (N,) final assignment
    """
    if k < 1 or len(data) < k:
        raise ValueError(f"Need at least k={k} points, got {len(data)}")

    rng = np.random.default_rng(seed)
    centroids = _kmeans_plus_plus(data, k, rng)
    labels = np.full(len(data), -1, dtype=np.int64)

    for _ in range(iterations):
        old_labels = labels
        labels = np.argmin(_squared_distances(data, centroids), axis=1)

        if np.array_equal(labels, old_labels):
            break

        # Empty clusters keep their previous center
        for j in range(k):
            mask = labels == j
            if np.any(mask):
                centroids[j] = data[mask].mean(axis=0)

    labels = np.argmin(_squared_distances(data, centroids), axis=1)
    return centroids, labels


def cluster_pixels(
    pixels: NDArray[np.float64],
    k: int,
    seed: Optional[int] = None,
) -> list[Cluster]:
    """
    Cluster RGB pixels into at most k groups.

    Args:
        pixels: (N, 3) RGB array
        k: Requested cluster count
        seed: Random seed for k-means++ seeding

    Returns:
        Non-empty clusters sorted by count, largest first (ties keep
        centroid order). With N <= k every pixel is its own cluster.
    """
    if len(pixels) == 0:
        return []

    if len(pixels) <= k:
        return [Cluster(center=tuple(float(v) for v in p), count=1) for p in pixels]

    centroids, labels = kmeans(pixels, k, seed=seed)
    counts = np.bincount(labels, minlength=k)

    clusters = [
        Cluster(center=tuple(float(v) for v in centroids[j]), count=int(counts[j]))
        for j in range(k)
        if counts[j] > 0
    ]
    clusters.sort(key=lambda c: c.count, reverse=True)
    return clusters
