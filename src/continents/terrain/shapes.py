"""Decorative shape overlay: a smiley face carved out as inland seas."""

import math

import numpy as np
from numpy.typing import NDArray

from .regions import RegionDescriptor


class SmileyFeatures:
    """Eye and mouth geometry for one continent.

    All sizes scale with the grid height. Eyes sit above the continent
    center (y grows north) and the mouth below it.
    """

    def __init__(self, region: RegionDescriptor, grid_height: int):
        self.eye_radius = grid_height // 12
        self.mouth_width = grid_height // 6
        self.mouth_height = grid_height // 12

        self.center_x = region.center_x
        self.center_y = grid_height / 2
        self.left_eye_x = self.center_x - self.eye_radius * 2
        self.right_eye_x = self.center_x + self.eye_radius * 2
        self.eye_y = self.center_y + self.eye_radius * 2
        self.mouth_y = self.center_y - self.eye_radius * 2

    def contains(self, x: float, y: float) -> bool:
        """Whether (x, y) falls inside an eye or the mouth."""
        return bool(self.mask(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)))

    def mask(self, xs: NDArray, ys: NDArray) -> NDArray[np.bool_]:
        """Vectorized membership test for coordinate arrays."""
        left_eye = np.hypot(xs - self.left_eye_x, ys - self.eye_y) < self.eye_radius
        right_eye = np.hypot(xs - self.right_eye_x, ys - self.eye_y) < self.eye_radius

        if self.mouth_width > 0:
            curve = np.sin((xs - self.center_x) / self.mouth_width * math.pi) * self.mouth_height
            mouth = (np.abs(ys - (self.mouth_y + curve)) < self.mouth_height / 2) & (
                np.abs(xs - self.center_x) < self.mouth_width
            )
        else:
            mouth = np.zeros(np.broadcast(xs, ys).shape, dtype=bool)

        return left_eye | right_eye | mouth


def in_feature(region: RegionDescriptor, x: int, y: int, grid_height: int) -> bool:
    """Whether cell (x, y) lies inside the region's smiley features."""
    return SmileyFeatures(region, grid_height).contains(x, y)


def feature_mask(region: RegionDescriptor, width: int, height: int) -> NDArray[np.bool_]:
    """Boolean (height, width) mask of the region's smiley features.

    Only cells inside the region interior can be set.
    """
    if region.is_empty:
        return np.zeros((height, width), dtype=bool)

    ys, xs = np.meshgrid(
        np.arange(height, dtype=np.float64),
        np.arange(width, dtype=np.float64),
        indexing="ij",
    )
    features = SmileyFeatures(region, height).mask(xs, ys)
    return features & region.mask(width, height)
