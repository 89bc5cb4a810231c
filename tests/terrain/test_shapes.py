"""Tests for the smiley shape overlay."""

import numpy as np

from continents.terrain.regions import RegionDescriptor
from continents.terrain.shapes import SmileyFeatures, feature_mask, in_feature

# Grid height 72: eye radius 6, mouth width 12, mouth height 6.
# Center (32, 36): eyes at (20, 48) and (44, 48), mouth centered at y=24.
REGION = RegionDescriptor(west=4, east=60, south=2, north=70, continent=0)
HEIGHT = 72
WIDTH = 64


class TestSmileyFeatures:
    """Tests for feature geometry."""

    def test_sizes_scale_with_height(self) -> None:
        features = SmileyFeatures(REGION, HEIGHT)
        assert features.eye_radius == 6
        assert features.mouth_width == 12
        assert features.mouth_height == 6

    def test_positions(self) -> None:
        features = SmileyFeatures(REGION, HEIGHT)
        assert features.left_eye_x == 20
        assert features.right_eye_x == 44
        assert features.eye_y == 48
        assert features.mouth_y == 24


class TestInFeature:
    """Tests for the point predicate."""

    def test_eye_centers(self) -> None:
        assert in_feature(REGION, 20, 48, HEIGHT)
        assert in_feature(REGION, 44, 48, HEIGHT)

    def test_eye_edge_exclusive(self) -> None:
        """A cell exactly one radius from the eye center is outside."""
        assert not in_feature(REGION, 26, 48, HEIGHT)
        assert in_feature(REGION, 25, 48, HEIGHT)

    def test_mouth_center(self) -> None:
        assert in_feature(REGION, 32, 24, HEIGHT)

    def test_mouth_follows_sine(self) -> None:
        """A quarter wave right of center the mouth rises by its height."""
        assert in_feature(REGION, 38, 30, HEIGHT)
        assert not in_feature(REGION, 38, 24, HEIGHT)

    def test_mouth_width_limit(self) -> None:
        assert not in_feature(REGION, 44, 24, HEIGHT)

    def test_face_center_is_land(self) -> None:
        assert not in_feature(REGION, 32, 36, HEIGHT)


class TestFeatureMask:
    """Tests for the vectorized mask."""

    def test_matches_predicate(self) -> None:
        mask = feature_mask(REGION, WIDTH, HEIGHT)
        for y in range(REGION.south, REGION.north):
            for x in range(REGION.west, REGION.east):
                assert mask[y, x] == in_feature(REGION, x, y, HEIGHT)

    def test_limited_to_region(self) -> None:
        narrow = RegionDescriptor(west=18, east=22, south=2, north=70, continent=0)
        mask = feature_mask(narrow, WIDTH, HEIGHT)
        assert mask.any()
        outside = ~narrow.mask(WIDTH, HEIGHT)
        assert not mask[outside].any()

    def test_tiny_height_has_no_features(self) -> None:
        region = RegionDescriptor(west=0, east=10, south=0, north=5, continent=0)
        assert not feature_mask(region, 10, 5).any()

    def test_empty_region(self) -> None:
        region = RegionDescriptor(west=10, east=10, south=0, north=5, continent=0)
        mask = feature_mask(region, 20, 72)
        assert mask.shape == (72, 20)
        assert not mask.any()
