import math

import pytest

from msix_assets.models.image_model import VariantSpec
from msix_assets.models.variant_catalog import DPI_SCALES, TARGET_SIZES, VARIANT_CATALOG


def test_catalog_has_82_entries():
    assert len(VARIANT_CATALOG) == 82


def test_file_names_are_unique():
    names = [spec.file_name for spec in VARIANT_CATALOG]
    assert len(set(names)) == len(names)


def test_every_canvas_is_non_empty():
    for spec in VARIANT_CATALOG:
        assert math.ceil(spec.base_width * spec.scale) > 0
        assert math.ceil(spec.base_height * spec.scale) > 0


@pytest.mark.parametrize(
    "family",
    ["SmallTile", "Square150x150Logo", "Wide310x150Logo", "LargeTile",
     "Square44x44Logo", "SplashScreen", "BadgeLogo", "StoreLogo"],
)
def test_scaled_families_cover_all_dpi_scales(family):
    scales = [spec.scale for spec in VARIANT_CATALOG if spec.name == family]
    assert scales == list(DPI_SCALES)


@pytest.mark.parametrize(
    "prefix",
    ["Square44x44Logo.targetsize", "Square44x44Logo.altform-unplated_targetsize",
     "Square44x44Logo.altform-lightunplated_targetsize"],
)
def test_target_size_families(prefix):
    specs = [spec for spec in VARIANT_CATALOG if spec.name.startswith(prefix + "-")]
    assert [spec.base_width for spec in specs] == list(TARGET_SIZES)
    for spec in specs:
        assert spec.base_width == spec.base_height
        assert spec.scale == 1.0
        assert spec.padding_width_pct == spec.padding_height_pct == 0.0
        assert spec.file_name == f"{prefix}-{spec.base_width}.png"


def test_small_tile_keeps_larger_height_padding_at_100_percent():
    small = [spec for spec in VARIANT_CATALOG if spec.name == "SmallTile"]
    assert small[0].padding_height_pct == 0.5
    assert {spec.padding_height_pct for spec in small[1:]} == {0.34}


def test_expected_manifest_names_present():
    names = {spec.file_name for spec in VARIANT_CATALOG}
    for expected in (
        "Square150x150Logo.scale-100.png",
        "Wide310x150Logo.scale-125.png",
        "LargeTile.scale-400.png",
        "SplashScreen.scale-150.png",
        "BadgeLogo.scale-200.png",
        "StoreLogo.scale-100.png",
        "Square44x44Logo.altform-lightunplated_targetsize-256.png",
    ):
        assert expected in names


class TestVariantSpec:
    def test_file_name_for_scaled_variant(self):
        assert VariantSpec("StoreLogo", 50, 50, scale=1.25).file_name == "StoreLogo.scale-125.png"

    def test_file_name_for_unit_scale(self):
        assert VariantSpec("StoreLogo", 50, 50).file_name == "StoreLogo.scale-100.png"

    def test_target_size_name_is_verbatim(self):
        spec = VariantSpec("Square44x44Logo.targetsize-48", 48, 48, scale=2.0)
        assert spec.is_target_size
        assert spec.file_name == "Square44x44Logo.targetsize-48.png"

    @pytest.mark.parametrize(
        "kwargs",
        [
            dict(base_width=0, base_height=10),
            dict(base_width=10, base_height=10, padding_width_pct=1.0),
            dict(base_width=10, base_height=10, padding_height_pct=-0.1),
            dict(base_width=10, base_height=10, scale=0),
        ],
    )
    def test_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            VariantSpec("Bad", **kwargs)
