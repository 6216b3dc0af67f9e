"""Каталог вариантов иконок MSIX-пакета.

Имена и размеры должны совпадать со ссылками в манифесте пакета: любое
расхождение ломает упаковку. Порядок записей фиксирован.
"""
from __future__ import annotations

from typing import Tuple

from msix_assets.models.image_model import VariantSpec

DPI_SCALES: Tuple[float, ...] = (1.0, 1.25, 1.5, 2.0, 4.0)

# порядок как в манифесте
TARGET_SIZES: Tuple[int, ...] = (16, 24, 32, 48, 256, 20, 30, 36, 40, 60, 64, 72, 80, 96)

TARGET_SIZE_PREFIXES: Tuple[str, ...] = (
    "Square44x44Logo.targetsize",
    "Square44x44Logo.altform-unplated_targetsize",
    "Square44x44Logo.altform-lightunplated_targetsize",
)

# (name, base_width, base_height, padding_width_pct, padding_height_pct, scale)
_TILES_AND_APP_ICON = (
    # SmallTile: на 100% поле по высоте больше, чем на остальных масштабах
    ("SmallTile", 71, 71, 0.34, 0.5, 1.0),
    ("SmallTile", 71, 71, 0.34, 0.34, 1.25),
    ("SmallTile", 71, 71, 0.34, 0.34, 1.5),
    ("SmallTile", 71, 71, 0.34, 0.34, 2.0),
    ("SmallTile", 71, 71, 0.34, 0.34, 4.0),
    # Medium tile
    ("Square150x150Logo", 150, 150, 0.34, 0.5, 1.0),
    ("Square150x150Logo", 150, 150, 0.34, 0.5, 1.25),
    ("Square150x150Logo", 150, 150, 0.34, 0.5, 1.5),
    ("Square150x150Logo", 150, 150, 0.34, 0.5, 2.0),
    ("Square150x150Logo", 150, 150, 0.34, 0.5, 4.0),
    # Wide tile
    ("Wide310x150Logo", 310, 150, 0.34, 0.5, 1.0),
    ("Wide310x150Logo", 310, 150, 0.34, 0.5, 1.25),
    ("Wide310x150Logo", 310, 150, 0.34, 0.5, 1.5),
    ("Wide310x150Logo", 310, 150, 0.34, 0.5, 2.0),
    ("Wide310x150Logo", 310, 150, 0.34, 0.5, 4.0),
    ("LargeTile", 310, 310, 0.34, 0.5, 1.0),
    ("LargeTile", 310, 310, 0.34, 0.5, 1.25),
    ("LargeTile", 310, 310, 0.34, 0.5, 1.5),
    ("LargeTile", 310, 310, 0.34, 0.5, 2.0),
    ("LargeTile", 310, 310, 0.34, 0.5, 4.0),
    # App icon
    ("Square44x44Logo", 44, 44, 0.16, 0.16, 1.0),
    ("Square44x44Logo", 44, 44, 0.16, 0.16, 1.25),
    ("Square44x44Logo", 44, 44, 0.16, 0.16, 1.5),
    ("Square44x44Logo", 44, 44, 0.16, 0.16, 2.0),
    ("Square44x44Logo", 44, 44, 0.16, 0.16, 4.0),
)

_SPLASH_BADGE_STORE = (
    ("SplashScreen", 620, 300, 0.34, 0.5, 1.0),
    ("SplashScreen", 620, 300, 0.34, 0.5, 1.25),
    ("SplashScreen", 620, 300, 0.34, 0.5, 1.5),
    ("SplashScreen", 620, 300, 0.34, 0.5, 2.0),
    ("SplashScreen", 620, 300, 0.34, 0.5, 4.0),
    ("BadgeLogo", 24, 24, 0.0, 0.0, 1.0),
    ("BadgeLogo", 24, 24, 0.0, 0.0, 1.25),
    ("BadgeLogo", 24, 24, 0.0, 0.0, 1.5),
    ("BadgeLogo", 24, 24, 0.0, 0.0, 2.0),
    ("BadgeLogo", 24, 24, 0.0, 0.0, 4.0),
    ("StoreLogo", 50, 50, 0.0, 0.0, 1.0),
    ("StoreLogo", 50, 50, 0.0, 0.0, 1.25),
    ("StoreLogo", 50, 50, 0.0, 0.0, 1.5),
    ("StoreLogo", 50, 50, 0.0, 0.0, 2.0),
    ("StoreLogo", 50, 50, 0.0, 0.0, 4.0),
)

_TARGET_SIZE_ICONS = tuple(
    (f"{prefix}-{size}", size, size, 0.0, 0.0, 1.0)
    for prefix in TARGET_SIZE_PREFIXES
    for size in TARGET_SIZES
)

VARIANT_CATALOG: Tuple[VariantSpec, ...] = tuple(
    VariantSpec(*row) for row in _TILES_AND_APP_ICON + _TARGET_SIZE_ICONS + _SPLASH_BADGE_STORE
)
