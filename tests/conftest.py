from __future__ import annotations

from pathlib import Path
from typing import Callable, Tuple

import pytest
from PIL import Image

from msix_assets.models.config_model import AssetsConfig


@pytest.fixture
def make_logo(tmp_path: Path) -> Callable[..., Path]:
    """Пишет PNG-логотип заданного размера и цвета, возвращает путь."""
    def _make(
        size: Tuple[int, int] = (512, 512),
        color: Tuple[int, int, int, int] = (200, 30, 30, 255),
        name: str = "logo.png",
    ) -> Path:
        path = tmp_path / name
        Image.new("RGBA", size, color).save(path, format="PNG")
        return path
    return _make


@pytest.fixture
def defaults_dir(tmp_path: Path) -> Path:
    root = tmp_path / "defaults"
    (root / "nested").mkdir(parents=True)
    Image.new("RGBA", (44, 44), (0, 0, 255, 255)).save(root / "Square44x44Logo.scale-100.png")
    Image.new("RGBA", (50, 50), (0, 255, 0, 255)).save(root / "StoreLogo.scale-100.png")
    (root / "nested" / "readme.txt").write_text("default icons", encoding="utf-8")
    return root


@pytest.fixture
def make_config(tmp_path: Path, defaults_dir: Path) -> Callable[..., AssetsConfig]:
    def _make(**overrides) -> AssetsConfig:
        values = dict(
            build_files_folder=tmp_path / "build",
            defaults_icons_folder=defaults_dir,
            logo_path=None,
            trim_logo=False,
        )
        values.update(overrides)
        return AssetsConfig(**values)
    return _make
