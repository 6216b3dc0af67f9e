"""Модели данных конвейера иконок.

Принципы:
- SRP: только структура данных, без логики обработки (кроме вычисляемых свойств).
- Чистый код: неизменяемость (`frozen=True`), исходник делится между потоками рендера.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image


@dataclass(frozen=True)
class SourceImage:
    """Декодированный логотип, общий для всех вариантов.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL (RGBA), после необязательной обрезки полей.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, всегда "RGBA".
        size_bytes: Размер файла, если доступен.
        trimmed: Изменила ли обрезка полей буфер.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
    trimmed: bool = False


@dataclass(frozen=True)
class VariantSpec:
    """Один файл иконки: базовый размер, доля полей и DPI-масштаб."""
    name: str
    base_width: int
    base_height: int
    padding_width_pct: float = 0.0
    padding_height_pct: float = 0.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        if self.base_width <= 0 or self.base_height <= 0:
            raise ValueError(f"{self.name}: базовый размер должен быть > 0")
        for pct in (self.padding_width_pct, self.padding_height_pct):
            if not 0.0 <= pct < 1.0:
                raise ValueError(f"{self.name}: доля полей вне [0, 1): {pct}")
        if self.scale <= 0:
            raise ValueError(f"{self.name}: масштаб должен быть > 0")

    @property
    def is_target_size(self) -> bool:
        """Имя уже содержит явный пиксельный размер (`targetsize-N`)."""
        return "targetsize" in self.name

    @property
    def file_name(self) -> str:
        if self.is_target_size:
            return f"{self.name}.png"
        return f"{self.name}.scale-{int(round(self.scale * 100))}.png"


@dataclass(frozen=True)
class IconGeometry:
    """Размеры холста и области контента для варианта."""
    scaled_width: float
    scaled_height: float
    content_width: int
    content_height: int
    canvas_width: int
    canvas_height: int

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return self.canvas_width, self.canvas_height


@dataclass(frozen=True)
class RenderedIcon:
    file_name: str
    canvas: Image.Image


@dataclass(frozen=True)
class PipelineResult:
    """Сигнал завершения запуска.

    Fields:
        icons_folder: Каталог с иконками.
        files: Записанные (или скопированные) файлы.
        generated: True — иконки отрисованы из логотипа, False — скопирован набор по умолчанию.
    """
    icons_folder: Path
    files: Tuple[Path, ...]
    generated: bool
