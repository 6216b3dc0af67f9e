from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Tuple

from PIL import Image

from msix_assets.errors import RenderError, WriteError
from msix_assets.models.image_model import IconGeometry, RenderedIcon, SourceImage, VariantSpec

logger = logging.getLogger(__name__)

# ниже этого размера области контента дорогая фильтрация не даёт выигрыша
HIGH_QUALITY_MIN_SIZE = 200

TRANSPARENT = (0, 0, 0, 0)


class RenderService:
    # ---------- Геометрия ----------
    def compute_geometry(self, spec: VariantSpec) -> IconGeometry:
        """
        Размеры варианта: масштабированный размер, область контента за вычетом полей
        и холст (округление вверх).
        """
        scaled_width = spec.base_width * spec.scale
        scaled_height = spec.base_height * spec.scale
        content_width = math.ceil(scaled_width - scaled_width * spec.padding_width_pct)
        content_height = math.ceil(scaled_height - scaled_height * spec.padding_height_pct)
        return IconGeometry(
            scaled_width=scaled_width,
            scaled_height=scaled_height,
            content_width=content_width,
            content_height=content_height,
            canvas_width=math.ceil(scaled_width),
            canvas_height=math.ceil(scaled_height),
        )

    def select_resample(self, content_width: int, content_height: int) -> Image.Resampling:
        """
        Усреднение для мелких иконок, бикубический фильтр для крупных.
        """
        if content_width < HIGH_QUALITY_MIN_SIZE or content_height < HIGH_QUALITY_MIN_SIZE:
            return Image.Resampling.BOX
        return Image.Resampling.BICUBIC

    def fit_content(self, source_size: Tuple[int, int], content_width: int, content_height: int) -> Tuple[int, int]:
        """
        Размер контента с сохранением пропорций исходника.

        Широкая область подгоняется по высоте, остальные по ширине; если вторая
        сторона при этом вылезает за свою границу, подгонка идёт по другой оси.
        """
        src_w, src_h = source_size
        by_height = (max(1, int(content_height * src_w / src_h)), content_height)
        by_width = (content_width, max(1, int(content_width * src_h / src_w)))

        first, second = (by_height, by_width) if content_width > content_height else (by_width, by_height)
        if first[0] <= content_width and first[1] <= content_height:
            return first
        return second

    def center_offset(self, canvas_size: Tuple[int, int], content_size: Tuple[int, int]) -> Tuple[int, int]:
        """Левый верхний угол контента по центру холста, не меньше 0."""
        draw_x = canvas_size[0] // 2 - content_size[0] // 2
        draw_y = canvas_size[1] // 2 - content_size[1] // 2
        return max(draw_x, 0), max(draw_y, 0)

    # ---------- Рендер ----------
    def render(self, source: SourceImage, spec: VariantSpec) -> RenderedIcon:
        """
        Вписывает логотип в область контента и кладёт по центру прозрачного холста.
        Исходное изображение не мутируется.
        """
        geometry = self.compute_geometry(spec)
        resample = self.select_resample(geometry.content_width, geometry.content_height)
        try:
            size = self.fit_content(source.pil_image.size, geometry.content_width, geometry.content_height)
            resized = source.pil_image.resize(size, resample=resample)

            canvas = Image.new("RGBA", geometry.canvas_size, TRANSPARENT)
            # без маски: холст пустой, смешивание не нужно
            canvas.paste(resized, self.center_offset(geometry.canvas_size, resized.size))
        except (ValueError, OSError, MemoryError) as exc:
            raise RenderError(spec.file_name, f"ошибка рендера: {exc}") from exc
        return RenderedIcon(file_name=spec.file_name, canvas=canvas)

    def write(self, icon: RenderedIcon, icons_folder: Path) -> Path:
        """Кодирует холст в PNG и перезаписывает файл в каталоге иконок."""
        target = Path(icons_folder) / icon.file_name
        try:
            icon.canvas.save(target, format="PNG")
        except (OSError, ValueError) as exc:
            raise WriteError(icon.file_name, f"не удалось записать {target}: {exc}") from exc
        return target

    def render_to(self, source: SourceImage, spec: VariantSpec, icons_folder: Path) -> Path:
        icon = self.render(source, spec)
        path = self.write(icon, icons_folder)
        logger.debug("wrote %s (%dx%d)", path.name, icon.canvas.width, icon.canvas.height)
        return path
