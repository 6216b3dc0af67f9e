"""Загрузка логотипа с диска и необязательная обрезка однотонных полей.

Принципы:
- SRP: класс отвечает только за чтение, декодирование и подготовку исходника.
- Обрезка полей best-effort: любая ошибка оставляет исходное изображение как есть.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from msix_assets.errors import SourceDecodeError, SourceNotFoundError, TrimError
from msix_assets.models.image_model import SourceImage

logger = logging.getLogger(__name__)


class ImageService:
    def load_image(self, file_path: str | Path, trim: bool = False) -> SourceImage:
        """Загружает логотип и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.
            trim: Попытаться обрезать однотонные поля.

        Returns:
            `SourceImage` c `PIL.Image.Image` (в режиме RGBA), размерами и размером файла.

        Raises:
            SourceNotFoundError: если путь не существует или не указывает на файл.
            SourceDecodeError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise SourceNotFoundError(f"Файл логотипа не найден: {path}")

        try:
            with Image.open(path) as opened:
                pil_image = opened.convert("RGBA")
        except (UnidentifiedImageError, OSError) as exc:
            raise SourceDecodeError(f"Файл логотипа не является изображением: {path}") from exc

        trimmed = False
        if trim:
            try:
                cropped = self.trim(pil_image)
            except Exception as exc:
                logger.debug("trim skipped for %s: %s", path, exc)
            else:
                trimmed = cropped.size != pil_image.size
                pil_image = cropped

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.debug("loaded %s (%dx%d, trimmed=%s)", path, width, height, trimmed)
        return SourceImage(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            size_bytes=size_bytes,
            trimmed=trimmed,
        )

    def trim(self, image: Image.Image) -> Image.Image:
        """Обрезает поля цвета левого верхнего пикселя.

        Если этот пиксель полностью прозрачен, полем считается любой прозрачный пиксель.
        Возвращает новое изображение; исходное не меняется.

        Raises:
            TrimError: если изображение целиком состоит из поля.
        """
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        left, top, right, bottom = self._content_bbox(np.asarray(rgba))
        if (left, top, right, bottom) == (0, 0, rgba.width, rgba.height):
            return rgba.copy()
        return rgba.crop((left, top, right, bottom))

    # ---------- Вспомогательные функции ----------
    def _content_bbox(self, arr: np.ndarray) -> Tuple[int, int, int, int]:
        """
        Bounding box (left, top, right, bottom) пикселей, отличных от поля.
        """
        if arr.ndim != 3 or arr.shape[0] == 0 or arr.shape[1] == 0:
            raise TrimError("пустое изображение")

        border = arr[0, 0]
        if border[3] == 0:
            content = arr[:, :, 3] > 0
        else:
            content = np.any(arr != border, axis=2)

        rows = np.flatnonzero(content.any(axis=1))
        cols = np.flatnonzero(content.any(axis=0))
        if rows.size == 0 or cols.size == 0:
            raise TrimError("внутри полей нет содержимого")
        return int(cols[0]), int(rows[0]), int(cols[-1]) + 1, int(rows[-1]) + 1
