"""Контроллер конвейера: оркестрация загрузки логотипа и рендера вариантов.

SOLID:
- SRP: класс управляет порядком шагов и потоками (без логики обработки изображений).
- DIP: сервисы и каталог передаются снаружи; по умолчанию используются стандартные.
Clean Code:
- Вся работа уходит в отдельный поток; вызывающий ждёт один `Future`.
"""
from __future__ import annotations

import logging
import shutil
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Optional, Sequence

from msix_assets.errors import DefaultIconsNotFoundError, WriteError
from msix_assets.models.config_model import AssetsConfig
from msix_assets.models.image_model import PipelineResult, VariantSpec
from msix_assets.models.variant_catalog import VARIANT_CATALOG
from msix_assets.services.image_service import ImageService
from msix_assets.services.render_service import RenderService

logger = logging.getLogger(__name__)


class PipelineController:
    """Генерирует иконки из логотипа или копирует набор по умолчанию.

    Ответственности:
    - Создание каталога иконок.
    - Однократная загрузка логотипа через `ImageService`.
    - Параллельный рендер каталога через `RenderService`.
    - Один сигнал завершения (`Future`) для вызывающего кода.
    """

    def __init__(
        self,
        config: AssetsConfig,
        image_service: Optional[ImageService] = None,
        render_service: Optional[RenderService] = None,
        catalog: Sequence[VariantSpec] = VARIANT_CATALOG,
    ) -> None:
        self.config = config
        self._image_service = image_service or ImageService()
        self._render_service = render_service or RenderService()
        self._catalog = tuple(catalog)

    def start(self) -> Future[PipelineResult]:
        """Запускает конвейер в отдельном потоке и сразу возвращает `Future`.

        Ошибка любого шага пробрасывается из `Future.result()`.
        """
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="icon-pipeline")
        try:
            return executor.submit(self._run)
        finally:
            # поток доработает уже отправленную задачу
            executor.shutdown(wait=False)

    def run(self) -> PipelineResult:
        return self.start().result()

    # ---- Internals ----
    def _run(self) -> PipelineResult:
        logger.debug("create app icons")
        icons_folder = self.config.icons_folder
        try:
            icons_folder.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(str(icons_folder), f"не удалось создать каталог иконок: {exc}") from exc

        if self.config.logo_path is None:
            return self._copy_default_icons(icons_folder)
        return self._generate_icons(Path(self.config.logo_path), icons_folder)

    def _copy_default_icons(self, icons_folder: Path) -> PipelineResult:
        defaults = Path(self.config.defaults_icons_folder)
        if not defaults.is_dir():
            raise DefaultIconsNotFoundError(f"Каталог иконок по умолчанию не найден: {defaults}")

        try:
            shutil.copytree(defaults, icons_folder, dirs_exist_ok=True)
        except OSError as exc:
            raise WriteError(str(icons_folder), f"не удалось скопировать иконки по умолчанию: {exc}") from exc
        files = tuple(
            icons_folder / src.relative_to(defaults)
            for src in sorted(defaults.rglob("*"))
            if src.is_file()
        )
        logger.info("copied %d default icons to %s", len(files), icons_folder)
        return PipelineResult(icons_folder=icons_folder, files=files, generated=False)

    def _generate_icons(self, logo_path: Path, icons_folder: Path) -> PipelineResult:
        logger.debug("generating icons")
        source = self._image_service.load_image(logo_path, trim=self.config.trim_logo)

        with ThreadPoolExecutor(
            max_workers=self.config.max_workers, thread_name_prefix="icon-render"
        ) as pool:
            futures: Dict[Future[Path], VariantSpec] = {
                pool.submit(self._render_service.render_to, source, spec, icons_folder): spec
                for spec in self._catalog
            }
            try:
                for future in as_completed(futures):
                    future.result()
            except Exception:
                # ещё не начатые варианты отменяем, начатые дорабатывают при выходе из with
                for pending in futures:
                    pending.cancel()
                raise

        files = tuple(future.result() for future in futures)
        logger.info("generated %d icons in %s", len(files), icons_folder)
        return PipelineResult(icons_folder=icons_folder, files=files, generated=True)
