"""Настройки запуска конвейера (уже разобранные внешним кодом)."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ICONS_FOLDER_NAME = "Images"


@dataclass(frozen=True)
class AssetsConfig:
    """Fields:
        build_files_folder: Каталог сборки; иконки пишутся в его подкаталог `Images`.
        defaults_icons_folder: Набор иконок по умолчанию (используется без логотипа).
        logo_path: Исходный логотип; None — копировать набор по умолчанию.
        trim_logo: Обрезать однотонные поля логотипа перед рендером.
        max_workers: Число потоков рендера; None — значение по умолчанию `ThreadPoolExecutor`.
    """
    build_files_folder: Path
    defaults_icons_folder: Path
    logo_path: Optional[Path] = None
    trim_logo: bool = True
    max_workers: Optional[int] = None

    @property
    def icons_folder(self) -> Path:
        return Path(self.build_files_folder) / ICONS_FOLDER_NAME
