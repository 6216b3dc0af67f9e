"""Точка входа: генерация иконок MSIX в каталог сборки."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from msix_assets.controllers.pipeline_controller import PipelineController
from msix_assets.errors import IconPipelineError
from msix_assets.models.config_model import AssetsConfig

logger = logging.getLogger("msix_assets")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Разбирает аргументы командной строки.

    Args:
        argv: Аргументы без имени программы; None — `sys.argv[1:]`.

    Returns:
        `argparse.Namespace` с полями build_dir, logo, defaults_dir, trim, workers, verbose.
    """
    parser = argparse.ArgumentParser(prog="msix-assets")
    parser.add_argument("--build-dir", dest="build_dir", type=Path, required=True, help="Каталог сборки")
    parser.add_argument("--logo", type=Path, default=None, help="Исходный логотип")
    parser.add_argument("--defaults-dir", dest="defaults_dir", type=Path, default=Path("assets/icons"),
                        help="Иконки по умолчанию (если логотип не задан)")
    parser.add_argument("--no-trim", dest="trim", action="store_false", help="Не обрезать поля логотипа")
    parser.add_argument("--workers", type=int, default=None, help="Число потоков рендера")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Собирает настройки, запускает конвейер и ждёт сигнал завершения."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.workers is not None and args.workers <= 0:
        logger.error("--workers должен быть > 0")
        return 2

    config = AssetsConfig(
        build_files_folder=args.build_dir,
        defaults_icons_folder=args.defaults_dir,
        logo_path=args.logo,
        trim_logo=args.trim,
        max_workers=args.workers,
    )
    try:
        result = PipelineController(config).run()
    except IconPipelineError as exc:
        logger.error("набор иконок не создан: %s", exc)
        return 1

    logger.info("%d icons ready in %s", len(result.files), result.icons_folder)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
