"""Исключения конвейера генерации иконок.

Иерархия:
- `IconPipelineError` — общий предок, его ловит вызывающий код.
- Ошибки источника (`SourceNotFoundError`, `SourceDecodeError`) прерывают запуск
  до рендера первого варианта.
- `TrimError` не выходит за пределы загрузчика: обрезка полей best-effort.
- `RenderError`/`WriteError` содержат имя варианта, на котором всё сломалось.
"""
from __future__ import annotations


class IconPipelineError(Exception):
    """Запуск не дал пригодного набора иконок."""


class SourceNotFoundError(IconPipelineError, FileNotFoundError):
    pass


class SourceDecodeError(IconPipelineError, ValueError):
    pass


class TrimError(IconPipelineError):
    pass


class DefaultIconsNotFoundError(IconPipelineError, FileNotFoundError):
    pass


class RenderError(IconPipelineError):
    """Ошибка ресайза/композиции конкретного варианта."""

    def __init__(self, variant_name: str, message: str) -> None:
        super().__init__(f"{variant_name}: {message}")
        self.variant_name = variant_name


class WriteError(RenderError):
    """Ошибка кодирования PNG или записи файла варианта."""
