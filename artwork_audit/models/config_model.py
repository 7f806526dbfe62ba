"""Конфигурация анализатора.

Передаётся контроллеру явно при создании вместо глобальных констант;
значения по умолчанию соответствуют типичному iOS-проекту.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, Optional

DEFAULT_REFERENCING_FILE_SUFFIXES: FrozenSet[str] = frozenset(
    {".h", ".m", ".pbxproj", ".xib", ".plist", ".html", ".strings"}
)
DEFAULT_IMAGE_FILE_SUFFIXES: FrozenSet[str] = frozenset({".png"})
DEFAULT_IGNORED_NAMES: FrozenSet[str] = frozenset()

# Apple-defined launch images and icons.
DEFAULT_STANDARD_IMAGE_FILENAMES: FrozenSet[str] = frozenset(
    {
        "Default.png",
        "Default@2x.png",
        "Default-568h@2x.png",
        "Default-Landscape.png",
        "Default-Landscape@2x.png",
        "Default-Portrait.png",
        "Default-Portrait@2x.png",
        "Icon.png",
        "Icon@2x.png",
        "Icon-72.png",
        "Icon-72@2x.png",
        "Icon-Small-50.png",
        "Icon-Small-50@2x.png",
        "Icon-Small.png",
        "Icon-Small@2x.png",
        "iTunesArtwork",
        "iTunesArtwork@2x",
    }
)

DEFAULT_MANIFEST_FILENAME = "project.pbxproj"


@dataclass(frozen=True)
class AnalyzerConfig:
    """Неизменяемые настройки анализа.

    Fields:
        referencing_file_suffixes: Суффиксы файлов, которые могут ссылаться на изображения.
        image_file_suffixes: Суффиксы файлов изображений.
        ignored_names: Имена каталогов (и файлов), пропускаемых при обходе.
        standard_image_filenames: Обязательные изображения платформы.
        manifest_filename: Имя файла проекта, где перечислены все ресурсы.
        max_workers: Размер пула потоков; None — по числу ядер.
    """
    referencing_file_suffixes: FrozenSet[str] = DEFAULT_REFERENCING_FILE_SUFFIXES
    image_file_suffixes: FrozenSet[str] = DEFAULT_IMAGE_FILE_SUFFIXES
    ignored_names: FrozenSet[str] = DEFAULT_IGNORED_NAMES
    standard_image_filenames: FrozenSet[str] = DEFAULT_STANDARD_IMAGE_FILENAMES
    manifest_filename: str = DEFAULT_MANIFEST_FILENAME
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers должен быть >= 1")

    def with_overrides(
        self,
        referencing_file_suffixes: Optional[Iterable[str]] = None,
        image_file_suffixes: Optional[Iterable[str]] = None,
        ignored_names: Optional[Iterable[str]] = None,
        max_workers: Optional[int] = None,
    ) -> "AnalyzerConfig":
        """Возвращает копию с заменёнными полями; None означает «оставить как есть»."""
        changes: dict = {}
        if referencing_file_suffixes is not None:
            changes["referencing_file_suffixes"] = frozenset(referencing_file_suffixes)
        if image_file_suffixes is not None:
            changes["image_file_suffixes"] = frozenset(image_file_suffixes)
        if ignored_names is not None:
            changes["ignored_names"] = frozenset(ignored_names)
        if max_workers is not None:
            changes["max_workers"] = max_workers
        return replace(self, **changes)
