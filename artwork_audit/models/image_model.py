"""Модели данных для изображений проекта.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

DENSITY_MARKER = "@2x"
TABLET_SUFFIX = "~ipad"
PHONE_SUFFIX = "~iphone"


class Density(str, Enum):
    STANDARD = "standard"
    HIGH = "high"


class ImageFormat(Enum):
    """Известные форматы: имя формата Pillow, content type и расширение."""

    PNG = ("PNG", "image/png", ".png")
    JPEG = ("JPEG", "image/jpeg", ".jpg")
    GIF = ("GIF", "image/gif", ".gif")

    def __init__(self, pillow_name: str, content_type: str, extension: str) -> None:
        self.pillow_name = pillow_name
        self.content_type = content_type
        self.extension = extension

    @classmethod
    def from_pillow_name(cls, pillow_name: str) -> Optional["ImageFormat"]:
        for image_format in cls:
            if image_format.pillow_name == pillow_name:
                return image_format
        return None


@dataclass(frozen=True, order=True)
class ImageAsset:
    """Изображение, найденное в дереве проекта.

    Идентичность определяется абсолютным путём; остальные свойства вычисляются
    из имени файла и не хранятся отдельно.
    """
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_high_density(self) -> bool:
        # Простое вхождение подстроки, без привязки к позиции суффикса.
        return DENSITY_MARKER in self.name

    @property
    def density(self) -> Density:
        return Density.HIGH if self.is_high_density else Density.STANDARD

    @property
    def has_device_suffix(self) -> bool:
        return TABLET_SUFFIX in self.name or PHONE_SUFFIX in self.name

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True, order=True)
class ImageMetrics:
    """Неизменяемые метрики изображения.

    Fields:
        width: Ширина, px.
        height: Высота, px.
        size_bytes: Размер исходных данных, байт.
        content_type: MIME-тип, например "image/png".
    """
    width: int
    height: int
    size_bytes: int
    content_type: str

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Ширина изображения должна быть > 0")
        if self.height <= 0:
            raise ValueError("Высота изображения должна быть > 0")
        if self.size_bytes <= 0:
            raise ValueError("Размер изображения должен быть > 0")
        if not self.content_type or not self.content_type.strip():
            raise ValueError("Нужен непустой content type, например image/png")
