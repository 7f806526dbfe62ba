"""Извлечение метрик изображений.

Принципы:
- SRP: класс отвечает только за декодирование и базовое извлечение свойств.
- OCP: новые источники (путь, поток) добавляются отдельными методами поверх `extract_metrics`.
- LSP/ISP: возвращает `ImageMetrics` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from artwork_audit.errors import ImageDecodingError
from artwork_audit.models.image_model import ImageFormat, ImageMetrics


class ImageService:
    def extract_metrics(self, data: bytes) -> ImageMetrics:
        """Декодирует байты изображения и возвращает его метрики.

        Args:
            data: Содержимое файла изображения.

        Returns:
            `ImageMetrics` с размерами, размером данных и MIME-типом.

        Raises:
            ImageDecodingError: если данные пусты, повреждены или не являются изображением.
        """
        if not data:
            raise ImageDecodingError("Пустые данные не являются изображением")

        try:
            with Image.open(io.BytesIO(data)) as pil_image:
                width, height = pil_image.size
                image_format = pil_image.format or ""
        except (UnidentifiedImageError, OSError) as exc:
            raise ImageDecodingError(f"Данные не распознаны как изображение: {exc}") from exc

        known_format = ImageFormat.from_pillow_name(image_format)
        if known_format is not None:
            content_type = known_format.content_type
        else:
            content_type = Image.MIME.get(image_format) or f"image/{image_format.lower() or 'unknown'}"
        return ImageMetrics(
            width=width,
            height=height,
            size_bytes=len(data),
            content_type=content_type,
        )

    def load_metrics(self, file_path: str | Path) -> ImageMetrics:
        """Читает файл с диска и возвращает его метрики.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ImageDecodingError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")
        return self.extract_metrics(path.read_bytes())
