from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError

from artwork_audit.errors import ImageDecodingError, UnsupportedOperationError
from artwork_audit.models.image_model import ImageFormat


class ProcessService:
    def scale_up(
        self,
        data: bytes,
        target_width: int,
        target_height: int,
        image_format: ImageFormat = ImageFormat.PNG,
    ) -> bytes:
        """
        Масштабирует изображение ровно до (target_width, target_height).
        Результат кодируется в `image_format`; поддерживается только PNG.
        """
        if image_format is not ImageFormat.PNG:
            raise UnsupportedOperationError(f"Кодирование в {image_format.pillow_name} не реализовано")
        if target_width <= 0 or target_height <= 0:
            raise ValueError(f"Некорректный целевой размер: {target_width}×{target_height}")

        try:
            source = Image.open(io.BytesIO(data))
            source.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise ImageDecodingError(f"Данные не распознаны как изображение: {exc}") from exc

        with source:
            # RGBA сохраняет прозрачность и позволяет LANCZOS для палитровых PNG
            rgba = source if source.mode == "RGBA" else source.convert("RGBA")
            scaled = rgba.resize((target_width, target_height), Image.Resampling.LANCZOS)

        out = io.BytesIO()
        scaled.save(out, format=image_format.pillow_name)
        return out.getvalue()
