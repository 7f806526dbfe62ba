"""Преобразования имён файлов изображений.

Чистые функции без состояния и ввода-вывода:
- варианты написания имени, под которыми на изображение могут сослаться;
- переход между стандартным и @2x именем.
"""
from __future__ import annotations

from typing import Tuple

from artwork_audit.models.image_model import DENSITY_MARKER, PHONE_SUFFIX, TABLET_SUFFIX, ImageFormat

DEFAULT_EXTENSION = ImageFormat.PNG.extension


def _strip_from_last(name: str, token: str) -> str:
    index = name.rfind(token)
    return name[:index] if index >= 0 else name


def expand_filename_variants(filename: str) -> Tuple[str, ...]:
    """Возвращает все правдоподобные написания ссылки на изображение.

    Пример: для `background@2x~ipad.png` это и полное имя, и `background@2x~ipad`,
    и базовое `background`, и все комбинации `background[@2x][~ipad|~iphone].png`.
    Генерация намеренно избыточна: пропущенная ссылка даёт ложное «не используется».
    """
    variants = {filename}
    name = filename

    dot = name.rfind(".")
    if dot > 0:
        name = name[:dot]
        variants.add(name)

    for token in (DENSITY_MARKER, TABLET_SUFFIX, PHONE_SUFFIX):
        stripped = _strip_from_last(name, token)
        if stripped != name:
            name = stripped
            variants.add(name)

    # Базовое имя: собираем обратно все варианты устройства и плотности.
    for device in ("", TABLET_SUFFIX, PHONE_SUFFIX):
        for density in ("", DENSITY_MARKER):
            variants.add(f"{name}{density}{device}{DEFAULT_EXTENSION}")

    return tuple(sorted(variants))


def to_high_density(filename: str) -> str:
    """Имя @2x-варианта для стандартного изображения (идемпотентно).

    Маркер вставляется перед суффиксом устройства, а если его нет — перед
    расширением. У имени без расширения маркер дописывается в конец.
    """
    if DENSITY_MARKER in filename:
        return filename

    index = filename.rfind(TABLET_SUFFIX)
    if index == -1:
        index = filename.rfind(PHONE_SUFFIX)
    if index == -1:
        index = filename.rfind(".")
    if index == -1:
        index = len(filename)

    return f"{filename[:index]}{DENSITY_MARKER}{filename[index:]}"


def to_standard_density(filename: str) -> str:
    """Имя стандартного варианта: маркер плотности просто удаляется."""
    return filename.replace(DENSITY_MARKER, "")
