"""Независимые проверки графики.

Каждая проверка читает только уже вычисленные данные и ничего не изменяет,
поэтому порядок вызова не важен.
"""
from __future__ import annotations

from typing import AbstractSet, Iterable, Mapping, Tuple

from artwork_audit.models.image_model import PHONE_SUFFIX, ImageAsset, ImageMetrics
from artwork_audit.models.report_model import sorted_assets


def find_incorrect_device_suffix(images: Iterable[ImageAsset]) -> Tuple[ImageAsset, ...]:
    """Изображения с `~iphone` в имени: телефон подразумевается по умолчанию, суффикс лишний."""
    # Substring anywhere in the name, not only before the extension.
    return sorted_assets(image for image in images if PHONE_SUFFIX in image.name)


def find_incorrectly_sized_high_density(
    high_density_images: Iterable[ImageAsset],
    metrics: Mapping[ImageAsset, ImageMetrics],
) -> Tuple[ImageAsset, ...]:
    """@2x-изображения с нечётной шириной или высотой."""
    flagged = []
    for image in high_density_images:
        image_metrics = metrics[image]
        if image_metrics.width % 2 != 0 or image_metrics.height % 2 != 0:
            flagged.append(image)
    return sorted_assets(flagged)


def detect_standard_platform_images(
    images: Iterable[ImageAsset],
    standard_filenames: AbstractSet[str],
) -> Tuple[Tuple[ImageAsset, ...], Tuple[str, ...]]:
    """Возвращает (найденные стандартные изображения, имена отсутствующих)."""
    images = tuple(images)
    found = [image for image in images if image.name in standard_filenames]
    present_names = {image.name for image in found}
    missing = sorted(name for name in standard_filenames if name not in present_names)
    return sorted_assets(found), tuple(missing)
