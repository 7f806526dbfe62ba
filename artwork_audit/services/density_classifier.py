"""Разбиение изображений на стандартные и @2x, поиск непарных.

Классификация по вхождению маркера `@2x` в имя файла без привязки к позиции:
имя, случайно содержащее эту подстроку, тоже считается @2x.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from artwork_audit.models.image_model import ImageAsset
from artwork_audit.models.report_model import sorted_assets
from artwork_audit.services.naming import to_high_density, to_standard_density

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DensityClassification:
    standard_density_images: Tuple[ImageAsset, ...]
    high_density_images: Tuple[ImageAsset, ...]
    standard_missing_high_density: Tuple[ImageAsset, ...]
    high_density_missing_standard: Tuple[ImageAsset, ...]


class DensityClassifier:
    def classify(self, images: Iterable[ImageAsset]) -> DensityClassification:
        """Разбивает изображения по плотности и находит отсутствующие пары.

        Пара ищется в том же каталоге: `icon.png` <-> `icon@2x.png`,
        `bg~ipad.png` <-> `bg@2x~ipad.png`.
        """
        all_images = sorted_assets(images)
        all_paths = {image.path for image in all_images}

        standard, high = [], []
        standard_missing, high_missing = [], []
        for image in all_images:
            if image.is_high_density:
                high.append(image)
                if image.path.with_name(to_standard_density(image.name)) not in all_paths:
                    high_missing.append(image)
            else:
                standard.append(image)
                if image.path.with_name(to_high_density(image.name)) not in all_paths:
                    standard_missing.append(image)

        logger.info(
            "Плотность: стандартных %d (без @2x: %d), @2x %d (без пары: %d)",
            len(standard),
            len(standard_missing),
            len(high),
            len(high_missing),
        )
        return DensityClassification(
            standard_density_images=tuple(standard),
            high_density_images=tuple(high),
            standard_missing_high_density=tuple(standard_missing),
            high_density_missing_standard=tuple(high_missing),
        )
