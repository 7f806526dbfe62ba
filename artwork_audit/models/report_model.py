"""Итоговый отчёт по графике проекта.

Принципы:
- SRP: только структура данных и её сериализация.
- Неизменяемость: отчёт собирается один раз и отдаётся как снимок.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Tuple

from artwork_audit.models.image_model import ImageAsset, ImageMetrics


def sorted_assets(images: Iterable[ImageAsset]) -> Tuple[ImageAsset, ...]:
    return tuple(sorted(set(images)))


def frozen_mapping(data: Mapping) -> Mapping:
    """Копирует словарь в порядке ключей и закрывает его от изменений."""
    return MappingProxyType({key: data[key] for key in sorted(data)})


@dataclass(frozen=True)
class ArtworkReport:
    """Результат одного прогона анализа.

    Все коллекции упорядочены по пути. Инварианты:
    - каждое изображение либо в `unreferenced_images`, либо ключ `referencing_files`;
    - `standard_density_images` и `high_density_images` разбивают `all_images`;
    - множества «без пары» вложены в соответствующие множества плотности.
    """
    all_images: Tuple[ImageAsset, ...]
    referencing_files: Mapping[ImageAsset, Tuple[Path, ...]]
    metrics: Mapping[ImageAsset, ImageMetrics]
    unreferenced_images: Tuple[ImageAsset, ...]
    manifest_only_images: Tuple[ImageAsset, ...]
    high_density_images: Tuple[ImageAsset, ...]
    standard_density_images: Tuple[ImageAsset, ...]
    standard_missing_high_density: Tuple[ImageAsset, ...]
    high_density_missing_standard: Tuple[ImageAsset, ...]
    incorrect_device_suffix_images: Tuple[ImageAsset, ...]
    incorrectly_sized_high_density_images: Tuple[ImageAsset, ...]
    standard_platform_images: Tuple[ImageAsset, ...]
    missing_standard_platform_filenames: Tuple[str, ...]
    total_size_bytes: int

    @property
    def has_problems(self) -> bool:
        """True, если найдено хотя бы одно замечание."""
        return any(
            (
                self.unreferenced_images,
                self.standard_missing_high_density,
                self.high_density_missing_standard,
                self.incorrect_device_suffix_images,
                self.incorrectly_sized_high_density_images,
                self.missing_standard_platform_filenames,
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-совместимое представление (пути — строки)."""

        def paths(images: Iterable[ImageAsset]) -> list:
            return [str(image) for image in images]

        return {
            "all_images": paths(self.all_images),
            "referencing_files": {
                str(image): [str(p) for p in files] for image, files in self.referencing_files.items()
            },
            "metrics": {
                str(image): {
                    "width": m.width,
                    "height": m.height,
                    "size_bytes": m.size_bytes,
                    "content_type": m.content_type,
                }
                for image, m in self.metrics.items()
            },
            "unreferenced_images": paths(self.unreferenced_images),
            "manifest_only_images": paths(self.manifest_only_images),
            "high_density_images": paths(self.high_density_images),
            "standard_density_images": paths(self.standard_density_images),
            "standard_missing_high_density": paths(self.standard_missing_high_density),
            "high_density_missing_standard": paths(self.high_density_missing_standard),
            "incorrect_device_suffix_images": paths(self.incorrect_device_suffix_images),
            "incorrectly_sized_high_density_images": paths(self.incorrectly_sized_high_density_images),
            "standard_platform_images": paths(self.standard_platform_images),
            "missing_standard_platform_filenames": list(self.missing_standard_platform_filenames),
            "total_size_bytes": self.total_size_bytes,
        }
