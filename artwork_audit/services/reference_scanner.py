"""Поиск ссылок на изображения в текстовых файлах проекта.

Принципы:
- SRP: только сопоставление изображений и ссылающихся файлов, без ввода-вывода.
- Каждая задача пула возвращает собственный результат; слияние выполняет
  вызывающий поток после завершения задачи, общих изменяемых контейнеров нет.
"""
from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from artwork_audit.models.config_model import DEFAULT_MANIFEST_FILENAME
from artwork_audit.models.image_model import ImageAsset
from artwork_audit.models.report_model import frozen_mapping, sorted_assets
from artwork_audit.services.naming import expand_filename_variants

logger = logging.getLogger(__name__)

# (image, referencing_files, processed_count, total_count)
ReferenceProgressCallback = Callable[[ImageAsset, Tuple[Path, ...], int, int], None]


def _no_progress(image: ImageAsset, referencing_files: Tuple[Path, ...], processed: int, total: int) -> None:
    pass


@dataclass(frozen=True)
class ReferenceScanResult:
    """Разбиение изображений по наличию ссылок.

    Fields:
        referencing_files: Изображение -> отсортированные ссылающиеся файлы (только непустые).
        unreferenced_images: Изображения без единой ссылки.
        manifest_only_images: Изображения, упомянутые только в файле проекта.
    """
    referencing_files: Mapping[ImageAsset, Tuple[Path, ...]]
    unreferenced_images: Tuple[ImageAsset, ...]
    manifest_only_images: Tuple[ImageAsset, ...]


def find_referencing_files(image: ImageAsset, contents: Mapping[Path, str]) -> Tuple[Path, ...]:
    """Возвращает файлы, в которых встречается любой вариант имени изображения.

    Ссылкой считается строковый литерал (`"aboutBackground"`) или текст элемента
    разметки (`<string key="NSResourceName">aboutBackground~ipad.png</string>`).
    """
    patterns = []
    for variant in expand_filename_variants(image.name):
        patterns.append(f'"{variant}"')
        patterns.append(f">{variant}<")

    return tuple(
        sorted(path for path, text in contents.items() if any(pattern in text for pattern in patterns))
    )


class ReferenceScanner:
    def __init__(
        self,
        max_workers: Optional[int] = None,
        manifest_filename: str = DEFAULT_MANIFEST_FILENAME,
    ) -> None:
        self._max_workers = max_workers or os.cpu_count() or 1
        self._manifest_filename = manifest_filename.lower()

    def scan(
        self,
        images: Iterable[ImageAsset],
        contents: Mapping[Path, str],
        on_progress: Optional[ReferenceProgressCallback] = None,
    ) -> ReferenceScanResult:
        """Параллельно сопоставляет каждому изображению ссылающиеся файлы.

        `on_progress` вызывается в вызывающем потоке по одному разу на изображение,
        в порядке завершения задач (не в порядке входа). Исключение любой задачи
        прерывает весь поиск.
        """
        report = on_progress or _no_progress
        all_images = sorted_assets(images)
        total = len(all_images)

        referenced: Dict[ImageAsset, Tuple[Path, ...]] = {}
        unreferenced = []
        manifest_only = []

        logger.info("Поиск ссылок: %d изображений, %d файлов", total, len(contents))
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = {
                executor.submit(find_referencing_files, image, contents): image for image in all_images
            }
            processed = 0
            for future in as_completed(futures):
                image = futures[future]
                try:
                    files = future.result()
                except Exception:
                    for pending in futures:
                        pending.cancel()
                    raise

                if not files:
                    unreferenced.append(image)
                else:
                    referenced[image] = files
                    if len(files) == 1 and files[0].name.lower() == self._manifest_filename:
                        manifest_only.append(image)

                processed += 1
                logger.debug("%s: ссылок %d (%d/%d)", image.name, len(files), processed, total)
                report(image, files, processed, total)

        logger.info(
            "Поиск ссылок завершён: используется %d, не используется %d, только в файле проекта %d",
            len(referenced),
            len(unreferenced),
            len(manifest_only),
        )
        return ReferenceScanResult(
            referencing_files=frozen_mapping(referenced),
            unreferenced_images=sorted_assets(unreferenced),
            manifest_only_images=sorted_assets(manifest_only),
        )
