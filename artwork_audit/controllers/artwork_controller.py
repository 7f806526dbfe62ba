"""Контроллер анализа: оркестрация сервисов над одним деревом проекта.

SOLID:
- SRP: класс задаёт порядок фаз и собирает отчёт (без логики самих проверок).
- DIP: зависит от сервисов как от ролей; конкретные реализации подставляются полями.
Clean Code:
- Фазы компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from artwork_audit.errors import ArtworkProcessingError
from artwork_audit.models.config_model import AnalyzerConfig
from artwork_audit.models.image_model import ImageAsset, ImageMetrics
from artwork_audit.models.report_model import ArtworkReport, frozen_mapping
from artwork_audit.services.density_classifier import DensityClassifier
from artwork_audit.services.file_service import FileService, validate_project_root
from artwork_audit.services.image_service import ImageService
from artwork_audit.services.process_service import ProcessService
from artwork_audit.services.reference_scanner import ReferenceProgressCallback, ReferenceScanner
from artwork_audit.services.retina_generator import RetinaGenerator, RetinaProgressCallback
from artwork_audit.services.validation import (
    detect_standard_platform_images,
    find_incorrect_device_suffix,
    find_incorrectly_sized_high_density,
)

logger = logging.getLogger(__name__)


@dataclass
class ArtworkController:
    """Связывает сервисы в конвейер анализа и генерации.

    Ответственности:
    - Проверка аргументов до начала работы.
    - Последовательный запуск фаз: обход, метрики, ссылки, плотность, проверки.
    - Упаковка результатов в неизменяемый `ArtworkReport`.
    - Запуск пакетной генерации @2x через `RetinaGenerator`.
    """
    config: AnalyzerConfig = AnalyzerConfig()

    _file_service: FileService = FileService()
    _image_service: ImageService = ImageService()
    _process_service: ProcessService = ProcessService()
    _density_classifier: DensityClassifier = DensityClassifier()

    def extract_artwork(
        self,
        project_root: Path,
        on_progress: Optional[ReferenceProgressCallback] = None,
    ) -> ArtworkReport:
        """Анализирует всю графику проекта.

        Может занять время на больших проектах: поиск ссылок идёт параллельно
        на всех ядрах.

        Raises:
            PreconditionError: корень не указан, не существует или не каталог.
            ArtworkProcessingError: любая ошибка во время анализа (исходная — в `cause`).
        """
        root = validate_project_root(project_root)
        logger.info("Анализ графики в %s", root)
        try:
            return self._extract(root, on_progress)
        except Exception as exc:
            logger.error("Анализ %s прерван: %s", root, exc)
            raise ArtworkProcessingError(exc) from exc

    def generate_retina_images(
        self,
        project_root: Path,
        output_dir: Path,
        standard_images: Iterable[Path],
        on_progress: Optional[RetinaProgressCallback] = None,
    ) -> Tuple[Path, ...]:
        """Создаёт недостающие @2x-изображения; см. `RetinaGenerator.generate`."""
        generator = RetinaGenerator(
            file_service=self._file_service,
            image_service=self._image_service,
            process_service=self._process_service,
            max_workers=self.config.max_workers,
        )
        return generator.generate(project_root, output_dir, standard_images, on_progress)

    # ---- Phases ----
    def _extract(self, root: Path, on_progress: Optional[ReferenceProgressCallback]) -> ArtworkReport:
        config = self.config
        all_images = tuple(
            ImageAsset(path)
            for path in self._file_service.list_images(root, config.image_file_suffixes, config.ignored_names)
        )

        metrics, total_size = self._detect_metrics(all_images)

        contents = self._file_service.read_contents_of_referencing_files(root, config.referencing_file_suffixes)
        scanner = ReferenceScanner(max_workers=config.max_workers, manifest_filename=config.manifest_filename)
        references = scanner.scan(all_images, contents, on_progress)

        density = self._density_classifier.classify(all_images)

        standard_found, standard_missing = detect_standard_platform_images(
            all_images, config.standard_image_filenames
        )

        report = ArtworkReport(
            all_images=all_images,
            referencing_files=references.referencing_files,
            metrics=frozen_mapping(metrics),
            unreferenced_images=references.unreferenced_images,
            manifest_only_images=references.manifest_only_images,
            high_density_images=density.high_density_images,
            standard_density_images=density.standard_density_images,
            standard_missing_high_density=density.standard_missing_high_density,
            high_density_missing_standard=density.high_density_missing_standard,
            incorrect_device_suffix_images=find_incorrect_device_suffix(all_images),
            incorrectly_sized_high_density_images=find_incorrectly_sized_high_density(
                density.high_density_images, metrics
            ),
            standard_platform_images=standard_found,
            missing_standard_platform_filenames=standard_missing,
            total_size_bytes=total_size,
        )
        logger.info("Анализ завершён: %d изображений, %d байт", len(all_images), total_size)
        return report

    def _detect_metrics(self, images: Iterable[ImageAsset]) -> Tuple[Dict[ImageAsset, ImageMetrics], int]:
        metrics: Dict[ImageAsset, ImageMetrics] = {}
        total_size = 0
        for image in images:
            data = self._file_service.read_bytes(image.path)
            total_size += len(data)
            metrics[image] = self._image_service.extract_metrics(data)
        return metrics, total_size
