"""Пакетная генерация @2x-изображений из стандартных.

Принципы:
- Все проверки аргументов выполняются до постановки первой задачи.
- Fail-fast: первая ошибка любой задачи отменяет оставшиеся и прерывает пакет;
  уже созданные файлы и каталоги удаляются, частичный набор не остаётся.
"""
from __future__ import annotations

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from artwork_audit.errors import AlreadyHighDensityError, ArtworkProcessingError, PreconditionError
from artwork_audit.models.image_model import DENSITY_MARKER, ImageFormat
from artwork_audit.services.file_service import FileService, validate_project_root
from artwork_audit.services.image_service import ImageService
from artwork_audit.services.naming import to_high_density
from artwork_audit.services.process_service import ProcessService

logger = logging.getLogger(__name__)

# (source_image, generated_image, processed_count, total_count)
RetinaProgressCallback = Callable[[Path, Path, int, int], None]


def _no_progress(source: Path, generated: Path, processed: int, total: int) -> None:
    pass


def _missing_dirs(out_root: Path, targets: Iterable[Path]) -> List[Path]:
    """Каталоги между `out_root` (включительно) и целями, которых ещё нет."""
    missing = set()
    for target in targets:
        directory = target.parent
        while not directory.exists():
            missing.add(directory)
            if directory == out_root or directory.parent == directory:
                break
            directory = directory.parent
    return sorted(missing)


class RetinaGenerator:
    def __init__(
        self,
        file_service: Optional[FileService] = None,
        image_service: Optional[ImageService] = None,
        process_service: Optional[ProcessService] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        self._file_service = file_service or FileService()
        self._image_service = image_service or ImageService()
        self._process_service = process_service or ProcessService()
        self._max_workers = max_workers or os.cpu_count() or 1

    def generate(
        self,
        project_root: Path,
        output_dir: Path,
        standard_images: Iterable[Path],
        on_progress: Optional[RetinaProgressCallback] = None,
    ) -> Tuple[Path, ...]:
        """Создаёт @2x-версии изображений в `output_dir`, сохраняя структуру каталогов.

        Args:
            project_root: Корень проекта; относительные пути считаются от него.
            output_dir: Каталог назначения (создаётся при необходимости).
            standard_images: Стандартные изображения внутри `project_root`.
            on_progress: Наблюдатель (source, generated, processed, total).

        Returns:
            Отсортированные пути созданных файлов.

        Raises:
            PreconditionError: некорректные аргументы; ничего не записано.
            AlreadyHighDensityError: среди источников есть @2x-изображение.
            ArtworkProcessingError: ошибка чтения, декодирования, масштабирования или записи.
        """
        root = validate_project_root(project_root)
        if output_dir is None:
            raise PreconditionError("Не указан выходной каталог")
        out_root = Path(output_dir).absolute()
        if out_root.exists() and not out_root.is_dir():
            raise PreconditionError(f"'{out_root}' — обычный файл, а должен быть каталогом")
        if standard_images is None:
            raise PreconditionError("Не указан набор изображений")

        jobs: List[Tuple[Path, Path]] = []
        for image in sorted({Path(p).absolute() for p in standard_images}):
            if DENSITY_MARKER in image.name:
                raise AlreadyHighDensityError(f"'{image}' уже является {DENSITY_MARKER}-изображением")
            try:
                relative = image.relative_to(root)
            except ValueError as exc:
                raise PreconditionError(f"'{image}' находится вне каталога проекта '{root}'") from exc
            jobs.append((image, out_root / relative.parent / to_high_density(image.name)))

        report = on_progress or _no_progress
        total = len(jobs)
        generated: List[Path] = []
        created_dirs = _missing_dirs(out_root, (target for _, target in jobs))
        existing_targets = {target for _, target in jobs if target.exists()}
        failure: Optional[Exception] = None

        logger.info("Генерация @2x: %d изображений -> %s", total, out_root)
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures: Dict[Future, Path] = {
                executor.submit(self._generate_one, source, target): source for source, target in jobs
            }
            for future in as_completed(futures):
                source = futures[future]
                try:
                    target = future.result()
                    generated.append(target)
                    report(source, target, len(generated), total)
                except Exception as exc:
                    for pending in futures:
                        pending.cancel()
                    logger.error("Не удалось создать @2x для %s: %s", source, exc)
                    failure = exc
                    break

        if failure is not None:
            # Executor has joined, so no task can write after the cleanup.
            self._discard(
                [target for _, target in jobs if target not in existing_targets],
                created_dirs,
            )
            raise ArtworkProcessingError(failure) from failure

        logger.info("Генерация @2x завершена: %d файлов", len(generated))
        return tuple(sorted(generated))

    def _discard(self, targets: Iterable[Path], created_dirs: Iterable[Path]) -> None:
        for target in targets:
            self._file_service.remove_file(target)
        self._file_service.remove_empty_dirs(created_dirs)
        logger.info("Частично созданные @2x-файлы удалены")

    def _generate_one(self, source: Path, target: Path) -> Path:
        data = self._file_service.read_bytes(source)
        metrics = self._image_service.extract_metrics(data)
        scaled = self._process_service.scale_up(data, metrics.width * 2, metrics.height * 2, ImageFormat.PNG)
        self._file_service.write_bytes(target, scaled)
        logger.debug("%s (%d×%d) -> %s", source.name, metrics.width, metrics.height, target)
        return target
