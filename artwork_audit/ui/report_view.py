"""Вывод отчёта в консоль.

Принципы:
- SRP: отвечает только за представление `ArtworkReport`.
- Пути показываются относительно корня проекта, чтобы таблицы оставались читаемыми.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from artwork_audit.models.image_model import ImageAsset
from artwork_audit.models.report_model import ArtworkReport


def format_size(size_bytes: Optional[int]) -> str:
    if size_bytes is None:
        return "—"
    thresholds = [("Б", 1024), ("КБ", 1024**2), ("МБ", 1024**3), ("ГБ", 1024**4)]
    for label, limit in thresholds:
        if size_bytes < limit:
            if label == "Б":
                return f"{size_bytes} {label}"
            value = size_bytes / (limit // 1024)
            return f"{value:.1f} {label}"
    value = size_bytes / (1024**4)
    return f"{value:.1f} ГБ"


class ReportView:
    """Таблицы rich: сводка и по одному разделу на каждый вид замечаний."""
    def __init__(self, console: Console, project_root: Path) -> None:
        self._console = console
        self._root = Path(project_root).absolute()

    # ---- Public API ----
    def render(self, report: ArtworkReport, show_references: bool = False) -> None:
        self._render_summary(report)
        self._render_section("Не используются", report.unreferenced_images, report)
        self._render_section("Упоминаются только в файле проекта", report.manifest_only_images, report)
        self._render_section("Нет @2x-версии", report.standard_missing_high_density, report)
        self._render_section("Нет стандартной версии", report.high_density_missing_standard, report)
        self._render_section("Лишний суффикс ~iphone", report.incorrect_device_suffix_images, report)
        self._render_section("@2x с нечётным размером", report.incorrectly_sized_high_density_images, report)
        if report.missing_standard_platform_filenames:
            self._console.print(
                "[bold yellow]Отсутствуют стандартные изображения:[/bold yellow] "
                + ", ".join(report.missing_standard_platform_filenames)
            )
        if show_references:
            self._render_references(report)

    def render_problem_free(self, report: ArtworkReport) -> None:
        if not report.has_problems:
            self._console.print("[green]Замечаний нет[/green]")

    # ---- Helpers ----
    def _render_summary(self, report: ArtworkReport) -> None:
        table = Table(title=f"Графика: {self._root}", show_header=False)
        table.add_column("Параметр")
        table.add_column("Значение", justify="right")
        table.add_row("Всего изображений", str(len(report.all_images)))
        table.add_row("Стандартных", str(len(report.standard_density_images)))
        table.add_row("@2x", str(len(report.high_density_images)))
        table.add_row("Используются", str(len(report.referencing_files)))
        table.add_row("Стандартных изображений платформы", str(len(report.standard_platform_images)))
        table.add_row("Общий размер", format_size(report.total_size_bytes))
        self._console.print(table)

    def _render_section(self, title: str, images: Iterable[ImageAsset], report: ArtworkReport) -> None:
        images = tuple(images)
        if not images:
            return
        table = Table(title=f"{title} ({len(images)})", title_justify="left")
        table.add_column("Файл")
        table.add_column("Размер, px", justify="right")
        table.add_column("Вес", justify="right")
        for image in images:
            metrics = report.metrics.get(image)
            dims = f"{metrics.width} × {metrics.height}" if metrics else "—"
            table.add_row(self._relative(image.path), dims, format_size(metrics.size_bytes if metrics else None))
        self._console.print(table)

    def _render_references(self, report: ArtworkReport) -> None:
        table = Table(title="Ссылки", title_justify="left")
        table.add_column("Изображение")
        table.add_column("Где упоминается")
        for image, files in report.referencing_files.items():
            table.add_row(self._relative(image.path), "\n".join(self._relative(p) for p in files))
        self._console.print(table)

    def _relative(self, path: Path) -> str:
        try:
            return str(path.relative_to(self._root))
        except ValueError:
            return str(path)
