"""Точка входа: анализ графики iOS-проекта и генерация @2x-изображений."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

from artwork_audit.controllers.artwork_controller import ArtworkController
from artwork_audit.errors import ArtworkAuditError, PreconditionError
from artwork_audit.models.config_model import AnalyzerConfig
from artwork_audit.ui.report_view import ReportView
from artwork_audit.utils.logging import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_PROBLEMS = 3

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"ожидается целое число, получено '{value}'") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"ожидается число >= 1, получено {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artwork-audit",
        description="Аудит графики iOS-проекта: ссылки, пары @2x, ошибки именования и размеров.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Уровень логирования (по умолчанию WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="Писать лог в файл вместо stderr")
    parser.add_argument("--workers", type=_positive_int, default=None, help="Размер пула потоков")
    parser.add_argument(
        "--image-suffix", action="append", default=None, help="Суффикс файлов изображений (можно повторять)"
    )
    parser.add_argument(
        "--referencing-suffix",
        action="append",
        default=None,
        help="Суффикс файлов, где ищутся ссылки (можно повторять)",
    )
    parser.add_argument("--ignore", action="append", default=None, help="Имя пропускаемого каталога")

    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Проанализировать графику проекта")
    analyze.add_argument("project_root", type=Path)
    analyze.add_argument("--json", action="store_true", help="Вывести отчёт в JSON")
    analyze.add_argument("--strict", action="store_true", help="Код выхода 3 при наличии замечаний")
    analyze.add_argument("--show-references", action="store_true", help="Показать, где упоминается каждое изображение")

    generate = sub.add_parser("generate-retina", help="Создать недостающие @2x-изображения")
    generate.add_argument("project_root", type=Path)
    generate.add_argument("output_dir", type=Path)
    generate.add_argument(
        "images",
        nargs="*",
        type=Path,
        help="Стандартные изображения; по умолчанию все, у которых нет @2x-версии",
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> AnalyzerConfig:
    return AnalyzerConfig().with_overrides(
        referencing_file_suffixes=args.referencing_suffix,
        image_file_suffixes=args.image_suffix,
        ignored_names=args.ignore,
        max_workers=args.workers,
    )


def _progress(console: Console) -> Progress:
    return Progress(
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    )


def _run_analyze(args: argparse.Namespace, controller: ArtworkController, console: Console) -> int:
    # Progress goes to stderr so --json output stays parseable.
    with _progress(Console(stderr=True)) as progress:
        task = progress.add_task("Поиск ссылок", total=None)

        def on_progress(image, referencing_files, processed, total):
            progress.update(task, completed=processed, total=total)

        report = controller.extract_artwork(args.project_root, on_progress)

    if args.json:
        console.print_json(json.dumps(report.to_dict()))
    else:
        view = ReportView(console, args.project_root)
        view.render(report, show_references=args.show_references)
        view.render_problem_free(report)

    if args.strict and report.has_problems:
        return EXIT_PROBLEMS
    return EXIT_OK


def _run_generate(args: argparse.Namespace, controller: ArtworkController, console: Console) -> int:
    images: List[Path] = list(args.images)
    if not images:
        report = controller.extract_artwork(args.project_root)
        images = [image.path for image in report.standard_missing_high_density]
    if not images:
        console.print("[green]Все стандартные изображения уже имеют @2x-версию[/green]")
        return EXIT_OK

    with _progress(console) as progress:
        task = progress.add_task("Генерация @2x", total=len(images))

        def on_progress(source, generated, processed, total):
            progress.update(task, completed=processed, total=total)

        generated = controller.generate_retina_images(args.project_root, args.output_dir, images, on_progress)

    console.print(f"[green]Создано файлов: {len(generated)}[/green] в {args.output_dir}")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы, запускает команду и возвращает код выхода."""
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level, filename=args.log_file)
    console = Console()

    try:
        controller = ArtworkController(config=_config_from_args(args))
        if args.command == "analyze":
            return _run_analyze(args, controller, console)
        return _run_generate(args, controller, console)
    except PreconditionError as exc:
        console.print(f"[red]Ошибка:[/red] {exc}")
        return EXIT_USAGE
    except (ArtworkAuditError, ValueError) as exc:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]Ошибка:[/red] {exc}")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
