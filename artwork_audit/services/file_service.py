"""Обход дерева проекта и чтение файлов.

Принципы:
- SRP: только перечисление, чтение и запись; никакой логики анализа.
- Результаты отсортированы для детерминизма.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import AbstractSet, Dict, Iterable, Iterator, Optional, Tuple

from artwork_audit.errors import PreconditionError

logger = logging.getLogger(__name__)


def validate_project_root(project_root: Optional[Path]) -> Path:
    """Проверяет корень проекта до любого чтения и возвращает абсолютный путь.

    Raises:
        PreconditionError: корень не указан, не существует или не является каталогом.
    """
    if project_root is None:
        raise PreconditionError("Не указан корневой каталог проекта")
    root = Path(project_root)
    if not root.exists():
        raise PreconditionError(f"Каталог '{root}' не существует")
    if not root.is_dir():
        raise PreconditionError(f"'{root}' — обычный файл, а должен быть каталогом")
    return root.absolute()


class FileService:
    def list_images(
        self,
        root: Path,
        image_suffixes: AbstractSet[str],
        ignored_names: AbstractSet[str] = frozenset(),
    ) -> Tuple[Path, ...]:
        """Рекурсивно находит изображения по суффиксам, пропуская игнорируемые имена."""
        found = sorted(
            path for path in self._walk(root, ignored_names) if path.name.endswith(tuple(image_suffixes))
        )
        logger.debug("Найдено изображений: %d в %s", len(found), root)
        return tuple(found)

    def list_referencing_files(self, root: Path, referencing_suffixes: AbstractSet[str]) -> Tuple[Path, ...]:
        """Рекурсивно находит файлы, которые могут ссылаться на изображения."""
        return tuple(
            sorted(path for path in self._walk(root, frozenset()) if path.name.endswith(tuple(referencing_suffixes)))
        )

    def read_text(self, path: Path) -> str:
        """Читает файл как UTF-8; неразборчивые байты заменяются."""
        return path.read_text(encoding="utf-8", errors="replace")

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Записывает файл, создавая недостающие каталоги."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def remove_file(self, path: Path) -> None:
        path.unlink(missing_ok=True)

    def remove_empty_dirs(self, directories: Iterable[Path]) -> None:
        """Удаляет пустые каталоги, начиная с самых глубоких; непустые остаются."""
        for directory in sorted(set(directories), key=lambda d: len(d.parts), reverse=True):
            if directory.is_dir() and not any(directory.iterdir()):
                directory.rmdir()

    def read_contents_of_referencing_files(
        self, root: Path, referencing_suffixes: AbstractSet[str]
    ) -> Dict[Path, str]:
        """Возвращает {файл -> содержимое}; пустые файлы не включаются."""
        contents: Dict[Path, str] = {}
        for path in self.list_referencing_files(root, referencing_suffixes):
            text = self.read_text(path)
            if text:
                contents[path] = text
        logger.debug("Прочитано ссылающихся файлов: %d", len(contents))
        return contents

    # ---- Helpers ----
    def _walk(self, root: Path, ignored_names: AbstractSet[str]) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            # Prune in place so os.walk never descends into ignored directories.
            dirnames[:] = sorted(d for d in dirnames if d not in ignored_names)
            base = Path(dirpath)
            for filename in filenames:
                if filename not in ignored_names:
                    yield (base / filename).absolute()
