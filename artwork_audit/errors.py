"""Иерархия исключений аудита графики.

Принципы:
- Ошибки вызывающей стороны (`PreconditionError`) отделены от сбоев обработки
  (`ArtworkProcessingError`), которые всегда несут исходную причину.
- `UnsupportedOperationError` отличает «не реализовано» от «сломалось».
"""
from __future__ import annotations


class ArtworkAuditError(Exception):
    """Базовый класс всех ошибок пакета."""


class PreconditionError(ArtworkAuditError, ValueError):
    """Некорректные аргументы: выбрасывается до начала любой работы."""


class AlreadyHighDensityError(PreconditionError):
    """Исходное изображение уже является @2x-вариантом."""


class ImageDecodingError(ArtworkAuditError, ValueError):
    """Байты не распознаны как изображение."""


class UnsupportedOperationError(ArtworkAuditError, NotImplementedError):
    """Возможность явно не реализована."""


class ArtworkProcessingError(ArtworkAuditError):
    """Сбой внутри фазы обработки; исходная ошибка доступна как `cause`."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Ошибка обработки графики: {cause}")
        self.cause = cause
