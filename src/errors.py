"""
errors.py
Модуль помилок та результатів операцій словника.

Містить ієрархію винятків DictionaryError та клас OperationResult,
через який DictionaryCatalog повертає успіх або помилку замість
прокидання винятків у GUI.

Версія: 1.0
Дата: 2025
"""

from dataclasses import dataclass
from typing import Any, Optional


class DictionaryError(Exception):
    """
    Базовий клас для всіх помилок словника.

    Attributes:
        message (str): Повідомлення для відображення користувачу.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidWord(DictionaryError):
    """Слово не складається лише з латинських літер."""

    def __init__(self, word: str | None):
        super().__init__(f"The word {word} is not a valid word.")
        self.word = word


class WordDuplicated(DictionaryError):
    """Слово вже є у словнику."""

    def __init__(self, word: str):
        super().__init__(f"The word {word} already exists in the dictionary.")
        self.word = word


class WordNotFound(DictionaryError):
    """Слово відсутнє у словнику."""

    def __init__(self, word: str):
        super().__init__(f"The word {word} does not exist in the dictionary.")
        self.word = word


class FileUnavailable(DictionaryError):
    """
    Файл для імпорту/експорту неможливо відкрити, прочитати або записати.

    Attributes:
        path (str): Шлях до файлу.
        reason (Exception | None): Первинна помилка вводу/виводу.
    """

    def __init__(self, message: str, path: str, reason: Optional[Exception] = None):
        super().__init__(message)
        self.path = path
        self.reason = reason


class SourceUnavailable(FileUnavailable):
    """Файл для імпорту недоступний."""

    def __init__(self, path: str, reason: Optional[Exception] = None):
        super().__init__(f"The file {path} cannot be opened for import.", path, reason)


class SinkUnavailable(FileUnavailable):
    """Файл для експорту недоступний."""

    def __init__(self, path: str, reason: Optional[Exception] = None):
        super().__init__(f"The file {path} cannot be opened for export.", path, reason)


class EmptyHistory(DictionaryError):
    """Спроба вилучити елемент з порожньої історії."""

    def __init__(self):
        super().__init__("Cannot pop empty history.")


@dataclass(frozen=True)
class OperationResult:
    """
    Результат операції над словником.

    Рівно одне з полів має зміст: value при успіху або error при помилці.
    GUI перевіряє `ok` і за потреби зіставляє тип `error` через match.

    Attributes:
        value (Any): Значення успішної операції (наприклад, кількість слів).
        error (DictionaryError | None): Помилка, якщо операція не вдалася.

    Example:
        >>> result = catalog.remove_word('cat')
        >>> if not result.ok:
        ...     print(result.message)
    """

    value: Any = None
    error: Optional[DictionaryError] = None

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DictionaryError) -> "OperationResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Текст помилки або порожній рядок при успіху."""
        return self.error.message if self.error else ""
