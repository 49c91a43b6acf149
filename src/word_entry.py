"""
word_entry.py
Модуль запису слова для електронного словника.

Містить клас WordEntry: слово, його значення та лічильник пошуків.
Порядок записів (спершу частіше шукані, далі за алфавітом) використовується
і для підказок схожих слів, і для експорту.

Версія: 1.0
Дата: 2025
"""

import re
from functools import total_ordering
from typing import List, Tuple

from errors import InvalidWord

# Допустиме слово: одна або більше латинських літер
WORD_PATTERN = re.compile(r"[a-zA-Z]+")


def is_valid_word(word: str | None) -> bool:
    """
    Перевіряє чи слово складається лише з англійських літер.

    Args:
        word (str | None): Рядок для перевірки.

    Returns:
        bool: True якщо слово валідне.
    """
    return word is not None and WORD_PATTERN.fullmatch(word) is not None


@total_ordering
class WordEntry:
    """
    Запис слова у словнику.

    Назва та значення незмінні після створення, лічильник пошуків
    збільшується лише коли слово потрапляє до підказок схожих слів.

    Attributes:
        name (str): Саме слово.
        meaning (str): Значення слова.
        search_count (int): Скільки разів слово було знайдено серед схожих.

    Example:
        >>> entry = WordEntry('cat', 'a feline')
        >>> entry.increment_frequency()
        >>> entry
        cat : 1
    """

    __slots__ = ("_name", "_meaning", "search_count")

    def __init__(self, name: str, meaning: str, search_count: int = 0):
        """
        Створення нового запису.

        Args:
            name (str): Слово (лише латинські літери).
            meaning (str): Значення слова.
            search_count (int): Попередня частота пошуку. За замовчуванням 0.

        Raises:
            InvalidWord: Якщо слово не проходить перевірку.
            ValueError: Якщо частота від'ємна.
        """
        if not is_valid_word(name):
            raise InvalidWord(name)
        if search_count < 0:
            raise ValueError(f"search_count must be non-negative, got {search_count}")
        self._name = name
        self._meaning = meaning
        self.search_count = search_count

    @property
    def name(self) -> str:
        return self._name

    @property
    def meaning(self) -> str:
        return self._meaning

    def increment_frequency(self) -> None:
        self.search_count += 1

    def sort_key(self) -> Tuple[int, str]:
        """Ключ сортування: спадна частота, далі зростаючий алфавіт."""
        return (-self.search_count, self._name)

    def to_record_lines(self) -> List[str]:
        """Рядки запису для експорту: слово, частота, значення."""
        return [self._name, str(self.search_count), self._meaning]

    # "Менший" запис стоїть раніше у рейтингу
    def __lt__(self, other):
        if not isinstance(other, WordEntry):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __eq__(self, other):
        if not isinstance(other, WordEntry):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __hash__(self):
        return hash(self._name)

    def __repr__(self) -> str:
        return f"{self._name} : {self.search_count}"
