"""
search_history.py
Модуль історії пошуку для електронного словника.

Містить клас SearchHistory: стек обмеженого розміру, де останні знайдені
слова стоять на початку. Повторний пошук переносить слово нагору.

Версія: 1.0
Дата: 2025
"""

from typing import List

from errors import EmptyHistory

DEFAULT_CAPACITY = 10


class SearchHistory:
    """
    Історія пошуку з фіксованою місткістю.

    Найновіші елементи мають найменші індекси. Якщо елемент вже є,
    push переносить його на початок; якщо історія заповнена,
    найстаріший елемент (останній) відкидається.

    Attributes:
        capacity (int): Максимальна кількість елементів.

    Example:
        >>> history = SearchHistory(2)
        >>> history.push('cat')
        >>> history.push('dog')
        >>> history.push('cat')
        >>> history.to_list()
        ['cat', 'dog']
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Args:
            capacity (int): Місткість історії. За замовчуванням 10.

        Raises:
            ValueError: Якщо місткість не додатна.
        """
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: List[str] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: str) -> None:
        """
        Додає значення на початок історії.

        Args:
            value (str): Знайдене слово.
        """
        if value in self._items:
            self._items.remove(value)

        if len(self._items) == self._capacity:
            self._items.pop()

        self._items.insert(0, value)

    def pop(self) -> str:
        """
        Вилучає та повертає найстаріший елемент.

        Returns:
            str: Останній елемент історії.

        Raises:
            EmptyHistory: Якщо історія порожня.
        """
        if not self._items:
            raise EmptyHistory()
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> List[str]:
        """
        Знімок історії, від найновішого до найстарішого.

        Returns:
            List[str]: Нова копія списку, незалежна від внутрішнього стану.
        """
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value) -> bool:
        return value in self._items

    def __repr__(self) -> str:
        return f"SearchHistory({self._items!r}, capacity={self._capacity})"
