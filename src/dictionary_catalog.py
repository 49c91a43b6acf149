"""
dictionary_catalog.py
Модуль логіки електронного словника.

Містить клас DictionaryCatalog, що зберігає слова в пам'яті та реалізує
додавання, пошук, перейменування, видалення, імпорт та експорт.
Всі змінюючі операції повертають OperationResult замість винятків,
тож GUI лише відображає повідомлення помилки.

Формат файлу імпорту/експорту:
    word            word
    meaning         count
    <порожній>      meaning
                    <порожній>
Імпорт приймає обидва варіанти, лічильник при імпорті ігнорується.

Версія: 1.0
Дата: 2025
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from errors import (
    DictionaryError,
    OperationResult,
    SinkUnavailable,
    SourceUnavailable,
    WordDuplicated,
    WordNotFound,
)
from search_history import SearchHistory
from word_entry import WordEntry

# Отримуємо логер
logger = logging.getLogger("WordDictionary")

SUGGESTION_LIMIT = 3

_COUNT_LINE = re.compile(r"[0-9]+")


def normalize_meaning(text: str) -> str:
    """
    Зводить значення до одного рядка: формат файлу не допускає переносів.

    Непорожні рядки обрізаються та з'єднуються пробілом.

    Args:
        text (str): Значення з багаторядкового поля.

    Returns:
        str: Однорядкове значення.
    """
    return " ".join(line.strip() for line in text.splitlines() if line.strip())


def _is_blank(line: Optional[str]) -> bool:
    return line is None or not line.strip()


def _parse_export_form(lines: List[str]) -> Optional[List[Tuple[str, str]]]:
    """
    Розбір файлу, якщо він повністю відповідає формату експорту.

    Записи по чотири рядки: слово, частота, значення, порожній розділювач.
    Порожнє значення останнього запису може бути відсутнім рядком.

    Returns:
        List[Tuple[str, str]] | None: Записи або None, якщо файл не у форматі експорту.
    """
    records = []
    for start in range(0, len(lines), 4):
        word, count, meaning, separator = (lines[start:start + 4] + [None] * 4)[:4]
        if count is None or not _COUNT_LINE.fullmatch(count):
            return None
        if not _is_blank(separator):
            return None
        records.append((word, meaning or ""))
    return records or None


def _parse_import_form(lines: List[str]) -> Iterator[Tuple[str, str]]:
    stripped = iter(lines)
    while True:
        word = next(stripped, None)
        meaning = next(stripped, None)
        if word is None or meaning is None:
            return

        separator = next(stripped, None)
        if not _is_blank(separator) and _COUNT_LINE.fullmatch(meaning):
            meaning = separator
            next(stripped, None)

        yield word, meaning


def parse_records(lines: Iterable[str]) -> List[Tuple[str, str]]:
    """
    Розбирає рядки файлу імпорту на пари (слово, значення).

    Якщо весь файл відповідає формату експорту (слово, частота, значення,
    розділювач), він читається саме так, включно з порожніми значеннями;
    частота пропускається.

    Інакше кожен запис: рядок слова, рядок значення, рядок-розділювач.
    Якщо другий рядок є числом, а третій не порожній, окремий запис
    читається у форматі експорту.
    Неповний запис наприкінці файлу ігнорується.

    Args:
        lines (Iterable[str]): Рядки файлу (з символами кінця рядка або без).

    Returns:
        List[Tuple[str, str]]: Слова та їхні значення у порядку файлу.
    """
    stripped = [line.rstrip("\r\n") for line in lines]
    export_records = _parse_export_form(stripped)
    if export_records is not None:
        return export_records
    return list(_parse_import_form(stripped))


@dataclass
class SearchOutcome:
    """
    Результат пошуку для відображення в GUI.

    Attributes:
        query (str): Запит користувача.
        match (WordEntry | None): Точний збіг або None.
        suggestions (List[WordEntry]): До трьох схожих слів за рейтингом.
        history (List[str]): Знімок історії пошуку після оновлення.
    """

    query: str
    match: Optional[WordEntry] = None
    suggestions: List[WordEntry] = field(default_factory=list)
    history: List[str] = field(default_factory=list)


class DictionaryCatalog:
    """
    Словник слів у пам'яті.

    Ключ - слово (з урахуванням регістру), значення - WordEntry.

    Example:
        >>> catalog = DictionaryCatalog()
        >>> catalog.add_word('cat', 'a feline').ok
        True
        >>> catalog.find_word('cat').meaning
        'a feline'
    """

    def __init__(self, suggestion_limit: int = SUGGESTION_LIMIT):
        """
        Args:
            suggestion_limit (int): Скільки схожих слів повертати (від 1 до 3).

        Raises:
            ValueError: Якщо ліміт поза межами 1..3.
        """
        if not 1 <= suggestion_limit <= SUGGESTION_LIMIT:
            raise ValueError(f"suggestion_limit must be between 1 and {SUGGESTION_LIMIT}, got {suggestion_limit}")
        self._entries: Dict[str, WordEntry] = {}
        self.suggestion_limit = suggestion_limit

    def add_word(self, name: str, meaning: str) -> OperationResult:
        """
        Додає нове слово до словника.

        Args:
            name (str): Слово (лише латинські літери).
            meaning (str): Значення слова.

        Returns:
            OperationResult: Успіх із новим записом, або InvalidWord / WordDuplicated.
        """
        try:
            self._insert(WordEntry(name, meaning))
        except DictionaryError as e:
            logger.warning(f"Не вдалося додати слово '{name}': {e.message}")
            return OperationResult.failure(e)

        logger.info(f"Додано слово: '{name}'")
        return OperationResult.success(self._entries[name])

    def _insert(self, entry: WordEntry) -> None:
        if entry.name in self._entries:
            raise WordDuplicated(entry.name)
        self._entries[entry.name] = entry

    def find_word(self, name: str) -> Optional[WordEntry]:
        """
        Точний пошук слова. Частоту не змінює.

        Returns:
            WordEntry | None: Запис або None, якщо слова немає.
        """
        return self._entries.get(name)

    def find_word_by_freq(self, substring: str) -> List[WordEntry]:
        """
        Повертає найчастіше шукані слова, що містять підрядок.

        УВАГА: це не чистий запит. Кожне повернуте слово отримує +1
        до лічильника пошуків; слова поза першою трійкою не змінюються.

        Args:
            substring (str): Підрядок (з урахуванням регістру).

        Returns:
            List[WordEntry]: До трьох записів у порядку рейтингу (до збільшення).
        """
        candidates = [entry for name, entry in self._entries.items() if substring in name]
        if not candidates:
            return []

        top = sorted(candidates)[:self.suggestion_limit]
        for entry in top:
            entry.increment_frequency()
        return top

    def search(self, query: str, history: SearchHistory) -> SearchOutcome:
        """
        Повний пошук для кнопки Find: точний збіг, схожі слова та історія.

        Схожі слова додаються до історії від останнього до першого,
        точний збіг - наприкінці, тому він опиняється на початку історії.

        Args:
            query (str): Запит користувача.
            history (SearchHistory): Історія, яку треба оновити.

        Returns:
            SearchOutcome: Збіг, підказки та знімок історії.
        """
        match = self.find_word(query)
        suggestions = self.find_word_by_freq(query)

        for entry in reversed(suggestions):
            history.push(entry.name)
        if match is not None:
            history.push(match.name)

        logger.info(f"Пошук: '{query}' (збіг: {match is not None}, схожих: {len(suggestions)})")
        return SearchOutcome(query, match, suggestions, history.to_list())

    def modify_meaning(self, new_name: str, old_name: str) -> OperationResult:
        """
        Перейменовує слово, зберігаючи значення та частоту.

        Операція атомарна: при будь-якій помилці старий запис не змінюється.

        Args:
            new_name (str): Нове слово.
            old_name (str): Слово, яке треба перейменувати.

        Returns:
            OperationResult: Успіх із новим записом, або WordNotFound /
            InvalidWord / WordDuplicated.
        """
        try:
            old_entry = self._entries.get(old_name)
            if old_entry is None:
                raise WordNotFound(old_name)

            renamed = WordEntry(new_name, old_entry.meaning, old_entry.search_count)
            if new_name != old_name and new_name in self._entries:
                raise WordDuplicated(new_name)
        except DictionaryError as e:
            logger.warning(f"Не вдалося перейменувати '{old_name}' на '{new_name}': {e.message}")
            return OperationResult.failure(e)

        if new_name == old_name:
            return OperationResult.success(old_entry)

        del self._entries[old_name]
        self._entries[new_name] = renamed
        logger.info(f"Перейменовано: '{old_name}' -> '{new_name}'")
        return OperationResult.success(renamed)

    def remove_word(self, name: str) -> OperationResult:
        """
        Видаляє слово зі словника.

        Returns:
            OperationResult: Успіх із видаленим записом, або WordNotFound.
        """
        entry = self._entries.pop(name, None)
        if entry is None:
            error = WordNotFound(name)
            logger.warning(f"Не вдалося видалити слово: {error.message}")
            return OperationResult.failure(error)

        logger.info(f"Видалено слово: '{name}'")
        return OperationResult.success(entry)

    def remove_all_words(self) -> OperationResult:
        """Видаляє всі слова. Завжди успішно, повертає кількість видалених."""
        removed = len(self._entries)
        self._entries.clear()
        logger.info(f"Словник очищено ({removed} слів)")
        return OperationResult.success(removed)

    def import_lines(self, lines: Iterable[str]) -> OperationResult:
        """
        Замінює вміст словника записами з рядків.

        Словник очищується до читання. Перше невалідне або повторене слово
        перериває імпорт; вже додані слова залишаються (без відкату).

        Args:
            lines (Iterable[str]): Рядки у форматі імпорту.

        Returns:
            OperationResult: Кількість імпортованих слів, або InvalidWord / WordDuplicated.
        """
        self._entries.clear()
        return self._load_records(lines)

    def import_from_file(self, path: str) -> OperationResult:
        """
        Імпорт словника з текстового файлу (UTF-8).

        Словник очищується ще до відкриття файлу, тож невдалий імпорт
        залишає його порожнім або частково заповненим.

        Args:
            path (str): Шлях до файлу.

        Returns:
            OperationResult: Кількість імпортованих слів, або SourceUnavailable /
            InvalidWord / WordDuplicated.
        """
        self._entries.clear()
        try:
            with open(path, "r", encoding="utf-8") as f:
                result = self._load_records(f)
        except (OSError, UnicodeDecodeError) as e:
            error = SourceUnavailable(path, e)
            logger.error(f"Помилка імпорту з '{path}': {e}")
            return OperationResult.failure(error)

        if result.ok:
            logger.info(f"Імпортовано {result.value} слів з '{path}'")
        return result

    def _load_records(self, lines: Iterable[str]) -> OperationResult:
        count = 0
        for word, meaning in parse_records(lines):
            result = self.add_word(word, meaning)
            if not result.ok:
                logger.warning(f"Імпорт перервано після {count} слів, словник частково заповнено")
                return result
            count += 1
        return OperationResult.success(count)

    def entries(self) -> List[WordEntry]:
        """Всі записи в порядку рейтингу (частота, далі алфавіт)."""
        return sorted(self._entries.values())

    def export_lines(self) -> List[str]:
        """
        Рядки файлу експорту: слово, частота, значення; записи розділені
        одним порожнім рядком, без розділювача після останнього.
        """
        lines: List[str] = []
        for index, entry in enumerate(self.entries()):
            if index:
                lines.append("")
            lines.extend(entry.to_record_lines())
        return lines

    def export_to_file(self, path: str) -> OperationResult:
        """
        Експорт словника у текстовий файл (UTF-8).

        Args:
            path (str): Шлях до файлу.

        Returns:
            OperationResult: Кількість експортованих слів, або SinkUnavailable.
        """
        lines = self.export_lines()
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write("\n".join(lines))
        except OSError as e:
            error = SinkUnavailable(path, e)
            logger.error(f"Помилка експорту в '{path}': {e}")
            return OperationResult.failure(error)

        logger.info(f"Експортовано {len(self._entries)} слів у '{path}'")
        return OperationResult.success(len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name) -> bool:
        return name in self._entries

    def __str__(self) -> str:
        return "".join(
            f"{entry.name}\n{entry.search_count}\n{entry.meaning}\n\n"
            for entry in self._entries.values()
        )

    def __repr__(self) -> str:
        return f"DictionaryCatalog({len(self._entries)} words)"
