"""
config.py
Налаштування застосунку електронного словника.

Значення за замовчуванням можна перевизначити змінними середовища
з префіксом WORD_DICTIONARY_ (наприклад, WORD_DICTIONARY_LOG_LEVEL=DEBUG).
Налаштування не зберігаються між запусками.

Версія: 1.0
Дата: 2025
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger("WordDictionary")

ENV_PREFIX = "WORD_DICTIONARY_"


@dataclass
class AppConfig:
    """Параметри застосунку."""

    # Місткість історії пошуку
    history_capacity: int = 10
    # Скільки схожих слів показувати (не більше 3, змінною середовища не змінюється)
    suggestion_limit: int = 3
    # Вікно
    window_title: str = "📖 Word Dictionary"
    window_geometry: str = "1000x680"
    # Тема CustomTkinter
    appearance_mode: str = "light"
    color_theme: str = "blue"
    # Логування
    log_level: str = "INFO"
    log_file: str = field(
        default_factory=lambda: str(Path(__file__).resolve().parent / "dictionary_log.txt")
    )
    # Початкова тека для діалогу вибору файлу
    default_directory: str = "."

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        Створює конфігурацію з урахуванням змінних середовища.

        Некоректні числові значення ігноруються з попередженням у лог.

        Args:
            environ (Mapping[str, str] | None): Джерело змінних. За замовчуванням os.environ.

        Returns:
            AppConfig: Готова конфігурація.
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw = env.get(ENV_PREFIX + "HISTORY_CAPACITY")
        if raw is not None:
            try:
                value = int(raw)
                if value < 1:
                    raise ValueError(raw)
                config.history_capacity = value
            except ValueError:
                logger.warning(f"Некоректне значення {ENV_PREFIX}HISTORY_CAPACITY='{raw}', використано {config.history_capacity}")

        if env.get(ENV_PREFIX + "LOG_LEVEL"):
            config.log_level = env[ENV_PREFIX + "LOG_LEVEL"].upper()
        if env.get(ENV_PREFIX + "LOG_FILE"):
            config.log_file = env[ENV_PREFIX + "LOG_FILE"]
        if env.get(ENV_PREFIX + "APPEARANCE"):
            config.appearance_mode = env[ENV_PREFIX + "APPEARANCE"].lower()
        if env.get(ENV_PREFIX + "DIRECTORY"):
            config.default_directory = env[ENV_PREFIX + "DIRECTORY"]

        return config
