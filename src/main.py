"""
main.py
Точка входу для особистого словника англійських слів.

Налаштовує логування та запускає GUI застосунок.

Версія: 1.0
Дата: 2025

Використання:
    python main.py
"""

import os
import sys
import ctypes
import logging

from config import AppConfig

# --- Підтримка UTF-8 в консолі Windows ---
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding='utf-8')
    sys.stderr.reconfigure(encoding='utf-8')
    os.system("chcp 65001 >nul 2>&1")

    # High DPI Awareness для Windows
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass

logger = logging.getLogger("WordDictionary")


def setup_logging(config: AppConfig) -> None:
    """Налаштування логування у файл та консоль."""
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s | %(levelname)-8s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.FileHandler(config.log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )


def main():
    """
    Головна функція запуску застосунку.

    Створює конфігурацію, словник та історію, передає їх у GUI
    та запускає головний цикл.
    """
    config = AppConfig.from_env()
    setup_logging(config)

    # --- Налаштування CustomTkinter ---
    import customtkinter as ctk
    ctk.set_appearance_mode(config.appearance_mode)
    ctk.set_default_color_theme(config.color_theme)

    from dictionary_catalog import DictionaryCatalog
    from search_history import SearchHistory
    from ui_components import ModernDictionaryApp

    try:
        catalog = DictionaryCatalog(suggestion_limit=config.suggestion_limit)
        history = SearchHistory(config.history_capacity)

        app = ModernDictionaryApp(catalog=catalog, history=history, config=config)
        app.mainloop()

    except KeyboardInterrupt:
        logger.info("Застосунок зупинено користувачем (Ctrl+C)")
    except Exception as e:
        logger.error(f"Критична помилка: {e}", exc_info=True)
    finally:
        logger.info("Застосунок завершено")


if __name__ == "__main__":
    main()
