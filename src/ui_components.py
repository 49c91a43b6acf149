"""
ui_components.py
UI компоненти для особистого словника.

Містить всі CustomTkinter класи та логіку інтерфейсу:
- ModernDictionaryApp: Головне вікно застосунку
- StatusIndicator: Індикатор результату останньої операції
- HistoryItem: Елемент історії пошуку
- SuggestionChip: Кнопка схожого слова

GUI лише викликає операції DictionaryCatalog та відображає результати.

Версія: 1.0
Дата: 2025
"""

import customtkinter as ctk
from tkinter import filedialog, messagebox
import logging

from config import AppConfig
from dictionary_catalog import DictionaryCatalog, SearchOutcome, normalize_meaning
from errors import (
    DictionaryError,
    FileUnavailable,
    InvalidWord,
    OperationResult,
    WordDuplicated,
    WordNotFound,
)
from search_history import SearchHistory

# Отримуємо логер
logger = logging.getLogger("WordDictionary")

# --- Палітра кольорів (Світла тема) ---
COLORS = {
    "bg_main": "#F5F5F5",           # Світло-сірий фон
    "bg_card": "#FFFFFF",           # Білий для карток
    "bg_sidebar": "#E8E8E8",        # Сірий для бокових панелей
    "accent": "#007AFF",            # Azure Blue акцент
    "accent_hover": "#0056B3",      # Темніший синій при наведенні
    "success": "#28A745",           # Зелений для успіху
    "warning": "#FFC107",           # Жовтий для попереджень
    "danger": "#DC3545",            # Червоний для помилок
    "text_primary": "#000000",      # Чорний основний текст
    "text_secondary": "#333333",    # Темно-сірий вторинний текст
    "text_muted": "#6C757D",        # Сірий для підказок
    "border": "#DEE2E6",            # Світла рамка
    "title_color": "#1A365D"        # Темно-синій для заголовків
}

FILE_TYPES = [("Text file", "*.txt")]

NO_MATCH_MESSAGE = "No Word Matched."


class StatusIndicator(ctk.CTkFrame):
    """Індикатор результату останньої операції з кольоровою точкою."""

    def __init__(self, master, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)

        self.dot = ctk.CTkLabel(
            self,
            text="●",
            font=("Segoe UI", 16),
            text_color=COLORS["text_muted"]
        )
        self.dot.pack(side="left", padx=(0, 5))

        self.label = ctk.CTkLabel(
            self,
            text="Ready",
            font=("Segoe UI", 12),
            text_color=COLORS["text_secondary"]
        )
        self.label.pack(side="left")

    def set_ok(self, text: str):
        self.dot.configure(text_color=COLORS["success"])
        self.label.configure(text=text, text_color=COLORS["success"])

    def set_error(self, text: str):
        self.dot.configure(text_color=COLORS["danger"])
        self.label.configure(text=text, text_color=COLORS["danger"])

    def set_idle(self, text: str = "Ready"):
        self.dot.configure(text_color=COLORS["text_muted"])
        self.label.configure(text=text, text_color=COLORS["text_secondary"])


class HistoryItem(ctk.CTkButton):
    """Клікабельний елемент історії пошуку."""

    def __init__(self, master, word, callback, **kwargs):
        super().__init__(
            master,
            text=f"🕒 {word}",
            font=("Segoe UI", 12),
            fg_color="transparent",
            text_color=COLORS["text_secondary"],
            hover_color=COLORS["border"],
            anchor="w",
            command=lambda: callback(word),
            **kwargs
        )


class SuggestionChip(ctk.CTkButton):
    """Кнопка схожого слова. Порожня кнопка заблокована."""

    def __init__(self, master, callback, **kwargs):
        self._word = ""
        super().__init__(
            master,
            text="",
            width=150,
            height=36,
            font=("Segoe UI", 13),
            fg_color="#87CEEB",
            hover_color="#6BB6FF",
            text_color="#FFFFFF",
            corner_radius=12,
            state="disabled",
            command=lambda: callback(self._word),
            **kwargs
        )

    def set_word(self, word: str = ""):
        self._word = word
        self.configure(text=word, state="normal" if word else "disabled")


class ModernDictionaryApp(ctk.CTk):
    """
    Головне вікно особистого словника.

    Ліва частина: поля слова, значення та кнопки дій.
    Права частина: історія пошуку.
    Нижня панель: імпорт та експорт файлу.

    Args:
        catalog (DictionaryCatalog): Словник слів.
        history (SearchHistory): Історія пошуку.
        config (AppConfig): Налаштування застосунку.
    """

    def __init__(self, catalog: DictionaryCatalog = None, history: SearchHistory = None,
                 config: AppConfig = None):
        super().__init__()

        self.config_data = config if config else AppConfig()
        self.catalog = catalog if catalog is not None else DictionaryCatalog(self.config_data.suggestion_limit)
        self.history = history if history is not None else SearchHistory(self.config_data.history_capacity)

        # Window Configuration
        self.title(self.config_data.window_title)
        self.geometry(self.config_data.window_geometry)
        self.minsize(860, 560)
        self.configure(fg_color=COLORS["bg_main"])

        # Після повідомлення в полі значення перше натискання клавіші очищує його
        self._reset_meaning_on_key = False

        # Create UI
        self._create_top_bar()
        self._create_layout()
        self._create_file_bar()
        self._bind_shortcuts()

        self.protocol("WM_DELETE_WINDOW", self._close_window)
        self.after(100, self._focus_search)

        logger.info("Застосунок успішно запущено")

    def _create_top_bar(self):
        """Створення верхньої панелі з пошуком."""
        top_bar = ctk.CTkFrame(self, fg_color=COLORS["bg_card"], corner_radius=0, height=80)
        top_bar.pack(fill="x", padx=0, pady=0)
        top_bar.pack_propagate(False)

        inner = ctk.CTkFrame(top_bar, fg_color="transparent")
        inner.pack(fill="both", expand=True, padx=40, pady=15)

        # === ЛІВА ЧАСТИНА: Пошук ===
        search_frame = ctk.CTkFrame(inner, fg_color="transparent")
        search_frame.pack(side="left", fill="x", expand=True)

        self.word_entry = ctk.CTkEntry(
            search_frame,
            height=50,
            width=360,
            font=("Segoe UI", 16),
            placeholder_text="Word...",
            placeholder_text_color=COLORS["text_muted"],
            text_color=COLORS["text_primary"],
            fg_color=COLORS["bg_card"],
            border_color=COLORS["border"],
            border_width=2,
            corner_radius=12
        )
        self.word_entry.pack(side="left", fill="x", expand=True, padx=(0, 15))
        self.word_entry.bind('<Return>', lambda e: self._find())

        self.find_btn = ctk.CTkButton(
            search_frame,
            text="🔍 Find",
            width=130,
            height=50,
            font=("Segoe UI", 14, "bold"),
            fg_color=COLORS["accent"],
            hover_color=COLORS["accent_hover"],
            corner_radius=12,
            command=self._find
        )
        self.find_btn.pack(side="left", padx=(0, 20))

        # === ПРАВА ЧАСТИНА: Статус ===
        self.status_indicator = StatusIndicator(inner)
        self.status_indicator.pack(side="right", padx=(15, 0))

    def _create_layout(self):
        """Створення двоколонкового layout: робоча область та історія."""
        self.main_container = ctk.CTkFrame(self, fg_color="transparent")
        self.main_container.pack(fill="both", expand=True, padx=40, pady=(20, 10))

        # === ПРАВА КОЛОНКА: Історія ===
        sidebar = ctk.CTkFrame(
            self.main_container,
            fg_color=COLORS["bg_sidebar"],
            corner_radius=12,
            width=230
        )
        sidebar.pack(side="right", fill="y", padx=(20, 0))
        sidebar.pack_propagate(False)

        history_header = ctk.CTkFrame(sidebar, fg_color="transparent")
        history_header.pack(fill="x", padx=12, pady=(12, 8))

        ctk.CTkLabel(
            history_header,
            text="🕒 History",
            font=("Segoe UI", 14, "bold"),
            text_color=COLORS["text_primary"]
        ).pack(side="left")

        ctk.CTkButton(
            history_header,
            text="Clear",
            width=60,
            height=28,
            font=("Segoe UI", 11),
            fg_color="transparent",
            text_color=COLORS["text_secondary"],
            hover_color=COLORS["border"],
            corner_radius=6,
            command=self._clear_history
        ).pack(side="right")

        self.history_frame = ctk.CTkScrollableFrame(sidebar, fg_color="transparent")
        self.history_frame.pack(fill="both", expand=True, padx=8, pady=(0, 12))
        self._refresh_history(self.history.to_list())

        # === ЛІВА КОЛОНКА: Робоча область ===
        card = ctk.CTkFrame(
            self.main_container,
            fg_color=COLORS["bg_card"],
            corner_radius=12,
            border_width=1,
            border_color=COLORS["border"]
        )
        card.pack(side="left", fill="both", expand=True)

        inner = ctk.CTkFrame(card, fg_color="transparent")
        inner.pack(fill="both", expand=True, padx=24, pady=16)

        # Поле: Original word (для перейменування)
        rename_row = ctk.CTkFrame(inner, fg_color="transparent")
        rename_row.pack(fill="x", pady=(0, 10))

        ctk.CTkLabel(
            rename_row,
            text="Original word:",
            font=("Segoe UI", 13),
            text_color=COLORS["text_secondary"],
            width=120,
            anchor="w"
        ).pack(side="left")

        self.original_entry = ctk.CTkEntry(
            rename_row,
            height=36,
            font=("Segoe UI", 14),
            placeholder_text="Word to rename with Modify...",
            placeholder_text_color=COLORS["text_muted"],
            corner_radius=8,
            border_width=1,
            border_color=COLORS["border"]
        )
        self.original_entry.pack(side="left", fill="x", expand=True)

        # Поле: Meaning
        ctk.CTkLabel(
            inner,
            text="Meaning:",
            font=("Segoe UI", 13),
            text_color=COLORS["text_secondary"],
            anchor="w"
        ).pack(fill="x", pady=(0, 5))

        self.meaning_textbox = ctk.CTkTextbox(
            inner,
            height=160,
            font=("Segoe UI", 15),
            text_color=COLORS["text_primary"],
            corner_radius=8,
            wrap="word",
            border_width=1,
            border_color=COLORS["border"],
            activate_scrollbars=True
        )
        self.meaning_textbox.pack(fill="both", expand=True, pady=(0, 12))
        self.meaning_textbox.bind('<Key>', self._on_meaning_key)

        # Схожі слова
        ctk.CTkLabel(
            inner,
            text="Similar words:",
            font=("Segoe UI", 13),
            text_color=COLORS["text_secondary"],
            anchor="w"
        ).pack(fill="x", pady=(0, 5))

        chips_frame = ctk.CTkFrame(inner, fg_color="transparent")
        chips_frame.pack(fill="x", pady=(0, 16))

        self.suggestion_chips = []
        for _ in range(self.catalog.suggestion_limit):
            chip = SuggestionChip(chips_frame, self._search_word)
            chip.pack(side="left", padx=(0, 8))
            self.suggestion_chips.append(chip)

        # Кнопки дій
        btn_frame = ctk.CTkFrame(inner, fg_color="transparent")
        btn_frame.pack(fill="x")

        actions = [
            ("Add", COLORS["success"], "#218838", self._add_word),
            ("Modify", COLORS["accent"], COLORS["accent_hover"], self._modify_word),
            ("Remove", COLORS["danger"], "#B02A37", self._remove_word),
            ("Remove all", COLORS["danger"], "#B02A37", self._remove_all_words),
            ("Clear", COLORS["text_muted"], "#5A6268", self._clear_fields),
        ]
        for text, color, hover, command in actions:
            ctk.CTkButton(
                btn_frame,
                text=text,
                width=100,
                height=38,
                font=("Segoe UI", 13, "bold"),
                fg_color=color,
                hover_color=hover,
                text_color="#FFFFFF",
                corner_radius=8,
                command=command
            ).pack(side="left", padx=(0, 10))

    def _create_file_bar(self):
        """Створення нижньої панелі імпорту/експорту."""
        file_bar = ctk.CTkFrame(self, fg_color=COLORS["bg_card"], corner_radius=0, height=70)
        file_bar.pack(fill="x", side="bottom")
        file_bar.pack_propagate(False)

        inner = ctk.CTkFrame(file_bar, fg_color="transparent")
        inner.pack(fill="both", expand=True, padx=40, pady=15)

        ctk.CTkLabel(
            inner,
            text="File:",
            font=("Segoe UI", 13),
            text_color=COLORS["text_secondary"]
        ).pack(side="left", padx=(0, 10))

        self.file_path_entry = ctk.CTkEntry(
            inner,
            height=38,
            font=("Segoe UI", 13),
            placeholder_text="path/to/dictionary.txt",
            placeholder_text_color=COLORS["text_muted"],
            text_color=COLORS["text_primary"],
            fg_color=COLORS["bg_card"],
            border_color=COLORS["border"],
            corner_radius=8
        )
        self.file_path_entry.pack(side="left", fill="x", expand=True, padx=(0, 15))

        file_actions = [
            ("📂 Import...", self._browse_import),
            ("Import", self._import_file),
            ("💾 Export...", self._browse_export),
            ("Export", self._export_file),
        ]
        for text, command in file_actions:
            ctk.CTkButton(
                inner,
                text=text,
                width=100,
                height=38,
                font=("Segoe UI", 12),
                fg_color=COLORS["accent"],
                hover_color=COLORS["accent_hover"],
                corner_radius=8,
                command=command
            ).pack(side="left", padx=(0, 8))

    def _bind_shortcuts(self):
        """Прив'язка клавіатурних скорочень."""
        self.bind('<Control-h>', lambda e: self._show_about())
        self.bind('<Control-H>', lambda e: self._show_about())
        self.bind('<Escape>', lambda e: self._focus_search())

    def _focus_search(self):
        """Встановлення фокусу на поле слова."""
        if self.word_entry.winfo_exists():
            self.word_entry.focus()

    def _close_window(self):
        """Закриття вікна."""
        logger.info("[UI] Застосунок закривається")
        self.destroy()

    # === FUNCTIONALITY ===

    def _word(self) -> str:
        return self.word_entry.get().strip()

    def _meaning(self) -> str:
        # Повідомлення застосунку не є значенням слова
        if self._reset_meaning_on_key:
            return ""
        return self.meaning_textbox.get("1.0", "end-1c").strip()

    def _find(self):
        """Пошук слова: значення, схожі слова та оновлення історії."""
        query = self._word()
        if not query:
            return

        outcome = self.catalog.search(query, self.history)
        self._display_outcome(outcome)

    def _search_word(self, word: str):
        """Пошук слова, вибраного в історії або серед схожих."""
        self.word_entry.delete(0, 'end')
        self.word_entry.insert(0, word)
        self._find()

    def _display_outcome(self, outcome: SearchOutcome):
        """Відображення результату пошуку."""
        if outcome.match is None:
            self._print_message(NO_MATCH_MESSAGE)
            self.status_indicator.set_idle(f"'{outcome.query}' not found")
        else:
            self._print_message(outcome.match.meaning)
            self.status_indicator.set_ok(f"Found '{outcome.match.name}'")

        words = [entry.name for entry in outcome.suggestions]
        for index, chip in enumerate(self.suggestion_chips):
            chip.set_word(words[index] if index < len(words) else "")

        self._refresh_history(outcome.history)

    def _add_word(self):
        """Додавання слова зі значенням з поля Meaning."""
        word = self._word()
        meaning = normalize_meaning(self._meaning())

        if not word or not meaning:
            messagebox.showwarning("Validation Error", "Please fill in both Word and Meaning fields!")
            return

        result = self.catalog.add_word(word, meaning)
        self._show_result(result, f"'{word}' has been added to the dictionary.")

    def _modify_word(self):
        """Перейменування: Original word -> Word."""
        new_word = self._word()
        old_word = self.original_entry.get().strip()

        result = self.catalog.modify_meaning(new_word, old_word)
        self._show_result(result, f"'{old_word}' has been renamed to '{new_word}'.")

    def _remove_word(self):
        """Видалення слова з поля Word."""
        word = self._word()
        result = self.catalog.remove_word(word)
        self._show_result(result, f"'{word}' has been removed from the dictionary.")

    def _remove_all_words(self):
        """Видалення всіх слів (з підтвердженням)."""
        if not messagebox.askyesno("Remove all", "Remove every word from the dictionary?"):
            return
        result = self.catalog.remove_all_words()
        self._show_result(result, f"{result.value} words have been removed.")

    def _browse_import(self):
        """Вибір файлу для імпорту та одразу імпорт."""
        path = filedialog.askopenfilename(
            parent=self,
            initialdir=self.config_data.default_directory,
            filetypes=FILE_TYPES
        )
        if path:
            self._set_file_path(path)
            self._import_file()

    def _browse_export(self):
        """Вибір файлу для експорту та одразу експорт."""
        path = filedialog.asksaveasfilename(
            parent=self,
            initialdir=self.config_data.default_directory,
            filetypes=FILE_TYPES,
            defaultextension=".txt"
        )
        if path:
            self._set_file_path(path)
            self._export_file()

    def _set_file_path(self, path: str):
        self.file_path_entry.delete(0, 'end')
        self.file_path_entry.insert(0, path)

    def _file_path(self) -> str | None:
        path = self.file_path_entry.get().strip()
        if not path:
            messagebox.showwarning("No file", "Please enter or choose a file path first!")
            return None
        return path

    def _import_file(self):
        """Імпорт словника з файлу (поточні слова буде видалено)."""
        path = self._file_path()
        if path is None:
            return
        result = self.catalog.import_from_file(path)
        self._show_result(
            result,
            f"{result.value} words have been imported from '{path}'.",
            f"The dictionary was cleared before importing and now holds {len(self.catalog)} words."
        )

    def _export_file(self):
        """Експорт словника у файл."""
        path = self._file_path()
        if path is None:
            return
        result = self.catalog.export_to_file(path)
        self._show_result(result, f"{result.value} words have been exported to '{path}'.")

    def _show_result(self, result: OperationResult, success_message: str, failure_note: str = ""):
        """
        Відображення результату операції словника.

        Args:
            result (OperationResult): Результат операції.
            success_message (str): Повідомлення при успіху.
            failure_note (str): Додатковий текст під повідомленням помилки.
        """
        match result.error:
            case None:
                self._print_message(success_message)
                self.status_indicator.set_ok(f"{len(self.catalog)} words")
                logger.info(f"[UI] {success_message}")
                return
            case FileUnavailable(path=path):
                self.status_indicator.set_error(f"File error: {path}")
            case InvalidWord() | WordDuplicated() | WordNotFound():
                self.status_indicator.set_error("Word error")
            case DictionaryError():
                self.status_indicator.set_error("Error")

        message = f"{result.message}\n\n{failure_note}" if failure_note else result.message
        self._print_error(message)

    def _print_message(self, message: str):
        """Вивести звичайне повідомлення в поле значення."""
        self._set_meaning_text(message, COLORS["text_primary"])

    def _print_error(self, message: str):
        """Вивести помилку червоним в поле значення."""
        self._set_meaning_text(message, COLORS["danger"])
        logger.warning(f"[UI] {message}")

    def _set_meaning_text(self, text: str, color: str):
        self.meaning_textbox.configure(text_color=color)
        self.meaning_textbox.delete("1.0", "end")
        self.meaning_textbox.insert("1.0", text)
        self._reset_meaning_on_key = True

    def _on_meaning_key(self, event):
        """Перше натискання після повідомлення очищує поле для нового значення."""
        if self._reset_meaning_on_key:
            self.meaning_textbox.configure(text_color=COLORS["text_primary"])
            self.meaning_textbox.delete("1.0", "end")
            self._reset_meaning_on_key = False

    def _clear_fields(self):
        """Очищення всіх полів, крім історії."""
        self._reset_meaning_on_key = False
        self.word_entry.delete(0, 'end')
        self.original_entry.delete(0, 'end')
        self.file_path_entry.delete(0, 'end')
        self.meaning_textbox.configure(text_color=COLORS["text_primary"])
        self.meaning_textbox.delete("1.0", "end")
        for chip in self.suggestion_chips:
            chip.set_word("")
        self.status_indicator.set_idle()

    def _refresh_history(self, words):
        """Перемалювати список історії."""
        for widget in self.history_frame.winfo_children():
            widget.destroy()

        if not words:
            ctk.CTkLabel(
                self.history_frame,
                text="No recent searches",
                font=("Segoe UI", 12),
                text_color=COLORS["text_muted"]
            ).pack(pady=30)
            return

        for word in words:
            HistoryItem(self.history_frame, word, self._search_word).pack(fill="x", pady=2)

    def _clear_history(self):
        """Очищення історії пошуку."""
        self.history.clear()
        self._refresh_history([])
        logger.info("Історію очищено")

    def _show_about(self):
        """Показати діалог 'Про програму'."""
        messagebox.showinfo(
            "About Word Dictionary",
            "📖 Personal Word Dictionary v1.0\n"
            "━━━━━━━━━━━━━━━━━━━━━━━━━\n\n"
            "Find: exact meaning + 3 most searched similar words\n"
            "Modify: renames 'Original word' to 'Word'\n"
            "Import replaces the whole dictionary.\n\n"
            "Фронтенд: Python (CustomTkinter)\n"
            "━━━━━━━━━━━━━━━━━━━━━━━━━\n"
            "Натисніть Ctrl+H щоб побачити це."
        )
