"""Tkinter desktop UI for LingoFlow."""
from __future__ import annotations

import threading
import tkinter as tk
from tkinter import ttk
from typing import TYPE_CHECKING, Any, Callable

from ..config import AppConfig
from ..constants import LESSON_WORD_COUNT
from ..domain.language import coerce_language
from .common import (
    APP_SUBTITLE,
    APP_TITLE,
    DEFINITION_TITLE,
    EXAMPLE_TITLE,
    GENERATE_LABEL,
    GENERATING_LABEL,
    HISTORY_EMPTY_TEXT,
    HISTORY_TITLE,
    LOADING_DETAIL_TEXT,
    NEXT_LABEL,
    PLAY_LABEL,
    PLAY_LOADING_LABEL,
    PREVIOUS_LABEL,
    SANS_FAMILY,
    TOPIC_PLACEHOLDER,
    WORD_LIST_TITLE,
    format_tags,
    history_card_text,
    language_choices,
    word_counter_text,
    word_font_family,
    word_list_label,
)
from .desktop_types import DesktopApp

if TYPE_CHECKING:
    from ..application.lesson_store import LessonState
    from ..application.session import LearningSession


class TkinterDesktopApp(DesktopApp):
    """Tkinter implementation of the LingoFlow desktop UI."""

    def __init__(
        self,
        *,
        config: AppConfig,
        logger,
        session: "LearningSession",
        auto_start: bool = True,
    ) -> None:
        self.title = APP_TITLE
        self.config = config
        self.logger = logger
        self.session = session
        self.auto_start = bool(auto_start)
        self.session.run_in_background = lambda work, on_done: self._threaded(work, on_done)
        self.session.store.subscribe(self._on_state_changed)
        self.session.playback.subscribe(self._on_audio_flag_changed)

        self.root: tk.Tk | None = None
        self.language_var: tk.StringVar | None = None
        self.topic_var: tk.StringVar | None = None
        self.counter_var: tk.StringVar | None = None
        self.part_of_speech_var: tk.StringVar | None = None
        self.word_var: tk.StringVar | None = None
        self.phonetic_var: tk.StringVar | None = None
        self.meaning_var: tk.StringVar | None = None
        self.example_var: tk.StringVar | None = None
        self.translation_var: tk.StringVar | None = None
        self.tags_var: tk.StringVar | None = None
        self.detail_status_var: tk.StringVar | None = None

        # Widgets assigned during UI build.
        self.generate_btn: ttk.Button | None = None
        self.word_listbox: tk.Listbox | None = None
        self.word_label: ttk.Label | None = None
        self.play_btn: ttk.Button | None = None
        self.previous_btn: ttk.Button | None = None
        self.next_btn: ttk.Button | None = None
        self.detail_card: ttk.Frame | None = None
        self.history_frame: ttk.Frame | None = None
        self.history_buttons: dict[str, ttk.Button] = {}
        self._rendered_history_ids: tuple[str, ...] | None = None
        self._syncing_listbox = False

    def launch(self) -> None:
        self._ensure_root()
        assert self.root is not None
        self.root.mainloop()

    def build_for_test(self) -> tk.Tk:
        """Build root/widgets without entering mainloop (for tests)."""
        self._ensure_root()
        assert self.root is not None
        return self.root

    def _ensure_root(self) -> None:
        if self.root is not None:
            return
        root = tk.Tk()
        root.title(APP_TITLE)
        root.geometry("1180x820")
        root.minsize(900, 640)
        self.root = root
        self._configure_theme()
        self._init_tk_variables()
        self._build_layout()
        self._render(self.session.store.state)
        self.logger.debug("Tkinter UI wiring complete")
        if self.auto_start:
            self.session.start()

    def _configure_theme(self) -> None:
        assert self.root is not None
        style = ttk.Style(self.root)
        available = set(style.theme_names())
        for theme_name in ("clam", "alt", "default"):
            if theme_name in available:
                style.theme_use(theme_name)
                break

        bg = "#f8fafc"
        card_bg = "#ffffff"
        muted_bg = "#f1f5f9"
        text_primary = "#1e293b"
        text_muted = "#64748b"
        accent = "#4f46e5"
        accent_hover = "#4338ca"
        accent_soft = "#e0e7ff"
        border = "#e2e8f0"
        self.ui_surface = card_bg
        self.ui_accent = accent
        self.ui_accent_soft = accent_soft
        self.root.configure(background=bg)
        style.configure(".", background=bg, foreground=text_primary, font=(SANS_FAMILY, 10))
        style.configure("AppBg.TFrame", background=bg)
        style.configure("Card.TFrame", background=card_bg, borderwidth=1, relief="solid", bordercolor=border)
        style.configure("Muted.TFrame", background=muted_bg)
        style.configure("Title.TLabel", background=bg, foreground=text_primary, font=(SANS_FAMILY, 18, "bold"))
        style.configure("Subtitle.TLabel", background=bg, foreground=text_muted, font=(SANS_FAMILY, 9))
        style.configure("Card.TLabel", background=card_bg, foreground=text_primary, font=(SANS_FAMILY, 10))
        style.configure("CardMuted.TLabel", background=card_bg, foreground=text_muted, font=(SANS_FAMILY, 9, "bold"))
        style.configure("Section.TLabel", background=bg, foreground=text_primary, font=(SANS_FAMILY, 12, "bold"))
        style.configure("Badge.TLabel", background=accent_soft, foreground=accent, font=(SANS_FAMILY, 9, "bold"))
        style.configure("Phonetic.TLabel", background=card_bg, foreground=text_muted, font=(SANS_FAMILY, 14))
        style.configure("Meaning.TLabel", background=card_bg, foreground=text_primary, font=(SANS_FAMILY, 16))
        style.configure("Example.TLabel", background=muted_bg, foreground=text_primary, font=(SANS_FAMILY, 12, "italic"))
        style.configure("Translation.TLabel", background=muted_bg, foreground=text_muted, font=(SANS_FAMILY, 11))
        style.configure("TButton", padding=(10, 6), font=(SANS_FAMILY, 10))
        style.configure("Primary.TButton", background=accent, foreground="#ffffff", font=(SANS_FAMILY, 10, "bold"))
        style.map(
            "Primary.TButton",
            background=[("disabled", "#a5b4fc"), ("active", accent_hover)],
            foreground=[("disabled", "#eef2ff")],
        )
        style.configure("History.TButton", background=card_bg, anchor="w", justify="left", padding=(12, 10))
        style.configure("TRadiobutton", background=bg, font=(SANS_FAMILY, 10, "bold"))

    def _init_tk_variables(self) -> None:
        assert self.root is not None
        self.language_var = tk.StringVar(master=self.root, value=self.session.language.value)
        self.topic_var = tk.StringVar(master=self.root, value=self.session.topic)
        self.counter_var = tk.StringVar(master=self.root, value="")
        self.part_of_speech_var = tk.StringVar(master=self.root, value="")
        self.word_var = tk.StringVar(master=self.root, value="")
        self.phonetic_var = tk.StringVar(master=self.root, value="")
        self.meaning_var = tk.StringVar(master=self.root, value="")
        self.example_var = tk.StringVar(master=self.root, value="")
        self.translation_var = tk.StringVar(master=self.root, value="")
        self.tags_var = tk.StringVar(master=self.root, value="")
        self.detail_status_var = tk.StringVar(master=self.root, value="")

    def _build_layout(self) -> None:
        assert self.root is not None
        shell = ttk.Frame(self.root, style="AppBg.TFrame", padding=16)
        shell.pack(fill="both", expand=True)
        self._build_header(shell)

        main = ttk.Frame(shell, style="AppBg.TFrame")
        main.pack(fill="both", expand=True, pady=(12, 0))
        main.columnconfigure(0, weight=1)
        main.columnconfigure(1, weight=2)
        main.rowconfigure(0, weight=1)
        sidebar = ttk.Frame(main, style="AppBg.TFrame")
        sidebar.grid(row=0, column=0, sticky="nsew", padx=(0, 12))
        detail = ttk.Frame(main, style="AppBg.TFrame")
        detail.grid(row=0, column=1, sticky="nsew")
        self._build_sidebar(sidebar)
        self._build_detail(detail)
        self._build_history(shell)

    def _build_header(self, parent: ttk.Frame) -> None:
        assert self.language_var is not None
        header = ttk.Frame(parent, style="AppBg.TFrame")
        header.pack(fill="x")
        titles = ttk.Frame(header, style="AppBg.TFrame")
        titles.pack(side="left")
        ttk.Label(titles, text=APP_TITLE, style="Title.TLabel").pack(anchor="w")
        ttk.Label(titles, text=APP_SUBTITLE, style="Subtitle.TLabel").pack(anchor="w")
        toggle = ttk.Frame(header, style="AppBg.TFrame")
        toggle.pack(side="right")
        for label, code in language_choices():
            ttk.Radiobutton(
                toggle,
                text=label,
                value=code,
                variable=self.language_var,
                command=self._on_language_change,
            ).pack(side="left", padx=(8, 0))

    def _build_sidebar(self, parent: ttk.Frame) -> None:
        assert self.topic_var is not None
        assert self.counter_var is not None
        controls = ttk.Frame(parent, style="Card.TFrame", padding=12)
        controls.pack(fill="x")
        ttk.Label(controls, text=TOPIC_PLACEHOLDER, style="CardMuted.TLabel").pack(anchor="w")
        topic_entry = ttk.Entry(controls, textvariable=self.topic_var)
        topic_entry.pack(fill="x", pady=(4, 8))
        topic_entry.bind("<Return>", lambda _event: self._on_generate())
        self.generate_btn = ttk.Button(
            controls,
            text=GENERATE_LABEL,
            style="Primary.TButton",
            command=self._on_generate,
        )
        self.generate_btn.pack(fill="x")

        words_card = ttk.Frame(parent, style="Card.TFrame", padding=12)
        words_card.pack(fill="both", expand=True, pady=(12, 0))
        heading = ttk.Frame(words_card, style="Card.TFrame")
        heading.pack(fill="x")
        ttk.Label(heading, text=WORD_LIST_TITLE.upper(), style="CardMuted.TLabel").pack(side="left")
        ttk.Label(heading, textvariable=self.counter_var, style="Badge.TLabel").pack(side="right")
        self.word_listbox = tk.Listbox(
            words_card,
            height=LESSON_WORD_COUNT,
            activestyle="none",
            exportselection=False,
            borderwidth=0,
            highlightthickness=0,
            font=(SANS_FAMILY, 11),
            selectbackground=self.ui_accent_soft,
            selectforeground=self.ui_accent,
        )
        self.word_listbox.pack(fill="both", expand=True, pady=(8, 0))
        self.word_listbox.bind("<<ListboxSelect>>", self._on_word_list_select)

    def _build_detail(self, parent: ttk.Frame) -> None:
        card = ttk.Frame(parent, style="Card.TFrame", padding=24)
        card.pack(fill="both", expand=True)
        self.detail_card = card
        top = ttk.Frame(card, style="Card.TFrame")
        top.pack(fill="x")
        heading = ttk.Frame(top, style="Card.TFrame")
        heading.pack(side="left", fill="x", expand=True)
        ttk.Label(heading, textvariable=self.part_of_speech_var, style="Badge.TLabel").pack(anchor="w")
        self.word_label = ttk.Label(
            heading,
            textvariable=self.word_var,
            style="Card.TLabel",
            font=(SANS_FAMILY, 40, "bold"),
        )
        self.word_label.pack(anchor="w", pady=(12, 0))
        ttk.Label(heading, textvariable=self.phonetic_var, style="Phonetic.TLabel").pack(anchor="w")
        self.play_btn = ttk.Button(top, text=PLAY_LABEL, style="Primary.TButton", command=self._on_play)
        self.play_btn.pack(side="right", anchor="n")

        ttk.Label(card, text=DEFINITION_TITLE.upper(), style="CardMuted.TLabel").pack(anchor="w", pady=(24, 4))
        ttk.Label(card, textvariable=self.meaning_var, style="Meaning.TLabel", wraplength=620).pack(anchor="w")

        example_box = ttk.Frame(card, style="Muted.TFrame", padding=16)
        example_box.pack(fill="x", pady=(24, 0))
        ttk.Label(example_box, text=EXAMPLE_TITLE.upper(), style="Translation.TLabel").pack(anchor="w")
        ttk.Label(example_box, textvariable=self.example_var, style="Example.TLabel", wraplength=600).pack(
            anchor="w", pady=(6, 2)
        )
        ttk.Label(example_box, textvariable=self.translation_var, style="Translation.TLabel", wraplength=600).pack(
            anchor="w"
        )
        ttk.Label(card, textvariable=self.tags_var, style="CardMuted.TLabel").pack(anchor="w", pady=(16, 0))
        ttk.Label(card, textvariable=self.detail_status_var, style="CardMuted.TLabel").pack(anchor="w", pady=(8, 0))

        nav = ttk.Frame(parent, style="AppBg.TFrame")
        nav.pack(fill="x", pady=(12, 0))
        self.previous_btn = ttk.Button(nav, text=f"‹ {PREVIOUS_LABEL}", command=self._on_previous)
        self.previous_btn.pack(side="left")
        self.next_btn = ttk.Button(nav, text=f"{NEXT_LABEL} ›", style="Primary.TButton", command=self._on_next)
        self.next_btn.pack(side="right")

    def _build_history(self, parent: ttk.Frame) -> None:
        ttk.Label(parent, text=HISTORY_TITLE, style="Section.TLabel").pack(anchor="w", pady=(20, 8))
        self.history_frame = ttk.Frame(parent, style="AppBg.TFrame")
        self.history_frame.pack(fill="x")

    def _threaded(self, work: Callable[[], Any], on_success: Callable[[Any], None] | None = None) -> None:
        def _runner() -> None:
            try:
                result = work()
            except Exception:  # pragma: no cover
                self.logger.exception("Tkinter UI action failed")
                return
            if on_success is not None:
                self._run_on_ui(lambda: on_success(result))

        thread = threading.Thread(target=_runner, daemon=True)
        thread.start()

    def _run_on_ui(self, callback: Callable[[], None]) -> None:
        if self.root is None:
            return
        self.root.after(0, callback)

    def _on_state_changed(self, state: "LessonState") -> None:
        if self.root is None:
            return
        self._render(state)

    def _on_audio_flag_changed(self, loading: bool) -> None:
        self._run_on_ui(lambda loading=loading: self._render_play_button(loading))

    def _on_generate(self) -> None:
        assert self.topic_var is not None
        if self.session.store.state.is_loading:
            return
        self.session.request_lesson(self.topic_var.get())

    def _on_language_change(self) -> None:
        assert self.language_var is not None
        language = coerce_language(self.language_var.get())
        if self.topic_var is not None:
            self.session.topic = self.topic_var.get()
        self.session.set_language(language)
        self._render(self.session.store.state)

    def _on_word_list_select(self, _event=None) -> None:
        if self._syncing_listbox or self.word_listbox is None:
            return
        selection = self.word_listbox.curselection()
        if not selection:
            return
        self.session.store.select_word(int(selection[0]))

    def _on_previous(self) -> None:
        self.session.store.previous()

    def _on_next(self) -> None:
        self.session.store.next()

    def _on_history_selected(self, lesson_id: str) -> None:
        self.session.store.select_from_history(lesson_id)

    def _on_play(self) -> None:
        if self.session.playback.is_audio_loading:
            return
        self.session.play_selected()

    def _render(self, state: "LessonState") -> None:
        self._render_controls(state)
        self._render_word_list(state)
        self._render_detail(state)
        self._render_history(state)

    def _render_controls(self, state: "LessonState") -> None:
        if self.generate_btn is None:
            return
        if state.is_loading:
            self.generate_btn.configure(text=GENERATING_LABEL)
            self.generate_btn.state(["disabled"])
        else:
            self.generate_btn.configure(text=GENERATE_LABEL)
            self.generate_btn.state(["!disabled"])

    def _render_word_list(self, state: "LessonState") -> None:
        if self.word_listbox is None or self.counter_var is None:
            return
        self._syncing_listbox = True
        try:
            self.word_listbox.configure(state="normal")
            self.word_listbox.delete(0, tk.END)
            if state.is_loading:
                for _ in range(LESSON_WORD_COUNT):
                    self.word_listbox.insert(tk.END, "· · ·")
                self.word_listbox.configure(state="disabled")
                self.counter_var.set("")
                return
            for index, word in enumerate(state.words):
                self.word_listbox.insert(tk.END, word_list_label(index, word))
            if state.words:
                self.word_listbox.selection_set(state.selected_index)
                self.word_listbox.see(state.selected_index)
                self.counter_var.set(word_counter_text(state.selected_index, len(state.words)))
            else:
                self.counter_var.set("")
        finally:
            self._syncing_listbox = False

    def _render_detail(self, state: "LessonState") -> None:
        if self.word_var is None:
            return
        word = state.current_word if state.is_ready else None
        if word is None:
            for variable in (
                self.part_of_speech_var,
                self.word_var,
                self.phonetic_var,
                self.meaning_var,
                self.example_var,
                self.translation_var,
                self.tags_var,
            ):
                variable.set("")
            self.detail_status_var.set(LOADING_DETAIL_TEXT if state.is_loading else "")
            self._set_enabled(self.play_btn, False)
        else:
            self.part_of_speech_var.set(word.part_of_speech.upper())
            self.word_var.set(word.word)
            self.phonetic_var.set(word.phonetic)
            self.meaning_var.set(word.meaning)
            self.example_var.set(f'"{word.example}"')
            self.translation_var.set(word.example_translation)
            self.tags_var.set(format_tags(word.tags))
            self.detail_status_var.set("")
            self._render_play_button(self.session.playback.is_audio_loading)
        if self.word_label is not None:
            self.word_label.configure(font=(word_font_family(self.session.language), 40, "bold"))
        self._set_enabled(self.previous_btn, state.can_go_previous)
        self._set_enabled(self.next_btn, state.can_go_next)

    def _render_play_button(self, loading: bool) -> None:
        if self.play_btn is None:
            return
        ready = self.session.store.state.is_ready
        self.play_btn.configure(text=PLAY_LOADING_LABEL if loading else PLAY_LABEL)
        self._set_enabled(self.play_btn, ready and not loading)

    def _render_history(self, state: "LessonState") -> None:
        if self.history_frame is None:
            return
        history_ids = tuple(lesson.id for lesson in state.history)
        if history_ids == self._rendered_history_ids:
            return
        self._rendered_history_ids = history_ids
        for child in list(self.history_frame.winfo_children()):
            child.destroy()
        self.history_buttons = {}
        if not state.history:
            ttk.Label(self.history_frame, text=HISTORY_EMPTY_TEXT, style="Subtitle.TLabel").pack(anchor="w")
            return
        for lesson in state.history:
            button = ttk.Button(
                self.history_frame,
                text=history_card_text(lesson),
                style="History.TButton",
                command=lambda lesson_id=lesson.id: self._on_history_selected(lesson_id),
            )
            button.pack(side="left", padx=(0, 8))
            self.history_buttons[lesson.id] = button

    @staticmethod
    def _set_enabled(widget: ttk.Widget | None, enabled: bool) -> None:
        if widget is None:
            return
        widget.state(["!disabled"] if enabled else ["disabled"])


def create_tkinter_app(
    *,
    config: AppConfig,
    logger,
    session: "LearningSession",
    auto_start: bool = True,
) -> DesktopApp:
    """Create the Tkinter desktop app instance."""
    return TkinterDesktopApp(
        config=config,
        logger=logger,
        session=session,
        auto_start=auto_start,
    )
