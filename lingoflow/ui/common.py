"""UI-neutral helpers shared by desktop UI implementations."""
from __future__ import annotations

from datetime import datetime

from ..constants import LESSON_WORD_COUNT
from ..domain.language import LANGUAGE_LABELS, Language, uses_serif_script
from ..domain.vocabulary import Lesson, VocabularyWord

APP_TITLE = "LingoFlow AI"
APP_SUBTITLE = "Học 10 từ vựng mỗi bài học"

GENERATE_LABEL = "Tạo bài học 10 từ"
GENERATING_LABEL = "Đang tạo bài học..."
TOPIC_PLACEHOLDER = "Chủ đề (vd: Travel, Tech...)"
WORD_LIST_TITLE = "Danh sách từ vựng"
LOADING_DETAIL_TEXT = "AI đang biên soạn bài học cho bạn..."
DEFINITION_TITLE = "Định nghĩa"
EXAMPLE_TITLE = "Ví dụ"
PREVIOUS_LABEL = "Từ trước"
NEXT_LABEL = "Từ tiếp theo"
PLAY_LABEL = "Nghe phát âm"
PLAY_LOADING_LABEL = "Đang tải..."
HISTORY_TITLE = "Bài học cũ"
HISTORY_EMPTY_TEXT = "Chưa có lịch sử bài học."

LANGUAGE_ORDER = [Language.ENGLISH, Language.CHINESE]

SANS_FAMILY = "Segoe UI"
SERIF_FAMILY = "Times New Roman"


def language_choices() -> list[tuple[str, str]]:
    return [(LANGUAGE_LABELS[language], language.value) for language in LANGUAGE_ORDER]


def word_counter_text(selected_index: int, total: int = LESSON_WORD_COUNT) -> str:
    return f"{selected_index + 1}/{total}"


def word_list_label(index: int, word: VocabularyWord) -> str:
    return f"{index + 1}. {word.word}  ·  {word.meaning}"


def word_font_family(language: Language | str) -> str:
    return SERIF_FAMILY if uses_serif_script(language) else SANS_FAMILY


def format_tags(tags) -> str:
    return "  ".join(f"#{tag}" for tag in tags if tag)


def format_history_date(timestamp: float) -> str:
    """Day/month/year without zero padding, the way vi-VN dates read."""
    moment = datetime.fromtimestamp(float(timestamp))
    return f"{moment.day}/{moment.month}/{moment.year}"


def history_card_text(lesson: Lesson) -> str:
    return "\n".join(
        [
            format_history_date(lesson.timestamp),
            lesson.topic,
            f"{len(lesson.words)} từ vựng",
        ]
    )
