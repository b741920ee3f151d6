from typing import Final

# Chat glyphs / prefixes
SUCCESS_PREFIX: Final[str] = "✅ "
ERROR_PREFIX: Final[str] = "❌ Error: "
CONNECTION_ERROR_PREFIX: Final[str] = "❌ Connection error: "
SCHEDULE_FETCH_ERROR_PREFIX: Final[str] = "❌ Failed to fetch schedule: "

HISTORY_HEADER: Final[str] = "\n\n📜 Command History:\n"
SCHEDULE_NOTICE: Final[str] = '\n\n📅 Schedule Generated!\nUse "show schedule" to view details.'
SUBJECT_COUNT_TEMPLATE: Final[str] = "\n\n📚 Current Subjects: {count}"

WELCOME_MESSAGE: Final[str] = (
    "👋 Hi! I'm your study scheduler. Add subjects, set availability and "
    "generate a schedule."
)
CLEARED_GREETING: Final[str] = "👋 Chat cleared! Ready for new commands."
PENDING_TEXT: Final[str] = "Thinking"

# Sidebar
EMPTY_PLAN_MESSAGE: Final[str] = "No subjects added yet"
NO_SAVED_SCHEDULES_MESSAGE: Final[str] = "No saved schedules found"
PRIORITY_GLYPHS: Final[dict[str, str]] = {"HIGH": "🔴", "MEDIUM": "🟡", "LOW": "🟢"}
UNKNOWN_PRIORITY_GLYPH: Final[str] = "⚪"

# Suggestions
SUGGESTION_MIN_LENGTH: Final[int] = 3
MAX_SUGGESTIONS: Final[int] = 3
COMMAND_SUGGESTIONS: Final[tuple[str, ...]] = (
    'add subject "Math" hours 10 priority HIGH',
    "set availability on 2025-12-20 capacity 8 hours",
    "list subjects",
    "generate schedule",
    "show schedule",
    "show history",
    "clear all",
)

# Theme
THEMES: Final[tuple[str, ...]] = ("light", "dark")
DEFAULT_THEME: Final[str] = "light"
THEME_KEY: Final[str] = "theme"
