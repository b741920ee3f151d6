"""ConversationTurn domain entity: one rendered chat message (user or bot)."""
from datetime import datetime
from typing import Optional

USER = "user"
BOT = "bot"
ROLES = (USER, BOT)


class ConversationTurn:
    def __init__(self, content: str, role: str = BOT, timestamp: Optional[datetime] = None,
                 formatted: bool = False):
        if role not in ROLES:
            raise ValueError(f"Unknown turn role: {role!r}")
        self.content = content
        self.role = role
        self.timestamp = timestamp or datetime.now()
        self.formatted = formatted

    @classmethod
    def user(cls, content: str):
        return cls(content, USER)

    @classmethod
    def bot(cls, content: str, formatted: bool = False):
        return cls(content, BOT, formatted=formatted)

    def __str__(self) -> str:
        return f"[{self.role}] {self.content}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "content": self.content,
            "role": self.role,
            "timestamp": self.timestamp.isoformat(),
            "formatted": self.formatted,
        }
