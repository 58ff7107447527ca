"""Fake UserFeedback that captures messages for assertions."""

from office_toolbox.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Captures all messages; nothing is printed."""

    def __init__(self) -> None:
        self._messages: list[str] = []

    def info(self, message: str) -> None:
        self._messages.append(f"INFO: {message}")

    def success(self, message: str) -> None:
        self._messages.append(f"SUCCESS: {message}")

    def error(self, message: str) -> None:
        self._messages.append(f"ERROR: {message}")

    @property
    def messages(self) -> list[str]:
        return self._messages.copy()

    def has_message(self, text: str) -> bool:
        """True if any captured message contains text."""
        return any(text in message for message in self._messages)
