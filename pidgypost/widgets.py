"""Text input and scrolling viewport used by the chat pane."""

from __future__ import annotations

import textwrap

_LINE_UP = frozenset({"up", "k"})
_LINE_DOWN = frozenset({"down", "j"})
_PAGE_UP = frozenset({"pgup", "b"})
_PAGE_DOWN = frozenset({"pgdown", " ", "f"})
_HALF_PAGE_UP = frozenset({"u", "ctrl+u"})
_HALF_PAGE_DOWN = frozenset({"d", "ctrl+d"})


def _fit(line: str, width: int) -> str:
    if width <= 0:
        return line
    return line[:width].ljust(width)


class TextArea:
    """A single-paragraph text input with a prompt, placeholder and limit."""

    def __init__(
        self,
        width: int = 40,
        height: int = 6,
        prompt: str = "┃ ",
        placeholder: str = "",
        char_limit: int = 400,
    ) -> None:
        self.width = width
        self.height = height
        self.prompt = prompt
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.value = ""

    def insert(self, text: str) -> None:
        """Append text, dropping line breaks and anything past the limit."""
        text = text.replace("\r", "").replace("\n", "")
        if self.char_limit > 0:
            text = text[: max(0, self.char_limit - len(self.value))]
        self.value += text

    def handle_key(self, key: str) -> None:
        """Edit the value in response to a key."""
        if key == "backspace":
            self.value = self.value[:-1]
        elif len(key) == 1 and key.isprintable():
            self.insert(key)

    def reset(self) -> None:
        """Clear the value."""
        self.value = ""

    def render(self) -> str:
        """Render the input as exactly `height` prompt-prefixed lines."""
        text_width = max(1, self.width - len(self.prompt)) if self.width > 0 else 0
        if not self.value:
            lines = [self.placeholder]
        elif text_width:
            lines = textwrap.wrap(
                self.value,
                text_width,
                drop_whitespace=False,
                replace_whitespace=False,
            ) or [""]
        else:
            lines = [self.value]
        visible = lines[-self.height:] if self.height > 0 else []
        visible += [""] * (self.height - len(visible))
        return "\n".join(_fit(self.prompt + line, self.width) for line in visible)


class Viewport:
    """A fixed-size window onto a block of text that can be scrolled."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.lines: list[str] = []
        self.y_offset = 0

    def _max_offset(self) -> int:
        return max(0, len(self.lines) - self.height)

    def _scroll(self, amount: int) -> None:
        self.y_offset = max(0, min(self.y_offset + amount, self._max_offset()))

    def set_content(self, content: str) -> None:
        """Replace the text shown, keeping the offset within the new text."""
        self.lines = content.split("\n")
        if self.y_offset > len(self.lines) - 1:
            self.goto_bottom()

    def goto_bottom(self) -> None:
        """Scroll so the last line is at the bottom of the window."""
        self.y_offset = self._max_offset()

    def handle_key(self, key: str) -> None:
        """Scroll in response to a key."""
        if key in _LINE_UP:
            self._scroll(-1)
        elif key in _LINE_DOWN:
            self._scroll(1)
        elif key in _PAGE_UP:
            self._scroll(-self.height)
        elif key in _PAGE_DOWN:
            self._scroll(self.height)
        elif key in _HALF_PAGE_UP:
            self._scroll(-(self.height // 2))
        elif key in _HALF_PAGE_DOWN:
            self._scroll(self.height // 2)

    def render(self) -> str:
        """Render the visible lines, padded to the window size."""
        height = max(0, self.height)
        visible = self.lines[self.y_offset:self.y_offset + height]
        visible += [""] * (height - len(visible))
        return "\n".join(_fit(line, self.width) for line in visible)