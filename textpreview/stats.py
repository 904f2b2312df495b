"""Document counters shown in the editor status bar."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextStats:
    characters: int
    lines: int
    words: int
    last_line_length: int

    @classmethod
    def from_text(cls, text: str) -> "TextStats":
        """Count characters, lines and words of text."""
        lines = text.split("\n")
        stripped = text.strip()
        return cls(
            characters=len(text),
            lines=len(lines),
            words=len(stripped.split()) if stripped else 0,
            last_line_length=len(lines[-1]),
        )
