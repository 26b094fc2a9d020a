"""Character-class filtering utilities."""
import re


class CharacterFilter:
    """Strip control characters and a configurable punctuation set from text."""

    # C0 control range plus DEL
    CONTROL_CHARACTERS = r"\x00-\x1f\x7f"

    def __init__(self, disallowed: str):
        """
        Args:
            disallowed: Characters to remove in addition to control characters
        """
        self.pattern = re.compile(f"[{self.CONTROL_CHARACTERS}{re.escape(disallowed)}]")

    def filter(self, text: str) -> str:
        """
        Remove every control or disallowed character from text.

        Args:
            text: Raw text

        Returns:
            Text with the offending characters removed outright
        """
        return self.pattern.sub("", text)
