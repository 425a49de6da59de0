"""Colour theme selection and its persistence."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from enum import Enum

STORAGE_KEY = "theme"


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    @classmethod
    def parse(cls, text: str) -> Theme:
        """Read a stored theme name; anything unrecognised means light."""
        if text == "dark":
            return cls.DARK
        if text == "system":
            return cls.SYSTEM
        return cls.LIGHT


_LABELS = {
    Theme.LIGHT: "Light Mode",
    Theme.DARK: "Dark Mode",
    Theme.SYSTEM: "Use system",
}


@dataclass
class ThemeContext:
    """The chosen theme together with the system's dark-mode preference."""

    theme: Theme = Theme.SYSTEM
    system_prefers_dark: bool = False

    @classmethod
    def load(
        cls, storage: Mapping[str, str] | None, system_prefers_dark: bool = False
    ) -> ThemeContext:
        stored = storage.get(STORAGE_KEY) if storage is not None else None
        theme = Theme.parse(stored) if stored is not None else Theme.SYSTEM
        return cls(theme, system_prefers_dark)

    def save(self, storage: MutableMapping[str, str]) -> None:
        storage[STORAGE_KEY] = self.theme.value

    def toggle(self) -> Theme:
        """Advance to the next theme, skipping one that looks the same as the current."""
        dark = self.system_prefers_dark
        if self.theme is Theme.LIGHT:
            self.theme = Theme.SYSTEM if dark else Theme.DARK
        elif self.theme is Theme.DARK:
            self.theme = Theme.LIGHT if dark else Theme.SYSTEM
        else:
            self.theme = Theme.LIGHT if dark else Theme.DARK
        return self.theme

    def effective_theme(self) -> Theme:
        if self.theme is Theme.SYSTEM:
            return Theme.DARK if self.system_prefers_dark else Theme.LIGHT
        return self.theme

    def document_class(self) -> str:
        """The class to put on the document element."""
        return "dark" if self.effective_theme() is Theme.DARK else "light"

    def toggle_label(self) -> str:
        return _LABELS[self.theme]