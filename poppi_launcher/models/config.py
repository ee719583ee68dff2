"""
Pydantic data models for launcher configuration.

The configuration is read-only to the launcher core: it is loaded once per
session and passed to the router, presenter and executor.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator


SEARCH_ENGINES = ("youtube", "google", "chatgpt")

_HEX_COLOR = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')


class ThemeConfig(BaseModel):
    """Visual theme. Stored and validated only, rendering is up to the UI."""

    background_color: str = Field("#0a0a0a", description="Window background")
    text_color: str = Field("#e0e0e0", description="Primary text color")
    accent_color: str = Field("#4a9eff", description="Selection highlight color")
    border_radius: float = Field(0.5, ge=0.0, description="Corner radius in em")
    font_size: int = Field(16, ge=6, le=96)
    width: int = Field(800, ge=200)
    height: int = Field(600, ge=100)

    @field_validator('background_color', 'text_color', 'accent_color')
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Validate hex color syntax (#rgb, #rrggbb or #rrggbbaa)."""
        if not _HEX_COLOR.match(v):
            raise ValueError(f"Invalid hex color: {v}")
        return v


class ShortcutsConfig(BaseModel):
    show_launcher: str = Field("Super+Space", description="Global shortcut that shows the launcher")

    @field_validator('show_launcher')
    @classmethod
    def validate_shortcut(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Shortcut cannot be empty")
        return v.strip()


class SearchConfig(BaseModel):
    """Web search engines offered by prefixes and as fallbacks."""

    default_engine: str = Field("youtube", description="Engine listed first in the no-match web search suggestions")
    youtube_enabled: bool = True
    google_enabled: bool = True
    chatgpt_enabled: bool = True

    @field_validator('default_engine')
    @classmethod
    def validate_engine(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in SEARCH_ENGINES:
            raise ValueError(f"Unknown search engine '{v}', expected one of {', '.join(SEARCH_ENGINES)}")
        return v

    def is_enabled(self, engine: str) -> bool:
        """Return whether a search engine may be offered."""
        return bool(getattr(self, f"{engine}_enabled", False))


class CalculatorConfig(BaseModel):
    enabled: bool = True
    precision: int = Field(10, ge=1, le=15, description="Decimal places for fractional results")


class TerminalConfig(BaseModel):
    command: Optional[str] = Field(None, description="Terminal emulator override (name or path)")
    hold_open: bool = Field(True, description="Keep the shell open after the command exits")

    @field_validator('command')
    @classmethod
    def validate_command(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


class WindowsConfig(BaseModel):
    probe_timeout: float = Field(1.0, gt=0.0, le=10.0, description="Seconds allowed per external probe")
    max_windows: int = Field(100, ge=1, le=1000, description="Window ids inspected per backend")


class DisplayConfig(BaseModel):
    max_results: int = Field(5, ge=1, le=50, description="Rows shown in list mode")
    emoji_grid_size: int = Field(24, ge=1, le=200, description="Cells shown in emoji grid mode")
    emoji_grid_columns: int = Field(8, ge=1, le=20)


class LauncherConfig(BaseModel):
    """Complete launcher configuration."""

    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    shortcuts: ShortcutsConfig = Field(default_factory=ShortcutsConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    calculator: CalculatorConfig = Field(default_factory=CalculatorConfig)
    terminal: TerminalConfig = Field(default_factory=TerminalConfig)
    windows: WindowsConfig = Field(default_factory=WindowsConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
