"""
Theme palette: one fixed set of visual tokens per presentation mode.
"""
from types import MappingProxyType
from typing import Mapping, Union

from sdui_service.models.schemas.core import Mode, ThemeTokens

_STANDARD_SPACING = {"xs": 4.0, "sm": 8.0, "md": 16.0, "lg": 24.0, "xl": 32.0}

PALETTES: Mapping[Mode, ThemeTokens] = MappingProxyType({
    Mode.LATE_NIGHT: ThemeTokens(
        is_dark_mode=True,
        primary_color="#0A0A0A",
        background_color="#000000",
        accent_color="#555555",
        font_sizes={"headline": 24.0, "title": 18.0, "body": 14.0, "caption": 11.0},
        border_radius=8.0,
        spacing=_STANDARD_SPACING,
    ),
    Mode.MORNING: ThemeTokens(
        is_dark_mode=False,
        primary_color="#FF9800",
        background_color="#FFFBF5",
        accent_color="#FFC107",
        font_sizes={"headline": 34.0, "title": 20.0, "body": 16.0, "caption": 12.0},
        border_radius=16.0,
        spacing=_STANDARD_SPACING,
    ),
    Mode.DAY: ThemeTokens(
        is_dark_mode=False,
        primary_color="#2C3E50",
        background_color="#FFFFFF",
        accent_color="#3498DB",
        font_sizes={"headline": 32.0, "title": 20.0, "body": 16.0, "caption": 12.0},
        border_radius=12.0,
        spacing=_STANDARD_SPACING,
    ),
    Mode.FLASH_SALE: ThemeTokens(
        is_dark_mode=False,
        primary_color="#FF4757",
        background_color="#FFFFFF",
        accent_color="#FF6B6B",
        font_sizes={"headline": 28.0, "title": 18.0, "body": 14.0, "caption": 11.0},
        border_radius=8.0,
        spacing={"xs": 2.0, "sm": 4.0, "md": 8.0, "lg": 12.0, "xl": 16.0},
    ),
    Mode.AFTERNOON: ThemeTokens(
        is_dark_mode=False,
        primary_color="#00BCD4",
        background_color="#F0F8FF",
        accent_color="#00ACC1",
        font_sizes={"headline": 30.0, "title": 19.0, "body": 15.0, "caption": 12.0},
        border_radius=12.0,
        spacing=_STANDARD_SPACING,
    ),
    Mode.EVENING: ThemeTokens(
        is_dark_mode=False,
        primary_color="#6C5CE7",
        background_color="#FAF9F6",
        accent_color="#A29BFE",
        font_sizes={"headline": 36.0, "title": 22.0, "body": 17.0, "caption": 13.0},
        border_radius=16.0,
        spacing={"xs": 4.0, "sm": 8.0, "md": 18.0, "lg": 28.0, "xl": 40.0},
    ),
    Mode.NIGHT: ThemeTokens(
        is_dark_mode=True,
        primary_color="#1A1A1A",
        background_color="#0A0A0A",
        accent_color="#FFD700",
        font_sizes={"headline": 40.0, "title": 28.0, "body": 18.0, "caption": 14.0},
        border_radius=20.0,
        spacing={"xs": 4.0, "sm": 8.0, "md": 20.0, "lg": 32.0, "xl": 48.0},
    ),
})


def theme_for(mode: Union[Mode, str]) -> ThemeTokens:
    """
    Palette for a mode; unrecognized modes get the day palette.

    Each call returns a fresh deep copy; the shared table is never handed out.
    """
    try:
        palette = PALETTES[Mode(mode)]
    except ValueError:
        palette = PALETTES[Mode.DAY]
    return palette.model_copy(deep=True)
