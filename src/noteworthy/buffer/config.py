"""Editor settings injected into a BufferEngine at construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .colors import ActiveColorSelection, ColorTag
from .state import WriteMode


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Behavioral settings for one engine.

    ``history_capacity`` bounds both undo and redo stacks;
    ``snapshot_interval`` is how many character edits share one undo step.
    """

    write_mode: WriteMode = WriteMode.INSERT
    primary_color: ColorTag = ColorTag.BLUE
    secondary_color: ColorTag = ColorTag.GREEN
    tertiary_color: ColorTag = ColorTag.RED
    history_capacity: int = 10
    snapshot_interval: int = 10
    tab_size: int = 4

    def __post_init__(self) -> None:
        for name in ("history_capacity", "snapshot_interval", "tab_size"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive")

    @classmethod
    def from_settings(cls, settings: Mapping[str, str]) -> "EditorConfig":
        """Build a config from string settings such as a host's settings file.

        An unknown ``write_mode`` falls back to insert; an unknown color
        raises ``InvalidColorTagError``; numeric keys must parse as ints.
        """

        defaults = cls()
        raw_mode = settings.get("write_mode", "").strip().lower()
        write_mode = (
            WriteMode(raw_mode)
            if raw_mode in {mode.value for mode in WriteMode}
            else defaults.write_mode
        )

        def color(key: str, fallback: ColorTag) -> ColorTag:
            value = settings.get(key)
            return fallback if value is None else ColorTag.from_name(value)

        def number(key: str, fallback: int) -> int:
            value = settings.get(key)
            return fallback if value is None else int(value.strip())

        return cls(
            write_mode=write_mode,
            primary_color=color("primary_color", defaults.primary_color),
            secondary_color=color("secondary_color", defaults.secondary_color),
            tertiary_color=color("tertiary_color", defaults.tertiary_color),
            history_capacity=number("history_size", defaults.history_capacity),
            snapshot_interval=number(
                "snapshot_interval", defaults.snapshot_interval
            ),
            tab_size=number("tab_size", defaults.tab_size),
        )

    def color_for(self, selection: ActiveColorSelection) -> ColorTag:
        if selection is ActiveColorSelection.PRIMARY:
            return self.primary_color
        if selection is ActiveColorSelection.SECONDARY:
            return self.secondary_color
        if selection is ActiveColorSelection.TERTIARY:
            return self.tertiary_color
        return ColorTag.NONE


__all__ = ["EditorConfig"]
