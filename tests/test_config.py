import pytest

from noteworthy.buffer import (
    ActiveColorSelection,
    BufferEngine,
    ColorTag,
    EditorConfig,
    InvalidColorTagError,
    Viewport,
    WriteMode,
)


def test_defaults() -> None:
    config = EditorConfig()

    assert config.write_mode is WriteMode.INSERT
    assert config.primary_color is ColorTag.BLUE
    assert config.secondary_color is ColorTag.GREEN
    assert config.tertiary_color is ColorTag.RED
    assert config.history_capacity == 10
    assert config.snapshot_interval == 10
    assert config.tab_size == 4


def test_from_settings_parses_strings() -> None:
    config = EditorConfig.from_settings(
        {
            "write_mode": " Overwrite ",
            "primary_color": "aqua",
            "secondary_color": "3",
            "history_size": "5",
            "tab_size": "2",
        }
    )

    assert config.write_mode is WriteMode.OVERWRITE
    assert config.primary_color is ColorTag.AQUA
    assert config.secondary_color is ColorTag.OLIVE
    assert config.tertiary_color is ColorTag.RED
    assert config.history_capacity == 5
    assert config.tab_size == 2


def test_unknown_write_mode_falls_back_to_insert() -> None:
    config = EditorConfig.from_settings({"write_mode": "replace"})

    assert config.write_mode is WriteMode.INSERT


def test_unknown_color_is_rejected() -> None:
    with pytest.raises(InvalidColorTagError):
        EditorConfig.from_settings({"primary_color": "mauve"})
    with pytest.raises(InvalidColorTagError):
        EditorConfig.from_settings({"tertiary_color": "16"})


@pytest.mark.parametrize("field", ["history_capacity", "snapshot_interval", "tab_size"])
def test_sizes_must_be_positive(field: str) -> None:
    with pytest.raises(ValueError):
        EditorConfig(**{field: 0})


def test_color_for_selection() -> None:
    config = EditorConfig(tertiary_color=ColorTag.YELLOW)

    assert config.color_for(ActiveColorSelection.NONE) is ColorTag.NONE
    assert config.color_for(ActiveColorSelection.PRIMARY) is ColorTag.BLUE
    assert config.color_for(ActiveColorSelection.TERTIARY) is ColorTag.YELLOW


def test_engine_starts_in_configured_write_mode() -> None:
    engine = BufferEngine(
        Viewport(10, 3), config=EditorConfig(write_mode=WriteMode.OVERWRITE)
    )

    assert engine.insert_mode is False
    assert engine.toggle_insert_mode() is WriteMode.INSERT
    assert engine.insert_mode is True
