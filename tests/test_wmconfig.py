import pytest

from dynwm.wmconfig import (
    ALL_TAGS,
    MODKEY,
    Click,
    ColorScheme,
    Key,
    Keysym,
    Mod,
    WMConfig,
    default_config,
)


def test_documented_defaults():
    config = default_config()
    assert config.border_px == 1
    assert config.snap == 32
    assert config.mfact == pytest.approx(0.55)
    assert config.nmaster == 1
    assert config.refresh_rate == 120
    assert config.tags == ("1", "2", "3", "4", "5", "6", "7", "8", "9")


def test_tag_mask_covers_every_tag():
    config = default_config()
    assert config.tag_mask == (1 << len(config.tags)) - 1
    assert all(config.tag_mask & (1 << i) for i in range(len(config.tags)))
    assert not config.tag_mask & (1 << len(config.tags))


def test_too_many_tags_rejected():
    with pytest.raises(ValueError):
        WMConfig(tags=tuple(str(i) for i in range(32)))


def test_first_layout_is_tile():
    config = default_config()
    assert config.layouts[0] == ("[]=", "tile")
    assert config.layouts[1][1] is None
    assert config.layouts[2] == ("[M]", "monocle")


def test_colors():
    config = default_config()
    assert config.colors[ColorScheme.NORM] == ("#bbbbbb", "#222222", "#444444")
    assert config.colors[ColorScheme.SEL] == ("#eeeeee", "#005577", "#005577")


def test_dmenu_command_carries_monitor_and_colors():
    config = default_config()
    command = config.dmenu_command
    assert command[0] == "dmenu_run"
    assert command[command.index("-m") + 1] == "0"
    assert command[command.index("-nb") + 1] == "#222222"
    assert config.terminal_command == ("st",)


def test_every_tag_key_has_four_bindings():
    config = default_config()
    for tag in range(9):
        keysym = Keysym.NUM_1 + tag
        actions = {k.action: k for k in config.keys if k.keysym == keysym}
        assert set(actions) == {"view", "toggle_view", "tag", "toggle_tag"}
        assert all(k.arg == 1 << tag for k in actions.values())
        assert actions["toggle_tag"].mod == MODKEY | Mod.CONTROL | Mod.SHIFT


def test_bindings_are_unique():
    config = default_config()
    pairs = [(k.mod, k.keysym) for k in config.keys]
    assert len(pairs) == len(set(pairs))


def test_view_all_and_quit_bindings():
    keys = default_config().keys
    assert Key(MODKEY, Keysym.NUM_0, "view", ALL_TAGS) in keys
    assert keys[-1] == Key(MODKEY | Mod.SHIFT, Keysym.Q, "quit")


def test_tag_bar_buttons_take_clicked_tag():
    buttons = default_config().buttons
    tag_bar = [b for b in buttons if b.click == Click.TAG_BAR]
    assert {b.action for b in tag_bar} == {"view", "toggle_view", "tag", "toggle_tag"}
    assert all(b.arg == 0 for b in tag_bar)


def test_configs_are_independent():
    first = default_config()
    second = default_config()
    first.keys.clear()
    first.rules.append(first.rules[0])
    assert len(second.keys) == len(default_config().keys)
    assert len(second.rules) == 2
    assert second.rules[1].tags == 1 << 8