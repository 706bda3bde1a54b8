"""Default settings, key bindings and mouse bindings of the window manager."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any

from dynwm.client import Rule

ALL_TAGS = 0xFFFFFFFF
MAX_TAGS = 31


class Mod(IntFlag):
    """Keyboard modifier masks."""

    NONE = 0
    SHIFT = 1
    LOCK = 2
    CONTROL = 4
    MOD1 = 8
    MOD2 = 16
    MOD3 = 32
    MOD4 = 64
    MOD5 = 128


MODKEY = Mod.MOD1


class Keysym(IntEnum):
    """Key symbols used by the default bindings."""

    SPACE = 0x20
    COMMA = 0x2C
    PERIOD = 0x2E
    NUM_0 = 0x30
    NUM_1 = 0x31
    NUM_2 = 0x32
    NUM_3 = 0x33
    NUM_4 = 0x34
    NUM_5 = 0x35
    NUM_6 = 0x36
    NUM_7 = 0x37
    NUM_8 = 0x38
    NUM_9 = 0x39
    B = 0x62
    C = 0x63
    D = 0x64
    F = 0x66
    H = 0x68
    I = 0x69  # noqa: E741
    J = 0x6A
    K = 0x6B
    L = 0x6C
    M = 0x6D
    P = 0x70
    Q = 0x71
    T = 0x74
    TAB = 0xFF09
    RETURN = 0xFF0D


class MouseButton(IntEnum):
    BUTTON1 = 1
    BUTTON2 = 2
    BUTTON3 = 3


class Click(IntEnum):
    """Where on the screen a mouse button was pressed."""

    TAG_BAR = 0
    LT_SYMBOL = 1
    STATUS_TEXT = 2
    WIN_TITLE = 3
    CLIENT_WIN = 4
    ROOT_WIN = 5


class ColorScheme(IntEnum):
    NORM = 0
    SEL = 1


@dataclass(frozen=True)
class Key:
    """A key binding: ``action`` names a window-manager command run with ``arg``."""

    mod: int
    keysym: int
    action: str
    arg: Any = None


@dataclass(frozen=True)
class Button:
    """A mouse binding for a click region."""

    click: Click
    mask: int
    button: int
    action: str
    arg: Any = None


def _tag_keys(keysym: Keysym, tag: int) -> list[Key]:
    bit = 1 << tag
    return [
        Key(MODKEY, keysym, "view", bit),
        Key(MODKEY | Mod.CONTROL, keysym, "toggle_view", bit),
        Key(MODKEY | Mod.SHIFT, keysym, "tag", bit),
        Key(MODKEY | Mod.CONTROL | Mod.SHIFT, keysym, "toggle_tag", bit),
    ]


DMENU_FONT = "monospace:size=10"
COL_GRAY1 = "#222222"
COL_GRAY2 = "#444444"
COL_GRAY3 = "#bbbbbb"
COL_GRAY4 = "#eeeeee"
COL_CYAN = "#005577"

DMENU_COMMAND = (
    "dmenu_run", "-m", "0", "-fn", DMENU_FONT,
    "-nb", COL_GRAY1, "-nf", COL_GRAY3, "-sb", COL_CYAN, "-sf", COL_GRAY4,
)
TERMINAL_COMMAND = ("st",)


def _default_keys() -> list[Key]:
    keys = [
        Key(MODKEY, Keysym.P, "spawn", DMENU_COMMAND),
        Key(MODKEY | Mod.SHIFT, Keysym.RETURN, "spawn", TERMINAL_COMMAND),
        Key(MODKEY, Keysym.B, "toggle_bar"),
        Key(MODKEY, Keysym.J, "focus_stack", +1),
        Key(MODKEY, Keysym.K, "focus_stack", -1),
        Key(MODKEY, Keysym.I, "inc_nmaster", +1),
        Key(MODKEY, Keysym.D, "inc_nmaster", -1),
        Key(MODKEY, Keysym.H, "set_mfact", -0.05),
        Key(MODKEY, Keysym.L, "set_mfact", +0.05),
        Key(MODKEY, Keysym.RETURN, "zoom"),
        Key(MODKEY, Keysym.TAB, "view", 0),
        Key(MODKEY | Mod.SHIFT, Keysym.C, "kill_client"),
        Key(MODKEY, Keysym.T, "set_layout", 0),
        Key(MODKEY, Keysym.F, "set_layout", 1),
        Key(MODKEY, Keysym.M, "set_layout", 2),
        Key(MODKEY, Keysym.SPACE, "set_layout"),
        Key(MODKEY | Mod.SHIFT, Keysym.SPACE, "toggle_floating"),
        Key(MODKEY, Keysym.NUM_0, "view", ALL_TAGS),
        Key(MODKEY | Mod.SHIFT, Keysym.NUM_0, "tag", ALL_TAGS),
        Key(MODKEY, Keysym.COMMA, "focus_monitor", -1),
        Key(MODKEY, Keysym.PERIOD, "focus_monitor", +1),
        Key(MODKEY | Mod.SHIFT, Keysym.COMMA, "tag_monitor", -1),
        Key(MODKEY | Mod.SHIFT, Keysym.PERIOD, "tag_monitor", +1),
    ]
    digits = [Keysym.NUM_1, Keysym.NUM_2, Keysym.NUM_3, Keysym.NUM_4, Keysym.NUM_5,
              Keysym.NUM_6, Keysym.NUM_7, Keysym.NUM_8, Keysym.NUM_9]
    for tag, keysym in enumerate(digits):
        keys.extend(_tag_keys(keysym, tag))
    keys.append(Key(MODKEY | Mod.SHIFT, Keysym.Q, "quit"))
    return keys


def _default_buttons() -> list[Button]:
    b1, b2, b3 = MouseButton.BUTTON1, MouseButton.BUTTON2, MouseButton.BUTTON3
    return [
        Button(Click.LT_SYMBOL, 0, b1, "set_layout"),
        Button(Click.LT_SYMBOL, 0, b3, "set_layout", 2),
        Button(Click.WIN_TITLE, 0, b2, "zoom"),
        Button(Click.STATUS_TEXT, 0, b2, "spawn", TERMINAL_COMMAND),
        Button(Click.CLIENT_WIN, MODKEY, b1, "move_mouse"),
        Button(Click.CLIENT_WIN, MODKEY, b2, "toggle_floating"),
        Button(Click.CLIENT_WIN, MODKEY, b3, "resize_mouse"),
        Button(Click.TAG_BAR, 0, b1, "view", 0),
        Button(Click.TAG_BAR, 0, b3, "toggle_view", 0),
        Button(Click.TAG_BAR, MODKEY, b1, "tag", 0),
        Button(Click.TAG_BAR, MODKEY, b3, "toggle_tag", 0),
    ]


def _default_colors() -> dict[ColorScheme, tuple[str, str, str]]:
    return {
        ColorScheme.NORM: (COL_GRAY3, COL_GRAY1, COL_GRAY2),
        ColorScheme.SEL: (COL_GRAY4, COL_CYAN, COL_CYAN),
    }


@dataclass
class WMConfig:
    """Appearance, behaviour and bindings.

    Colours map a scheme to ``(foreground, background, border)``. Layouts are
    ``(symbol, arrangement)`` pairs, the arrangement being ``"tile"``,
    ``"monocle"`` or ``None`` for floating; the first is the default.
    """

    border_px: int = 1
    snap: int = 32
    show_bar: bool = True
    top_bar: bool = True
    fonts: list[str] = field(default_factory=lambda: ["monospace:size=10"])
    dmenu_font: str = DMENU_FONT
    colors: dict[ColorScheme, tuple[str, str, str]] = field(default_factory=_default_colors)
    tags: tuple[str, ...] = ("1", "2", "3", "4", "5", "6", "7", "8", "9")
    rules: list[Rule] = field(
        default_factory=lambda: [
            Rule(wm_class="Gimp", tags=0, is_floating=True, monitor=-1),
            Rule(wm_class="Firefox", tags=1 << 8, is_floating=False, monitor=-1),
        ]
    )
    mfact: float = 0.55
    nmaster: int = 1
    resize_hints: bool = True
    lock_fullscreen: bool = True
    refresh_rate: int = 120
    attach_direction: int = 0
    layouts: tuple[tuple[str, str | None], ...] = (
        ("[]=", "tile"),
        ("><>", None),
        ("[M]", "monocle"),
    )
    dmenu_command: tuple[str, ...] = DMENU_COMMAND
    terminal_command: tuple[str, ...] = TERMINAL_COMMAND
    keys: list[Key] = field(default_factory=_default_keys)
    buttons: list[Button] = field(default_factory=_default_buttons)

    def __post_init__(self) -> None:
        if len(self.tags) > MAX_TAGS:
            raise ValueError(f"at most {MAX_TAGS} tags fit in a tag mask, got {len(self.tags)}")
        if not self.layouts:
            raise ValueError("at least one layout is required")

    @property
    def tag_mask(self) -> int:
        """Mask with one bit for every tag."""
        return (1 << len(self.tags)) - 1


def default_config() -> WMConfig:
    """Return a fresh copy of the default configuration."""
    return WMConfig()