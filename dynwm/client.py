"""Managed windows, their size hints and the rules applied to new ones."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, NamedTuple

BROKEN = "broken"


@dataclass(frozen=True)
class SizeHints:
    """The WM_NORMAL_HINTS of a window; absent fields are ``None``.

    ``aspect`` holds ``((min_x, min_y), (max_x, max_y))``.
    """

    base_size: tuple[int, int] | None = None
    min_size: tuple[int, int] | None = None
    max_size: tuple[int, int] | None = None
    resize_inc: tuple[int, int] | None = None
    aspect: tuple[tuple[int, int], tuple[int, int]] | None = None


def _ratio(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator:
        return math.copysign(math.inf, numerator)
    return math.nan


def _c_mod(value: int, divisor: int) -> int:
    rest = abs(value) % abs(divisor)
    return -rest if value < 0 else rest


@dataclass(eq=False)
class Client:
    """A managed top-level window."""

    window: int = 0
    name: str = ""
    wm_class: str | None = None
    instance: str | None = None
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    old_x: int = 0
    old_y: int = 0
    old_w: int = 0
    old_h: int = 0
    base_w: int = 0
    base_h: int = 0
    inc_w: int = 0
    inc_h: int = 0
    max_w: int = 0
    max_h: int = 0
    min_w: int = 0
    min_h: int = 0
    min_aspect: float = 0.0
    max_aspect: float = 0.0
    hints_valid: bool = False
    size_hints: SizeHints | None = None
    bw: int = 0
    old_bw: int = 0
    tags: int = 0
    is_fixed: bool = False
    is_floating: bool = False
    is_urgent: bool = False
    never_focus: bool = False
    old_state: bool = False
    is_fullscreen: bool = False
    monitor: Any = field(default=None, repr=False)

    @property
    def outer_width(self) -> int:
        """Width including both borders."""
        return self.w + 2 * self.bw

    @property
    def outer_height(self) -> int:
        """Height including both borders."""
        return self.h + 2 * self.bw

    def update_size_hints(self, hints: SizeHints | None) -> None:
        """Store ``hints`` and derive the size constraints from them."""
        self.size_hints = hints
        hints = hints if hints is not None else SizeHints()
        if hints.base_size is not None:
            self.base_w, self.base_h = hints.base_size
        elif hints.min_size is not None:
            self.base_w, self.base_h = hints.min_size
        else:
            self.base_w = self.base_h = 0
        if hints.resize_inc is not None:
            self.inc_w, self.inc_h = hints.resize_inc
        else:
            self.inc_w = self.inc_h = 0
        if hints.max_size is not None:
            self.max_w, self.max_h = hints.max_size
        else:
            self.max_w = self.max_h = 0
        if hints.min_size is not None:
            self.min_w, self.min_h = hints.min_size
        elif hints.base_size is not None:
            self.min_w, self.min_h = hints.base_size
        else:
            self.min_w = self.min_h = 0
        if hints.aspect is not None:
            (min_x, min_y), (max_x, max_y) = hints.aspect
            self.min_aspect = _ratio(min_y, min_x)
            self.max_aspect = _ratio(max_x, max_y)
        else:
            self.min_aspect = self.max_aspect = 0.0
        self.is_fixed = bool(
            self.max_w
            and self.max_h
            and self.max_w == self.min_w
            and self.max_h == self.min_h
        )
        self.hints_valid = True


@dataclass(frozen=True)
class Rule:
    """Placement for new windows whose class, instance and title contain these."""

    wm_class: str | None = None
    instance: str | None = None
    title: str | None = None
    tags: int = 0
    is_floating: bool = False
    monitor: int = -1


def apply_rules(client: Client, rules: Iterable[Rule], monitors: Iterable[Any], tag_mask: int) -> None:
    """Set the client's floating state, tags and monitor from matching rules.

    A client no rule gives tags to gets the tags its monitor is showing.
    """
    monitors = list(monitors)
    client.is_floating = False
    tags = 0
    wm_class = client.wm_class or BROKEN
    instance = client.instance or BROKEN
    for rule in rules:
        if (
            (rule.title is None or rule.title in client.name)
            and (rule.wm_class is None or rule.wm_class in wm_class)
            and (rule.instance is None or rule.instance in instance)
        ):
            client.is_floating = rule.is_floating
            tags |= rule.tags
            target = next((m for m in monitors if m.num == rule.monitor), None)
            if target is not None:
                client.monitor = target
    monitor = client.monitor
    client.tags = tags & tag_mask or monitor.tagset[monitor.seltags]


class HintedGeometry(NamedTuple):
    """A geometry adjusted to a client's hints, and whether it differs from the current one."""

    x: int
    y: int
    w: int
    h: int
    changed: bool


def apply_size_hints(
    client: Client,
    x: int,
    y: int,
    w: int,
    h: int,
    interact: bool = False,
    screen_width: int = 0,
    screen_height: int = 0,
    bar_height: int = 0,
    respect_hints: bool = True,
) -> HintedGeometry:
    """Keep a requested geometry on screen and within the client's size hints.

    Interactive requests are kept on the whole screen, others within the
    window area of the client's monitor. Size hints are honoured when
    ``respect_hints`` is true or the client floats.
    """
    w = max(1, w)
    h = max(1, h)
    if interact:
        if x > screen_width:
            x = screen_width - client.outer_width
        if y > screen_height:
            y = screen_height - client.outer_height
        if x + w + 2 * client.bw < 0:
            x = 0
        if y + h + 2 * client.bw < 0:
            y = 0
    else:
        m = client.monitor
        if x >= m.wx + m.ww:
            x = m.wx + m.ww - client.outer_width
        if y >= m.wy + m.wh:
            y = m.wy + m.wh - client.outer_height
        if x + w + 2 * client.bw <= m.wx:
            x = m.wx
        if y + h + 2 * client.bw <= m.wy:
            y = m.wy
    h = max(h, bar_height)
    w = max(w, bar_height)
    if respect_hints or client.is_floating:
        if not client.hints_valid:
            client.update_size_hints(client.size_hints)
        base_is_min = client.base_w == client.min_w and client.base_h == client.min_h
        if not base_is_min:
            w -= client.base_w
            h -= client.base_h
        if client.min_aspect > 0 and client.max_aspect > 0:
            if client.max_aspect < _ratio(w, h):
                w = int(h * client.max_aspect + 0.5)
            elif client.min_aspect < _ratio(h, w):
                h = int(w * client.min_aspect + 0.5)
        if base_is_min:
            w -= client.base_w
            h -= client.base_h
        if client.inc_w:
            w -= _c_mod(w, client.inc_w)
        if client.inc_h:
            h -= _c_mod(h, client.inc_h)
        w = max(w + client.base_w, client.min_w)
        h = max(h + client.base_h, client.min_h)
        if client.max_w:
            w = min(w, client.max_w)
        if client.max_h:
            h = min(h, client.max_h)
    changed = x != client.x or y != client.y or w != client.w or h != client.h
    return HintedGeometry(x, y, w, h, changed)