"""State and navigation of the dynamic menu, independent of any display."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, TextIO

from dynwm.argparsing import UsageError
from dynwm.lineedit import LineBuffer
from dynwm.matching import Item, match

VERSION = "5.4"
USAGE = (
    "usage: dmenu [-bfiv] [-l lines] [-p prompt] [-fn font] [-m monitor]\n"
    "             [-nb color] [-nf color] [-sb color] [-sf color] [-w windowid]"
)


class Scheme(Enum):
    NORM = "norm"
    SEL = "sel"
    OUT = "out"


def _default_colors() -> dict[Scheme, tuple[str, str]]:
    return {
        Scheme.NORM: ("#bbbbbb", "#222222"),
        Scheme.SEL: ("#eeeeee", "#005577"),
        Scheme.OUT: ("#000000", "#00ffff"),
    }


@dataclass
class MenuConfig:
    """Settings of the menu; colours map a scheme to ``(foreground, background)``."""

    topbar: bool = True
    fonts: list[str] = field(default_factory=lambda: ["monospace:size=10"])
    prompt: str | None = None
    colors: dict[Scheme, tuple[str, str]] = field(default_factory=_default_colors)
    lines: int = 0
    monitor: int = -1
    fast: bool = False
    case_insensitive: bool = False
    embed: str | None = None
    word_delimiters: str = " "
    show_version: bool = False


def _atoi(text: str) -> int:
    found = re.match(r"\s*([+-]?\d+)", text)
    return int(found.group(1)) if found else 0


def _set_color(config: MenuConfig, scheme: Scheme, index: int, value: str) -> None:
    pair = list(config.colors[scheme])
    pair[index] = value
    config.colors[scheme] = (pair[0], pair[1])


def parse_args(argv: Iterable[str]) -> MenuConfig:
    """Build a configuration from command-line words (without the program name).

    ``-v`` stops parsing and sets ``show_version``. Unknown options and
    options missing their argument raise UsageError.
    """
    config = MenuConfig()
    words = iter(argv)
    for word in words:
        if word == "-v":
            config.show_version = True
            return config
        if word == "-b":
            config.topbar = False
            continue
        if word == "-f":
            config.fast = True
            continue
        if word == "-i":
            config.case_insensitive = True
            continue
        value = next(words, None)
        if value is None:
            raise UsageError(message=USAGE)
        if word == "-l":
            config.lines = _atoi(value)
        elif word == "-m":
            config.monitor = _atoi(value)
        elif word == "-p":
            config.prompt = value
        elif word == "-fn":
            config.fonts[0] = value
        elif word == "-nb":
            _set_color(config, Scheme.NORM, 1, value)
        elif word == "-nf":
            _set_color(config, Scheme.NORM, 0, value)
        elif word == "-sb":
            _set_color(config, Scheme.SEL, 1, value)
        elif word == "-sf":
            _set_color(config, Scheme.SEL, 0, value)
        elif word == "-w":
            config.embed = value
        else:
            raise UsageError(message=USAGE)
    return config


def read_items(stream: TextIO) -> list[Item]:
    """Read one item per line, dropping the trailing newline."""
    return [Item(line[:-1] if line.endswith("\n") else line) for line in stream]


class Menu:
    """Matches, paging and selection of the menu.

    Widths are measured by ``text_width`` (default: one unit per character);
    ``lrpad`` is the horizontal padding added to every text.
    """

    def __init__(
        self,
        items: Iterable[Item],
        config: MenuConfig | None = None,
        *,
        width: int = 80,
        bar_height: int = 1,
        lrpad: int = 0,
        text_width: Callable[[str], int] = len,
    ) -> None:
        self.items = list(items)
        self.config = config if config is not None else MenuConfig()
        # A negative line count wraps around like an unsigned value.
        self.lines = min(self.config.lines % 2**32, len(self.items))
        self.width = width
        self.bar_height = bar_height
        self.lrpad = lrpad
        self.text_width = text_width
        self.buffer = LineBuffer(word_delimiters=self.config.word_delimiters)
        prompt = self.config.prompt
        self.prompt_width = self._textw(prompt) - lrpad // 4 if prompt else 0
        self.input_width = width // 3
        self.matches: list[Item] = []
        self.curr: int | None = None
        self.sel: int | None = None
        self.prev: int | None = None
        self.next: int | None = None
        self.refresh()

    def _textw(self, text: str) -> int:
        return self.text_width(text) + self.lrpad

    def _page_size(self) -> int:
        if self.lines > 0:
            return self.lines * self.bar_height
        return self.width - (
            self.prompt_width + self.input_width + self._textw("<") + self._textw(">")
        )

    def _item_width(self, item: Item, limit: int) -> int:
        if self.lines > 0:
            return self.bar_height
        return min(self._textw(item.text), limit)

    @property
    def selected(self) -> Item | None:
        return None if self.sel is None else self.matches[self.sel]

    def refresh(self) -> None:
        """Re-match the items against the input and select the first match."""
        self.matches = match(self.items, self.buffer.text, self.config.case_insensitive)
        self.curr = self.sel = 0 if self.matches else None
        self.calc_offsets()

    def calc_offsets(self) -> None:
        """Work out where the next and previous pages begin."""
        if self.curr is None:
            self.prev = self.next = None
            return
        limit = self._page_size()
        used = 0
        nxt: int | None = self.curr
        while nxt is not None:
            used += self._item_width(self.matches[nxt], limit)
            if used > limit:
                break
            nxt = nxt + 1 if nxt + 1 < len(self.matches) else None
        self.next = nxt
        used = 0
        prev = self.curr
        while prev > 0:
            used += self._item_width(self.matches[prev - 1], limit)
            if used > limit:
                break
            prev -= 1
        self.prev = prev

    def visible(self) -> list[Item]:
        """The matches shown on the current page."""
        if self.curr is None:
            return []
        end = len(self.matches) if self.next is None else self.next
        return self.matches[self.curr:end]

    def paste(self, text: str) -> None:
        """Insert the first line of ``text`` at the cursor."""
        if self.buffer.insert(text.split("\n", 1)[0]):
            self.refresh()

    def home(self) -> None:
        if self.sel == (0 if self.matches else None):
            self.buffer.cursor = 0
            return
        self.sel = self.curr = 0
        self.calc_offsets()

    def end(self) -> None:
        if not self.buffer.at_end:
            self.buffer.cursor = len(self.buffer)
            return
        if self.next is not None:
            self.curr = len(self.matches) - 1
            self.calc_offsets()
            self.curr = self.prev
            self.calc_offsets()
            while self.next is not None:
                self.curr += 1
                self.calc_offsets()
        self.sel = len(self.matches) - 1 if self.matches else None

    def left(self) -> None:
        if self.buffer.cursor > 0 and (not self.sel or self.lines > 0):
            self.buffer.cursor = self.buffer.next_rune(-1)
            return
        if self.lines > 0:
            return
        self.up()

    def right(self) -> None:
        if not self.buffer.at_end:
            self.buffer.cursor = self.buffer.next_rune(+1)
            return
        if self.lines > 0:
            return
        self.down()

    def up(self) -> None:
        if self.sel:
            self.sel -= 1
            if self.sel + 1 == self.curr:
                self.curr = self.prev
                self.calc_offsets()

    def down(self) -> None:
        if self.sel is not None and self.sel + 1 < len(self.matches):
            self.sel += 1
            if self.sel == self.next:
                self.curr = self.next
                self.calc_offsets()

    def page_next(self) -> None:
        if self.next is None:
            return
        self.sel = self.curr = self.next
        self.calc_offsets()

    def page_prior(self) -> None:
        if self.prev is None:
            return
        self.sel = self.curr = self.prev
        self.calc_offsets()

    def complete(self) -> None:
        """Copy the selected item into the input."""
        if self.sel is None:
            return
        self.buffer.replace(self.matches[self.sel].text)
        self.refresh()

    def accept(self, shift: bool = False, control: bool = False) -> str:
        """Return the text to print: the selection, or the input when shifted.

        With ``control`` the menu stays open and the selection is marked out.
        """
        item = self.selected
        result = item.text if item is not None and not shift else self.buffer.text
        if control and item is not None:
            item.out = True
        return result