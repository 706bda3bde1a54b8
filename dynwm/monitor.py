"""Monitors: their geometry, the clients on them and their focus stack."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, Sequence

from dynwm.client import Client

LT_SYMBOL_SIZE = 16

ResizeFn = Callable[[Client, int, int, int, int, bool], None]


@dataclass(frozen=True)
class Layout:
    """A named arrangement; ``arrange`` is None for floating behaviour.

    ``arrange`` is called with the monitor and a ``resize(client, x, y, w, h,
    interact)`` callable that applies a geometry to a client.
    """

    symbol: str
    arrange: Optional[Callable[["Monitor", ResizeFn], None]] = None


class AttachDirection(IntEnum):
    """Where a new client goes in the client list."""

    DEFAULT = 0
    ABOVE = 1
    ASIDE = 2
    BELOW = 3
    BOTTOM = 4
    TOP = 5


def _fit_symbol(symbol: str) -> str:
    return symbol[: LT_SYMBOL_SIZE - 1]


class Monitor:
    """One screen: geometry, tag sets, layouts, clients and focus stack.

    ``clients`` is in tiling order; ``stack`` is in focus order, most recent
    first.
    """

    def __init__(
        self,
        layouts: Sequence[Layout],
        *,
        mfact: float = 0.55,
        nmaster: int = 1,
        show_bar: bool = True,
        top_bar: bool = True,
        num: int = 0,
    ) -> None:
        if not layouts:
            raise ValueError("at least one layout is required")
        self.lt_symbol = _fit_symbol(layouts[0].symbol)
        self.mfact = mfact
        self.nmaster = nmaster
        self.num = num
        self.by = 0
        self.mx = self.my = self.mw = self.mh = 0
        self.wx = self.wy = self.ww = self.wh = 0
        self.seltags = 0
        self.sellt = 0
        self.tagset = [1, 1]
        self.show_bar = show_bar
        self.top_bar = top_bar
        self.clients: list[Client] = []
        self.sel: Client | None = None
        self.stack: list[Client] = []
        self.bar_window: int = 0
        self.lt: list[Layout] = [layouts[0], layouts[1 % len(layouts)]]

    def __repr__(self) -> str:
        return (
            f"Monitor(num={self.num}, geometry=({self.mx}, {self.my}, {self.mw}, {self.mh}), "
            f"clients={len(self.clients)})"
        )

    @property
    def layout(self) -> Layout:
        """The layout currently selected."""
        return self.lt[self.sellt]

    @property
    def selected_tags(self) -> int:
        """The tag set currently shown."""
        return self.tagset[self.seltags]

    @selected_tags.setter
    def selected_tags(self, tags: int) -> None:
        self.tagset[self.seltags] = tags

    def is_visible(self, client: Client) -> bool:
        """Tell whether ``client`` has a tag this monitor shows."""
        return bool(client.tags & self.tagset[self.seltags])

    def _is_tiled_on(self, client: Client, tags: int) -> bool:
        return not client.is_floating and bool(client.tags & tags)

    def _insert_after(self, anchor: Client, client: Client) -> bool:
        for index, existing in enumerate(self.clients):
            if existing is anchor:
                self.clients.insert(index + 1, client)
                return True
        return False

    def _insert_before(self, anchor: Client, client: Client) -> bool:
        for index, existing in enumerate(self.clients):
            if existing is anchor:
                self.clients.insert(index, client)
                return True
        return False

    def attach(self, client: Client, direction: AttachDirection = AttachDirection.DEFAULT) -> None:
        """Add ``client`` to the client list at the place ``direction`` names."""
        client.monitor = self
        direction = AttachDirection(direction)
        sel = self.sel
        if direction is AttachDirection.ABOVE:
            if (
                sel is not None
                and self.clients
                and sel is not self.clients[0]
                and not sel.is_floating
                and self._insert_before(sel, client)
            ):
                return
        elif direction is AttachDirection.ASIDE:
            anchor = next(
                (c for c in self.clients if self._is_tiled_on(c, client.tags)), None
            )
            if anchor is not None and self._insert_after(anchor, client):
                return
        elif direction is AttachDirection.BELOW:
            if (
                sel is not None
                and sel is not client
                and not sel.is_floating
                and self._insert_after(sel, client)
            ):
                return
        elif direction is AttachDirection.BOTTOM:
            self.clients.append(client)
            return
        elif direction is AttachDirection.TOP:
            self._attach_top(client)
            return
        self.clients.insert(0, client)

    def _attach_top(self, client: Client) -> None:
        if not self.clients:
            self.clients.append(client)
            return
        index = 0
        counted = 1
        while index + 1 < len(self.clients):
            below = self.clients[index]
            skipped = not self._is_tiled_on(below, client.tags)
            if not skipped and counted == self.nmaster:
                break
            if not skipped:
                counted += 1
            index += 1
        self.clients.insert(index + 1, client)

    def detach(self, client: Client) -> None:
        """Remove ``client`` from the client list, if it is there."""
        self.clients = [c for c in self.clients if c is not client]

    def attach_stack(self, client: Client) -> None:
        """Put ``client`` on top of the focus stack."""
        self.stack.insert(0, client)

    def detach_stack(self, client: Client) -> None:
        """Remove ``client`` from the focus stack.

        If it was selected, the first visible client of the stack is
        selected instead.
        """
        self.stack = [c for c in self.stack if c is not client]
        if client is self.sel:
            self.sel = next((c for c in self.stack if self.is_visible(c)), None)

    def next_tiled(self, start: Client | int | None) -> Client | None:
        """Return the first tiled, visible client from ``start`` on.

        ``start`` is a client of this monitor or an index into its client
        list; None gives None.
        """
        if start is None:
            return None
        if isinstance(start, int):
            index = start
        else:
            index = next(
                (i for i, c in enumerate(self.clients) if c is start), None
            )
            if index is None:
                raise ValueError("client is not on this monitor")
        return next(
            (c for c in self.clients[index:] if not c.is_floating and self.is_visible(c)),
            None,
        )

    def update_bar_position(self, bar_height: int) -> None:
        """Work out the window area and the bar position from the screen area."""
        self.wy = self.my
        self.wh = self.mh
        if self.show_bar:
            self.wh -= bar_height
            self.by = self.wy if self.top_bar else self.wy + self.wh
            self.wy = self.wy + bar_height if self.top_bar else self.wy
        else:
            self.by = -bar_height