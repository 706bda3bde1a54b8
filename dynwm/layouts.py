"""Tiling arrangements of the clients on a monitor."""

from __future__ import annotations

from dynwm.client import Client
from dynwm.monitor import LT_SYMBOL_SIZE, Monitor, ResizeFn


def _tiled(monitor: Monitor) -> list[Client]:
    return [c for c in monitor.clients if not c.is_floating and monitor.is_visible(c)]


def tile(monitor: Monitor, resize: ResizeFn) -> None:
    """Master clients in a column on the left, the rest stacked on the right."""
    clients = _tiled(monitor)
    n = len(clients)
    if n == 0:
        return
    if n > monitor.nmaster:
        master_w = int(monitor.ww * monitor.mfact) if monitor.nmaster else 0
    else:
        master_w = monitor.ww
    my = ty = 0
    for i, c in enumerate(clients):
        if i < monitor.nmaster:
            h = (monitor.wh - my) // (min(n, monitor.nmaster) - i)
            resize(c, monitor.wx, monitor.wy + my, master_w - 2 * c.bw, h - 2 * c.bw, False)
            if my + c.outer_height < monitor.wh:
                my += c.outer_height
        else:
            h = (monitor.wh - ty) // (n - i)
            resize(
                c,
                monitor.wx + master_w,
                monitor.wy + ty,
                monitor.ww - master_w - 2 * c.bw,
                h - 2 * c.bw,
                False,
            )
            if ty + c.outer_height < monitor.wh:
                ty += c.outer_height


def monocle(monitor: Monitor, resize: ResizeFn) -> None:
    """Every tiled client fills the window area; the symbol shows the count."""
    visible = sum(1 for c in monitor.clients if monitor.is_visible(c))
    if visible > 0:
        monitor.lt_symbol = f"[{visible}]"[: LT_SYMBOL_SIZE - 1]
    for c in _tiled(monitor):
        resize(c, monitor.wx, monitor.wy, monitor.ww - 2 * c.bw, monitor.wh - 2 * c.bw, False)


ARRANGEMENTS = {"tile": tile, "monocle": monocle}