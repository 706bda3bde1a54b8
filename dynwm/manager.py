"""The window-manager state machine: monitors, clients, focus, tags and layouts."""

from __future__ import annotations

from typing import Iterable, Sequence

from dynwm.client import BROKEN, Client, SizeHints, apply_rules, apply_size_hints
from dynwm.geometry import Rect, unique_geometries
from dynwm.layouts import ARRANGEMENTS
from dynwm.monitor import LT_SYMBOL_SIZE, AttachDirection, Layout, Monitor
from dynwm.wmconfig import WMConfig, default_config

VERSION = "6.6"
DEFAULT_STATUS = f"dwm-{VERSION}"


def _build_layouts(config: WMConfig) -> list[Layout]:
    layouts = []
    for symbol, name in config.layouts:
        if name is None:
            layouts.append(Layout(symbol))
            continue
        try:
            layouts.append(Layout(symbol, ARRANGEMENTS[name]))
        except KeyError:
            raise ValueError(f"unknown arrangement {name!r}") from None
    return layouts


class WindowManager:
    """Tracks monitors and managed clients and carries out the user's commands.

    Only the bookkeeping is done here: geometry, focus, tags and stacking
    order. A display backend reads the resulting state to move windows.
    """

    def __init__(
        self,
        config: WMConfig | None = None,
        *,
        screen_width: int = 1920,
        screen_height: int = 1080,
        bar_height: int = 20,
        screens: Sequence[Rect] | None = None,
        pointer: tuple[int, int] | None = None,
    ) -> None:
        self.config = config if config is not None else default_config()
        self.layouts = _build_layouts(self.config)
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.bar_height = bar_height
        self.pointer = pointer
        self.monitors: list[Monitor] = []
        self.selmon: Monitor | None = None
        self.running = True
        self.status = DEFAULT_STATUS
        self.update_geometry(screens)
        if self.selmon is None:
            self.selmon = self.monitors[0]
        self.focus(None)

    # -- helpers -----------------------------------------------------------

    @property
    def tag_mask(self) -> int:
        return self.config.tag_mask

    @property
    def attach_direction(self) -> AttachDirection:
        return AttachDirection(self.config.attach_direction)

    def _create_monitor(self) -> Monitor:
        return Monitor(
            self.layouts,
            mfact=self.config.mfact,
            nmaster=self.config.nmaster,
            show_bar=self.config.show_bar,
            top_bar=self.config.top_bar,
        )

    @staticmethod
    def _visible(client: Client) -> bool:
        return client.monitor.is_visible(client)

    def _root_monitor(self) -> Monitor:
        if self.pointer is not None:
            return self.rect_to_monitor(self.pointer[0], self.pointer[1], 1, 1)
        return self.selmon if self.selmon is not None else self.monitors[0]

    def _resolve_layout(self, layout: Layout | int | None) -> Layout | None:
        if isinstance(layout, int) and not isinstance(layout, bool):
            return self.layouts[layout]
        return layout

    # -- geometry ----------------------------------------------------------

    def update_geometry(self, screens: Iterable[Rect] | None = None) -> bool:
        """Match the monitors to the given screens; return True if anything changed.

        Without screens a single monitor covers the whole display. Clients
        of monitors that disappear move to the first monitor.
        """
        dirty = False
        screens = list(screens) if screens else []
        if screens:
            unique = unique_geometries(screens)
            old_count = len(self.monitors)
            while len(self.monitors) < len(unique):
                self.monitors.append(self._create_monitor())
            for i, (m, rect) in enumerate(zip(self.monitors, unique)):
                if i >= old_count or (rect.x, rect.y, rect.width, rect.height) != (
                    m.mx, m.my, m.mw, m.mh
                ):
                    dirty = True
                    m.num = i
                    m.mx = m.wx = rect.x
                    m.my = m.wy = rect.y
                    m.mw = m.ww = rect.width
                    m.mh = m.wh = rect.height
                    m.update_bar_position(self.bar_height)
            while len(self.monitors) > len(unique):
                gone = self.monitors[-1]
                first = self.monitors[0]
                while gone.clients:
                    dirty = True
                    client = gone.clients.pop(0)
                    gone.detach_stack(client)
                    client.monitor = first
                    first.attach(client, self.attach_direction)
                    first.attach_stack(client)
                if gone is self.selmon:
                    self.selmon = first
                self.monitors.pop()
        else:
            if not self.monitors:
                self.monitors.append(self._create_monitor())
            m = self.monitors[0]
            if m.mw != self.screen_width or m.mh != self.screen_height:
                dirty = True
                m.mw = m.ww = self.screen_width
                m.mh = m.wh = self.screen_height
                m.update_bar_position(self.bar_height)
        if dirty:
            self.selmon = self.monitors[0]
            self.selmon = self._root_monitor()
        return dirty

    def rect_to_monitor(self, x: int, y: int, w: int, h: int) -> Monitor:
        """Return the monitor sharing the most area with the rectangle, else the selected one."""
        best = self.selmon
        area = 0
        for m in self.monitors:
            shared = Rect(m.wx, m.wy, m.ww, m.wh).intersect(x, y, w, h)
            if shared > area:
                area = shared
                best = m
        return best

    def dir_to_monitor(self, direction: int) -> Monitor:
        """Return the monitor after (direction > 0) or before the selected one, wrapping."""
        index = self.monitors.index(self.selmon)
        if direction > 0:
            return self.monitors[(index + 1) % len(self.monitors)]
        return self.monitors[index - 1]

    # -- client lifecycle --------------------------------------------------

    def window_to_client(self, window: int) -> Client | None:
        """Return the client managing ``window``, if any."""
        return next(
            (c for m in self.monitors for c in m.clients if c.window == window), None
        )

    def manage(
        self,
        window: int,
        x: int,
        y: int,
        w: int,
        h: int,
        border: int = 0,
        title: str = "",
        wm_class: str | None = None,
        instance: str | None = None,
        transient_for: int | None = None,
        hints: SizeHints | None = None,
    ) -> Client:
        """Start managing a new window and focus it; return its client."""
        client = Client(
            window=window,
            name=title or BROKEN,
            wm_class=wm_class,
            instance=instance,
            x=x, y=y, w=w, h=h,
            old_x=x, old_y=y, old_w=w, old_h=h,
            old_bw=border,
        )
        parent = self.window_to_client(transient_for) if transient_for is not None else None
        if parent is not None:
            client.monitor = parent.monitor
            client.tags = parent.tags
        else:
            client.monitor = self.selmon
            apply_rules(client, self.config.rules, self.monitors, self.tag_mask)
        mon = client.monitor
        if client.x + client.outer_width > mon.wx + mon.ww:
            client.x = mon.wx + mon.ww - client.outer_width
        if client.y + client.outer_height > mon.wy + mon.wh:
            client.y = mon.wy + mon.wh - client.outer_height
        client.x = max(client.x, mon.wx)
        client.y = max(client.y, mon.wy)
        client.bw = self.config.border_px
        client.update_size_hints(hints)
        if not client.is_floating:
            client.is_floating = client.old_state = (
                transient_for is not None or client.is_fixed
            )
        mon.attach(client, self.attach_direction)
        mon.attach_stack(client)
        mon.sel = client
        self.arrange(mon)
        self.focus(None)
        return client

    def unmanage(self, client: Client) -> None:
        """Stop managing ``client``."""
        mon = client.monitor
        mon.detach(client)
        mon.detach_stack(client)
        self.focus(None)
        self.arrange(mon)

    # -- focus -------------------------------------------------------------

    def focus(self, client: Client | None = None) -> None:
        """Focus ``client``, or the most recently focused visible client."""
        if client is None or not self._visible(client):
            client = next((c for c in self.selmon.stack if self._visible(c)), None)
        if client is not None:
            self.selmon = client.monitor
            client.is_urgent = False
            client.monitor.detach_stack(client)
            client.monitor.attach_stack(client)
        self.selmon.sel = client

    def focus_stack(self, direction: int) -> None:
        """Focus the next (direction > 0) or previous visible client, wrapping."""
        sel = self.selmon.sel
        if sel is None or (sel.is_fullscreen and self.config.lock_fullscreen):
            return
        clients = self.selmon.clients
        index = clients.index(sel)
        if direction > 0:
            target = next((c for c in clients[index + 1:] if self._visible(c)), None)
            if target is None:
                target = next((c for c in clients if self._visible(c)), None)
        else:
            before = [c for c in clients[:index] if self._visible(c)]
            if before:
                target = before[-1]
            else:
                after = [c for c in clients[index:] if self._visible(c)]
                target = after[-1] if after else None
        if target is not None:
            self.focus(target)

    def focus_monitor(self, direction: int) -> None:
        """Select the monitor in ``direction``."""
        if len(self.monitors) < 2:
            return
        target = self.dir_to_monitor(direction)
        if target is self.selmon:
            return
        self.selmon = target
        self.focus(None)

    # -- tags --------------------------------------------------------------

    def view(self, tags: int) -> None:
        """Show ``tags``; zero switches back to the previously shown tag set."""
        mask = tags & self.tag_mask
        mon = self.selmon
        if mask == mon.selected_tags:
            return
        mon.seltags ^= 1
        if mask:
            mon.selected_tags = mask
        self.focus(None)
        self.arrange(mon)

    def toggle_view(self, tags: int) -> None:
        """Add or remove ``tags`` from those shown, never leaving none."""
        mon = self.selmon
        new = mon.selected_tags ^ (tags & self.tag_mask)
        if new:
            mon.selected_tags = new
            self.focus(None)
            self.arrange(mon)

    def tag(self, tags: int) -> None:
        """Give the selected client exactly ``tags``."""
        sel = self.selmon.sel
        if sel is not None and tags & self.tag_mask:
            sel.tags = tags & self.tag_mask
            self.focus(None)
            self.arrange(self.selmon)

    def toggle_tag(self, tags: int) -> None:
        """Add or remove ``tags`` on the selected client, never leaving none."""
        sel = self.selmon.sel
        if sel is None:
            return
        new = sel.tags ^ (tags & self.tag_mask)
        if new:
            sel.tags = new
            self.focus(None)
            self.arrange(self.selmon)

    def tag_monitor(self, direction: int) -> None:
        """Send the selected client to the monitor in ``direction``."""
        if self.selmon.sel is None or len(self.monitors) < 2:
            return
        self.send_to_monitor(self.selmon.sel, self.dir_to_monitor(direction))

    def send_to_monitor(self, client: Client, monitor: Monitor) -> None:
        """Move ``client`` to ``monitor``, taking that monitor's shown tags."""
        if client.monitor is monitor:
            return
        old = client.monitor
        old.detach(client)
        old.detach_stack(client)
        client.monitor = monitor
        client.tags = monitor.selected_tags
        monitor.attach(client, self.attach_direction)
        monitor.attach_stack(client)
        self.focus(None)
        self.arrange(None)

    # -- layout ------------------------------------------------------------

    def inc_nmaster(self, delta: int) -> None:
        """Change the number of master clients, not below zero."""
        self.selmon.nmaster = max(self.selmon.nmaster + delta, 0)
        self.arrange(self.selmon)

    def set_mfact(self, value: float | None) -> None:
        """Change the master area factor by ``value``; values above 1.0 set it to ``value - 1``."""
        mon = self.selmon
        if value is None or mon.layout.arrange is None:
            return
        factor = value + mon.mfact if value < 1.0 else value - 1.0
        if factor < 0.05 or factor > 0.95:
            return
        mon.mfact = factor
        self.arrange(mon)

    def set_layout(self, layout: Layout | int | None = None) -> None:
        """Select ``layout`` (a layout or an index); None toggles to the previous one."""
        layout = self._resolve_layout(layout)
        mon = self.selmon
        if layout is None or layout != mon.layout:
            mon.sellt ^= 1
        if layout is not None:
            mon.lt[mon.sellt] = layout
        mon.lt_symbol = mon.layout.symbol[: LT_SYMBOL_SIZE - 1]
        if mon.sel is not None:
            self.arrange(mon)

    def toggle_bar(self) -> None:
        """Show or hide the bar of the selected monitor."""
        mon = self.selmon
        mon.show_bar = not mon.show_bar
        mon.update_bar_position(self.bar_height)
        self.arrange(mon)

    def toggle_floating(self) -> None:
        """Make the selected client float or tile; fixed-size clients always float."""
        sel = self.selmon.sel
        if sel is None or sel.is_fullscreen:
            return
        sel.is_floating = not sel.is_floating or sel.is_fixed
        if sel.is_floating:
            self.resize(sel, sel.x, sel.y, sel.w, sel.h, False)
        self.arrange(self.selmon)

    def zoom(self) -> None:
        """Move the selected tiled client to the master area, or swap it with the next one."""
        mon = self.selmon
        client = mon.sel
        if mon.layout.arrange is None or client is None or client.is_floating:
            return
        if client is mon.next_tiled(0):
            client = mon.next_tiled(mon.clients.index(client) + 1)
            if client is None:
                return
        mon.detach(client)
        mon.attach(client)
        self.focus(client)
        self.arrange(client.monitor)

    def set_fullscreen(self, client: Client, fullscreen: bool) -> None:
        """Make ``client`` cover its monitor, or restore its previous geometry."""
        if fullscreen and not client.is_fullscreen:
            client.is_fullscreen = True
            client.old_state = client.is_floating
            client.old_bw = client.bw
            client.bw = 0
            client.is_floating = True
            mon = client.monitor
            self.resize_client(client, mon.mx, mon.my, mon.mw, mon.mh)
        elif not fullscreen and client.is_fullscreen:
            client.is_fullscreen = False
            client.is_floating = client.old_state
            client.bw = client.old_bw
            client.x, client.y = client.old_x, client.old_y
            client.w, client.h = client.old_w, client.old_h
            self.resize_client(client, client.x, client.y, client.w, client.h)
            self.arrange(client.monitor)

    def _show_hide(self, monitor: Monitor) -> None:
        for client in monitor.stack:
            if not monitor.is_visible(client):
                continue
            if (monitor.layout.arrange is None or client.is_floating) and not client.is_fullscreen:
                self.resize(client, client.x, client.y, client.w, client.h, False)

    def _arrange_monitor(self, monitor: Monitor) -> None:
        monitor.lt_symbol = monitor.layout.symbol[: LT_SYMBOL_SIZE - 1]
        if monitor.layout.arrange is not None:
            monitor.layout.arrange(monitor, self.resize)

    def arrange(self, monitor: Monitor | None = None) -> None:
        """Lay out ``monitor``, or every monitor when None."""
        targets = [monitor] if monitor is not None else list(self.monitors)
        for m in targets:
            self._show_hide(m)
        for m in targets:
            self._arrange_monitor(m)

    def resize(self, client: Client, x: int, y: int, w: int, h: int, interact: bool = False) -> None:
        """Apply a geometry to ``client`` after fitting it to its size hints."""
        respect = self.config.resize_hints or client.monitor.layout.arrange is None
        fitted = apply_size_hints(
            client, x, y, w, h, interact,
            self.screen_width, self.screen_height, self.bar_height, respect,
        )
        if fitted.changed:
            self.resize_client(client, fitted.x, fitted.y, fitted.w, fitted.h)

    def resize_client(self, client: Client, x: int, y: int, w: int, h: int) -> None:
        """Set the geometry of ``client``, remembering the previous one."""
        client.old_x, client.x = client.x, x
        client.old_y, client.y = client.y, y
        client.old_w, client.w = client.w, w
        client.old_h, client.h = client.h, h

    def quit(self) -> None:
        """Ask the event loop to stop."""
        self.running = False