from dynwm.client import Client
from dynwm.layouts import ARRANGEMENTS, monocle, tile
from dynwm.monitor import AttachDirection, Layout, Monitor


def make_monitor(count, *, nmaster=1, mfact=0.5, bw=1):
    m = Monitor([Layout("[]=", tile), Layout("[M]", monocle)], nmaster=nmaster, mfact=mfact)
    m.wx, m.wy, m.ww, m.wh = 0, 0, 1000, 600
    clients = [Client(window=i + 1, tags=1, bw=bw) for i in range(count)]
    for c in clients:
        m.attach(c, AttachDirection.BOTTOM)
    return m, clients


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, client, x, y, w, h, interact):
        self.calls.append((client, x, y, w, h, interact))
        client.x, client.y, client.w, client.h = x, y, w, h


def test_arrangements_by_name_tile():
    m, (a, b) = make_monitor(2)
    resize = Recorder()
    ARRANGEMENTS["tile"](m, resize)
    assert resize.calls[0] == (a, m.wx, m.wy, 500 - 2, m.wh - 2, False)
    assert resize.calls[1] == (b, m.wx + 500, m.wy, m.ww - 500 - 2, m.wh - 2, False)


def test_arrangements_by_name_monocle():
    m, clients = make_monitor(2)
    resize = Recorder()
    ARRANGEMENTS["monocle"](m, resize)
    assert m.lt_symbol == "[2]"
    assert [call[0] for call in resize.calls] == clients


def test_tile_single_client_fills_area():
    m, (c,) = make_monitor(1)
    resize = Recorder()
    tile(m, resize)
    assert resize.calls == [(c, m.wx, m.wy, m.ww - 2, m.wh - 2, False)]


def test_tile_master_and_stack_split_by_mfact():
    m, (a, b) = make_monitor(2)
    resize = Recorder()
    tile(m, resize)
    assert resize.calls[0] == (a, m.wx, m.wy, 500 - 2, m.wh - 2, False)
    assert resize.calls[1] == (b, m.wx + 500, m.wy, m.ww - 500 - 2, m.wh - 2, False)


def test_tile_stack_column_covers_height():
    m, clients = make_monitor(4)
    resize = Recorder()
    tile(m, resize)
    stack = clients[1:]
    assert sum(c.outer_height for c in stack) == m.wh
    for upper, lower in zip(stack, stack[1:]):
        assert lower.y == upper.y + upper.outer_height
        assert lower.x == upper.x


def test_tile_skips_floating_and_hidden():
    m, (a, b, c) = make_monitor(3)
    b.is_floating = True
    c.tags = 2
    resize = Recorder()
    tile(m, resize)
    assert [call[0] for call in resize.calls] == [a]


def test_tile_without_masters_puts_all_in_stack():
    m, clients = make_monitor(2, nmaster=0)
    resize = Recorder()
    tile(m, resize)
    assert all(call[1] == m.wx for call in resize.calls)
    assert all(call[3] == m.ww - 2 for call in resize.calls)


def test_tile_no_clients_does_nothing():
    m, _ = make_monitor(0)
    resize = Recorder()
    tile(m, resize)
    assert resize.calls == []


def test_monocle_fills_area_and_counts():
    m, clients = make_monitor(3)
    resize = Recorder()
    monocle(m, resize)
    assert m.lt_symbol == "[3]"
    assert [call[0] for call in resize.calls] == clients
    assert all(call[1:] == (m.wx, m.wy, m.ww - 2, m.wh - 2, False) for call in resize.calls)


def test_monocle_counts_floating_but_does_not_resize_it():
    m, (a, b) = make_monitor(2)
    b.is_floating = True
    resize = Recorder()
    monocle(m, resize)
    assert m.lt_symbol == "[2]"
    assert [call[0] for call in resize.calls] == [a]


def test_monocle_without_visible_keeps_symbol():
    m, (a,) = make_monitor(1)
    a.tags = 2
    resize = Recorder()
    monocle(m, resize)
    assert m.lt_symbol == "[]="
    assert resize.calls == []