import pytest

from dynwm.client import Client
from dynwm.monitor import AttachDirection, Layout, Monitor


def make_monitor(**kwargs):
    return Monitor([Layout("[]="), Layout("><>")], **kwargs)


def make_clients(monitor, count, tags=1):
    clients = [Client(window=i + 1, tags=tags) for i in range(count)]
    for c in clients:
        monitor.attach(c, AttachDirection.BOTTOM)
    return clients


def test_new_monitor_uses_first_layouts():
    m = make_monitor()
    assert m.lt_symbol == "[]="
    assert m.lt[1].symbol == "><>"
    assert m.tagset == [1, 1]


def test_single_layout_is_used_twice():
    layout = Layout("[M]")
    m = Monitor([layout])
    assert m.lt == [layout, layout]


def test_no_layouts_is_an_error():
    with pytest.raises(ValueError):
        Monitor([])


def test_is_visible_follows_selected_tagset():
    m = make_monitor()
    c = Client(tags=2)
    assert not m.is_visible(c)
    m.selected_tags = 3
    assert m.is_visible(c)


def test_default_attach_goes_to_front():
    m = make_monitor()
    a, b = Client(window=1), Client(window=2)
    m.attach(a)
    m.attach(b)
    assert m.clients == [b, a]
    assert b.monitor is m


def test_attach_bottom_appends():
    m = make_monitor()
    a, b, c = make_clients(m, 3)
    assert m.clients == [a, b, c]


def test_attach_above_inserts_before_selection():
    m = make_monitor()
    a, b, c = make_clients(m, 3)
    m.sel = b
    new = Client(window=9)
    m.attach(new, AttachDirection.ABOVE)
    assert m.clients == [a, new, b, c]


def test_attach_above_first_selection_goes_to_front():
    m = make_monitor()
    a, b = make_clients(m, 2)
    m.sel = a
    new = Client(window=9)
    m.attach(new, AttachDirection.ABOVE)
    assert m.clients[0] is new


def test_attach_below_inserts_after_selection():
    m = make_monitor()
    a, b, c = make_clients(m, 3)
    m.sel = a
    new = Client(window=9)
    m.attach(new, AttachDirection.BELOW)
    assert m.clients == [a, new, b, c]


def test_attach_below_floating_selection_goes_to_front():
    m = make_monitor()
    a, b = make_clients(m, 2)
    b.is_floating = True
    m.sel = b
    new = Client(window=9)
    m.attach(new, AttachDirection.BELOW)
    assert m.clients == [new, a, b]


def test_attach_aside_goes_after_first_tiled_on_same_tags():
    m = make_monitor()
    a, b, c = make_clients(m, 3)
    a.is_floating = True
    new = Client(window=9, tags=1)
    m.attach(new, AttachDirection.ASIDE)
    assert m.clients == [a, b, new, c]


def test_attach_aside_without_tiled_goes_to_front():
    m = make_monitor()
    a, = make_clients(m, 1, tags=2)
    new = Client(window=9, tags=1)
    m.attach(new, AttachDirection.ASIDE)
    assert m.clients == [new, a]


def test_attach_top_goes_after_masters():
    m = make_monitor(nmaster=2)
    a, b, c = make_clients(m, 3)
    new = Client(window=9, tags=1)
    m.attach(new, AttachDirection.TOP)
    assert m.clients == [a, b, new, c]


def test_attach_top_on_empty_monitor():
    m = make_monitor()
    new = Client(window=9)
    m.attach(new, AttachDirection.TOP)
    assert m.clients == [new]


def test_detach_removes_client():
    m = make_monitor()
    a, b = make_clients(m, 2)
    m.detach(a)
    assert m.clients == [b]


def test_stack_order_and_reselection():
    m = make_monitor()
    a, b, c = make_clients(m, 3)
    c.tags = 2
    for client in (a, c, b):
        m.attach_stack(client)
    assert m.stack == [b, c, a]
    m.sel = b
    m.detach_stack(b)
    assert m.stack == [c, a]
    assert m.sel is a


def test_detach_stack_of_unselected_keeps_selection():
    m = make_monitor()
    a, b = make_clients(m, 2)
    m.attach_stack(a)
    m.attach_stack(b)
    m.sel = b
    m.detach_stack(a)
    assert m.sel is b


def test_next_tiled_skips_floating_and_hidden():
    m = make_monitor()
    a, b, c = make_clients(m, 3)
    a.is_floating = True
    b.tags = 4
    assert m.next_tiled(a) is c
    assert m.next_tiled(0) is c
    assert m.next_tiled(3) is None
    assert m.next_tiled(None) is None


def test_next_tiled_foreign_client_is_an_error():
    m = make_monitor()
    make_clients(m, 1)
    with pytest.raises(ValueError):
        m.next_tiled(Client(window=99))


@pytest.mark.parametrize("top", [True, False])
def test_bar_position_shown(top):
    m = make_monitor(top_bar=top)
    m.mx, m.my, m.mw, m.mh = 0, 10, 800, 600
    m.update_bar_position(20)
    assert m.wh == m.mh - 20
    if top:
        assert m.by == m.my
        assert m.wy == m.my + 20
    else:
        assert m.by == m.my + m.wh
        assert m.wy == m.my


def test_bar_position_hidden():
    m = make_monitor(show_bar=False)
    m.mx, m.my, m.mw, m.mh = 0, 0, 800, 600
    m.update_bar_position(20)
    assert m.by == -20
    assert (m.wy, m.wh) == (m.my, m.mh)