# dynwm

`dynwm` holds the bookkeeping of a small dynamic tiling window manager and of
the dynamic menu that goes with it. It models monitors, clients, tags, layouts
and focus, and it models the menu's item filtering, input line and paging. None
of it needs a display connection. It also ships a command-line filter,
`dynwm-stest`, that tests files.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The file filter: `dynwm-stest`

`dynwm-stest` takes paths from its arguments. When there are none, it reads one
path per line from standard input. It prints each path that passes every test
its flags select:

```
dynwm-stest -f -x /usr/bin/env /etc
dynwm-stest -l -x /usr/bin
dynwm-stest -d -n /etc/passwd /tmp
```

| flag | passes when the path |
|------|----------------------|
| `-a` | may be hidden (names starting with `.` are skipped otherwise) |
| `-b` | is a block special file |
| `-c` | is a character special file |
| `-d` | is a directory |
| `-e` | exists |
| `-f` | is a regular file |
| `-g` | has the set-group-id bit |
| `-h` | is a symbolic link |
| `-l` | (modifier) tests the entries of each directory operand, `.` and `..` included |
| `-n FILE` | was modified after FILE |
| `-o FILE` | was modified before FILE |
| `-p` | is a named pipe |
| `-q` | (modifier) prints nothing and exits on the first match |
| `-r` | is readable |
| `-s` | is not empty |
| `-u` | has the set-user-id bit |
| `-v` | (modifier) inverts the whole test |
| `-w` | is writable |
| `-x` | is executable |

If the reference file of `-n` or `-o` cannot be read, the filter reports it on
standard error and leaves that test out. The exit status is 0 if any path
passed, 1 if none did, and 2 on a usage error.

From Python, the same steps are available as `dynwm.stest.parse_args(argv)`,
which returns a `TestFlags` and the operands, then `dynwm.stest.candidates`, and
then `dynwm.stest.passes(path, name, flags)`. The short-option parser behind
them is `dynwm.argparsing.parse_flags`. It raises
`dynwm.argparsing.UsageError`.

## The menu

- `dynwm.matching.match(items, text, case_insensitive=False)` keeps the `Item`s
  that contain every space-separated token of `text`. It returns exact matches
  first, then items that start with the first token, then the other matches.
  Each group keeps its input order. `tokenize` and `cistrstr` are the pieces it
  is built from. Case folding covers ASCII only.
- `dynwm.lineedit.LineBuffer` is the input line: UTF-8 bytes with a byte
  cursor and a capacity.
  - `insert` returns False if the text would not fit.
  - `backspace` and `delete_forward` delete one character.
  - `move_word_edge` moves the cursor by word.
  - `kill_line_start`, `kill_line_end` and `kill_word` delete to the line
    start, to the line end and back over a word.
  - `remove_before`, `next_rune` and `replace` are the lower-level edits.
- `dynwm.menu.Menu` joins the two.
  - `refresh` re-matches after the input changes.
  - `calc_offsets`, `visible`, `page_next` and `page_prior` handle paging.
  - `home`, `end`, `left`, `right`, `up` and `down` move the cursor and the
    selection.
  - `complete` copies the selection into the input, and `paste` inserts the
    first line of a text.
  - `accept(shift, control)` returns the text to print. With `control` it marks
    the selected item as printed.

  Widths come from a `text_width` callable, which counts characters by default.
- `dynwm.menu.parse_args` reads the menu options into a `MenuConfig`:
  `-b -f -i -v -l -m -p -fn -nb -nf -sb -sf -w`. With `-v` it stops and sets
  `show_version`. Bad options raise `UsageError`. `dynwm.menu.read_items`
  reads one item per line from a stream.

```python
from dynwm.matching import Item
from dynwm.menu import Menu, parse_args

menu = Menu([Item("firefox"), Item("foot"), Item("thunar")], parse_args(["-i"]))
menu.buffer.insert("f")
menu.refresh()
[item.text for item in menu.visible()]   # ['firefox', 'foot']
menu.down()
menu.accept()                            # 'foot'
```

## The window manager

- `dynwm.manager.WindowManager` owns the monitors and the managed clients.
  - Clients: `manage`, `unmanage`, `window_to_client`.
  - Focus: `focus`, `focus_stack`, `focus_monitor`.
  - Tags: `view`, `toggle_view`, `tag`, `toggle_tag`.
  - Monitors: `tag_monitor`, `send_to_monitor`, `update_geometry`,
    `rect_to_monitor`, `dir_to_monitor`.
  - Layout: `set_layout`, `set_mfact`, `inc_nmaster`, `toggle_bar`,
    `toggle_floating`, `zoom`, `set_fullscreen`, `arrange`.
  - Geometry and shutdown: `resize`, `resize_client`, `quit`.
- `dynwm.monitor.Monitor` keeps the client list in tiling order and the focus
  stack. `Monitor.attach` places a new client according to an
  `AttachDirection`: default, above, aside, below, bottom or top.
- `dynwm.layouts.tile` and `dynwm.layouts.monocle` place the tiled, visible
  clients of a monitor.
- `dynwm.client.apply_size_hints` keeps a geometry on screen and within a
  client's `SizeHints`: base size, minimum and maximum size, aspect ratio and
  resize increments. `dynwm.client.apply_rules` sets a new client's tags,
  floating state and monitor from a list of `Rule`s.
- `dynwm.geometry.Rect` measures overlaps. `unique_geometries` drops repeated
  screens.
- `dynwm.wmconfig.default_config()` returns a `WMConfig` with the default tags,
  rules, layouts, colours, `Key` bindings and `Button` bindings.

```python
from dynwm.manager import WindowManager

wm = WindowManager(screen_width=1920, screen_height=1080, bar_height=20)
first = wm.manage(1, 0, 0, 640, 480, title="editor")
second = wm.manage(2, 0, 0, 640, 480, title="terminal")
wm.selmon.sel is second    # True
wm.focus_stack(+1)
wm.selmon.sel is first     # True
wm.view(1 << 1)            # show tag 2: no client is visible there
wm.selmon.sel is None      # True
```

## What it does not do

- `dynwm` draws nothing and does not talk to a display server. It does not
  read key or mouse events, grab the keyboard, or move real windows. A backend
  would have to read the state it keeps and apply it.
- The menu has no program that can be run.
- The window manager has no program that can be run.
- Key and button bindings in `WMConfig` name their actions as strings.
  Nothing in the package dispatches them.
- Some bound actions have no counterpart in the package: starting programs
  (`spawn`), closing windows (`kill_client`), and moving or resizing with the
  mouse (`move_mouse`, `resize_mouse`).