from dynwm.matching import Item, cistrstr, match, tokenize


def texts(items):
    return [item.text for item in items]


def test_cistrstr_finds_case_insensitively():
    assert cistrstr("Hello World", "world") == 6
    assert cistrstr("Hello World", "HELLO") == 0


def test_cistrstr_empty_needle_matches_at_start():
    assert cistrstr("anything", "") == 0


def test_cistrstr_missing():
    assert cistrstr("abc", "d") is None


def test_tokenize_skips_empty_tokens():
    assert tokenize("  foo   bar ") == ["foo", "bar"]
    assert tokenize("   ") == []


def test_empty_input_matches_everything_in_order():
    items = [Item("b"), Item("a"), Item("c")]
    assert match(items, "") == items


def test_exact_then_prefix_then_substring():
    items = [Item("foobar"), Item("bar"), Item("barfoo"), Item("xbar"), Item("baz")]
    assert texts(match(items, "bar")) == ["bar", "barfoo", "foobar", "xbar"]


def test_all_tokens_must_match():
    items = [Item("alpha beta"), Item("alpha"), Item("beta gamma alpha")]
    assert texts(match(items, "alpha beta")) == ["alpha beta", "beta gamma alpha"]


def test_case_sensitive_by_default():
    items = [Item("Firefox"), Item("firefox")]
    assert texts(match(items, "fire")) == ["firefox"]


def test_case_insensitive_matching():
    items = [Item("Firefox"), Item("firefox"), Item("xFIRE")]
    result = match(items, "FIREFOX", case_insensitive=True)
    assert texts(result) == ["Firefox", "firefox"]
    assert texts(match(items, "fire", case_insensitive=True)) == ["Firefox", "firefox", "xFIRE"]


def test_duplicate_texts_are_distinct_items():
    first, second = Item("same"), Item("same")
    result = match([first, second], "same")
    assert result[0] is first and result[1] is second