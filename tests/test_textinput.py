from simpsons.components.textinput import TextInput
from simpsons.keys import KeyMsg, KeyType


def test_typing():
    ti = TextInput("> ", active=True)
    assert ti.update(KeyMsg.runes_key("h")) is True
    assert ti.update(KeyMsg.runes_key("i")) is True
    assert ti.value == "hi"


def test_backspace():
    ti = TextInput("> ", active=True, value="abc")
    assert ti.update(KeyMsg(KeyType.BACKSPACE)) is True
    assert ti.value == "ab"


def test_esc_deactivates_and_clears():
    ti = TextInput("> ", active=True, value="some text")
    assert ti.update(KeyMsg(KeyType.ESC)) is True
    assert ti.active is False
    assert ti.value == ""


def test_enter_keeps_value():
    ti = TextInput("> ", active=True, value="hello")
    assert ti.update(KeyMsg(KeyType.ENTER)) is True
    assert ti.active is False
    assert ti.value == "hello"


def test_view():
    ti = TextInput("search: ", active=True, value="foo")
    assert ti.view() == "search: foo"


def test_view_inactive_is_empty():
    ti = TextInput("search: ", value="foo")
    assert ti.view() == ""


def test_inactive_ignores_keys():
    ti = TextInput("> ")
    assert ti.update(KeyMsg.runes_key("x")) is False
    assert ti.value == ""