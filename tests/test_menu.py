import pytest

from blockcaster.menu import (
    Button,
    ButtonEvent,
    RadioButton,
    layout_main_buttons,
    load_radio_buttons,
    select_radio,
)


@pytest.fixture
def button():
    return Button(x=100, y=50, width=40, height=20)


def test_press_inside_reports_pressed(button):
    assert button.update(110, 60, True, True) is ButtonEvent.PRESSED
    assert button.pressed is True


def test_release_inside_after_press_reports_released(button):
    button.update(110, 60, True, True)
    assert button.update(110, 60, False, True) is ButtonEvent.RELEASED


def test_release_without_press_reports_nothing(button):
    assert button.update(110, 60, False, True) is ButtonEvent.NONE
    assert button.pressed is False


def test_moving_out_clears_press(button):
    button.update(110, 60, True, True)
    assert button.update(500, 500, True, True) is ButtonEvent.NONE
    assert button.pressed is False


def test_edges_are_inclusive(button):
    assert button.update(140, 70, True, True) is ButtonEvent.PRESSED
    assert button.update(141, 70, True, True) is ButtonEvent.NONE


def test_inactive_button_ignores_input(button):
    assert button.update(110, 60, True, False) is ButtonEvent.NONE
    assert button.pressed is False


def test_select_radio_checks_hit_and_unchecks_others():
    buttons = [
        RadioButton(20, 20, "a.map", checked=True),
        RadioButton(20, 50, "b.map"),
    ]
    assert select_radio(buttons, 22, 52, True) == 1
    assert [b.checked for b in buttons] == [False, True]


def test_select_radio_miss_keeps_selection():
    buttons = [RadioButton(20, 20, "a.map", checked=True), RadioButton(20, 50, "b.map")]
    assert select_radio(buttons, 300, 300, True) is None
    assert [b.checked for b in buttons] == [True, False]


def test_select_radio_needs_click():
    buttons = [RadioButton(20, 20, "a.map")]
    assert select_radio(buttons, 20, 20, False) is None
    assert buttons[0].checked is False


def test_load_radio_buttons(tmp_path):
    listing = tmp_path / "maps.txt"
    listing.write_text("2\nfirst.map\nsecond.map\n")
    buttons = load_radio_buttons(listing, "maps/second.map")
    assert [b.name for b in buttons] == ["first.map", "second.map"]
    assert [b.checked for b in buttons] == [False, True]
    assert buttons[0].x == buttons[1].x == 20
    assert buttons[0].y == 20
    assert buttons[1].y - buttons[0].y == 30
    assert buttons[1].map_path == "maps/second.map"


def test_load_radio_buttons_respects_count(tmp_path):
    listing = tmp_path / "maps.txt"
    listing.write_text("1\nfirst.map\nsecond.map\n")
    buttons = load_radio_buttons(listing, "maps/other.map")
    assert [b.name for b in buttons] == ["first.map"]
    assert buttons[0].checked is False


def test_load_radio_buttons_missing_or_empty(tmp_path):
    assert load_radio_buttons(tmp_path / "absent.txt", "maps/x") == []
    empty = tmp_path / "empty.txt"
    empty.write_text("")
    assert load_radio_buttons(empty, "maps/x") == []


def test_layout_main_buttons():
    buttons = layout_main_buttons(800, 600, 200, 60)
    assert len(buttons) == 4
    assert all(b.x * 2 + b.width == 800 for b in buttons)
    assert all(b.height == 60 for b in buttons)
    ys = [b.y for b in buttons]
    assert ys == sorted(ys)
    assert buttons[0].y == 210