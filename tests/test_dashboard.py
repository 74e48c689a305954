from unittest import mock

import pytest

from todolists import dashboard


class FakeScreen:
    def __init__(self, keys, size=(24, 80)):
        self._keys = list(keys)
        self._size = size
        self.drawn = []
        self.refreshes = 0
        self.erases = 0

    def getmaxyx(self):
        return self._size

    def bkgd(self, char, attribute):
        self.background = (char, attribute)

    def erase(self):
        self.erases += 1

    def addstr(self, y, x, text, attribute):
        self.drawn.append((y, x, text))

    def refresh(self):
        self.refreshes += 1

    def getch(self):
        return self._keys.pop(0)


def test_greeting_text():
    assert dashboard.greeting() == "Hello Ratatui! (press 'q' to quit)"


def test_run_stops_on_q():
    screen = FakeScreen([ord("q")])
    dashboard.run(screen)
    assert screen.drawn == [(0, 0, dashboard.greeting())]


@pytest.mark.parametrize("keys", [[ord("x"), ord("q")], [ord("Q"), ord("a"), ord("q")]])
def test_run_redraws_until_q(keys):
    screen = FakeScreen(keys)
    dashboard.run(screen)
    assert screen.refreshes == len(keys)
    assert screen.erases == len(keys)
    assert all(entry[2] == dashboard.greeting() for entry in screen.drawn)


def test_run_leaves_keys_after_q_unread():
    screen = FakeScreen([ord("q"), ord("z")])
    dashboard.run(screen)
    assert screen._keys == [ord("z")]


def test_run_truncates_to_screen_width():
    screen = FakeScreen([ord("q")], size=(5, 10))
    dashboard.run(screen)
    assert screen.drawn == [(0, 0, dashboard.greeting()[:9])]


def test_run_draws_nothing_on_zero_width():
    screen = FakeScreen([ord("q")], size=(5, 0))
    dashboard.run(screen)
    assert screen.drawn == []
    assert screen.refreshes == 1


def test_main_hands_run_to_curses_wrapper():
    with mock.patch("curses.wrapper") as wrapper:
        assert dashboard.main([]) == 0
    wrapper.assert_called_once_with(dashboard.run)


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        dashboard.main(["--bogus"])