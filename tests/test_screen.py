import pytest

from blockworld.screen import Screen, ScreenManager


class RecordingScreen(Screen):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def on_enter(self):
        self.log.append(("enter", self.name))

    def on_exit(self):
        self.log.append(("exit", self.name))


def test_empty_manager():
    manager = ScreenManager()
    assert len(manager) == 0
    assert not manager
    assert manager.top() is None


def test_push_calls_on_enter_and_sets_top():
    log = []
    manager = ScreenManager()
    first = RecordingScreen("menu", log)
    manager.push(first)
    assert manager.top() is first
    assert len(manager) == 1
    assert manager
    assert log == [("enter", "menu")]


def test_pop_order_and_on_exit():
    log = []
    manager = ScreenManager()
    a = RecordingScreen("a", log)
    b = RecordingScreen("b", log)
    manager.push(a)
    manager.push(b)
    assert manager.pop() is b
    assert manager.top() is a
    assert manager.pop() is a
    assert log == [("enter", "a"), ("enter", "b"), ("exit", "b"), ("exit", "a")]
    assert len(manager) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        ScreenManager().pop()


def test_push_none_is_ignored():
    manager = ScreenManager()
    manager.push(None)
    assert len(manager) == 0


def test_base_screen_hooks_are_harmless():
    manager = ScreenManager()
    screen = Screen()
    manager.push(screen)
    assert manager.pop() is screen