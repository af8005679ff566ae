"""pytest configuration and fixtures for pyqt-focusflash tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pyqt_focusflash.protocols import FrameSchedulerABC, WindowHostABC


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


class FakeWindow:
    """Window handle for host-free tests."""

    def __init__(self, name, background=(10280, 10794, 13878), secondary=False):
        self.name = name
        self.background = background
        self.secondary = secondary
        self.live = True

    def __repr__(self):
        return f"FakeWindow({self.name!r})"


class FakeHost(WindowHostABC):
    """In-memory window host that records every override."""

    def __init__(self, windows=()):
        self.windows = list(windows)
        self.focused = None
        self.active_overrides = {}  # handle -> (window, color)
        self.applied = []  # (window, color) in order
        self.listener = None
        self._next_handle = 0

    def get_background_color(self, window):
        return window.background

    def apply_color_override(self, window, color):
        self._next_handle += 1
        handle = self._next_handle
        self.active_overrides[handle] = (window, color)
        self.applied.append((window, color))
        return handle

    def remove_color_override(self, handle):
        self.active_overrides.pop(handle, None)

    def is_window_live(self, window):
        return window.live

    def get_content_identity(self, window):
        return window.name

    def window_count(self):
        return sum(1 for w in self.windows if w.live)

    def is_secondary_window(self, window):
        return window.secondary

    def focused_window(self):
        return self.focused

    def install_focus_listener(self, callback):
        self.listener = callback

    def remove_focus_listener(self):
        self.listener = None

    def overrides_for(self, window):
        return [color for w, color in self.active_overrides.values() if w is window]


class ManualScheduler(FrameSchedulerABC):
    """Scheduler whose timers only fire when a test calls tick()."""

    def __init__(self):
        self.timers = {}  # handle -> (interval_s, callback)
        self.cancelled = []
        self._next_handle = 0

    def schedule_repeating(self, interval_s, callback):
        self._next_handle += 1
        self.timers[self._next_handle] = (interval_s, callback)
        return self._next_handle

    def cancel(self, handle):
        if self.timers.pop(handle, None) is not None:
            self.cancelled.append(handle)

    def tick(self):
        """Fire every active timer once."""
        for handle, (_, callback) in list(self.timers.items()):
            if handle in self.timers:
                callback()

    def run_until_idle(self, limit=1000):
        ticks = 0
        while self.timers and ticks < limit:
            self.tick()
            ticks += 1
        return ticks


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def windows():
    return [FakeWindow("main.py"), FakeWindow("notes.md")]


@pytest.fixture
def host(windows):
    return FakeHost(windows)


@pytest.fixture
def make_window():
    return FakeWindow
