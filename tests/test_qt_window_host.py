"""Tests for the Qt window host."""

import pytest
from PyQt6 import sip
from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QDialog, QPlainTextEdit, QVBoxLayout, QWidget

from pyqt_focusflash import FocusFlashError
from pyqt_focusflash.services import QtWindowHost


@pytest.fixture
def panes(qapp):
    container = QWidget()
    layout = QVBoxLayout(container)
    left = QPlainTextEdit()
    right = QPlainTextEdit()
    left.setObjectName("left.py")
    right.setObjectName("right.py")
    layout.addWidget(left)
    layout.addWidget(right)
    yield left, right
    container.deleteLater()


@pytest.fixture
def qt_host(qapp, panes):
    host = QtWindowHost(qapp)
    for pane in panes:
        host.register_window(pane)
    yield host
    host.remove_focus_listener()


def _set_background(widget, rgb):
    palette = widget.palette()
    palette.setColor(widget.backgroundRole(), QColor(*rgb))
    widget.setPalette(palette)


def test_register_rejects_non_widgets(qt_host):
    with pytest.raises(FocusFlashError):
        qt_host.register_window("not a widget")


def test_register_twice_is_noop(qt_host, panes):
    qt_host.register_window(panes[0])
    assert qt_host.window_count() == 2


def test_background_color_is_widened(qt_host, panes):
    """8-bit palette channels are reported on the 16-bit scale."""
    _set_background(panes[0], (40, 42, 54))
    assert qt_host.get_background_color(panes[0]) == (10280, 10794, 13878)


def test_override_applies_and_restores(qt_host, panes):
    pane = panes[0]
    _set_background(pane, (40, 42, 54))

    handle = qt_host.apply_color_override(pane, "#3c3e4a")
    assert pane.palette().color(pane.backgroundRole()) == QColor("#3c3e4a")
    assert pane.autoFillBackground()

    qt_host.remove_color_override(handle)
    assert pane.palette().color(pane.backgroundRole()) == QColor(40, 42, 54)


def test_remove_override_on_deleted_widget(qt_host, qapp):
    widget = QWidget()
    handle = qt_host.apply_color_override(widget, "#ffffff")
    sip.delete(widget)

    # Must not raise
    qt_host.remove_color_override(handle)


def test_liveness_and_pruning(qt_host, panes, qapp):
    doomed = QWidget()
    qt_host.register_window(doomed)
    assert qt_host.is_window_live(doomed)
    assert qt_host.window_count() == 3

    sip.delete(doomed)

    assert not qt_host.is_window_live(doomed)
    assert qt_host.window_count() == 2


def test_content_identity(qt_host, panes):
    left, right = panes
    assert qt_host.get_content_identity(left) == "left.py"

    right.setProperty("contentIdentity", "*scratch*")
    assert qt_host.get_content_identity(right) == "*scratch*"


def test_secondary_windows(qt_host, panes, qapp):
    assert not qt_host.is_secondary_window(panes[0])

    dialog = QDialog()
    field = QPlainTextEdit(dialog)
    assert qt_host.is_secondary_window(field)

    panes[1].setProperty("secondaryWindow", True)
    assert qt_host.is_secondary_window(panes[1])
    dialog.deleteLater()


def test_window_for_widget_walks_parents(qt_host, panes):
    left, _ = panes
    assert qt_host.window_for_widget(left.viewport()) is left
    assert qt_host.window_for_widget(left.parentWidget()) is None
    assert qt_host.window_for_widget(None) is None


def test_focus_slot_reports_registered_pane(qt_host, panes):
    reported = []
    qt_host.install_focus_listener(reported.append)

    qt_host._on_focus_changed(None, panes[1].viewport())
    qt_host._on_focus_changed(panes[1], panes[0].parentWidget())

    assert reported == [panes[1]]

    qt_host.remove_focus_listener()
    qt_host._on_focus_changed(None, panes[0])
    assert reported == [panes[1]]


@pytest.fixture
def qt_service(qt_host, panes, scheduler):
    from pyqt_focusflash.animation import FlashController, FocusFlashConfig
    from pyqt_focusflash.services import FocusFlashService

    controller = FlashController(qt_host, scheduler=scheduler, theme_direction=lambda: 1)
    service = FocusFlashService(qt_host, controller=controller, config=FocusFlashConfig(brightness=20))
    service.enable()
    yield service, controller, scheduler
    service.disable()


def test_refocus_mid_flash_keeps_resting_baseline(qt_service, panes):
    """Returning to a window that is still flashing restarts from its real background."""
    service, controller, scheduler = qt_service
    left, right = panes
    for pane in panes:
        _set_background(pane, (40, 42, 54))

    service.on_window_focus_changed(left)
    scheduler.tick()
    service.on_window_focus_changed(right)
    service.on_window_focus_changed(left)

    assert controller.get_state(left).baseline_color == (10280, 10794, 13878)
    assert left.palette().color(left.backgroundRole()) == QColor("#3c3e4a")

    scheduler.run_until_idle()
    assert left.palette().color(left.backgroundRole()) == QColor(40, 42, 54)


def test_flash_window_mid_flash_keeps_resting_baseline(qt_service, panes):
    service, controller, scheduler = qt_service
    left, _ = panes
    _set_background(left, (40, 42, 54))

    service.flash_window(left)
    service.flash_window(left)

    assert controller.get_state(left).baseline_color == (10280, 10794, 13878)


def test_focus_on_deleted_pane_is_skipped(qt_service, qt_host, qapp):
    """A deleted pane reported as focused is ignored without error."""
    service, controller, _ = qt_service
    doomed = QWidget()
    qt_host.register_window(doomed)
    sip.delete(doomed)

    service.on_window_focus_changed(doomed)

    assert controller.active_count == 0
