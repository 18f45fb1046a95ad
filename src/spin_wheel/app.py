"""Qt application entry point for the spin_wheel name picker."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import argparse
import logging
import sys

from PySide6 import QtCore, QtGui, QtWidgets

from . import __version__ as APP_VERSION
from .engine import label_angle, segment_angle
from .errors import WheelError
from .logging_config import setup_logging
from .models import AnimationConfig, AppConfig, WheelStyle
from .store import OptionListStore
from .utils import clamp, polar_point, qt_arc_angle, segment_palette

logger = logging.getLogger(__name__)


# -------------------------------- Wheel Widget --------------------------------


class WheelWidget(QtWidgets.QWidget):
    """Paints the wheel at its current rotation and animates spins.

    Segment ``i`` covers wheel-local ``[i * seg, (i + 1) * seg)`` clockwise from
    12 o'clock; the widget rotates the whole wheel clockwise by ``rotation``
    degrees and draws the pointer at ``pointer_angle`` without rotating it.
    """

    spinSettled = QtCore.Signal()

    def __init__(
        self,
        style: WheelStyle,
        pointer_angle: float,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._style = style
        self._pointer_angle = float(pointer_angle)
        self._options: List[str] = []
        self._rotation: float = 0.0
        self._anim: Optional[QtCore.QPropertyAnimation] = None

        side = style.size + 2 * (style.border_width + 24)
        self.setMinimumSize(side, side)
        self.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding,
        )

    # ----------------------------- Properties ---------------------------------

    def _get_rotation(self) -> float:
        return self._rotation

    def _set_rotation(self, value: float) -> None:
        self._rotation = float(value)
        self.update()

    rotation = QtCore.Property(float, _get_rotation, _set_rotation)

    def set_options(self, options: Sequence[str]) -> None:
        self._options = list(options)
        self.update()

    def is_animating(self) -> bool:
        return (
            self._anim is not None
            and self._anim.state() == QtCore.QAbstractAnimation.State.Running
        )

    def animate_to(self, target: float, animation: AnimationConfig) -> None:
        """Ease from the current rotation to ``target``; emits ``spinSettled``."""
        easing = getattr(
            QtCore.QEasingCurve.Type, animation.easing, QtCore.QEasingCurve.Type.OutCubic
        )
        anim = QtCore.QPropertyAnimation(self, b"rotation", self)
        anim.setDuration(max(0, int(animation.duration_ms)))
        anim.setStartValue(self._rotation)
        anim.setEndValue(float(target))
        anim.setEasingCurve(easing)
        anim.finished.connect(self.spinSettled)
        self._anim = anim
        anim.start()

    # ------------------------------- Painting ---------------------------------

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)

        style = self._style
        cx = self.width() / 2.0
        cy = self.height() / 2.0
        avail = min(self.width(), self.height()) - 2 * (style.border_width + 24)
        radius = clamp(avail / 2.0, 20.0, style.size / 2.0)
        wheel_rect = QtCore.QRectF(cx - radius, cy - radius, 2 * radius, 2 * radius)

        n = len(self._options)
        if n == 0:
            painter.setPen(QtCore.Qt.PenStyle.NoPen)
            painter.setBrush(QtGui.QBrush(QtGui.QColor(224, 224, 224)))
            painter.drawEllipse(wheel_rect)
            painter.setPen(QtGui.QPen(QtGui.QColor(110, 110, 110)))
            painter.drawText(
                wheel_rect, QtCore.Qt.AlignmentFlag.AlignCenter, "Add options to spin"
            )
        else:
            seg = segment_angle(n)
            palette = segment_palette(n, style.saturation, style.lightness)
            painter.setPen(QtCore.Qt.PenStyle.NoPen)
            for i, (hue, sat, light) in enumerate(palette):
                color = QtGui.QColor.fromHslF(hue / 360.0, sat, light)
                painter.setBrush(QtGui.QBrush(color))
                if n == 1:
                    painter.drawEllipse(wheel_rect)
                    continue
                start = i * seg + self._rotation
                path = QtGui.QPainterPath(QtCore.QPointF(cx, cy))
                # Negative sweep runs clockwise on screen
                path.arcTo(wheel_rect, qt_arc_angle(start), -seg)
                path.closeSubpath()
                painter.drawPath(path)
            self._paint_labels(painter, cx, cy, radius)

        border = QtGui.QPen(QtGui.QColor(style.border_color))
        border.setWidth(style.border_width)
        painter.setPen(border)
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawEllipse(wheel_rect)

        hub = style.center_size / 2.0
        painter.setBrush(QtGui.QBrush(QtGui.QColor(255, 255, 255)))
        painter.drawEllipse(QtCore.QPointF(cx, cy), hub, hub)

        self._paint_pointer(painter, cx, cy, radius)

    def _paint_labels(
        self, painter: QtGui.QPainter, cx: float, cy: float, radius: float
    ) -> None:
        n = len(self._options)
        font = painter.font()
        font.setPointSize(10)
        font.setBold(True)
        painter.setFont(font)
        text_w = radius - 24.0
        limit = max(4, self._style.max_label_chars)
        for i, option in enumerate(self._options):
            text = option if len(option) <= limit else option[: limit - 1] + "…"
            painter.save()
            painter.translate(cx, cy)
            # Qt's x axis points to 3 o'clock; our angles start at 12 o'clock
            painter.rotate(label_angle(i, n) + self._rotation - 90.0)
            rect = QtCore.QRectF(20.0, -10.0, text_w, 20.0)
            align = QtCore.Qt.AlignmentFlag.AlignLeft | QtCore.Qt.AlignmentFlag.AlignVCenter
            painter.setPen(QtGui.QColor(0, 0, 0, 200))
            painter.drawText(rect.translated(1, 1), align, text)
            painter.setPen(QtGui.QColor(self._style.text_color))
            painter.drawText(rect, align, text)
            painter.restore()

    def _paint_pointer(
        self, painter: QtGui.QPainter, cx: float, cy: float, radius: float
    ) -> None:
        angle = self._pointer_angle
        tip = polar_point(cx, cy, radius - 10.0, angle)
        left = polar_point(cx, cy, radius + 16.0, angle - 5.0)
        right = polar_point(cx, cy, radius + 16.0, angle + 5.0)
        triangle = QtGui.QPolygonF(
            [QtCore.QPointF(*tip), QtCore.QPointF(*left), QtCore.QPointF(*right)]
        )
        painter.setPen(QtGui.QPen(QtGui.QColor(255, 255, 255), 2))
        painter.setBrush(QtGui.QBrush(QtGui.QColor(self._style.pointer_color)))
        painter.drawPolygon(triangle)


# -------------------------------- Control Panel -------------------------------


class ControlPanel(QtWidgets.QWidget):
    addRequested = QtCore.Signal(str)
    clearRequested = QtCore.Signal()
    spinRequested = QtCore.Signal()
    editRequested = QtCore.Signal(int)
    removeRequested = QtCore.Signal(int)

    def __init__(
        self, cfg: AppConfig, parent: Optional[QtWidgets.QWidget] = None
    ) -> None:
        super().__init__(parent)
        self._spin_cfg = cfg.spin
        self._option_count = 0

        self.spin_btn = QtWidgets.QPushButton("SPIN")
        self.spin_btn.setMinimumHeight(40)
        self.spin_btn.clicked.connect(self.spinRequested)

        self.winner_label = QtWidgets.QLabel("")
        self.winner_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)

        self.success_label = QtWidgets.QLabel("Option added successfully!")
        self.success_label.setStyleSheet("color: #198038; font-weight: 600;")
        self.success_label.setVisible(False)
        self._success_timer = QtCore.QTimer(self)
        self._success_timer.setSingleShot(True)
        self._success_timer.setInterval(max(0, cfg.animation.success_notice_ms))
        self._success_timer.timeout.connect(lambda: self.success_label.setVisible(False))

        self.input = QtWidgets.QLineEdit()
        self.input.setMaxLength(self._spin_cfg.max_option_length)
        self.input.setPlaceholderText(
            f"Enter option text (max {self._spin_cfg.max_option_length} characters)"
        )
        self.input.textChanged.connect(self._on_text_changed)
        self.input.returnPressed.connect(self._on_submit)

        self.helper_label = QtWidgets.QLabel("")
        self.helper_label.setStyleSheet("color: #6f6f6f;")

        self.error_label = QtWidgets.QLabel("")
        self.error_label.setStyleSheet("color: #da1e28;")
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)

        self.add_btn = QtWidgets.QPushButton("Add Option")
        self.add_btn.clicked.connect(self._on_submit)
        self.clear_btn = QtWidgets.QPushButton("Clear All")
        self.clear_btn.clicked.connect(self.clearRequested)

        self.options_header = QtWidgets.QLabel("")
        self.options_list = QtWidgets.QListWidget()

        self.requirements_label = QtWidgets.QLabel(
            f"<b>Requirements:</b> Minimum {self._spin_cfg.min_options} options "
            f"required to spin • Maximum {self._spin_cfg.max_options} allowed"
        )
        self.requirements_label.setWordWrap(True)
        self.warning_label = QtWidgets.QLabel(
            f"Add at least {self._spin_cfg.min_options} options to enable spinning"
        )
        self.warning_label.setStyleSheet("color: #8e6a00;")
        self.warning_label.setVisible(False)

        # Layout
        buttons = QtWidgets.QHBoxLayout()
        buttons.addWidget(self.add_btn)
        buttons.addWidget(self.clear_btn)

        form = QtWidgets.QGroupBox("Add New Option", self)
        form_v = QtWidgets.QVBoxLayout(form)
        form_v.addWidget(self.input)
        form_v.addWidget(self.helper_label)
        form_v.addWidget(self.error_label)
        form_v.addLayout(buttons)

        v = QtWidgets.QVBoxLayout(self)
        v.addWidget(self.success_label)
        v.addWidget(self.spin_btn)
        v.addWidget(self.winner_label)
        v.addWidget(form)
        v.addWidget(self.options_header)
        v.addWidget(self.options_list, stretch=1)
        v.addWidget(self.requirements_label)
        v.addWidget(self.warning_label)

    # --- helpers ---
    def _on_text_changed(self, _text: str) -> None:
        self.set_error("")
        self._refresh_form()

    def _on_submit(self) -> None:
        self.addRequested.emit(self.input.text())

    def _refresh_form(self) -> None:
        cfg = self._spin_cfg
        slots = max(0, cfg.max_options - self._option_count)
        self.helper_label.setText(
            f"{len(self.input.text())}/{cfg.max_option_length} chars • {slots} slots left"
        )
        self.add_btn.setEnabled(bool(self.input.text().strip()) and slots > 0)

    def _option_row(self, index: int, option: str) -> QtWidgets.QWidget:
        row = QtWidgets.QWidget()
        h = QtWidgets.QHBoxLayout(row)
        h.setContentsMargins(4, 2, 4, 2)
        number = QtWidgets.QLabel(f"#{index + 1}")
        number.setStyleSheet("color: #6f6f6f;")
        text = QtWidgets.QLabel(option)
        edit_btn = QtWidgets.QToolButton()
        edit_btn.setText("Edit")
        edit_btn.setToolTip("Edit option")
        edit_btn.clicked.connect(lambda: self.editRequested.emit(index))
        remove_btn = QtWidgets.QToolButton()
        remove_btn.setText("Remove")
        remove_btn.setToolTip("Remove option")
        remove_btn.clicked.connect(lambda: self.removeRequested.emit(index))
        h.addWidget(number)
        h.addWidget(text, stretch=1)
        h.addWidget(edit_btn)
        h.addWidget(remove_btn)
        return row

    # --- public API ---
    def set_options(self, options: Sequence[str]) -> None:
        self._option_count = len(options)
        self.options_header.setText(f"Current Options ({len(options)})")
        self.options_list.clear()
        for i, option in enumerate(options):
            item = QtWidgets.QListWidgetItem(self.options_list)
            row = self._option_row(i, option)
            item.setSizeHint(row.sizeHint())
            self.options_list.setItemWidget(item, row)
        self.warning_label.setVisible(len(options) < self._spin_cfg.min_options)
        self._refresh_form()

    def set_spinning(self, spinning: bool, can_spin: bool) -> None:
        self.spin_btn.setText("Spinning..." if spinning else "SPIN")
        self.spin_btn.setEnabled(can_spin and not spinning)
        for w in (self.add_btn, self.clear_btn, self.options_list):
            w.setEnabled(not spinning)
        if not spinning:
            self._refresh_form()

    def set_error(self, text: str) -> None:
        self.error_label.setText(text)
        self.error_label.setVisible(bool(text))

    def set_winner(self, text: str) -> None:
        self.winner_label.setText(f"Winner: <b>{text}</b>" if text else "")

    def reset_input(self) -> None:
        self.input.blockSignals(True)
        self.input.clear()
        self.input.blockSignals(False)
        self._refresh_form()

    def show_success(self) -> None:
        self.success_label.setVisible(True)
        self._success_timer.start()


# ---------------------------- Main Controller ---------------------------------


class MainController(QtCore.QObject):
    def __init__(
        self, app: QtWidgets.QApplication, cfg: Optional[AppConfig] = None
    ) -> None:
        super().__init__(None)
        self.app = app
        self.cfg = cfg if cfg is not None else self._load_config()
        self.store = OptionListStore(self.cfg.spin)

        self.window = QtWidgets.QWidget()
        self._app_version = app.applicationVersion() or APP_VERSION
        self.window.setWindowTitle(f"spin_wheel {self._app_version} — Spinner Wheel")
        self.wheel = WheelWidget(self.cfg.style, self.cfg.spin.pointer_angle)
        self.panel = ControlPanel(self.cfg)
        layout = QtWidgets.QHBoxLayout(self.window)
        layout.addWidget(self.wheel, stretch=3)
        layout.addWidget(self.panel, stretch=2)

        # Wire signals
        self.panel.addRequested.connect(self.add_option)
        self.panel.clearRequested.connect(self.clear_options)
        self.panel.spinRequested.connect(self.spin)
        self.panel.editRequested.connect(self.edit_option)
        self.panel.removeRequested.connect(self.remove_option)
        self.wheel.spinSettled.connect(self._on_spin_settled)

        self._sync()
        self.window.show()

    # ---------------------------- Config I/O ----------------------------------

    def _config_path(self) -> Path:
        home = Path.home()
        return home / ".spin_wheel_config.json"

    def _load_config(self) -> AppConfig:
        p = self._config_path()
        if p.exists():
            try:
                return AppConfig.from_json(p.read_text(encoding="utf-8"))
            except (OSError, ValueError, TypeError) as e:
                logger.warning("Ignoring unreadable config %s: %s", p, e)
        return AppConfig()

    def _save_config(self) -> None:
        p = self._config_path()
        try:
            p.write_text(self.cfg.to_json(), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save config to %s: %s", p, e)

    # ----------------------------- Core Actions --------------------------------

    def _sync(self) -> None:
        """Push store state into the widgets (rotation jumps, no animation)."""
        self.wheel.set_options(self.store.options)
        if not self.wheel.is_animating():
            self.wheel.rotation = self.store.rotation
        self.panel.set_options(self.store.options)
        self.panel.set_spinning(self.store.is_spinning, self.store.can_spin)

    def add_option(self, text: str) -> None:
        try:
            self.store.add_option(text)
        except WheelError as err:
            self.panel.set_error(str(err))
            return
        self.panel.reset_input()
        self.panel.set_error("")
        self.panel.show_success()
        self._sync()

    def edit_option(self, index: int) -> None:
        if not 0 <= index < len(self.store.options):
            return
        current = self.store.options[index]
        text, ok = QtWidgets.QInputDialog.getText(
            self.window, "Edit option", "Edit option:", text=current
        )
        if not ok or not text.strip():
            return
        try:
            self.store.edit_option(index, text)
        except WheelError as err:
            QtWidgets.QMessageBox.warning(self.window, "Edit option", str(err))
            return
        self._sync()

    def remove_option(self, index: int) -> None:
        try:
            self.store.remove_option(index)
        except WheelError as err:
            self.panel.set_error(str(err))
            return
        self._sync()

    def clear_options(self) -> None:
        try:
            self.store.clear()
        except WheelError as err:
            self.panel.set_error(str(err))
            return
        self.panel.reset_input()
        self.panel.set_error("")
        self.panel.set_winner("")
        self._sync()

    def spin(self) -> None:
        try:
            plan = self.store.start_spin()
        except WheelError as err:
            self.panel.set_error(str(err))
            return
        if plan is None:
            return
        self.panel.set_winner("")
        self.panel.set_spinning(True, self.store.can_spin)
        self.wheel.animate_to(plan.rotation, self.cfg.animation)

    def _on_spin_settled(self) -> None:
        result = self.store.finish_spin()
        self.panel.set_winner(result.winner)
        self._sync()


# ---------------------------------- Main --------------------------------------


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="spin-wheel", description="Spinner wheel")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None, help="also write logs here")
    args, _unknown = parser.parse_known_args(list(argv))
    return args


def main() -> None:
    args = _parse_args(sys.argv[1:])
    setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file
    )

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("spin_wheel")
    app.setApplicationVersion(APP_VERSION)

    ctrl = MainController(app)
    ret = app.exec()
    ctrl._save_config()

    sys.exit(ret)


if __name__ == "__main__":
    main()
