# UI.py
"""""PySide6 user interface for the Scientific Calculator.

Structure
---------
- Calculator UI: main window with expression trail, display and button grid
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, trail, display, layout and buttons
- Forward every button press to CalculatorEngine.Calculator
- Re-render the display and the trail after every command
- Clipboard integration (copy result, paste text as direct entry)
- Keep the display readable (auto-resizing font, dark/light mode)

Responsibilities (Settings)
---------------------------
- Load Current Settings and Settings Descriptions via Config_Manager
- Save and apply theme changes immediately

All calculation logic lives in CalculatorEngine. Commands run synchronously
on the UI thread, so the Qt event loop serializes them.
"""""

import sys
from PySide6 import QtWidgets, QtGui
from PySide6.QtCore import Qt, QTimer
from pynput.keyboard import Controller
import pyperclip
from . import config_manager as config_manager  # Imports config_manager.py as a module
from . import CalculatorEngine as CalculatorEngine  # Imports CalculatorEngine.py as a module


SETTINGS_LABEL = '⚙'
CLIPBOARD_LABEL = '📋'


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used for the "shift to copy" setting.

    """""

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Every setting is a boolean and is shown as a checkbox
    labelled with its description from ui_strings.json.

    """""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # Setting key -> checkbox

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(300, 180)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_settings_with_defaults()
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)
            checkbox = QtWidgets.QCheckBox(description)
            checkbox.setChecked(value == True)
            main_layout.addWidget(checkbox)
            self.widgets[key_value] = checkbox

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        for key_value, checkbox in self.widgets.items():
            self.setting_value_list[key_value] = checkbox.isChecked()

        saved_settings = config_manager.save_setting(self.setting_value_list)

        if saved_settings != {}:
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           "Settings could not be saved (error in config_manager).")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QCheckBox {color: white;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):
    # --- Class-level attributes for button hold logic ---
    initial_delay = 500
    repeat_interval = 100

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_settings_with_defaults()

        # --- 2. Instance State ---
        self.engine = CalculatorEngine.Calculator(on_change=self.render)
        self.shift_is_held = False
        self.was_held = False
        self.held_button_value = None
        self.hold_timer = QTimer(self)
        self.hold_timer.timeout.connect(self.handle_hold_tick)
        self.button_objects = {}

        # --- 3. Window Setup ---
        self.setWindowTitle("Scientific Calculator")
        self.resize(420, 560)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Trail + Display ---
        self.trail = QtWidgets.QLabel("")
        self.trail.setAlignment(Qt.AlignmentFlag.AlignRight)
        main_v_layout.addWidget(self.trail)

        self.display = QtWidgets.QLineEdit(CalculatorEngine.INITIAL_DISPLAY)
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(36)
        self.display.setFont(font)
        self.display.setSizePolicy(expanding_policy)
        main_v_layout.addWidget(self.display, 1)

        # --- 5. Button Grid ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 4)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(0)
        button_grid.setContentsMargins(0, 0, 0, 0)

        # (text, row, column)
        self.buttons = [
            (SETTINGS_LABEL, 0, 0), (CLIPBOARD_LABEL, 0, 1), ('(', 0, 2), (')', 0, 3), ('CE', 0, 4), ('C', 0, 5),
            ('sin', 1, 0), ('cos', 1, 1), ('tg', 1, 2), ('π', 1, 3), ('e', 1, 4), ('/', 1, 5),
            ('x^2', 2, 0), ('x^y', 2, 1), ('7', 2, 2), ('8', 2, 3), ('9', 2, 4), ('*', 2, 5),
            ('1/x', 3, 0), ('2√x', 3, 1), ('4', 3, 2), ('5', 3, 3), ('6', 3, 4), ('-', 3, 5),
            ('|x|', 4, 0), ('n!', 4, 1), ('1', 4, 2), ('2', 4, 3), ('3', 4, 4), ('+', 4, 5),
            ('10^x', 5, 0), ('^', 5, 1), ('±', 5, 2), ('0', 5, 3), ('.', 5, 4), ('=', 5, 5),
            ('log', 6, 0), ('ln', 6, 1)
        ]

        # Buttons that support "press and hold"
        HOLD_BUTTONS = list(CalculatorEngine.DIGITS)

        for text, row, col in self.buttons:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)

            if text == SETTINGS_LABEL:
                button.clicked.connect(self.open_settings)
            elif text in HOLD_BUTTONS:
                button.pressed.connect(lambda val=text: self.handle_button_pressed_hold(val))
                button.released.connect(self.handle_button_released_hold)
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_clicked_hold(val))
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))

            button_grid.addWidget(button, row, col)
            self.button_objects[text] = button

        self.button_objects['='].setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
        self.update_darkmode()
        self.render(*self.engine.snapshot())

    # --- Button Hold Logic ---
    def handle_button_pressed_hold(self, value):
        self.was_held = False
        self.held_button_value = value
        self.hold_timer.setInterval(self.initial_delay)
        self.hold_timer.start()

    def handle_button_released_hold(self):
        self.hold_timer.stop()
        self.held_button_value = None

    def handle_button_clicked_hold(self, value):
        # A click after a hold was already handled by the timer
        if not self.was_held:
            self.handle_button_press(value)

    def handle_hold_tick(self):
        self.was_held = True
        if self.hold_timer.interval() == self.initial_delay:
            self.hold_timer.setInterval(self.repeat_interval)
        if self.held_button_value:
            self.handle_button_press(self.held_button_value)

    # --- Key Events ---
    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = True
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = False
        super().keyReleaseEvent(event)

    # --- Commands ---
    def handle_button_press(self, value):
        if value == CLIPBOARD_LABEL:
            self.handle_clipboard()
        else:
            self.engine.press(value)

    def handle_clipboard(self):
        # Shift held -> copy the result, otherwise paste into the display
        if self.setting_value_list["shift_to_copy"] == True and (self.shift_is_held or is_shift_pressed()):
            pyperclip.copy(self.engine.display)
            return

        clipboard_text = QtWidgets.QApplication.clipboard().text()
        if clipboard_text:
            self.engine.enter_text(clipboard_text)

    def render(self, display, trail):
        self.display.setText(display)
        if self.setting_value_list["show_trail"] == True:
            self.trail.setText(trail)
        else:
            self.trail.setText("")
        self.update_font_size_display()

    def update_font_size_display(self):
        # --- Shrink the display font until the text fits ---
        MAX_FONT_SIZE = 36
        MIN_FONT_SIZE = 10

        text = self.display.text()
        font = self.display.font()
        size = MAX_FONT_SIZE
        font.setPointSize(size)
        available_width = self.display.width() - 10

        while QtGui.QFontMetrics(font).horizontalAdvance(text) > available_width and size > MIN_FONT_SIZE:
            size -= 1
            font.setPointSize(size)

        self.display.setFont(font)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.update_font_size_display()

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            for text, button in self.button_objects.items():
                if text != '=':
                    button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212;")
            self.display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.trail.setStyleSheet("color: #aaaaaa;")
        else:
            for text, button in self.button_objects.items():
                if text != '=':
                    button.setStyleSheet("font-weight: normal;")
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")
            self.trail.setStyleSheet("color: #555555;")

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # modal

        # Reload settings after the dialog closes
        self.setting_value_list = config_manager.load_settings_with_defaults()
        CalculatorEngine.debug = self.setting_value_list["debug"] == True
        self.update_darkmode()
        self.render(*self.engine.snapshot())


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
