"""
Theme definitions for the Marks Transcriber GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders & Dividers
    BORDER = "#e0e0e0"
    BORDER_FOCUS = "#28A8EA"

    # Status
    ERROR = "#d32f2f"
    WARNING = "#f57c00"

    # Selection
    SELECTION_BG = "#F0F9FF"
    SELECTION_TEXT = "#1f1f1f"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    MONO_FONT = "Consolas, Monaco, Menlo, 'Courier New', monospace"

    # Sizes
    H1 = "18pt"
    BODY = "14pt"
    SMALL = "12pt"
    CONSOLE = "13pt"

    # Weights
    WEIGHT_REGULAR = "400"
    WEIGHT_BOLD = "600"


GLOBAL_STYLESHEET = f"""
    * {{
        font-family: {Fonts.UI_FONT};
        font-size: {Fonts.BODY};
        color: {Colors.TEXT_PRIMARY};
    }}

    QMainWindow, QWidget {{
        background-color: {Colors.BACKGROUND};
    }}

    QLabel {{
        background-color: transparent;
        color: {Colors.TEXT_PRIMARY};
    }}

    QLabel#stepTitle {{
        font-size: {Fonts.H1};
        font-weight: {Fonts.WEIGHT_BOLD};
    }}

    QLabel#hint {{
        color: {Colors.TEXT_SECONDARY};
        font-size: {Fonts.SMALL};
    }}

    QGroupBox {{
        background-color: {Colors.SURFACE};
        border: 1px solid {Colors.BORDER};
        border-radius: 6px;
        margin-top: 12px;
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        top: -2px;
        padding: 0 4px;
        background-color: {Colors.BACKGROUND};
        color: {Colors.TEXT_PRIMARY};
    }}

    QPlainTextEdit, QLineEdit {{
        background-color: {Colors.SURFACE};
        border: 1px solid {Colors.BORDER};
        border-radius: 4px;
        padding: 4px;
        selection-background-color: {Colors.SELECTION_BG};
        selection-color: {Colors.SELECTION_TEXT};
    }}
    QPlainTextEdit:focus, QLineEdit:focus {{
        border: 1px solid {Colors.BORDER_FOCUS};
    }}

    QPushButton {{
        background-color: {Colors.PRIMARY_BLUE};
        color: {Colors.TEXT_ON_PRIMARY};
        border: none;
        border-radius: 4px;
        padding: 6px 16px;
    }}
    QPushButton:hover {{
        background-color: {Colors.PRIMARY_BLUE_HOVER};
    }}
"""


def apply_global_stylesheet(app) -> None:
    """Apply the application-wide stylesheet."""
    app.setStyleSheet(GLOBAL_STYLESHEET)
