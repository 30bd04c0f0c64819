from color_logic import InvalidFormat

STYLESHEET = """
QMainWindow {
    background-color: #121212;
    color: #e0e0e0;
}

QWidget {
    font-family: 'Roboto', 'Inter', 'Segoe UI', monospace;
    font-size: 14px;
    color: #e0e0e0;
}

QLabel#SectionTitle {
    font-weight: bold;
    font-size: 15px;
    margin-top: 8px;
    margin-bottom: 4px;
    color: #ffffff;
}

/* Generate Button */
QPushButton#GenerateButton {
    background-color: #ffffff;
    color: #000000;
    border: 1px solid #333333;
    border-radius: 10px;
    padding: 10px 18px;
    font-weight: bold;
    font-size: 15px;
}
QPushButton#GenerateButton:hover {
    background-color: #dddddd;
}
QPushButton#GenerateButton:pressed {
    background-color: #bbbbbb;
}

/* Option Groups */
QGroupBox {
    border: 1px solid #333333;
    border-radius: 6px;
    margin-top: 8px;
    padding-top: 6px;
}
QGroupBox::title {
    subcontrol-origin: margin;
    subcontrol-position: top left;
    padding: 0 5px;
    color: #aaaaaa;
}

/* Swatches */
QFrame#PrimarySwatch, QFrame#SecondarySwatch, QFrame#TertiarySwatch {
    border-radius: 8px;
    border: 1px solid #333333;
}

QLabel#CodeLabel {
    font-family: monospace;
    font-size: 15px;
    color: #ffffff;
    background-color: rgba(0, 0, 0, 110);
    border-radius: 4px;
    padding: 4px 8px;
}
QLabel#CodeLabel:hover {
    background-color: rgba(0, 0, 0, 170);
}
QLabel#CodeLabel[flashing="true"] {
    background-color: rgba(255, 255, 255, 200);
    color: #000000;
}
"""


def style_rule(selector, declarations):
    """
    Build a stylesheet rule for an '#objectName' or '.ClassName' selector.
    declarations: dict of property -> value.
    """
    if not isinstance(selector, str) or selector[:1] not in ("#", "."):
        raise InvalidFormat(f"invalid selector {selector!r}, must begin with # or .")
    body = " ".join(f"{prop}: {value};" for prop, value in declarations.items())
    return f"{selector} {{ {body} }}"
