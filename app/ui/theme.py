class Colors:
    """Color palette for the application UI."""

    BG_WHITE = "#ffffff"
    FG_BLACK = "#111111"
    FG_MUTED = "#6b6b6b"
    BORDER_LIGHT = "#d6d6d6"
    HOVER_BG = "#f7f7f7"
    PRESSED_BG = "#eeeeee"

    BG_DARK = "#332f2a"
    BG_HOVER_DARK = "#7a889a"
    FG_LIGHT = "#c8c1b7"
    BORDER_DARK = "#595148"

    SELECT_BG = "#6f7f94"
    SELECT_FG = "#ece4d9"
    WARN_FG = "#b3261e"


class Styles:
    """Reusable stylesheet templates."""

    @staticmethod
    def button():
        return f"""
            QPushButton {{
                background-color: {Colors.BG_WHITE};
                color: {Colors.FG_BLACK};
                border: 1px solid {Colors.BORDER_LIGHT};
                border-radius: 6px;
                padding: 6px 12px;
                outline: none;
            }}
            QPushButton:hover {{
                background-color: {Colors.HOVER_BG};
            }}
            QPushButton:pressed {{
                background-color: {Colors.PRESSED_BG};
            }}
            QPushButton:disabled {{
                color: {Colors.FG_MUTED};
            }}
        """

    @staticmethod
    def indicator():
        return f"""
            QPushButton {{
                background-color: {Colors.BG_DARK};
                color: {Colors.FG_LIGHT};
                border: 1px solid {Colors.BORDER_DARK};
                border-radius: 4px;
                padding: 2px 10px;
                outline: none;
            }}
            QPushButton:hover {{
                background-color: {Colors.BG_HOVER_DARK};
                color: #ffffff;
            }}
        """

    @staticmethod
    def info_label(color=Colors.FG_BLACK):
        return f"""
            QLabel {{
                color: {color};
                background-color: transparent;
                padding: 4px;
                font-size: 13px;
                selection-background-color: transparent;
                selection-color: {color};
            }}
        """

    @staticmethod
    def list_widget():
        return f"""
            QListWidget {{
                background-color: {Colors.BG_WHITE};
                border: 1px solid {Colors.BORDER_LIGHT};
                border-radius: 8px;
                outline: none;
            }}
            QListWidget::item {{
                padding: 6px;
            }}
            QListWidget::item:selected {{
                background-color: {Colors.SELECT_BG};
                color: {Colors.SELECT_FG};
            }}
        """
