"""Centralized styles for the question form."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_question_title_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_feedback_style(correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS.get(theme) if correct else ColorPalette.ERROR.get(theme)
        return f"color: {color}; font-weight: bold;"

    @staticmethod
    def get_explanation_style(correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS.get(theme) if correct else ColorPalette.WARNING.get(theme)
        return (
            f"color: {color}; background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};"
            " padding: 4px 8px; border-radius: 4px;"
        )

    @staticmethod
    def get_secondary_text_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)}; font-style: italic;"

    @staticmethod
    def get_error_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ERROR.get(theme)};"
