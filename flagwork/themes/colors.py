# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich `Theme` used by the Flagwork console.

`OneColors` holds plain hex strings so they can be dropped straight into rich
markup (e.g. `f"[{OneColors.DARK_RED}]error[/]"`). The theme maps the semantic
style names used by help and report rendering onto those colors.
"""
from rich.theme import Theme


class OneColors:
    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"

    CYAN_b = f"bold {CYAN}"
    BLUE_b = f"bold {BLUE}"
    GREEN_b = f"bold {GREEN}"
    DARK_RED_b = f"bold {DARK_RED}"


def get_flagwork_theme() -> Theme:
    """Return the theme shared by every Flagwork console."""
    return Theme(
        {
            "flag": OneColors.CYAN_b,
            "alias": OneColors.CYAN,
            "metavar": OneColors.LIGHT_YELLOW,
            "heading": f"bold underline {OneColors.WHITE}",
            "hint": f"italic {OneColors.COMMENT_GREY}",
            "failure": OneColors.LIGHT_RED,
            "warning": OneColors.DARK_YELLOW,
            "success": OneColors.GREEN,
        }
    )
