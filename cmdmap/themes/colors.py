# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich theme used for terminal output.

`OneColors` holds hex colors from the One Dark palette, with `_b` variants
for bold. `get_theme()` maps the named styles used by the cmdmap console
(message statuses and command emphasis) onto those colors.
"""
from rich.style import Style
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

    BLACK_b = f"bold {BLACK}"
    WHITE_b = f"bold {WHITE}"
    DARK_RED_b = f"bold {DARK_RED}"
    LIGHT_RED_b = f"bold {LIGHT_RED}"
    DARK_YELLOW_b = f"bold {DARK_YELLOW}"
    LIGHT_YELLOW_b = f"bold {LIGHT_YELLOW}"
    GREEN_b = f"bold {GREEN}"
    CYAN_b = f"bold {CYAN}"
    BLUE_b = f"bold {BLUE}"
    MAGENTA_b = f"bold {MAGENTA}"


def get_theme() -> Theme:
    """Return the rich theme with the styles referenced by cmdmap output."""
    return Theme(
        {
            "status.error": Style.parse(OneColors.LIGHT_RED_b),
            "status.warning": Style.parse(OneColors.LIGHT_YELLOW_b),
            "status.notice": Style.parse(OneColors.CYAN_b),
            "status.info": Style.parse(OneColors.WHITE_b),
            "status.success": Style.parse(OneColors.GREEN_b),
            "command": Style.parse(OneColors.WHITE_b),
            "heading": Style.parse(OneColors.BLUE_b),
        }
    )
