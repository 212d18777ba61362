from .gruvbox_dark import color_scheme as gruvboxdark
from .one_dark import color_scheme as onedark
from .solarized_light import color_scheme as solarizedlight


THEMES = {
    "one dark": onedark,
    "solarized light": solarizedlight,
    "gruvbox dark": gruvboxdark,
}
