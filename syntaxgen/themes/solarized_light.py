from syntaxgen.color_scheme import create_color_scheme


# neutral runs base03 to base3, the light appearance reverses it
color_scheme = create_color_scheme(
    "Solarized Light",
    True,
    {
        "neutral": [
            "#002b36", "#073642", "#586e75", "#657b83",
            "#839496", "#93a1a1", "#eee8d5", "#fdf6e3",
        ],
        "red": "#dc322f",
        "orange": "#cb4b16",
        "yellow": "#b58900",
        "green": "#859900",
        "cyan": "#2aa198",
        "blue": "#268bd2",
        "violet": "#6c71c4",
        "magenta": "#d33682",
    },
)
