from syntaxgen.color_scheme import create_color_scheme


color_scheme = create_color_scheme(
    "One Dark",
    False,
    {
        "neutral": [
            "#282c34", "#353b45", "#3e4451", "#545862",
            "#565c64", "#abb2bf", "#b6bdca", "#c8ccd4",
        ],
        "red": "#e06c75",
        "orange": "#d19a66",
        "yellow": "#e5c07b",
        "green": "#98c379",
        "cyan": "#56b6c2",
        "blue": "#61afef",
        "violet": "#c678dd",
        "magenta": "#be5046",
    },
    syntax={
        "comment": {"italic": True},
        "keyword": {"color": "#c678dd"},
        "function": {"color": "#61afef"},
        "function.method": {"color": "#61afef"},
        "type": {"color": "#e5c07b"},
        "constant.builtin": {"color": "#d19a66"},
    },
)
