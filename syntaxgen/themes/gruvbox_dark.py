from syntaxgen.color_scheme import create_color_scheme


color_scheme = create_color_scheme(
    "Gruvbox Dark",
    False,
    {
        "neutral": [
            "#282828", "#3c3836", "#504945", "#665c54", "#7c6f64",
            "#928374", "#a89984", "#bdae93", "#d5c4a1", "#ebdbb2",
        ],
        "red": "#fb4934",
        "orange": "#fe8019",
        "yellow": "#fabd2f",
        "green": "#b8bb26",
        "cyan": "#8ec07c",
        "blue": "#83a598",
        "violet": "#d3869b",
        "magenta": "#b16286",
    },
    syntax={
        "keyword": {"color": "#fb4934"},
        "string.escape": {"color": "#fe8019"},
        "emphasis.strong": {"weight": "extra_bold"},
    },
)
