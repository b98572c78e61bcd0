"""Output themes for the REPL.

A theme maps the five presentation styles (primary, success, warning,
danger, dark) to rich style strings. The prompt line is drawn by
prompt_toolkit, so its style lives in PROMPT_STYLES using prompt_toolkit
style syntax.
"""

from rich.theme import Theme


def create_theme(
    *,
    primary: str = "cyan",
    success: str = "green",
    warning: str = "yellow",
    danger: str = "bold red",
    dark: str = "bright_black",
) -> Theme:
    """Create a theme with the given styles."""
    return Theme(
        {
            "primary": primary,
            "success": success,
            "warning": warning,
            "danger": danger,
            "dark": dark,
        }
    )


DEFAULT_THEME = create_theme()

NORD_THEME = create_theme(
    primary="#88C0D0",
    success="#A3BE8C",
    warning="#EBCB8B",
    danger="#BF616A",
    dark="#4C566A",
)

# No colors, only emphasis
MONO_THEME = create_theme(
    primary="default",
    success="bold",
    warning="bold",
    danger="bold reverse",
    dark="dim",
)

THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "nord": NORD_THEME,
    "mono": MONO_THEME,
}


def get_theme(name: str) -> Theme:
    """Get a theme by name, falling back to DEFAULT_THEME."""
    return THEMES.get(name.lower(), DEFAULT_THEME)


# prompt_toolkit style strings for the input line, per theme
PROMPT_STYLES: dict[str, str] = {
    "default": "bold ansicyan",
    "nord": "bold #88C0D0",
    "mono": "bold",
}


def get_prompt_style(name: str) -> str:
    """Get the prompt_toolkit style for a theme's input line."""
    return PROMPT_STYLES.get(name.lower(), PROMPT_STYLES["default"])
