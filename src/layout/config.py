"""Shared layout configuration for the documentation site."""

# Text shown next to the logo in the nav bar
TITLE_TEXT = "intern3.chat"

# Logo icon
LOGO_SRC = "/logo.svg"
LOGO_CLASS = "w-6 h-6"
LOGO_ALT = ""

# Extra nav links beyond the layout defaults, as (title, url) pairs
LINKS: list[tuple[str, str]] = []
