"""Navigation link rendering."""

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag


@dataclass(frozen=True)
class NavLink:
    """A navigation link: label text and target address."""
    title: str
    url: str


def render_link(soup: BeautifulSoup, link: NavLink) -> Tag:
    """Build an anchor tag for a link."""
    anchor = soup.new_tag("a", href=link.url)
    anchor.string = link.title
    return anchor
