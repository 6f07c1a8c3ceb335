"""Layout options shared by every page layout of the docs site.

Individual layouts (home, docs) start from BASE_OPTIONS and customise a copy:

    docs_options = BASE_OPTIONS.with_links(NavLink("Blog", "/blog"))
"""

from dataclasses import dataclass, field, replace
from typing import Any

from bs4 import BeautifulSoup

from src.core.nav import NavLink, render_link
from src.layout import config


@dataclass(frozen=True)
class Logo:
    src: str
    class_name: str = ""
    alt: str = ""


@dataclass(frozen=True)
class NavTitle:
    """Inline nav title: a small icon followed by text."""
    text: str
    icon: Logo | None = None


@dataclass(frozen=True)
class BaseLayoutOptions:
    nav_title: NavTitle
    links: tuple[NavLink, ...] = field(default_factory=tuple)

    def with_links(self, *links: NavLink) -> "BaseLayoutOptions":
        """Return a copy with links appended after the shared ones."""
        return replace(self, links=self.links + links)

    def with_title(self, text: str) -> "BaseLayoutOptions":
        return replace(self, nav_title=replace(self.nav_title, text=text))

    def to_dict(self) -> dict[str, Any]:
        """Option name to value mapping."""
        icon = self.nav_title.icon
        return {
            "nav": {
                "title": {
                    "text": self.nav_title.text,
                    "icon": None if icon is None else {
                        "src": icon.src,
                        "className": icon.class_name,
                        "alt": icon.alt,
                    },
                },
            },
            "links": [{"text": link.title, "url": link.url} for link in self.links],
        }


def _title_tag(soup: BeautifulSoup, title: NavTitle):
    span = soup.new_tag("span")
    if title.icon is not None:
        attrs = {"src": title.icon.src, "alt": title.icon.alt}
        if title.icon.class_name:
            attrs["class"] = title.icon.class_name
        span.append(soup.new_tag("img", attrs=attrs))
    span.append(title.text)
    return span


def render_title(options: BaseLayoutOptions) -> str:
    """Render the nav title as an inline HTML fragment."""
    soup = BeautifulSoup("", "lxml")
    return str(_title_tag(soup, options.nav_title))


def render_nav(options: BaseLayoutOptions) -> str:
    """Render the nav bar: the title linking home, then one anchor per link."""
    soup = BeautifulSoup("", "lxml")
    nav = soup.new_tag("nav")

    home = soup.new_tag("a", href="/")
    home.append(_title_tag(soup, options.nav_title))
    nav.append(home)

    for link in options.links:
        nav.append(render_link(soup, link))

    return str(nav)


BASE_OPTIONS = BaseLayoutOptions(
    nav_title=NavTitle(
        text=config.TITLE_TEXT,
        icon=Logo(src=config.LOGO_SRC, class_name=config.LOGO_CLASS, alt=config.LOGO_ALT),
    ),
    links=tuple(NavLink(title=title, url=url) for title, url in config.LINKS),
)
