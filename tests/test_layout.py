import dataclasses

import pytest
from bs4 import BeautifulSoup

from src.core.nav import NavLink
from src.layout.options import BASE_OPTIONS, BaseLayoutOptions, NavTitle, render_nav, render_title


def test_base_options_mapping():
    assert BASE_OPTIONS.to_dict() == {
        "nav": {
            "title": {
                "text": "intern3.chat",
                "icon": {"src": "/logo.svg", "className": "w-6 h-6", "alt": ""},
            },
        },
        "links": [],
    }


def test_base_options_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        BASE_OPTIONS.links = (NavLink("Blog", "/blog"),)


def test_with_links_returns_copy():
    docs = BASE_OPTIONS.with_links(NavLink("Blog", "/blog"), NavLink("GitHub", "https://github.com"))

    assert [link.title for link in docs.links] == ["Blog", "GitHub"]
    assert BASE_OPTIONS.links == ()


def test_with_title_keeps_icon():
    home = BASE_OPTIONS.with_title("Home")
    assert home.nav_title.text == "Home"
    assert home.nav_title.icon == BASE_OPTIONS.nav_title.icon


def test_render_title_has_icon_then_text():
    span = BeautifulSoup(render_title(BASE_OPTIONS), "lxml").find("span")

    img = span.find("img")
    assert img["src"] == "/logo.svg"
    assert img["class"] == ["w-6", "h-6"]
    assert span.get_text() == "intern3.chat"


def test_render_title_without_icon():
    options = BaseLayoutOptions(nav_title=NavTitle(text="Docs"))
    assert render_title(options) == "<span>Docs</span>"


def test_render_nav_with_empty_links_has_only_home_anchor():
    anchors = BeautifulSoup(render_nav(BASE_OPTIONS), "lxml").find("nav").find_all("a")
    assert [a["href"] for a in anchors] == ["/"]


def test_render_nav_lists_links_in_order():
    options = BASE_OPTIONS.with_links(NavLink("Blog", "/blog"), NavLink("API", "/docs/api"))

    anchors = BeautifulSoup(render_nav(options), "lxml").find("nav").find_all("a")

    assert [(a["href"], a.get_text()) for a in anchors[1:]] == [("/blog", "Blog"), ("/docs/api", "API")]
