from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NavEntry:
    title: str
    url: str


@dataclass(frozen=True)
class NavItem:
    title: str
    url: str
    active: bool


STATIC_NAV = [
    NavEntry(title="Articles", url="/blogs"),
    NavEntry(title="About", url="/about"),
]


def is_active(entry: NavEntry, current_url: str) -> bool:
    return current_url == entry.url or current_url.startswith(entry.url + "/")


def build_nav(current_url: str = "") -> list[NavItem]:
    """Build header nav items, marking the section of current_url active."""
    return [
        NavItem(title=entry.title, url=entry.url, active=is_active(entry, current_url))
        for entry in STATIC_NAV
    ]
