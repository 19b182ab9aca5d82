from typing import Dict, Optional

import pytest

from doctoken.application.interfaces.ilink_resolver import ILinkResolver
from doctoken.config import MDN_GLOBAL_OBJECTS_URL, Settings

EXTERN_BASE = MDN_GLOBAL_OBJECTS_URL


class DictLinkResolver(ILinkResolver):
    """Resolver backed by two plain dictionaries."""

    def __init__(
        self,
        links: Optional[Dict[str, str]] = None,
        externs: Optional[Dict[str, str]] = None,
    ):
        self.links = links or {}
        self.externs = externs or {}
        self.resolved = []

    def resolve(self, name: str) -> Optional[str]:
        self.resolved.append(name)
        return self.links.get(name)

    def resolve_external(self, name: str) -> Optional[str]:
        return self.externs.get(name)


@pytest.fixture
def native_externs() -> Dict[str, str]:
    return {
        "boolean": EXTERN_BASE + "Boolean",
        "number": EXTERN_BASE + "Number",
        "string": EXTERN_BASE + "String",
        "null": EXTERN_BASE + "null",
        "undefined": EXTERN_BASE + "undefined",
        "Date": EXTERN_BASE + "Date",
    }


@pytest.fixture
def resolver(native_externs: Dict[str, str]) -> DictLinkResolver:
    return DictLinkResolver(
        links={"pkg.Foo": "pkg_Foo.html", "goog.Widget": "class_goog_Widget.html"},
        externs=native_externs,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        LOG_LEVEL="DEBUG",
        WARN_UNKNOWN_TAGLETS=True,
        EXTERN_DOCS_URL=EXTERN_BASE,
        FILE_PREFIX="",
    )


@pytest.fixture
def make_resolver(native_externs: Dict[str, str]):
    def _make_resolver(
        links: Optional[Dict[str, str]] = None,
        externs: Optional[Dict[str, str]] = None,
    ) -> DictLinkResolver:
        return DictLinkResolver(
            links=links, externs=native_externs if externs is None else externs
        )

    return _make_resolver
