import pytest
from typing import Optional
from doctoken.application.interfaces.ilink_resolver import ILinkResolver


def test_ilink_resolver_is_abstract():
    with pytest.raises(TypeError):
        ILinkResolver()  # type: ignore


def test_ilink_resolver_minimal_subclass():
    class MinimalResolver(ILinkResolver):
        def resolve(self, name: str) -> Optional[str]:
            return None

        def resolve_external(self, name: str) -> Optional[str]:
            return None

    resolver = MinimalResolver()
    assert resolver.resolve("goog.Foo") is None
    assert resolver.resolve_external("string") is None


def test_ilink_resolver_requires_resolve_external():
    class PartialResolver(ILinkResolver):
        def resolve(self, name: str) -> Optional[str]:
            return None

    with pytest.raises(TypeError):
        PartialResolver()  # type: ignore
