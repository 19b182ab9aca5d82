"""Interface for resolving documentation link targets."""

from abc import ABC, abstractmethod
from typing import Optional


class ILinkResolver(ABC):
    """Maps symbol and type names to documentation destinations.

    Implementations are read-only lookup structures built once before
    documentation generation begins, so they may be shared between threads.
    """

    @abstractmethod
    def resolve(self, name: str) -> Optional[str]:
        """Resolve a symbol or type name to a documentation reference.

        Args:
            name: Qualified name, e.g. ``goog.Foo`` or ``goog.Foo#bar``

        Returns:
            A relative or absolute reference, or None if the name is unknown
        """
        pass

    @abstractmethod
    def resolve_external(self, name: str) -> Optional[str]:
        """Resolve a native or extern type name to its external reference.

        For the native primitive names (boolean, number, string, null,
        undefined) this is expected to always succeed.

        Args:
            name: Extern name, e.g. ``string`` or ``Date``

        Returns:
            The external reference, or None if the name is not an extern
        """
        pass
