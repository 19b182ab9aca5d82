"""Link resolver backed by a registry of documented type names."""

import logging
from typing import Dict, Iterable, Mapping, Optional, Union

from doctoken.application.interfaces.ilink_resolver import ILinkResolver
from doctoken.config import Settings, get_settings

# Native names and their page under the extern docs base URL.
NATIVE_TYPE_PAGES: Dict[str, str] = {
    "boolean": "Boolean",
    "number": "Number",
    "string": "String",
    "null": "null",
    "undefined": "undefined",
    "Array": "Array",
    "Boolean": "Boolean",
    "Date": "Date",
    "Error": "Error",
    "Function": "Function",
    "JSON": "JSON",
    "Map": "Map",
    "Math": "Math",
    "Number": "Number",
    "Object": "Object",
    "Promise": "Promise",
    "RangeError": "RangeError",
    "RegExp": "RegExp",
    "Set": "Set",
    "String": "String",
    "Symbol": "Symbol",
    "TypeError": "TypeError",
}

DEFAULT_KIND = "namespace"


class RegistryLinkResolver(ILinkResolver):
    """Resolves names against a fixed set of documented types.

    Each documented type gets its own page, named after its kind and its
    qualified name with dots replaced by underscores, e.g. ``goog.Foo`` of
    kind ``class`` lives at ``class_goog_Foo.html``. Members link to an
    anchor on their owner's page: ``goog.Foo.bar`` for static members and
    ``goog.Foo$bar`` for instance members written ``goog.Foo#bar``.
    """

    def __init__(
        self,
        known_types: Union[Iterable[str], Mapping[str, str]],
        extern_links: Optional[Mapping[str, str]] = None,
        file_prefix: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the resolver.

        Args:
            known_types: Documented type names, or a mapping of type name to
                its kind (class, interface, enum, namespace)
            extern_links: Extra or overriding extern name -> URL entries
            file_prefix: Prefix for generated page links; defaults to
                Settings.FILE_PREFIX
            settings: Settings to read defaults from
        """
        self.logger = logging.getLogger(__name__)
        settings = settings or get_settings()

        if isinstance(known_types, Mapping):
            self._types: Dict[str, str] = dict(known_types)
        else:
            self._types = {name: DEFAULT_KIND for name in known_types}

        self._file_prefix = (
            settings.FILE_PREFIX if file_prefix is None else file_prefix
        )
        self._externs: Dict[str, str] = {
            name: settings.EXTERN_DOCS_URL + page
            for name, page in NATIVE_TYPE_PAGES.items()
        }
        if extern_links:
            self._externs.update(extern_links)

    def get_file_path(self, type_name: str) -> Optional[str]:
        """Get the page documenting a known type, or None."""
        kind = self._types.get(type_name)
        if kind is None:
            return None
        return f"{self._file_prefix}{kind}_{type_name.replace('.', '_')}.html"

    def resolve(self, name: str) -> Optional[str]:
        if name.endswith("()"):
            name = name[:-2]
        if not name:
            return None

        path = self.get_file_path(name)
        if path is not None:
            return path

        if "#" in name:
            owner, member = name.split("#", 1)
            path = self.get_file_path(owner)
            if path is not None:
                return f"{path}#{owner}${member}"
            return None

        owner = name
        while "." in owner:
            owner = owner.rsplit(".", 1)[0]
            path = self.get_file_path(owner)
            if path is not None:
                return f"{path}#{name}"

        self.logger.debug(f"No link for {name}")
        return None

    def resolve_external(self, name: str) -> Optional[str]:
        return self._externs.get(name)
