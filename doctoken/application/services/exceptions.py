"""Custom exceptions for the doctoken services."""


class DocTokenError(Exception):
    """Base class for errors raised by the doctoken services."""


class TypeFormatError(DocTokenError):
    """Raised when a type expression cannot be formatted.

    These errors signal that the caller handed the formatter data outside its
    contract. They are not recoverable by the formatter.
    """


class UnsupportedTypeError(TypeFormatError):
    """Raised when the formatter meets a node it is not designed to render.

    This covers the internal no-type placeholders and any object that is not
    a type expression node.
    """


class MissingExternLinkError(TypeFormatError):
    """Raised when a native type has no external documentation reference."""
