"""Custom exceptions for doc2epub."""


class Doc2EpubError(Exception):
    """Base exception for doc2epub operations."""

    stage = "build"


class FetchError(Doc2EpubError):
    """Error while fetching the source document."""

    stage = "fetch"


class ParseError(Doc2EpubError):
    """Source document could not be parsed into markup."""

    stage = "parse"


class StructureNotFoundError(Doc2EpubError):
    """An expected node (page, container, footer) is missing from the document."""

    stage = "structure"


class MalformedSectionError(Doc2EpubError):
    """A section boundary element has no usable title text."""

    stage = "sectioning"


class SerializationError(Doc2EpubError):
    """A node subtree could not be rendered back to markup."""

    stage = "serialization"


class PackagingError(Doc2EpubError):
    """The EPUB package could not be written."""

    stage = "packaging"


class DanglingLinkWarning(UserWarning):
    """An internal fragment link points at an identifier that does not exist."""
