"""Custom exceptions for mdtoc."""


class MdtocError(Exception):
    """Base exception for mdtoc operations."""


class ConfigurationError(MdtocError):
    """The source tree cannot be turned into a table of contents."""


class SourceNotFoundError(ConfigurationError):
    """Source root does not exist or is not a directory."""


class NoDocumentsError(ConfigurationError):
    """No eligible documents were found under the source root."""


class IndexNotFoundError(ConfigurationError):
    """The index document is missing from the source root."""
