class SyndicateExtractionError(Exception):
    """Base class for errors raised by the syndicate extraction engine."""


class InputError(SyndicateExtractionError):
    """The caller supplied input the engine cannot work with."""


class MalformedDocumentError(InputError):
    """The document bytes could not be turned into page text."""
