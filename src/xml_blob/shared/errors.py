"""Exception types raised while constructing XML blobs."""


class XmlBlobError(Exception):
    """Base exception for all xml_blob errors."""


class InvalidArgumentError(XmlBlobError, ValueError):
    """Raised eagerly when a factory receives arguments it cannot build from.

    The only validated precondition is the flat key/value form of ``attrs``,
    which needs an even number of strings.
    """

    def __init__(self, message: str, argument: str = "") -> None:
        super().__init__(message)
        self.argument = argument
