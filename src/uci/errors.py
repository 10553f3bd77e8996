"""Exception types raised by the remote-model client and the mode parsers."""


class UCIError(RuntimeError):
    """Base class for every failure talking to (or decoding) the remote model."""


class TransportError(UCIError):
    """The SDK could not complete the request (network, auth, quota...)."""


class EmptyResponseError(UCIError):
    """The model answered with no text."""


class MalformedResponseError(UCIError, ValueError):
    """The model's text is not JSON, or its JSON does not match the declared shape."""
