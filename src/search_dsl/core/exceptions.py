"""Custom exceptions."""


class SearchDSLException(Exception):
    """Base exception for search fragment errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class FragmentEncodingError(SearchDSLException):
    """A serialized fragment could not be rendered as JSON."""

    def __init__(self, message: str = "Fragment is not JSON serializable"):
        super().__init__(message)
