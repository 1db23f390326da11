class SigningError(Exception):
    """Base class for errors raised while signing a request."""


class InvalidCredentialError(SigningError):
    """The credential is missing its access key or secret key."""

    def __init__(self, message: str = "Invalid credential: access key and secret key are required") -> None:
        super().__init__(message)


class MalformedHeaderValueError(SigningError):
    """A header value contains characters that cannot be sent on the wire."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Malformed value for header {name!r}: {value!r}")
