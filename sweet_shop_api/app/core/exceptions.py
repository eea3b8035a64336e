"""
Domain exceptions raised by the service layer.

Services never build HTTP responses themselves.  They raise one of the
exceptions below and the API layer translates it into a status code
(see ``api.deps.raise_http_error``).  Every exception carries a
human‑readable ``message`` that is safe to show to clients.
"""


class SweetShopError(Exception):
    """Base exception for the Sweet Shop API."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AlreadyExists(SweetShopError):
    """A user with the requested username is already registered."""


class InvalidCredentials(SweetShopError):
    """Login failed.

    Raised with the same message for an unknown username and for a
    wrong password so that callers cannot enumerate accounts.
    """


class InvalidOrExpiredToken(SweetShopError):
    """Access token has a bad signature, is malformed or has expired."""


class NotFound(SweetShopError):
    """Requested record does not exist."""


class InvalidArgument(SweetShopError):
    """Negative price/quantity or a non‑positive stock change."""


class InsufficientStock(SweetShopError):
    """Purchase asks for more units than are in stock."""
