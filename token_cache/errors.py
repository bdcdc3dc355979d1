"""
Exceptions for the token cache. Only StoreUnavailable is fatal to a manager run;
the others are converted at the component boundary.
"""


class TokenCacheError(Exception):
    """Base class for token cache errors."""


class StoreUnavailable(TokenCacheError):
    """The token slot could not be read or written."""

    def __init__(self, slot: str, reason: str):
        super().__init__(f"Token store unavailable for slot '{slot}': {reason}")
        self.slot = slot


class AuthFailure(TokenCacheError):
    """Credential exchange failed or returned no usable access_token."""


class ConfigurationError(TokenCacheError):
    """Missing credentials, unknown environment, or an unsafe TLS setting."""
