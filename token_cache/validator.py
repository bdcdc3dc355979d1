"""
Token validation by live probe. No token-format knowledge: the remote service decides.
Transport and parsing errors become outcomes here; nothing from httpx escapes.
"""
import logging
from enum import Enum

import httpx

from token_cache.credentials import Environment
from token_cache.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ValidationOutcome(Enum):
    """Probe result. Everything except VALID means re-authenticate; code is the legacy diagnostic number."""

    VALID = ("valid", 1)
    INVALID = ("invalid", -1)
    NETWORK_FAILURE = ("network_failure", -2)
    EMPTY_TOKEN = ("empty_token", -3)

    def __init__(self, label: str, code: int):
        self.label = label
        self.code = code

    @property
    def is_valid(self) -> bool:
        return self is ValidationOutcome.VALID


def _has_error_code(body) -> bool:
    """True if the decoded body carries a non-null errorCode (object, or Salesforce-style list of objects)."""
    if isinstance(body, dict):
        return body.get("errorCode") is not None
    if isinstance(body, list):
        return any(isinstance(item, dict) and item.get("errorCode") is not None for item in body)
    return False


def check_tls(component: str, url: str, verify_tls: bool, environment: "str | bool | Environment") -> None:
    """verify_tls=False is accepted in the testing environment only, and always logged."""
    if verify_tls:
        return
    if Environment.parse(environment) is not Environment.TESTING:
        raise ConfigurationError(f"TLS verification can only be disabled in the testing environment ({component})")
    logger.warning(
        "TLS certificate verification is DISABLED for %s (%s). Testing environment only.",
        component,
        url,
    )


class TokenValidator:
    def __init__(
        self,
        url: str,
        *,
        verify_tls: bool = True,
        timeout: float = 10.0,
        environment: "str | bool | Environment" = Environment.PRODUCTION,
    ):
        check_tls("token validation", url, verify_tls, environment)
        self.url = url
        self.verify_tls = verify_tls
        self.timeout = timeout

    def validate(self, token: str) -> ValidationOutcome:
        if not token:
            return ValidationOutcome.EMPTY_TOKEN

        try:
            r = httpx.get(
                self.url,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
                verify=self.verify_tls,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Token validation request to %s failed: %s", self.url, e)
            return ValidationOutcome.NETWORK_FAILURE
        except UnicodeEncodeError:
            # Header values must be ASCII; the service can never accept this token
            logger.warning("Cached token for %s is not ASCII; treating as invalid", self.url)
            return ValidationOutcome.INVALID

        if r.status_code in (401, 403):
            logger.debug("Token validation: HTTP %s from %s", r.status_code, self.url)
            return ValidationOutcome.INVALID

        try:
            body = r.json()
        except ValueError:
            # Not JSON, so no errorCode to report
            body = None
        if _has_error_code(body):
            logger.debug("Token validation: errorCode in response from %s", self.url)
            return ValidationOutcome.INVALID
        return ValidationOutcome.VALID
