"""
Token lifecycle manager: load the cached token, probe it, re-authenticate if needed,
and always write the result back to the slot before returning.

    manager = TokenManager(
        "salesforce",
        validation_url="https://example.my.salesforce.com/services/data/v50.0/limits",
        token_url="https://login.salesforce.com/services/oauth2/token",
        environment="production",
    )
    token = manager.get_token()
    if not token:
        ...  # authentication currently unavailable; do not call the service

Call get_token() before each action so the token is re-checked.
validation_url is the authenticated probe endpoint, token_url the login endpoint;
both are keyword-only.
"""
import logging
from collections.abc import Callable
from dataclasses import dataclass

from token_cache import config
from token_cache.authenticator import PasswordGrantAuthenticator
from token_cache.credentials import Credentials, Environment, load_credentials
from token_cache.errors import AuthFailure, ConfigurationError
from token_cache.store import FileTokenStore, check_slot_name
from token_cache.validator import TokenValidator, ValidationOutcome

logger = logging.getLogger(__name__)

STATE_NEEDS_CHECK = "needs_check"
STATE_DONE = "done"


@dataclass
class TokenRecord:
    slot_name: str
    value: str = ""

    @property
    def is_available(self) -> bool:
        return self.value != ""


class TokenManager:
    def __init__(
        self,
        slot: str,
        *,
        validation_url: str,
        token_url: str,
        environment: "str | bool | Environment",
        store: FileTokenStore | None = None,
        validator: TokenValidator | None = None,
        authenticator: PasswordGrantAuthenticator | None = None,
        credentials_loader: Callable[[Environment], Credentials] = load_credentials,
        verify_tls: bool = True,
        timeout: float = config.HTTP_TIMEOUT,
    ):
        self.slot = check_slot_name(slot)
        self.environment = Environment.parse(environment)
        if not verify_tls and self.environment is not Environment.TESTING:
            raise ConfigurationError("TLS verification can only be disabled in the testing environment")
        self.store = store or FileTokenStore(config.TOKEN_DIR)
        self.validator = validator or TokenValidator(
            validation_url, verify_tls=verify_tls, timeout=timeout, environment=self.environment
        )
        self.authenticator = authenticator or PasswordGrantAuthenticator(
            token_url, verify_tls=verify_tls, timeout=timeout, environment=self.environment
        )
        self._credentials_loader = credentials_loader
        self.state = STATE_NEEDS_CHECK
        self.record = TokenRecord(slot_name=self.slot)
        self.last_outcome: ValidationOutcome | None = None

    @classmethod
    def from_config(cls, slot: str | None = None) -> "TokenManager":
        """Build a manager from token_cache.config (env)."""
        return cls(
            slot or config.DEFAULT_SLOT,
            validation_url=config.VALIDATION_URL,
            token_url=config.TOKEN_URL,
            environment=config.ENVIRONMENT,
            store=FileTokenStore(config.TOKEN_DIR),
            verify_tls=config.VERIFY_TLS,
            timeout=config.HTTP_TIMEOUT,
        )

    @property
    def token(self) -> str:
        return self.record.value

    def get_token(self) -> str:
        """
        One activation. Returns the usable token, or "" when authentication failed.
        StoreUnavailable propagates; validator/authenticator failures do not.
        """
        self.state = STATE_NEEDS_CHECK
        cached = self.store.read(self.slot)
        outcome = self.validator.validate(cached)
        self.last_outcome = outcome

        if outcome.is_valid:
            logger.info("Token for slot %s is valid; reusing cached token", self.slot)
            token = cached
        else:
            logger.info("Token for slot %s not usable (%s); re-authenticating", self.slot, outcome.label)
            token = self._authenticate()

        # Written even when unchanged or empty, so the slot always shows the last attempt
        self.store.write(self.slot, token)
        self.record = TokenRecord(slot_name=self.slot, value=token)
        self.state = STATE_DONE
        return token

    def _authenticate(self) -> str:
        try:
            credentials = self._credentials_loader(self.environment)
            return self.authenticator.authenticate(credentials)
        except (AuthFailure, ConfigurationError) as e:
            logger.warning("Authentication for slot %s failed: %s", self.slot, e)
            return ""
