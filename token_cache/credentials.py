"""
Credentials for the password grant, selected by environment (testing/production).
Values come from env only; load_credentials is a pure factory with the environment passed in.
"""
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from token_cache.errors import ConfigurationError


class Environment(str, Enum):
    TESTING = "testing"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: "str | bool | Environment") -> "Environment":
        """Accept an Environment, "testing"/"production" (any case), or a legacy testing bool."""
        if isinstance(value, Environment):
            return value
        if isinstance(value, bool):
            return cls.TESTING if value else cls.PRODUCTION
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(f"Unknown environment '{value}'; expected 'testing' or 'production'")


@dataclass(frozen=True)
class Credentials:
    """Long-lived secret material. Secrets are kept out of repr so they never reach a log line."""

    client_id: str
    client_secret: str = field(repr=False)
    username: str
    password: str = field(repr=False)
    environment: Environment = Environment.PRODUCTION

    def as_form(self) -> dict[str, str]:
        """Form fields for grant_type=password."""
        return {
            "grant_type": "password",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "username": self.username,
            "password": self.password,
        }


_FIELDS = ("CLIENT_ID", "CLIENT_SECRET", "USERNAME", "PASSWORD")


def env_prefix(environment: Environment) -> str:
    """TOKEN_CACHE_TESTING_ or TOKEN_CACHE_PRODUCTION_"""
    return f"TOKEN_CACHE_{environment.value.upper()}_"


def load_credentials(environment: "str | bool | Environment", env: Mapping[str, str] | None = None) -> Credentials:
    """
    Build Credentials for the given environment from TOKEN_CACHE_<ENV>_{CLIENT_ID,CLIENT_SECRET,USERNAME,PASSWORD}.
    Raises ConfigurationError naming the missing variables (never their values).
    """
    environment = Environment.parse(environment)
    source = os.environ if env is None else env
    prefix = env_prefix(environment)
    values = {name: source.get(prefix + name) or "" for name in _FIELDS}
    missing = [prefix + name for name, v in values.items() if not v]
    if missing:
        raise ConfigurationError(f"Missing {environment.value} credentials: {', '.join(missing)}")
    return Credentials(
        client_id=values["CLIENT_ID"],
        client_secret=values["CLIENT_SECRET"],
        username=values["USERNAME"],
        password=values["PASSWORD"],
        environment=environment,
    )
