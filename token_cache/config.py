"""
Token cache configuration. Values from environment; no credentials in this file
(see credentials.py for the per-environment secrets).
"""
import logging
import os

logger = logging.getLogger(__name__)


def float_from_env(name: str, default: float) -> float:
    """Positive float from env; an unparsable or non-positive value falls back to default with a warning."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if not value > 0:
        logger.warning("Ignoring %s=%r (expected a positive number); using %s", name, raw, default)
        return default
    return value


# Directory holding one <slot>.txt file per cached token
TOKEN_DIR = os.environ.get("TOKEN_CACHE_DIR", "tokens")

# Default slot (service name) used by the CLI and the HTTP sidecar
DEFAULT_SLOT = os.environ.get("TOKEN_CACHE_SLOT", "salesforce")

# Probe endpoint: any authenticated GET that answers with errorCode when the session is dead
VALIDATION_URL = os.environ.get("TOKEN_CACHE_VALIDATION_URL", "")

# Token endpoint for the password grant
TOKEN_URL = os.environ.get("TOKEN_CACHE_TOKEN_URL", "")

# "testing" or "production"; selects which credential set is used
ENVIRONMENT = os.environ.get("TOKEN_CACHE_ENVIRONMENT", "production")

# TLS certificate verification. Only "testing" may turn it off.
VERIFY_TLS = os.environ.get("TOKEN_CACHE_VERIFY_TLS", "true").strip().lower() not in ("0", "false", "no", "off")

# Timeout (seconds) for both the probe and the token exchange
HTTP_TIMEOUT = float_from_env("TOKEN_CACHE_HTTP_TIMEOUT", 10.0)
