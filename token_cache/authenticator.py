"""
Password grant (grant_type=password) against the service's token endpoint.
Returns the access_token or raises AuthFailure; credentials are never logged.
"""
import logging

import httpx

from token_cache.credentials import Credentials, Environment
from token_cache.errors import AuthFailure
from token_cache.validator import check_tls

logger = logging.getLogger(__name__)


class PasswordGrantAuthenticator:
    def __init__(
        self,
        token_url: str,
        *,
        verify_tls: bool = True,
        timeout: float = 10.0,
        environment: "str | bool | Environment" = Environment.PRODUCTION,
    ):
        check_tls("token exchange", token_url, verify_tls, environment)
        self.token_url = token_url
        self.verify_tls = verify_tls
        self.timeout = timeout

    def authenticate(self, credentials: Credentials) -> str:
        """
        POST the form-encoded password grant and return access_token.
        Raises AuthFailure on transport error, non-2xx status, non-JSON body, or missing access_token.
        """
        try:
            r = httpx.post(
                self.token_url,
                data=credentials.as_form(),
                headers={"Accept": "application/json"},
                timeout=self.timeout,
                verify=self.verify_tls,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise AuthFailure(f"Token request to {self.token_url} failed: {e}") from e

        if not 200 <= r.status_code < 300:
            raise AuthFailure(f"Token endpoint {self.token_url} returned HTTP {r.status_code}")

        try:
            data = r.json()
        except ValueError as e:
            raise AuthFailure(f"Token endpoint {self.token_url} returned a non-JSON body") from e

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not isinstance(access_token, str) or not access_token:
            raise AuthFailure(f"Token endpoint {self.token_url} response has no access_token")

        logger.info("Obtained new access token from %s (client_id=%s)", self.token_url, credentials.client_id)
        return access_token
