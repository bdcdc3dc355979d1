"""
Pytest configuration for token_cache. Endpoints and credentials are fake; HTTP is always patched.
"""
import os

os.environ["TOKEN_CACHE_VALIDATION_URL"] = "https://service.example/services/data/v50.0/limits"
os.environ["TOKEN_CACHE_TOKEN_URL"] = "https://service.example/services/oauth2/token"
os.environ["TOKEN_CACHE_ENVIRONMENT"] = "testing"
os.environ["TOKEN_CACHE_SLOT"] = "salesforce"
os.environ["TOKEN_CACHE_TESTING_CLIENT_ID"] = "test-client-id"
os.environ["TOKEN_CACHE_TESTING_CLIENT_SECRET"] = "test-client-secret"
os.environ["TOKEN_CACHE_TESTING_USERNAME"] = "user@example.com"
os.environ["TOKEN_CACHE_TESTING_PASSWORD"] = "test-password"
# Never pick up a real production credential set from the developer's shell
for name in ("CLIENT_ID", "CLIENT_SECRET", "USERNAME", "PASSWORD"):
    os.environ.pop(f"TOKEN_CACHE_PRODUCTION_{name}", None)
