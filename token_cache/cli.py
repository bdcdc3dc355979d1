"""
CLI: python -m token_cache.cli [--slot NAME] [--print]
Exit status: 0 token available, 1 authentication unavailable, 2 store or configuration error.
"""
import argparse
import logging
import sys

from token_cache.errors import ConfigurationError, StoreUnavailable
from token_cache.manager import TokenManager

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check the cached token and re-authenticate if needed.")
    p.add_argument("--slot", help="Token slot (default TOKEN_CACHE_SLOT).")
    p.add_argument("--print", dest="do_print", action="store_true", help="Print the token on stdout.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        token = TokenManager.from_config(args.slot).get_token()
    except (StoreUnavailable, ConfigurationError, ValueError) as e:
        logger.error("%s", e)
        return 2

    if not token:
        logger.error("No usable token; authentication is currently unavailable")
        return 1
    if args.do_print:
        print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
