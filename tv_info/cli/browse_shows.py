import argparse
import logging
from typing import cast

from tv_info.db.tmdb import DEFAULT_TIMEOUT, TMDBClient, get_api_key
from tv_info.machine import run
from tv_info.prompt import Prompt
from tv_info.session import Session


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Search TMDB for a TV show and browse its seasons and episodes."
    )
    _ = parser.add_argument("--timeout", help="Seconds to wait for each TMDB request", type=float, default=DEFAULT_TIMEOUT)
    _ = parser.add_argument("--verbose", help="Log requests and state changes to stderr", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if cast(bool, args.verbose) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    api_key = get_api_key()
    if api_key is None:
        print("Please set TMDB_API_KEY environment variable")
        return

    client = TMDBClient(api_key, timeout=cast(float, args.timeout))
    run(Session(api_key=api_key), Prompt(), client)


if __name__ == "__main__":
    main()
