import argparse
import logging
import sys
from typing import cast

from tv_info.db.tmdb import DEFAULT_TIMEOUT, FetchError, TMDBClient, get_api_key


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the first page of TMDB TV search results.")
    _ = parser.add_argument("query", type=str, help="Keywords to search for")
    _ = parser.add_argument("--timeout", help="Seconds to wait for the TMDB request", type=float, default=DEFAULT_TIMEOUT)
    _ = parser.add_argument("--verbose", help="Log the request to stderr", action="store_true")
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
    try:
        response = client.search_tv(cast(str, args.query))
    except FetchError as exc:
        sys.exit(f"Error: {exc}")

    if not response.results:
        print("No results found.")
        return

    for show in response.results:
        print(f"{show.id}: {show.name}")
    if response.total_pages > 1:
        print(f"({response.total_results} results over {response.total_pages} pages, showing page {response.page})")


if __name__ == "__main__":
    main()
