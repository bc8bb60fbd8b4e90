"""Simple CLI for running the map HTTP service.

Usage:
    python start_api.py [--host HOST] [--port P] [--hash-func NAME]

Values default to environment variables API_HOST, API_PORT and HASH_FUNC
when set.
"""

import argparse
import os
from typing import List

import uvicorn

from hashtree.utils.hashing import HASH_FUNCTIONS


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    env = os.environ
    parser = argparse.ArgumentParser(description="Start the hash tree map service")
    parser.add_argument("--host", default=env.get("API_HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(env.get("API_PORT", 8000)))
    parser.add_argument(
        "--hash-func",
        dest="hash_func",
        choices=sorted(HASH_FUNCTIONS),
        default=env.get("HASH_FUNC", "sha1"),
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    os.environ["HASH_FUNC"] = args.hash_func
    uvicorn.run("api.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
