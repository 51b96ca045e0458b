"""
Command line access to the posts resource.

Usage:
    # All posts as a JSON array
    post-client list

    # One post
    post-client get 1

    # Another upstream, config from a .env file
    post-client --base-url http://localhost:3000/posts get 7
    post-client --env-file .env.staging list

Exit Codes:
    0 - Success
    1 - Transport error (network, timeout)
    2 - Decode error or unexpected HTTP status
    3 - Invalid configuration
"""

import argparse
import sys
from typing import List, Optional

from .client import PostClient
from .core.env_config import format_config_summary, load_from_env
from .core.exceptions import ConfigurationError, PostClientException, TransportError


EXIT_OK = 0
EXIT_TRANSPORT = 1
EXIT_DECODE = 2
EXIT_CONFIG = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="post-client",
        description="Fetch posts from a JSON REST resource",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  post-client list
  post-client get 1
  post-client --base-url http://localhost:3000/posts --raise-for-status get 42

Settings are also read from POST_CLIENT_* environment variables and .env.
        """
    )

    parser.add_argument("--base-url", help="Root URL of the posts resource")
    parser.add_argument("--env-file", help="Read settings from this .env file")
    parser.add_argument(
        "--raise-for-status",
        action="store_true",
        default=None,
        help="Treat non-2xx responses as errors before decoding"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Enable logging to stderr at this level"
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective configuration to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="Fetch all posts")
    get_parser = subparsers.add_parser("get", help="Fetch one post by id")
    get_parser.add_argument("post_id", type=int, help="Post identifier")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint."""
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.raise_for_status is not None:
        overrides["raise_for_status"] = args.raise_for_status
    if args.log_level:
        overrides["log_enabled"] = True
        overrides["log_level"] = args.log_level
    # stdout carries the JSON result
    overrides["log_console_stream"] = "stderr"

    try:
        config = load_from_env(env_file=args.env_file, **overrides)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    if args.show_config:
        print(format_config_summary(config), file=sys.stderr)

    with PostClient(config=config) as client:
        try:
            if args.command == "list":
                output = client.codec.encode_posts(client.fetch_all_posts())
            else:
                output = client.codec.encode_post(client.fetch_post(args.post_id))
        except TransportError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_TRANSPORT
        except PostClientException as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_DECODE

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
