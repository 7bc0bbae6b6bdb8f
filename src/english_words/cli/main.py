"""
English Words CLI.
"""

import argparse
import logging

from english_words.cli.commands import config, lookup, serve


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="english-words", description="English Words CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", help="Settings file (default: ~/.config/english-words/settings.yaml)")
    subparsers = parser.add_subparsers(dest="command")

    lookup.add_subparser(subparsers)
    config.add_subparser(subparsers)
    serve.add_subparser(subparsers)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
