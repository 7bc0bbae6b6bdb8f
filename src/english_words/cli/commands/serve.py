"""
Serve command: run the HTTP API.
"""

import os

import uvicorn

from english_words.core.settings import CONFIG_ENV
from english_words.server.deps import VAULT_ENV


def add_subparser(subparsers):
    parser = subparsers.add_parser("serve", help="Run the HTTP API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--vault", default=".", help="Directory the word list lives in (default: .)")
    parser.set_defaults(func=serve)


def serve(args):
    # The app reads its settings per request; hand it the same files.
    if args.config:
        os.environ[CONFIG_ENV] = args.config
    os.environ[VAULT_ENV] = args.vault
    uvicorn.run("english_words.server.main:app", host=args.host, port=args.port)
