"""
Lookup command.
"""

import asyncio
import sys
from dataclasses import replace

import redis
from rich import print_json

from english_words.core.errors import EnglishWordsError
from english_words.core.lookup import create_service
from english_words.core.pipeline import add_word, lookup_block
from english_words.core.settings import load_settings
from english_words.core.store import DocumentStore, FileDocumentStore, RedisDocumentStore


def add_subparser(subparsers):
    parser = subparsers.add_parser("lookup", help="Translate a word and add it to the word list")
    parser.add_argument("word", help="English word")
    parser.add_argument("--vault", default=".", help="Directory the word list lives in (default: .)")
    parser.add_argument("--file", help="Word list path inside the vault (default: from settings)")
    parser.add_argument("--redis-db", type=int, help="Store the word list in local Redis db N instead")
    parser.add_argument("--dry-run", action="store_true", help="Print the entry, don't save it")
    parser.add_argument("--json", action="store_true", help="Print the parsed result as JSON")
    parser.add_argument("--verify-ssl", action="store_true", help="Validate the GigaChat certificates")
    parser.set_defaults(func=lookup_word)


def get_store(args) -> DocumentStore:
    if args.redis_db is not None:
        return RedisDocumentStore(redis.Redis(host="localhost", port=6379, db=args.redis_db))
    return FileDocumentStore(args.vault)


def lookup_word(args):
    try:
        settings = load_settings(args.config)
    except (OSError, ValueError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.file:
        settings = replace(settings, file_path=args.file)
    service = create_service(verify_server_certificate=args.verify_ssl)

    try:
        if args.dry_run:
            result, block = asyncio.run(lookup_block(args.word, settings, service))
        else:
            added = asyncio.run(add_word(args.word, settings, service, get_store(args)))
            result, block = added.result, added.block
    except (EnglishWordsError, OSError, redis.RedisError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.json:
        print_json(data=result.to_dict())
    elif args.dry_run:
        print(block)

    if not args.dry_run:
        print(f'✓ "{result.word}" saved to {settings.file_path}')
