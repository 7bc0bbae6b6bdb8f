"""
Settings commands.
"""

import sys
from dataclasses import asdict, replace

from rich import print_json

from english_words.core.settings import SETTING_KEYS, config_path, load_settings, save_settings


def add_subparser(subparsers):
    parser = subparsers.add_parser("config", help="Show or change settings")
    config_sub = parser.add_subparsers(dest="config_command", required=True)

    # show
    show_p = config_sub.add_parser("show", help="Show current settings")
    show_p.set_defaults(func=config_show)

    # set
    set_p = config_sub.add_parser("set", help="Change a setting")
    set_p.add_argument("key", choices=SETTING_KEYS, help="Setting name")
    set_p.add_argument("value", help="New value")
    set_p.set_defaults(func=config_set)


def mask(secret: str) -> str:
    if not secret:
        return ""
    if len(secret) <= 8:
        return "*" * len(secret)
    return secret[:4] + "…" + secret[-4:]


def config_show(args):
    try:
        settings = load_settings(args.config)
    except (OSError, ValueError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    data = asdict(settings)
    data["gigachat_credentials"] = mask(settings.gigachat_credentials)
    print(f"File: {config_path(args.config)}")
    print_json(data=data)


def config_set(args):
    try:
        settings = load_settings(args.config, use_env=False)
        path = save_settings(replace(settings, **{args.key: args.value}), args.config)
    except (OSError, ValueError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    print(f"✓ {args.key} saved to {path}")
