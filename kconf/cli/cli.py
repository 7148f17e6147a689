#!/usr/bin/env python3

import argparse
import os
import sys
from typing import List, NoReturn, Optional

from colorama import Fore, Style

from .. import __version__
from ..core.errors import KconfError
from ..core.library import KubeconfigLibrary
from ..core.selector import OperationFlags, get_handler, select_operation
from ..utils.config import (
    DEFAULT_CONFIG_PATH,
    create_default_config,
    ensure_user_config_dir,
    find_config_file,
    load_config,
)

EPILOG = """\
Without a switch the operation follows the number of arguments:
  kconf                   list the library
  kconf <index|alias>     set the active kubeconfig
  kconf <file> <alias>    add a kubeconfig

Activate a kubeconfig with:  eval "$(kconf -s <index|alias>)"

Indexes are positions in the current alias-sorted listing. They shift
whenever kubeconfigs are added or removed, so list again after changes.

Environment:
  KCONF_LIBRARY_PATH   library directory (default: ~/.kconf)
  KCONF_CONFIG         settings file
  KUBECONFIG           the active kubeconfig, marked with '*' in the listing
"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog="kconf",
        description=f"kconf v{__version__} - A utility for managing a library of kubeconfig files",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-a", dest="add", action="store_true", help="Add kubeconfig to the library"
    )
    parser.add_argument(
        "-s", dest="set", action="store_true", help="Set current kubeconfig"
    )
    parser.add_argument(
        "-l",
        dest="list",
        action="store_true",
        help="List all kubeconfigs from the library",
    )
    parser.add_argument(
        "-r",
        dest="remove",
        action="store_true",
        help="Remove kubeconfig from the library",
    )
    parser.add_argument(
        "--config",
        help=f"Settings file (default: ~/.config/kconf/{DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Initialize a default settings file in the user's config directory",
    )
    parser.add_argument(
        "--version", action="store_true", help="Show the version and exit"
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="<file> [alias] for -a, <index|alias> for -s and -r",
    )

    return parser.parse_intermixed_args(argv)


def fail(stage: str, error: Exception) -> NoReturn:
    """Report an error on stderr and exit with status 1"""
    print(f"{Fore.RED}error {stage}: {error}{Style.RESET_ALL}", file=sys.stderr)
    sys.exit(1)


def handle_init_command() -> None:
    """Handle the --init command to create a default settings file"""
    user_config_dir = ensure_user_config_dir()
    user_config_path = os.path.join(user_config_dir, DEFAULT_CONFIG_PATH)

    if os.path.isfile(user_config_path):
        print(
            f"{Fore.YELLOW}Config file already exists at {user_config_path}{Style.RESET_ALL}"
        )
        return

    create_default_config(user_config_path)
    print(f"{Fore.GREEN}Created default config file at {user_config_path}{Style.RESET_ALL}")


def run_cli(argv: Optional[List[str]] = None) -> None:
    """Run the command-line interface"""
    args = parse_args(argv)

    # Show version and exit if requested
    if args.version:
        print(f"kconf v{__version__}")
        return

    try:
        # Initialize settings file if requested
        if args.init:
            try:
                handle_init_command()
            except (KconfError, OSError) as e:
                fail("creating config", e)
            return

        flags = OperationFlags(
            add=args.add, set=args.set, list=args.list, remove=args.remove
        )
        try:
            operation = select_operation(flags, len(args.args))
        except KconfError as e:
            fail("validating flags", e)

        try:
            settings = load_config(find_config_file(args.config))
        except KconfError as e:
            fail("loading settings", e)

        try:
            library = KubeconfigLibrary.from_settings(settings)
        except KconfError as e:
            fail("getting config path", e)

        try:
            get_handler(operation)(library, args.args)
        except KconfError as e:
            fail("handling request", e)

    except KeyboardInterrupt:
        print(f"\n{Fore.YELLOW}Interrupted{Style.RESET_ALL}")
        sys.exit(130)


if __name__ == "__main__":
    run_cli()
