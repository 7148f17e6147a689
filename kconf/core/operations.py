#!/usr/bin/env python3

import os
import shlex
from typing import List

from colorama import Fore, Style

from .errors import ConflictError, NotFoundError, UsageError
from .library import KubeconfigLibrary
from .resolver import resolve


def derive_alias(file_path: str) -> str:
    """Alias for a file added without one: its base name up to the first dot"""
    return os.path.basename(file_path).split(".")[0]


def validate_alias(alias: str) -> None:
    if not alias or alias in (".", ".."):
        raise UsageError(f"invalid alias: {alias!r}")
    if os.sep in alias or (os.altsep and os.altsep in alias):
        raise UsageError(f"alias must not contain a path separator: {alias!r}")


def add_kubeconfig(library: KubeconfigLibrary, args: List[str]) -> None:
    """Add a kubeconfig to the library as ``args[1]`` or a derived alias"""
    if len(args) < 1:
        raise UsageError("not enough arguments")

    file_path = os.path.abspath(args[0])
    alias = args[1] if len(args) > 1 and args[1] else derive_alias(args[0])
    validate_alias(alias)

    if not os.path.exists(file_path):
        raise NotFoundError(f"kubeconfig not found: {file_path}")

    if library.exists(alias):
        raise ConflictError(f"kubeconfig already exists: {alias!r}")

    library.create_entry(alias, file_path)
    print(f"{Fore.GREEN}{alias} -> {file_path} added{Style.RESET_ALL}")


def list_kubeconfigs(library: KubeconfigLibrary, args: List[str]) -> None:
    """Print every entry with its ordinal, marking the active one with '*'"""
    active = library.active_path()

    for i, entry in enumerate(library.list_entries(), start=1):
        star = "* " if entry.path == active else "  "
        print(f"{star}{i}) {entry.alias}")


def set_kubeconfig(library: KubeconfigLibrary, args: List[str]) -> None:
    """
    Print the shell statement that activates the selected kubeconfig.

    A child process cannot change its parent's environment, so the caller
    evaluates the output: eval "$(kconf -s 2)".
    """
    if not args:
        raise UsageError("not enough arguments")

    entry = resolve(args[0], library.list_entries())
    print(f"export {library.kubeconfig_var}={shlex.quote(entry.path)}")


def remove_kubeconfig(library: KubeconfigLibrary, args: List[str]) -> None:
    """Remove the selected entry; the kubeconfig file itself is kept"""
    if not args:
        raise UsageError("not enough arguments")

    entry = resolve(args[0], library.list_entries())
    target = library.read_target(entry)
    library.delete_entry(entry)
    print(f"{Fore.GREEN}{entry.alias} -> {target} removed{Style.RESET_ALL}")
