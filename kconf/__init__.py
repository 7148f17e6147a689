#!/usr/bin/env python3

"""
kconf - A Python utility for managing a library of kubeconfig files
Features:
- Named kubeconfig references kept as symbolic links in one directory
- Selection by alias or by position in the listing
- Activation through an `export KUBECONFIG=...` line for the shell to eval
"""

__version__ = "0.1.0"

from .core.errors import (
    ConfigError,
    ConflictError,
    KconfError,
    LibraryIOError,
    NotFoundError,
    RangeError,
    UsageError,
)
from .core.library import Entry, KubeconfigLibrary, resolve_library_path
from .core.resolver import resolve
from .core.selector import Operation, OperationFlags, classify, select_operation
from .core.operations import (
    add_kubeconfig,
    list_kubeconfigs,
    remove_kubeconfig,
    set_kubeconfig,
)
from .cli.cli import run_cli
