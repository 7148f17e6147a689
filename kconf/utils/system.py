#!/usr/bin/env python3

import os

from ..core.errors import LibraryIOError


def get_real_home() -> str:
    """Get the real user's home directory even when running with sudo"""
    if "SUDO_USER" in os.environ and os.environ.get("HOME") == "/root":
        real_user = os.environ["SUDO_USER"]
        home = os.path.expanduser(f"~{real_user}")
    else:
        home = os.path.expanduser("~")

    # expanduser leaves the path untouched when the home cannot be determined
    if home.startswith("~"):
        raise LibraryIOError("could not determine the user's home directory")
    return home
