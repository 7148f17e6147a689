#!/usr/bin/env python3

import os
from dataclasses import dataclass
from typing import List, Optional

from ..utils.config import (
    DEFAULT_KUBECONFIG_VAR,
    DEFAULT_LIBRARY_DIR,
    LIBRARY_DIR_MODE,
    LIBRARY_PATH_VAR,
    SettingsDict,
)
from ..utils.system import get_real_home
from .errors import ConflictError, LibraryIOError, NotFoundError


@dataclass(frozen=True)
class Entry:
    """A library entry: the symlink ``path`` named ``alias``"""

    alias: str
    path: str


def resolve_library_path(settings: Optional[SettingsDict] = None) -> str:
    """
    Find the library directory and create it if it does not exist yet.

    KCONF_LIBRARY_PATH wins over the settings file, which wins over ~/.kconf.
    Only the last path component is created.
    """
    library_path = os.environ.get(LIBRARY_PATH_VAR, "").strip()
    if not library_path and settings:
        library_path = (settings.get("library_path") or "").strip()
    if library_path:
        library_path = os.path.expanduser(library_path)
    else:
        library_path = os.path.join(get_real_home(), DEFAULT_LIBRARY_DIR)

    if os.path.isdir(library_path):
        return library_path
    if os.path.lexists(library_path):
        raise LibraryIOError(f"{library_path} exists and is not a directory")

    try:
        os.mkdir(library_path, LIBRARY_DIR_MODE)
    except FileExistsError:
        pass
    except OSError as e:
        raise LibraryIOError(f"failed to create {library_path}: {e}") from e
    return library_path


class KubeconfigLibrary:
    """A directory of symlinks, each one naming a kubeconfig file"""

    def __init__(self, path: str, kubeconfig_var: str = DEFAULT_KUBECONFIG_VAR):
        self.path = path
        self.kubeconfig_var = kubeconfig_var

    @classmethod
    def from_settings(cls, settings: SettingsDict) -> "KubeconfigLibrary":
        return cls(
            resolve_library_path(settings),
            settings.get("kubeconfig_var") or DEFAULT_KUBECONFIG_VAR,
        )

    def entry_path(self, alias: str) -> str:
        return os.path.join(self.path, alias)

    def list_entries(self) -> List[Entry]:
        """
        Return the symlinks in the library sorted by alias.

        Directories and regular files are skipped. The order is the one
        ordinal selectors refer to; it changes whenever entries are added
        or removed.
        """
        try:
            with os.scandir(self.path) as it:
                names = [item.name for item in it if item.is_symlink()]
        except OSError as e:
            raise LibraryIOError(f"failed to read {self.path}: {e}") from e

        return [Entry(alias=name, path=self.entry_path(name)) for name in sorted(names)]

    def exists(self, alias: str) -> bool:
        # lexists so that dangling links still count as taken
        return os.path.lexists(self.entry_path(alias))

    def read_target(self, entry: Entry) -> str:
        try:
            return os.readlink(entry.path)
        except FileNotFoundError as e:
            raise NotFoundError(f"kubeconfig not found: {entry.alias!r}") from e
        except OSError as e:
            raise LibraryIOError(f"failed to read {entry.path}: {e}") from e

    def create_entry(self, alias: str, target: str) -> Entry:
        """Create the symlink ``alias -> target``; an existing name is never replaced"""
        entry = Entry(alias=alias, path=self.entry_path(alias))
        try:
            os.symlink(target, entry.path)
        except FileExistsError as e:
            raise ConflictError(f"kubeconfig already exists: {alias!r}") from e
        except OSError as e:
            raise LibraryIOError(f"failed to create {entry.path}: {e}") from e
        return entry

    def delete_entry(self, entry: Entry) -> None:
        """Remove the symlink itself, leaving the kubeconfig it points to alone"""
        try:
            os.unlink(entry.path)
        except FileNotFoundError as e:
            raise NotFoundError(f"kubeconfig not found: {entry.alias!r}") from e
        except OSError as e:
            raise LibraryIOError(f"failed to remove {entry.path}: {e}") from e

    def active_path(self) -> Optional[str]:
        """The currently exported kubeconfig, if any"""
        return os.environ.get(self.kubeconfig_var)
