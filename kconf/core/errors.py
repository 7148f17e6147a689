#!/usr/bin/env python3


class KconfError(Exception):
    """Base class for all errors raised by kconf"""


class UsageError(KconfError):
    """Wrong number of arguments or an invalid flag combination"""


class NotFoundError(KconfError):
    """A referenced kubeconfig file or library entry does not exist"""


class ConflictError(KconfError):
    """An entry with the requested alias already exists"""


class LibraryIOError(KconfError):
    """Creating, reading or deleting in the library directory failed"""


class RangeError(KconfError):
    """An ordinal selector is outside the current listing"""


class ConfigError(KconfError):
    """The settings file could not be read or parsed"""
