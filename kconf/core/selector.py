#!/usr/bin/env python3

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List

from .errors import UsageError
from .library import KubeconfigLibrary
from .operations import (
    add_kubeconfig,
    list_kubeconfigs,
    remove_kubeconfig,
    set_kubeconfig,
)

Handler = Callable[[KubeconfigLibrary, List[str]], None]


class Operation(Enum):
    """The single operation one kconf invocation performs"""

    ADD = "add"
    SET = "set"
    LIST = "list"
    REMOVE = "remove"
    NONE = "none"


# Operation inferred from the number of positionals when no switch is given
DEFAULT_BY_ARGC = {
    0: Operation.LIST,
    1: Operation.SET,
    2: Operation.ADD,
}


@dataclass(frozen=True)
class OperationFlags:
    """The -a/-s/-l/-r switches exactly as given on the command line"""

    add: bool = False
    set: bool = False
    list: bool = False
    remove: bool = False

    def selected(self) -> List[Operation]:
        chosen = []
        if self.add:
            chosen.append(Operation.ADD)
        if self.set:
            chosen.append(Operation.SET)
        if self.list:
            chosen.append(Operation.LIST)
        if self.remove:
            chosen.append(Operation.REMOVE)
        return chosen

    def validate(self) -> bool:
        """No switch or exactly one switch"""
        return len(self.selected()) <= 1


def classify(flags: OperationFlags, argc: int) -> Operation:
    """Pick the operation: an explicit switch wins, else infer from argc"""
    chosen = flags.selected()
    if chosen:
        return chosen[0]
    return DEFAULT_BY_ARGC.get(argc, Operation.NONE)


def select_operation(flags: OperationFlags, argc: int) -> Operation:
    """Validate the switches, then classify"""
    if not flags.validate():
        raise UsageError("only one of -a, -s, -l, -r may be given")
    return classify(flags, argc)


def _noop(library: KubeconfigLibrary, args: List[str]) -> None:
    return None


def get_handler(operation: Operation) -> Handler:
    handlers: Dict[Operation, Handler] = {
        Operation.ADD: add_kubeconfig,
        Operation.SET: set_kubeconfig,
        Operation.LIST: list_kubeconfigs,
        Operation.REMOVE: remove_kubeconfig,
    }
    return handlers.get(operation, _noop)
