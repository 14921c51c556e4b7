"""The table of builtin commands known to every shell."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .common import Builtin


@dataclass(frozen=True, slots=True)
class BuiltinSpec:
    name: str
    handler: Builtin


class BuiltinTable:
    """Builtins keyed by name, kept in registration order.

    A name can be registered once; shells copy the table when they start, so
    later registrations only affect shells created afterwards.
    """

    def __init__(self) -> None:
        self._specs: dict[str, BuiltinSpec] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[BuiltinSpec]:
        return iter(tuple(self._specs.values()))

    def add(self, name: str, handler: Builtin) -> Builtin:
        if name in self._specs:
            raise ValueError(f"Builtin '{name}' is already registered")
        self._specs[name] = BuiltinSpec(name, handler)
        return handler

    def builtin(self, name: str) -> Callable[[Builtin], Builtin]:
        """Decorator registering a ``(shell, args)`` function as builtin ``name``."""

        def decorator(func: Builtin) -> Builtin:
            return self.add(name, func)

        return decorator


BUILTINS = BuiltinTable()


__all__ = ["BUILTINS", "BuiltinSpec", "BuiltinTable"]
