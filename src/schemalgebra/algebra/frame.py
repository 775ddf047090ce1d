"""Recursion frame shared by the recursive algebra operations.

Descriptor nesting mirrors schema nesting, which the algebra does not
control.  Every recursive call descends one frame; past ``limit`` the
operation returns a ``depth_exceeded`` error instead of growing the stack.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from schemalgebra.domain.descriptors import Descriptor, ErrorDescriptor, ErrorKind, error

DEFAULT_MAX_DEPTH = 64

Recurse = Callable[[Descriptor, Descriptor], Descriptor]
"""Callback into an operation's dispatch, bound to the next frame."""


@dataclass(frozen=True)
class Frame:
    depth: int = 0
    limit: int = DEFAULT_MAX_DEPTH

    @property
    def exceeded(self) -> bool:
        return self.depth > self.limit

    def descend(self) -> Frame:
        return Frame(depth=self.depth + 1, limit=self.limit)

    def overflow(self, op: str) -> ErrorDescriptor:
        return error(
            ErrorKind.DEPTH_EXCEEDED,
            f"{op} nesting exceeds max depth {self.limit}",
        )


def root_frame(max_depth: int | None) -> Frame:
    return Frame(limit=DEFAULT_MAX_DEPTH if max_depth is None else max_depth)
