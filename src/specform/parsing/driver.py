"""Explicit-stack driver for the recursive schema builders.

Every builder in this package is a generator. Instead of calling another
builder directly it yields the sub-builder and receives the sub-builder's
return value back from the ``yield`` expression::

    def build_level(properties):
        fields = []
        for key, prop in properties.items():
            fields.extend((yield build_property(key, prop)))
        return tuple(fields)

:func:`run` keeps the pending builders on a list, so schema nesting depth is
bounded by memory rather than by the interpreter's recursion limit.
"""

from typing import Any, Generator, TypeVar

T = TypeVar("T")

Build = Generator["Build", Any, T]


def run(build: Build[T]) -> T:
    stack = [build]
    value = None
    while True:
        try:
            request = stack[-1].send(value)
        except StopIteration as stop:
            stack.pop()
            if not stack:
                return stop.value
            value = stop.value
            continue
        stack.append(request)
        value = None
