from __future__ import annotations

from typing import Any, Callable, ParamSpec, TypeVar

import typer

T = TypeVar("T")
P = ParamSpec("P")


def attempt(func: Callable[P, T], *args: Any, verbose: bool = False) -> T:
    """Run func, exiting with a short error message unless verbose."""
    try:
        return func(*args)
    except Exception as e:
        if verbose:
            raise
        else:
            typer.echo(f"❌  Error: {e}")
            raise SystemExit(1)
