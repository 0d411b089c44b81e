"""Click base classes and shared parameters.

Commands and groups built with ``cls=TankCommand`` / ``cls=TankGroup``
take an ``examples=`` string. ``--examples`` prints it and exits before
any argument is parsed, so ``tankctl calc --examples`` works without
dimensions and ``--help`` stays short.
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from typing import Any, TypeVar

import click

_F = TypeVar("_F", bound=Callable[..., Any])


class _ExamplesMixin:
    """Adds an eager ``--examples`` option when examples text is given."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    is_eager=True,
                    expose_value=False,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(textwrap.indent(self.examples or "", "  "))
            ctx.exit(0)


class TankCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class TankGroup(_ExamplesMixin, click.Group):
    """Group whose ``@group.command`` subcommands are TankCommands."""

    command_class = TankCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


def dimension_arguments(func: _F) -> _F:
    """LENGTH WIDTH HEIGHT positional floats, in the configured unit."""
    for name in ("height", "width", "length"):
        func = click.argument(name, type=float)(func)
    return func


def flow_option(func: _F) -> _F:
    """``--flow GPH``: known filter flow, estimated when omitted."""
    option = click.option(
        "--flow",
        "flow_gph",
        type=float,
        help="Filter flow in gallons per hour (estimated from volume if omitted).",
    )
    return option(func)
