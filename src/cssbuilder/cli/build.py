"""CLI command: cssbuilder build -- assemble a selector from part tokens."""

from __future__ import annotations

import logging
import sys

import click

from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import BuildConfig
from cssbuilder.errors import SelectorError
from cssbuilder.model.category import Category
from cssbuilder.model.combinator import Combinator
from cssbuilder.model.selector import Selector

Parts = list[tuple[Category, str]]


def _split_tokens(
    tokens: tuple[str, ...], separator: str
) -> tuple[list[Parts], list[str]]:
    """Split tokens into per-fragment parts and the combinators between them."""
    fragments: list[Parts] = []
    combinators: list[str] = []
    current: Parts | None = None
    for token in tokens:
        name, sep, value = token.partition(separator)
        if sep and name.strip():
            if current is None:
                current = []
                fragments.append(current)
            current.append((Category.from_name(name), value))
            continue
        if current is None:
            raise click.UsageError(f"Combinator {token!r} has no selector before it")
        combinator = Combinator.lookup(token)
        combinators.append(combinator.value if combinator else token)
        current = None
    if current is None:
        raise click.UsageError("Selector must not end with a combinator")
    return fragments, combinators


def assemble(
    tokens: tuple[str, ...],
    config: BuildConfig | None = None,
    builder: SelectorBuilder | None = None,
) -> Selector:
    """Build the selector described by *tokens*, folding combinators left to right."""
    config = config or BuildConfig()
    builder = builder or SelectorBuilder()
    fragments, combinators = _split_tokens(tokens, config.part_separator)

    result: Selector = builder.build(fragments[0])
    for combinator, parts in zip(combinators, fragments[1:]):
        result = builder.combine(result, combinator, builder.build(parts))
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--separator",
    default=BuildConfig.part_separator,
    show_default=True,
    help="Separator between part name and value",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each step at DEBUG level")
def build(tokens: tuple[str, ...], separator: str, verbose: bool) -> None:
    """Build a CSS selector from TOKENS.

    Each token is either a part written as NAME=VALUE (element, id, class,
    attr, pseudo-class, pseudo-element) or a combinator (">", "+", "~", "||",
    " " or a name such as child or descendant) starting a new selector.

    \b
    Example:
        cssbuilder build element=a id=main class=nav + element=p
    """
    config = BuildConfig(part_separator=separator)
    logging.basicConfig(level=logging.DEBUG if verbose else config.log_level)

    try:
        selector = assemble(tokens, config)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.serialize())
