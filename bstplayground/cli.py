"""Command-line entry point for the binary tree playground."""

import logging
from typing import Optional

import click

from .config import ElementType, SessionConfig
from .session import Playground, Renderer

logger = logging.getLogger(__name__)

TYPE_MENU = "\n".join(
    f"{index} - {element_type.label}"
    for index, element_type in enumerate(ElementType, start=1)
)


def choose_element_type(choice: str) -> ElementType:
    """Resolve a menu answer, falling back to int on anything unknown."""
    try:
        return ElementType.from_choice(choice)
    except ValueError:
        click.echo("Invalid choice! Using int by default.")
        return ElementType.INT


def make_renderer(config: SessionConfig) -> Renderer:
    """Build the console renderer.

    The console itself never strips styles; the renderer decides per line,
    so the 'colors' command can turn them back on mid-session.
    """
    return Renderer(colors=config.colors)


@click.command()
@click.option(
    "--type", "type_name",
    type=click.Choice([t.value for t in ElementType]),
    help="Element type stored in every tree (prompted for when omitted)",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option(
    "--history-limit",
    type=int,
    default=20,
    show_default=True,
    help="Number of commands and tree operations kept in history",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="bst-playground")
def main(type_name: Optional[str], no_color: bool, history_limit: int, verbose: bool):
    """Binary Tree Playground: build and inspect named binary search trees."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if type_name is None:
        click.echo("Binary Tree Playground")
        click.echo("============================")
        click.echo("Choose data type:")
        click.echo(TYPE_MENU)
        choice = click.prompt("Enter choice (1-4)", default="1", show_default=False)
        element_type = choose_element_type(choice)
    else:
        element_type = ElementType(type_name)

    config = SessionConfig(
        element_type=element_type,
        history_limit=history_limit,
        tree_history_limit=history_limit,
        colors=not no_color,
    )
    errors = config.validate()
    if errors:
        raise click.BadParameter("; ".join(errors), param_hint="--history-limit")

    logger.debug("Starting playground with %s", config)
    Playground(config, make_renderer(config)).run()


if __name__ == "__main__":
    main()
