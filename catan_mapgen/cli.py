from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from catan_mapgen.domain.board import Board, BoardShape, RuleConfig
from catan_mapgen.domain.topology import graph_for
from catan_mapgen.generation.builder import BoardBuilder
from catan_mapgen.generation.errors import GenerationError
from catan_mapgen.generation.types import GenerationTrace

TERRAIN_STYLES = {
    "grain": "yellow",
    "wood": "green",
    "sheep": "bright_green",
    "ore": "bright_black",
    "brick": "red",
    "desert": "tan",
}


def board_table(board: Board) -> Table:
    graph = graph_for(board.shape)
    table = Table(title=f"{board.shape.value.capitalize()} Board")
    table.add_column("TILE", justify="right", style="cyan", no_wrap=True)
    table.add_column("TERRAIN")
    table.add_column("NUMBER", justify="right")
    table.add_column("NEIGHBORS")
    for index, (terrain, number) in enumerate(zip(board.terrains, board.numbers)):
        style = TERRAIN_STYLES.get(terrain.value, "")
        number_text = "-" if number is None else str(number)
        if number in (6, 8):
            number_text = f"[bold red]{number_text}[/bold red]"
        table.add_row(
            str(index),
            f"[{style}]{terrain.value}[/{style}]" if style else terrain.value,
            number_text,
            ",".join(str(neighbor) for neighbor in sorted(graph.neighbors(index))),
        )
    return table


def trace_table(trace: GenerationTrace) -> Table:
    table = Table(title="Generation Trace")
    table.add_column("STEP")
    table.add_column("VALUE", justify="right")
    for key, value in trace.to_dict().items():
        table.add_row(key, str(value))
    return table


@click.command()
@click.option(
    "--shape",
    default=BoardShape.CLASSIC.value,
    show_default=True,
    type=click.Choice([shape.value for shape in BoardShape], case_sensitive=False),
    help="Board layout to generate.",
)
@click.option("--seed", default=None, type=int, help="Seed for reproducible boards.")
@click.option(
    "--hot-numbers-can-touch/--no-hot-numbers-can-touch",
    default=False,
    show_default=True,
    help="Allow a 6 next to an 8.",
)
@click.option(
    "--extreme-pair-can-touch/--no-extreme-pair-can-touch",
    default=True,
    show_default=True,
    help="Allow a 2 next to a 12.",
)
@click.option(
    "--same-number-can-touch/--no-same-number-can-touch",
    default=True,
    show_default=True,
    help="Allow equal numbers other than 6 and 8 to touch.",
)
@click.option(
    "--same-resource-can-touch/--no-same-resource-can-touch",
    default=True,
    show_default=True,
    help="Classic board only: allow pairs of the same terrain.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the board as JSON.")
@click.option("--verbose", is_flag=True, default=False, help="Log generation steps.")
def main(
    shape: str,
    seed: int | None,
    hot_numbers_can_touch: bool,
    extreme_pair_can_touch: bool,
    same_number_can_touch: bool,
    same_resource_can_touch: bool,
    as_json: bool,
    verbose: bool,
):
    """Generate a randomized board that honors the chosen placement rules."""
    console = Console()
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    rules = RuleConfig(
        hot_numbers_can_touch=hot_numbers_can_touch,
        extreme_pair_can_touch=extreme_pair_can_touch,
        same_number_can_touch=same_number_can_touch,
        same_resource_can_touch=same_resource_can_touch,
    )
    try:
        result = BoardBuilder(rules, seed=seed).build(BoardShape(shape.lower()))
    except GenerationError as exc:
        raise click.ClickException(f"{exc} Try different rules.") from exc

    if as_json:
        payload = {
            **result.board.to_dict(),
            "rules": rules.to_dict(),
            "trace": result.trace.to_dict(),
        }
        click.echo(json.dumps(payload, indent=2))
        return

    console.print(board_table(result.board))
    console.print(trace_table(result.trace))
    if not result.trace.terrain_compliant:
        console.print("[yellow]Terrain layout breaks the cluster limit (best effort).[/yellow]")


if __name__ == "__main__":
    main()
