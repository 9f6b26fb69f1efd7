from __future__ import annotations

import logging
from typing import List

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from carnegie_randomizer import __version__
from carnegie_randomizer.domain.buildings import TileSet
from carnegie_randomizer.domain.cities import Region
from carnegie_randomizer.engine.randomizer import GameSetup, generate_setup
from carnegie_randomizer.engine.seeding import format_seed, parse_seed, random_seed
from carnegie_randomizer.engine.types import Permanent, Players, SetupConfig, SetupConfigError, TypeLimit
from carnegie_randomizer.engine.visibility import RowCell

STACK_MARKERS = {"half": "◐", "full": "●"}
DONATION_MARKERS = {True: "●", False: "○"}
REGION_STYLES = {
    Region.WEST: "yellow",
    Region.MIDWEST: "green",
    Region.EAST: "red",
    Region.SOUTH: "magenta",
}


def _cell_text(cell: RowCell) -> Text:
    if cell.visible_copies == 0:
        return Text("")
    text = Text(f"{STACK_MARKERS[cell.stack]} ")
    text.append(str(cell.value), style="bold blue" if cell.accent else "")
    return text


def render_buildings(setup: GameSetup) -> Table:
    rows = setup.building_cells()
    width = max((len(cells) for cells in rows), default=0)
    table = Table(title="Department tiles", show_header=False, min_width=24)
    for _ in range(max(width, 1)):
        table.add_column(justify="center")
    for cells in rows:
        rendered: List[Text] = [_cell_text(cell) for cell in cells]
        rendered.extend(Text("") for _ in range(width - len(cells)))
        table.add_row(*rendered)
    return table


def render_donations(setup: GameSetup) -> Table:
    table = Table(title="Blocked donations", show_header=False, min_width=24)
    for _ in setup.donations.grid[0]:
        table.add_column(justify="center")
    for row in setup.donations.grid:
        table.add_row(*(DONATION_MARKERS[blocked] for blocked in row))
    return table


def render_cities(setup: GameSetup) -> Table:
    table = Table(title="Blocked cities", show_header=False, min_width=24)
    table.add_column(justify="right")
    table.add_column(justify="left")
    for city, count in setup.donations.cities.items():
        label = f"{count} ×" if count > 1 else ""
        table.add_row(label, Text(city.display_name, style=REGION_STYLES[city.region]))
    return table


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.command()
@click.option(
    "--seed",
    "seed_text",
    default=None,
    help="8-digit seed to reproduce. Default: draw a fresh one.",
)
@click.option(
    "--players",
    default=Players.FOUR.value,
    show_default=True,
    type=click.Choice([member.value for member in Players], case_sensitive=False),
    help="Player count; 'all' shows every placed department.",
)
@click.option(
    "--tiles",
    default=TileSet.BASE.value,
    show_default=True,
    type=click.Choice([member.value for member in TileSet], case_sensitive=False),
    help="Department tiles taking part.",
)
@click.option(
    "--limit",
    default=str(TypeLimit.FOUR.value),
    show_default=True,
    type=click.Choice([str(member.value) for member in TypeLimit]),
    help="Different departments per row.",
)
@click.option(
    "--permanent",
    default=Permanent.ONE.value,
    show_default=True,
    type=click.Choice([member.value for member in Permanent]),
    help="Permanent (blue) departments per row; '+' allows up to two.",
)
@click.option(
    "--canonical/--no-canonical",
    default=False,
    show_default=True,
    help="Also print the sorted department list of the shuffled set.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log engine decisions to stderr.")
@click.version_option(__version__, prog_name="carnegie-randomizer")
def main(
    seed_text: str | None,
    players: str,
    tiles: str,
    limit: str,
    permanent: str,
    canonical: bool,
    verbose: bool,
):
    """Generate a reproducible Carnegie setup from a seed."""
    _configure_logging(verbose)
    console = Console()

    try:
        seed = random_seed() if seed_text is None else parse_seed(seed_text)
    except SetupConfigError as exc:
        raise click.BadParameter(str(exc), param_hint="--seed") from exc

    try:
        config = SetupConfig.from_choices(players=players, tiles=tiles, limit=limit, permanent=permanent)
    except SetupConfigError as exc:
        raise click.BadParameter(str(exc)) from exc

    setup = generate_setup(seed, config)

    console.print(f"Seed: [bold]{format_seed(setup.seed)}[/bold]")
    if canonical:
        console.print(f"Departments: {setup.canonical_buildings()}", soft_wrap=True)
    console.print(render_buildings(setup))
    if setup.donation_budget > 0:
        console.print(render_donations(setup))
        console.print(render_cities(setup))


if __name__ == "__main__":
    main()
