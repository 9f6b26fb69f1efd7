from types import SimpleNamespace

from click.testing import CliRunner
from rich.console import Console

from carnegie_randomizer.cli import main, render_cities
from carnegie_randomizer.domain.cities import City
from carnegie_randomizer.engine.types import DonationResult


def test_cli_prints_seed_and_buildings() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--seed", "1234"])
    assert result.exit_code == 0
    assert "Seed: 00001234" in result.output
    assert "Department tiles" in result.output
    assert "Blocked donations" not in result.output


def test_cli_two_players_shows_blocked_sections() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--seed", "42", "--players", "2"])
    assert result.exit_code == 0
    assert "Blocked donations" in result.output
    assert "Blocked cities" in result.output


def test_cli_output_is_reproducible() -> None:
    runner = CliRunner()
    args = ["--seed", "77", "--players", "3", "--tiles", "both", "--limit", "6", "--permanent", "1+"]
    first = runner.invoke(main, args)
    second = runner.invoke(main, args)
    assert first.exit_code == 0
    assert first.output == second.output


def test_cli_canonical_listing() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--seed", "5", "--canonical"])
    assert result.exit_code == 0
    assert "Departments:" in result.output


def test_cli_rejects_bad_seed() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--seed", "not-a-seed"])
    assert result.exit_code == 2
    assert "--seed" in result.output


def test_cli_rejects_unknown_choice() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--players", "5"])
    assert result.exit_code == 2


def test_cli_random_seed_when_omitted() -> None:
    runner = CliRunner()
    result = runner.invoke(main, [])
    assert result.exit_code == 0
    assert "Seed: " in result.output


def test_cli_version() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "carnegie-randomizer" in result.output


def test_city_count_shown_only_above_one() -> None:
    donations = DonationResult(cities={City.DENVER: 1, City.CHICAGO: 3})
    console = Console(record=True, width=80)
    console.print(render_cities(SimpleNamespace(donations=donations)))
    text = console.export_text()
    assert "Denver" in text
    assert "Chicago" in text
    assert "3 ×" in text
    assert "1 ×" not in text
