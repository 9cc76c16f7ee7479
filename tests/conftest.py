# tests/conftest.py
import csv
from pathlib import Path

import pytest

import config
from models.team import Team

SAMPLE_TEAMS_CSV = Path(__file__).resolve().parent.parent / "data" / "sample_teams.csv"


class FixedDraws:
    """Stands in for numpy's Generator, handing out base-score draws in order.

    A single value is repeated forever; a list is consumed front to back.
    """

    def __init__(self, draws):
        self.draws = list(draws) if isinstance(draws, (list, tuple)) else None
        self.constant = None if self.draws is not None else draws
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        if self.draws is None:
            return self.constant
        return self.draws.pop(0)


def make_team(region="east", rank=1, bonus=0, name=None, mascot=None) -> Team:
    return Team(
        region=region,
        name=name or f"{region.title()} {rank}",
        mascot=mascot or f"Mascot {rank}",
        rank=rank,
        bonus=bonus,
    )


def make_field(bonus=0) -> dict[str, dict[int, Team]]:
    return {
        region: {rank: make_team(region, rank, bonus) for rank in range(1, 17)}
        for region in config.REGION_NAMES
    }


def write_teams_csv(path: Path, rows, header=None):
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header or config.TEAM_COLUMNS)
        writer.writerows(rows)
    return path


def field_rows(bonus=0) -> list[list]:
    return [
        [team.region, team.name, team.mascot, team.rank, team.bonus]
        for teams_by_rank in make_field(bonus).values()
        for team in teams_by_rank.values()
    ]


@pytest.fixture
def field():
    """A complete 64-team field with no bonuses."""
    return make_field()


@pytest.fixture
def teams_csv(tmp_path):
    """A valid 64-team CSV on disk."""
    return write_teams_csv(tmp_path / "teams.csv", field_rows())
