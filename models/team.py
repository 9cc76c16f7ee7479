"""Team data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Team:
    region: str  # east, west, south or midwest
    name: str
    mascot: str
    rank: int  # 1-16, unique within a region
    bonus: int = 0  # Flat per-team score adjustment from the input data

    def __str__(self):
        return f"({self.rank}) {self.name} {self.mascot}"

    @property
    def key(self) -> tuple[str, int]:
        """(region, rank) identifies a team within a tournament field."""
        return self.region, self.rank
