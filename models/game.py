"""Game result data model."""

from dataclasses import dataclass

import config
from models.team import Team


@dataclass(frozen=True)
class GameResult:
    """Snapshot of one simulated game. Never mutated after creation."""
    game_name: str
    team1: Team
    modifier1: int
    score1: int
    team2: Team
    modifier2: int
    score2: int
    winner: Team

    @property
    def region(self) -> str | None:
        """Region the game was played in, or None for the final four."""
        if self.team1.region == self.team2.region:
            return self.team1.region
        return None

    @property
    def loser(self) -> Team:
        return self.team2 if self.winner == self.team1 else self.team1

    def to_row(self) -> dict:
        """Flatten into a results-file row keyed by config.RESULT_COLUMNS."""
        values = [
            self.game_name,
            self.team1.name, self.team1.mascot, self.team1.rank, self.modifier1, self.team1.bonus, self.score1,
            self.team2.name, self.team2.mascot, self.team2.rank, self.modifier2, self.team2.bonus, self.score2,
        ]
        return dict(zip(config.RESULT_COLUMNS, values))
