"""Single game simulator.

Each side scores a uniformly random base in [55, 85) plus twice its rank
modifier plus its bonus. The higher score wins; on an exact tie the second
team advances.
"""

import numpy as np

import config
from models.game import GameResult
from models.modifier import modifier_for
from models.team import Team


def score_team(team: Team, rng: np.random.Generator) -> tuple[int, int]:
    """Draw one team's score for a game.

    Returns:
        (modifier, score)
    """
    modifier = modifier_for(team.rank)
    base = int(rng.integers(config.SCORE_BASE_LOW, config.SCORE_BASE_HIGH))
    return modifier, base + config.MODIFIER_WEIGHT * modifier + team.bonus


def play_game(game_name: str, team1: Team, team2: Team,
              rng: np.random.Generator) -> tuple[Team, GameResult]:
    """Simulate one game.

    Args:
        game_name: Identifier recorded in the results log, e.g. "Game16"
        team1: First side (scored first)
        team2: Second side
        rng: Source of the base score draws

    Returns:
        (winner, result). The winner is the same Team record that was passed in,
        so it carries its rank and bonus into later rounds.
    """
    modifier1, score1 = score_team(team1, rng)
    modifier2, score2 = score_team(team2, rng)

    winner = team1 if score1 > score2 else team2

    result = GameResult(
        game_name=game_name,
        team1=team1,
        modifier1=modifier1,
        score1=score1,
        team2=team2,
        modifier2=modifier2,
        score2=score2,
        winner=winner,
    )
    return winner, result
