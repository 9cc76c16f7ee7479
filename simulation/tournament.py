"""Bracket driver.

Plays the fixed 64-team bracket: four 16-team regions of four rounds each,
then a three-game final four. Pairings come from the tables in config, so
every region is wired identically.

Within a region games are numbered 1-15 in bracket order:
    Games 1-8:   round 1, rank pairs from config.SEED_MATCHUPS
    Games 9-12:  round 2, winners of (1, 2), (3, 4), (5, 6), (7, 8)
    Games 13-14: round 3, winners of (9, 10), (11, 12)
    Game 15:     regional final, winners of (13, 14)
The final four is Game16 (east v west), Game17 (midwest v south) and the
championship, Game18.
"""

from dataclasses import dataclass, field

import numpy as np
from tqdm import tqdm

import config
from ingestion.team_loader import validate_field
from models.game import GameResult
from models.team import Team
from simulation.game import play_game

NUM_REGION_ROUNDS = 1 + len(config.REGION_ROUNDS)


@dataclass
class TournamentResult:
    """Outcome of one full tournament run."""
    champion: Team
    results: list[GameResult] = field(default_factory=list)  # in play order
    region_champions: dict[str, Team] = field(default_factory=dict)

    def games_named(self, game_name: str) -> list[GameResult]:
        return [r for r in self.results if r.game_name == game_name]

    @property
    def final_four_results(self) -> list[GameResult]:
        names = {name for name, _, _ in config.FINAL_FOUR_GAMES}
        return [r for r in self.results if r.game_name in names]


def play_region_round(round_idx: int, teams_by_rank: dict[int, Team],
                      winners: dict[int, Team], rng: np.random.Generator) -> list[GameResult]:
    """Play one round of a region.

    Args:
        round_idx: 0 for round 1 through 3 for the regional final
        teams_by_rank: The region's 16 teams
        winners: {game_number: winner} for the region so far; updated in place
        rng: Random generator for score draws

    Returns:
        The round's results in bracket order
    """
    if round_idx == 0:
        pairs = [(teams_by_rank[a], teams_by_rank[b]) for a, b in config.SEED_MATCHUPS]
    else:
        pairs = [(winners[a], winners[b]) for a, b in config.REGION_ROUNDS[round_idx - 1]]

    first_game = len(winners) + 1
    results = []
    for offset, (team1, team2) in enumerate(pairs):
        game_num = first_game + offset
        winner, result = play_game(f"Game{game_num}", team1, team2, rng)
        winners[game_num] = winner
        results.append(result)
    return results


def play_region(teams_by_rank: dict[int, Team],
                rng: np.random.Generator) -> tuple[Team, list[GameResult]]:
    """Play all 15 games of a single region.

    Returns:
        (region champion, results in play order)
    """
    winners: dict[int, Team] = {}
    results = []
    for round_idx in range(NUM_REGION_ROUNDS):
        results.extend(play_region_round(round_idx, teams_by_rank, winners, rng))
    return winners[config.GAMES_PER_REGION], results


def play_final_four(region_champions: dict[str, Team],
                    rng: np.random.Generator) -> tuple[Team, list[GameResult]]:
    """Play the two semifinals and the championship.

    Returns:
        (champion, results in play order)
    """
    advancing = dict(region_champions)
    results = []
    for game_name, side1, side2 in config.FINAL_FOUR_GAMES:
        winner, result = play_game(game_name, advancing[side1], advancing[side2], rng)
        advancing[game_name] = winner
        results.append(result)
    return advancing[config.CHAMPIONSHIP_GAME], results


def simulate_tournament(teams: dict[str, dict[int, Team]],
                        rng: np.random.Generator | None = None,
                        seed: int | None = None) -> TournamentResult:
    """Simulate one full tournament.

    Regions are played round by round: round 1 in every region, then round 2
    in every region, and so on, followed by the final four.

    Args:
        teams: {region: {rank: Team}} as returned by load_teams_from_csv
        rng: Random generator to draw from; created from seed if omitted
        seed: Random seed for reproducibility

    Raises:
        MissingTeamError: a region/rank slot is empty
    """
    validate_field(teams)
    if rng is None:
        rng = np.random.default_rng(seed)

    winners_by_region: dict[str, dict[int, Team]] = {region: {} for region in config.REGION_NAMES}
    results: list[GameResult] = []

    for round_idx in range(NUM_REGION_ROUNDS):
        for region in config.REGION_NAMES:
            results.extend(
                play_region_round(round_idx, teams[region], winners_by_region[region], rng)
            )

    region_champions = {
        region: winners[config.GAMES_PER_REGION] for region, winners in winners_by_region.items()
    }
    champion, final_results = play_final_four(region_champions, rng)
    results.extend(final_results)

    return TournamentResult(champion=champion, results=results, region_champions=region_champions)


def simulate_many(teams: dict[str, dict[int, Team]], n_sims: int = config.DEFAULT_SIMULATIONS,
                  seed: int | None = None,
                  show_progress: bool = True) -> dict[Team, dict[str, float]]:
    """Run the tournament repeatedly and tally how far each team gets.

    Returns:
        {team: {"final_four": probability, "title": probability}}
    """
    if n_sims < 1:
        raise ValueError(f"n_sims must be at least 1, got {n_sims}")
    validate_field(teams)
    rng = np.random.default_rng(seed)

    counts: dict[Team, dict[str, int]] = {}
    for teams_by_rank in teams.values():
        for team in teams_by_rank.values():
            counts[team] = {"final_four": 0, "title": 0}

    iterator = range(n_sims)
    if show_progress:
        iterator = tqdm(iterator, desc="Simulating tournaments")

    for _ in iterator:
        outcome = simulate_tournament(teams, rng=rng)
        for team in outcome.region_champions.values():
            counts[team]["final_four"] += 1
        counts[outcome.champion]["title"] += 1

    return {
        team: {stage: c / n_sims for stage, c in tallies.items()}
        for team, tallies in counts.items()
    }
