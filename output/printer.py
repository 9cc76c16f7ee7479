"""Pretty-print tournament output."""

from tabulate import tabulate

import config
from models.game import GameResult
from models.team import Team


def print_final_four(results: list[GameResult]):
    """Print the semifinals and championship game.

    Args:
        results: The full results log; only games named in
            config.FINAL_FOUR_GAMES are shown
    """
    print("\n" + "=" * 60)
    print("           FINAL FOUR")
    print("=" * 60)

    by_name = {r.game_name: r for r in results}
    rows = []
    for game_name, _, _ in config.FINAL_FOUR_GAMES:
        result = by_name.get(game_name)
        if result is None:
            continue
        label = "Championship" if game_name == config.CHAMPIONSHIP_GAME else "Semifinal"
        rows.append([
            game_name, label,
            str(result.team1), result.score1,
            str(result.team2), result.score2,
            result.winner.name,
        ])

    headers = ["Game", "Stage", "Team 1", "Score", "Team 2", "Score", "Winner"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))

    championship = by_name.get(config.CHAMPIONSHIP_GAME)
    if championship:
        champion = championship.winner
        print(f"\n  CHAMPION: {champion} ({champion.region.title()})")

    print("=" * 60)


def print_region_summary(region_champions: dict[str, Team]):
    """Print who came out of each region."""
    rows = [
        [region.title(), team.rank, team.name, team.mascot, team.bonus]
        for region, team in region_champions.items()
    ]
    print("\n=== REGION CHAMPIONS ===\n")
    print(tabulate(rows, headers=["Region", "Rank", "Team", "Mascot", "Bonus"], tablefmt="simple"))


def print_odds(odds: dict[Team, dict[str, float]], top: int = config.DEFAULT_ODDS_SHOWN):
    """Print the teams most likely to win the title."""
    ranked = sorted(odds.items(), key=lambda x: (x[1]["title"], x[1]["final_four"]), reverse=True)

    rows = []
    for i, (team, probs) in enumerate(ranked[:top], 1):
        rows.append([
            i, str(team), team.region.title(),
            f"{probs['final_four']:.1%}", f"{probs['title']:.1%}",
        ])

    print(f"\nTop {min(top, len(ranked))} championship probabilities:\n")
    print(tabulate(rows, headers=["#", "Team", "Region", "Final Four", "Title"], tablefmt="simple"))
