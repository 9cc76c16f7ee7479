"""Tournament Bracket Simulator - CLI entry point.

Usage:
    python cli.py play --teams teams.csv [--show-summary] [--no-file] [--output-dir DIR] [--seed N]
    python cli.py odds --teams teams.csv [--sims 10000] [--seed N] [--top 16]
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from models.errors import BracketInputError


# --- Commands ---

def cmd_play(args):
    """Play one tournament and report the results."""
    from ingestion.team_loader import load_teams_from_csv
    from simulation.tournament import simulate_tournament

    teams = load_teams_from_csv(args.teams)
    outcome = simulate_tournament(teams, seed=args.seed)

    if args.show_summary:
        from output.printer import print_final_four, print_region_summary
        print_region_summary(outcome.region_champions)
        print_final_four(outcome.results)

    if not args.no_file:
        from output.results_csv import export_results_csv
        export_results_csv(outcome.results, args.output_dir)

    print(f"\nChampion: {outcome.champion} ({outcome.champion.region.title()})")


def cmd_odds(args):
    """Run the tournament many times and print title odds."""
    from ingestion.team_loader import load_teams_from_csv
    from output.printer import print_odds
    from simulation.tournament import simulate_many

    if args.sims < 1:
        print(f"ERROR: --sims must be at least 1, got {args.sims}")
        sys.exit(1)

    teams = load_teams_from_csv(args.teams)
    odds = simulate_many(teams, n_sims=args.sims, seed=args.seed)
    print_odds(odds, top=args.top)


# --- Main ---

def main():
    parser = argparse.ArgumentParser(
        description="Tournament Bracket Simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input CSV columns: region, name, mascot, rank, bonus
  16 teams (ranks 1-16) in each of the regions east, west, south, midwest.

Examples:
  python cli.py play --teams teams.csv --show-summary    # One run, print final four, write game-*.csv
  python cli.py play --teams teams.csv --no-file         # One run, no results file
  python cli.py odds --teams teams.csv --sims 5000       # Title odds over many runs
        """
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # play
    p_play = subparsers.add_parser("play", help="Simulate one tournament")
    p_play.add_argument("--teams", required=True, help="CSV file with the tournament field")
    p_play.add_argument("--show-summary", action="store_true", help="Print the final four and champion")
    p_play.add_argument("--no-file", action="store_true", help="Do not write the game-<timestamp>.csv results file")
    p_play.add_argument("--output-dir", default=config.DEFAULT_OUTPUT_DIR, help="Directory for the results file")
    p_play.add_argument("--seed", type=int, help="Random seed for a reproducible run")

    # odds
    p_odds = subparsers.add_parser("odds", help="Estimate title odds by repeated simulation")
    p_odds.add_argument("--teams", required=True, help="CSV file with the tournament field")
    p_odds.add_argument("--sims", type=int, default=config.DEFAULT_SIMULATIONS)
    p_odds.add_argument("--seed", type=int, help="Random seed for reproducible odds")
    p_odds.add_argument("--top", type=int, default=config.DEFAULT_ODDS_SHOWN, help="Number of teams to show")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    commands = {
        "play": cmd_play,
        "odds": cmd_odds,
    }

    cmd_func = commands.get(args.command)
    if cmd_func is None:
        parser.print_help()
        return

    try:
        cmd_func(args)
    except (BracketInputError, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
