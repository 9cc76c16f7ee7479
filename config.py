"""Central configuration for the tournament bracket simulator."""

# Scoring: each team scores a random base in [SCORE_BASE_LOW, SCORE_BASE_HIGH)
# plus MODIFIER_WEIGHT * rank modifier plus its bonus
SCORE_BASE_LOW = 55
SCORE_BASE_HIGH = 85  # exclusive
MODIFIER_WEIGHT = 2

# Rank tiers: (lowest rank, highest rank) -> modifier
RANK_MODIFIERS = {
    (1, 2): 8,
    (3, 4): 7,
    (5, 6): 6,
    (7, 8): 5,
    (9, 10): 4,
    (11, 12): 3,
    (13, 14): 2,
    (15, 16): 1,
}
MIN_RANK = 1
MAX_RANK = 16

# Bracket structure
NUM_REGIONS = 4
TEAMS_PER_REGION = 16
GAMES_PER_REGION = 15
REGION_NAMES = ["east", "west", "south", "midwest"]

# Standard rank matchups in round 1 (within each region)
SEED_MATCHUPS = [
    (1, 16), (8, 9), (5, 12), (4, 13),
    (6, 11), (3, 14), (7, 10), (2, 15),
]

# Later regional rounds: pairs of earlier game numbers whose winners meet.
# Game numbers 1-8 are round 1, 9-12 round 2, 13-14 round 3, 15 the regional final.
REGION_ROUNDS = [
    [(1, 2), (3, 4), (5, 6), (7, 8)],
    [(9, 10), (11, 12)],
    [(13, 14)],
]

# Final four: game name -> the two sides feeding it (region champions or earlier games)
FINAL_FOUR_GAMES = [
    ("Game16", "east", "west"),
    ("Game17", "midwest", "south"),
    ("Game18", "Game16", "Game17"),
]
CHAMPIONSHIP_GAME = "Game18"

# Input / output
TEAM_COLUMNS = ["region", "name", "mascot", "rank", "bonus"]
RESULT_COLUMNS = [
    "GameName",
    "Team1", "Mascot1", "Rank1", "Mod1", "Bonus1", "Score1",
    "Team2", "Mascot2", "Rank2", "Mod2", "Bonus2", "Score2",
]
RESULTS_FILE_PREFIX = "game-"
RESULTS_TIMESTAMP_FORMAT = "%Y_%m_%d_%H%M%S"
DEFAULT_OUTPUT_DIR = "."

# Monte Carlo settings
DEFAULT_SIMULATIONS = 10_000
DEFAULT_ODDS_SHOWN = 16
