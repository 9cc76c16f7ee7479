"""Team loader - read the 64-team tournament field from a CSV.

Expected columns: region, name, mascot, rank, bonus
One row per team, 16 ranks (1-16) in each of the regions east, west,
south and midwest. Region names are matched case-sensitively.

The loader fails fast: any defect in the file raises one of the errors in
models.errors instead of letting a partial field reach the simulator.
"""

import pandas as pd

import config
from models.errors import InvalidRankError, MalformedInputError, MissingTeamError
from models.team import Team


def load_teams_from_csv(filepath: str) -> dict[str, dict[int, Team]]:
    """Load and validate the tournament field.

    Returns:
        {region: {rank: Team}} for all four regions
    """
    try:
        df = pd.read_csv(filepath, dtype=str, keep_default_na=False, skipinitialspace=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"Could not parse {filepath}: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    missing_cols = [c for c in config.TEAM_COLUMNS if c not in df.columns]
    if missing_cols:
        raise MalformedInputError(f"{filepath} is missing column(s): {', '.join(missing_cols)}")

    field: dict[str, dict[int, Team]] = {region: {} for region in config.REGION_NAMES}

    # Row numbers in messages count the header as line 1
    for line_num, (_, row) in enumerate(df.iterrows(), start=2):
        team = _parse_row(row, line_num)
        if team.rank in field[team.region]:
            raise MalformedInputError(
                f"Line {line_num}: duplicate rank {team.rank} in region '{team.region}'"
            )
        field[team.region][team.rank] = team

    validate_field(field)
    print(f"Loaded {sum(len(r) for r in field.values())} teams from {filepath}")
    return field


def validate_field(field: dict[str, dict[int, Team]]):
    """Check every region has exactly ranks 1-16.

    Raises:
        MissingTeamError: a region/rank slot is empty
    """
    for region in config.REGION_NAMES:
        teams_by_rank = field.get(region, {})
        for rank in range(config.MIN_RANK, config.MAX_RANK + 1):
            if rank not in teams_by_rank:
                raise MissingTeamError(region, rank)


def _parse_row(row: pd.Series, line_num: int) -> Team:
    """Turn one CSV row into a Team, raising on anything unusable."""
    # Short rows come back as NaN even with keep_default_na=False
    values = {col: "" if pd.isna(row[col]) else str(row[col]).strip() for col in config.TEAM_COLUMNS}

    empty = [col for col, value in values.items() if not value]
    if empty:
        raise MalformedInputError(f"Line {line_num}: empty value for {', '.join(empty)}")

    region = values["region"]
    if region not in config.REGION_NAMES:
        raise MalformedInputError(
            f"Line {line_num}: unknown region '{region}' (expected one of {', '.join(config.REGION_NAMES)})"
        )

    rank = _parse_int(values["rank"], "rank", line_num)
    if not config.MIN_RANK <= rank <= config.MAX_RANK:
        raise InvalidRankError(rank)

    return Team(
        region=region,
        name=values["name"],
        mascot=values["mascot"],
        rank=rank,
        bonus=_parse_int(values["bonus"], "bonus", line_num),
    )


def _parse_int(value: str, column: str, line_num: int) -> int:
    try:
        return int(value)
    except ValueError:
        raise MalformedInputError(f"Line {line_num}: {column} must be an integer, got '{value}'") from None
