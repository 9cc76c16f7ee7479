"""Errors raised while reading or validating tournament input."""


class BracketInputError(ValueError):
    """Base class for bad tournament input."""


class MalformedInputError(BracketInputError):
    """A row or column of the team file cannot be parsed."""


class InvalidRankError(BracketInputError):
    """A rank falls outside 1-16."""

    def __init__(self, rank):
        super().__init__(f"Invalid rank: {rank!r} (expected an integer from 1 to 16)")
        self.rank = rank


class MissingTeamError(BracketInputError):
    """A required region/rank slot has no team."""

    def __init__(self, region: str, rank: int):
        super().__init__(f"No team for rank {rank} in region '{region}'")
        self.region = region
        self.rank = rank
