"""Results log export.

Writes every simulated game to game-<timestamp>.csv, one row per game in
play order, and reads such a file back for inspection.
"""

import csv
import os
from datetime import datetime

import pandas as pd

import config
from models.game import GameResult

_INT_COLUMNS = ["Rank1", "Mod1", "Bonus1", "Score1", "Rank2", "Mod2", "Bonus2", "Score2"]


def results_filename(now: datetime | None = None) -> str:
    """Timestamped output name, e.g. game-2026_03_19_141502.csv"""
    now = now or datetime.now()
    return f"{config.RESULTS_FILE_PREFIX}{now.strftime(config.RESULTS_TIMESTAMP_FORMAT)}.csv"


def export_results_csv(results: list[GameResult], output_dir: str = config.DEFAULT_OUTPUT_DIR,
                       now: datetime | None = None) -> str:
    """Export the results log as a CSV file.

    Columns: GameName, Team1, Mascot1, Rank1, Mod1, Bonus1, Score1,
             Team2, Mascot2, Rank2, Mod2, Bonus2, Score2

    Returns:
        Path of the written file
    """
    os.makedirs(output_dir, exist_ok=True)
    filepath = os.path.join(output_dir, results_filename(now))

    with open(filepath, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=config.RESULT_COLUMNS)
        writer.writeheader()
        for result in results:
            writer.writerow(result.to_row())

    print(f"Exported {len(results)} games to {filepath}")
    return filepath


def load_results_csv(filepath: str) -> list[dict]:
    """Read an exported results file back into row dicts.

    Numeric columns come back as ints and text columns as strings, so each row
    compares equal to GameResult.to_row() of the game it was written from.
    """
    dtypes = {col: str for col in config.RESULT_COLUMNS if col not in _INT_COLUMNS}
    df = pd.read_csv(filepath, dtype=dtypes, keep_default_na=False)

    rows = []
    for record in df.to_dict(orient="records"):
        rows.append({
            col: int(record[col]) if col in _INT_COLUMNS else record[col]
            for col in config.RESULT_COLUMNS
        })
    return rows
