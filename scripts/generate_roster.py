"""
Roster generation script for the personnel toolkit.

Writes a deterministic pseudo-random employee roster as CSV, ready for
`personnel report --roster <file>`.
"""

from __future__ import annotations

import csv
import random
import sys
from pathlib import Path

import typer

from personnel.domain.models import EmployeeStatus, EmploymentType
from personnel.roster import ROSTER_FIELDS

app = typer.Typer(help="Generate a synthetic employee roster (CSV).")

FIRST_NAMES = ["Ada", "Grace", "Alan", "Linus", "Barbara", "Ken", "Margaret", "Dennis"]
LAST_NAMES = ["Lovelace", "Hopper", "Turing", "Torvalds", "Liskov", "Thompson", "Hamilton", "Ritchie"]
DEPARTMENTS = ["Engineering", "Marketing", "Finance", "Operations"]


def _generate_roster_csv(csv_path: Path, rows: int, seed: int) -> None:
    rng = random.Random(seed)
    statuses = list(EmployeeStatus)
    employment_types = list(EmploymentType)

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(ROSTER_FIELDS)
        for i in range(1, rows + 1):
            first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
            writer.writerow(
                [
                    f"EMP{i:05d}",
                    f"{first} {last}",
                    f"{first.lower()}.{last.lower()}{i}@company.com",
                    rng.choice(DEPARTMENTS),
                    f"{rng.randrange(25_000, 160_000, 500)}",
                    rng.randint(0, 5),
                    # Mostly active rosters.
                    EmployeeStatus.ACTIVE.value if rng.random() < 0.8 else rng.choice(statuses).value,
                    rng.choice(employment_types).value,
                ]
            )


@app.command()
def main(
    rows: int = typer.Option(
        50,
        "--rows",
        "-r",
        help="Number of employees to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("roster.csv"),
        "--output",
        "-o",
        help="CSV output path.",
    ),
) -> None:
    """
    Generate a synthetic roster CSV.
    """
    output.parent.mkdir(parents=True, exist_ok=True)
    typer.echo(f"Generating {rows:,} employees -> {output} (seed={seed})")
    _generate_roster_csv(output, rows=rows, seed=seed)
    typer.echo("Done.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
