"""Creating new plant database files and checking chosen database paths."""

from __future__ import annotations

import sqlite3
from contextlib import closing
from os import PathLike
from pathlib import Path
from typing import Union

_NEW_DATABASE_SCRIPT = """
BEGIN TRANSACTION;
CREATE TABLE plants (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    species TEXT NOT NULL,
    description TEXT,
    healthstatus TEXT NOT NULL CHECK (healthstatus IN ('healthy', 'unhealthy'))
);

INSERT INTO plants (name, species, description, healthstatus) VALUES
('Snake Plant', 'Dracaena trifasciata', 'A hardy evergreen perennial with stiff, upright, sword-like leaves with green and yellow variegation. Excellent air purifier.',
CASE WHEN abs(random() % 2) = 0 THEN 'healthy' ELSE 'unhealthy' END);
COMMIT;
"""


class DatabaseCreationError(Exception):
    """Raised when a new plant database cannot be created."""


def create_database(path: Union[str, PathLike]) -> Path:
    """Create a plant database at ``path`` holding one sample plant.

    The sample plant's health status is chosen at random. Fails if the
    file cannot be opened or already holds a plants table.
    """
    target = Path(path)
    try:
        conn = sqlite3.connect(target)
    except sqlite3.Error as exc:
        raise DatabaseCreationError("Failed to create database.") from exc
    with closing(conn):
        try:
            conn.executescript(_NEW_DATABASE_SCRIPT)
        except sqlite3.Error as exc:
            raise DatabaseCreationError(
                f"Failed to initialize database:\n{exc}"
            ) from exc
    return target


def validate_database_path(path: Union[str, PathLike, None]) -> Path:
    """Check that a database file was chosen and exists; return it as a Path."""
    if path is None or str(path) == "":
        raise ValueError("Please select a database file.")
    candidate = Path(path)
    if not candidate.is_file():
        raise FileNotFoundError("The selected database file does not exist.")
    return candidate