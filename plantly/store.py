"""SQLite-backed storage for plant records."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from os import PathLike
from typing import Union

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS plants ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "name TEXT NOT NULL,"
    "species TEXT NOT NULL,"
    "description TEXT,"
    "healthStatus TEXT);"
)

_COLUMNS = "id, name, species, description, healthStatus"


class StoreError(Exception):
    """Raised when the plant database cannot be opened or queried."""


@dataclass
class Plant:
    """One plant record."""

    id: int = -1
    name: str = ""
    species: str = ""
    description: str = ""
    health_status: str = ""

    @classmethod
    def _from_row(cls, row: tuple) -> "Plant":
        plant_id, name, species, description, health = row
        return cls(
            id=int(plant_id),
            name=name or "",
            species=species or "",
            description=description or "",
            health_status=health or "",
        )


class PlantStore:
    """A plant database file, opened and prepared for use."""

    def __init__(self, path: Union[str, PathLike]) -> None:
        self.path = path
        try:
            self._conn: sqlite3.Connection | None = sqlite3.connect(path)
        except sqlite3.Error as exc:
            raise StoreError(f"error opening database: {exc}") from exc
        try:
            with self._conn:
                self._conn.execute(_SCHEMA)
        except sqlite3.Error as exc:
            self._conn.close()
            self._conn = None
            raise StoreError(f"error opening database: {exc}") from exc

    def close(self) -> None:
        """Close the database; further queries raise StoreError."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "PlantStore":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        if self._conn is None:
            raise StoreError("database is closed")
        try:
            with self._conn:
                yield self._conn
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc

    def _select(self, where: str = "", params: tuple = ()) -> list[Plant]:
        sql = f"SELECT {_COLUMNS} FROM plants{where};"
        with self._transaction() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [Plant._from_row(row) for row in rows]

    def all_plants(self) -> list[Plant]:
        """Return every plant in the database."""
        return self._select()

    def update_plant(self, plant: Plant) -> bool:
        """Write the plant's fields over the record with its id.

        Returns whether a record with that id existed.
        """
        with self._transaction() as conn:
            cursor = conn.execute(
                "UPDATE plants SET name = ?, species = ?, description = ?, "
                "healthStatus = ? WHERE id = ?",
                (
                    plant.name,
                    plant.species,
                    plant.description,
                    plant.health_status,
                    plant.id,
                ),
            )
        return cursor.rowcount > 0

    def delete_plant(self, plant_id: int) -> bool:
        """Delete the plant with the given id; return whether one was removed."""
        with self._transaction() as conn:
            cursor = conn.execute("DELETE FROM plants WHERE id = ?", (plant_id,))
        return cursor.rowcount > 0

    def insert_plant(self, plant: Plant) -> int:
        """Add a new plant, ignoring its id, and return the id it was given."""
        with self._transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO plants (name, species, description, healthStatus) "
                "VALUES (?, ?, ?, ?)",
                (plant.name, plant.species, plant.description, plant.health_status),
            )
        return int(cursor.lastrowid)

    def plants_by_health(self, status: str) -> list[Plant]:
        """Return plants whose health status equals ``status`` exactly."""
        return self._select(" WHERE healthStatus = ?", (status,))

    def plants_by_species(self, species: str) -> list[Plant]:
        """Return plants whose species equals ``species`` exactly."""
        return self._select(" WHERE species = ?", (species,))

    def all_species(self) -> list[str]:
        """Return the distinct species names present in the database."""
        with self._transaction() as conn:
            rows = conn.execute("SELECT DISTINCT species FROM plants;").fetchall()
        return [species for (species,) in rows if species is not None]

    def count(self) -> int:
        """Return the number of plants in the database."""
        with self._transaction() as conn:
            (total,) = conn.execute("SELECT COUNT(*) FROM plants;").fetchone()
        return int(total)