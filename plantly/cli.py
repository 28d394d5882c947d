"""Command-line front end for managing a plant database."""

from __future__ import annotations

import argparse
import json
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Callable, Optional, Union

from plantly.cards import Card, column_count, edit_plant, grid_layout
from plantly.database import (
    DatabaseCreationError,
    create_database,
    validate_database_path,
)
from plantly.store import Plant, PlantStore, StoreError
from plantly.styles import Theme, stylesheet

VERSION = "2.0.0"
DEFAULT_WIDTH = 960
_SETTINGS_KEY = "lastDatabase"

_VERSION_TEXT = (
    f"plantly {VERSION}\n"
    "This is free software: you are free to change and redistribute it.\n"
    "This software does not come with any Warranty.\n"
)


class _CommandError(Exception):
    """A command failed; the message is shown to the user."""


@dataclass
class Settings:
    """Persistent application settings."""

    last_database: Optional[str] = None

    @staticmethod
    def load(path: Union[str, PathLike]) -> "Settings":
        """Read settings from ``path``; missing or unreadable files give defaults."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return Settings()
        if not isinstance(data, dict):
            return Settings()
        value = data.get(_SETTINGS_KEY)
        return Settings(last_database=value if isinstance(value, str) and value else None)

    def save(self, path: Union[str, PathLike]) -> None:
        """Write the settings to ``path``, creating its directory if needed."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        data = {} if self.last_database is None else {_SETTINGS_KEY: self.last_database}
        target.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _default_settings_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "plantly" / "settings.json"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``plantly`` command."""
    parser = argparse.ArgumentParser(prog="plantly", description="Manage a plant database.")
    parser.add_argument("--version", action="store_true", help="show version and exit")
    parser.add_argument("-d", "--database", help="plant database file to use (remembered)")
    parser.add_argument("--settings", help="settings file to read and write")
    parser.set_defaults(func=_cmd_list, width=DEFAULT_WIDTH, health=None, species=None)

    sub = parser.add_subparsers(dest="command")

    p_list = sub.add_parser("list", help="show plant cards")
    p_list.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="display width in pixels")
    group = p_list.add_mutually_exclusive_group()
    group.add_argument("--health", choices=["healthy", "unhealthy"], help="only plants with this status")
    group.add_argument("--species", help="only plants of this species")
    p_list.set_defaults(func=_cmd_list)

    p_species = sub.add_parser("species", help="list the species in the database")
    p_species.set_defaults(func=_cmd_species)

    p_add = sub.add_parser("add", help="add a new plant")
    p_add.add_argument("--name", default="")
    p_add.add_argument("--species", default="")
    p_add.add_argument("--description", default="")
    p_add.add_argument("--health", default="")
    p_add.set_defaults(func=_cmd_add)

    p_edit = sub.add_parser("edit", help="change a plant's fields")
    p_edit.add_argument("id", type=int)
    p_edit.add_argument("--name")
    p_edit.add_argument("--species")
    p_edit.add_argument("--description")
    p_edit.add_argument("--health")
    p_edit.set_defaults(func=_cmd_edit)

    p_delete = sub.add_parser("delete", help="delete a plant")
    p_delete.add_argument("id", type=int)
    p_delete.add_argument("-y", "--yes", action="store_true", help="do not ask for confirmation")
    p_delete.set_defaults(func=_cmd_delete)

    p_create = sub.add_parser("create", help="create a new plant database and use it")
    p_create.add_argument("path")
    p_create.set_defaults(func=_cmd_create)

    p_use = sub.add_parser("use", help="switch to an existing plant database")
    p_use.add_argument("path")
    p_use.set_defaults(func=_cmd_use)

    p_style = sub.add_parser("style", help="print the stylesheet of a theme")
    p_style.add_argument("theme", choices=[t.value for t in Theme])
    p_style.set_defaults(func=_cmd_style)

    return parser


class _Context:
    """Settings and database selection shared by the commands."""

    def __init__(self, args: argparse.Namespace) -> None:
        self.args = args
        self.settings_path = Path(args.settings) if args.settings else _default_settings_path()
        self.settings = Settings.load(self.settings_path)

    def remember(self, path: Union[str, PathLike]) -> None:
        self.settings.last_database = str(path)
        self.settings.save(self.settings_path)

    def database(self) -> Path:
        if self.args.database:
            path = Path(self.args.database)
            self.remember(path)
            return path
        last = self.settings.last_database
        if last and Path(last).is_file():
            return Path(last)
        raise _CommandError(
            "no database selected; use 'plantly use PATH', 'plantly create PATH' or --database"
        )

    def open_store(self) -> PlantStore:
        return PlantStore(self.database())


def _print_cards(plants: Sequence[Plant], width: int) -> None:
    cards = [Card.from_plant(plant) for plant in plants]
    for row, col, card in grid_layout(cards, column_count(width)):
        print(f"[{row}:{col}] #{card.plant_id} {card.title}")
        print(f"    {card.description}")
        print(f"    Health: {card.health_status}")


def _cmd_list(ctx: _Context) -> int:
    args = ctx.args
    with ctx.open_store() as store:
        if args.health:
            plants = store.plants_by_health(args.health)
            if not plants:
                print(f"No {args.health} plants found.")
                return 0
        elif args.species is not None:
            if not store.all_species():
                print("No species found in the database.")
                return 0
            plants = store.plants_by_species(args.species)
            if not plants:
                print(f"No plants found for species: {args.species}")
                return 0
        else:
            plants = store.all_plants()
    _print_cards(plants, args.width)
    return 0


def _cmd_species(ctx: _Context) -> int:
    with ctx.open_store() as store:
        species = store.all_species()
    if not species:
        print("No species found in the database.")
        return 0
    for name in species:
        print(name)
    return 0


def _cmd_add(ctx: _Context) -> int:
    args = ctx.args
    plant = Plant(
        name=args.name,
        species=args.species,
        description=args.description,
        health_status=args.health,
    )
    with ctx.open_store() as store:
        try:
            plant_id = store.insert_plant(plant)
        except StoreError as exc:
            raise _CommandError("Failed to add plant to database.") from exc
    print(f"Added plant #{plant_id}.")
    return 0


def _cmd_edit(ctx: _Context) -> int:
    args = ctx.args
    changes = {
        field: value
        for field, value in (
            ("name", args.name),
            ("species", args.species),
            ("description", args.description),
            ("health_status", args.health),
        )
        if value is not None
    }
    with ctx.open_store() as store:
        current = next((p for p in store.all_plants() if p.id == args.id), None)
        if current is None:
            raise _CommandError(f"No plant with id {args.id}.")
        updated = edit_plant(current, **changes)
        if not store.update_plant(updated):
            raise _CommandError("Failed to update the plant in the database.")
    print(f"Updated plant #{updated.id}: {Card.from_plant(updated).title}")
    return 0


def _cmd_delete(ctx: _Context) -> int:
    args = ctx.args
    with ctx.open_store() as store:
        if not args.yes:
            reply = input("Are you sure you want to delete this plant? [y/N] ")
            if reply.strip().lower() not in ("y", "yes"):
                print("Cancelled.")
                return 0
        if not store.delete_plant(args.id):
            raise _CommandError("Failed to delete the plant from the database.")
    print(f"Deleted plant #{args.id}.")
    return 0


def _cmd_create(ctx: _Context) -> int:
    path = create_database(ctx.args.path)
    ctx.remember(path)
    print("Database created successfully!")
    return 0


def _cmd_use(ctx: _Context) -> int:
    path = validate_database_path(ctx.args.path)
    with PlantStore(path) as store:
        total = store.count()
    ctx.remember(path)
    print(f"Found {total} plants in database.")
    return 0


def _cmd_style(ctx: _Context) -> int:
    print(stylesheet(ctx.args.theme))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the exit status."""
    raw = list(sys.argv[1:] if argv is None else argv)
    if raw[:1] == ["--version"]:
        print(_VERSION_TEXT, end="")
        return 0
    args = build_parser().parse_args(raw)
    if args.version:
        print(_VERSION_TEXT, end="")
        return 0
    handler: Callable[[_Context], int] = args.func
    try:
        return handler(_Context(args))
    except (
        _CommandError,
        StoreError,
        DatabaseCreationError,
        ValueError,
        TypeError,
        FileNotFoundError,
    ) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())