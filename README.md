# plantly

plantly keeps a record of your houseplants in a single SQLite file. Each
plant has a name, a species, a free-text description and a health status.
You can list your plants, filter them by health or by species, and add,
edit and delete them. It has a command line and a small Python library.

It needs only the Python standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The package installs a `plantly` command. Put the global options before the
command name:

```
plantly [--database PATH] [--settings FILE] COMMAND ...
```

- `--version` prints the version and exits.
- `-d PATH`, `--database PATH` uses this database file. It also remembers the
  file for later runs.
- `--settings FILE` reads and writes settings in `FILE`. Without this option,
  settings go in `$XDG_CONFIG_HOME/plantly/settings.json`. If that variable is
  not set, they go in `~/.config/plantly/settings.json`. The settings hold the
  last database you used.

### Commands

- `plantly create PATH` creates a new database and remembers it. The new
  database holds one sample plant, and that plant's health is chosen at
  random. Creation fails if `PATH` already holds a `plants` table.
- `plantly use PATH` switches to an existing database file and remembers it.
  It prints how many plants the database holds.
- `plantly list [--width PIXELS] [--health healthy|unhealthy | --species NAME]`
  prints the plants as cards. Cards are laid out in as many columns as fit in
  the width, at 320 pixels per card. The default width is 960. Each card
  prints as `[row:column] #id Name (Species)`, followed by its description
  and its health. Running `plantly` with no command lists every plant.
- `plantly species` prints each distinct species once.
- `plantly add --name N --species S --description D --health H` adds a
  plant and prints its new id.
- `plantly edit ID [--name N] [--species S] [--description D] [--health H]`
  changes only the fields you give.
- `plantly delete ID [-y]` deletes a plant. It asks for confirmation first,
  unless you give `-y`/`--yes`.
- `plantly style light|dark` prints the stylesheet for a theme.

The health filter and the species filter match exactly. Databases made with
`create` accept only `healthy` or `unhealthy` as a health status.

When a command fails, it prints `error: ...` to standard error and exits
with status 1.

## Library use

### Working with a database

`plantly.store.PlantStore` opens a database file. If the file has no
`plants` table yet, one is created. The store is a context manager, so the
connection is closed when the `with` block ends.

```python
from plantly.store import Plant, PlantStore

with PlantStore("plants.db") as store:
    new_id = store.insert_plant(
        Plant(name="Fern", species="Nephrolepis exaltata", health_status="healthy")
    )
    print(store.count(), "plants")
    sick = store.plants_by_health("unhealthy")
    ferns = store.plants_by_species("Nephrolepis exaltata")
    print(store.all_species())
```

A `Plant` is a dataclass with these fields: `id`, `name`, `species`,
`description` and `health_status`. A new plant has the id `-1`.

The store has these methods:

- `all_plants()` returns every plant.
- `plants_by_health(status)` returns the plants with that health status.
- `plants_by_species(species)` returns the plants of that species.
- `all_species()` returns each species name once.
- `count()` returns the number of plants.
- `insert_plant(plant)` adds a plant and returns its new id. The id on the
  plant you pass in is ignored.
- `update_plant(plant)` overwrites the plant that has the same id. It returns
  whether such a plant existed.
- `delete_plant(plant_id)` deletes a plant. It returns whether a plant was
  removed.
- `close()` closes the connection.

A database error raises `StoreError`. So does using a store after it has
been closed.

### Creating and checking database files

`plantly.database.create_database(path)` writes a new database that holds
one sample plant, and returns the path as a `Path`. If the file cannot be
created or set up, it raises `DatabaseCreationError`.

`validate_database_path(path)` checks a path you were given:

- An empty path or `None` raises `ValueError`.
- A path that is not an existing file raises `FileNotFoundError`.
- Otherwise it returns the path as a `Path`.

### Cards and layout

`plantly.cards` decides how plants are shown:

- `Card` holds what one card shows: `plant_id`, `title`, `species`,
  `description` and `health_status`.
- `Card.from_plant(plant)` builds a card from a plant.
- `Card.to_plant()` turns a card back into a plant.
- `card_title(name, species)` returns `"Name (Species)"`. If the name already
  ends in a `" (...)"` suffix, that suffix is dropped first.
- `clean_name(name)` cuts a name off at its first `" ("`.
- `column_count(width)` returns how many 300-pixel cards with 20-pixel
  spacing fit in `width`. The result is never less than 1.
- `grid_layout(items, columns)` returns `(row, column, item)` tuples, filled
  row by row. It raises `ValueError` if `columns` is less than 1.
- `edit_plant(plant, **fields)` returns a copy of the plant with the given
  fields changed. Only `name`, `species`, `description` and `health_status`
  can be changed. Any other field raises `TypeError`.

### Themes

`plantly.styles.stylesheet(theme)` returns the stylesheet text for
`Theme.LIGHT` or `Theme.DARK`. It also accepts the strings `"light"` and
`"dark"`.

## What it does not do

plantly has no graphical window. The cards, the layout and the stylesheets
are produced as data and text, and the only interface is the command line.