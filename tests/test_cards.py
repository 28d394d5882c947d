import pytest

from plantly.cards import (
    Card,
    card_title,
    clean_name,
    column_count,
    edit_plant,
    grid_layout,
)
from plantly.store import Plant


@pytest.fixture
def snake():
    return Plant(
        id=7,
        name="Snake Plant",
        species="Dracaena trifasciata",
        description="Hardy",
        health_status="healthy",
    )


def test_clean_name_strips_suffix():
    assert clean_name("Snake Plant (Dracaena trifasciata)") == "Snake Plant"


def test_clean_name_without_suffix():
    assert clean_name("Snake Plant") == "Snake Plant"


def test_clean_name_needs_space_before_bracket():
    assert clean_name("Plant(x)") == "Plant(x)"


def test_card_title():
    assert card_title("Snake Plant", "Dracaena trifasciata") == \
        "Snake Plant (Dracaena trifasciata)"


def test_card_title_does_not_double_species():
    once = card_title("Fern", "Polypodiopsida")
    assert card_title(once, "Polypodiopsida") == once


def test_column_count_minimum_one():
    assert column_count(0) == 1
    assert column_count(-50) == 1


@pytest.mark.parametrize("width", [320, 500, 960, 1280, 1999])
def test_column_count_fits(width):
    columns = column_count(width)
    assert columns * 320 <= width < (columns + 1) * 320


def test_grid_layout_positions():
    layout = grid_layout(["a", "b", "c", "d", "e"], 2)
    assert layout == [(0, 0, "a"), (0, 1, "b"), (1, 0, "c"), (1, 1, "d"), (2, 0, "e")]


def test_grid_layout_single_column():
    layout = grid_layout(range(3), 1)
    assert [(r, c) for r, c, _ in layout] == [(0, 0), (1, 0), (2, 0)]


def test_grid_layout_keeps_order_and_columns():
    items = list(range(17))
    layout = grid_layout(items, 4)
    assert [item for _, _, item in layout] == items
    assert all(0 <= col < 4 for _, col, _ in layout)


def test_grid_layout_empty():
    assert grid_layout([], 3) == []


def test_grid_layout_rejects_zero_columns():
    with pytest.raises(ValueError):
        grid_layout(["a"], 0)


def test_card_from_plant(snake):
    card = Card.from_plant(snake)
    assert card.plant_id == 7
    assert card.title == "Snake Plant (Dracaena trifasciata)"
    assert card.health_status == "healthy"


def test_card_round_trip(snake):
    assert Card.from_plant(snake).to_plant() == snake


def test_edit_plant_changes_fields(snake):
    edited = edit_plant(snake, name="Mother-in-law's tongue", health_status="unhealthy")
    assert edited.name == "Mother-in-law's tongue"
    assert edited.health_status == "unhealthy"
    assert edited.id == snake.id
    assert edited.species == snake.species
    assert snake.name == "Snake Plant"


def test_edit_plant_rejects_id(snake):
    with pytest.raises(TypeError):
        edit_plant(snake, id=99)


def test_edit_plant_rejects_unknown(snake):
    with pytest.raises(TypeError):
        edit_plant(snake, colour="green")


def test_edit_plant_no_changes(snake):
    assert edit_plant(snake) == snake