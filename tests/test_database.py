import pytest

from plantly.database import (
    DatabaseCreationError,
    create_database,
    validate_database_path,
)
from plantly.store import Plant, PlantStore, StoreError


def test_create_database_holds_sample_plant(tmp_path):
    path = create_database(tmp_path / "plants.db")
    assert path.is_file()
    with PlantStore(path) as store:
        plants = store.all_plants()
    assert len(plants) == 1
    plant = plants[0]
    assert plant.name == "Snake Plant"
    assert plant.species == "Dracaena trifasciata"
    assert plant.health_status in {"healthy", "unhealthy"}
    assert plant.description.startswith("A hardy evergreen perennial")


def test_created_database_species_list(tmp_path):
    path = create_database(tmp_path / "plants.db")
    with PlantStore(path) as store:
        assert store.all_species() == ["Dracaena trifasciata"]


def test_created_schema_rejects_unknown_health(tmp_path):
    path = create_database(tmp_path / "plants.db")
    with PlantStore(path) as store:
        with pytest.raises(StoreError):
            store.insert_plant(Plant(name="Fern", species="Polypodiopsida",
                                     health_status="wilting"))
        assert store.count() == 1


def test_created_schema_accepts_healthy(tmp_path):
    path = create_database(tmp_path / "plants.db")
    with PlantStore(path) as store:
        new_id = store.insert_plant(
            Plant(name="Fern", species="Polypodiopsida", health_status="healthy")
        )
        assert [p.id for p in store.plants_by_health("healthy")].count(new_id) == 1
        assert store.count() == 2


def test_create_twice_fails(tmp_path):
    path = tmp_path / "plants.db"
    create_database(path)
    with pytest.raises(DatabaseCreationError):
        create_database(path)
    with PlantStore(path) as store:
        assert store.count() == 1


def test_create_in_missing_directory_fails(tmp_path):
    with pytest.raises(DatabaseCreationError):
        create_database(tmp_path / "missing" / "plants.db")


def test_create_over_non_database_file_fails(tmp_path):
    path = tmp_path / "notes.db"
    path.write_bytes(b"this is plainly not a sqlite file at all, just text" * 4)
    with pytest.raises(DatabaseCreationError):
        create_database(path)


@pytest.mark.parametrize("value", ["", None])
def test_validate_empty_path(value):
    with pytest.raises(ValueError):
        validate_database_path(value)


def test_validate_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        validate_database_path(tmp_path / "absent.db")


def test_validate_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        validate_database_path(tmp_path)


def test_validate_existing_file(tmp_path):
    path = create_database(tmp_path / "plants.db")
    assert validate_database_path(str(path)) == path