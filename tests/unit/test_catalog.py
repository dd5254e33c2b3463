"""
Unit tests for backend/core/catalog.py

Tests cover:
- Id allocation per catalog
- Lookup, update and removal
- YAML loading, including the bundled default catalog
"""
from pathlib import Path

import pytest
from pydantic import ValidationError

from backend.core.catalog import (
    DEFAULT_CATALOG_PATH,
    CatalogLoadError,
    ExerciseCatalog,
    ExerciseNotFoundError,
)
from backend.settings import Settings
from domain.models import Exercise, ExerciseType, StrengthExercise


@pytest.fixture
def catalog():
    return ExerciseCatalog()


@pytest.mark.unit
class TestCatalogAdd:
    """Tests for adding exercises."""

    def test_ids_are_sequential(self, catalog):
        """Each added exercise gets the next id."""
        bench = catalog.add("Bench Press", "strength", "Barbell", ["Chest"])
        row = catalog.add("Rowing", ExerciseType.CARDIO, "Rower", ["Back"])

        assert bench.id == 1
        assert row.id == 2
        assert len(catalog) == 2

    def test_catalogs_allocate_independently(self):
        """Ids are per catalog, not global."""
        first = ExerciseCatalog()
        second = ExerciseCatalog(first_id=100)
        first.add("Squat", "strength", "Rack", ["Legs"])

        assert second.add("Squat", "strength", "Rack", ["Legs"]).id == 100
        assert first.add("Deadlift", "strength", "Barbell", ["Back"]).id == 2

    def test_strength_exercises_get_rest_period(self, catalog):
        """Strength exercises are created as StrengthExercise."""
        squat = catalog.add("Squat", "strength", "Rack", ["Legs"], default_rest_seconds=150)
        stretch = catalog.add("Stretching", "recovery", "Mat", ["Hamstrings"])

        assert isinstance(squat, StrengthExercise)
        assert squat.default_rest_seconds == 150
        assert type(stretch) is Exercise
        assert stretch.type == ExerciseType.RECOVERY

    def test_invalid_exercise_consumes_no_id(self, catalog):
        """A rejected exercise leaves the catalog and id counter unchanged."""
        with pytest.raises(ValidationError):
            catalog.add("X", "strength", "Rack", ["Legs"])

        assert len(catalog) == 0
        assert catalog.add("Squat", "strength", "Rack", ["Legs"]).id == 1

    def test_unknown_type_rejected(self, catalog):
        """Unknown type strings raise ValueError."""
        with pytest.raises(ValueError):
            catalog.add("Yoga Flow", "yoga", "Mat", ["Core"])


@pytest.mark.unit
class TestCatalogLookup:
    """Tests for get/find/update/remove."""

    def test_get_and_contains(self, catalog):
        bench = catalog.add("Bench Press", "strength", "Barbell", ["Chest"])

        assert catalog.get(bench.id) is bench
        assert bench.id in catalog
        assert 99 not in catalog

    def test_get_unknown_raises(self, catalog):
        """Unknown ids raise ExerciseNotFoundError (a LookupError)."""
        with pytest.raises(ExerciseNotFoundError) as exc_info:
            catalog.get(42)

        assert exc_info.value.exercise_id == 42
        assert isinstance(exc_info.value, LookupError)

    def test_find_is_case_insensitive(self, catalog):
        bench = catalog.add("Bench Press", "strength", "Barbell", ["Chest"])

        assert catalog.find("  bench press ") is bench
        assert catalog.find("Squat") is None

    def test_update_stores_new_record(self, catalog):
        """update() replaces the stored record; the old one is untouched."""
        bench = catalog.add("Bench Press", "strength", "Barbell", ["Chest"])

        updated = catalog.update(bench.id, device="Dumbbells")

        assert updated.id == bench.id
        assert updated.device == "Dumbbells"
        assert catalog.get(bench.id) is updated
        assert bench.device == "Barbell"

    def test_update_invalid_keeps_old_record(self, catalog):
        bench = catalog.add("Bench Press", "strength", "Barbell", ["Chest"])

        with pytest.raises(ValidationError):
            catalog.update(bench.id, primary_muscles=[])

        assert catalog.get(bench.id) is bench

    def test_remove(self, catalog):
        """Removed ids are gone and never reused."""
        bench = catalog.add("Bench Press", "strength", "Barbell", ["Chest"])
        catalog.remove(bench.id)

        assert bench.id not in catalog
        with pytest.raises(ExerciseNotFoundError):
            catalog.remove(bench.id)
        assert catalog.add("Squat", "strength", "Rack", ["Legs"]).id == 2

    def test_iteration_in_insertion_order(self, catalog):
        catalog.add("Bench Press", "strength", "Barbell", ["Chest"])
        catalog.add("Rowing", "cardio", "Rower", ["Back"])

        assert [e.name for e in catalog] == ["Bench Press", "Rowing"]


@pytest.mark.unit
class TestCatalogLoading:
    """Tests for YAML loading."""

    def test_from_yaml(self, tmp_path: Path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "- name: Bench Press\n"
            "  type: strength\n"
            "  device: Barbell\n"
            "  primary_muscles: [Chest, Triceps]\n"
            "  default_rest_seconds: 90\n"
            "- name: Rowing\n"
            "  type: cardio\n"
            "  device: Rower\n"
            "  primary_muscles: [Back]\n",
            encoding="utf-8",
        )

        catalog = ExerciseCatalog.from_yaml(path)

        assert len(catalog) == 2
        bench = catalog.get(1)
        assert bench.name == "Bench Press"
        assert bench.primary_muscles == ("Chest", "Triceps")
        assert bench.default_rest_seconds == 90
        assert catalog.get(2).type == ExerciseType.CARDIO

    def test_empty_file_gives_empty_catalog(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert len(ExerciseCatalog.from_yaml(path)) == 0

    def test_non_list_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("name: Bench Press\n", encoding="utf-8")

        with pytest.raises(CatalogLoadError) as exc_info:
            ExerciseCatalog.from_yaml(path)
        assert exc_info.value.path == path

    def test_invalid_entry_rejected(self, tmp_path: Path):
        path = tmp_path / "invalid.yaml"
        path.write_text(
            "- name: Bench Press\n"
            "  type: strength\n"
            "  device: Barbell\n"
            "  primary_muscles: []\n",
            encoding="utf-8",
        )

        with pytest.raises(CatalogLoadError, match="entry 1"):
            ExerciseCatalog.from_yaml(path)

    def test_malformed_yaml_rejected(self, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("- name: Bench\n  type: [strength\n", encoding="utf-8")

        with pytest.raises(CatalogLoadError, match="Invalid YAML") as exc_info:
            ExerciseCatalog.from_yaml(path)
        assert exc_info.value.path == path

    def test_non_mapping_entry_rejected(self, tmp_path: Path):
        path = tmp_path / "scalar.yaml"
        path.write_text("- Bench Press\n", encoding="utf-8")

        with pytest.raises(CatalogLoadError, match="not a mapping"):
            ExerciseCatalog.from_yaml(path)

    def test_bundled_catalog_loads(self):
        """The bundled catalog is valid."""
        catalog = ExerciseCatalog.load_default(Settings(_env_file=None))

        assert DEFAULT_CATALOG_PATH.exists()
        assert len(catalog) > 0
        assert catalog.find("Bench Press") is not None

    def test_load_default_uses_configured_path(self, tmp_path: Path):
        path = tmp_path / "mine.yaml"
        path.write_text(
            "- name: Plank\n"
            "  type: recovery\n"
            "  device: Mat\n"
            "  primary_muscles: [Core]\n",
            encoding="utf-8",
        )
        settings = Settings(exercise_catalog_path=str(path), _env_file=None)

        catalog = ExerciseCatalog.load_default(settings)

        assert [e.name for e in catalog] == ["Plank"]
