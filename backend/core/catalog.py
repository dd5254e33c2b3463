"""
In-memory exercise catalog.

The catalog owns identifier allocation for the Exercise records it creates:
each catalog hands out its own increasing ids, so no process-wide counter
exists. Records are immutable; updates store a re-validated copy.

Usage:
    from backend.core.catalog import ExerciseCatalog

    catalog = ExerciseCatalog.load_default()
    bench = catalog.find("bench press")
"""

import logging
import pathlib
from typing import Any, Dict, Iterable, Iterator, Optional, Union

import yaml

from backend.settings import Settings, get_settings
from domain.models import Exercise, ExerciseType, StrengthExercise

logger = logging.getLogger(__name__)

ROOT = pathlib.Path(__file__).resolve().parents[2]

DEFAULT_CATALOG_PATH = ROOT / "shared/dictionaries/exercise_catalog.yaml"


class ExerciseNotFoundError(LookupError):
    """Raised when an exercise id is not in the catalog."""

    def __init__(self, exercise_id: int):
        super().__init__(f"Exercise {exercise_id} not found in catalog")
        self.exercise_id = exercise_id


class CatalogLoadError(Exception):
    """Raised when a catalog file cannot be parsed into exercises."""

    def __init__(self, message: str, path: Optional[pathlib.Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class ExerciseCatalog:
    """
    Collection of exercises keyed by catalog-assigned id.

    Exercises keep insertion order when iterated.
    """

    def __init__(self, first_id: int = 1) -> None:
        self._exercises: Dict[int, Exercise] = {}
        self._next_id = first_id

    def add(
        self,
        name: str,
        type: Union[ExerciseType, str],
        device: str,
        primary_muscles: Iterable[str],
        *,
        default_rest_seconds: Optional[int] = None,
    ) -> Exercise:
        """
        Create an exercise and register it under the next id.

        Strength exercises are created as StrengthExercise.

        Args:
            name: Exercise name
            type: ExerciseType or its value ("strength", "cardio", "recovery")
            device: Device or equipment used
            primary_muscles: Primary muscle groups
            default_rest_seconds: Rest between sets (strength only)

        Returns:
            The registered Exercise

        Raises:
            pydantic.ValidationError: If any field is invalid. No id is
                consumed in that case.
            ValueError: If ``type`` is not a known exercise type.
        """
        exercise_type = ExerciseType(type)
        fields: Dict[str, Any] = {
            "id": self._next_id,
            "name": name,
            "device": device,
            "primary_muscles": primary_muscles,
        }
        if exercise_type == ExerciseType.STRENGTH:
            if default_rest_seconds is not None:
                fields["default_rest_seconds"] = default_rest_seconds
            exercise: Exercise = StrengthExercise(**fields)
        else:
            exercise = Exercise(type=exercise_type, **fields)

        self._exercises[exercise.id] = exercise
        self._next_id += 1
        logger.debug("Added exercise %d: %s", exercise.id, exercise)
        return exercise

    def get(self, exercise_id: int) -> Exercise:
        """
        Get an exercise by id.

        Raises:
            ExerciseNotFoundError: If no exercise has this id.
        """
        try:
            return self._exercises[exercise_id]
        except KeyError:
            raise ExerciseNotFoundError(exercise_id) from None

    def find(self, name: str) -> Optional[Exercise]:
        """Find an exercise by name, ignoring case and surrounding whitespace."""
        wanted = name.strip().casefold()
        return next(
            (e for e in self._exercises.values() if e.name.casefold() == wanted),
            None,
        )

    def update(self, exercise_id: int, **changes: Any) -> Exercise:
        """
        Replace an exercise with an updated copy.

        Sets already logged keep referencing the previous record.

        Returns:
            The updated Exercise

        Raises:
            ExerciseNotFoundError: If no exercise has this id.
            pydantic.ValidationError: If the updated values are invalid.
        """
        updated = self.get(exercise_id).with_updates(**changes)
        self._exercises[exercise_id] = updated
        return updated

    def remove(self, exercise_id: int) -> None:
        """
        Remove an exercise. Its id is never reused.

        Raises:
            ExerciseNotFoundError: If no exercise has this id.
        """
        self.get(exercise_id)
        del self._exercises[exercise_id]

    def __len__(self) -> int:
        return len(self._exercises)

    def __iter__(self) -> Iterator[Exercise]:
        return iter(list(self._exercises.values()))

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._exercises

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def from_yaml(cls, path: Union[str, pathlib.Path]) -> "ExerciseCatalog":
        """
        Build a catalog from a YAML list of exercises.

        Each item needs ``name``, ``type``, ``device`` and
        ``primary_muscles``; ``default_rest_seconds`` is optional.

        Raises:
            CatalogLoadError: If the file is not valid YAML, not a list of
                mappings, or an entry is not a valid exercise.
        """
        path = pathlib.Path(path)
        try:
            items = yaml.safe_load(path.read_text(encoding="utf-8")) or []
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Invalid YAML: {e}", path) from e
        if not isinstance(items, list):
            raise CatalogLoadError("Exercise catalog must be a YAML list", path)

        catalog = cls()
        for position, item in enumerate(items, start=1):
            if not isinstance(item, dict):
                raise CatalogLoadError(f"Catalog entry {position} is not a mapping", path)
            try:
                catalog.add(
                    item.get("name"),
                    item.get("type", ExerciseType.STRENGTH.value),
                    item.get("device"),
                    item.get("primary_muscles") or [],
                    default_rest_seconds=item.get("default_rest_seconds"),
                )
            except ValueError as e:
                # pydantic.ValidationError is a ValueError
                raise CatalogLoadError(f"Catalog entry {position} is invalid: {e}", path) from e

        logger.info("Loaded %d exercises from %s", len(catalog), path)
        return catalog

    @classmethod
    def load_default(cls, settings: Optional[Settings] = None) -> "ExerciseCatalog":
        """
        Load the configured catalog, or the bundled one if none is configured.

        Args:
            settings: Optional Settings instance. Defaults to get_settings().
        """
        if settings is None:
            settings = get_settings()
        path = settings.exercise_catalog_path or DEFAULT_CATALOG_PATH
        return cls.from_yaml(path)
