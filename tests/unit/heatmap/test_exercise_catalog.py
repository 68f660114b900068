"""Tests for the built-in exercise catalog."""

from app.heatmap.exercise_catalog import (
    EXERCISE_CATALOG,
    default_catalog,
    get_exercise,
    register_exercise,
)
from app.heatmap.taxonomy import DEFAULT_TAXONOMY
from app.schemas.workout import ExerciseDefinition


class TestCatalogContents:
    """Verify the built-in exercise catalog is well-formed."""

    def test_catalog_not_empty(self):
        assert len(EXERCISE_CATALOG) >= 20, (
            f"Expected at least 20 exercises, got {len(EXERCISE_CATALOG)}"
        )

    def test_all_entries_are_definitions(self):
        for eid, definition in EXERCISE_CATALOG.items():
            assert isinstance(definition, ExerciseDefinition), (
                f"Catalog entry '{eid}' is {type(definition)}, expected ExerciseDefinition"
            )

    def test_exercise_id_matches_key(self):
        for key, definition in EXERCISE_CATALOG.items():
            assert definition.id == key, (
                f"Key '{key}' does not match id '{definition.id}'"
            )

    def test_no_duplicate_names(self):
        names = [d.name for d in EXERCISE_CATALOG.values()]
        assert len(names) == len(set(names)), "Duplicate exercise names found"

    def test_every_category_in_taxonomy(self):
        """A catalog category missing from the taxonomy is an integrity fault."""
        known = set(DEFAULT_TAXONOMY.category_muscle_groups)
        for eid, definition in EXERCISE_CATALOG.items():
            assert definition.category in known, (
                f"{eid}: category '{definition.category}' not in taxonomy"
            )

    def test_cardio_pseudo_exercises_present(self):
        for eid in ("run", "walk", "cycle", "hiit"):
            definition = get_exercise(eid)
            assert definition is not None, f"Missing cardio exercise '{eid}'"
            assert DEFAULT_TAXONOMY.cardio_weights_for(definition.category) is not None

    def test_target_muscle_labels_known(self):
        labels = set(DEFAULT_TAXONOMY.target_muscle_chart_groups)
        for eid, definition in EXERCISE_CATALOG.items():
            for label in definition.target_muscles:
                assert label in labels, f"{eid}: unknown target muscle '{label}'"


class TestCatalogAccess:
    def test_get_known_exercise(self):
        definition = get_exercise("barbell_bench_press")
        assert definition is not None
        assert definition.category == "Chest"

    def test_get_unknown_returns_none(self):
        assert get_exercise("nonexistent_exercise") is None

    def test_default_catalog_indexes_everything(self):
        catalog = default_catalog()
        assert len(catalog) == len(EXERCISE_CATALOG)
        assert catalog.by_name("Push-up").id == "push_up"

    def test_register_exercise(self):
        definition = ExerciseDefinition(id="_test_nordic_curl", name="_Test Nordic Curl", category="Hamstrings")
        try:
            register_exercise(definition)
            assert get_exercise("_test_nordic_curl") == definition
        finally:
            EXERCISE_CATALOG.pop("_test_nordic_curl", None)
