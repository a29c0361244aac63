from __future__ import annotations

from cobbledex.domain.model import Catalog, MergedEntry, ProgressRecord
from cobbledex.domain.reconciliation import (
    filter_by_generation,
    normalize_aspects_map,
    normalize_species_key,
    reconcile,
    summarize,
)
from tests.helpers.catalog import make_species


def _catalog() -> Catalog:
    # insertion order deliberately differs from national number order
    return Catalog(
        species={
            "charmander": make_species("charmander", 4),
            "bulbasaur": make_species("bulbasaur", 1),
            "chikorita": make_species("chikorita", 152, generation=2),
            "ivysaur": make_species("ivysaur", 2),
        }
    )


def _progress(aspects: dict[str, tuple[str, ...]]) -> ProgressRecord:
    return ProgressRecord(
        uuid="player",
        starter_prompted=True,
        starter_locked=False,
        starter_selected=True,
        aspects_collected=aspects,
    )


def test_normalize_species_key_strips_namespace_case_and_whitespace() -> None:
    assert normalize_species_key("modns:Pikachu ") == "pikachu"
    assert normalize_species_key("cobblemon:mr:mime") == "mr:mime"
    assert normalize_species_key("  Eevee") == "eevee"


def test_normalize_aspects_map_keeps_last_duplicate() -> None:
    normalized = normalize_aspects_map(
        {"cobblemon:pikachu": ["male"], "other:PIKACHU": ["shiny"]}
    )

    assert normalized == {"pikachu": ("shiny",)}


def test_reconcile_without_progress_marks_nothing_captured() -> None:
    entries = reconcile(_catalog())

    assert [entry.name for entry in entries] == ["bulbasaur", "ivysaur", "charmander", "chikorita"]
    assert all(not entry.captured and entry.aspects == () for entry in entries)


def test_reconcile_joins_normalized_keys() -> None:
    entries = reconcile(_catalog(), _progress({"modns:Bulbasaur ": ("shiny", "female")}))

    by_name = {entry.name: entry for entry in entries}
    assert by_name["bulbasaur"] == MergedEntry(
        species=by_name["bulbasaur"].species, captured=True, aspects=("shiny", "female")
    )
    assert not by_name["ivysaur"].captured
    assert by_name["ivysaur"].aspects == ()


def test_reconcile_captured_with_empty_aspects() -> None:
    entries = reconcile(_catalog(), _progress({"cobblemon:ivysaur": ()}))

    ivysaur = next(entry for entry in entries if entry.name == "ivysaur")
    assert ivysaur.captured
    assert ivysaur.aspects == ()


def test_reconcile_ignores_progress_for_unknown_species() -> None:
    entries = reconcile(_catalog(), _progress({"cobblemon:missingno": ("glitch",)}))

    assert len(entries) == 4
    assert summarize(entries).captured == 0


def test_reconcile_is_idempotent() -> None:
    catalog = _catalog()
    progress = _progress({"cobblemon:charmander": ("shiny",)})

    assert reconcile(catalog, progress) == reconcile(catalog, progress)


def test_reconcile_orders_by_national_number_for_any_input_order() -> None:
    catalog = _catalog()
    reversed_input = list(reversed(list(catalog)))

    numbers = [entry.national_number for entry in reconcile(reversed_input)]

    assert numbers == sorted(numbers)
    assert reconcile(reversed_input) == reconcile(catalog)


def test_reconcile_does_not_mutate_inputs() -> None:
    catalog = _catalog()
    progress = _progress({"cobblemon:bulbasaur": ("shiny",)})
    before = (dict(catalog.species), dict(progress.aspects_collected))

    reconcile(catalog, progress)

    assert (dict(catalog.species), dict(progress.aspects_collected)) == before


def test_filter_by_generation_is_subset_of_all_entries() -> None:
    entries = reconcile(_catalog())

    for generation in (None, 1, 2, 3):
        displayed = filter_by_generation(entries, generation)
        assert all(entry in entries for entry in displayed)
        if generation is None:
            assert displayed == entries
        else:
            assert displayed == tuple(e for e in entries if e.generation == generation)


def test_summarize_counts_captures() -> None:
    entries = reconcile(_catalog(), _progress({"x:bulbasaur": (), "x:chikorita": ("shiny",)}))

    summary = summarize(entries)

    assert (summary.captured, summary.total, summary.missing) == (2, 4, 2)
    assert summary.ratio == 0.5
    assert summarize(()).ratio == 0.0
