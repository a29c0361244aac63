from __future__ import annotations

from pathlib import Path  # noqa: TC003

import pytest

from cobbledex.config.catalog import CATALOG_DIR_ENV, HTTP_TIMEOUT_ENV
from cobbledex.ui import cli
from tests.helpers.catalog import player_data_bytes, species_bytes


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    root = tmp_path / "species"
    (root / "gen1").mkdir(parents=True)
    (root / "gen1" / "bulbasaur.json").write_bytes(species_bytes("bulbasaur", 1))
    (root / "gen1" / "ivysaur.json").write_bytes(species_bytes("ivysaur", 2))
    (root / "gen2").mkdir()
    (root / "gen2" / "chikorita.json").write_bytes(species_bytes("chikorita", 152))
    return root


def test_cli_prints_summary(catalog_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--catalog-dir", str(catalog_dir)])

    out = capsys.readouterr().out
    assert "Captured 0/3 in all generations" in out
    assert "registered 0 of 3" in out


def test_cli_overlays_progress_and_lists_generation(
    catalog_dir: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    save = tmp_path / "player.json"
    save.write_bytes(player_data_bytes({"cobblemon:bulbasaur": ["shiny"]}))

    cli.main(
        ["--catalog-dir", str(catalog_dir), "--progress", str(save), "--generation", "1", "--list"]
    )

    out = capsys.readouterr().out
    assert "Captured 1/2 in generation 1" in out
    assert "Overall 1/3" in out
    assert "[x] #0001 bulbasaur gen1 (shiny)" in out
    assert "[ ] #0002 ivysaur gen1" in out
    assert "chikorita" not in out


def test_cli_reads_catalog_dir_from_environment(
    catalog_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv(CATALOG_DIR_ENV, str(catalog_dir))

    cli.main([])

    assert "Captured 0/3" in capsys.readouterr().out


def test_cli_missing_configuration_exits_2(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CATALOG_DIR_ENV, raising=False)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2


@pytest.mark.parametrize("timeout", ["soon", "0", "-1.5"])
def test_cli_invalid_http_timeout_exits_2(
    catalog_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    timeout: str,
) -> None:
    monkeypatch.setenv(HTTP_TIMEOUT_ENV, timeout)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--catalog-dir", str(catalog_dir)])

    assert excinfo.value.code == 2


def test_cli_rejects_non_positive_generation(catalog_dir: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--catalog-dir", str(catalog_dir), "--generation", "0"])

    assert excinfo.value.code == 2


def test_cli_unreadable_progress_exits_1(catalog_dir: Path, tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--catalog-dir", str(catalog_dir), "--progress", str(tmp_path / "none.json")])

    assert excinfo.value.code == 1


def test_cli_missing_catalog_exits_1(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--catalog-dir", str(tmp_path / "absent")])

    assert excinfo.value.code == 1
