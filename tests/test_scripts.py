"""Tests for the entry scripts' CLI and startup failures."""
import importlib.util
from pathlib import Path

import pytest

from conftest import write_csv

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def _load_script(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def loader_script(monkeypatch, settings):
    module = _load_script("load_games_index")
    monkeypatch.setattr(module, "settings", settings)
    return module


@pytest.fixture
def enricher_script(monkeypatch, settings):
    module = _load_script("enrich_predecessors")
    monkeypatch.setattr(module, "settings", settings)
    return module


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_loader_help_exits_without_loading(loader_script, monkeypatch, capsys, flag):
    """Test help prints usage and never starts a load."""
    calls = []
    monkeypatch.setattr(loader_script, "run_loader", lambda *a, **kw: calls.append(a))

    with pytest.raises(SystemExit) as exc:
        loader_script.main([flag])

    assert exc.value.code == 0
    assert "usage" in capsys.readouterr().out.lower()
    assert calls == []


def test_loader_missing_dataset_exits_1(loader_script, capsys):
    """Test a missing input file is a clean startup error."""
    with pytest.raises(SystemExit) as exc:
        loader_script.main([])
    assert exc.value.code == 1
    assert "ERROR:" in capsys.readouterr().out


def test_loader_missing_columns_exits_1(loader_script, settings, capsys):
    """Test a dataset without required columns is refused."""
    settings.GAMES_CSV.write_text("Name,Platform\nTetris,GB\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        loader_script.main([])
    assert exc.value.code == 1
    assert "Missing required columns" in capsys.readouterr().out


def test_loader_directory_as_dataset_exits_1(loader_script, settings, tmp_path, capsys):
    """Test an unreadable dataset path is reported without a traceback."""
    settings.GAMES_CSV = tmp_path
    with pytest.raises(SystemExit) as exc:
        loader_script.main([])
    assert exc.value.code == 1
    assert "ERROR:" in capsys.readouterr().out


def test_enricher_missing_dataset_exits_1(enricher_script, capsys):
    """Test the enricher aborts when the dataset is missing."""
    with pytest.raises(SystemExit) as exc:
        enricher_script.main()
    assert exc.value.code == 1
    assert "ERROR:" in capsys.readouterr().out


def test_enricher_missing_columns_exits_1(enricher_script, settings, capsys):
    """Test the enricher requires the Rating column."""
    header = "Name,Platform,Year_of_Release,Genre,Publisher,NA_Sales,EU_Sales,JP_Sales,Other_Sales,Global_Sales,Critic_Score,Critic_Count,User_Score,User_Count"
    settings.GAMES_CSV.write_text(header + "\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        enricher_script.main()
    assert exc.value.code == 1
    assert "Rating" in capsys.readouterr().out


def test_enricher_unwritable_output_exits_1(enricher_script, monkeypatch, settings, tmp_path, capsys):
    """Test an unwritable output path aborts before a client is created."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    settings.OUTPUT_CSV = blocker / "out.csv"
    write_csv(settings.GAMES_CSV, ["Tetris,GB,1989,Puzzle,Nintendo,23.2,2.26,4.22,0.58,30.26,,,,,E"])

    def no_client(_settings):
        raise AssertionError("client should not be created")

    monkeypatch.setattr("games_index.pipeline.make_client", no_client)
    with pytest.raises(SystemExit) as exc:
        enricher_script.main()
    assert exc.value.code == 1
    assert "ERROR:" in capsys.readouterr().out
