"""Tests for CLI commands: help, intervals, deck, config, study loop, and serve."""

import json
import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from flashdeck.interface._common import _resolve_with_overrides
from flashdeck.interface.cli import app

runner = CliRunner()


# --- Help ---


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "flashdeck" in result.stdout
    assert "study" in result.stdout
    assert "deck" in result.stdout


# --- Intervals ---


def test_intervals_json():
    result = runner.invoke(app, ["intervals", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "easy": 604800000,
        "good": 259200000,
        "difficult": 86400000,
        "repeat": 600000,
    }


def test_intervals_table():
    result = runner.invoke(app, ["intervals"])
    assert result.exit_code == 0
    assert "7 days" in result.stdout
    assert "10 minutes" in result.stdout


# --- Deck ---


def test_deck_show(deck_file):
    result = runner.invoke(app, ["deck", "show", str(deck_file)])
    assert result.exit_code == 0
    assert "Test Deck  (2 cards)" in result.stdout
    assert "Look after" in result.stdout


def test_deck_show_json(deck_file):
    result = runner.invoke(app, ["deck", "show", str(deck_file), "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["title"] == "Test Deck"
    assert data["cards"][0] == {
        "id": "1",
        "phrase": "Look up",
        "translation": "Cercare",
        "meaning": "To search for information",
        "examples": [{"topic": "Research", "example": "Look up the word."}],
    }


def test_deck_show_missing_file(tmp_path):
    result = runner.invoke(app, ["deck", "show", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1


# --- Config ---


def test_config_show_command():
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["port"] == 8778
    assert data["deck_path"] is None


# --- Study ---


@patch("flashdeck.interface.cli.now_ms", return_value=1_000)
def test_study_toggle_meaning_and_quit(mock_now, deck_file):
    result = runner.invoke(app, ["study", str(deck_file), "--seed", "1"], input="m\nq\n")

    assert result.exit_code == 0
    assert "Test Deck" in result.stdout
    assert "Meaning:" in result.stdout
    assert "Reviewed 0 of 2 cards this session." in result.stdout


@patch("flashdeck.interface.cli.now_ms", return_value=1_000)
def test_study_rating_all_cards_empties_deck(mock_now, deck_file):
    result = runner.invoke(app, ["study", str(deck_file)], input="e\nr\nq\n")

    assert result.exit_code == 0
    assert "No cards available for review." in result.stdout
    assert "Reviewed 2 of 2 cards this session." in result.stdout


@patch("flashdeck.interface.cli.now_ms", return_value=1_000)
def test_study_navigation_and_unknown_action(mock_now, deck_file):
    result = runner.invoke(app, ["study", str(deck_file)], input="n\np\ns\nx\nq\n")

    assert result.exit_code == 0
    assert "Unknown action 'x'" in result.stdout
    assert "100%" in result.stdout


def test_study_bad_deck(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    result = runner.invoke(app, ["study", str(bad)])
    assert result.exit_code == 1


# --- Serve ---


@patch("uvicorn.run")
def test_serve_command(mock_run):
    result = runner.invoke(app, ["serve", "--port", "9000"])
    assert result.exit_code == 0
    mock_run.assert_called_with("flashdeck.server:app", host="127.0.0.1", port=9000, reload=False)


# --- Verbosity ---


@pytest.fixture
def root_level():
    """Restore the root logger level changed by -vv."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_deck_show_honours_verbose(deck_file, root_level):
    with patch(
        "flashdeck.interface.cli._resolve_with_overrides", wraps=_resolve_with_overrides
    ) as mock_resolve:
        result = runner.invoke(app, ["-vv", "deck", "show", str(deck_file)])

    assert result.exit_code == 0
    assert mock_resolve.call_args.kwargs["verbose"] == 2
    assert root_level.level == logging.DEBUG


@patch("uvicorn.run")
def test_serve_honours_verbose(mock_run, root_level):
    with patch(
        "flashdeck.interface.cli._resolve_with_overrides", wraps=_resolve_with_overrides
    ) as mock_resolve:
        result = runner.invoke(app, ["-vv", "serve"])

    assert result.exit_code == 0
    assert mock_resolve.call_args.kwargs["verbose"] == 2
    assert root_level.level == logging.DEBUG
    mock_run.assert_called_once()
