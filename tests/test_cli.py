"""Tests for CLI interface."""

import json
import os

import pytest
from click.testing import CliRunner

from gamedirs.cli import cli


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def store_path(tmp_path):
    """Settings file for one test."""
    return tmp_path / "settings.json"


def stored_locations(store_path):
    return json.loads(store_path.read_text())["search_locations"]


def test_cli_help(runner):
    """Test CLI help message."""
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    assert 'Game Dirs' in result.output


def test_cli_version(runner):
    """Test CLI version command."""
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert '0.1.0' in result.output


def test_list_empty(runner, store_path):
    """Test listing with no locations registered."""
    result = runner.invoke(cli, ['--store', str(store_path), 'list'])
    assert result.exit_code == 0
    assert 'No search locations' in result.output


def test_add_and_list(runner, store_path, tmp_path):
    """Test adding a directory stores its file URI."""
    games = tmp_path / "games"
    games.mkdir()

    result = runner.invoke(cli, ['--store', str(store_path), 'add', str(games)])
    assert result.exit_code == 0
    assert 'Search location added' in result.output
    assert stored_locations(store_path) == games.resolve().as_uri()

    result = runner.invoke(cli, ['--store', str(store_path), 'list'])
    assert result.exit_code == 0
    assert 'Search Locations' in result.output


def test_add_twice(runner, store_path, tmp_path):
    """Test adding the same directory twice."""
    runner.invoke(cli, ['--store', str(store_path), 'add', str(tmp_path)])
    result = runner.invoke(cli, ['--store', str(store_path), 'add', str(tmp_path)])

    assert result.exit_code == 0
    assert 'already added' in result.output
    assert stored_locations(store_path) == tmp_path.resolve().as_uri()


def test_add_uri(runner, store_path):
    """Test URIs are stored verbatim."""
    uri = "content://com.android.externalstorage.documents/tree/primary%3AGames"
    result = runner.invoke(cli, ['--store', str(store_path), 'add', uri])

    assert result.exit_code == 0
    assert stored_locations(store_path) == uri


def test_add_missing_directory(runner, store_path, tmp_path):
    """Test adding a nonexistent directory fails."""
    result = runner.invoke(cli, ['--store', str(store_path), 'add', str(tmp_path / "missing")])
    assert result.exit_code != 0
    assert 'Error' in result.output
    assert not store_path.exists()


def test_store_from_env(runner, store_path):
    """Test store path can come from the environment."""
    result = runner.invoke(cli, ['add', 'file:///sdA'], env={'GAMEDIRS_STORE': str(store_path)})
    assert result.exit_code == 0
    assert stored_locations(store_path) == 'file:///sdA'


def test_delete(runner, store_path):
    """Test deleting a registered location."""
    store_path.write_text(json.dumps({"search_locations": "file:///sdA|file:///sdB"}))

    result = runner.invoke(cli, ['--store', str(store_path), 'delete', 'file:///sdA'])
    assert result.exit_code == 0
    assert 'Search location deleted' in result.output
    assert stored_locations(store_path) == 'file:///sdB'


def test_delete_unknown(runner, store_path):
    """Test deleting an unregistered location still succeeds."""
    result = runner.invoke(cli, ['--store', str(store_path), 'delete', 'file:///nowhere'])
    assert result.exit_code == 0
    assert 'Search location deleted' in result.output
    assert stored_locations(store_path) == ''


def test_delete_by_index(runner, store_path):
    """Test deleting by list position."""
    store_path.write_text(json.dumps({"search_locations": "file:///sdA|file:///sdB|file:///sdC"}))

    result = runner.invoke(cli, ['--store', str(store_path), 'delete', '--index', '2'])
    assert result.exit_code == 0
    assert stored_locations(store_path) == 'file:///sdA|file:///sdC'


def test_delete_index_out_of_range(runner, store_path):
    """Test deleting past the end of the list fails."""
    store_path.write_text(json.dumps({"search_locations": "file:///sdA"}))

    result = runner.invoke(cli, ['--store', str(store_path), 'delete', '--index', '5'])
    assert result.exit_code != 0
    assert stored_locations(store_path) == 'file:///sdA'


def test_delete_requires_one_target(runner, store_path):
    """Test delete needs exactly one of LOCATION and --index."""
    result = runner.invoke(cli, ['--store', str(store_path), 'delete'])
    assert result.exit_code == 2

    result = runner.invoke(cli, ['--store', str(store_path), 'delete', 'file:///sdA', '--index', '1'])
    assert result.exit_code == 2


def test_corrupt_store(runner, store_path):
    """Test unreadable store is reported as an error."""
    store_path.write_text("{not json")

    result = runner.invoke(cli, ['--store', str(store_path), 'list'])
    assert result.exit_code != 0
    assert 'Error' in result.output


def test_scan(runner, store_path, tmp_path):
    """Test scanning registered locations for games."""
    games = tmp_path / "games"
    games.mkdir()
    (games / "zelda.3ds").write_bytes(b"\x00" * 10)
    store_path.write_text(json.dumps({"search_locations": games.as_uri()}))

    result = runner.invoke(cli, ['--store', str(store_path), 'scan'])
    assert result.exit_code == 0
    assert '1 game(s) found' in result.output


def test_scan_nothing(runner, store_path):
    """Test scanning with no locations registered."""
    result = runner.invoke(cli, ['--store', str(store_path), 'scan'])
    assert result.exit_code == 0
    assert 'No games found' in result.output


def test_scan_with_broken_symlink(runner, store_path, tmp_path):
    """Test scan reports games next to a dangling symlink."""
    games = tmp_path / "games"
    games.mkdir()
    (games / "zelda.3ds").write_bytes(b"\x00" * 10)
    os.symlink(games / "gone", games / "broken")
    store_path.write_text(json.dumps({"search_locations": games.as_uri()}))

    result = runner.invoke(cli, ['--store', str(store_path), 'scan'])
    assert result.exit_code == 0
    assert '1 game(s) found' in result.output
