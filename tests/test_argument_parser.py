"""Tests for command line parsing and the entry point."""

from __future__ import annotations

import pytest

import bare2gitea
from argument_parser import parse_arguments


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv('GITEA_USERNAME', raising=False)
    monkeypatch.delenv('GITEA_PASSWORD', raising=False)


def test_single_dash_flags_build_config(tmp_path) -> None:
    cfg = parse_arguments([
        '-path', str(tmp_path),
        '-url', 'https://git.example.com/',
        '-username', 'admin',
        '-password', 'secret',
        '-debug',
    ])

    assert cfg.forge.url == 'https://git.example.com'
    assert cfg.forge.username == 'admin'
    assert cfg.forge.password == 'secret'
    assert cfg.forge.debug is True
    assert cfg.source.path == str(tmp_path)
    assert cfg.behavior.dry_run is False


def test_credentials_fall_back_to_environment(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv('GITEA_USERNAME', 'envuser')
    monkeypatch.setenv('GITEA_PASSWORD', 'envpass')

    cfg = parse_arguments(['--path', str(tmp_path), '--url', 'http://gitea:3000', '--dry-run'])

    assert cfg.forge.username == 'envuser'
    assert cfg.forge.password == 'envpass'
    assert cfg.forge.debug is False
    assert cfg.behavior.dry_run is True


def test_missing_password_exits_with_auth_error(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(['-path', str(tmp_path), '-url', 'https://git.example.com',
                         '-username', 'admin'])

    assert excinfo.value.code == 40
    assert 'missing password' in capsys.readouterr().err


def test_missing_username_exits_with_auth_error(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(['-path', str(tmp_path), '-url', 'https://git.example.com',
                         '-password', 'secret'])

    assert excinfo.value.code == 40
    assert 'missing username' in capsys.readouterr().err


def test_missing_path_exits(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(['-url', 'https://git.example.com', '-username', 'admin',
                         '-password', 'x'])

    assert excinfo.value.code == 2


def test_missing_url_exits(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(['-path', str(tmp_path), '-username', 'admin', '-password', 'x'])

    assert excinfo.value.code == 2


def test_path_must_be_a_directory(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(['-path', str(tmp_path / 'missing'), '-url', 'https://git.example.com',
                         '-username', 'admin', '-password', 'x'])

    assert excinfo.value.code == 2


def test_url_must_be_http(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(['-path', str(tmp_path), '-url', 'ftp://git.example.com',
                         '-username', 'admin', '-password', 'x'])

    assert excinfo.value.code == 2


def test_main_exits_with_orchestrator_code(tmp_path, monkeypatch) -> None:
    seen = {}

    class FakeOrchestrator:
        def __init__(self, cfg) -> None:
            seen['cfg'] = cfg

        def run(self) -> int:
            return 31

    monkeypatch.setattr(bare2gitea, 'MigrationOrchestrator', FakeOrchestrator)

    with pytest.raises(SystemExit) as excinfo:
        bare2gitea.main(['-path', str(tmp_path), '-url', 'https://git.example.com',
                         '-username', 'admin', '-password', 'x'])

    assert excinfo.value.code == 31
    assert seen['cfg'].source.path == str(tmp_path)
