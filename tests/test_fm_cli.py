import json
from pathlib import Path

import pytest

from sblex.fm_cli import main, parse_args
from sblex.kv_morphology import KvMorphology


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in (
        "FM_SERVER_APP_HOST",
        "FM_SERVER_APP_PORT",
        "MORPHOLOGY_PATH",
        "FM_SERVER__MORPHOLOGY_PATH",
        "FM_SERVER__OTEL_SERVICE_NAME",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_serve_defaults(clean_env):
    args = parse_args(["serve"])
    assert args.command == "serve"
    assert args.host == "127.0.0.1"
    assert args.port == 8765


def test_serve_defaults_from_environment(clean_env):
    clean_env.setenv("FM_SERVER_APP_HOST", "0.0.0.0")
    clean_env.setenv("FM_SERVER_APP_PORT", "9000")
    args = parse_args(["serve"])
    assert (args.host, args.port) == ("0.0.0.0", 9000)


def test_serve_explicit_arguments(clean_env):
    args = parse_args(["serve", "--host", "localhost", "--port", "0"])
    assert (args.host, args.port) == ("localhost", 0)


def test_port_out_of_range_is_rejected(clean_env):
    with pytest.raises(SystemExit):
        parse_args(["serve", "--port", "70000"])


def test_command_is_required(clean_env):
    with pytest.raises(SystemExit):
        parse_args([])


def test_db_takes_path(clean_env):
    args = parse_args(["db", "assets/testing/saldo.lex"])
    assert args.command == "db"
    assert args.path == Path("assets/testing/saldo.lex")


def test_main_db_builds_database(clean_env, tmp_path):
    lex = tmp_path / "saldo.lex"
    entry = {"word": "ögna", "head": "ögna", "id": "ögna..vb.1", "pos": "vb",
             "inhs": [], "param": "-", "p": "vb"}
    lex.write_text(json.dumps(entry, ensure_ascii=False) + "\n", encoding="utf-8")
    db = tmp_path / "morph.db"
    clean_env.setenv("FM_SERVER__OTEL_SERVICE_NAME", "fm-server")
    clean_env.setenv("FM_SERVER__MORPHOLOGY_PATH", str(db))

    assert main(["db", str(lex)]) == 0
    with KvMorphology(db) as morph:
        result = json.loads(morph.lookup("ögna"))
    assert result == [{"gf": "ögna", "id": "ögna..vb.1", "is": [], "msd": "-",
                       "p": "vb", "pos": "vb"}]


def test_main_requires_service_name(clean_env, tmp_path):
    clean_env.setenv("FM_SERVER__MORPHOLOGY_PATH", str(tmp_path / "db"))
    assert main(["db", "missing.lex"]) == 1


def test_main_requires_morphology_path(clean_env):
    clean_env.setenv("FM_SERVER__OTEL_SERVICE_NAME", "fm-server")
    assert main(["db", "missing.lex"]) == 1


def test_main_reports_missing_lex_file(clean_env, tmp_path):
    clean_env.setenv("FM_SERVER__OTEL_SERVICE_NAME", "fm-server")
    clean_env.setenv("FM_SERVER__MORPHOLOGY_PATH", str(tmp_path / "db"))
    assert main(["db", str(tmp_path / "missing.lex")]) == 1