# tests/test_cli.py

import pytest

from db_connector.__main__ import EXIT_CONFIG_ERROR, EXIT_INVALID, EXIT_VALID, main


@pytest.fixture(autouse=True)
def tmp_config(tmp_path, monkeypatch):
    ini_path = tmp_path / "test_config.ini"
    ini_path.write_text("[alpha]\nhost = db\ndatabase = app\nuseSSL = false\n")
    monkeypatch.setenv("DB_CONNECTOR_CONFIG", str(ini_path))
    for var in ("DB_HOST", "DB_PORT", "DB_NAME", "DB_USER", "DB_PASS"):
        monkeypatch.delenv(var, raising=False)
    return ini_path


def test_profile_uri(capsys):
    assert main(["--quiet"]) == EXIT_VALID
    assert capsys.readouterr().out.strip() == "jdbc:mysql://db:3306/app?useSSL=false"


def test_profile_with_extra_option(capsys):
    assert main(["--quiet", "--port", "3307", "--option", "serverTimezone=UTC"]) == EXIT_VALID
    out = capsys.readouterr().out.strip()
    assert out == "jdbc:mysql://db:3307/app?useSSL=false&serverTimezone=UTC"


def test_host_arguments(capsys):
    code = main(["--host", "localhost", "--option", "useSSL=false", "--option", "user"])
    out = capsys.readouterr().out
    assert code == EXIT_VALID
    assert "jdbc:mysql://localhost:3306?useSSL=false\n" in out
    assert "MySQLDriver" in out


def test_host_and_profile_conflict():
    assert main(["--host", "localhost", "--profile", "alpha"]) == EXIT_CONFIG_ERROR


def test_unknown_profile():
    assert main(["--profile", "nope"]) == EXIT_CONFIG_ERROR


def test_invalid_when_nothing_registered(empty_registry, capsys):
    assert main(["--host", "localhost"]) == EXIT_INVALID
    assert "No registered driver" in capsys.readouterr().out


@pytest.mark.parametrize("ini", [
    "host = db\n",
    "[alpha]\nhost = db\nhost = db2\n",
])
def test_malformed_config_is_a_config_error(tmp_config, ini, capsys):
    tmp_config.write_text(ini)
    assert main(["--quiet"]) == EXIT_CONFIG_ERROR
    assert "Cannot parse" in capsys.readouterr().out


def test_port_zero_overrides_profile_port(tmp_config, capsys):
    tmp_config.write_text("[alpha]\nhost = db\nport = 3310\ndatabase = app\n")
    assert main(["--quiet", "--port", "0"]) == EXIT_VALID
    assert capsys.readouterr().out.strip() == "jdbc:mysql://db:0/app"


def test_empty_database_overrides_profile_database(capsys):
    assert main(["--quiet", "--database", ""]) == EXIT_VALID
    assert capsys.readouterr().out.strip() == "jdbc:mysql://db:3306?useSSL=false"


def test_empty_host_does_not_fall_back_to_profile(capsys):
    assert main(["--quiet", "--host", ""]) == EXIT_VALID
    assert capsys.readouterr().out.strip() == "jdbc:mysql://:3306"
