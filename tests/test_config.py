from pathlib import Path

import pytest

from passlist.config import find_config_file, get_settings, load_config_file, parse_start_column
from passlist.errors import ConfigError


def test_find_config_file_substitutes_family_name(tmp_path: Path) -> None:
    config_dir = tmp_path / "getpass"
    config_dir.mkdir()
    (config_dir / "getpass.conf").write_text("", encoding="utf-8")
    path_list = f"{tmp_path}/missing:{tmp_path}/callerCfg/:{tmp_path}"

    found = find_config_file("getpass", "convert", "F", "getpass.conf", path_list)

    assert found == config_dir / "getpass.conf"


def test_find_config_file_individual_name(tmp_path: Path) -> None:
    config_dir = tmp_path / "convert"
    config_dir.mkdir()
    (config_dir / "getpass.conf").write_text("", encoding="utf-8")

    found = find_config_file("getpass", "convert", "I", "getpass.conf", f"{tmp_path}/callerCfg")

    assert found == config_dir / "getpass.conf"


def test_find_config_file_not_found(tmp_path: Path) -> None:
    assert find_config_file("getpass", "getpass", "F", "getpass.conf", str(tmp_path)) is None


def test_find_config_file_rejects_bad_flag(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        find_config_file("getpass", "getpass", "X", "getpass.conf", str(tmp_path))


def test_load_config_file_by_extension(tmp_path: Path) -> None:
    config_path = tmp_path / "getpass.conf"
    config_path.write_text("# comment\nexports/Vivaldi.csv\nlists/mine.list\n", encoding="utf-8")

    loaded = load_config_file(config_path)

    assert loaded.input_file == "exports/Vivaldi.csv"
    assert loaded.output_file == "lists/mine.list"


def test_get_settings_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "getpass.conf").write_text("from-config.csv\nfrom-config.txt\n", encoding="utf-8")
    monkeypatch.setenv("PASSLIST_CONFIG_PATH", str(tmp_path))
    monkeypatch.setenv("PASSLIST_OUTPUT_FILE", "from-env.txt")
    monkeypatch.setenv("PASSLIST_START_COLUMN", "40")
    monkeypatch.delenv("PASSLIST_INPUT_FILE", raising=False)
    monkeypatch.delenv("PASSLIST_PASSWORD_FILE", raising=False)

    settings = get_settings()

    assert settings.input_file == "from-config.csv"
    assert settings.output_file == "from-env.txt"
    assert settings.password_file == "from-config.txt"
    assert settings.password_start_column == 40


def test_get_settings_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PASSLIST_CONFIG_PATH", str(tmp_path))
    for name in ("PASSLIST_INPUT_FILE", "PASSLIST_OUTPUT_FILE", "PASSLIST_START_COLUMN", "PASSLIST_PASSWORD_FILE"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.input_file is None
    assert settings.output_file is None
    assert settings.password_start_column == 35
    assert settings.password_file.endswith(".local/share/passwords/vivaldi-passwords.txt")


def test_parse_start_column() -> None:
    assert parse_start_column("2") == 2
    with pytest.raises(ValueError):
        parse_start_column("1")


@pytest.mark.parametrize("raw", ["1", "0", "-5", "wide"])
def test_get_settings_rejects_bad_start_column(raw: str, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PASSLIST_CONFIG_PATH", str(tmp_path))
    monkeypatch.setenv("PASSLIST_START_COLUMN", raw)

    with pytest.raises(ConfigError):
        get_settings()
