from dataclasses import dataclass
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from passlist.errors import ConfigError


load_dotenv()

logger = logging.getLogger(__name__)

APP_VERSION = "2.0.0"

CONFIG_FAMILY = "getpass"
CONFIG_FILE_NAME = "getpass.conf"
CONFIG_PLACEHOLDER = "callerCfg"
DEFAULT_CONFIG_PATH = ".:~/callerCfg:~/.config/callerCfg:~/.config:~:/etc/callerCfg:/etc"
DEFAULT_OUTPUT_FILE = "vivaldi-passwords.txt"
DEFAULT_PASSWORD_FILE = "~/.local/share/passwords/vivaldi-passwords.txt"
MIN_START_COLUMN = 2


@dataclass(frozen=True)
class Settings:
    app_name: str
    log_level: str
    input_file: str | None
    output_file: str | None
    default_output_file: str
    search_dir: str
    password_start_column: int
    password_file: str


@dataclass(frozen=True)
class FileConfig:
    input_file: str | None = None
    output_file: str | None = None


def find_config_file(family: str, individual: str, flag: str, config_name: str, path_list: str) -> Path | None:
    # callerCfg in each directory becomes the family (F) or individual (I) name.
    if flag == "F":
        substitute = family
    elif flag == "I":
        substitute = individual
    else:
        raise ValueError("flag must be 'F' (family) or 'I' (individual)")

    for directory in path_list.split(":"):
        if not directory:
            continue
        directory = directory.replace(CONFIG_PLACEHOLDER, substitute).rstrip("/") or "/"
        candidate = Path(os.path.expanduser(directory)) / config_name
        if candidate.is_file():
            return candidate
    return None


def load_config_file(path: Path) -> FileConfig:
    input_file: str | None = None
    output_file: str | None = None
    with path.open("r", encoding="utf-8") as infile:
        for line in infile:
            value = line.strip()
            if value.endswith(".csv"):
                input_file = value
            elif value.endswith((".txt", ".list")):
                output_file = value
    return FileConfig(input_file=input_file, output_file=output_file)


def _file_config() -> FileConfig:
    path_list = os.getenv("PASSLIST_CONFIG_PATH", DEFAULT_CONFIG_PATH)
    path = find_config_file(CONFIG_FAMILY, CONFIG_FAMILY, "F", CONFIG_FILE_NAME, path_list)
    if path is None:
        return FileConfig()
    logger.debug("config file loaded", extra={"config_path": str(path)})
    return load_config_file(path)


def parse_start_column(value: str) -> int:
    column = int(value)
    if column < MIN_START_COLUMN:
        raise ValueError(f"start column must be at least {MIN_START_COLUMN}")
    return column


def get_settings() -> Settings:
    raw_column = os.getenv("PASSLIST_START_COLUMN", "35")
    try:
        password_start_column = parse_start_column(raw_column)
    except ValueError as exc:
        raise ConfigError(f"invalid PASSLIST_START_COLUMN {raw_column!r}: {exc}") from exc

    file_config = _file_config()
    return Settings(
        app_name=os.getenv("APP_NAME", "passlist"),
        log_level=os.getenv("PASSLIST_LOG_LEVEL", "INFO"),
        input_file=os.getenv("PASSLIST_INPUT_FILE") or file_config.input_file,
        output_file=os.getenv("PASSLIST_OUTPUT_FILE") or file_config.output_file,
        default_output_file=os.getenv("PASSLIST_DEFAULT_OUTPUT_FILE", DEFAULT_OUTPUT_FILE),
        search_dir=os.getenv("PASSLIST_SEARCH_DIR", "."),
        password_start_column=password_start_column,
        password_file=os.path.expanduser(
            os.getenv("PASSLIST_PASSWORD_FILE") or file_config.output_file or DEFAULT_PASSWORD_FILE
        ),
    )
