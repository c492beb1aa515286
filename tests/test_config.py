from pathlib import Path

import pytest

from core import ServerConfig, StartupError
from core.config import DEFAULT_PUBLIC_DIR


def test_defaults():
    config = ServerConfig()
    assert config.port == 3000
    assert config.index_file == "index.html"
    assert config.public_dir == DEFAULT_PUBLIC_DIR.resolve()
    assert config.index_path == config.public_dir / "index.html"


def test_default_public_dir_ships_index():
    assert (DEFAULT_PUBLIC_DIR / "index.html").is_file()


def test_from_env_empty_uses_defaults():
    assert ServerConfig.from_env({}) == ServerConfig()


def test_from_env_overrides(tmp_path):
    config = ServerConfig.from_env(
        {
            "PUBLICSERVE_HOST": "127.0.0.1",
            "PUBLICSERVE_PORT": " 8080 ",
            "PUBLICSERVE_PUBLIC_DIR": str(tmp_path),
            "PUBLICSERVE_INDEX": "home.html",
            "PUBLICSERVE_CORS": "off",
            "LOG_LEVEL": "debug",
        }
    )
    assert config.host == "127.0.0.1"
    assert config.port == 8080
    assert config.public_dir == tmp_path.resolve()
    assert config.index_file == "home.html"
    assert config.cors is False
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["abc", "", "70000", "-1"])
def test_invalid_port_falls_back(raw):
    assert ServerConfig.from_env({"PUBLICSERVE_PORT": raw}).port == 3000


def test_relative_public_dir_is_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = ServerConfig(public_dir=Path("public"))
    assert config.public_dir == tmp_path.resolve() / "public"


def test_config_is_immutable():
    with pytest.raises(AttributeError):
        ServerConfig().port = 1


def test_validate_missing_dir(tmp_path):
    with pytest.raises(StartupError):
        ServerConfig(public_dir=tmp_path / "missing").validate()


def test_validate_file_instead_of_dir(tmp_path):
    path = tmp_path / "public"
    path.write_text("not a dir")
    with pytest.raises(StartupError):
        ServerConfig(public_dir=path).validate()


def test_validate_ok(public_dir):
    ServerConfig(public_dir=public_dir).validate()
