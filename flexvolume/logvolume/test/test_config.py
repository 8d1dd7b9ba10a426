import pytest

from flexvolume.logvolume import config
from flexvolume.logvolume.exceptions import ConfigError


def test_missing_file_gives_defaults(tmp_path):
    assert config.load_config(str(tmp_path / "nope.conf")) == config.DEFAULTS


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "logvolume.conf"
    path.write_text("")

    assert config.load_config(str(path)) == config.DEFAULTS


def test_values_override_defaults(tmp_path):
    path = tmp_path / "logvolume.conf"
    path.write_text("logBaseDir: /srv/logs\nunmountCommand: [umount, -l]\nlogLevel: info\n")

    cfg = config.load_config(str(path))

    assert cfg["logBaseDir"] == "/srv/logs"
    assert cfg["unmountCommand"] == ["umount", "-l"]
    assert cfg["mountCommand"] == ["mount", "-o", "bind"]
    assert cfg["supportDir"] == config.DEFAULTS["supportDir"]


def test_env_selects_config_file(tmp_path, monkeypatch):
    path = tmp_path / "other.conf"
    path.write_text("logBaseDir: /other\n")
    monkeypatch.setenv(config.CONFIG_ENV, str(path))

    assert config.config_path() == str(path)
    assert config.load_config()["logBaseDir"] == "/other"


def test_default_path_without_env(monkeypatch):
    monkeypatch.delenv(config.CONFIG_ENV, raising=False)

    assert config.config_path() == config.DEFAULT_CONFIG_FILE


@pytest.mark.parametrize("text", [
    "logBaseDir: [unclosed\n",
    "- just\n- a list\n",
    "mountCommand: mount -o bind\n",
    "logBaseDir: ''\n",
    "logLevel: LOUD\n",
    "unmountCommand: [umount, 3]\n",
])
def test_bad_config(tmp_path, text):
    path = tmp_path / "logvolume.conf"
    path.write_text(text)

    with pytest.raises(ConfigError):
        config.load_config(str(path))
