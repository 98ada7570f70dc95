from __future__ import annotations

import json

import pytest

from abyssrunner import config as config_module
from abyssrunner.config import ENV_CONFIG_PATH, ENV_LOG_LEVEL, GameConfig, load_config
from abyssrunner.infra.exceptions import ConfigError


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.setattr(config_module, "_default_config_candidates", lambda: [tmp_path / "abyssrunner_config.json"])


class TestDefaults:
    def test_defaults_match_reference_tuning(self):
        cfg = GameConfig()
        assert cfg.cell_size == 40
        assert cfg.player_radius == 10
        assert cfg.player_speed == 4
        assert cfg.hazard_hit_radius == 8
        assert cfg.fps == 60
        assert cfg.game_over_restart_ms == 4000
        assert cfg.log_level == "INFO"

    def test_no_file_gives_defaults(self):
        assert load_config() == GameConfig()


class TestLoading:
    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"player_speed": 6, "log_level": "debug"}), encoding="utf-8")
        cfg = load_config(path)
        assert cfg.player_speed == 6
        assert cfg.log_level == "DEBUG"
        assert cfg.cell_size == 40

    def test_env_path(self, tmp_path, monkeypatch):
        path = tmp_path / "env.json"
        path.write_text(json.dumps({"fps": 30}), encoding="utf-8")
        monkeypatch.setenv(ENV_CONFIG_PATH, str(path))
        assert load_config().fps == 30

    def test_default_candidate_is_used(self, tmp_path):
        (tmp_path / "abyssrunner_config.json").write_text(json.dumps({"cell_size": 32}), encoding="utf-8")
        assert load_config().cell_size == 32

    def test_env_log_level_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"log_level": "ERROR"}), encoding="utf-8")
        monkeypatch.setenv(ENV_LOG_LEVEL, "warning")
        assert load_config(path).log_level == "WARNING"


class TestErrors:
    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    @pytest.mark.parametrize(
        "payload",
        [{"cell_size": 0}, {"fps": 0}, {"player_speed": -1}, {"log_level": "loud"}],
    )
    def test_invalid_values(self, tmp_path, payload):
        path = tmp_path / "c.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)
