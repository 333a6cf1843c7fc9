import dataclasses

import pytest

from chord_fingering import DEFAULT_CONFIG, EngineConfig, ScoreWeights


class TestDefaults:
    def test_default_values(self):
        config = EngineConfig()
        assert config.display_window == 4
        assert config.max_stretch == 4
        assert config.min_pitch_classes == 3
        assert config.dynamic_threshold == 4
        assert config.max_results == 6
        assert config.max_dynamic_candidates == 4
        assert config.search_start_frets == tuple(range(11))
        assert config.weights == ScoreWeights()

    def test_default_instance(self):
        assert DEFAULT_CONFIG == EngineConfig()

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.max_results = 10

    def test_strategy_order(self):
        weights = ScoreWeights()
        assert weights.simple_slash.base > weights.fifth_string_bass.base
        assert weights.fifth_string_bass.base > weights.high_string_slash.base
        assert weights.high_string_slash.base > weights.low_string_slash.base
        assert weights.low_string_slash.base > weights.position.base


class TestFromEnv:
    def test_no_variables(self, monkeypatch):
        for name in (
            "CHORD_FINGERING_DISPLAY_WINDOW",
            "CHORD_FINGERING_MAX_STRETCH",
            "CHORD_FINGERING_DYNAMIC_THRESHOLD",
            "CHORD_FINGERING_MAX_RESULTS",
        ):
            monkeypatch.delenv(name, raising=False)
        assert EngineConfig.from_env() == EngineConfig()

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("CHORD_FINGERING_DISPLAY_WINDOW", "5")
        monkeypatch.setenv("CHORD_FINGERING_MAX_STRETCH", "3")
        monkeypatch.setenv("CHORD_FINGERING_DYNAMIC_THRESHOLD", "2")
        monkeypatch.setenv("CHORD_FINGERING_MAX_RESULTS", " 8 ")
        config = EngineConfig.from_env()
        assert config.display_window == 5
        assert config.max_stretch == 3
        assert config.dynamic_threshold == 2
        assert config.max_results == 8
        assert config.max_dynamic_candidates == 4

    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("CHORD_FINGERING_MAX_RESULTS", "  ")
        assert EngineConfig.from_env().max_results == 6

    @pytest.mark.parametrize("value", ["four", "2.5", "1e3"])
    def test_invalid_value(self, monkeypatch, value):
        monkeypatch.setenv("CHORD_FINGERING_MAX_STRETCH", value)
        with pytest.raises(ValueError, match="CHORD_FINGERING_MAX_STRETCH must be an integer"):
            EngineConfig.from_env()
