"""Tests for grannysquare/config/settings.py."""

import pytest

from grannysquare.config import GeneratorSettings, load_settings
from grannysquare.palette import RepetitionMethod


class TestGeneratorSettings:
    def test_defaults(self):
        s = GeneratorSettings()
        assert s.n_rounds == 4
        assert s.pitch == "chart"
        assert s.repetition is RepetitionMethod.SEQUENTIAL

    def test_repetition_string_promoted(self):
        s = GeneratorSettings(repetition="alternating")
        assert s.repetition is RepetitionMethod.ALTERNATING

    def test_unknown_repetition_raises(self):
        with pytest.raises(ValueError):
            GeneratorSettings(repetition="random")

    @pytest.mark.parametrize(
        "field, value",
        [("n_rounds", 0), ("n_rounds", 9), ("stitch_width", 7), ("stitch_height", 41)],
    )
    def test_out_of_range_raises(self, field, value):
        with pytest.raises(ValueError, match=field):
            GeneratorSettings(**{field: value})

    @pytest.mark.parametrize("field", ["n_rounds", "stitch_width", "stitch_height"])
    def test_range_bounds_inclusive(self, field):
        GeneratorSettings(**{field: 8})

    def test_unknown_pitch_raises(self):
        with pytest.raises(ValueError, match="pitch"):
            GeneratorSettings(pitch="sketch")

    def test_realistic_pitch_accepted(self):
        assert GeneratorSettings(pitch="realistic").pitch == "realistic"

    def test_empty_palette_name_raises(self):
        with pytest.raises(ValueError, match="palette_name"):
            GeneratorSettings(palette_name="")


class TestLoadSettings:
    def test_packaged_defaults(self):
        assert load_settings() == GeneratorSettings()

    def test_overrides_win(self):
        s = load_settings(n_rounds=6, palette_name="Ocean Blues")
        assert s.n_rounds == 6
        assert s.palette_name == "Ocean Blues"

    def test_file_layer(self, tmp_path):
        path = tmp_path / "square.yaml"
        path.write_text("n_rounds: 2\nrepetition: alternating\n")
        s = load_settings(path)
        assert s.n_rounds == 2
        assert s.repetition is RepetitionMethod.ALTERNATING
        assert s.stitch_width == 24

    def test_override_beats_file(self, tmp_path):
        path = tmp_path / "square.yaml"
        path.write_text("n_rounds: 2\n")
        assert load_settings(path, n_rounds=3).n_rounds == 3

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_settings(path) == GeneratorSettings()

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError, match="Unknown settings"):
            load_settings(hook_size=5)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "nope.yaml")

    def test_non_mapping_file_raises(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_settings(path)

    def test_malformed_yaml_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("n_rounds: [1\n")
        with pytest.raises(ValueError, match="Failed to parse"):
            load_settings(path)
