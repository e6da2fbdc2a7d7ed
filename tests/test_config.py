"""
Tests for configuration loading.
"""

import copy

from hexpy.config import DEFAULT_CONFIG, deep_merge, load_config


class TestDeepMerge:

    def test_nested_merge(self):
        base = {"a": {"x": 1, "y": 2}, "b": 3}

        merged = deep_merge(base, {"a": {"y": 20, "z": 30}, "c": 4})

        assert merged == {"a": {"x": 1, "y": 20, "z": 30}, "b": 3, "c": 4}

    def test_inputs_are_not_mutated(self):
        base = {"a": {"x": 1}}
        override = {"a": {"x": 2}}

        merged = deep_merge(base, override)
        merged["a"]["x"] = 99

        assert base == {"a": {"x": 1}}
        assert override == {"a": {"x": 2}}


class TestLoadConfig:

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert load_config() == DEFAULT_CONFIG

    def test_reads_config_from_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "config.toml").write_text('[editor]\npage_rows = 5\n', encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        config = load_config()

        assert config["editor"]["page_rows"] == 5
        assert config["keybindings"] == DEFAULT_CONFIG["keybindings"]

    def test_explicit_path_overrides(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text(
            '[keybindings]\nquit = "Q"\nsave = ["s", "ctrl+s"]\n\n'
            '[logging]\nlevel = "DEBUG"\n',
            encoding="utf-8",
        )

        config = load_config(str(path))

        assert config["keybindings"]["quit"] == ["Q"]
        assert config["keybindings"]["save"] == ["s", "ctrl+s"]
        assert config["keybindings"]["undo"] == ["u"]
        assert config["logging"] == {"file": "", "level": "DEBUG"}

    def test_missing_explicit_path(self, tmp_path):
        assert load_config(str(tmp_path / "missing.toml")) == DEFAULT_CONFIG

    def test_parse_error_falls_back(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text('[editor]\npage_rows\n', encoding="utf-8")

        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_non_table_section_is_reset(self, tmp_path):
        path = tmp_path / "odd.toml"
        path.write_text('editor = 5\n', encoding="utf-8")

        config = load_config(str(path))

        assert config["editor"] == DEFAULT_CONFIG["editor"]

    def test_invalid_page_rows(self, tmp_path):
        path = tmp_path / "rows.toml"
        path.write_text('[editor]\npage_rows = 0\n', encoding="utf-8")

        assert load_config(str(path))["editor"]["page_rows"] == 20

    def test_bad_keybinding_value(self, tmp_path):
        path = tmp_path / "keys.toml"
        path.write_text('[keybindings]\nundo = 5\n', encoding="utf-8")

        assert load_config(str(path))["keybindings"]["undo"] == ["u"]

    def test_defaults_are_not_mutated(self, tmp_path):
        before = copy.deepcopy(DEFAULT_CONFIG)
        path = tmp_path / "c.toml"
        path.write_text('[editor]\npage_rows = 3\n', encoding="utf-8")

        config = load_config(str(path))
        config["keybindings"]["quit"].append("z")

        assert DEFAULT_CONFIG == before
