"""
Tests for comment_explorer.config module.
"""

import pytest


class TestConfigLoader:
    """Tests for configuration loading."""

    def test_load_config_with_defaults(self, tmp_path):
        """A partial config file is merged over the defaults."""
        from comment_explorer.config import load_config

        config_file = tmp_path / ".comment-explorer.toml"
        config_file.write_text('[annotations]\nmarker = "@@"\n')

        config = load_config(config_file)

        assert config["annotations"]["marker"] == "@@"
        assert config["annotations"]["separator"] == "::"
        assert config["annotations"]["comment_styles"] == ["//", "/*"]
        assert config["output"]["format"] == "text"

    def test_load_config_invalid_toml_raises(self, tmp_path):
        import tomlkit.exceptions

        from comment_explorer.config import load_config

        config_file = tmp_path / ".comment-explorer.toml"
        config_file.write_text("[annotations\nmarker = ")

        with pytest.raises(tomlkit.exceptions.ParseError):
            load_config(config_file)

    def test_find_config_file(self, tmp_path):
        from comment_explorer.config import find_config_file

        (tmp_path / ".comment-explorer.toml").write_text("")
        config_path = find_config_file(tmp_path)

        assert config_path is not None
        assert config_path.name == ".comment-explorer.toml"

    def test_find_config_in_parent(self, tmp_path):
        from comment_explorer.config import find_config_file

        (tmp_path / ".comment-explorer.toml").write_text("")
        nested = tmp_path / "src" / "net"
        nested.mkdir(parents=True)
        source = nested / "socket.c"
        source.write_text("")

        assert find_config_file(nested).parent == tmp_path
        assert find_config_file(source).parent == tmp_path

    def test_get_config_without_file_uses_defaults(self, tmp_path, monkeypatch):
        from comment_explorer.config import DEFAULT_CONFIG, get_config

        monkeypatch.setattr(
            "comment_explorer.config.loader.find_config_file", lambda start: None
        )

        assert get_config(start=tmp_path) == DEFAULT_CONFIG

    def test_get_config_explicit_path(self, tmp_path):
        from comment_explorer.config import get_config

        config_file = tmp_path / "custom.toml"
        config_file.write_text('[output]\nformat = "json"\n')

        assert get_config(config_file)["output"]["format"] == "json"

    def test_defaults_not_mutated(self, tmp_path):
        from comment_explorer.config import DEFAULT_CONFIG, load_config

        config_file = tmp_path / ".comment-explorer.toml"
        config_file.write_text('[annotations]\ncomment_styles = ["#"]\n')
        load_config(config_file)

        assert DEFAULT_CONFIG["annotations"]["comment_styles"] == ["//", "/*"]


class TestMergeConfigs:
    def test_nested_merge(self):
        from comment_explorer.config import merge_configs

        base = {"a": {"x": 1, "y": 2}, "b": 1}
        result = merge_configs(base, {"a": {"y": 3}, "c": 4})

        assert result == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}
        assert base == {"a": {"x": 1, "y": 2}, "b": 1}

    def test_scalar_replaces_table(self):
        from comment_explorer.config import merge_configs

        assert merge_configs({"a": {"x": 1}}, {"a": 5}) == {"a": 5}


class TestTomlParsing:
    def test_multiline_array(self):
        from comment_explorer.config import parse_toml

        result = parse_toml(
            """\
[annotations]
comment_styles = [
    "//",
    "--",  # SQL
]
"""
        )

        assert result["annotations"]["comment_styles"] == ["//", "--"]
        assert type(result["annotations"]["comment_styles"]) is list

    def test_round_trip_preserves_comments(self):
        import tomlkit

        from comment_explorer.config import parse_toml_document

        content = '# outline settings\n[annotations]\nmarker = "#--"  # default\n'
        doc = parse_toml_document(content)

        assert tomlkit.dumps(doc) == content
