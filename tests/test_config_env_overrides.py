"""Tests for environment variable overrides in config."""

from __future__ import annotations


class TestTryParseEnvValue:
    """_try_parse_env_value correctly parses typed values."""

    def test_json_list_parsed(self):
        from comment_explorer.config import _try_parse_env_value

        assert _try_parse_env_value('["//", "#"]') == ["//", "#"]

    def test_json_object_parsed(self):
        from comment_explorer.config import _try_parse_env_value

        assert _try_parse_env_value('{"key": "value"}') == {"key": "value"}

    def test_booleans_parsed(self):
        from comment_explorer.config import _try_parse_env_value

        assert _try_parse_env_value("true") is True
        assert _try_parse_env_value("TRUE") is True
        assert _try_parse_env_value("False") is False

    def test_plain_string_passthrough(self):
        from comment_explorer.config import _try_parse_env_value

        assert _try_parse_env_value("#--") == "#--"

    def test_malformed_json_returns_string(self):
        from comment_explorer.config import _try_parse_env_value

        assert _try_parse_env_value("[not valid json") == "[not valid json"


class TestApplyEnvOverrides:
    def test_env_var_sets_scalar(self, monkeypatch):
        from comment_explorer.config import _apply_env_overrides

        monkeypatch.setenv("COMMENT_EXPLORER_ANNOTATIONS_MARKER", "@@")
        result = _apply_env_overrides({"annotations": {"marker": "#--"}})

        assert result["annotations"]["marker"] == "@@"

    def test_env_var_key_with_underscore(self, monkeypatch):
        from comment_explorer.config import _apply_env_overrides

        monkeypatch.setenv("COMMENT_EXPLORER_ANNOTATIONS_COMMENT_STYLES", '["#"]')
        result = _apply_env_overrides({"annotations": {}})

        assert result["annotations"]["comment_styles"] == ["#"]

    def test_env_var_creates_section(self, monkeypatch):
        from comment_explorer.config import _apply_env_overrides

        monkeypatch.setenv("COMMENT_EXPLORER_OUTPUT_FORMAT", "json")

        assert _apply_env_overrides({})["output"]["format"] == "json"

    def test_env_var_without_key_ignored(self, monkeypatch):
        from comment_explorer.config import _apply_env_overrides

        monkeypatch.setenv("COMMENT_EXPLORER_OUTPUT", "json")

        assert "output" not in _apply_env_overrides({})

    def test_load_config_applies_env(self, tmp_path, monkeypatch):
        from comment_explorer.config import load_config

        config_file = tmp_path / ".comment-explorer.toml"
        config_file.write_text('[annotations]\nseparator = "/"\n')
        monkeypatch.setenv("COMMENT_EXPLORER_ANNOTATIONS_SEPARATOR", ">")

        assert load_config(config_file)["annotations"]["separator"] == ">"


class TestCommentStylesOverride:
    """A plain string for comment_styles is one opener, not a list of characters."""

    def test_env_string_is_single_opener(self, monkeypatch):
        from comment_explorer.config import _apply_env_overrides
        from comment_explorer.outline import AnnotationConfig, LineScanner

        monkeypatch.setenv("COMMENT_EXPLORER_ANNOTATIONS_COMMENT_STYLES", "--")
        config = _apply_env_overrides({"annotations": {}})

        annotation_config = AnnotationConfig.from_dict(config["annotations"])
        scanner = LineScanner(annotation_config)

        assert annotation_config.comment_styles == ["--"]
        assert scanner.match_line("-- #-- sql step") == "sql step"
        assert scanner.match_line("- #-- only one dash") is None

    def test_toml_string_is_single_opener(self, tmp_path):
        from comment_explorer.config import load_config
        from comment_explorer.outline import AnnotationConfig, LineScanner

        config_file = tmp_path / ".comment-explorer.toml"
        config_file.write_text('[annotations]\ncomment_styles = "//"\n')

        scanner = LineScanner(AnnotationConfig.from_dict(load_config(config_file)["annotations"]))

        assert scanner.match_line("// #-- ok") == "ok"
        assert scanner.match_line("/ #-- single slash") is None
