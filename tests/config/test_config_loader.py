# tests/config/test_config_loader.py
"""
Configuration loader and validator tests
"""

import pytest

from semlog.config import (
    RenderConfig,
    SemlogConfig,
    load_config,
    validate_render_config,
    has_errors,
    CONFIG_ENV_VAR,
)
from semlog.core.errors import InvalidOptionError
from semlog.tree.registry import DEFAULT_TIMING_KEYS


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """No user config leaks into these tests"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return home


def test_defaults_without_yaml():
    config = load_config()

    assert config == SemlogConfig.default()
    assert config.render.max_depth == 2
    assert config.render.expand_types == frozenset()
    assert config.render.min_duration == 0.0
    assert config.render.full_depth is False
    assert config.render.max_lines == 5
    assert config.render.output_format == "text"
    assert config.timing_keys == DEFAULT_TIMING_KEYS


def test_explicit_yaml(tmp_path):
    path = tmp_path / "semlog.yml"
    path.write_text(
        "render:\n"
        "  depth: 4\n"
        "  expand: [database_query, cache_operation]\n"
        "  threshold: 10ms\n"
        "  lines: 0\n"
        "  format: html\n"
        "timing_keys: [elapsed, executionTime]\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.render.max_depth == 4
    assert config.render.expand_types == frozenset({"database_query", "cache_operation"})
    assert config.render.min_duration == pytest.approx(0.01)
    assert config.render.max_lines == 0
    assert config.render.output_format == "html"
    assert config.timing_keys == ("elapsed", "executionTime")


def test_env_var_config(tmp_path, monkeypatch):
    path = tmp_path / "env.yml"
    path.write_text("render:\n  full: true\n  threshold: 0.5\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    config = load_config()

    assert config.render.full_depth is True
    assert config.render.min_duration == 0.5


def test_home_config(isolated_home):
    config_dir = isolated_home / ".semlog"
    config_dir.mkdir()
    (config_dir / "config.yml").write_text("render:\n  max_depth: 7\n", encoding="utf-8")

    assert load_config().render.max_depth == 7


def test_missing_explicit_path(tmp_path):
    with pytest.raises(InvalidOptionError) as exc_info:
        load_config(tmp_path / "nope.yml")
    assert exc_info.value.option == "config"


def test_broken_yaml_falls_back_to_defaults(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text("render: [unclosed\n", encoding="utf-8")

    assert load_config(path) == SemlogConfig.default()


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "extra.yml"
    path.write_text("render:\n  colour: blue\n  depth: 3\nplugins: []\n", encoding="utf-8")

    config = load_config(path)
    assert config.render.max_depth == 3


def test_bad_value_type(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("render:\n  depth: deep\n", encoding="utf-8")

    with pytest.raises(InvalidOptionError) as exc_info:
        load_config(path)
    assert exc_info.value.option == "render.depth"


def test_to_dict():
    data = SemlogConfig.default().to_dict()
    assert data["render"]["max_depth"] == 2
    assert data["render"]["expand_types"] == []
    assert data["timing_keys"] == list(DEFAULT_TIMING_KEYS)


class TestValidator:

    def test_default_config_is_clean(self):
        assert validate_render_config(RenderConfig()) == []

    def test_negative_values(self):
        issues = validate_render_config(RenderConfig(max_depth=-1, min_duration=-0.1, max_lines=-2))
        assert {issue.path for issue in issues} == {
            "render.max_depth",
            "render.threshold",
            "render.max_lines",
        }
        assert has_errors(issues)

    def test_unknown_format(self):
        issues = validate_render_config(RenderConfig(output_format="pdf"))
        assert issues[0].path == "render.format"
        assert "pdf" in str(issues[0])

    def test_full_depth_with_expand_is_warning(self):
        issues = validate_render_config(
            RenderConfig(full_depth=True, expand_types=frozenset({"database_query"}))
        )
        assert [issue.level for issue in issues] == ["warn"]
        assert not has_errors(issues)
