"""Tests for paths configuration."""

from pathlib import Path


def test_app_paths_default():
    from launchlist.config.paths import AppPaths

    paths = AppPaths.default()

    assert paths.config_path.name == "settings.yml"
    assert paths.css_path.name == "style.css"
    assert paths.css_path.parent.name == "launchlist"


def test_app_paths_custom(tmp_path: Path):
    from launchlist.config.paths import AppPaths

    paths = AppPaths(
        config_path=tmp_path / "config.yml",
        css_path=tmp_path / "custom.css",
    )

    assert paths.config_path == tmp_path / "config.yml"
    assert paths.css_path == tmp_path / "custom.css"
