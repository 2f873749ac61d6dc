# tests/test_config.py
"""Tests for configuration loading and validation."""

import pytest
import yaml

from ghsync.config import SyncConfig, load_sync_config
from ghsync.config.schema import TOKEN_ENV
from ghsync.core.config import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_yaml,
)
from ghsync.core.paths import SyncPaths

pytestmark = pytest.mark.tier1


@pytest.fixture(autouse=True)
def no_token_env(monkeypatch):
    monkeypatch.delenv(TOKEN_ENV, raising=False)


def write(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestSyncConfig:
    def test_defaults(self):
        config = SyncConfig(repository="octocat/blog")

        assert config.branch == "master"
        assert config.api_url == "https://api.github.com"
        assert config.markdown_extensions == ["md", "markdown"]
        assert config.token is None
        assert config.database is None

    def test_repository_format(self):
        with pytest.raises(ValueError):
            SyncConfig(repository="not-a-repo")

    def test_extensions_normalized(self):
        config = SyncConfig(repository="o/r", markdown_extensions=[".MD", "mdx"], exclude_extensions=[".Txt"])

        assert config.markdown_extensions == ["md", "mdx"]
        assert config.exclude_extensions == ["txt"]

    def test_token_from_environment(self, monkeypatch):
        monkeypatch.setenv(TOKEN_ENV, "from-env")
        assert SyncConfig(repository="o/r").token == "from-env"
        assert SyncConfig(repository="o/r", token="explicit").token == "explicit"

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError):
            SyncConfig(repository="o/r", brnach="main")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            SyncConfig(repository="o/r", timeout=0)


class TestLoadSyncConfig:
    def test_loads_explicit_path(self, tmp_path):
        path = write(tmp_path / "sync.yaml", {"repository": "octocat/blog", "branch": "main"})

        config = load_sync_config(path)

        assert config.branch == "main"

    def test_default_path_and_database_in_workspace(self, tmp_path):
        SyncPaths.set_workspace(tmp_path / "ws")
        (tmp_path / "ws").mkdir()
        write(tmp_path / "ws" / "config.yaml", {"repository": "octocat/blog"})

        config = load_sync_config()

        assert config.database == tmp_path / "ws" / "content.db"

    def test_explicit_database_kept(self, tmp_path):
        path = write(tmp_path / "c.yaml", {"repository": "o/r", "database": str(tmp_path / "x.db")})
        assert load_sync_config(path).database == tmp_path / "x.db"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigNotFoundError) as exc:
            load_sync_config(tmp_path / "absent.yaml")
        assert "absent.yaml" in str(exc.value)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("repository: [oops", encoding="utf-8")

        with pytest.raises(ConfigParseError):
            load_sync_config(path)

    def test_schema_violation(self, tmp_path):
        path = write(tmp_path / "c.yaml", {"repository": "nope"})

        with pytest.raises(ConfigValidationError):
            load_sync_config(path)


class TestYamlHelpers:
    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigParseError):
            load_yaml(path)
