import pytest
from pydantic import ValidationError

from productdash.utils.config_loader import StoreConfig, load_store_config


def test_defaults_without_file_or_env(tmp_path):
    cfg = load_store_config(config_path=tmp_path / "missing.yml", env={})
    assert cfg.token is None
    assert cfg.repo == "ddy-devlopment/cloud"
    assert cfg.filepath == "db-products.json"
    assert cfg.branch == "main"
    assert cfg.mode == "github"
    assert cfg.contents_path == "/repos/ddy-devlopment/cloud/contents/db-products.json"


def test_env_overrides_yaml(tmp_path):
    path = tmp_path / "store_config.yml"
    path.write_text("repo: acme/shop\nbranch: dev\ntimeout_seconds: 5\n", encoding="utf-8")

    cfg = load_store_config(
        config_path=path,
        env={"GITHUB_BRANCH": "release", "GITHUB_TOKEN": "ghp_x", "GITHUB_FILEPATH": "/data/p.json"},
    )

    assert cfg.repo == "acme/shop"
    assert cfg.branch == "release"
    assert cfg.token == "ghp_x"
    assert cfg.timeout_seconds == 5
    assert cfg.contents_path == "/repos/acme/shop/contents/data/p.json"


@pytest.mark.parametrize("raw, expected", [("mock", "memory"), ("REAL", "github"), ("live", "github")])
def test_integrations_mode_aliases(tmp_path, raw, expected):
    cfg = load_store_config(config_path=tmp_path / "none.yml", env={"INTEGRATIONS_MODE": raw})
    assert cfg.mode == expected


def test_blank_token_counts_as_missing():
    assert StoreConfig(token="  ").token is None


def test_invalid_values_raise(tmp_path):
    with pytest.raises(ValidationError):
        load_store_config(config_path=tmp_path / "none.yml", env={"GITHUB_TIMEOUT_SECONDS": "-1"})


def test_repr_hides_token():
    assert "ghp_secret" not in repr(StoreConfig(token="ghp_secret"))


def test_reads_process_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("GITHUB_REPO", "octo/catalog")
    cfg = load_store_config(config_path=tmp_path / "none.yml")
    assert cfg.repo == "octo/catalog"
