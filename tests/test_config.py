from showtracker import config as cfg_module

TOML = """
[source]
type = "csv"
path = "data/shows.csv"

[geocoding]
timeout = 5
"""


def test_load_with_secrets_file(tmp_path, monkeypatch):
    # set-then-delete so monkeypatch also removes what the secrets file injects
    for var in ("GOOGLE_SHEETS_ID", "GOOGLE_API_KEY", "MAPBOX_TOKEN"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    config_path = tmp_path / "config.toml"
    config_path.write_text(TOML)
    secrets_path = tmp_path / "secrets"
    secrets_path.write_text("# comment\nMAPBOX_TOKEN='pk.file'\nGOOGLE_API_KEY=filekey\n")
    monkeypatch.setenv("GOOGLE_API_KEY", "shellkey")

    cfg = cfg_module.load(config_path, secrets_path)

    assert cfg["secrets"]["mapbox_token"] == "pk.file"
    assert cfg["secrets"]["google_api_key"] == "shellkey"
    assert cfg_module.get_source(cfg)["type"] == "csv"
    assert cfg_module.get_source(cfg)["api_key"] == "shellkey"
    geocoding = cfg_module.get_geocoding(cfg)
    assert (geocoding["timeout"], geocoding["max_workers"], geocoding["token"]) == (5, 8, "pk.file")


def test_defaults_without_sections():
    cfg = {}
    assert cfg_module.get_source(cfg) == {"type": "sheets", "sheet_id": "", "api_key": ""}
    assert cfg_module.get_geocoding(cfg)["provider"] == "mapbox"
    assert cfg_module.get_site(cfg) == {}
