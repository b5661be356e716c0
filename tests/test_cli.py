"""Tests for cli.py — status, scan and mcp-config subcommands."""

import json

import pytest

from carbon_mcp.cli import main


@pytest.fixture()
def data_env(tmp_path, monkeypatch):
    """Point every snapshot setting at an empty tmp data directory."""
    for name in ("CARBON_DB", "CARBON_TOKENS", "CARBON_ICONS", "CARBON_PICTOS"):
        monkeypatch.delenv(name, raising=False)
    data_dir = tmp_path / "data"
    monkeypatch.setenv("CARBON_DATA_DIR", str(data_dir))
    return data_dir


class TestStatus:
    def test_missing_files(self, data_env, capsys):
        main(["status"])
        out = capsys.readouterr().out
        assert f"Components: {data_env / 'components.json'}  (missing)" in out
        assert "  Components: 0" in out
        assert "  Tokens: not loaded" in out

    def test_default_command_is_status(self, data_env, capsys):
        main([])
        assert "Snapshot files:" in capsys.readouterr().out

    def test_token_counts(self, data_env, capsys):
        data_env.mkdir()
        (data_env / "tokens.json").write_text(
            json.dumps({"colors": {"blue60": "#0f62fe", "red60": "#da1e28"}})
        )
        main(["status"])
        out = capsys.readouterr().out
        assert "    colors: 2" in out
        assert "    grid: 0" in out

    def test_bad_snapshot_exits(self, data_env, capsys):
        data_env.mkdir()
        (data_env / "icons.json").write_text("{}")
        with pytest.raises(SystemExit) as exc:
            main(["status"])
        assert exc.value.code == 1
        assert "ERROR: Failed to load" in capsys.readouterr().out


    def test_undecodable_snapshot_exits(self, data_env, capsys):
        data_env.mkdir()
        (data_env / "components.json").write_bytes(b'[{"name": "\xff"}]')
        with pytest.raises(SystemExit) as exc:
            main(["status"])
        assert exc.value.code == 1
        assert "not valid UTF-8" in capsys.readouterr().out


class TestScan:
    def test_nothing_to_scan(self, data_env, capsys):
        with pytest.raises(SystemExit):
            main(["scan"])
        assert "Nothing to scan" in capsys.readouterr().out

    def test_writes_snapshots(self, tmp_path, data_env, capsys):
        seed = tmp_path / "seed.json"
        seed.write_text(json.dumps({"Button": {"examples": ["Submit"]}, "Tag": {}}))
        icons = tmp_path / "icons-react"
        (icons / "lib").mkdir(parents=True)
        (icons / "lib" / "Add.js").touch()

        main(["scan", "--seed", str(seed), "--icons", str(icons)])

        out = capsys.readouterr().out
        assert "Components: 2 (1 with examples)" in out
        assert "Icons: 1" in out
        components = json.loads((data_env / "components.json").read_text())
        assert [c["name"] for c in components] == ["Button", "Tag"]
        assert json.loads((data_env / "icons.json").read_text())[0]["category"] == "Actions"
        assert not (data_env / "tokens.json").exists()

    def test_explicit_out_dir(self, tmp_path, data_env):
        tokens_dir = tmp_path / "tokens"
        tokens_dir.mkdir()
        out = tmp_path / "elsewhere"

        main(["scan", "--tokens", str(tokens_dir), "--out", str(out)])

        assert "grid" in json.loads((out / "tokens.json").read_text())

    def test_bad_seed_entry_exits(self, tmp_path, data_env, capsys):
        seed = tmp_path / "seed.json"
        seed.write_text(json.dumps({"Button": ["not", "an", "object"]}))
        with pytest.raises(SystemExit) as exc:
            main(["scan", "--seed", str(seed)])
        assert exc.value.code == 1
        assert "ERROR: Seed entry 'Button'" in capsys.readouterr().out

    def test_missing_seed_exits(self, tmp_path, data_env, capsys):
        with pytest.raises(SystemExit):
            main(["scan", "--seed", str(tmp_path / "nope.json")])
        assert capsys.readouterr().out.startswith("ERROR:")


class TestMcpConfig:
    def test_prints_entry(self, data_env, capsys):
        main(["mcp-config"])
        config = json.loads(capsys.readouterr().out)
        entry = config["mcpServers"]["carbon-mcp"]
        assert entry["env"]["CARBON_DB"] == str(data_env / "components.json")

    def test_write_explicit_config(self, tmp_path, data_env, capsys):
        config_path = tmp_path / "mcp.json"

        main(["mcp-config", "--write", "--config", str(config_path)])
        assert "carbon-mcp added in" in capsys.readouterr().out

        main(["mcp-config", "--write", "--config", str(config_path)])
        assert "already configured" in capsys.readouterr().out
        assert "carbon-mcp" in json.loads(config_path.read_text())["mcpServers"]
