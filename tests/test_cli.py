import json

from typer.testing import CliRunner

from blockflattening.cli import app

runner = CliRunner()


def test_state():
    result = runner.invoke(app, ["state", "32"])
    assert result.exit_code == 0
    assert result.output.strip() == "{Name:'minecraft:grass_block',Properties:{snowy:'false'}}"


def test_state_out_of_range_is_air():
    result = runner.invoke(app, ["state", "5000"])
    assert result.exit_code == 0
    assert result.output.strip() == "{Name:'minecraft:air'}"


def test_variant():
    result = runner.invoke(app, ["variant", "{Name:'minecraft:grass',Properties:{snowy:'true'}}"])
    assert result.exit_code == 0
    assert result.output.strip() == "{Name:'minecraft:grass_block',Properties:{snowy:'false'}}"


def test_unknown_variant_is_echoed():
    result = runner.invoke(app, ["variant", "{Name:'mymod:thing'}"])
    assert result.exit_code == 0
    assert result.output.strip() == "{Name:'mymod:thing'}"


def test_invalid_variant():
    result = runner.invoke(app, ["variant", "{Name:'minecraft:grass'"])
    assert result.exit_code == 2


def test_block():
    result = runner.invoke(app, ["block", "minecraft:grass"])
    assert result.exit_code == 0
    assert result.output.strip() == "minecraft:grass_block"


def test_audit():
    result = runner.invoke(app, ["audit"])
    assert result.exit_code == 0
    assert "declared states:" in result.output
    assert "fallback states:" in result.output


def test_audit_custom_table(tmp_path):
    table = tmp_path / "table.json"
    table.write_text(json.dumps([{"id": 16, "state": "{Name:'minecraft:stone'}", "variants": []}]))
    result = runner.invoke(app, ["audit", "--table", str(table)])
    assert result.exit_code == 0
    assert "declared states:      1" in result.output
    assert "fallback states:      4095" in result.output


def test_audit_broken_table(tmp_path):
    table = tmp_path / "table.json"
    table.write_text(json.dumps([{"id": 16, "state": "{Name:"}]))
    result = runner.invoke(app, ["audit", "--table", str(table)])
    assert result.exit_code == 1
