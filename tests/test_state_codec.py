"""Tests for parsing and formatting block state descriptors."""

import logging

import pytest
from nbtlib import Byte, Compound, String

from blockflattening.block_state import block_state
from blockflattening.state_codec import StateParseError, format_state, from_nbt, parse_state, to_nbt


class TestParseState:
    def test_name_only(self):
        assert parse_state("{Name:'minecraft:stone'}") == block_state("minecraft:stone")

    def test_with_properties(self):
        state = parse_state("{Name:'minecraft:grass_block',Properties:{snowy:'false'}}")
        assert state.name == "minecraft:grass_block"
        assert state.properties == {"snowy": "false"}

    def test_values_are_plain_strings(self):
        state = parse_state("{Name:'minecraft:redstone_wire',Properties:{power:'15',north:'none'}}")
        assert type(state.name) is str
        assert all(type(value) is str for value in state.properties.values())
        assert state.get("power") == "15"

    def test_double_quotes_accepted(self):
        assert parse_state('{Name:"minecraft:air"}') == block_state("minecraft:air")


class TestParseFailures:
    @pytest.mark.parametrize(
        "text",
        [
            "{Name:'minecraft:stone'",
            "'minecraft:stone'",
            "{Properties:{snowy:'false'}}",
            "{Name:''}",
            "{Name:'minecraft:stone',Properties:'none'}",
        ],
    )
    def test_raises_state_parse_error(self, text):
        with pytest.raises(StateParseError):
            parse_state(text)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_state("{Name:")

    def test_failure_is_logged_with_text(self, caplog):
        with caplog.at_level(logging.ERROR, logger="blockflattening.state_codec"):
            with pytest.raises(StateParseError):
                parse_state("{Name:'minecraft:broken'")
        assert "{Name:'minecraft:broken'" in caplog.text


class TestFormatState:
    def test_name_only(self):
        assert format_state(block_state("minecraft:stone")) == "{Name:'minecraft:stone'}"

    def test_with_properties(self):
        text = "{Name:'minecraft:oak_stairs',Properties:{facing:'east',half:'bottom',shape:'straight'}}"
        assert format_state(parse_state(text)) == text


class TestNbtBridge:
    def test_to_nbt(self):
        tag = to_nbt(block_state("minecraft:furnace", facing="north", lit="true"))
        assert isinstance(tag, Compound)
        assert tag["Name"] == "minecraft:furnace"
        assert tag["Properties"]["lit"] == "true"

    def test_to_nbt_omits_empty_properties(self):
        assert "Properties" not in to_nbt(block_state("minecraft:stone"))

    def test_from_nbt(self):
        tag = Compound({"Name": String("minecraft:lever"), "Properties": Compound({"powered": String("false")})})
        assert from_nbt(tag) == block_state("minecraft:lever", powered="false")

    def test_from_nbt_coerces_numeric_tags(self):
        tag = Compound({"Name": String("minecraft:cake"), "Properties": Compound({"bites": Byte(3)})})
        assert from_nbt(tag).get("bites") == "3"

    def test_from_plain_dict(self):
        assert from_nbt({"Name": "minecraft:dirt"}) == block_state("minecraft:dirt")

    def test_round_trip(self):
        state = block_state("minecraft:chest", facing="west", type="single")
        assert from_nbt(to_nbt(state)) == state
