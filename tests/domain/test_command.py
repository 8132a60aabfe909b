"""Tests for JsonCommand construction and parameter accessors."""

from __future__ import annotations

import pytest

from billingctl.domain.command import JsonCommand
from billingctl.domain.errors import InvalidJsonError, InvalidParameterValueError
from tests.conftest import make_command


class TestFromJson:
    def test_parses_parameters(self) -> None:
        cmd = JsonCommand.from_json('{"serialNumber": "SN-1", "itemMasterId": 4}')
        assert cmd.parameters == {"serialNumber": "SN-1", "itemMasterId": 4}
        assert str(cmd) == '{"serialNumber": "SN-1", "itemMasterId": 4}'

    @pytest.mark.parametrize("body", ["", "   ", "\n\t"])
    def test_blank_rejected(self, body: str) -> None:
        with pytest.raises(InvalidJsonError):
            JsonCommand.from_json(body)

    @pytest.mark.parametrize("body", ["{not json", "[1, 2]", "null", '"text"'])
    def test_non_object_rejected(self, body: str) -> None:
        with pytest.raises(InvalidJsonError):
            JsonCommand.from_json(body)

    def test_routing_identifiers(self) -> None:
        cmd = JsonCommand.from_json(
            "{}", action_name="delete", entity_name="countrycurrency", entity_id=9
        )
        assert cmd.command_type == "DELETE_COUNTRYCURRENCY"
        assert cmd.entity_id == 9

    def test_command_type_none_without_action(self) -> None:
        assert JsonCommand.from_json("{}", entity_name="order").command_type is None


class TestImmutability:
    def test_attributes_frozen(self) -> None:
        cmd = make_command({"a": 1})
        with pytest.raises(AttributeError):
            cmd.entity_id = 5  # type: ignore[misc]

    def test_parameters_read_only(self) -> None:
        cmd = make_command({"a": 1})
        with pytest.raises(TypeError):
            cmd.parameters["a"] = 2  # type: ignore[index]

    def test_source_dict_not_shared(self) -> None:
        source = {"a": 1}
        cmd = JsonCommand(json='{"a": 1}', parameters=source)
        source["a"] = 99
        assert cmd.parameters["a"] == 1


class TestAccessors:
    def test_parameter_exists(self) -> None:
        cmd = make_command({"remarks": None})
        assert cmd.parameter_exists("remarks")
        assert not cmd.parameter_exists("status")

    def test_string_value_trimmed(self) -> None:
        cmd = make_command({"status": "  New  "})
        assert cmd.string_value_of_parameter_named("status") == "New"

    def test_string_value_blank_is_none(self) -> None:
        cmd = make_command({"status": "   "})
        assert cmd.string_value_of_parameter_named("status") is None

    def test_string_value_of_number(self) -> None:
        cmd = make_command({"serialNumber": 12345})
        assert cmd.string_value_of_parameter_named("serialNumber") == "12345"

    def test_string_value_of_object_is_none(self) -> None:
        cmd = make_command({"status": {"code": "x"}})
        assert cmd.string_value_of_parameter_named("status") is None

    def test_integer_value(self) -> None:
        cmd = make_command({"itemMasterId": "12", "grnId": 3})
        assert cmd.integer_value_of_parameter_named("itemMasterId") == 12
        assert cmd.integer_value_of_parameter_named("grnId") == 3
        assert cmd.integer_value_of_parameter_named("officeId") is None

    def test_integer_value_invalid(self) -> None:
        cmd = make_command({"itemMasterId": "twelve"})
        with pytest.raises(InvalidParameterValueError) as exc_info:
            cmd.integer_value_of_parameter_named("itemMasterId")
        assert exc_info.value.parameter_names == ["itemMasterId"]

    def test_boolean_value(self) -> None:
        cmd = make_command({"flag": "TRUE", "other": False})
        assert cmd.boolean_value_of_parameter_named("flag") is True
        assert cmd.boolean_value_of_parameter_named("other") is False
        assert cmd.boolean_value_of_parameter_named("missing") is None

    def test_boolean_value_invalid(self) -> None:
        cmd = make_command({"flag": "maybe"})
        with pytest.raises(InvalidParameterValueError):
            cmd.boolean_value_of_parameter_named("flag")

    def test_raw_value(self) -> None:
        cmd = make_command({"warranty": [1, 2]})
        assert cmd.value_of_parameter_named("warranty") == [1, 2]
        assert cmd.value_of_parameter_named("missing") is None
