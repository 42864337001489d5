"""Unit tests for synology_srm.utils.form."""

from __future__ import annotations

import pytest

from synology_srm.utils.form import encode_form, form_value, json_param


class TestJsonParam:
    def test_list_is_compact(self) -> None:
        assert json_param(["device", "total_timespent"]) == '["device","total_timespent"]'

    def test_string_is_quoted(self) -> None:
        assert json_param("aa:aa:aa:aa:aa:01") == '"aa:aa:aa:aa:aa:01"'

    def test_object_is_compact(self) -> None:
        assert json_param({"id": 1, "enable": True}) == '{"id":1,"enable":true}'

    def test_non_ascii_kept(self) -> None:
        assert json_param("Café") == '"Café"'


class TestFormValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "true"),
            (False, "false"),
            (None, ""),
            (5, "5"),
            (2.5, "2.5"),
            ("wan", "wan"),
        ],
    )
    def test_scalars(self, value: object, expected: str) -> None:
        assert form_value(value) == expected

    @pytest.mark.parametrize("value", [[1], {"a": 1}, (1, 2)])
    def test_non_scalars_rejected(self, value: object) -> None:
        with pytest.raises(TypeError, match="json_param"):
            form_value(value)


class TestEncodeForm:
    def test_preserves_order(self) -> None:
        pairs = encode_form({"method": "get", "version": 5, "api": "SYNO.X"})
        assert pairs == [("method", "get"), ("version", "5"), ("api", "SYNO.X")]

    def test_empty(self) -> None:
        assert encode_form(None) == []
        assert encode_form({}) == []
