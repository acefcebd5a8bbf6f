"""Tests for output formatting."""

from __future__ import annotations

import json
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from nautobot_cli.models.common import Status
from nautobot_cli.models.site import Site
from nautobot_cli.output.formatter import output, output_csv, to_data
from nautobot_cli.output.tables import cell, kv_table, make_table


def _capture() -> tuple[StringIO, Console]:
    buf = StringIO()
    return buf, Console(file=buf, force_terminal=False, width=200)


class TestToData:
    def test_model(self):
        data = to_data(Site(id="s1", name="A", status=Status(value="active", label="Active")))
        assert data["id"] == "s1"
        assert data["status"] == {"value": "active", "label": "Active"}

    def test_list_of_models(self):
        data = to_data([Site(id="s1"), Site(id="s2")])
        assert [d["id"] for d in data] == ["s1", "s2"]

    def test_plain_data_unchanged(self):
        assert to_data({"a": 1}) == {"a": 1}


class TestCell:
    def test_none(self):
        assert cell(None) == ""

    def test_nested_object_uses_label(self):
        assert cell({"value": "active", "label": "Active"}) == "Active"
        assert cell({"id": "r1", "name": "EMEA", "display": "EMEA (eu)"}) == "EMEA (eu)"

    def test_dict_without_label_keys(self):
        assert cell({"x": 1}) == ""

    def test_list(self):
        assert cell([{"name": "a"}, "b", 3]) == "a, b, 3"


class TestOutput:
    def test_json_models(self):
        buf, console = _capture()
        with patch("nautobot_cli.output.formatter.console", console):
            output([Site(id="s1", name="A")], "json")
        assert json.loads(buf.getvalue())[0]["name"] == "A"

    def test_yaml(self):
        buf, console = _capture()
        with patch("nautobot_cli.output.formatter.console", console):
            output({"key": "val"}, "yaml")
        assert "key: val" in buf.getvalue()

    def test_csv(self):
        buf, console = _capture()
        with patch("nautobot_cli.output.formatter.console", console):
            output_csv(["Name", "Devices"], [["a", 1], ["b", None]])
        out = buf.getvalue()
        assert "Name,Devices" in out
        assert "a,1" in out
        assert "b," in out

    def test_csv_without_rows_falls_back_to_json(self):
        buf, console = _capture()
        with patch("nautobot_cli.output.formatter.console", console):
            output({"a": 1}, "csv")
        assert json.loads(buf.getvalue()) == {"a": 1}

    def test_kv_table_from_model(self):
        buf, console = _capture()
        with patch("nautobot_cli.output.formatter.console", console):
            output(Site(id="s1", name="Alpha"), "table", kv=True, title="Site")
        out = buf.getvalue()
        assert "Alpha" in out
        assert "name" in out

    def test_columns_rows(self):
        buf, console = _capture()
        with patch("nautobot_cli.output.formatter.console", console):
            output([], "table", columns=["A", "B"], rows=[["1", "2"]], title="T")
        assert "A" in buf.getvalue()


class TestTables:
    def test_make_table(self):
        buf, console = _capture()
        console.print(make_table("Test", ["A", "B"], [["1", None], ["3", "4"]]))
        out = buf.getvalue()
        assert "Test" in out
        assert "4" in out

    def test_kv_table(self):
        buf, console = _capture()
        console.print(kv_table({"status": {"label": "Active"}, "asn": None}, title="KV"))
        out = buf.getvalue()
        assert "status" in out
        assert "Active" in out
