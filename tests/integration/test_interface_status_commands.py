"""Integration tests for interface-status commands."""

from __future__ import annotations

import json

import httpx
import respx
from typer.testing import CliRunner

from nautobot_cli.app import app

runner = CliRunner()
NB = "https://nautobot.local"
IFSTATUS = f"{NB}/api/plugins/interfaces-telemetry/interfaces-status/"
AUTH = ["--url", NB, "--token", "abc"]


class TestInterfaceStatusCommands:
    @respx.mock
    def test_list(self, envelope, make_interface_status):
        respx.get(IFSTATUS).mock(
            return_value=httpx.Response(200, json=envelope([
                make_interface_status("r1__eth0"),
                make_interface_status("r2__eth1", "down"),
            ]))
        )
        result = runner.invoke(app, ["interface-status", "list", *AUTH])
        assert result.exit_code == 0, result.output
        assert "r1" in result.output
        assert "down" in result.output

    @respx.mock
    def test_list_csv(self, envelope, make_interface_status):
        respx.get(IFSTATUS).mock(
            return_value=httpx.Response(200, json=envelope([make_interface_status("r1__eth0")]))
        )
        result = runner.invoke(app, ["interface-status", "list", "-f", "csv", *AUTH])
        assert result.exit_code == 0, result.output
        assert "Device,Interface,Status,Last Updated" in result.output
        assert "r1,eth0,up," in result.output

    @respx.mock
    def test_show(self, make_interface_status):
        respx.get(f"{IFSTATUS}r2__ethernet1/").mock(
            return_value=httpx.Response(200, json=make_interface_status("r2__ethernet1"))
        )
        result = runner.invoke(app, ["interface-status", "show", "r2__ethernet1", *AUTH])
        assert result.exit_code == 0, result.output
        assert "ethernet1" in result.output

    @respx.mock
    def test_create(self, make_interface_status):
        route = respx.post(IFSTATUS).mock(
            return_value=httpx.Response(201, json=[make_interface_status("r3__eth0")])
        )
        result = runner.invoke(app, [
            "interface-status", "create",
            "--data", '{"device_name": "r3", "interface_name": "eth0"}', *AUTH,
        ])
        assert result.exit_code == 0, result.output
        assert json.loads(route.calls.last.request.content)[0]["device_name"] == "r3"

    @respx.mock
    def test_update(self, make_interface_status):
        respx.patch(f"{IFSTATUS}r1__eth0/").mock(
            return_value=httpx.Response(200, json=make_interface_status("r1__eth0", "down"))
        )
        result = runner.invoke(app, [
            "interface-status", "update", "r1__eth0",
            "--data", '{"interface_status": "down"}', *AUTH,
        ])
        assert result.exit_code == 0, result.output
        assert "down" in result.output

    @respx.mock
    def test_update_not_found_fails(self):
        respx.patch(f"{IFSTATUS}r9__eth0/").mock(
            return_value=httpx.Response(404, json={"detail": "Not found."})
        )
        result = runner.invoke(app, [
            "interface-status", "update", "r9__eth0",
            "--data", '{"interface_status": "down"}', *AUTH,
        ])
        assert result.exit_code == 4

    @respx.mock
    def test_update_create_missing(self, make_interface_status):
        respx.patch(f"{IFSTATUS}r9__eth0/").mock(
            return_value=httpx.Response(404, json={"detail": "Not found."})
        )
        create = respx.post(IFSTATUS).mock(
            return_value=httpx.Response(201, json=[make_interface_status("r9__eth0", "down")])
        )
        result = runner.invoke(app, [
            "interface-status", "update", "r9__eth0", "--create-missing",
            "--data", '{"interface_status": "down"}', *AUTH,
        ])
        assert result.exit_code == 0, result.output
        assert create.called
        assert "creating it" in result.output

    @respx.mock
    def test_update_create_missing_ignores_other_errors(self):
        respx.patch(f"{IFSTATUS}r9__eth0/").mock(
            return_value=httpx.Response(404, text="proxy error page")
        )
        create = respx.post(IFSTATUS).mock(return_value=httpx.Response(201, json=[]))
        result = runner.invoke(app, [
            "interface-status", "update", "r9__eth0", "--create-missing",
            "--data", "{}", *AUTH,
        ])
        assert result.exit_code == 4
        assert not create.called

    @respx.mock
    def test_delete(self):
        route = respx.delete(f"{IFSTATUS}r1__eth0/").mock(return_value=httpx.Response(204))
        result = runner.invoke(app, ["interface-status", "delete", "r1__eth0", "--force", *AUTH])
        assert result.exit_code == 0, result.output
        assert route.called
