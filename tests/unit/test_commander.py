"""Tests for the commander protocol and DryRunCommander."""

import io
import json

import pytest
import yaml

from hephy_limits import (
    CommanderProtocol,
    DryRunCommander,
    InvalidOutputFormatError,
    LimitKind,
    LimitRequest,
    Subcommand,
    limits,
)


class TestCommanderProtocol:
    """Tests for runtime protocol checks."""

    def test_dry_run_commander_satisfies_protocol(self):
        assert isinstance(DryRunCommander(), CommanderProtocol)

    def test_duck_typed_commander(self):
        class Recorder:
            def limits_list(self, app):
                return app

            def limits_set(self, app, limits, kind):
                return app, limits, kind

            def limits_unset(self, app, limits, kind):
                return app, limits, kind

        assert isinstance(Recorder(), CommanderProtocol)

    def test_incomplete_commander(self):
        class ListOnly:
            def limits_list(self, app):
                return app

        assert not isinstance(ListOnly(), CommanderProtocol)


class TestDryRunCommander:
    """Tests for DryRunCommander."""

    def test_invalid_output(self):
        with pytest.raises(InvalidOutputFormatError, match="yaml, json"):
            DryRunCommander(output="xml")

    def test_list_yaml(self):
        out = io.StringIO()
        commander = DryRunCommander(file=out)
        request = commander.limits_list("myapp")

        assert request == LimitRequest(action=Subcommand.LIST, app="myapp")
        assert commander.requests == [request]
        assert yaml.safe_load(out.getvalue()) == {"action": "list", "app": "myapp"}

    def test_set_yaml(self):
        out = io.StringIO()
        commander = DryRunCommander(file=out)
        request = commander.limits_set(None, ["web=2G", "db=1G/2G"], "memory")

        assert request.kind is LimitKind.MEMORY
        assert request.values == ("web=2G", "db=1G/2G")
        assert yaml.safe_load(out.getvalue()) == {
            "action": "set",
            "app": None,
            "kind": "memory",
            "limits": [
                {"type": "web", "request": "2G", "limit": "2G"},
                {"type": "db", "request": "1G", "limit": "2G"},
            ],
        }

    def test_repeated_type_rendered_per_spec(self):
        out = io.StringIO()
        commander = DryRunCommander(output="json", file=out)
        commander.limits_set(None, ["web=1G", "web=2G"], "memory")

        rendered = json.loads(out.getvalue())["limits"]
        assert rendered == [
            {"type": "web", "request": "1G", "limit": "1G"},
            {"type": "web", "request": "2G", "limit": "2G"},
        ]

    def test_unset_json(self):
        out = io.StringIO()
        commander = DryRunCommander(output="json", file=out)
        commander.limits_unset("myapp", ["web", "worker"], "cpu")

        assert json.loads(out.getvalue()) == {
            "action": "unset",
            "app": "myapp",
            "kind": "cpu",
            "types": ["web", "worker"],
        }

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            DryRunCommander(file=io.StringIO()).limits_unset(None, ["web"], "disk")

    def test_through_router(self):
        """Requests rendered from the router keep argument order."""
        out = io.StringIO()
        commander = DryRunCommander(file=out)
        limits(["limits:set", "--cpu", "-a", "myapp", "web=250m/1", "worker=2"], commander)

        (request,) = commander.requests
        assert request == LimitRequest(
            action=Subcommand.SET,
            app="myapp",
            values=("web=250m/1", "worker=2"),
            kind=LimitKind.CPU,
        )
        rendered = yaml.safe_load(out.getvalue())["limits"]
        assert [entry["type"] for entry in rendered] == ["web", "worker"]
