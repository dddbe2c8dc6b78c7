"""Tests for DMMF models and the Node-backed schema parser."""

from __future__ import annotations

import json
import subprocess
from typing import Any

import pytest

from prismalint.exceptions import SchemaParseError
from prismalint.models.dmmf import FieldKind
from prismalint.parser.dmmf import NodeDmmfParser, parse_dmmf
from tests.conftest import SAMPLE_DMMF


class TestParseDmmf:
    def test_parse_dict(self) -> None:
        document = parse_dmmf(SAMPLE_DMMF)
        user, post = document.datamodel.models
        assert user.name == "User"
        assert user.db_name == "users"
        assert [f.name for f in post.fields] == ["id", "authorId", "author"]
        assert document.datamodel.enums[0].values[0].db_name == "admin"

    def test_parse_json_text_ignores_extra_keys(self) -> None:
        payload = {
            "datamodel": {
                "models": [
                    {
                        "name": "A",
                        "dbName": None,
                        "primaryKey": None,
                        "fields": [{"name": "id", "kind": "scalar", "isId": True}],
                    }
                ],
                "enums": [],
                "types": [],
            },
            "schema": {},
            "mappings": {},
        }
        document = parse_dmmf(json.dumps(payload))
        assert document.datamodel.models[0].fields[0].kind == FieldKind.SCALAR

    def test_column_kinds(self) -> None:
        user = parse_dmmf(SAMPLE_DMMF).datamodel.models[0]
        columns = {f.name for f in user.fields if f.is_column}
        assert columns == {"id", "email", "firstName", "role"}

    def test_invalid_json(self) -> None:
        with pytest.raises(SchemaParseError, match="Invalid DMMF payload"):
            parse_dmmf("{not json")

    def test_invalid_shape(self) -> None:
        with pytest.raises(SchemaParseError):
            parse_dmmf({"datamodel": {"models": [{"fields": []}]}})


def _completed(returncode: int, stdout: str = "", stderr: str = "") -> Any:
    return subprocess.CompletedProcess(
        args=["node"], returncode=returncode, stdout=stdout, stderr=stderr
    )


class TestNodeDmmfParser:
    def test_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: dict[str, Any] = {}

        def fake_run(cmd: list[str], **kwargs: Any) -> Any:
            seen["cmd"] = cmd
            seen.update(kwargs)
            return _completed(0, stdout=json.dumps(SAMPLE_DMMF))

        monkeypatch.setattr(subprocess, "run", fake_run)
        parser = NodeDmmfParser(node_binary="/usr/bin/node", cwd="/srv/app", timeout=5)
        document = parser("model User {}")
        assert document.datamodel.models[0].name == "User"
        assert seen["cmd"][0] == "/usr/bin/node"
        assert seen["input"] == "model User {}"
        assert str(seen["cwd"]) == "/srv/app"
        assert seen["timeout"] == 5

    def test_rejected_schema(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            subprocess, "run", lambda cmd, **kw: _completed(1, stderr="Error validating model")
        )
        with pytest.raises(SchemaParseError, match="Error validating model"):
            NodeDmmfParser()("model {")

    def test_missing_node(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(cmd: list[str], **kwargs: Any) -> Any:
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(subprocess, "run", fake_run)
        with pytest.raises(SchemaParseError, match="Node binary not found: nodejs"):
            NodeDmmfParser(node_binary="nodejs")("model A {}")

    def test_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(cmd: list[str], **kwargs: Any) -> Any:
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(subprocess, "run", fake_run)
        with pytest.raises(SchemaParseError, match="timed out after 2s"):
            NodeDmmfParser(timeout=2)("model A {}")
