"""Tests for the db-* naming-style rules: alias precedence and fix ranges."""

from __future__ import annotations

import pytest

from prismalint.models.dmmf import DmmfDocument
from prismalint.models.positions import DOCUMENT_ROOT, ReportLocation, SourcePosition
from prismalint.parser.carrier import extract, wrap
from prismalint.parser.dmmf import parse_dmmf
from prismalint.rules import RuleContext, RuleRegistry
from prismalint.service.linter import apply_fixes
from tests.conftest import BAD_SCHEMA, SAMPLE_SCHEMA, build_context, run_rule

DB_RULES = [
    "db-table-name-style",
    "db-column-name-style",
    "db-enum-name-style",
    "db-enum-value-style",
]


def _pos(line: int, column: int) -> SourcePosition:
    return SourcePosition(line=line, column=column)


def _fixed_text(text: str, diagnostics: list) -> str:
    return apply_fixes(text, diagnostics, include_renames=True)[0]


class TestConformingSchema:
    @pytest.mark.parametrize("name", DB_RULES)
    def test_no_diagnostics(self, name: str, sample_document: DmmfDocument) -> None:
        assert run_rule(name, SAMPLE_SCHEMA, sample_document) == []


class TestDbTableNameStyle:
    def test_alias_violation_is_reported_at_the_attribute(
        self, bad_document: DmmfDocument
    ) -> None:
        [diagnostic] = run_rule("db-table-name-style", BAD_SCHEMA, bad_document)
        assert diagnostic.message == "Database table names must follow the snake_case style."
        assert diagnostic.location == ReportLocation(start=_pos(6, 2), end=_pos(6, 3))
        [suggestion] = diagnostic.suggestions
        assert suggestion.fix.text == "user_accounts"
        start, end = suggestion.fix.range
        assert BAD_SCHEMA[start:end] == "UserAccounts"
        assert suggestion.fix.safe

    def test_alias_position_wins_when_name_is_also_invalid(self) -> None:
        schema = 'model BadModel {\n  id Int @id\n  @@map("BadTable")\n}\n'
        document = parse_dmmf(
            {"datamodel": {"models": [{"name": "BadModel", "dbName": "BadTable"}]}}
        )
        [diagnostic] = run_rule("db-table-name-style", schema, document)
        assert diagnostic.location.start == _pos(3, 2)
        assert _fixed_text(schema, [diagnostic]) == schema.replace("BadTable", "bad_table")

    def test_valid_alias_excuses_invalid_name(self) -> None:
        schema = 'model UserAccount {\n  id Int @id\n  @@map("user_accounts")\n}\n'
        document = parse_dmmf({"datamodel": {"models": [{"name": "UserAccount"}]}})
        assert run_rule("db-table-name-style", schema, document) == []

    def test_unmapped_name_is_checked_and_renamed(self) -> None:
        schema = "model UserAccount {\n  id Int @id\n}\n"
        document = parse_dmmf({"datamodel": {"models": [{"name": "UserAccount"}]}})
        [diagnostic] = run_rule("db-table-name-style", schema, document)
        assert diagnostic.location == ReportLocation(start=_pos(1, 6), end=_pos(1, 17))
        assert diagnostic.suggestions[0].fix.text == "user_account"
        assert not diagnostic.suggestions[0].fix.safe

    def test_parser_db_name_is_used_when_locator_has_no_alias(self) -> None:
        """A map the locator cannot see still counts; no fix is offered."""
        schema = "model users {\n  id Int @id\n}\n"
        document = parse_dmmf({"datamodel": {"models": [{"name": "users", "dbName": "Users"}]}})
        [diagnostic] = run_rule("db-table-name-style", schema, document)
        assert diagnostic.location == ReportLocation(start=_pos(1, 6), end=_pos(1, 11))
        assert diagnostic.suggestions == []

    def test_alias_value_not_found_keeps_diagnostic(self) -> None:
        schema = "model Account {\n  id Int @id\n  @@map(Accounts)\n}\n"
        document = parse_dmmf(
            {"datamodel": {"models": [{"name": "Account", "dbName": "Accounts"}]}}
        )
        [diagnostic] = run_rule("db-table-name-style", schema, document)
        assert diagnostic.location == ReportLocation(start=_pos(3, 2), end=_pos(3, 3))
        assert diagnostic.suggestions == []

    def test_unlocated_model_is_reported_at_document_root(self) -> None:
        document = parse_dmmf({"datamodel": {"models": [{"name": "Ghost_Model"}]}})
        [diagnostic] = run_rule("db-table-name-style", "// empty\n", document)
        assert diagnostic.location == DOCUMENT_ROOT
        assert diagnostic.suggestions == []

    def test_configured_style(self, bad_document: DmmfDocument) -> None:
        diagnostics = run_rule(
            "db-table-name-style", BAD_SCHEMA, bad_document, {"style": "PascalCase"}
        )
        assert diagnostics == []


class TestDbColumnNameStyle:
    def test_field_without_alias(self) -> None:
        schema = "model ExampleModel {\n  id String @id\n  exampleFieldId String\n}"
        document = parse_dmmf(
            {
                "datamodel": {
                    "models": [
                        {
                            "name": "ExampleModel",
                            "fields": [
                                {"name": "id", "kind": "scalar"},
                                {"name": "exampleFieldId", "kind": "scalar"},
                            ],
                        }
                    ]
                }
            }
        )
        [diagnostic] = run_rule("db-column-name-style", schema, document)
        assert diagnostic.location.start == _pos(3, 2)
        assert _fixed_text(schema, [diagnostic]) == schema.replace(
            "exampleFieldId", "example_field_id"
        )

    def test_violations(self, bad_document: DmmfDocument) -> None:
        diagnostics = run_rule("db-column-name-style", BAD_SCHEMA, bad_document)
        assert [d.location.start for d in diagnostics] == [_pos(2, 2), _pos(3, 22), _pos(4, 2)]
        assert [d.suggestions[0].fix.text for d in diagnostics] == ["id", "created_at", "status"]

    def test_fix_rewrites_alias_not_name(self, bad_document: DmmfDocument) -> None:
        diagnostics = run_rule("db-column-name-style", BAD_SCHEMA, bad_document)
        fixed = _fixed_text(BAD_SCHEMA, diagnostics)
        assert '  created_at DateTime @map("created_at")\n' in fixed

    def test_relation_fields_are_skipped(self, sample_document: DmmfDocument) -> None:
        diagnostics = run_rule(
            "db-column-name-style", SAMPLE_SCHEMA, sample_document, {"style": "PascalCase"}
        )
        flagged = {d.location.start.line for d in diagnostics}
        lines = SAMPLE_SCHEMA.splitlines()
        assert not any("posts     Post[]" in lines[line - 1] for line in flagged)
        assert not any("author   User" in lines[line - 1] for line in flagged)

    def test_allowlist(self, bad_document: DmmfDocument) -> None:
        diagnostics = run_rule(
            "db-column-name-style", BAD_SCHEMA, bad_document, {"allowlist": ["ID", "Status"]}
        )
        assert len(diagnostics) == 1


class TestDbEnumRules:
    def test_enum_alias(self) -> None:
        schema = 'enum ExampleEnum {\n  VALUE\n  @@map("ExampleEnum")\n}'
        document = parse_dmmf(
            {
                "datamodel": {
                    "enums": [
                        {
                            "name": "ExampleEnum",
                            "dbName": "ExampleEnum",
                            "values": [{"name": "VALUE"}],
                        }
                    ]
                }
            }
        )
        [diagnostic] = run_rule("db-enum-name-style", schema, document)
        assert diagnostic.location.start == _pos(3, 2)
        assert diagnostic.suggestions[0].fix.text == "example_enum"

    def test_enum_values(self, bad_document: DmmfDocument) -> None:
        diagnostics = run_rule("db-enum-value-style", BAD_SCHEMA, bad_document)
        assert [d.location.start for d in diagnostics] == [_pos(10, 9), _pos(11, 2)]
        fixed = _fixed_text(BAD_SCHEMA, diagnostics)
        assert '  active @map("active")\n' in fixed
        assert "  in_review\n" in fixed


class TestCarrierDocuments:
    def test_positions_are_shifted(self, bad_document: DmmfDocument) -> None:
        source = wrap(BAD_SCHEMA)
        rule = RuleRegistry.create("db-table-name-style")
        context = RuleContext(
            rule, build_context(source, bad_document), filename="schema.prisma.js"
        )
        rule.check(context)
        [diagnostic] = context.diagnostics
        assert diagnostic.location.start == _pos(7, 2)
        start, end = diagnostic.suggestions[0].fix.range
        assert source[start:end] == "UserAccounts"

    def test_fixes_survive_round_trip(self, bad_document: DmmfDocument) -> None:
        source = wrap(BAD_SCHEMA)
        context = build_context(source, bad_document)
        diagnostics = []
        for name in DB_RULES:
            rule = RuleRegistry.create(name)
            rule_context = RuleContext(rule, context)
            rule.check(rule_context)
            diagnostics.extend(rule_context.diagnostics)
        fixed = extract(_fixed_text(source, diagnostics)).schema_text
        assert fixed == (
            BAD_SCHEMA.replace("ID ", "id ", 1)
            .replace('"createdAt"', '"created_at"')
            .replace("Status     status", "status     status")
            .replace('"UserAccounts"', '"user_accounts"')
            .replace('"Active"', '"active"')
            .replace("InReview", "in_review")
            .replace('"Status"', '"status"')
        )
