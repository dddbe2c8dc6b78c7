"""Shared test fixtures for prismalint."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from prismalint.exceptions import SchemaParseError
from prismalint.models.diagnostics import Diagnostic
from prismalint.models.dmmf import DmmfDocument
from prismalint.parser.context import SchemaContext, SchemaContextBuilder
from prismalint.parser.dmmf import parse_dmmf
from prismalint.rules import RuleContext, RuleRegistry


class StaticParser:
    """Stands in for the Node parser: returns a canned DMMF document."""

    def __init__(self, document: DmmfDocument) -> None:
        self.document = document
        self.calls: list[str] = []

    def __call__(self, schema_text: str) -> DmmfDocument:
        self.calls.append(schema_text)
        return self.document


class FailingParser:
    """Rejects every schema, like a parser fed a schema mid-edit."""

    def __init__(self, message: str = "Error validating model") -> None:
        self.message = message

    def __call__(self, schema_text: str) -> DmmfDocument:
        raise SchemaParseError(self.message)


def build_context(text: str, document: DmmfDocument) -> SchemaContext:
    context = SchemaContextBuilder(StaticParser(document)).build(text)
    assert context is not None
    return context


def run_rule(
    name: str,
    text: str,
    document: DmmfDocument,
    options: Mapping[str, Any] | None = None,
) -> list[Diagnostic]:
    """Run a single registered rule against *text* and return its diagnostics."""
    rule = RuleRegistry.create(name, options)
    context = RuleContext(rule, build_context(text, document))
    rule.check(context)
    return context.diagnostics


# ---------------------------------------------------------------------------
# Sample schemas
# ---------------------------------------------------------------------------

SCHEMA_HEADER = """\
datasource db {
  provider = "postgresql"
  url      = env("DATABASE_URL")
}

generator client {
  provider = "prisma-client-js"
}
"""

# Follows every default convention: PascalCase/camelCase in Prisma,
# snake_case in the database.
SAMPLE_SCHEMA = (
    SCHEMA_HEADER
    + """
model User {
  id        Int    @id @default(autoincrement())
  email     String @unique
  firstName String @map("first_name")
  posts     Post[]
  role      Role   @default(MEMBER)

  @@map("users")
}

model Post {
  id       Int  @id
  authorId Int  @map("author_id")
  author   User @relation(fields: [authorId], references: [id])

  @@map("posts")
}

enum Role {
  ADMIN  @map("admin")
  MEMBER @map("member")

  @@map("role")
}
"""
)

SAMPLE_DMMF: dict[str, Any] = {
    "datamodel": {
        "models": [
            {
                "name": "User",
                "dbName": "users",
                "fields": [
                    {"name": "id", "kind": "scalar", "type": "Int", "dbName": None},
                    {"name": "email", "kind": "scalar", "type": "String", "dbName": None},
                    {
                        "name": "firstName",
                        "kind": "scalar",
                        "type": "String",
                        "dbName": "first_name",
                    },
                    {"name": "posts", "kind": "object", "type": "Post", "dbName": None},
                    {"name": "role", "kind": "enum", "type": "Role", "dbName": None},
                ],
            },
            {
                "name": "Post",
                "dbName": "posts",
                "fields": [
                    {"name": "id", "kind": "scalar", "type": "Int", "dbName": None},
                    {"name": "authorId", "kind": "scalar", "type": "Int", "dbName": "author_id"},
                    {"name": "author", "kind": "object", "type": "User", "dbName": None},
                ],
            },
        ],
        "enums": [
            {
                "name": "Role",
                "dbName": "role",
                "values": [
                    {"name": "ADMIN", "dbName": "admin"},
                    {"name": "MEMBER", "dbName": "member"},
                ],
            },
        ],
    },
}

# Breaks every default convention.
BAD_SCHEMA = """\
model user_account {
  ID         Int      @id
  created_at DateTime @map("createdAt")
  Status     status

  @@map("UserAccounts")
}

enum status {
  active @map("Active")
  InReview

  @@map("Status")
}
"""

BAD_DMMF: dict[str, Any] = {
    "datamodel": {
        "models": [
            {
                "name": "user_account",
                "dbName": "UserAccounts",
                "fields": [
                    {"name": "ID", "kind": "scalar", "type": "Int"},
                    {
                        "name": "created_at",
                        "kind": "scalar",
                        "type": "DateTime",
                        "dbName": "createdAt",
                    },
                    {"name": "Status", "kind": "enum", "type": "status"},
                ],
            },
        ],
        "enums": [
            {
                "name": "status",
                "dbName": "Status",
                "values": [
                    {"name": "active", "dbName": "Active"},
                    {"name": "InReview"},
                ],
            },
        ],
    },
}


@pytest.fixture
def sample_document() -> DmmfDocument:
    return parse_dmmf(SAMPLE_DMMF)


@pytest.fixture
def bad_document() -> DmmfDocument:
    return parse_dmmf(BAD_DMMF)
