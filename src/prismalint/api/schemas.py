"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from prismalint.models.diagnostics import Diagnostic


class LintRequest(BaseModel):
    """Request body for POST /lint and POST /fix."""

    schema_text: str = Field(description="Prisma schema or carrier document to lint")
    filename: str = Field("schema.prisma", description="Name used to select applicable rules")


class LintResponse(BaseModel):
    """Response body for POST /lint."""

    filename: str
    analysed: bool
    error_count: int = 0
    warning_count: int = 0
    diagnostics: list[Diagnostic] = []


class FixResponse(BaseModel):
    """Response body for POST /fix."""

    filename: str
    output: str
    applied: int = 0
    diagnostics: list[Diagnostic] = []


class RuleInfo(BaseModel):
    """Information about a registered rule."""

    name: str
    description: str
    has_suggestions: bool = False
    enabled: bool = False


class RuleListResponse(BaseModel):
    """Response for GET /rules."""

    rules: list[RuleInfo] = []


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
