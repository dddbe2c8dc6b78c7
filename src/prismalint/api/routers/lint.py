"""Lint endpoints: POST /lint, POST /fix."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from prismalint.api.deps import get_linter
from prismalint.api.schemas import FixResponse, LintRequest, LintResponse
from prismalint.service.linter import SchemaLinter

router = APIRouter()

# Plain ``def`` handlers run in the threadpool; the schema parser blocks on a
# node subprocess.


@router.post("/lint", response_model=LintResponse)
def lint_schema(
    body: LintRequest,
    linter: SchemaLinter = Depends(get_linter),  # noqa: B008
) -> LintResponse:
    """Lint a schema and return its diagnostics.

    A schema that does not parse yields ``analysed: false`` and no
    diagnostics rather than an error.
    """
    result = linter.lint_text(body.schema_text, filename=body.filename)
    return LintResponse(
        filename=result.filename,
        analysed=result.analysed,
        error_count=result.error_count,
        warning_count=result.warning_count,
        diagnostics=result.diagnostics,
    )


@router.post("/fix", response_model=FixResponse)
def fix_schema(
    body: LintRequest,
    linter: SchemaLinter = Depends(get_linter),  # noqa: B008
) -> FixResponse:
    """Rewrite non-conforming ``@map``/``@@map`` values and return the document."""
    result = linter.fix_text(body.schema_text, filename=body.filename)
    return FixResponse(
        filename=result.filename,
        output=result.output,
        applied=result.applied,
        diagnostics=result.diagnostics,
    )
