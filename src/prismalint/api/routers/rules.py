"""Rule listing endpoint: GET /rules."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from prismalint.api.deps import get_linter
from prismalint.api.schemas import RuleInfo, RuleListResponse
from prismalint.rules import RuleRegistry
from prismalint.service.linter import SchemaLinter

router = APIRouter()


@router.get("", response_model=RuleListResponse)
async def list_rules(
    linter: SchemaLinter = Depends(get_linter),  # noqa: B008
) -> RuleListResponse:
    """List all registered rules and whether the running configuration enables them."""
    enabled = {rule.name for rule in linter.rules}
    rules = []
    for name in RuleRegistry.available():
        rule_class = RuleRegistry.get_class(name)
        rules.append(
            RuleInfo(
                name=name,
                description=rule_class.description,
                has_suggestions=rule_class.has_suggestions,
                enabled=name in enabled,
            )
        )
    return RuleListResponse(rules=rules)
