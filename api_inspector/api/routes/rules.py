"""
Rules Routes — GET /rules, GET /sources

Read-only views of the rule catalog and its sources.
"""

from __future__ import annotations

from fastapi import APIRouter

from api_inspector.core.rule_selector import ALL_SOURCES, list_sources, select_rules

router = APIRouter()


@router.get("/rules")
async def rules(source: str = ALL_SOURCES):
    """Catalog rules for one source key; an unknown key lists nothing."""
    selected = select_rules(source)
    return {
        "source": source,
        "total": len(selected),
        "rules": [rule.model_dump(mode="json", by_alias=True) for rule in selected],
    }


@router.get("/sources")
async def sources():
    return [
        {
            **source.model_dump(mode="json", by_alias=True, exclude={"rule_ids"}),
            "ruleIds": sorted(source.rule_ids),
        }
        for source in list_sources()
    ]
