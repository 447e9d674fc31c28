# ─────────────────────────────────────────────────────────────────────────────
# Debug Routes — field tables and offline validation
# ─────────────────────────────────────────────────────────────────────────────
# Only mounted when settings.enable_debug_routes is True.
# POST /debug/validate/{kind} replays captured model output through the
# same defaults + field table the generators use, without calling the model.
# ─────────────────────────────────────────────────────────────────────────────

from typing import Any

import structlog
from fastapi import APIRouter, Body

from soundgarden.content import KINDS, ContentKind
from soundgarden.schemas import ValidationReport

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/kinds")
async def list_kinds() -> dict[str, Any]:
    """Every registered kind with its field table and optional-field defaults."""
    return {
        str(kind): {
            "fields": [spec.describe() for spec in definition.fields],
            "defaults": dict(definition.defaults),
        }
        for kind, definition in KINDS.items()
    }


@router.post("/validate/{kind}", response_model=ValidationReport)
async def validate_candidate(kind: ContentKind, candidate: Any = Body(...)) -> ValidationReport:
    """Run a posted JSON value through the kind's validator.

    Always 200: a rejected candidate is a normal answer here, reported
    with its full error list.
    """
    result = KINDS[kind].check(candidate)
    logger.info("debug_validate", kind=str(kind), valid=result.ok, errors=len(result.errors))
    return ValidationReport(valid=result.ok, errors=list(result.errors), spec=result.spec)
