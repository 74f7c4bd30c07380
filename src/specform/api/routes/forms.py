import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from ...errors import SchemaException
from ...parsing import build_form_schema
from ...schema import unwrap_connection_specification
from ...utils import encode_json

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/forms", tags=["forms"])


class ParseRequest(BaseModel):
    spec: Any = None


class ParseResponse(BaseModel):
    success: bool
    groups: list[dict] | None = None
    error: str | None = None


@router.post("/parse", response_model=ParseResponse)
def parse_form(payload: ParseRequest, request: Request):
    by_alias = request.app.state.config.output.by_alias
    try:
        form = build_form_schema(unwrap_connection_specification(payload.spec))
        # Encoded here so deep trees never go through response validation.
        content = encode_json(
            {
                "success": True,
                "groups": form.to_json_data(by_alias=by_alias)["groups"],
                "error": None,
            }
        )
    except SchemaException as e:
        logger.warning(f"Rejected connector schema: {e}")
        return JSONResponse(
            status_code=400,
            content=ParseResponse(success=False, error=str(e)).model_dump(),
        )

    return Response(content=content, media_type="application/json")
