"""Calculator Routes — index form and GCD computation.

Invariants:
    - GET / always returns the static form (200, text/html)
    - POST /gcd parses, validates, then computes — gcd() never sees a zero operand
    - Errors propagate as GcdError and are rendered by the global handlers

Design Decisions:
    - Raw form read via request.form() then parse_gcd_form: field rules live in
      core/ instead of a framework-derived model
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse

from gcd_app.core.gcd import gcd
from gcd_app.core.parse_form import parse_gcd_form
from gcd_app.core.render_pages import render_gcd_result, render_index_page
from gcd_app.core.validate_inputs import validate_inputs

logger = logging.getLogger(__name__)
router = APIRouter(tags=["calculator"])


@router.get("/", response_class=HTMLResponse, status_code=status.HTTP_200_OK)
async def get_index():
    """Serve the GCD input form."""
    return HTMLResponse(render_index_page())


@router.post("/gcd", response_class=HTMLResponse)
async def post_gcd(request: Request):
    """Compute the GCD of form fields n and m."""
    form = await request.form()
    params = parse_gcd_form(form)
    validate_inputs(params.n, params.m)
    divisor = gcd(params.n, params.m)
    logger.debug(
        "Computed GCD",
        extra={"n": params.n, "m": params.m, "divisor": divisor},
    )
    return HTMLResponse(render_gcd_result(params.n, params.m, divisor))
