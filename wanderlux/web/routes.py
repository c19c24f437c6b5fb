"""FastAPI routes for the site pages and their forms."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from wanderlux.config import Settings, get_settings
from wanderlux.forms.controllers import (
    AppointmentController,
    CalculatorController,
    ContactController,
    bind_forms,
)
from wanderlux.forms.view import InMemoryFormView, Page
from wanderlux.pricing import PRICING_TABLE
from wanderlux.utils.formatting import format_currency

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Inputs each page's form renders
PAGE_FORMS = {
    "calculator": CalculatorController.fields,
    "appointment": AppointmentController.fields,
    "contact": ContactController.fields,
}


def build_view(form_id: str, data: Optional[Dict[str, Any]] = None) -> InMemoryFormView:
    """Build a view holding the submitted values for one form.

    Inputs the client did not send (an unchecked radio group, for one) read
    as empty strings.
    """
    data = data or {}
    values = {}
    for name in PAGE_FORMS[form_id]:
        value = data.get(name)
        values[name] = "" if value is None else str(value)
    return InMemoryFormView(form_id, values=values)


def render_form_page(
    request: Request,
    form_id: str,
    view: InMemoryFormView,
    settings: Settings,
    status_code: int = 200,
) -> HTMLResponse:
    context = {
        "title": form_id.capitalize(),
        "site_name": settings.site_name,
        "form": view,
        "destinations": PRICING_TABLE.destinations,
        "styles": PRICING_TABLE.style_labels,
    }
    return templates.TemplateResponse(
        request, f"{form_id}.html", context, status_code=status_code
    )


async def handle_form_post(request: Request, form_id: str, settings: Settings) -> HTMLResponse:
    """Deliver a submitted form to its controller and render the result."""
    try:
        data = await request.form()
        view = build_view(form_id, dict(data))
        controllers = bind_forms(Page({form_id: view}), settings)
        controller = controllers.get(form_id)
        if controller is None:
            # Missing inputs; the calculator has already written a notice
            return render_form_page(request, form_id, view, settings)

        outcome = controller.handle_submit(view)
        status_code = 200 if outcome.accepted else 422
        return render_form_page(request, form_id, view, settings, status_code=status_code)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error handling {form_id} form: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, settings: Settings = Depends(get_settings)):
    """Home page linking the three forms."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": "Home", "site_name": settings.site_name},
    )


@router.get("/calculator", response_class=HTMLResponse)
async def calculator_page(request: Request, settings: Settings = Depends(get_settings)):
    """Empty calculator with the idle placeholder."""
    view = build_view("calculator")
    view.set_result(CalculatorController.PLACEHOLDER)
    return render_form_page(request, "calculator", view, settings)


@router.post("/calculator", response_class=HTMLResponse)
async def calculator_submit(request: Request, settings: Settings = Depends(get_settings)):
    """Handle calculator form submission."""
    return await handle_form_post(request, "calculator", settings)


@router.post("/calculator/reset", response_class=HTMLResponse)
async def calculator_reset(request: Request, settings: Settings = Depends(get_settings)):
    """Handle calculator form reset."""
    view = build_view("calculator")
    CalculatorController(settings).handle_reset(view)
    return render_form_page(request, "calculator", view, settings)


@router.get("/appointment", response_class=HTMLResponse)
async def appointment_page(request: Request, settings: Settings = Depends(get_settings)):
    return render_form_page(request, "appointment", build_view("appointment"), settings)


@router.post("/appointment", response_class=HTMLResponse)
async def appointment_submit(request: Request, settings: Settings = Depends(get_settings)):
    """Handle appointment form submission."""
    return await handle_form_post(request, "appointment", settings)


@router.get("/contact", response_class=HTMLResponse)
async def contact_page(request: Request, settings: Settings = Depends(get_settings)):
    return render_form_page(request, "contact", build_view("contact"), settings)


@router.post("/contact", response_class=HTMLResponse)
async def contact_submit(request: Request, settings: Settings = Depends(get_settings)):
    """Handle contact form submission."""
    return await handle_form_post(request, "contact", settings)


@router.post("/api/v1/estimate")
async def estimate_trip(
    payload: Dict[str, Any] = Body(...),
    settings: Settings = Depends(get_settings),
):
    """Estimate a trip cost from JSON calculator fields."""
    try:
        view = build_view("calculator", payload)
        outcome = CalculatorController(settings).handle_submit(view)

        if not outcome.accepted:
            return JSONResponse(
                status_code=422,
                content={"errors": [error.model_dump() for error in outcome.errors]},
            )

        return JSONResponse(
            content={
                "total": outcome.total,
                "formatted": format_currency(outcome.total, settings),
                "currency": settings.currency_code,
                "message": outcome.result,
            }
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error estimating trip cost: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}
