from fastapi import (
    FastAPI,
    Request,
    Form,
    HTTPException,
    Response,
)
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from datetime import date as _date
from typing import List, Optional
import logging

from mealai.domain.PlannerSession import PlannerSession
from mealai.infra.pdf_utils import generate_pdf_for_plan
from mealai.infra.relay_client import RelayClient
from mealai.logic.export.calendar_export import build_calendar, calendar_export_filename
from mealai.logic.export.text_export import build_text_export, text_export_filename
from mealai.logic.pipeline import run_generation
from mealai.utilities.config import RELAY_URL, STATIC_DIR, TEMPLATES_DIR
from mealai.utilities.constants import (
    CALENDAR_MEDIA_TYPE,
    DIETARY_OPTIONS,
    EXPORT_FILE_PREFIX,
    ISO_DATE_FORMAT,
    MEAL_TYPES,
    TEXT_MEDIA_TYPE,
)
from mealai.utilities.errors import InputValidationError, ParseError, PlannerError, RelayError
from mealai.utilities.validators import FormInput, parse_form_input

# Routers
from mealai.api.api_relay import router as relay_router

# Logging
logger = logging.getLogger("mealai_app")

GENERATION_FAILED = "Failed to generate meal plan. Please try again."
GENERATION_BUSY = "A meal plan is already being generated. Please wait for it to finish."

# Initialize FastAPI app
app = FastAPI(title="AI Meal Planner")

# Include routers
app.include_router(relay_router)

# Static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# One planner page, one in-memory session
SESSION = PlannerSession()


def get_relay_client() -> RelayClient:
    """Relay client used by the planner pages (patched in tests)."""
    return RelayClient(RELAY_URL)


def _render(request: Request, form: FormInput, notice: Optional[str] = None, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "form": form,
            "profile": SESSION.profile,
            "plan": SESSION.plan,
            "notice": notice,
            "dietary_options": DIETARY_OPTIONS,
            "meal_types": MEAL_TYPES,
            "loading": SESSION.in_flight,
        },
        status_code=status_code,
    )


def _user_message(error: PlannerError) -> str:
    """Input problems are shown as-is; relay and parse failures collapse to one alert."""
    if isinstance(error, InputValidationError):
        return str(error)
    return GENERATION_FAILED


def _status_for(error: PlannerError) -> int:
    if isinstance(error, InputValidationError):
        return 400
    if isinstance(error, (RelayError, ParseError)):
        return 502
    return 500


# -------------------- UI PAGES --------------------
@app.get("/", response_class=HTMLResponse)
def main_page(request: Request):
    return _render(request, SESSION.form or FormInput())


@app.post("/generate", response_class=HTMLResponse)
def generate_page(
    request: Request,
    family_size: str = Form("2"),
    ages: str = Form(""),
    dietary: str = Form("none"),
    meals: List[str] = Form(default=[]),
):
    raw = {"family_size": family_size, "ages": ages, "dietary": dietary, "meals": meals}
    try:
        form = parse_form_input(**raw)
    except InputValidationError as e:
        # echo what was typed back into the form, unvalidated
        submitted = FormInput.model_construct(
            familySize=family_size, ages=ages, dietaryPreference=dietary, mealSelection=meals,
        )
        return _render(request, submitted, notice=str(e), status_code=400)

    if not SESSION.begin_generation():
        return _render(request, form, notice=GENERATION_BUSY, status_code=409)
    try:
        run_generation(SESSION, form, get_relay_client())
    except PlannerError as e:
        logger.warning("Meal plan generation failed: %s", e)
        return _render(request, form, notice=_user_message(e), status_code=_status_for(e))
    finally:
        SESSION.finish_generation()
    return _render(request, form)


@app.post("/reset")
def reset_page():
    SESSION.reset()
    return RedirectResponse(url="/", status_code=303)


# -------------------- JSON API --------------------
@app.post("/api/plan")
def api_plan(payload: FormInput):
    """Run the pipeline for a JSON caller and return profile + plan."""
    if not SESSION.begin_generation():
        return JSONResponse(status_code=409, content={"error": GENERATION_BUSY})
    try:
        result = run_generation(SESSION, payload, get_relay_client())
    except PlannerError as e:
        logger.warning("Meal plan generation failed: %s", e)
        content = {"error": _user_message(e), "type": type(e).__name__}
        if isinstance(e, RelayError):
            content["status"] = e.status_code
            if e.details is not None:
                content["details"] = e.details
        return JSONResponse(status_code=_status_for(e), content=content)
    finally:
        SESSION.finish_generation()
    return {"calories": result.profile.to_dict(), "plan": result.plan.to_dict()}


@app.get("/api/plan")
def api_current_plan():
    if SESSION.plan is None:
        raise HTTPException(status_code=404, detail="No meal plan generated yet")
    return {
        "calories": SESSION.profile.to_dict() if SESSION.profile else None,
        "plan": SESSION.plan.to_dict(),
    }


# -------------------- EXPORTS --------------------
def _require_plan():
    if SESSION.plan is None:
        raise HTTPException(status_code=404, detail="No meal plan generated yet")
    return SESSION.plan


def _download(content, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@app.get("/export/text")
def export_text():
    plan = _require_plan()
    today = _date.today()
    return _download(build_text_export(plan, SESSION.profile, today), TEXT_MEDIA_TYPE, text_export_filename(today))


@app.get("/export/calendar")
def export_calendar():
    plan = _require_plan()
    today = _date.today()
    return _download(build_calendar(plan, today), CALENDAR_MEDIA_TYPE, calendar_export_filename(today))


@app.get("/export/pdf")
def export_pdf():
    plan = _require_plan()
    pdf_bytes = generate_pdf_for_plan(plan)
    filename = f"{EXPORT_FILE_PREFIX}-{_date.today().strftime(ISO_DATE_FORMAT)}.pdf"
    return _download(pdf_bytes, "application/pdf", filename)
