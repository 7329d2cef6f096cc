from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query
from fastapi.responses import HTMLResponse

from libcalhours.api.dependencies import get_hours_client
from libcalhours.api.dependencies import get_settings
from libcalhours.api.dependencies import get_translate
from libcalhours.api.schemas.hours import HoursDay
from libcalhours.api.schemas.hours import HoursWindowResponse
from libcalhours.core.errors import EmptyDataError
from libcalhours.core.errors import FetchError
from libcalhours.core.errors import LocationNotFoundError
from libcalhours.core.localization import Translate
from libcalhours.services.hours_service import HoursProvider
from libcalhours.services.hours_service import build_hours_window
from libcalhours.services.hours_service import render_hours_calendar
from libcalhours.services.hours_service import resolve_num_weeks
from libcalhours.settings import Settings


router = APIRouter()


@router.get("/")
async def root() -> dict[str, object]:
    """Describe the service and its hours endpoints."""

    return {
        "service": "libcalhours",
        "endpoints": {
            "/hours": "embeddable HTML hours table",
            "/hours/days": "rolling hours window as JSON",
        },
    }


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.get("/hours", response_class=HTMLResponse)
def get_hours_table(
    location: str = Query(default=""),
    num_weeks: str | None = Query(default=None),
    settings: Settings = Depends(get_settings),
    client: HoursProvider = Depends(get_hours_client),
    translate: Translate = Depends(get_translate),
) -> HTMLResponse:
    """Return the embeddable hours table; empty on any upstream failure."""

    content = render_hours_calendar(
        client,
        location,
        num_weeks,
        ignore_cache=settings.ignore_cache,
        timezone=settings.timezone,
        translate=translate,
    )
    return HTMLResponse(content=content)


@router.get("/hours/days")
def get_hours_days(
    location: str = Query(default=""),
    num_weeks: str | None = Query(default=None),
    settings: Settings = Depends(get_settings),
    client: HoursProvider = Depends(get_hours_client),
    translate: Translate = Depends(get_translate),
) -> HoursWindowResponse:
    """Return the rolling hours window for a location as JSON."""

    resolved_weeks = resolve_num_weeks(num_weeks)

    try:
        days = build_hours_window(
            client,
            location,
            resolved_weeks,
            ignore_cache=settings.ignore_cache,
            timezone=settings.timezone,
            translate=translate,
        )
    except LocationNotFoundError as exc:
        raise HTTPException(status_code=404, detail="location not found") from exc
    except FetchError as exc:
        raise HTTPException(
            status_code=502, detail="LibCal API request failed"
        ) from exc
    except EmptyDataError as exc:
        raise HTTPException(status_code=404, detail="no hours data") from exc

    return HoursWindowResponse(
        location=location,
        num_weeks=resolved_weeks,
        days=[HoursDay(**day.model_dump()) for day in days],
    )
