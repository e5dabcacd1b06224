from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from airport_ops.auth.dependencies import current_user
from airport_ops.schemas.enums import FlightStatus, GateStatus, EmployeeRole
from airport_ops.schemas.user import User

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))

router = APIRouter(include_in_schema=False)


def _options(enum_cls):
    return [member.value for member in enum_cls]


# Table columns, form fields and filters of each entity page, handed to
# static/js/entity-page.js as JSON
ENTITY_PAGES = {
    "flights": {
        "title": "Flights",
        "singular": "Flight",
        "columns": [
            {"key": "flightNumber", "label": "Flight"},
            {"key": "airline", "label": "Airline"},
            {"key": "origin", "label": "Origin"},
            {"key": "destination", "label": "Destination"},
            {"key": "departureDate", "label": "Date"},
            {"key": "departureTime", "label": "Time"},
            {"key": "gateId", "label": "Gate"},
            {"key": "status", "label": "Status", "badge": True},
        ],
        "fields": [
            {"key": "flightNumber", "label": "Flight number", "type": "text", "required": True},
            {"key": "airline", "label": "Airline", "type": "text", "required": True},
            {"key": "origin", "label": "Origin", "type": "text", "required": True},
            {"key": "destination", "label": "Destination", "type": "text", "required": True},
            {"key": "departureDate", "label": "Departure date", "type": "date", "required": True},
            {"key": "departureTime", "label": "Departure time", "type": "time", "required": True},
            {"key": "gateId", "label": "Gate ID", "type": "number", "nullable": True},
            {"key": "status", "label": "Status", "type": "select", "options": _options(FlightStatus), "required": True},
        ],
        "filters": [
            {"key": "search", "label": "Search flight, origin, destination", "type": "text"},
            {"key": "status", "label": "Status", "type": "select", "options": _options(FlightStatus)},
        ],
    },
    "gates": {
        "title": "Gates",
        "singular": "Gate",
        "columns": [
            {"key": "gateNumber", "label": "Gate"},
            {"key": "terminal", "label": "Terminal"},
            {"key": "status", "label": "Status", "badge": True},
            {"key": "currentFlightId", "label": "Current flight"},
        ],
        "fields": [
            {"key": "gateNumber", "label": "Gate number", "type": "text", "required": True},
            {"key": "terminal", "label": "Terminal", "type": "text", "required": True},
            {"key": "status", "label": "Status", "type": "select", "options": _options(GateStatus), "required": True},
            {"key": "currentFlightId", "label": "Current flight ID", "type": "number", "nullable": True},
        ],
        "filters": [
            {"key": "status", "label": "Status", "type": "select", "options": _options(GateStatus)},
            {"key": "terminal", "label": "Terminal", "type": "text"},
        ],
    },
    "employees": {
        "title": "Employees",
        "singular": "Employee",
        "columns": [
            {"key": "firstName", "label": "First name"},
            {"key": "lastName", "label": "Last name"},
            {"key": "email", "label": "Email"},
            {"key": "phone", "label": "Phone"},
            {"key": "role", "label": "Role", "badge": True},
            {"key": "assignedFlightId", "label": "Flight"},
            {"key": "assignedGateId", "label": "Gate"},
        ],
        "fields": [
            {"key": "firstName", "label": "First name", "type": "text", "required": True},
            {"key": "lastName", "label": "Last name", "type": "text", "required": True},
            {"key": "email", "label": "Email", "type": "email", "required": True},
            {"key": "phone", "label": "Phone", "type": "text", "nullable": True},
            {"key": "role", "label": "Role", "type": "select", "options": _options(EmployeeRole), "required": True},
            {"key": "assignedFlightId", "label": "Assigned flight ID", "type": "number", "nullable": True},
            {"key": "assignedGateId", "label": "Assigned gate ID", "type": "number", "nullable": True},
        ],
        "filters": [
            {"key": "role", "label": "Role", "type": "select", "options": _options(EmployeeRole)},
        ],
    },
    "passengers": {
        "title": "Passengers",
        "singular": "Passenger",
        "columns": [
            {"key": "firstName", "label": "First name"},
            {"key": "lastName", "label": "Last name"},
            {"key": "email", "label": "Email"},
            {"key": "flightId", "label": "Flight"},
            {"key": "seatNumber", "label": "Seat"},
            {"key": "checkedIn", "label": "Checked in"},
        ],
        "fields": [
            {"key": "firstName", "label": "First name", "type": "text", "required": True},
            {"key": "lastName", "label": "Last name", "type": "text", "required": True},
            {"key": "email", "label": "Email", "type": "email", "required": True},
            {"key": "flightId", "label": "Flight ID", "type": "number", "nullable": True},
            {"key": "seatNumber", "label": "Seat number", "type": "text", "nullable": True},
            {"key": "checkedIn", "label": "Checked in", "type": "checkbox"},
        ],
        "filters": [
            {"key": "flightId", "label": "Flight ID", "type": "number"},
        ],
    },
}


def _login_redirect():
    return RedirectResponse("/login", status_code=303)


@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request, user: Optional[User] = Depends(current_user)):
    if user is not None:
        return RedirectResponse("/", status_code=303)
    return templates.TemplateResponse(request, "login.html", {})


@router.get("/", response_class=HTMLResponse)
def dashboard_page(request: Request, user: Optional[User] = Depends(current_user)):
    if user is None:
        return _login_redirect()
    return templates.TemplateResponse(request, "dashboard.html", {"user": user, "active": "dashboard"})


@router.get("/{resource}", response_class=HTMLResponse)
def entity_page(resource: str, request: Request, user: Optional[User] = Depends(current_user)):
    page = ENTITY_PAGES.get(resource)
    if page is None:
        raise HTTPException(status_code=404, detail="Not Found")
    if user is None:
        return _login_redirect()
    return templates.TemplateResponse(request, "entity.html", {
        "user": user,
        "active": resource,
        "resource": resource,
        "page": page,
        "config": {"resource": resource, **page},
    })
