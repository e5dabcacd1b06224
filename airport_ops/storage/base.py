from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from airport_ops.errors import ValidationError
from airport_ops.schemas.flight import Flight, FlightCreate
from airport_ops.schemas.gate import Gate, GateCreate
from airport_ops.schemas.employee import Employee, EmployeeCreate
from airport_ops.schemas.passenger import Passenger, PassengerCreate
from airport_ops.schemas.stats import PassengersPerFlight, DailyTraffic
from airport_ops.schemas.user import User


# --- Filter specifications ---
# Unset (None or empty) fields mean "no filter".

@dataclass
class FlightFilter:
    search: Optional[str] = None
    status: Optional[str] = None


@dataclass
class GateFilter:
    status: Optional[str] = None
    terminal: Optional[str] = None


@dataclass
class EmployeeFilter:
    role: Optional[str] = None


@dataclass
class PassengerFilter:
    flight_id: Optional[int] = None


@dataclass
class Sort:
    field: str = "id"
    order: str = "asc"


def resolve_sort(record_cls: Type[BaseModel], sort: Optional[Sort]) -> Tuple[str, bool]:
    """Map a Sort onto (attribute name, descending) for the given record type.

    The field may be given either as the wire name (``departureDate``) or the
    Python attribute (``departure_date``).
    """
    if sort is None:
        return "id", False
    by_name = {}
    for name, info in record_cls.model_fields.items():
        by_name[name] = name
        if info.alias:
            by_name[info.alias] = name
    field = by_name.get(sort.field)
    if field is None:
        raise ValidationError({"sort": f"cannot sort by '{sort.field}'"})
    order = (sort.order or "asc").lower()
    if order not in ("asc", "desc"):
        raise ValidationError({"order": "must be 'asc' or 'desc'"})
    return field, order == "desc"


def validate_record(record_cls: Type[BaseModel], values: dict) -> BaseModel:
    """Build a record from attribute values, reporting bad fields by wire name."""
    try:
        return record_cls.model_validate(values)
    except SchemaError as e:
        errors = {}
        for err in e.errors():
            name = str(err["loc"][0]) if err["loc"] else "record"
            info = record_cls.model_fields.get(name)
            field = info.alias if info is not None and info.alias else name
            errors[field] = "; ".join(filter(None, [errors.get(field), err["msg"]]))
        raise ValidationError(errors)


def check_page(offset: int, limit: int):
    errors = {}
    if offset < 0:
        errors["offset"] = "must be greater than or equal to 0"
    if limit < 1:
        errors["limit"] = "must be greater than or equal to 1"
    if errors:
        raise ValidationError(errors)


class Storage(ABC):
    """Every read, write and aggregate the API layer needs.

    Implementations must return identical results for identical data. Records
    come back as pydantic models; lookups that find nothing return ``None`` and
    deletes of missing ids return ``False``, neither raises.
    """

    def __init__(self, today: Callable[[], date] = date.today):
        self.today = today

    # --- Users ---

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, username: str, password_hash: str) -> User: ...

    # --- Flights ---

    @abstractmethod
    def list_flights(self, offset: int = 0, limit: int = 10,
                     filters: Optional[FlightFilter] = None, sort: Optional[Sort] = None) -> List[Flight]: ...

    @abstractmethod
    def count_flights(self, filters: Optional[FlightFilter] = None) -> int: ...

    @abstractmethod
    def get_flight(self, flight_id: int) -> Optional[Flight]: ...

    @abstractmethod
    def get_flight_by_number(self, flight_number: str) -> Optional[Flight]: ...

    @abstractmethod
    def create_flight(self, data: FlightCreate) -> Flight: ...

    @abstractmethod
    def update_flight(self, flight_id: int, changes: dict) -> Optional[Flight]: ...

    @abstractmethod
    def delete_flight(self, flight_id: int) -> bool: ...

    # --- Gates ---

    @abstractmethod
    def list_gates(self, offset: int = 0, limit: int = 10,
                   filters: Optional[GateFilter] = None, sort: Optional[Sort] = None) -> List[Gate]: ...

    @abstractmethod
    def count_gates(self, filters: Optional[GateFilter] = None) -> int: ...

    @abstractmethod
    def get_gate(self, gate_id: int) -> Optional[Gate]: ...

    @abstractmethod
    def get_gate_by_number(self, gate_number: str) -> Optional[Gate]: ...

    @abstractmethod
    def create_gate(self, data: GateCreate) -> Gate: ...

    @abstractmethod
    def update_gate(self, gate_id: int, changes: dict) -> Optional[Gate]: ...

    @abstractmethod
    def delete_gate(self, gate_id: int) -> bool: ...

    @abstractmethod
    def list_available_gates(self) -> List[Gate]: ...

    # --- Employees ---

    @abstractmethod
    def list_employees(self, offset: int = 0, limit: int = 10,
                       filters: Optional[EmployeeFilter] = None, sort: Optional[Sort] = None) -> List[Employee]: ...

    @abstractmethod
    def count_employees(self, filters: Optional[EmployeeFilter] = None) -> int: ...

    @abstractmethod
    def get_employee(self, employee_id: int) -> Optional[Employee]: ...

    @abstractmethod
    def get_employee_by_email(self, email: str) -> Optional[Employee]: ...

    @abstractmethod
    def create_employee(self, data: EmployeeCreate) -> Employee: ...

    @abstractmethod
    def update_employee(self, employee_id: int, changes: dict) -> Optional[Employee]: ...

    @abstractmethod
    def delete_employee(self, employee_id: int) -> bool: ...

    # --- Passengers ---

    @abstractmethod
    def list_passengers(self, offset: int = 0, limit: int = 10,
                        filters: Optional[PassengerFilter] = None, sort: Optional[Sort] = None) -> List[Passenger]: ...

    @abstractmethod
    def count_passengers(self, filters: Optional[PassengerFilter] = None) -> int: ...

    @abstractmethod
    def get_passenger(self, passenger_id: int) -> Optional[Passenger]: ...

    @abstractmethod
    def create_passenger(self, data: PassengerCreate) -> Passenger: ...

    @abstractmethod
    def update_passenger(self, passenger_id: int, changes: dict) -> Optional[Passenger]: ...

    @abstractmethod
    def delete_passenger(self, passenger_id: int) -> bool: ...

    # --- Statistics ---

    @abstractmethod
    def flights_departing_today(self) -> int: ...

    @abstractmethod
    def flight_status_distribution(self) -> Dict[str, int]: ...

    @abstractmethod
    def gate_status_distribution(self) -> Dict[str, int]: ...

    @abstractmethod
    def employee_role_distribution(self) -> Dict[str, int]: ...

    @abstractmethod
    def passengers_per_flight(self) -> List[PassengersPerFlight]: ...

    @abstractmethod
    def daily_flight_traffic(self, days: int = 7) -> List[DailyTraffic]:
        """One entry per calendar day, oldest first, ending today.

        A flight counts as an arrival on its departure date when its status is
        ``arrived`` and as a departure when it is ``departed``.
        """
