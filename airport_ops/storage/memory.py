from collections import Counter
from datetime import date
from typing import Callable, Dict, List, Optional, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from airport_ops.errors import ValidationError
from airport_ops.schemas.enums import FlightStatus, GateStatus, EmployeeRole
from airport_ops.schemas.flight import Flight, FlightCreate
from airport_ops.schemas.gate import Gate, GateCreate
from airport_ops.schemas.employee import Employee, EmployeeCreate
from airport_ops.schemas.passenger import Passenger, PassengerCreate
from airport_ops.schemas.stats import PassengersPerFlight, DailyTraffic
from airport_ops.schemas.user import User
from airport_ops.storage.base import (
    Storage, FlightFilter, GateFilter, EmployeeFilter, PassengerFilter, Sort,
    resolve_sort, validate_record, check_page,
)
from airport_ops.storage import stats


class _Table:
    """Records of one entity keyed by id, plus the counter that hands out ids.

    Callers always get copies, never the stored instances.
    """

    def __init__(self, record_cls: Type[BaseModel], unique=()):
        self.record_cls = record_cls
        self.unique = unique
        self.rows: Dict[int, BaseModel] = {}
        self.next_id = 1

    def all(self) -> List[BaseModel]:
        return [self.rows[key].model_copy() for key in sorted(self.rows)]

    def get(self, record_id: int) -> Optional[BaseModel]:
        row = self.rows.get(record_id)
        return row.model_copy() if row is not None else None

    def find(self, field: str, value) -> Optional[BaseModel]:
        for row in self.all():
            if getattr(row, field) == value:
                return row
        return None

    def check_unique(self, values: dict, exclude_id: Optional[int] = None):
        errors = {}
        for field in self.unique:
            if field not in values:
                continue
            existing = self.find(field, values[field])
            if existing is not None and existing.id != exclude_id:
                errors[to_camel(field)] = f"'{values[field]}' already exists"
        if errors:
            raise ValidationError(errors)

    def insert(self, values: dict) -> BaseModel:
        self.check_unique(values)
        record = validate_record(self.record_cls, {**values, "id": self.next_id})
        self.rows[record.id] = record
        self.next_id += 1
        return record.model_copy()

    def update(self, record_id: int, changes: dict) -> Optional[BaseModel]:
        current = self.rows.get(record_id)
        if current is None:
            return None
        unknown = [key for key in changes if key not in self.record_cls.model_fields or key == "id"]
        if unknown:
            raise ValidationError({key: "unknown field" for key in unknown})
        if not changes:
            return current.model_copy()
        # nothing is stored unless the merged record validates
        updated = validate_record(self.record_cls, {**current.model_dump(), **changes})
        self.check_unique({key: getattr(updated, key) for key in changes}, exclude_id=record_id)
        self.rows[record_id] = updated
        return updated.model_copy()

    def delete(self, record_id: int) -> bool:
        return self.rows.pop(record_id, None) is not None


def _sort_records(records: List[BaseModel], record_cls, sort: Optional[Sort]) -> List[BaseModel]:
    field, descending = resolve_sort(record_cls, sort)
    # records arrive in id order and sorted() is stable, so ties stay id ascending
    present = [r for r in records if getattr(r, field) is not None]
    missing = [r for r in records if getattr(r, field) is None]
    present = sorted(present, key=lambda r: getattr(r, field), reverse=descending)
    return present + missing


def _page(records: List[BaseModel], offset: int, limit: int) -> List[BaseModel]:
    check_page(offset, limit)
    return records[offset:offset + limit]


class MemStorage(Storage):
    """Process-local storage, used as the reference implementation and in tests.

    No locking: concurrent writers to the same record are last-writer-wins.
    """

    def __init__(self, today: Callable[[], date] = date.today):
        super().__init__(today)
        self.users = _Table(User, unique=("username",))
        self.flights = _Table(Flight, unique=("flight_number",))
        self.gates = _Table(Gate, unique=("gate_number",))
        self.employees = _Table(Employee, unique=("email",))
        self.passengers = _Table(Passenger)

    # --- Users ---

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find("username", username)

    def create_user(self, username: str, password_hash: str) -> User:
        return self.users.insert({"username": username, "password": password_hash})

    # --- Flights ---

    def _matching_flights(self, filters: Optional[FlightFilter]) -> List[Flight]:
        flights = self.flights.all()
        if filters is None:
            return flights
        if filters.search:
            needle = filters.search.lower()
            flights = [
                f for f in flights
                if needle in f.flight_number.lower()
                or needle in f.origin.lower()
                or needle in f.destination.lower()
            ]
        if filters.status:
            flights = [f for f in flights if f.status == filters.status]
        return flights

    def list_flights(self, offset=0, limit=10, filters=None, sort=None) -> List[Flight]:
        flights = _sort_records(self._matching_flights(filters), Flight, sort)
        return _page(flights, offset, limit)

    def count_flights(self, filters=None) -> int:
        return len(self._matching_flights(filters))

    def get_flight(self, flight_id: int) -> Optional[Flight]:
        return self.flights.get(flight_id)

    def get_flight_by_number(self, flight_number: str) -> Optional[Flight]:
        return self.flights.find("flight_number", flight_number)

    def create_flight(self, data: FlightCreate) -> Flight:
        return self.flights.insert(data.model_dump())

    def update_flight(self, flight_id: int, changes: dict) -> Optional[Flight]:
        return self.flights.update(flight_id, changes)

    def delete_flight(self, flight_id: int) -> bool:
        return self.flights.delete(flight_id)

    # --- Gates ---

    def _matching_gates(self, filters: Optional[GateFilter]) -> List[Gate]:
        gates = self.gates.all()
        if filters is None:
            return gates
        if filters.status:
            gates = [g for g in gates if g.status == filters.status]
        if filters.terminal:
            gates = [g for g in gates if g.terminal == filters.terminal]
        return gates

    def list_gates(self, offset=0, limit=10, filters=None, sort=None) -> List[Gate]:
        gates = _sort_records(self._matching_gates(filters), Gate, sort)
        return _page(gates, offset, limit)

    def count_gates(self, filters=None) -> int:
        return len(self._matching_gates(filters))

    def get_gate(self, gate_id: int) -> Optional[Gate]:
        return self.gates.get(gate_id)

    def get_gate_by_number(self, gate_number: str) -> Optional[Gate]:
        return self.gates.find("gate_number", gate_number)

    def create_gate(self, data: GateCreate) -> Gate:
        return self.gates.insert(data.model_dump())

    def update_gate(self, gate_id: int, changes: dict) -> Optional[Gate]:
        return self.gates.update(gate_id, changes)

    def delete_gate(self, gate_id: int) -> bool:
        return self.gates.delete(gate_id)

    def list_available_gates(self) -> List[Gate]:
        return self._matching_gates(GateFilter(status=GateStatus.available.value))

    # --- Employees ---

    def _matching_employees(self, filters: Optional[EmployeeFilter]) -> List[Employee]:
        employees = self.employees.all()
        if filters is not None and filters.role:
            employees = [e for e in employees if e.role == filters.role]
        return employees

    def list_employees(self, offset=0, limit=10, filters=None, sort=None) -> List[Employee]:
        employees = _sort_records(self._matching_employees(filters), Employee, sort)
        return _page(employees, offset, limit)

    def count_employees(self, filters=None) -> int:
        return len(self._matching_employees(filters))

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self.employees.get(employee_id)

    def get_employee_by_email(self, email: str) -> Optional[Employee]:
        return self.employees.find("email", email)

    def create_employee(self, data: EmployeeCreate) -> Employee:
        return self.employees.insert(data.model_dump())

    def update_employee(self, employee_id: int, changes: dict) -> Optional[Employee]:
        return self.employees.update(employee_id, changes)

    def delete_employee(self, employee_id: int) -> bool:
        return self.employees.delete(employee_id)

    # --- Passengers ---

    def _matching_passengers(self, filters: Optional[PassengerFilter]) -> List[Passenger]:
        passengers = self.passengers.all()
        if filters is not None and filters.flight_id is not None:
            passengers = [p for p in passengers if p.flight_id == filters.flight_id]
        return passengers

    def list_passengers(self, offset=0, limit=10, filters=None, sort=None) -> List[Passenger]:
        passengers = _sort_records(self._matching_passengers(filters), Passenger, sort)
        return _page(passengers, offset, limit)

    def count_passengers(self, filters=None) -> int:
        return len(self._matching_passengers(filters))

    def get_passenger(self, passenger_id: int) -> Optional[Passenger]:
        return self.passengers.get(passenger_id)

    def create_passenger(self, data: PassengerCreate) -> Passenger:
        return self.passengers.insert(data.model_dump())

    def update_passenger(self, passenger_id: int, changes: dict) -> Optional[Passenger]:
        return self.passengers.update(passenger_id, changes)

    def delete_passenger(self, passenger_id: int) -> bool:
        return self.passengers.delete(passenger_id)

    # --- Statistics ---

    def flights_departing_today(self) -> int:
        today = self.today()
        return sum(1 for f in self.flights.all() if f.departure_date == today)

    def flight_status_distribution(self) -> Dict[str, int]:
        counts = Counter(f.status for f in self.flights.all())
        return stats.ordered_distribution(counts, FlightStatus)

    def gate_status_distribution(self) -> Dict[str, int]:
        counts = Counter(g.status for g in self.gates.all())
        return stats.ordered_distribution(counts, GateStatus)

    def employee_role_distribution(self) -> Dict[str, int]:
        counts = Counter(e.role for e in self.employees.all())
        return stats.ordered_distribution(counts, EmployeeRole)

    def passengers_per_flight(self) -> List[PassengersPerFlight]:
        counts = Counter(p.flight_id for p in self.passengers.all() if p.flight_id is not None)
        result = []
        for flight in self.flights.all():
            if counts.get(flight.id):
                result.append(PassengersPerFlight(flight_number=flight.flight_number,
                                                  passenger_count=counts[flight.id]))
        return result

    def daily_flight_traffic(self, days: int = 7) -> List[DailyTraffic]:
        window = stats.traffic_window(days, self.today())
        return stats.build_daily_traffic(window, ((f.departure_date, f.status) for f in self.flights.all()))
