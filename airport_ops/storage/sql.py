import logging
from contextlib import contextmanager
from datetime import date
from typing import Callable, Dict, List, Optional, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy import select, func, or_
from sqlalchemy.exc import IntegrityError

from airport_ops import models
from airport_ops.errors import ValidationError
from airport_ops.schemas.enums import FlightStatus, GateStatus, EmployeeRole
from airport_ops.schemas.flight import Flight, FlightCreate
from airport_ops.schemas.gate import Gate, GateCreate
from airport_ops.schemas.employee import Employee, EmployeeCreate
from airport_ops.schemas.passenger import Passenger, PassengerCreate
from airport_ops.schemas.stats import PassengersPerFlight, DailyTraffic
from airport_ops.schemas.user import User
from airport_ops.storage.base import (
    Storage, FlightFilter, GateFilter, EmployeeFilter, PassengerFilter,
    resolve_sort, validate_record, check_page,
)
from airport_ops.storage import stats

logger = logging.getLogger(__name__)

# Columns carrying a unique constraint, checked up front for a readable error
UNIQUE_COLUMNS = {
    models.User: ("username",),
    models.Flight: ("flight_number",),
    models.Gate: ("gate_number",),
    models.Employee: ("email",),
    models.Passenger: (),
}


class DatabaseStorage(Storage):
    """Storage backed by a relational database through SQLAlchemy.

    Each call opens and closes its own session; nothing spans two calls.
    """

    def __init__(self, session_factory, today: Callable[[], date] = date.today):
        super().__init__(today)
        self.session_factory = session_factory

    @contextmanager
    def _session(self):
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    # --- Generic helpers ---

    def _count(self, model, conditions) -> int:
        with self._session() as db:
            return db.scalar(select(func.count()).select_from(model).where(*conditions))

    def _list(self, model, record_cls: Type[BaseModel], conditions, offset, limit, sort):
        check_page(offset, limit)
        field, descending = resolve_sort(record_cls, sort)
        column = getattr(model, field)
        # nulls last in both directions, ties by id ascending
        ordering = [column.is_(None), column.desc() if descending else column.asc()]
        if field != "id":
            ordering.append(model.id.asc())
        query = select(model).where(*conditions).order_by(*ordering).offset(offset).limit(limit)
        with self._session() as db:
            return [record_cls.model_validate(row) for row in db.scalars(query)]

    def _get(self, model, record_cls, record_id):
        with self._session() as db:
            row = db.get(model, record_id)
            return record_cls.model_validate(row) if row is not None else None

    def _find(self, model, record_cls, column, value):
        with self._session() as db:
            row = db.scalars(select(model).where(column == value)).first()
            return record_cls.model_validate(row) if row is not None else None

    def _check_unique(self, db, model, values: dict, exclude_id=None):
        errors = {}
        for field in UNIQUE_COLUMNS[model]:
            if field not in values:
                continue
            query = select(model.id).where(getattr(model, field) == values[field])
            if exclude_id is not None:
                query = query.where(model.id != exclude_id)
            if db.scalars(query).first() is not None:
                errors[to_camel(field)] = f"'{values[field]}' already exists"
        if errors:
            raise ValidationError(errors)

    def _commit(self, db, model):
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"Integrity error on {model.__tablename__}: {e.orig}")
            raise ValidationError({model.__tablename__: "violates a database constraint"})

    def _create(self, model, record_cls, values: dict):
        with self._session() as db:
            self._check_unique(db, model, values)
            row = model(**values)
            db.add(row)
            self._commit(db, model)
            db.refresh(row)
            return record_cls.model_validate(row)

    def _update(self, model, record_cls, record_id, changes: dict):
        with self._session() as db:
            row = db.get(model, record_id)
            if row is None:
                return None
            unknown = [key for key in changes if key not in record_cls.model_fields or key == "id"]
            if unknown:
                raise ValidationError({key: "unknown field" for key in unknown})
            current = record_cls.model_validate(row)
            if not changes:
                return current
            # validated before anything touches the row
            updated = validate_record(record_cls, {**current.model_dump(), **changes})
            values = {key: getattr(updated, key) for key in changes}
            self._check_unique(db, model, values, exclude_id=record_id)
            for key, value in values.items():
                setattr(row, key, value)
            self._commit(db, model)
            db.refresh(row)
            return record_cls.model_validate(row)

    def _delete(self, model, record_id) -> bool:
        with self._session() as db:
            row = db.get(model, record_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True

    def _distribution(self, column, enum_cls) -> Dict[str, int]:
        query = select(column, func.count()).group_by(column)
        with self._session() as db:
            counts = {value: total for value, total in db.execute(query)}
        return stats.ordered_distribution(counts, enum_cls)

    # --- Users ---

    def get_user(self, user_id: int) -> Optional[User]:
        return self._get(models.User, User, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self._find(models.User, User, models.User.username, username)

    def create_user(self, username: str, password_hash: str) -> User:
        return self._create(models.User, User, {"username": username, "password": password_hash})

    # --- Flights ---

    @staticmethod
    def _flight_conditions(filters: Optional[FlightFilter]):
        conditions = []
        if filters is None:
            return conditions
        if filters.search:
            conditions.append(or_(
                models.Flight.flight_number.icontains(filters.search, autoescape=True),
                models.Flight.origin.icontains(filters.search, autoescape=True),
                models.Flight.destination.icontains(filters.search, autoescape=True),
            ))
        if filters.status:
            conditions.append(models.Flight.status == filters.status)
        return conditions

    def list_flights(self, offset=0, limit=10, filters=None, sort=None) -> List[Flight]:
        return self._list(models.Flight, Flight, self._flight_conditions(filters), offset, limit, sort)

    def count_flights(self, filters=None) -> int:
        return self._count(models.Flight, self._flight_conditions(filters))

    def get_flight(self, flight_id: int) -> Optional[Flight]:
        return self._get(models.Flight, Flight, flight_id)

    def get_flight_by_number(self, flight_number: str) -> Optional[Flight]:
        return self._find(models.Flight, Flight, models.Flight.flight_number, flight_number)

    def create_flight(self, data: FlightCreate) -> Flight:
        return self._create(models.Flight, Flight, data.model_dump())

    def update_flight(self, flight_id: int, changes: dict) -> Optional[Flight]:
        return self._update(models.Flight, Flight, flight_id, changes)

    def delete_flight(self, flight_id: int) -> bool:
        return self._delete(models.Flight, flight_id)

    # --- Gates ---

    @staticmethod
    def _gate_conditions(filters: Optional[GateFilter]):
        conditions = []
        if filters is None:
            return conditions
        if filters.status:
            conditions.append(models.Gate.status == filters.status)
        if filters.terminal:
            conditions.append(models.Gate.terminal == filters.terminal)
        return conditions

    def list_gates(self, offset=0, limit=10, filters=None, sort=None) -> List[Gate]:
        return self._list(models.Gate, Gate, self._gate_conditions(filters), offset, limit, sort)

    def count_gates(self, filters=None) -> int:
        return self._count(models.Gate, self._gate_conditions(filters))

    def get_gate(self, gate_id: int) -> Optional[Gate]:
        return self._get(models.Gate, Gate, gate_id)

    def get_gate_by_number(self, gate_number: str) -> Optional[Gate]:
        return self._find(models.Gate, Gate, models.Gate.gate_number, gate_number)

    def create_gate(self, data: GateCreate) -> Gate:
        return self._create(models.Gate, Gate, data.model_dump())

    def update_gate(self, gate_id: int, changes: dict) -> Optional[Gate]:
        return self._update(models.Gate, Gate, gate_id, changes)

    def delete_gate(self, gate_id: int) -> bool:
        return self._delete(models.Gate, gate_id)

    def list_available_gates(self) -> List[Gate]:
        query = (select(models.Gate)
                 .where(models.Gate.status == GateStatus.available.value)
                 .order_by(models.Gate.id))
        with self._session() as db:
            return [Gate.model_validate(row) for row in db.scalars(query)]

    # --- Employees ---

    @staticmethod
    def _employee_conditions(filters: Optional[EmployeeFilter]):
        if filters is not None and filters.role:
            return [models.Employee.role == filters.role]
        return []

    def list_employees(self, offset=0, limit=10, filters=None, sort=None) -> List[Employee]:
        return self._list(models.Employee, Employee, self._employee_conditions(filters), offset, limit, sort)

    def count_employees(self, filters=None) -> int:
        return self._count(models.Employee, self._employee_conditions(filters))

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self._get(models.Employee, Employee, employee_id)

    def get_employee_by_email(self, email: str) -> Optional[Employee]:
        return self._find(models.Employee, Employee, models.Employee.email, email)

    def create_employee(self, data: EmployeeCreate) -> Employee:
        return self._create(models.Employee, Employee, data.model_dump())

    def update_employee(self, employee_id: int, changes: dict) -> Optional[Employee]:
        return self._update(models.Employee, Employee, employee_id, changes)

    def delete_employee(self, employee_id: int) -> bool:
        return self._delete(models.Employee, employee_id)

    # --- Passengers ---

    @staticmethod
    def _passenger_conditions(filters: Optional[PassengerFilter]):
        if filters is not None and filters.flight_id is not None:
            return [models.Passenger.flight_id == filters.flight_id]
        return []

    def list_passengers(self, offset=0, limit=10, filters=None, sort=None) -> List[Passenger]:
        return self._list(models.Passenger, Passenger, self._passenger_conditions(filters), offset, limit, sort)

    def count_passengers(self, filters=None) -> int:
        return self._count(models.Passenger, self._passenger_conditions(filters))

    def get_passenger(self, passenger_id: int) -> Optional[Passenger]:
        return self._get(models.Passenger, Passenger, passenger_id)

    def create_passenger(self, data: PassengerCreate) -> Passenger:
        return self._create(models.Passenger, Passenger, data.model_dump())

    def update_passenger(self, passenger_id: int, changes: dict) -> Optional[Passenger]:
        return self._update(models.Passenger, Passenger, passenger_id, changes)

    def delete_passenger(self, passenger_id: int) -> bool:
        return self._delete(models.Passenger, passenger_id)

    # --- Statistics ---

    def flights_departing_today(self) -> int:
        return self._count(models.Flight, [models.Flight.departure_date == self.today()])

    def flight_status_distribution(self) -> Dict[str, int]:
        return self._distribution(models.Flight.status, FlightStatus)

    def gate_status_distribution(self) -> Dict[str, int]:
        return self._distribution(models.Gate.status, GateStatus)

    def employee_role_distribution(self) -> Dict[str, int]:
        return self._distribution(models.Employee.role, EmployeeRole)

    def passengers_per_flight(self) -> List[PassengersPerFlight]:
        # inner join drops passengers without a flight and dangling references
        query = (select(models.Flight.flight_number, func.count(models.Passenger.id))
                 .join(models.Passenger, models.Passenger.flight_id == models.Flight.id)
                 .group_by(models.Flight.id, models.Flight.flight_number)
                 .order_by(models.Flight.id))
        with self._session() as db:
            return [
                PassengersPerFlight(flight_number=number, passenger_count=total)
                for number, total in db.execute(query)
            ]

    def daily_flight_traffic(self, days: int = 7) -> List[DailyTraffic]:
        window = stats.traffic_window(days, self.today())
        query = (select(models.Flight.departure_date, models.Flight.status)
                 .where(models.Flight.departure_date >= window[0],
                        models.Flight.departure_date <= window[-1],
                        models.Flight.status.in_([FlightStatus.arrived.value, FlightStatus.departed.value])))
        with self._session() as db:
            rows = db.execute(query).all()
        return stats.build_daily_traffic(window, rows)
