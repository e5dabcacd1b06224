# airport_ops/test_storage.py

from datetime import time

import pytest

from airport_ops.conftest import TODAY, make_flight, make_gate, make_employee, make_passenger
from airport_ops.errors import ValidationError
from airport_ops.storage.base import FlightFilter, GateFilter, EmployeeFilter, PassengerFilter, Sort


def test_ids_are_unique_and_never_reused(storage):
    first = storage.create_flight(make_flight("AA1"))
    second = storage.create_flight(make_flight("AA2"))
    assert first.id != second.id

    storage.delete_flight(second.id)
    third = storage.create_flight(make_flight("AA3"))
    assert third.id not in (first.id, second.id)


def test_create_and_get_flight(storage):
    flight = storage.create_flight(make_flight(gate_id=3))
    fetched = storage.get_flight(flight.id)
    assert fetched == flight
    assert fetched.departure_date == TODAY
    assert fetched.departure_time == time(10, 30)
    assert fetched.gate_id == 3
    assert storage.get_flight_by_number("AA1234").id == flight.id
    assert storage.get_flight_by_number("ZZ999") is None
    assert storage.get_flight(999) is None


def test_update_with_no_changes_returns_record_unchanged(storage):
    gate = storage.create_gate(make_gate())
    assert storage.update_gate(gate.id, {}) == gate


def test_partial_update_keeps_other_fields(storage):
    flight = storage.create_flight(make_flight(gate_id=1))
    updated = storage.update_flight(flight.id, {"status": "delayed", "gate_id": None})
    assert updated.status == "delayed"
    assert updated.gate_id is None
    assert updated.airline == flight.airline
    assert storage.get_flight(flight.id) == updated


def test_update_missing_record_returns_none(storage):
    assert storage.update_passenger(42, {"seat_number": "1A"}) is None


def test_update_rejects_unknown_fields(storage):
    gate = storage.create_gate(make_gate())
    with pytest.raises(ValidationError):
        storage.update_gate(gate.id, {"runway": "09L"})


def test_delete_then_get(storage):
    employee = storage.create_employee(make_employee())
    assert storage.delete_employee(employee.id) is True
    assert storage.get_employee(employee.id) is None
    assert storage.delete_employee(employee.id) is False


def test_duplicate_flight_number_is_rejected(storage):
    storage.create_flight(make_flight("AA1234"))
    with pytest.raises(ValidationError) as exc:
        storage.create_flight(make_flight("AA1234", airline="Other"))
    assert "flightNumber" in exc.value.errors
    assert storage.count_flights() == 1


def test_duplicate_on_update_is_rejected(storage):
    storage.create_gate(make_gate("A1"))
    other = storage.create_gate(make_gate("A2"))
    with pytest.raises(ValidationError):
        storage.update_gate(other.id, {"gate_number": "A1"})
    assert storage.get_gate(other.id).gate_number == "A2"
    # renaming a record to its own value is fine
    assert storage.update_gate(other.id, {"gate_number": "A2"}).gate_number == "A2"


def test_duplicate_employee_email_is_rejected(storage):
    storage.create_employee(make_employee("jane@airport.com"))
    with pytest.raises(ValidationError):
        storage.create_employee(make_employee("jane@airport.com", first_name="Other"))
    assert storage.get_employee_by_email("jane@airport.com").first_name == "John"
    assert storage.get_employee_by_email("nobody@airport.com") is None


def test_pagination_and_count(storage):
    for i in range(12):
        storage.create_flight(make_flight(f"FL{i:02d}", status="delayed" if i % 3 == 0 else "scheduled"))

    assert len(storage.list_flights(0, 5)) == 5
    assert len(storage.list_flights(10, 5)) == 2
    assert storage.list_flights(20, 5) == []
    assert storage.count_flights() == 12

    delayed = FlightFilter(status="delayed")
    assert storage.count_flights(delayed) == 4
    assert len(storage.list_flights(0, 2, delayed)) == 2
    assert all(f.status == "delayed" for f in storage.list_flights(0, 10, delayed))


def test_invalid_page_bounds(storage):
    with pytest.raises(ValidationError):
        storage.list_gates(offset=-1)
    with pytest.raises(ValidationError):
        storage.list_gates(limit=0)


def test_flight_search_is_case_insensitive_substring(storage):
    storage.create_flight(make_flight("AA1234", origin="New York (JFK)", destination="Los Angeles (LAX)"))
    storage.create_flight(make_flight("UA2567", origin="Chicago (ORD)", destination="San Francisco (SFO)"))

    assert [f.flight_number for f in storage.list_flights(filters=FlightFilter(search="jfk"))] == ["AA1234"]
    assert [f.flight_number for f in storage.list_flights(filters=FlightFilter(search="ua25"))] == ["UA2567"]
    assert storage.count_flights(FlightFilter(search="francisco")) == 1
    assert storage.count_flights(FlightFilter(search="%")) == 0
    assert storage.count_flights(FlightFilter(search="")) == 2


def test_gate_and_employee_filters(storage):
    storage.create_gate(make_gate("A1", terminal="A", status="available"))
    storage.create_gate(make_gate("B1", terminal="B", status="available"))
    storage.create_gate(make_gate("B2", terminal="B", status="closed"))
    assert storage.count_gates(GateFilter(terminal="B")) == 2
    assert storage.count_gates(GateFilter(status="available", terminal="B")) == 1

    storage.create_employee(make_employee("a@x.com", role="pilot"))
    storage.create_employee(make_employee("b@x.com", role="security"))
    assert [e.email for e in storage.list_employees(filters=EmployeeFilter(role="security"))] == ["b@x.com"]


def test_passenger_flight_filter(storage):
    storage.create_passenger(make_passenger(flight_id=1))
    storage.create_passenger(make_passenger(flight_id=2, email="bob@example.com"))
    storage.create_passenger(make_passenger(email="carol@example.com"))
    assert storage.count_passengers(PassengerFilter(flight_id=2)) == 1
    assert storage.count_passengers(PassengerFilter()) == 3


def test_sort_puts_nulls_last_and_breaks_ties_by_id(storage):
    g1 = storage.create_gate(make_gate("G1", current_flight_id=5))
    g2 = storage.create_gate(make_gate("G2"))
    g3 = storage.create_gate(make_gate("G3", current_flight_id=2))
    g4 = storage.create_gate(make_gate("G4", current_flight_id=5))

    ascending = storage.list_gates(sort=Sort("currentFlightId", "asc"))
    assert [g.id for g in ascending] == [g3.id, g1.id, g4.id, g2.id]

    descending = storage.list_gates(sort=Sort("current_flight_id", "desc"))
    assert [g.id for g in descending] == [g1.id, g4.id, g3.id, g2.id]


def test_sort_by_id_descending(storage):
    created = [storage.create_flight(make_flight(f"FL{i}")) for i in range(3)]
    listed = storage.list_flights(sort=Sort("id", "desc"))
    assert [f.id for f in listed] == [f.id for f in reversed(created)]


def test_invalid_sort(storage):
    with pytest.raises(ValidationError):
        storage.list_flights(sort=Sort("password", "asc"))
    with pytest.raises(ValidationError):
        storage.list_flights(sort=Sort("id", "sideways"))


def test_available_gates_excludes_occupied_gate(storage):
    gate = storage.create_gate(make_gate("A1", terminal="A", status="available"))
    storage.create_gate(make_gate("A2", terminal="A", status="available"))
    storage.create_gate(make_gate("B1", terminal="B", status="maintenance"))
    flight = storage.create_flight(make_flight(gate_id=gate.id))

    assert [g.gate_number for g in storage.list_available_gates()] == ["A1", "A2"]

    storage.update_gate(gate.id, {"status": "occupied", "current_flight_id": flight.id})
    assert [g.gate_number for g in storage.list_available_gates()] == ["A2"]


def test_deleting_a_flight_does_not_cascade(storage):
    flight = storage.create_flight(make_flight())
    passenger = storage.create_passenger(make_passenger(flight_id=flight.id))
    employee = storage.create_employee(make_employee(assigned_flight_id=flight.id))

    assert storage.delete_flight(flight.id)
    assert storage.get_passenger(passenger.id).flight_id == flight.id
    assert storage.get_employee(employee.id).assigned_flight_id == flight.id


def test_passenger_defaults(storage):
    passenger = storage.create_passenger(make_passenger())
    assert passenger.checked_in is False
    assert passenger.flight_id is None
    assert passenger.seat_number is None


def test_users(storage):
    user = storage.create_user("admin", "hashed")
    assert storage.get_user(user.id).username == "admin"
    assert storage.get_user_by_username("admin").password == "hashed"
    assert storage.get_user_by_username("nobody") is None
    with pytest.raises(ValidationError):
        storage.create_user("admin", "other")


def test_update_rejects_values_outside_the_schema(storage):
    flight = storage.create_flight(make_flight())

    with pytest.raises(ValidationError) as exc:
        storage.update_flight(flight.id, {"status": "boarding"})
    assert "status" in exc.value.errors

    with pytest.raises(ValidationError) as exc:
        storage.update_flight(flight.id, {"airline": None})
    assert "airline" in exc.value.errors

    assert storage.get_flight(flight.id) == flight
    assert storage.list_flights() == [flight]


def test_update_rejects_bad_employee_role(storage):
    employee = storage.create_employee(make_employee())
    with pytest.raises(ValidationError) as exc:
        storage.update_employee(employee.id, {"role": "captain", "first_name": "Jack"})
    assert "role" in exc.value.errors
    assert storage.get_employee(employee.id) == employee


def test_returned_records_are_copies(storage):
    gate = storage.create_gate(make_gate("A1"))
    gate.status = "closed"
    fetched = storage.get_gate(gate.id)
    assert fetched.status == "available"

    fetched.terminal = "Z"
    storage.list_gates()[0].gate_number = "Z9"
    storage.update_gate(gate.id, {}).status = "closed"
    assert storage.get_gate(gate.id) == storage.get_gate_by_number("A1")
    assert storage.get_gate(gate.id).terminal == "A"
    assert storage.get_gate(gate.id).status == "available"
