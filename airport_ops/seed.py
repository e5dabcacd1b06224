import logging
from datetime import time

from airport_ops.schemas.flight import FlightCreate
from airport_ops.schemas.gate import GateCreate
from airport_ops.schemas.employee import EmployeeCreate
from airport_ops.schemas.passenger import PassengerCreate

logger = logging.getLogger(__name__)


def seed_sample_data(storage):
    """Fill an empty storage with a small demo data set."""
    if storage.count_gates() or storage.count_flights():
        logger.info("Storage already contains data, skipping sample data")
        return

    today = storage.today()

    gate_a1 = storage.create_gate(GateCreate(gate_number="A1", terminal="A", status="occupied"))
    storage.create_gate(GateCreate(gate_number="A2", terminal="A", status="available"))
    storage.create_gate(GateCreate(gate_number="B1", terminal="B", status="maintenance"))

    flight1 = storage.create_flight(FlightCreate(
        flight_number="AA1234",
        airline="American Airlines",
        origin="New York (JFK)",
        destination="Los Angeles (LAX)",
        departure_date=today,
        departure_time=time(10, 30),
        gate_id=gate_a1.id,
        status="scheduled",
    ))
    storage.create_flight(FlightCreate(
        flight_number="UA2567",
        airline="United Airlines",
        origin="Chicago (ORD)",
        destination="San Francisco (SFO)",
        departure_date=today,
        departure_time=time(11, 45),
        status="delayed",
    ))

    storage.create_employee(EmployeeCreate(
        first_name="John", last_name="Doe", email="john.doe@airport.com",
        phone="123-456-7890", role="pilot", assigned_flight_id=flight1.id,
    ))
    storage.create_employee(EmployeeCreate(
        first_name="Jane", last_name="Smith", email="jane.smith@airport.com",
        phone="123-456-7891", role="flight_attendant", assigned_flight_id=flight1.id,
    ))

    storage.create_passenger(PassengerCreate(
        first_name="Alice", last_name="Johnson", email="alice@example.com",
        flight_id=flight1.id, seat_number="12A", checked_in=True,
    ))
    storage.create_passenger(PassengerCreate(
        first_name="Bob", last_name="Brown", email="bob@example.com",
        flight_id=flight1.id, seat_number="12B", checked_in=False,
    ))

    storage.update_gate(gate_a1.id, {"current_flight_id": flight1.id})
    logger.info("Sample data loaded")
