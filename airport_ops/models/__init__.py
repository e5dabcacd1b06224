from airport_ops.models.flight import Flight
from airport_ops.models.gate import Gate
from airport_ops.models.employee import Employee
from airport_ops.models.passenger import Passenger
from airport_ops.models.user import User

__all__ = ["Flight", "Gate", "Employee", "Passenger", "User"]
