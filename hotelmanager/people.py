"""People known to the hotel: clients and employees."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

BASE_SALARY = 1500.0
BONUS_PER_ROOM = 100.0


class PersonKind(IntEnum):
    """How a person is registered with the hotel."""

    CLIENT = 1
    EMPLOYEE = 2


class Role(Enum):
    """An employee's job, keyed by its short code."""

    HOUSEKEEPER = "C"
    RECEPTIONIST = "R"
    MANAGER = "G"
    COOK = "CO"

    @classmethod
    def parse(cls, code: str) -> Role:
        """Return the role for a code such as ``"C"`` or ``"CO"``."""
        try:
            return cls(code.strip())
        except (ValueError, AttributeError):
            raise ValueError(f"invalid role code: {code!r}") from None

    @property
    def bonus(self) -> float:
        """Monthly bonus paid for holding this role."""
        return _ROLE_BONUS[self]


_ROLE_BONUS = {
    Role.HOUSEKEEPER: 250.0,
    Role.RECEPTIONIST: 100.0,
    Role.MANAGER: 500.0,
    Role.COOK: 350.0,
}


@dataclass
class Person:
    """Anyone registered with the hotel."""

    name: str
    kind: PersonKind

    def __post_init__(self) -> None:
        try:
            self.kind = PersonKind(self.kind)
        except ValueError:
            raise ValueError(f"invalid person kind: {self.kind!r}") from None


@dataclass
class Client(Person):
    """A guest who can hold reservations."""

    kind: PersonKind = field(default=PersonKind.CLIENT, init=False)
    cpf: str = ""
    phone: str = ""
    email: str = ""


@dataclass
class Employee(Person):
    """A member of staff with a role and a number of rooms in charge."""

    kind: PersonKind = field(default=PersonKind.EMPLOYEE, init=False)
    role: Role = Role.RECEPTIONIST
    rooms_in_charge: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.role, Role):
            self.role = Role.parse(self.role)

    def salary(self) -> float:
        """Base salary plus a bonus per room and a bonus for the role."""
        return BASE_SALARY + self.rooms_in_charge * BONUS_PER_ROOM + self.role.bonus