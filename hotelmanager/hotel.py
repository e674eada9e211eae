"""The hotel: its people, rooms and reservations."""

from __future__ import annotations

from dataclasses import dataclass, field

from hotelmanager.billing import Reservation
from hotelmanager.people import Client, Person
from hotelmanager.rooms import Room


@dataclass
class Hotel:
    """Registers of people, rooms and reservations."""

    people: list[Person] = field(default_factory=list)
    rooms: list[Room] = field(default_factory=list)
    reservations: list[Reservation] = field(default_factory=list)

    def add_person(self, person: Person) -> None:
        """Register a client or an employee."""
        self.people.append(person)

    def add_room(self, room: Room) -> None:
        """Register a room."""
        self.rooms.append(room)

    def add_reservation(self, reservation: Reservation) -> None:
        """Record a reservation."""
        self.reservations.append(reservation)

    def clients(self) -> list[tuple[int, Client]]:
        """Clients among the registered people, with their positions."""
        return [
            (index, person)
            for index, person in enumerate(self.people)
            if isinstance(person, Client)
        ]

    def remove_person(self, index: int) -> Person:
        """Remove and return the person at ``index``."""
        return _pop(self.people, index, "person")

    def remove_room(self, index: int) -> Room:
        """Remove and return the room at ``index``."""
        return _pop(self.rooms, index, "room")


def _pop(items: list, index: int, what: str):
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index out of range: {index}")
    return items.pop(index)