import pytest

from hotelmanager.billing import Reservation
from hotelmanager.hotel import Hotel
from hotelmanager.people import Client, Employee, Role
from hotelmanager.rooms import DoubleRoom, Suite


@pytest.fixture
def hotel():
    h = Hotel()
    h.add_person(Client("Ana", cpf="1", email="ana@example.com"))
    h.add_person(Employee("Bia", Role.MANAGER, 2))
    h.add_person(Client("Caio", cpf="2", email="caio@example.com"))
    h.add_room(Suite(101))
    h.add_room(DoubleRoom(102))
    return h


def test_new_hotel_is_empty():
    h = Hotel()
    assert h.people == [] and h.rooms == [] and h.reservations == []


def test_add_person_and_room(hotel):
    assert [p.name for p in hotel.people] == ["Ana", "Bia", "Caio"]
    assert [r.number for r in hotel.rooms] == [101, 102]


def test_add_reservation(hotel):
    reservation = Reservation(hotel.people[0], hotel.rooms[1], 2)
    hotel.add_reservation(reservation)
    assert hotel.reservations == [reservation]


def test_clients_skip_employees_and_keep_positions(hotel):
    clients = hotel.clients()
    assert [(i, c.name) for i, c in clients] == [(0, "Ana"), (2, "Caio")]


def test_remove_person_returns_removed(hotel):
    removed = hotel.remove_person(0)
    assert removed.name == "Ana"
    assert [p.name for p in hotel.people] == ["Bia", "Caio"]


@pytest.mark.parametrize("index", [3, -1, 10])
def test_remove_person_out_of_range(hotel, index):
    with pytest.raises(IndexError):
        hotel.remove_person(index)
    assert len(hotel.people) == 3


def test_remove_room_returns_removed(hotel):
    removed = hotel.remove_room(1)
    assert removed.number == 102
    assert [r.number for r in hotel.rooms] == [101]


@pytest.mark.parametrize("index", [2, -1])
def test_remove_room_out_of_range(hotel, index):
    with pytest.raises(IndexError):
        hotel.remove_room(index)
    assert len(hotel.rooms) == 2


def test_hotel_built_with_existing_lists():
    people = [Client("Dora")]
    rooms = [Suite(1)]
    h = Hotel(people, rooms)
    assert h.people[0].name == "Dora"
    assert h.rooms[0].number == 1
    assert h.clients()[0][0] == 0