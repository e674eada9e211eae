import pytest

from hotelmanager.people import (
    BONUS_PER_ROOM,
    Client,
    Employee,
    Person,
    PersonKind,
    Role,
)


@pytest.mark.parametrize(
    "code, role",
    [
        ("C", Role.HOUSEKEEPER),
        ("R", Role.RECEPTIONIST),
        ("G", Role.MANAGER),
        ("CO", Role.COOK),
    ],
)
def test_role_parse_known_codes(code, role):
    assert Role.parse(code) is role


@pytest.mark.parametrize("code", ["X", "c", "", "COO"])
def test_role_parse_rejects_unknown_codes(code):
    with pytest.raises(ValueError):
        Role.parse(code)


@pytest.mark.parametrize(
    "role, bonus",
    [
        (Role.HOUSEKEEPER, 250.0),
        (Role.RECEPTIONIST, 100.0),
        (Role.MANAGER, 500.0),
        (Role.COOK, 350.0),
    ],
)
def test_role_bonus(role, bonus):
    assert role.bonus == bonus


def test_manager_salary_without_rooms():
    assert Employee("Ana", Role.MANAGER, 0).salary() == 2000.0


def test_salary_grows_by_room_bonus():
    few = Employee("Bia", Role.COOK, 1).salary()
    more = Employee("Bia", Role.COOK, 4).salary()
    assert more - few == 3 * BONUS_PER_ROOM


def test_salary_difference_between_roles_is_bonus_difference():
    manager = Employee("A", Role.MANAGER, 2).salary()
    housekeeper = Employee("A", Role.HOUSEKEEPER, 2).salary()
    assert manager - housekeeper == Role.MANAGER.bonus - Role.HOUSEKEEPER.bonus


def test_employee_role_given_as_code():
    employee = Employee("Caio", "R", 2)
    assert employee.role is Role.RECEPTIONIST
    assert employee.kind is PersonKind.EMPLOYEE


def test_employee_rejects_bad_role_code():
    with pytest.raises(ValueError):
        Employee("Caio", "Z")


def test_client_fields_and_kind():
    client = Client("Dora", cpf="000", phone="555", email="dora@example.com")
    assert client.kind is PersonKind.CLIENT
    assert client.email == "dora@example.com"
    assert client.name == "Dora"


def test_person_kind_coerced_from_int():
    assert Person("Eva", 2).kind is PersonKind.EMPLOYEE


@pytest.mark.parametrize("kind", [0, 3, -1])
def test_person_rejects_invalid_kind(kind):
    with pytest.raises(ValueError):
        Person("Eva", kind)