# hotelmanager

hotelmanager is a small interactive hotel management tool that runs in the terminal. With it you can register clients, employees and rooms, book stays, and update or remove records. All prompts are in Portuguese.

## Installation

```
pip install .
```

## Running

```
hotelmanager
```

The command takes no options other than `--help`. It shows a menu with these choices:

- **1** registers a person. For a client you enter a CPF, a phone number and an e-mail address. For an employee you enter a role code and the number of rooms they look after, and the employee's salary is then shown.
- **2** registers a room by its number and type: 1 for a suite, 2 for a double room, 3 for a presidential room.
- **3** books a room for a client for a number of days and shows the total price. This needs at least one registered person and one registered room.
- **4** updates a record. For a client you enter the CPF, phone and e-mail again. For a room, its type and number stay the same and its standard amenities are restored.
- **5** removes a registered client or room.
- **0** quits.

If you enter a choice that does not exist, or text where a number is expected, an error message is shown and the menu appears again. The program also stops when input ends.

## Pricing

Every room has a base daily rate of R$ 100.00. Each amenity (`hotelmanager.rooms.Amenity`) adds to that rate:

| Amenity            | Surcharge per day |
|--------------------|-------------------|
| `AIR_CONDITIONING` | 20.00             |
| `HOT_TUB`          | 30.00             |
| `BREAKFAST`        | 10.00             |
| `LUNCH`            | 15.00             |
| `DINNER`           | 20.00             |
| `PARKING`          | 5.00              |
| `ROOM_SERVICE`     | 10.00             |

Each room type comes with a fixed set of amenities:

| Room class         | Amenities                                                | Daily rate (R$) |
|--------------------|----------------------------------------------------------|-----------------|
| `Suite`            | air conditioning, breakfast, parking                     | 135.00          |
| `DoubleRoom`       | the suite's amenities, plus hot tub and room service     | 175.00          |
| `PresidentialRoom` | all amenities                                            | 210.00          |

The price of a reservation is the room's daily rate multiplied by the number of days. The number of days must be positive.

`Payment.total()` adjusts an amount according to how it is paid:

| `PaymentMethod` | Effect        |
|-----------------|---------------|
| `PIX`           | 5% discount   |
| `DEBIT`         | no change     |
| `CREDIT`        | 10% surcharge |

An employee's salary is R$ 1500.00, plus R$ 100.00 for each room in their charge, plus a bonus that depends on the role:

| `Role`         | Code | Bonus (R$) |
|----------------|------|------------|
| `HOUSEKEEPER`  | C    | 250.00     |
| `RECEPTIONIST` | R    | 100.00     |
| `MANAGER`      | G    | 500.00     |
| `COOK`         | CO   | 350.00     |

## Library use

```python
from hotelmanager.hotel import Hotel
from hotelmanager.people import Client, Employee, Role
from hotelmanager.rooms import RoomType, make_room
from hotelmanager.billing import Reservation, Payment, PaymentMethod

hotel = Hotel()
guest = Client("Ana", cpf="000", phone="0000", email="ana@example.com")
hotel.add_person(guest)
hotel.add_person(Employee("Bruno", role=Role.parse("G"), rooms_in_charge=2))

room = make_room(101, RoomType.SUITE)
hotel.add_room(room)

stay = Reservation(guest, room, 3)
hotel.add_reservation(stay)
print(stay.total())                                      # 405.0
print(Payment(PaymentMethod.PIX, stay.total()).total())  # 384.75
print(hotel.clients())                                   # [(0, Client(...))]
```

Invalid values raise errors:

- `ValueError` for an unknown room type, person kind, payment method or role code, and for a reservation with zero or fewer days.
- `IndexError` when `Hotel.remove_person` or `Hotel.remove_room` is called with an index that is out of range.

## Limitations

- All data is kept in memory only and is lost when the program exits. There is no storage.
- Payments are available through the library, but the menu does not offer them.
- Reservations are not linked to dates and are not checked for overlaps. Removing a client or room does not remove their reservations.

## Tests

```
pip install .[test]
pytest
```