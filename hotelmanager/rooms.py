"""Rooms and their daily rates."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

BASE_RATE = 100.0


class RoomType(IntEnum):
    """The kinds of room the hotel offers."""

    SUITE = 1
    DOUBLE = 2
    PRESIDENTIAL = 3


class Amenity(Enum):
    """Something a room includes, each adding to the daily rate."""

    AIR_CONDITIONING = "air_conditioning"
    HOT_TUB = "hot_tub"
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    PARKING = "parking"
    ROOM_SERVICE = "room_service"

    @property
    def surcharge(self) -> float:
        """Amount added to the daily rate."""
        return _SURCHARGES[self]


_SURCHARGES = {
    Amenity.AIR_CONDITIONING: 20.0,
    Amenity.HOT_TUB: 30.0,
    Amenity.BREAKFAST: 10.0,
    Amenity.LUNCH: 15.0,
    Amenity.DINNER: 20.0,
    Amenity.PARKING: 5.0,
    Amenity.ROOM_SERVICE: 10.0,
}


@dataclass
class Room:
    """A numbered room of some type with a set of amenities."""

    number: int
    room_type: RoomType
    amenities: frozenset = frozenset()

    def __post_init__(self) -> None:
        try:
            self.room_type = RoomType(self.room_type)
        except ValueError:
            raise ValueError(f"invalid room type: {self.room_type!r}") from None
        self.amenities = frozenset(self.amenities)

    def daily_rate(self) -> float:
        """Base rate plus the surcharge of every amenity."""
        return BASE_RATE + sum(amenity.surcharge for amenity in self.amenities)


@dataclass
class Suite(Room):
    """Air conditioning, breakfast and parking."""

    room_type: RoomType = field(default=RoomType.SUITE, init=False)
    amenities: frozenset = field(
        default=frozenset(
            {Amenity.AIR_CONDITIONING, Amenity.BREAKFAST, Amenity.PARKING}
        ),
        init=False,
    )


@dataclass
class DoubleRoom(Room):
    """A double room with hot tub and room service besides the suite's."""

    room_type: RoomType = field(default=RoomType.DOUBLE, init=False)
    amenities: frozenset = field(
        default=frozenset(
            {
                Amenity.AIR_CONDITIONING,
                Amenity.HOT_TUB,
                Amenity.BREAKFAST,
                Amenity.PARKING,
                Amenity.ROOM_SERVICE,
            }
        ),
        init=False,
    )


@dataclass
class PresidentialRoom(Room):
    """Every amenity included."""

    room_type: RoomType = field(default=RoomType.PRESIDENTIAL, init=False)
    amenities: frozenset = field(default=frozenset(Amenity), init=False)


_ROOM_CLASSES = {
    RoomType.SUITE: Suite,
    RoomType.DOUBLE: DoubleRoom,
    RoomType.PRESIDENTIAL: PresidentialRoom,
}


def make_room(number: int, room_type: RoomType | int) -> Room:
    """Build the room of the given type with its standard amenities."""
    try:
        kind = RoomType(room_type)
    except ValueError:
        raise ValueError(f"invalid room type: {room_type!r}") from None
    return _ROOM_CLASSES[kind](number)