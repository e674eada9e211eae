"""Reservations and payments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from hotelmanager.people import Client
from hotelmanager.rooms import Room


@dataclass
class Reservation:
    """A client's stay in a room for a number of days."""

    client: Client
    room: Room
    days: int

    def __post_init__(self) -> None:
        if self.days <= 0:
            raise ValueError(f"number of days must be positive, got {self.days}")

    def total(self) -> float:
        """Daily rate of the room times the number of days."""
        return self.room.daily_rate() * self.days


class PaymentMethod(IntEnum):
    """How a bill is paid."""

    PIX = 1
    DEBIT = 2
    CREDIT = 3


@dataclass
class Payment:
    """A payment of an amount by some method."""

    method: PaymentMethod
    amount: float

    def __post_init__(self) -> None:
        try:
            self.method = PaymentMethod(self.method)
        except ValueError:
            raise ValueError(f"invalid payment method: {self.method!r}") from None

    def total(self) -> float:
        """Amount due: 5% off by Pix, 10% on top by credit, unchanged by debit."""
        if self.method is PaymentMethod.PIX:
            return self.amount - self.amount * 0.05
        if self.method is PaymentMethod.CREDIT:
            return self.amount + self.amount * 0.1
        return self.amount