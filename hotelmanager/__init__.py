"""Hotel management: people, rooms, reservations, payments and an interactive menu."""

__version__ = "0.1.0"