"""Interactive menu for managing the hotel's people, rooms and reservations."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, TextIO, TypeVar

from hotelmanager.billing import Reservation
from hotelmanager.hotel import Hotel
from hotelmanager.people import Client, Employee, PersonKind, Role
from hotelmanager.rooms import Room, RoomType, make_room

T = TypeVar("T")

RULE = "-" * 46
BANNER = "=" * 49

_MENU = (
    "Opções disponíveis:",
    "  1 - Iniciar cadastro de pessoas",
    "  2 - Iniciar cadastro de quartos",
    "  3 - Efetuar reserva",
    "  4 - Alterar dado Cadastrado [Cliente / Quarto]",
    "  5 - Excluir dado cadastrado",
    "  0 - Encerrar o programa",
)


class _InvalidInput(Exception):
    """A number was expected but something else was typed."""


def _money(value: float) -> str:
    return f"{value:g}"


class HotelShell:
    """Reads menu choices from a text stream and acts on a hotel."""

    def __init__(
        self,
        hotel: Hotel | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.hotel = hotel if hotel is not None else Hotel()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._actions: dict[int, Callable[[], None]] = {
            1: self._register_person,
            2: self._register_room,
            3: self._make_reservation,
            4: self._update_entry,
            5: self._delete_entry,
        }

    def run(self) -> None:
        """Show the menu until the user chooses to leave or input runs out."""
        self._say(BANNER)
        self._say("   Bem-vindo ao Sistema de Gerenciamento de Hotel")
        self._say(BANNER)
        self._say(
            "Este sistema permite cadastrar pessoas, quartos, reservas e pagamentos."
        )
        self._say(
            "Você poderá visualizar e gerenciar todos os dados do hotel de forma simples."
        )
        self._say()
        try:
            while True:
                self._say(RULE)
                for line in _MENU:
                    self._say(line)
                self._say(RULE)
                try:
                    choice: int | None = self._read_int("Digite a opção desejada: ")
                except _InvalidInput:
                    choice = None
                self._say(RULE)
                if choice == 0:
                    self._say("Encerrando o programa...")
                    self._say(RULE)
                    break
                action = self._actions.get(choice) if choice is not None else None
                if action is None:
                    self._say("Opção inválida. Tente novamente.")
                    continue
                try:
                    action()
                except _InvalidInput:
                    self._say("Entrada inválida!")
        except EOFError:
            return
        self._say("\nPrograma finalizado.")

    # -- input and output -------------------------------------------------

    def _say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _read(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_int(self, prompt: str) -> int:
        text = self._read(prompt).strip()
        try:
            return int(text)
        except ValueError:
            raise _InvalidInput(text) from None

    def _read_choice(
        self, prompt: str, retry: str, parse: Callable[[str], T]
    ) -> T:
        while True:
            try:
                return parse(self._read(prompt))
            except ValueError:
                prompt = retry

    # -- people -----------------------------------------------------------

    def _register_person(self) -> None:
        name = self._read("Digite o nome da pessoa: ")

        def parse_kind(text: str) -> PersonKind:
            return PersonKind(int(text.strip()))

        kind = self._read_choice(
            "Cadastro [1 - Cliente] [2 - Funcionário]: ",
            "Tipo inválido! Digite novamente: ",
            parse_kind,
        )
        self._say()
        if kind is PersonKind.CLIENT:
            client = Client(name)
            self._fill_client(client)
            self.hotel.add_person(client)
        else:
            role = self._read_choice(
                "Cargo [C - Camareira, R - Recepcionista, G - Gerente, CO - Cozinheiro]: ",
                "Cargo inválido! Digite novamente: ",
                Role.parse,
            )
            rooms = self._read_int("Número de quartos sob sua responsabilidade: ")
            employee = Employee(name, role=role, rooms_in_charge=rooms)
            self._say(f"Salário do funcionário: R$ {_money(employee.salary())}")
            self.hotel.add_person(employee)

    def _fill_client(self, client: Client) -> None:
        client.cpf = self._read("Digite o cpf: ").strip()
        self._say()
        client.phone = self._read("Digite o Telefone: ").strip()
        self._say()
        client.email = self._read("Digite o Email: ").strip()
        self._say()

    def _select_client(self) -> tuple[int, Client] | None:
        self._say("Clientes cadastrados:")
        for index, client in self.hotel.clients():
            self._say(f"{index} - {client.name} (CPF: {client.cpf})")
        self._say()
        index = self._read_int("Escolha o índice do cliente: ")
        self._say()
        if not 0 <= index < len(self.hotel.people):
            self._say("Índice de cliente inválido!")
            return None
        person = self.hotel.people[index]
        if not isinstance(person, Client):
            self._say("Selecione um cliente válido!")
            return None
        return index, person

    # -- rooms ------------------------------------------------------------

    def _register_room(self) -> None:
        number = self._read_int("Numero do quarto: ")
        self._say()

        def parse_type(text: str) -> RoomType:
            return RoomType(int(text.strip()))

        room_type = self._read_choice(
            "Selecione o quarto desejado [Suite - 1], [Quarto de Casal - 2], "
            "[Presidencial - 3]: ",
            "Tipo inválido! Digite novamente: ",
            parse_type,
        )
        self._say()
        self._say(f"Número do quarto: {number}")
        self._say(f"Tipo do quarto: {int(room_type)}")
        self._say()
        self.hotel.add_room(make_room(number, room_type))

    def _select_room(self) -> tuple[int, Room] | None:
        self._say()
        self._say("Quartos cadastrados:")
        for index, room in enumerate(self.hotel.rooms):
            self._say(f"{index} - Quarto {room.number} (Tipo: {int(room.room_type)})")
        index = self._read_int("Escolha o índice do quarto: ")
        if not 0 <= index < len(self.hotel.rooms):
            self._say("Índice de quarto inválido!")
            return None
        return index, self.hotel.rooms[index]

    # -- reservations -----------------------------------------------------

    def _make_reservation(self) -> None:
        if not self.hotel.people or not self.hotel.rooms:
            self._say(
                "Cadastre pelo menos um cliente e um quarto antes de fazer uma reserva!"
            )
            return
        chosen_client = self._select_client()
        if chosen_client is None:
            return
        chosen_room = self._select_room()
        if chosen_room is None:
            return
        self._say()
        days = self._read_int("Informe o número de dias de estadia: ")
        if days <= 0:
            self._say("Insira um número de dias válidos!")
            return
        reservation = Reservation(chosen_client[1], chosen_room[1], days)
        self._say("Reserva cadastrada com sucesso!")
        self._say(f"Valor total da reserva: R$ {_money(reservation.total())}")
        self.hotel.add_reservation(reservation)

    # -- updating and deleting --------------------------------------------

    def _choose_entry_kind(self) -> int | None:
        if not self.hotel.people:
            self._say("Cadastre pelo menos um cliente!")
            return None
        if not self.hotel.rooms:
            self._say("Cadastre pelo menos um quarto!")
            return None
        try:
            kind: int | None = self._read_int(
                "Selecione o tipo de dado a ser alterado [1 - Cliente] [2 - Quarto]: "
            )
        except _InvalidInput:
            kind = None
        self._say(RULE)
        if kind not in (1, 2):
            self._say("Opção inválida! Tente novamente.")
            return None
        return kind

    def _update_entry(self) -> None:
        kind = self._choose_entry_kind()
        if kind == 1:
            chosen = self._select_client()
            if chosen is not None:
                self._fill_client(chosen[1])
        elif kind == 2:
            chosen_room = self._select_room()
            if chosen_room is not None:
                index, room = chosen_room
                # A room's type fixes its amenities; updating restores them.
                self.hotel.rooms[index] = make_room(room.number, room.room_type)

    def _delete_entry(self) -> None:
        kind = self._choose_entry_kind()
        if kind == 1:
            chosen = self._select_client()
            if chosen is not None:
                self.hotel.remove_person(chosen[0])
                self._say("Cliente removido com sucesso!")
        elif kind == 2:
            chosen_room = self._select_room()
            if chosen_room is not None:
                self._say()
                self.hotel.remove_room(chosen_room[0])
                self._say("Quarto removido com sucesso!")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive hotel manager."""
    parser = argparse.ArgumentParser(
        prog="hotelmanager",
        description="Manage a hotel's clients, staff, rooms and reservations.",
    )
    parser.parse_args(argv)
    HotelShell(Hotel(), sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())