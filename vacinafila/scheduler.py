"""Interactive menu that books patients into weekday vaccination slots."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import TextIO

from .bounded_queue import (
    DEFAULT_CAPACITY,
    BoundedQueue,
    Person,
    QueueEmptyError,
    QueueFullError,
)

CLEAR_SCREEN = "\033[H\033[2J"
RULE = "============================================"


class Slot(IntEnum):
    """A vaccination period, numbered as in the menu."""

    MONDAY_MORNING = 1
    MONDAY_AFTERNOON = 2
    TUESDAY_MORNING = 3
    TUESDAY_AFTERNOON = 4
    WEDNESDAY_MORNING = 5
    WEDNESDAY_AFTERNOON = 6
    THURSDAY_MORNING = 7
    THURSDAY_AFTERNOON = 8
    FRIDAY_MORNING = 9
    FRIDAY_AFTERNOON = 10

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Slot.MONDAY_MORNING: "Segunda de manhã",
    Slot.MONDAY_AFTERNOON: "Segunda de tarde",
    Slot.TUESDAY_MORNING: "Terça de manhã",
    Slot.TUESDAY_AFTERNOON: "Terça de tarde",
    Slot.WEDNESDAY_MORNING: "Quarta de manhã",
    Slot.WEDNESDAY_AFTERNOON: "Quarta de tarde",
    Slot.THURSDAY_MORNING: "Quinta de manhã",
    Slot.THURSDAY_AFTERNOON: "Quinta de tarde",
    Slot.FRIDAY_MORNING: "Sexta de manhã",
    Slot.FRIDAY_AFTERNOON: "Sexta de tarde",
}


class Schedule:
    """One bounded queue per vaccination slot."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._queues = {slot: BoundedQueue(capacity) for slot in Slot}

    def queue(self, slot: Slot) -> BoundedQueue:
        return self._queues[Slot(slot)]

    def available(self) -> list[Slot]:
        """Return the slots that still have room, in menu order."""
        return [slot for slot, q in self._queues.items() if not q.full()]


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def write(self, text: str = "") -> None:
        self._stdout.write(text)

    def line(self, text: str = "") -> None:
        self._stdout.write(text + "\n")

    def clear(self) -> None:
        self._stdout.write(CLEAR_SCREEN)

    def read_line(self) -> str:
        self._stdout.flush()
        line = self._stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def read_int(self) -> int | None:
        tokens = self.read_line().split()
        if not tokens:
            return None
        try:
            return int(tokens[0])
        except ValueError:
            return None


def _slot_from(number: int | None) -> Slot | None:
    try:
        return Slot(number)
    except ValueError:
        return None


def _list_all_slots(console: _Console) -> None:
    for slot in Slot:
        console.line(f"{slot.value}. {slot.label}")


def _back_to_menu(console: _Console) -> None:
    console.line()
    console.line("0. Voltar para menu")
    if console.read_int() == 0:
        console.clear()


def _register(schedule: Schedule, console: _Console) -> None:
    console.clear()
    console.line(RULE)
    console.line("           Cadastro para vacinação          ")
    console.line(RULE)
    console.line("Dados do paciente:")
    console.write("Nome: ")
    name = console.read_line()
    console.write("CPF: ")
    cpf = console.read_line()
    console.write("Endereço: ")
    address = console.read_line()
    console.write("Idade: ")
    age = console.read_int()
    if age is None:
        console.line("Entre com número válido!")
        return
    person = Person(name=name, cpf=cpf, address=address, age=age)
    console.line()
    console.line("Selecione um dos períodos de vacinação dispónivel: ")
    console.line()
    for slot in schedule.available():
        console.line(f"{slot.value}. {slot.label}")
    slot = _slot_from(console.read_int())
    if slot is not None:
        schedule.queue(slot).append(person)
    _back_to_menu(console)


def _show(schedule: Schedule, console: _Console) -> None:
    console.line("Selecione o slot do qual quer ver a fila")
    _list_all_slots(console)
    slot = _slot_from(console.read_int())
    if slot is not None:
        console.write(schedule.queue(slot).describe())
    _back_to_menu(console)


def _remove(schedule: Schedule, console: _Console) -> None:
    console.line("Selecione o slot do qual deseja remover uma pessoa")
    _list_all_slots(console)
    slot = _slot_from(console.read_int())
    if slot is not None:
        person = schedule.queue(slot).serve()
        console.line(f"Nome {person.name}")
        console.line(f"CPF: {person.cpf}")
        console.line(f"Endereço: {person.address}")
        console.line(f"Idade: {person.age}")
    _back_to_menu(console)


def _menu_once(schedule: Schedule, console: _Console) -> bool:
    console.line(RULE)
    console.line("                   MENU                     ")
    console.line(RULE)
    console.line("1. Cadastro para vacinação")
    console.line("2. Mostrar fila por slot")
    console.line("3. Remoção da fila")
    console.line("4. Sair")
    choice = console.read_int()
    if choice == 1:
        _register(schedule, console)
    elif choice == 2:
        _show(schedule, console)
    elif choice == 3:
        _remove(schedule, console)
    elif choice == 4:
        return False
    else:
        console.line("Entre com número válido!")
    return True


def run_menu(
    schedule: Schedule,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Run the menu until the user leaves or input ends.

    Booking into a full slot or removing from an empty one raises
    QueueFullError or QueueEmptyError.
    """
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    try:
        while _menu_once(schedule, console):
            pass
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Book patients into vaccination slots."
    )
    parser.parse_args(argv)
    try:
        run_menu(Schedule())
    except (QueueFullError, QueueEmptyError) as error:
        print(error)
        return 1
    return 0