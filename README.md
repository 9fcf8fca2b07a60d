# vacinafila

vacinafila is a small console tool for booking people into vaccination slots.
There are ten slots, one for each weekday morning and one for each weekday
afternoon. Each slot has its own first-in-first-out queue with a fixed
capacity. The package also includes a small word reverser that uses a stack.

The menu and its messages are in Portuguese.

## Install

```
pip install .
```

## Booking vaccinations

```
vacinafila
```

This opens an interactive menu. The menu keeps running until you choose
"4. Sair" or input ends. It has four options:

1. **Cadastro para vacinação**: register a person. You enter the name, CPF,
   address and age. Then you pick one of the slots that still has room. If the
   age is not a whole number, the menu prints "Entre com número válido!" and
   goes back to the start.
2. **Mostrar fila por slot**: print the queue of one slot, front first.
3. **Remoção da fila**: remove the person at the front of a slot's queue and
   print their details.
4. **Sair**: quit.

Each slot holds two people.

Some choices stop the program with exit status 1 after printing the error
message:

- entering the number of a slot that is already full;
- removing a person from a slot that is empty.

## Reversing a word

```
vacinafila-reverse pilha
```

This prints `Palavra ao contrario: ahlip`. If you do not give a word, the
command asks for one and uses the first word you type. The characters are
pushed onto a stack and then popped off.

## Using it as a library

```python
from vacinafila.bounded_queue import BoundedQueue, Person, QueueFullError
from vacinafila.reverse import reverse_word
from vacinafila.scheduler import Schedule, Slot, run_menu
from vacinafila.stack import Stack

queue = BoundedQueue(2)
queue.append(Person(name="Ana", cpf="cpf-de-exemplo", address="Rua A, 1", age=30))
print(queue.front().name)   # Ana
print(queue.describe())     # printed listing of every person in the queue

schedule = Schedule(2)
schedule.queue(Slot.MONDAY_MORNING).append(queue.serve())
print([slot.label for slot in schedule.available()])

stack = Stack()
stack.push("a")
print(stack.peek(), len(stack))

print(reverse_word("pilha"))  # ahlip
```

### `BoundedQueue`

`BoundedQueue` has the following methods:

- `append`, `serve`, `front`, `rear`, `empty`, `full`, `clear`, `size` and
  `describe`.
- `len()` gives the number of items.
- You can iterate over a queue, front first.

The queue raises these errors:

- `QueueFullError` when you append to a full queue.
- `QueueEmptyError` when you serve from an empty queue or look at its front or
  rear.

### `Stack`

`Stack` has the methods `push`, `pop`, `peek`, `empty`, `full`, `clear` and
`size`, and `len()` gives its size. `full` always returns `False`. Popping or
peeking an empty stack raises `StackEmptyError`.

### `run_menu`

`run_menu(schedule, stdin, stdout)` runs the same menu as the command. You can
give it any text streams, which lets you script it or test it. Booking into a
full slot raises `QueueFullError`. Removing from an empty slot raises
`QueueEmptyError`. In both cases the error goes to the caller.

## What it does not do

Bookings are kept only in memory. When the program exits, every booking is
lost. There is no file or database storage.

The slot capacity in the `vacinafila` command cannot be configured. To use a
different capacity, build a `Schedule` yourself and pass it to `run_menu`.

## Tests

```
pip install ".[test]"
pytest
```