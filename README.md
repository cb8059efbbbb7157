# dvakit

A small toolkit with classic data structures and sorting routines, a
Simon Says game for the console, and lookups for nrfx driver
configuration.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `dvakit.linked_list`

`LinkedList(items=())` is a singly linked list of integers.

- `add_first(data)` and `add_last(data)` insert an item.
- `remove_first()` and `remove_last()` remove an item and return it.
- `first()` and `last()` return an item without removing it.
- `remove(data)` removes the first occurrence of `data` and returns
  whether it found one.
- `search(data)` tells whether `data` is in the list.
- `is_empty()`, `clear()`, `len()`, iteration and `in` work as expected.
- `is_sorted()` checks for non-decreasing order.
- `bubblesort()` sorts the list in place by relinking its nodes.
- `print_to(stream)` writes every item in decimal to a text stream, with
  no separators.

`remove_first`, `remove_last`, `first`, `last` and `search` raise
`IndexError` when the list is empty.

### `dvakit.sorting`

These functions work in place on a mutable sequence, between two
inclusive indices:

- `is_sorted_array(values)`
- `partition(values, low, high)` partitions around `values[low]` and
  returns the pivot's final index.
- `quick_sort(values, low=0, high=None)`
- `merge(values, low, split_point, high)` merges two adjacent sorted runs.
- `merge_sort(values, low=0, high=None)`

When `high` is `None`, it means the last index.

### `dvakit.bstree`

`BSTree(items=())` is a binary search tree of integers. It ignores
duplicates.

- `insert(data)` returns `False` if the item was already present.
- `remove(data)` returns whether the item was found.
- `find(data)` and `in` test for membership.
- `preorder()`, `inorder()` and `postorder()` return iterators.
  `print_preorder(stream)`, `print_inorder(stream)` and
  `print_postorder(stream)` write the same orders in decimal to a stream.
- `depth()` is the number of levels, and 0 for an empty tree.
  `min_depth()` is the depth a perfectly balanced tree of the same size
  would have.
- `min_value()` raises `ValueError` on an empty tree.
- `to_sorted_list()`, `balance()`, `clear()`, `is_empty()`, `len()`, and
  iteration in ascending order.

### `dvakit.serial_io`

Helpers that work on any text stream:

- `write_text(stream, data)`
- `send_int(stream, value)` writes the value in decimal.
- `read_string(stream)` reads up to a carriage return or to the end of
  the stream. It keeps at most 19 characters.
- `read_int(stream)` reads one such string and parses its leading integer.
  It returns 0 if there is none.

### `dvakit.simon`

- `Led` and `Button` name the four lamps and the four buttons by pin
  number.
- `ConsoleBoard(stream)` stands in for the board. `set_led(led, on)`
  writes a line such as `LED1 on` to the stream, and `delay_ms(ms)`
  sleeps.
- `SimonGame(board, rng=None)` holds the game state:
  - `add_step()` extends the pattern with a random colour from 1 to 4
    and starts a new round.
  - `blink(index)` and `show_pattern()` light the lamps.
  - `press(pin)` records a button press.
  - `check()` tells whether the presses so far match the pattern.
  - `round_complete` is true once the whole pattern has been entered.

### `dvakit.peripherals`

- `config_module_for(chip)` names the configuration header that is
  selected for a chip. Unknown chips get `nrfx_config_ext.h`.
- `peripheral_alias(name, nonsecure=False)` resolves a driver-side name
  such as `NRF_UARTE0` or `NRF_GPIOTE` to its secure (`_S`) or
  non-secure (`_NS`) mapping. It raises `KeyError` if the name has no
  mapping in that mode.
- `gpiote_names(nonsecure=False)` returns the GPIOTE instance and IRQ
  handler names.

### `dvakit.options`

- `DriverConfig(overrides=None)` is a read-only mapping of every driver
  option, with the overrides applied over the defaults. Keys may be given
  with or without the `NRFX_` prefix, in any case. An out-of-range value
  raises `ValueError`, a value that is not an integer raises `TypeError`,
  and an unknown option raises `KeyError`.
  - `enabled(driver)`, `irq_priority(driver)` and `log_level(driver)`
    give per-driver views. `log_level` returns a `LogLevel`.
  - The per-driver priorities follow `NRFX_DEFAULT_IRQ_PRIORITY` unless
    they are overridden themselves.
- `default_options()` returns every option with its default value.

## Example

    from dvakit.bstree import BSTree
    from dvakit.linked_list import LinkedList

    tree = BSTree([5, 3, 8, 1, 4])
    print(tree.to_sorted_list())   # [1, 3, 4, 5, 8]
    tree.balance()
    print(tree.depth() == tree.min_depth())   # True

    items = LinkedList([3, 1, 2])
    items.bubblesort()
    print(list(items))             # [1, 2, 3]

## Playing Simon Says

    dvakit-simon [--seed N] [--blink-ms MS]

Each round adds one step to the pattern and reports the lamps as
`LEDn on` and `LEDn off` lines. At the `Your turn:` prompt, type the
digits 1 to 4 in the order shown and press Enter. The game ends on the
first wrong or incomplete answer, or at the end of input, and prints the
number of rounds completed.

## What it does not do

The game runs only on the console. Nothing here drives real LEDs or
buttons, and nothing opens a serial port. The serial helpers read from
and write to whatever text stream they are given. The configuration
modules only look up names and values. They do not build or flash
firmware.