"""A Simon Says memory game driven by four LEDs and four buttons."""

from __future__ import annotations

import argparse
import random
import sys
import time
from enum import IntEnum
from typing import Optional, Protocol, TextIO

BLINK_MS = 500
"""How long each step of the pattern is lit."""


class Led(IntEnum):
    """LED pins on the board."""

    LED1 = 28
    LED2 = 29
    LED3 = 30
    LED4 = 31


class Button(IntEnum):
    """Button pins on the board."""

    BUTTON1 = 23
    BUTTON2 = 24
    BUTTON3 = 8
    BUTTON4 = 9


_LED_FOR_COLOUR = {1: Led.LED1, 2: Led.LED2, 3: Led.LED3, 4: Led.LED4}
_COLOUR_FOR_BUTTON = {
    Button.BUTTON1: 1,
    Button.BUTTON2: 2,
    Button.BUTTON3: 3,
    Button.BUTTON4: 4,
}


class Board(Protocol):
    def set_led(self, led: Led, on: bool) -> None: ...

    def delay_ms(self, ms: int) -> None: ...


class _Rng(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class ConsoleBoard:
    """A board that reports LED changes as text lines on a stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.leds = {led: False for led in Led}

    def set_led(self, led: Led, on: bool) -> None:
        """Switch *led* on or off and report it."""
        led = Led(led)
        self.leds[led] = bool(on)
        self.stream.write(f"{led.name} {'on' if on else 'off'}\n")
        self.stream.flush()

    def delay_ms(self, ms: int) -> None:
        """Wait *ms* milliseconds."""
        if ms < 0:
            raise ValueError("delay must not be negative")
        time.sleep(ms / 1000)


class SimonGame:
    """Game state: the pattern to repeat and the presses made this round."""

    def __init__(self, board: Board, rng: Optional[_Rng] = None) -> None:
        self.board = board
        self.rng = rng if rng is not None else random.Random()
        self.pattern: list[int] = []
        self.presses: list[int] = []
        self.blink_ms = BLINK_MS

    def add_step(self) -> int:
        """Extend the pattern by one random colour and start a new round."""
        self.pattern.append(self.rng.randint(1, 4))
        self.presses.clear()
        return len(self.pattern)

    def blink(self, index: int) -> None:
        """Light the LED for step *index* of the pattern."""
        led = _LED_FOR_COLOUR[self.pattern[index]]
        self.board.set_led(led, True)
        self.board.delay_ms(self.blink_ms)
        self.board.set_led(led, False)

    def show_pattern(self) -> None:
        """Blink every step of the pattern in order."""
        for index in range(len(self.pattern)):
            self.blink(index)

    def press(self, pin: int) -> Optional[int]:
        """Record a press of the button on *pin*; return its colour, or None."""
        colour = _COLOUR_FOR_BUTTON.get(pin)
        if colour is not None:
            self.presses.append(colour)
        return colour

    def check(self) -> bool:
        """Return True if every press so far matches the pattern."""
        count = len(self.presses)
        return count <= len(self.pattern) and self.presses == self.pattern[:count]

    @property
    def round_complete(self) -> bool:
        """True once the whole pattern has been entered correctly."""
        return self.presses == self.pattern


_BUTTON_FOR_KEY = {"1": Button.BUTTON1, "2": Button.BUTTON2, "3": Button.BUTTON3, "4": Button.BUTTON4}


def main(argv: Optional[list[str]] = None) -> int:
    """Play on the console: type the colours 1-4 shown, then Enter."""
    parser = argparse.ArgumentParser(prog="simon", description="Simon Says memory game.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--blink-ms", type=int, default=BLINK_MS, help="blink duration")
    args = parser.parse_args(argv)

    out = sys.stdout
    board = ConsoleBoard(out)
    game = SimonGame(board, random.Random(args.seed))
    game.blink_ms = args.blink_ms
    for led in Led:
        board.set_led(led, False)

    while True:
        game.add_step()
        game.show_pattern()
        out.write("Your turn: ")
        out.flush()
        line = sys.stdin.readline()
        if line:
            for key in line.strip():
                button = _BUTTON_FOR_KEY.get(key)
                if button is not None:
                    game.press(button)
        if not line or not (game.check() and game.round_complete):
            out.write(f"\nGame over! Score: {len(game.pattern) - 1}\n")
            return 0


if __name__ == "__main__":
    raise SystemExit(main())