"""Driver configuration options for the application core, with their defaults.

Every option has a default that an override may replace. An override is
checked against the range the option allows. The per-driver interrupt
priorities default to ``NRFX_DEFAULT_IRQ_PRIORITY``, so overriding that one
option moves every priority that was not overridden itself.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

PREFIX = "NRFX_"
DEFAULT_IRQ_PRIORITY = "NRFX_DEFAULT_IRQ_PRIORITY"


class LogLevel(IntEnum):
    """Verbosity of a driver's log output."""

    OFF = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4


@dataclass(frozen=True)
class _Option:
    default: Union[int, str]  # a str names the option whose value is used
    low: int
    high: int


_BOOL = (0, 1)
_PRIORITY = (0, 7)
_LEVEL = (int(LogLevel.OFF), int(LogLevel.DEBUG))


def _driver(
    name: str,
    *,
    enabled: int = 0,
    irq: bool = False,
    log: bool = False,
    instances: Iterable[tuple[str, int]] = (),
    extra: Iterable[tuple[str, int, int, int]] = (),
) -> dict[str, _Option]:
    base = f"{PREFIX}{name}"
    options = {f"{base}_ENABLED": _Option(enabled, *_BOOL)}
    if irq:
        options[f"{base}_DEFAULT_CONFIG_IRQ_PRIORITY"] = _Option(DEFAULT_IRQ_PRIORITY, *_PRIORITY)
    for suffix, default, low, high in extra:
        options[f"{base}_{suffix}"] = _Option(default, low, high)
    if log:
        options[f"{base}_CONFIG_LOG_ENABLED"] = _Option(0, *_BOOL)
        options[f"{base}_CONFIG_LOG_LEVEL"] = _Option(int(LogLevel.INFO), *_LEVEL)
    for instance, default in instances:
        options[f"{PREFIX}{instance}_ENABLED"] = _Option(default, *_BOOL)
    return options


def _off(*names: str) -> tuple[tuple[str, int], ...]:
    return tuple((name, 0) for name in names)


def _build_table() -> dict[str, _Option]:
    table: dict[str, _Option] = {DEFAULT_IRQ_PRIORITY: _Option(7, *_PRIORITY)}
    table.update(_driver(
        "CLOCK", irq=True, log=True,
        extra=(
            ("CONFIG_HFCLK192M_SRC", 1, 0, 1),
            ("CONFIG_LF_SRC", 2, 1, 3),
            ("CONFIG_LF_CAL_ENABLED", 0, *_BOOL),
            ("CONFIG_LFXO_TWO_STAGE_ENABLED", 0, *_BOOL),
        ),
    ))
    table.update(_driver("COMP", irq=True, log=True))
    table.update(_driver("DPPI", log=True))
    table.update(_driver("EGU", irq=True, instances=_off(*(f"EGU{i}" for i in range(6)))))
    table.update(_driver(
        "GPIOTE", irq=True, log=True, extra=(("CONFIG_NUM_OF_EVT_HANDLERS", 2, 0, 15),)
    ))
    table.update(_driver("I2S", irq=True, log=True, instances=_off("I2S0")))
    table.update(_driver("IPC"))
    table.update(_driver("LPCOMP", irq=True, log=True))
    table.update(_driver("NFCT", irq=True, log=True, extra=(("CONFIG_TIMER_INSTANCE_ID", 2, 0, 5),)))
    table.update(_driver("NVMC"))
    table.update(_driver("PDM", irq=True, log=True))
    table.update(_driver("POWER", irq=True))
    table.update(_driver("PRS", log=True, instances=_off(*(f"PRS_BOX_{i}" for i in range(5)))))
    table.update(_driver("PWM", irq=True, log=True, instances=_off(*(f"PWM{i}" for i in range(4)))))
    table.update(_driver("QDEC", irq=True, log=True, instances=_off("QDEC0", "QDEC1")))
    table.update(_driver("QSPI", irq=True))
    table.update(_driver("RTC", enabled=1, irq=True, log=True, instances=(("RTC0", 1), ("RTC1", 0))))
    table.update(_driver("SAADC", irq=True, log=True))
    table.update(_driver(
        "SPIM", irq=True, log=True, instances=_off("SPIM0", "SPIM1", "SPIM4", "SPIM2", "SPIM3")
    ))
    table.update(_driver("SPIS", irq=True, log=True, instances=_off(*(f"SPIS{i}" for i in range(4)))))
    table.update(_driver("SYSTICK", enabled=1))
    table.update(_driver("TIMER", irq=True, log=True, instances=_off("TIMER0", "TIMER1", "TIMER2")))
    table.update(_driver("TWIM", irq=True, log=True, instances=_off(*(f"TWIM{i}" for i in range(4)))))
    table.update(_driver(
        "TWIS", irq=True, log=True,
        extra=(
            ("ASSUME_INIT_AFTER_RESET_ONLY", 0, *_BOOL),
            ("NO_SYNC_MODE", 0, *_BOOL),
        ),
        instances=_off(*(f"TWIS{i}" for i in range(4))),
    ))
    table.update(_driver(
        "UARTE", enabled=1, irq=True, log=True,
        instances=(("UARTE0", 1), ("UARTE1", 0), ("UARTE2", 0), ("UARTE3", 0)),
    ))
    table.update(_driver(
        "USBD", irq=True, log=True,
        extra=(
            ("CONFIG_DMASCHEDULER_ISO_BOOST", 1, *_BOOL),
            ("CONFIG_ISO_IN_ZLP", 0, *_BOOL),
        ),
    ))
    table.update(_driver("USBREG", irq=True))
    table.update(_driver(
        "WDT", irq=True, log=True,
        extra=(("CONFIG_NO_IRQ", 0, *_BOOL),),
        instances=_off("WDT0", "WDT1"),
    ))
    return table


_OPTIONS = _build_table()


def _option_name(key: str) -> str:
    name = key.strip().upper()
    if not name.startswith(PREFIX):
        name = PREFIX + name
    if name not in _OPTIONS:
        raise KeyError(f"unknown option {key!r}")
    return name


class DriverConfig(Mapping[str, int]):
    """Read-only view of every option, with overrides applied over the defaults.

    Keys may be given with or without the ``NRFX_`` prefix and in any case.
    Unknown options raise KeyError; values outside an option's range raise
    ValueError; values that are not integers raise TypeError.
    """

    def __init__(self, overrides: Optional[Mapping[str, int]] = None) -> None:
        self._overrides: dict[str, int] = {}
        for key, value in (overrides or {}).items():
            name = _option_name(key)
            if not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
            option = _OPTIONS[name]
            if not option.low <= value <= option.high:
                raise ValueError(
                    f"{name} must be between {option.low} and {option.high}, got {value}"
                )
            self._overrides[name] = int(value)

    def __getitem__(self, key: str) -> int:
        name = _option_name(key)
        if name in self._overrides:
            return self._overrides[name]
        default = _OPTIONS[name].default
        return self[default] if isinstance(default, str) else default

    def __iter__(self) -> Iterator[str]:
        return iter(_OPTIONS)

    def __len__(self) -> int:
        return len(_OPTIONS)

    def enabled(self, driver: str) -> bool:
        """Return whether *driver* (such as ``"uarte"`` or ``"RTC0"``) is enabled."""
        return self[f"{driver}_ENABLED"] == 1

    def irq_priority(self, driver: str) -> int:
        """Return the default interrupt priority of *driver*."""
        return self[f"{driver}_DEFAULT_CONFIG_IRQ_PRIORITY"]

    def log_level(self, driver: str) -> LogLevel:
        """Return the log level of *driver*; OFF while its logging is disabled."""
        if self[f"{driver}_CONFIG_LOG_ENABLED"] != 1:
            return LogLevel.OFF
        return LogLevel(self[f"{driver}_CONFIG_LOG_LEVEL"])

    def __repr__(self) -> str:
        return f"DriverConfig({self._overrides!r})"


def default_options() -> dict[str, int]:
    """Return every option with its default value, references resolved."""
    return dict(DriverConfig())