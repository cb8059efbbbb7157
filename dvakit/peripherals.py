"""Board configuration lookups: per-chip config module and peripheral name mapping."""

from __future__ import annotations

from typing import NamedTuple

EXTERNAL_CONFIG = "nrfx_config_ext.h"
"""Configuration used when the chip is not one of the known ones."""

_CONFIG_FOR_CHIP = {
    "NRF51": "nrfx_config_nrf51.h",
    "NRF52805_XXAA": "nrfx_config_nrf52805.h",
    "NRF52810_XXAA": "nrfx_config_nrf52810.h",
    "NRF52811_XXAA": "nrfx_config_nrf52811.h",
    "NRF52820_XXAA": "nrfx_config_nrf52820.h",
    "NRF52832_XXAA": "nrfx_config_nrf52832.h",
    "NRF52832_XXAB": "nrfx_config_nrf52832.h",
    "NRF52833_XXAA": "nrfx_config_nrf52833.h",
    "NRF52840_XXAA": "nrfx_config_nrf52840.h",
    "NRF5340_XXAA_APPLICATION": "nrfx_config_nrf5340_application.h",
    "NRF5340_XXAA_NETWORK": "nrfx_config_nrf5340_network.h",
    "NRF9120_XXAA": "nrfx_config_nrf91.h",
    "NRF9160_XXAA": "nrfx_config_nrf91.h",
}

# Peripherals reachable through both secure and non-secure mappings; the
# configuration maps all of them to their secure address.
_DUAL_MAPPED = (
    "CLOCK", "COMP", "DCNF", "DPPIC",
    "EGU0", "EGU1", "EGU2", "EGU3", "EGU4", "EGU5",
    "FPU", "I2S0", "IPC", "KMU", "LPCOMP", "MUTEX", "NFCT", "NVMC",
    "OSCILLATORS", "P0", "P1", "PDM0", "POWER",
    "PWM0", "PWM1", "PWM2", "PWM3", "QDEC0", "QDEC1", "QSPI",
    "REGULATORS", "RESET", "RTC0", "RTC1", "SAADC",
    "SPIM0", "SPIM1", "SPIM2", "SPIM3", "SPIM4",
    "SPIS0", "SPIS1", "SPIS2", "SPIS3",
    "TIMER0", "TIMER1", "TIMER2",
    "TWIM0", "TWIM1", "TWIM2", "TWIM3",
    "TWIS0", "TWIS1", "TWIS2", "TWIS3",
    "UARTE0", "UARTE1", "UARTE2", "UARTE3",
    "USBD", "USBREGULATOR", "VMC", "WDT0", "WDT1",
)

_SECURE_ONLY = (
    "CACHE", "CACHEINFO", "CACHEDATA", "CRYPTOCELL", "CTI",
    "FICR", "GPIOTE0", "SPU", "TAD", "UICR",
)

_NONSECURE_ONLY = ("GPIOTE1",)


class GpioteNames(NamedTuple):
    """The GPIOTE instance and interrupt handler the driver uses."""

    peripheral: str
    irq_handler: str


def config_module_for(chip: str) -> str:
    """Return the configuration header selected for *chip*."""
    return _CONFIG_FOR_CHIP.get(chip.strip().upper(), EXTERNAL_CONFIG)


def gpiote_names(nonsecure: bool = False) -> GpioteNames:
    """Return the GPIOTE instance and IRQ handler for the chosen security mode."""
    if nonsecure:
        return GpioteNames("NRF_GPIOTE1", "GPIOTE1_IRQHandler")
    return GpioteNames("NRF_GPIOTE0", "GPIOTE0_IRQHandler")


def _aliases(nonsecure: bool) -> dict[str, str]:
    table = {f"NRF_{name}": f"NRF_{name}_S" for name in _DUAL_MAPPED}
    if nonsecure:
        table.update({f"NRF_{name}": f"NRF_{name}_NS" for name in _NONSECURE_ONLY})
    else:
        table.update({f"NRF_{name}": f"NRF_{name}_S" for name in _SECURE_ONLY})
    gpiote = gpiote_names(nonsecure)
    table["NRF_GPIOTE"] = gpiote.peripheral
    table["GPIOTE_IRQHandler"] = gpiote.irq_handler
    return table


def peripheral_alias(name: str, nonsecure: bool = False) -> str:
    """Resolve a driver-side peripheral *name* to the address mapping it stands for.

    Aliases are followed until a name with no further mapping is reached.
    Raises KeyError if *name* has no mapping in the chosen security mode.
    """
    table = _aliases(nonsecure)
    if name not in table:
        mode = "non-secure" if nonsecure else "secure"
        raise KeyError(f"{name} has no {mode} mapping")
    seen = {name}
    while name in table:
        name = table[name]
        if name in seen:
            raise KeyError(f"alias loop at {name}")
        seen.add(name)
    return name