"""Bridge - remotes (abstraction) drive devices (implementation) by composition."""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from patterncatalog.domain.base.ports import NullOutput, OutputPort

logger = logging.getLogger(__name__)

MIN_LEVEL = 0
MAX_LEVEL = 100


def clamp(value: int, lower: int = MIN_LEVEL, upper: int = MAX_LEVEL) -> int:
    return max(lower, min(upper, value))


class Device(Protocol):
    enabled: bool
    volume: int
    channel: int

    def status(self) -> List[str]:
        ...

    def print_status(self) -> None:
        ...


class BaseDevice:
    """
    Shared device state.

    Volume and channel are clamped into [0, 100] on every write; out-of-range
    values are corrected, never rejected.
    """

    label = "device"

    def __init__(self, output: Optional[OutputPort] = None):
        self.enabled = False
        self._volume = 30
        self._channel = 1
        self.output = output if output is not None else NullOutput()

    @property
    def volume(self) -> int:
        return self._volume

    @volume.setter
    def volume(self, value: int) -> None:
        clamped = clamp(value)
        if clamped != value:
            logger.debug(f"{self.label} volume {value} clamped to {clamped}")
        self._volume = clamped

    @property
    def channel(self) -> int:
        return self._channel

    @channel.setter
    def channel(self, value: int) -> None:
        clamped = clamp(value)
        if clamped != value:
            logger.debug(f"{self.label} channel {value} clamped to {clamped}")
        self._channel = clamped

    def status(self) -> List[str]:
        return [
            "--------------------------",
            f"| I'm {self.label}.",
            f"| I'm {'enabled' if self.enabled else 'disabled'}",
            f"| Current volume is {self.volume}",
            f"| Current channel is {self.channel}",
            "--------------------------",
        ]

    def print_status(self) -> None:
        for line in self.status():
            self.output.write(line)


class Radio(BaseDevice):
    label = "radio"


class Tv(BaseDevice):
    label = "TV"


class BasicRemote:
    """Low-level controls, each delegating to the device."""

    def __init__(self, device: Device):
        self._device = device

    @property
    def device(self) -> Device:
        return self._device

    def power(self) -> None:
        self._device.enabled = not self._device.enabled

    def volume_down(self) -> None:
        self._device.volume = self._device.volume - 10

    def volume_up(self) -> None:
        self._device.volume = self._device.volume + 10

    def channel_down(self) -> None:
        self._device.channel = self._device.channel - 1

    def channel_up(self) -> None:
        self._device.channel = self._device.channel + 1


class AdvancedRemote:
    """Wraps a BasicRemote, forwards its controls and adds mute()."""

    def __init__(self, device: Device):
        self._basic = BasicRemote(device)

    @property
    def device(self) -> Device:
        return self._basic.device

    def power(self) -> None:
        self._basic.power()

    def volume_down(self) -> None:
        self._basic.volume_down()

    def volume_up(self) -> None:
        self._basic.volume_up()

    def channel_down(self) -> None:
        self._basic.channel_down()

    def channel_up(self) -> None:
        self._basic.channel_up()

    def mute(self) -> None:
        self._basic.device.volume = 0
