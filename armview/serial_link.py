"""Serial connection to the arm's encoder board."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import serial
import serial.tools.list_ports

from armview.protocol import decode_frame

BAUD_RATES = (115200, 57600, 38400, 19200, 9600)
PARITIES = {
    "NONE": serial.PARITY_NONE,
    "ODD": serial.PARITY_ODD,
    "EVEN": serial.PARITY_EVEN,
    "MARK": serial.PARITY_MARK,
    "SPACE": serial.PARITY_SPACE,
}
STOP_BITS = {
    "1": serial.STOPBITS_ONE,
    "1.5": serial.STOPBITS_ONE_POINT_FIVE,
    "2": serial.STOPBITS_TWO,
}
READ_TIMEOUT = 0.5


def list_ports() -> list[str]:
    """Return the device names of the serial ports present."""
    return [port.device for port in serial.tools.list_ports.comports()]


@dataclass(frozen=True)
class SerialSettings:
    """Port name and line settings; eight data bits, no flow control."""

    port: str
    baudrate: int = 9600
    parity: str = "NONE"
    stopbits: str = "1"
    timeout: float = READ_TIMEOUT

    def __post_init__(self) -> None:
        if self.baudrate not in BAUD_RATES:
            raise ValueError(f"unsupported baud rate {self.baudrate}")
        if self.parity not in PARITIES:
            raise ValueError(f"unsupported parity {self.parity!r}")
        if self.stopbits not in STOP_BITS:
            raise ValueError(f"unsupported stop bits {self.stopbits!r}")


class SerialLink:
    """An open-able serial port that yields raw data and decoded joint angles."""

    def __init__(self, settings: SerialSettings, factory: Callable[..., Any] | None = None):
        self.settings = settings
        self._factory = factory
        self._port: Any = None

    @property
    def is_open(self) -> bool:
        return self._port is not None and bool(self._port.is_open)

    def open(self) -> None:
        """Open the port, closing an earlier connection first."""
        if self.is_open:
            self.close()
        factory = self._factory or serial.Serial
        s = self.settings
        self._port = factory(
            port=s.port,
            baudrate=s.baudrate,
            bytesize=serial.EIGHTBITS,
            parity=PARITIES[s.parity],
            stopbits=STOP_BITS[s.stopbits],
            timeout=s.timeout,
            xonxoff=False,
            rtscts=False,
        )

    def close(self) -> None:
        """Close the port if it is open."""
        if self.is_open:
            self._port.close()
        self._port = None

    def __enter__(self) -> SerialLink:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send(self, data: bytes) -> None:
        """Write data to the port; nothing is sent while it is closed."""
        if self.is_open:
            self._port.write(bytes(data))

    def receive(self) -> bytes:
        """Wait up to the timeout for data and return all that is available."""
        if not self.is_open:
            return b""
        data = bytes(self._port.read(1))
        if data:
            waiting = self._port.in_waiting
            if waiting:
                data += bytes(self._port.read(waiting))
        return data

    def read_joints(self) -> dict[int, float]:
        """Receive one frame and decode it; empty when nothing arrived."""
        data = self.receive()
        if not data:
            return {}
        return decode_frame(data)