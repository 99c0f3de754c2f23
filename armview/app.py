"""Command line entry point: list ports or stream joint angles from the arm."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import serial

from armview.protocol import FrameError, decode_frame
from armview.serial_link import (
    BAUD_RATES,
    PARITIES,
    STOP_BITS,
    SerialLink,
    SerialSettings,
    list_ports,
)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the command."""
    parser = argparse.ArgumentParser(
        prog="armview",
        description="Read joint angles of the six-axis arm from a serial port.",
    )
    parser.add_argument("--list-ports", action="store_true", help="list serial ports and exit")
    parser.add_argument("--port", help="serial port to open")
    parser.add_argument("--baudrate", type=int, choices=BAUD_RATES, default=9600)
    parser.add_argument("--parity", choices=sorted(PARITIES), default="NONE")
    parser.add_argument("--stopbits", choices=sorted(STOP_BITS), default="1")
    parser.add_argument(
        "--count", type=int, default=0, help="stop after this many reads (0: run until interrupted)"
    )
    return parser


def _format(joints: dict[int, float]) -> str:
    return " ".join(f"J{joint_id}={angle:.2f}" for joint_id, angle in sorted(joints.items()))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_ports:
        for name in list_ports():
            print(name)
        return 0
    if not args.port:
        parser.error("--port is required unless --list-ports is given")
    if args.count < 0:
        parser.error("--count must not be negative")

    settings = SerialSettings(
        port=args.port, baudrate=args.baudrate, parity=args.parity, stopbits=args.stopbits
    )
    link = SerialLink(settings)
    try:
        link.open()
    except serial.SerialException as exc:
        print(f"cannot open {args.port}: {exc}", file=sys.stderr)
        return 1

    reads = 0
    try:
        while args.count == 0 or reads < args.count:
            reads += 1
            data = link.receive()
            if not data:
                continue
            try:
                joints = decode_frame(data)
            except FrameError as exc:
                print(f"bad frame: {exc}", file=sys.stderr)
                continue
            print(_format(joints), flush=True)
    except KeyboardInterrupt:
        pass
    finally:
        link.close()
    return 0