"""Encoding and decoding of the joint-encoder frames sent by the arm."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

HEADER = 0xAA
TRAILER = 0xFF
JOINT_COUNT = 6
ENTRY_SIZE = 3
PAYLOAD_SIZE = JOINT_COUNT * ENTRY_SIZE
FRAME_SIZE = 1 + PAYLOAD_SIZE + 2
ENCODER_SCALE = 100.0
MAX_ENCODER = 0xFFFF
JOINT_IDS = range(1, JOINT_COUNT + 1)


class FrameError(ValueError):
    """A received frame is malformed or fails its checksum."""


def checksum(payload: Iterable[int]) -> int:
    """Return the low eight bits of the sum of the payload bytes."""
    return sum(payload) & 0xFF


def decode_frame(data: bytes) -> dict[int, float]:
    """Decode a frame into joint angles in degrees, keyed by joint id 1..6.

    A frame is 0xAA, six (id, high, low) triples, 0xFF, and a checksum
    over everything between the header and the trailer.  Entries whose id
    is not a joint id are skipped.
    """
    data = bytes(data)
    if not data:
        raise FrameError("empty frame")
    if len(data) < 2 or data[0] != HEADER or data[-2] != TRAILER:
        raise FrameError("frame header or trailer does not match")
    if len(data) < FRAME_SIZE:
        raise FrameError(f"frame has {len(data)} bytes, expected at least {FRAME_SIZE}")
    expected = checksum(data[1:-2])
    if expected != data[-1]:
        raise FrameError(f"checksum mismatch: computed {expected:#04x}, frame has {data[-1]:#04x}")

    angles: dict[int, float] = {}
    payload = data[1 : 1 + PAYLOAD_SIZE]
    for offset in range(0, PAYLOAD_SIZE, ENTRY_SIZE):
        joint_id, high, low = payload[offset : offset + ENTRY_SIZE]
        if joint_id in JOINT_IDS:
            angles[joint_id] = ((high << 8) | low) / ENCODER_SCALE
    return angles


def encode_frame(angles: Sequence[float]) -> bytes:
    """Build a frame carrying six joint angles in degrees, joint 1 first."""
    if len(angles) != JOINT_COUNT:
        raise ValueError(f"expected {JOINT_COUNT} angles, got {len(angles)}")
    payload = bytearray()
    for joint_id, angle in zip(JOINT_IDS, angles):
        encoder = round(float(angle) * ENCODER_SCALE)
        if not 0 <= encoder <= MAX_ENCODER:
            raise ValueError(f"angle {angle} of joint {joint_id} cannot be encoded")
        payload += bytes((joint_id, encoder >> 8, encoder & 0xFF))
    return bytes((HEADER, *payload, TRAILER, checksum(payload)))