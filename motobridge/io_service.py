"""Services that read and write controller I/O signals and M registers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from .io_rules import (
    REGISTER_MIN,
    IoAccessSize,
    IoLimits,
    IoResultCode,
    Platform,
    is_valid_read_address,
    is_valid_write_address,
    is_valid_write_value,
    result_message,
)

__all__ = ["IoResponse", "IoBackend", "IoService"]

_log = logging.getLogger(__name__)

_UINT32_MASK = 0xFFFFFFFF
_BITS_PER_GROUP = 8


@dataclass
class IoResponse:
    """Outcome of an I/O request. ``value`` is 0 for writes and failed reads."""

    success: bool
    result_code: IoResultCode
    message: str
    value: int = 0


class IoBackend(Protocol):
    """Access to the controller's I/O.

    Both methods raise :class:`OSError` when the controller reports an error.
    """

    def read(self, addresses: Sequence[int]) -> Sequence[int]:
        """Return the value at each of ``addresses``, in order."""
        ...

    def write(self, values: Sequence[tuple[int, int]]) -> None:
        """Write each ``(address, value)`` pair."""
        ...


def _response(code: IoResultCode, value: int = 0) -> IoResponse:
    return IoResponse(code is IoResultCode.OK, code, result_message(code), value)


def _register_address(address: int) -> int:
    address &= _UINT32_MASK
    if address < REGISTER_MIN:
        address += REGISTER_MIN
    return address


class IoService:
    """Validated access to the I/O of one controller family."""

    def __init__(self, backend: IoBackend, platform: Platform) -> None:
        self._backend = backend
        self._limits = IoLimits.for_platform(platform)

    def _read(self, addresses: list[int]) -> list[int] | None:
        try:
            return list(self._backend.read(addresses))
        except OSError as exc:
            _log.debug("I/O read of %s failed: %s", addresses, exc)
            return None

    def _write(self, values: list[tuple[int, int]]) -> IoResponse:
        try:
            self._backend.write(values)
        except OSError as exc:
            _log.debug("I/O write of %s failed: %s", values, exc)
            return _response(IoResultCode.WRITE_API_ERROR)
        return _response(IoResultCode.OK)

    def _read_one(self, address: int, size: IoAccessSize) -> IoResponse:
        if not is_valid_read_address(address, size, self._limits):
            return _response(IoResultCode.READ_ADDRESS_INVALID)
        values = self._read([address])
        if values is None:
            return _response(IoResultCode.READ_API_ERROR)
        return _response(IoResultCode.OK, values[0])

    def _write_check(self, address: int, value: int, size: IoAccessSize) -> IoResponse | None:
        if not is_valid_write_address(address, size, self._limits):
            return _response(IoResultCode.WRITE_ADDRESS_INVALID)
        if not is_valid_write_value(value, size):
            return _response(IoResultCode.WRITE_VALUE_INVALID)
        return None

    def read_single(self, address: int) -> IoResponse:
        """Read one bit signal."""
        return self._read_one(address & _UINT32_MASK, IoAccessSize.BIT)

    def read_group(self, address: int) -> IoResponse:
        """Read the eight bits of a group (byte) signal."""
        address &= _UINT32_MASK
        if not is_valid_read_address(address, IoAccessSize.GROUP, self._limits):
            return _response(IoResultCode.READ_ADDRESS_INVALID)
        bits = self._read([address * 10 + i for i in range(_BITS_PER_GROUP)])
        if bits is None:
            return _response(IoResultCode.READ_API_ERROR)
        value = 0
        for position, bit in enumerate(bits):
            value |= bit << position
        return _response(IoResultCode.OK, value)

    def write_single(self, address: int, value: int) -> IoResponse:
        """Write one bit signal."""
        address &= _UINT32_MASK
        rejected = self._write_check(address, value, IoAccessSize.BIT)
        if rejected is not None:
            return rejected
        return self._write([(address, value)])

    def write_group(self, address: int, value: int) -> IoResponse:
        """Write the eight bits of a group (byte) signal."""
        address &= _UINT32_MASK
        rejected = self._write_check(address, value, IoAccessSize.GROUP)
        if rejected is not None:
            return rejected
        return self._write(
            [(address * 10 + i, (value >> i) & 1) for i in range(_BITS_PER_GROUP)]
        )

    def read_mregister(self, address: int) -> IoResponse:
        """Read an M register; addresses below 1000000 are taken as register numbers."""
        return self._read_one(_register_address(address), IoAccessSize.REGISTER)

    def write_mregister(self, address: int, value: int) -> IoResponse:
        """Write an M register; addresses below 1000000 are taken as register numbers."""
        address = _register_address(address)
        rejected = self._write_check(address, value, IoAccessSize.REGISTER)
        if rejected is not None:
            return rejected
        return self._write([(address, value)])