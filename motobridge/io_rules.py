"""Address and value rules for controller I/O access, and I/O result codes.

Addresses follow the controller numbering: the last decimal digit of a
bit address selects the bit (0-7) within a byte, group (byte) addresses
are given without that digit, and M registers start at 1000000.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "Platform",
    "IoAccessSize",
    "IoResultCode",
    "IoLimits",
    "is_valid_read_address",
    "is_valid_write_address",
    "is_valid_write_value",
    "result_message",
    "REGISTER_MIN",
    "UNKNOWN_API_ERROR_MESSAGE",
]

_UINT32_MASK = 0xFFFFFFFF

REGISTER_MIN = 1000000
_REGISTER_MAX_READ = 1000999
_REGISTER_MAX_WRITE = 1000559

UNKNOWN_API_ERROR_MESSAGE = "Unknown error while accessing I/O"


class Platform(enum.Enum):
    """Controller families, each with its own I/O address ranges."""

    DX100 = "DX100"
    FS100 = "FS100"
    DX200 = "DX200"
    YRC1000 = "YRC1000"
    YRC1000U = "YRC1000u"


class IoAccessSize(enum.Enum):
    """Width of a single I/O access."""

    BIT = "bit"
    GROUP = "group"
    REGISTER = "register"


class IoResultCode(enum.Enum):
    """Result of an I/O request, with a readable message."""

    OK = ("ok", "Success")
    READ_ADDRESS_INVALID = ("read_address_invalid", "The requested address is not valid for reading")
    WRITE_ADDRESS_INVALID = ("write_address_invalid", "The requested address is not valid for writing")
    WRITE_VALUE_INVALID = ("write_value_invalid", "The value is out of range for this type of I/O")
    READ_API_ERROR = ("read_api_error", "The controller reported an error while reading I/O")
    WRITE_API_ERROR = ("write_api_error", "The controller reported an error while writing I/O")

    @property
    def message(self) -> str:
        return self.value[1]


Range = tuple[int, int]


@dataclass(frozen=True)
class IoLimits:
    """Inclusive address ranges of each I/O area on one controller family."""

    general_in: Range
    general_out: Range
    external_in: Range
    network_in: Range
    network_out: Range
    external_out: Range
    specific_in: Range
    specific_out: Range
    if_panel: Range
    aux_relay: Range
    control_status: Range
    pseudo_input: Range
    register_read: Range = (REGISTER_MIN, _REGISTER_MAX_READ)
    register_write: Range = (REGISTER_MIN, _REGISTER_MAX_WRITE)

    @classmethod
    def for_platform(cls, platform: Platform) -> "IoLimits":
        """Return the address ranges of ``platform``."""
        try:
            return _PLATFORM_LIMITS[platform]
        except KeyError:
            raise ValueError(f"unsupported platform: {platform!r}") from None

    @property
    def read_ranges(self) -> tuple[Range, ...]:
        """Ranges of addresses that may be read."""
        return (
            self.general_in,
            self.general_out,
            self.external_in,
            self.network_in,
            self.network_out,
            self.external_out,
            self.specific_in,
            self.specific_out,
            self.if_panel,
            self.aux_relay,
            self.control_status,
            self.pseudo_input,
            self.register_read,
        )

    @property
    def write_ranges(self) -> tuple[Range, ...]:
        """Ranges of addresses that may be written."""
        return (self.general_out, self.network_in, self.if_panel, self.register_write)


_PLATFORM_LIMITS: dict[Platform, IoLimits] = {
    Platform.DX100: IoLimits(
        general_in=(10, 2567),
        general_out=(10010, 12567),
        external_in=(20010, 22567),
        network_in=(25010, 27567),
        network_out=(35010, 37567),
        external_out=(30010, 32567),
        specific_in=(40010, 41607),
        specific_out=(50010, 52007),
        if_panel=(60010, 60647),
        aux_relay=(70010, 79997),
        control_status=(80010, 80647),
        pseudo_input=(82010, 82207),
    ),
    Platform.FS100: IoLimits(
        general_in=(10, 1287),
        general_out=(10010, 11287),
        external_in=(20010, 21287),
        network_in=(25010, 26287),
        network_out=(35010, 36287),
        external_out=(30010, 31287),
        specific_in=(40010, 41607),
        specific_out=(50010, 52007),
        if_panel=(60010, 60647),
        aux_relay=(70010, 79997),
        control_status=(80010, 80647),
        pseudo_input=(82010, 82207),
    ),
    Platform.DX200: IoLimits(
        general_in=(10, 5127),
        general_out=(10010, 15127),
        external_in=(20010, 25127),
        network_in=(27010, 29567),
        network_out=(37010, 39567),
        external_out=(30010, 35127),
        specific_in=(40010, 41607),
        specific_out=(50010, 53007),
        if_panel=(60010, 60647),
        aux_relay=(70010, 79997),
        control_status=(80010, 82007),
        pseudo_input=(82010, 82207),
    ),
    Platform.YRC1000: IoLimits(
        general_in=(10, 5127),
        general_out=(10010, 15127),
        external_in=(20010, 25127),
        network_in=(27010, 29567),
        network_out=(37010, 39567),
        external_out=(30010, 35127),
        specific_in=(40010, 42567),
        specific_out=(50010, 55127),
        if_panel=(60010, 60647),
        aux_relay=(70010, 79997),
        control_status=(80010, 85127),
        pseudo_input=(87010, 87207),
    ),
    Platform.YRC1000U: IoLimits(
        general_in=(10, 5127),
        general_out=(10010, 15127),
        external_in=(20010, 21287),
        network_in=(27010, 29567),
        network_out=(37010, 39567),
        external_out=(30010, 31287),
        specific_in=(40010, 42567),
        specific_out=(50010, 55127),
        if_panel=(60010, 60647),
        aux_relay=(70010, 79997),
        control_status=(80010, 85127),
        pseudo_input=(87010, 87207),
    ),
}


def _bit_address(address: int, size: IoAccessSize) -> int | None:
    """Normalise ``address`` to a 32-bit bit address, or None if its bit digit is invalid."""
    address &= _UINT32_MASK
    if size is IoAccessSize.GROUP:
        address = (address * 10) & _UINT32_MASK
    # last digit cannot be 8 or 9, unless it is an M register
    if size is not IoAccessSize.REGISTER and address % 10 > 7:
        return None
    return address


def _in_any(address: int, ranges: tuple[Range, ...]) -> bool:
    return any(low <= address <= high for low, high in ranges)


def is_valid_read_address(address: int, size: IoAccessSize, limits: IoLimits) -> bool:
    """Whether ``address`` may be read with an access of ``size``."""
    normalised = _bit_address(address, size)
    return normalised is not None and _in_any(normalised, limits.read_ranges)


def is_valid_write_address(address: int, size: IoAccessSize, limits: IoLimits) -> bool:
    """Whether ``address`` may be written with an access of ``size``."""
    normalised = _bit_address(address, size)
    return normalised is not None and _in_any(normalised, limits.write_ranges)


_MAX_VALUE = {
    IoAccessSize.BIT: 1,
    IoAccessSize.GROUP: 0xFF,
    IoAccessSize.REGISTER: 0xFFFF,
}


def is_valid_write_value(value: int, size: IoAccessSize) -> bool:
    """Whether ``value`` fits an access of ``size``."""
    return (value & _UINT32_MASK) <= _MAX_VALUE[size]


def result_message(code: object) -> str:
    """Readable message for a result code; unknown codes get a generic message."""
    if isinstance(code, IoResultCode):
        return code.message
    return UNKNOWN_API_ERROR_MESSAGE