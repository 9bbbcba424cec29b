"""Legacy virtio MMIO registers and virtqueue structures."""

import struct
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import ClassVar

NUM = 8  # descriptors per queue; must be a power of two

VRING_DESC_F_NEXT = 1  # chained with another descriptor
VRING_DESC_F_WRITE = 2  # device writes (vs read)

VIRTIO_BLK_T_IN = 0  # read the disk
VIRTIO_BLK_T_OUT = 1  # write the disk

MMIO_MAGIC = 0x74726976
MMIO_VENDOR = 0x554D4551


class MmioRegister(IntEnum):
    """Offsets of the virtio MMIO control registers."""

    MAGIC_VALUE = 0x000
    VERSION = 0x004
    DEVICE_ID = 0x008
    VENDOR_ID = 0x00C
    DEVICE_FEATURES = 0x010
    DRIVER_FEATURES = 0x020
    GUEST_PAGE_SIZE = 0x028
    QUEUE_SEL = 0x030
    QUEUE_NUM_MAX = 0x034
    QUEUE_NUM = 0x038
    QUEUE_ALIGN = 0x03C
    QUEUE_PFN = 0x040
    QUEUE_READY = 0x044
    QUEUE_NOTIFY = 0x050
    INTERRUPT_STATUS = 0x060
    INTERRUPT_ACK = 0x064
    STATUS = 0x070


class DeviceStatus(IntFlag):
    """Bits of the status register."""

    ACKNOWLEDGE = 1
    DRIVER = 2
    DRIVER_OK = 4
    FEATURES_OK = 8


class BlkFeature(IntEnum):
    """Bit numbers of device feature flags."""

    RO = 5
    SCSI = 7
    CONFIG_WCE = 11
    MQ = 12
    ANY_LAYOUT = 27
    RING_INDIRECT_DESC = 28
    RING_EVENT_IDX = 29


def _unpack(layout, data, what):
    try:
        return layout.unpack_from(bytes(data), 0)
    except struct.error as exc:
        raise ValueError(f"truncated {what}") from exc


@dataclass
class VirtqDesc:
    """A single descriptor."""

    STRUCT: ClassVar[struct.Struct] = struct.Struct("<QIHH")

    addr: int = 0
    len: int = 0
    flags: int = 0
    next: int = 0

    def pack(self):
        return self.STRUCT.pack(self.addr, self.len, self.flags, self.next)

    @classmethod
    def parse(cls, data):
        return cls(*_unpack(cls.STRUCT, data, "descriptor"))


@dataclass
class VirtqAvail:
    """The available ring written by the driver."""

    STRUCT: ClassVar[struct.Struct] = struct.Struct(f"<HH{NUM}HH")

    flags: int = 0
    idx: int = 0
    ring: tuple = (0,) * NUM
    unused: int = 0

    def __post_init__(self):
        self.ring = tuple(self.ring)
        if len(self.ring) != NUM:
            raise ValueError(f"avail ring must hold {NUM} entries")

    def pack(self):
        return self.STRUCT.pack(self.flags, self.idx, *self.ring, self.unused)

    @classmethod
    def parse(cls, data):
        flags, idx, *rest = _unpack(cls.STRUCT, data, "avail ring")
        return cls(flags, idx, tuple(rest[:NUM]), rest[NUM])


@dataclass
class VirtqUsedElem:
    """One completed request reported by the device."""

    STRUCT: ClassVar[struct.Struct] = struct.Struct("<II")

    id: int = 0
    len: int = 0

    def pack(self):
        return self.STRUCT.pack(self.id, self.len)

    @classmethod
    def parse(cls, data):
        return cls(*_unpack(cls.STRUCT, data, "used element"))


def _empty_used_ring():
    return tuple(VirtqUsedElem() for _ in range(NUM))


@dataclass
class VirtqUsed:
    """The used ring written by the device."""

    STRUCT: ClassVar[struct.Struct] = struct.Struct("<HH" + "II" * NUM)

    flags: int = 0
    idx: int = 0
    ring: tuple = field(default_factory=_empty_used_ring)

    def __post_init__(self):
        self.ring = tuple(self.ring)
        if len(self.ring) != NUM:
            raise ValueError(f"used ring must hold {NUM} entries")

    def pack(self):
        words = [w for elem in self.ring for w in (elem.id, elem.len)]
        return self.STRUCT.pack(self.flags, self.idx, *words)

    @classmethod
    def parse(cls, data):
        flags, idx, *words = _unpack(cls.STRUCT, data, "used ring")
        pairs = zip(words[0::2], words[1::2])
        return cls(flags, idx, tuple(VirtqUsedElem(i, n) for i, n in pairs))


@dataclass
class VirtioBlkReq:
    """The first descriptor of a disk request."""

    STRUCT: ClassVar[struct.Struct] = struct.Struct("<IIQ")

    type: int = VIRTIO_BLK_T_IN
    reserved: int = 0
    sector: int = 0

    def pack(self):
        return self.STRUCT.pack(self.type, self.reserved, self.sector)

    @classmethod
    def parse(cls, data):
        return cls(*_unpack(cls.STRUCT, data, "block request"))