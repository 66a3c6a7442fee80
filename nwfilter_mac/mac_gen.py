import random

from typing_extensions import Callable

from mac_addr import MAC_BUFLEN, MAC_PREFIX_BUFLEN, MacAddr, MacAddrParseError

# QEMU/KVM vendor prefix
DEFAULT_PREFIX = b'\x52\x54\x00'

RandomBits = Callable[[int], int]


def parse_prefix(text: str) -> bytes:
    """Parse a vendor prefix such as "52:54:00" using the MAC address group grammar."""
    # Pad to a full address so the prefix goes through the same strict scan
    try:
        mac = MacAddr.parse(text + ':0' * (MAC_BUFLEN - MAC_PREFIX_BUFLEN))
    except MacAddrParseError:
        raise MacAddrParseError(text, f"expected {MAC_PREFIX_BUFLEN} ':'-separated hex groups") from None
    return mac.bytes[:MAC_PREFIX_BUFLEN]


def generate(prefix: bytes = DEFAULT_PREFIX, random_bits: RandomBits = random.getrandbits) -> MacAddr:
    """Build an address from a 3-byte vendor prefix and 3 random octets.

    The prefix is copied verbatim, multicast and locally administered bits
    included. Nothing guarantees the result is unique.
    """
    if len(prefix) != MAC_PREFIX_BUFLEN:
        raise ValueError(f"MAC prefix must be {MAC_PREFIX_BUFLEN} bytes, got {len(prefix)}")
    tail = bytes(random_bits(8) & 0xFF for _ in range(MAC_BUFLEN - MAC_PREFIX_BUFLEN))
    return MacAddr(bytes(prefix) + tail)
