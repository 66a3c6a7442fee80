import functools
import string

MAC_BUFLEN = 6
MAC_PREFIX_BUFLEN = 3
# 17 visible characters plus the terminator the C-side buffers carry
MAC_STRING_BUFLEN = 18

_HEX_DIGITS = frozenset(string.hexdigits)


class MacAddrParseError(ValueError):
    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid MAC address {text!r}: {reason}")
        self.text = text
        self.reason = reason


def _cmp_octets(a: bytes, b: bytes) -> int:
    return (a > b) - (a < b)


@functools.total_ordering
class MacAddr:
    """An IEEE-802 hardware address: exactly six octets in transmission order."""

    __slots__ = ('__mac',)

    def __init__(self, mac: bytes) -> None:
        if len(mac) != MAC_BUFLEN:
            raise ValueError(f"MAC address must be {MAC_BUFLEN} bytes, got {len(mac)}")
        if not all(0 <= b <= 0xFF for b in mac):
            raise ValueError("MAC address octets must be in range 0..255")
        self.__mac = bytes(mac)

    @classmethod
    def parse(cls, text: str) -> 'MacAddr':
        """Parse six ':'-separated groups of one or two hex digits, e.g. "0:1E:FC:E:3a:CB".

        Raises:
            MacAddrParseError: if the text does not match that grammar exactly.
        """
        octets = bytearray()
        pos = 0
        for i in range(MAC_BUFLEN):
            # Every group starts with a hex digit: no whitespace or sign
            if pos >= len(text) or text[pos] not in _HEX_DIGITS:
                raise MacAddrParseError(text, f"expected hex digit at position {pos}")
            end = pos
            while end < len(text) and text[end] in _HEX_DIGITS:
                end += 1
            if end - pos > 2:
                raise MacAddrParseError(text, f"group {i + 1} has more than 2 digits")
            octets.append(int(text[pos:end], 16))

            if i == MAC_BUFLEN - 1:
                if end != len(text):
                    raise MacAddrParseError(text, f"trailing characters at position {end}")
                break
            if end >= len(text) or text[end] != ':':
                raise MacAddrParseError(text, f"expected ':' at position {end}")
            pos = end + 1
        return cls(octets)

    @classmethod
    def from_mac(cls, other: 'MacAddr') -> 'MacAddr':
        return cls(other.bytes)

    @property
    def is_multicast(self) -> bool:
        # The low order bit of the first octet is the multicast bit
        return bool(self.__mac[0] & 1)

    @property
    def is_unicast(self) -> bool:
        return not self.__mac[0] & 1

    def format(self) -> str:
        return ':'.join(f'{b:02X}' for b in self.__mac)

    def cmp(self, other: 'MacAddr') -> int:
        """Three-way compare by unsigned octets, returning -1, 0 or 1."""
        return _cmp_octets(self.__mac, other.bytes)

    def cmp_raw(self, raw: bytes) -> int:
        if len(raw) != MAC_BUFLEN:
            raise ValueError(f"Raw MAC address must be {MAC_BUFLEN} bytes, got {len(raw)}")
        return _cmp_octets(self.__mac, bytes(raw))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MacAddr):
            return NotImplemented
        return self.__mac == other.bytes

    def __lt__(self, other: 'MacAddr') -> bool:
        if not isinstance(other, MacAddr):
            return NotImplemented
        return self.__mac < other.bytes

    def __hash__(self) -> int:
        return hash(self.__mac)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"MacAddr.parse('{self}')"

    # Keep last, shadows builtin bytes in the class body
    @property
    def bytes(self) -> bytes:
        return self.__mac
