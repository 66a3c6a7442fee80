import string

_HEX_DIGITS = frozenset(string.hexdigits)


def _fold(text: str, pos: int) -> int:
    """Return the ASCII-lowercased code of text[pos], or 0 past the end of text."""
    if pos >= len(text):
        return 0
    c = text[pos]
    if 'A' <= c <= 'Z':
        c = c.lower()
    return ord(c)


def _skip_leading_zeros(text: str, pos: int) -> int:
    # Never drops the last digit of a group, so "0" stays "0"
    while pos + 1 < len(text) and text[pos] == '0' and text[pos + 1] in _HEX_DIGITS:
        pos += 1
    return pos


def mac_addr_compare(p: str, q: str) -> int:
    """Compare two MAC address strings, ignoring case and redundant leading zeros.

    "0:1E:FC:E:3a:CB" and "00:1e:fc:0E:3A:CB" compare equal. Neither string is
    validated; use MacAddr.parse when an actual address is needed.

    Args:
        p (str): First address text.
        q (str): Second address text.

    Returns:
        int: -1, 0 or 1 as p sorts before, equal to or after q. A string that
        ends first sorts lower.
    """
    i = j = 0
    while True:
        i = _skip_leading_zeros(p, i)
        j = _skip_leading_zeros(q, j)
        c = _fold(p, i)
        d = _fold(q, j)
        if c == 0 or d == 0 or c != d:
            break
        i += 1
        j += 1
    return (c > d) - (c < d)
