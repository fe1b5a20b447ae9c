"""
Canonical dump format: fixed 16 bytes per line, split in two halves of 8.

    00000000  47 6f 20 69 73 20 61 6e  20 6f 70 65 6e 20 73 6f  |Go is an open so|
"""

CANONICAL_WIDTH = 16


def _to_char(b: int) -> str:
    return chr(b) if 0x20 <= b <= 0x7e else '.'


def canonical_dump(data: bytes) -> str:
    """Return the canonical dump of data; empty input gives an empty string."""
    lines = []
    for offset in range(0, len(data), CANONICAL_WIDTH):
        chunk = data[offset:offset + CANONICAL_WIDTH]
        cells = []
        for i in range(CANONICAL_WIDTH):
            cells.append(f"{chunk[i]:02x} " if i < len(chunk) else "   ")
            if i == 7:
                cells.append(" ")
        chars = ''.join(_to_char(b) for b in chunk)
        lines.append(f"{offset:08x}  {''.join(cells)} |{chars}|\n")
    return ''.join(lines)
