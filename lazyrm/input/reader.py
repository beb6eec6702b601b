"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing for arrow keys and multi-byte characters.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25

_CONTROL_TOKENS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x12": "CTRL_R",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b" ": "SPACE",
}

_CSI_FINAL_TOKENS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
}


class KeyReader:
    """Decode key tokens from a file descriptor, buffering lookahead bytes."""

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._pending: list[bytes] = []

    def _read_ready_byte(self, timeout_ms: int) -> bytes | None:
        if self._pending:
            return self._pending.pop(0)
        ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return None
        ch = os.read(self.fd, 1)
        if not ch:
            return None
        return ch

    def read_key(self, timeout_ms: int | None = None) -> str:
        """Return the next key token, or ``""`` on timeout/EOF."""
        if self._pending:
            ch = self._pending.pop(0)
        else:
            if timeout_ms is not None:
                ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout_ms / 1000.0))
                if not ready:
                    return ""
            ch = os.read(self.fd, 1)
            if not ch:
                return ""

        token = _CONTROL_TOKENS.get(ch)
        if token is not None:
            return token
        if ch != b"\x1b":
            return self._decode_utf8(ch)

        seq = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
        if seq is None:
            return "ESC"
        if seq not in {b"[", b"O"}:
            self._pending.append(seq)
            return "ESC"
        final = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        token = _CSI_FINAL_TOKENS.get(final)
        if token is not None:
            return token
        return "ESC"

    def _decode_utf8(self, first: bytes) -> str:
        """Collect continuation bytes of a multi-byte UTF-8 character."""
        lead = first[0]
        if lead < 0x80:
            return first.decode("ascii", errors="replace")
        if lead >= 0xF0:
            needed = 3
        elif lead >= 0xE0:
            needed = 2
        elif lead >= 0xC0:
            needed = 1
        else:
            needed = 0
        data = first
        for _ in range(needed):
            part = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                break
            data += part
        return data.decode("utf-8", errors="replace")


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "KeyReader"]
