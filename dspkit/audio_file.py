"""Reading and writing WAV files as 32-bit float samples.

Samples are counted individually, not per frame: a stereo file of 100
frames has a length of 200 samples, and reads return interleaved channels.
The reader accepts integer PCM (8, 16, 24 and 32 bits) and IEEE float (32
and 64 bits) data and converts every sample to a float.  The writer always
produces 32-bit IEEE float data.
"""

from __future__ import annotations

import os
import struct
from typing import BinaryIO, Iterable

__all__ = ["WavError", "WavReader", "WavWriter"]

_FORMAT_PCM = 1
_FORMAT_IEEE_FLOAT = 3
_FORMAT_EXTENSIBLE = 0xFFFE

_SUPPORTED = {
    (_FORMAT_PCM, 8),
    (_FORMAT_PCM, 16),
    (_FORMAT_PCM, 24),
    (_FORMAT_PCM, 32),
    (_FORMAT_IEEE_FLOAT, 32),
    (_FORMAT_IEEE_FLOAT, 64),
}


class WavError(Exception):
    """Raised when a WAV file cannot be opened, parsed or used."""


def _decode(raw: bytes, tag: int, bits: int) -> list[float]:
    width = bits // 8
    n = len(raw) // width
    if tag == _FORMAT_IEEE_FLOAT:
        code = "f" if bits == 32 else "d"
        return list(struct.unpack(f"<{n}{code}", raw[: n * width]))
    if bits == 8:
        return [b / 127.5 - 1.0 for b in raw[:n]]
    if bits == 16:
        return [s / 32768.0 for s in struct.unpack(f"<{n}h", raw[: n * 2])]
    if bits == 32:
        return [s / 2147483648.0 for s in struct.unpack(f"<{n}i", raw[: n * 4])]
    return [
        int.from_bytes(raw[k : k + 3], "little", signed=True) / 8388608.0
        for k in range(0, n * 3, 3)
    ]


class WavReader:
    """Reads samples from a WAV file."""

    def __init__(self, filename: str | os.PathLike) -> None:
        try:
            self._file: BinaryIO | None = open(filename, "rb")
        except OSError as exc:
            raise WavError(f"cannot open {filename!r}: {exc}") from exc
        try:
            self._parse()
        except BaseException:
            self._file.close()
            self._file = None
            raise

    def _parse(self) -> None:
        f = self._file
        header = f.read(12)
        if len(header) < 12 or header[:4] != b"RIFF" or header[8:12] != b"WAVE":
            raise WavError("not a RIFF/WAVE file")
        file_end = os.fstat(f.fileno()).st_size
        have_fmt = False
        while True:
            chunk = f.read(8)
            if len(chunk) < 8:
                raise WavError("no data chunk found")
            cid = chunk[:4]
            size = int.from_bytes(chunk[4:], "little")
            if cid == b"fmt ":
                body = f.read(size)
                if len(body) < 16:
                    raise WavError("truncated fmt chunk")
                self._parse_fmt(body)
                have_fmt = True
                if size & 1:
                    f.seek(1, os.SEEK_CUR)
            elif cid == b"data":
                if not have_fmt:
                    raise WavError("data chunk before fmt chunk")
                self._data_start = f.tell()
                self._data_size = max(0, min(size, file_end - self._data_start))
                self._consumed = 0
                return
            else:
                f.seek(size + (size & 1), os.SEEK_CUR)

    def _parse_fmt(self, body: bytes) -> None:
        tag, channels, rate, _, _, bits = struct.unpack_from("<HHIIHH", body)
        if tag == _FORMAT_EXTENSIBLE:
            if len(body) < 26:
                raise WavError("truncated extensible fmt chunk")
            (tag,) = struct.unpack_from("<H", body, 24)
        if (tag, bits) not in _SUPPORTED:
            raise WavError(f"unsupported sample format {tag} with {bits} bits")
        if channels == 0:
            raise WavError("file declares no channels")
        self._tag = tag
        self._bits = bits
        self._width = bits // 8
        self._channels = channels
        self._rate = rate

    def _require_open(self) -> BinaryIO:
        if self._file is None:
            raise WavError("reader is closed")
        return self._file

    @property
    def sps(self) -> float:
        """Sample rate in samples per second."""
        return float(self._rate)

    @property
    def num_channels(self) -> int:
        return self._channels

    @property
    def length(self) -> int:
        """Total number of samples over all channels."""
        return self._data_size // self._width

    @property
    def position(self) -> int:
        """Index of the next sample to be read."""
        return self._consumed // self._width

    def read(self, count: int | None = None) -> list[float]:
        """Read up to ``count`` samples (all remaining ones if ``None``)."""
        f = self._require_open()
        remaining = self.length - self.position
        if count is None:
            n = remaining
        elif count < 0:
            raise ValueError(f"negative sample count {count}")
        else:
            n = min(count, remaining)
        raw = f.read(n * self._width)
        self._consumed += len(raw) - len(raw) % self._width
        return _decode(raw, self._tag, self._bits)

    def seek(self, target: int) -> None:
        """Move to sample ``target``; targets past the end go to the last sample."""
        f = self._require_open()
        if target < 0:
            raise ValueError(f"negative sample index {target}")
        total = self.length
        target = 0 if total == 0 else min(target, total - 1)
        f.seek(self._data_start + target * self._width)
        self._consumed = target * self._width

    def restart(self) -> None:
        """Move back to the first sample."""
        self.seek(0)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> WavReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class WavWriter:
    """Writes interleaved samples to a 32-bit float WAV file."""

    _HEADER_SIZE = 44

    def __init__(self, filename: str | os.PathLike, num_channels: int, sps: float) -> None:
        if num_channels < 1:
            raise ValueError(f"need at least one channel, got {num_channels}")
        self._channels = int(num_channels)
        self._rate = int(sps)
        self._data_size = 0
        try:
            self._file: BinaryIO | None = open(filename, "wb")
        except OSError as exc:
            raise WavError(f"cannot open {filename!r}: {exc}") from exc
        self._file.write(self._header())

    def _header(self) -> bytes:
        block_align = 4 * self._channels
        return b"".join(
            (
                b"RIFF",
                struct.pack("<I", 36 + self._data_size),
                b"WAVE",
                b"fmt ",
                struct.pack(
                    "<IHHIIHH",
                    16,
                    _FORMAT_IEEE_FLOAT,
                    self._channels,
                    self._rate,
                    self._rate * block_align,
                    block_align,
                    32,
                ),
                b"data",
                struct.pack("<I", self._data_size),
            )
        )

    @property
    def sps(self) -> float:
        return float(self._rate)

    @property
    def num_channels(self) -> int:
        return self._channels

    def write(self, data: Iterable[float]) -> int:
        """Append samples and return how many were written."""
        if self._file is None:
            raise WavError("writer is closed")
        values = list(data)
        self._file.write(struct.pack(f"<{len(values)}f", *values))
        self._data_size += 4 * len(values)
        return len(values)

    def close(self) -> None:
        """Finish the header and close the file."""
        if self._file is None:
            return
        try:
            self._file.seek(0)
            self._file.write(self._header())
        finally:
            self._file.close()
            self._file = None

    def __enter__(self) -> WavWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()