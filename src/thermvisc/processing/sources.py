"""Raw-sample sources.

A source yields the raw (unconditioned) readings of exactly one batch, or
raises ``TransportFailure``. Transport errors are fatal for the run and are
never retried.

A batch is one newline-terminated line of whitespace-separated numbers.
Parsing stops at the first token that is not a plain decimal number (a leading
numeric prefix such as the 4 in ``4abc`` is kept); everything after it
on the line is ignored (logged at WARNING).

Sources:
- TextLineSource: any text file-like object
- FileSource: a path on disk
- StdinSource: standard input
- PortSource: a byte-oriented port with ``readline()``, e.g. an already
  configured serial port, opened by a caller-supplied factory
"""

import logging
import re
import sys
from pathlib import Path
from typing import Callable, Iterator, TextIO, TYPE_CHECKING

from thermvisc.errors import TransportFailure

if TYPE_CHECKING:
    from thermvisc.schemas.internal import InternalConfig

__all__ = [
    'SampleSource',
    'TextLineSource',
    'FileSource',
    'StdinSource',
    'PortSource',
    'parse_line',
    'source_from_config',
]

logger = logging.getLogger(__name__)


_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_line(line: str) -> Iterator[float]:
    """Yield numbers from ``line`` until the first token that is not one.

    A token that only starts with a number (``4abc``, ``1,2``) contributes
    that leading number and ends the batch. ``nan``, ``inf`` and
    underscore-grouped digits are not numbers here.
    """
    for token in line.split():
        match = _NUMBER.match(token)
        if match is None:
            logger.warning("Stopped parsing at non-numeric token %r", token)
            return
        yield float(match.group(0))
        if match.end() != len(token):
            logger.warning("Stopped parsing inside token %r", token)
            return


class SampleSource:
    """Base class for raw-sample sources."""

    description = "source"

    def read_line(self) -> str:
        """Return the batch line. Subclasses raise TransportFailure on I/O errors."""
        raise NotImplementedError

    def iter_raw(self) -> Iterator[float]:
        """Yield the raw readings of one batch, in arrival order."""
        line = self.read_line()
        logger.debug("Read %d character(s) from %s", len(line), self.description)
        yield from parse_line(line)


class TextLineSource(SampleSource):
    """Read one line from an open text stream."""

    def __init__(self, stream: TextIO, description: str = "text stream"):
        self.stream = stream
        self.description = description

    def read_line(self) -> str:
        try:
            return self.stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise TransportFailure(f"Failed to read {self.description}: {e}") from e


class FileSource(SampleSource):
    """Read the first line of a text file."""

    def __init__(self, path, encoding: str = "ascii"):
        self.path = Path(path)
        self.encoding = encoding
        self.description = str(self.path)

    def read_line(self) -> str:
        try:
            with open(self.path, "r", encoding=self.encoding) as fh:
                return fh.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise TransportFailure(f"Failed to open {self.path}: {e}") from e


class StdinSource(TextLineSource):
    """Read one line from standard input."""

    def __init__(self):
        super().__init__(sys.stdin, description="stdin")


class PortSource(SampleSource):
    """Read one line from a byte-oriented port.

    Parameters
    ----------
    opener : callable
        Zero-argument factory returning an open port object with
        ``readline() -> bytes``. If the port has ``close()``, it is closed
        after the read. Any ``OSError`` while opening or reading becomes a
        ``TransportFailure``.
    encoding : str
        Used to decode the received bytes.

    Examples
    --------
    >>> source = PortSource(lambda: serial.Serial("/dev/ttyUSB0", 9600))
    """

    def __init__(self, opener: Callable[[], object], encoding: str = "ascii",
                 description: str = "port"):
        self.opener = opener
        self.encoding = encoding
        self.description = description

    def read_line(self) -> str:
        try:
            port = self.opener()
        except OSError as e:
            raise TransportFailure(f"Failed to open {self.description}: {e}") from e

        try:
            raw = port.readline()
        except OSError as e:
            raise TransportFailure(f"Failed to read {self.description}: {e}") from e
        finally:
            close = getattr(port, "close", None)
            if close is not None:
                close()

        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise TransportFailure(f"Undecodable data from {self.description}: {e}") from e


def source_from_config(config: "InternalConfig") -> SampleSource:
    """Build the source named by ``config.source`` (stdin when no path)."""
    if config.source.path is None:
        return StdinSource()
    return FileSource(config.source.path, encoding=config.source.encoding)
