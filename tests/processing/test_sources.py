"""Test raw-sample sources and line parsing."""

import io

import pytest

from thermvisc.errors import ErrorKind, TransportFailure
from thermvisc.processing.sources import (
    FileSource,
    PortSource,
    StdinSource,
    TextLineSource,
    parse_line,
    source_from_config,
)

pytestmark = pytest.mark.unit


def test_parse_line_numbers():
    assert list(parse_line("1 2.5 -3e2\n")) == [1.0, 2.5, -300.0]


def test_parse_stops_at_first_non_numeric():
    assert list(parse_line("1 2 x 4 5")) == [1.0, 2.0]


def test_parse_empty_line():
    assert list(parse_line("\n")) == []


def test_parse_keeps_leading_number_of_mixed_token():
    assert list(parse_line("1 2 3 4abc 5")) == [1.0, 2.0, 3.0, 4.0]


def test_parse_comma_separated_reads_first_value_only():
    assert list(parse_line("1,2,3,4")) == [1.0]


def test_parse_rejects_underscore_nan_and_inf():
    assert list(parse_line("1_0 2")) == [1.0]
    assert list(parse_line("nan 1 2")) == []
    assert list(parse_line("3 inf 4")) == [3.0]


def test_parse_bare_decimal_points():
    assert list(parse_line(".5 5. +2E1")) == [0.5, 5.0, 20.0]


def test_text_source_reads_only_first_line(line_source):
    source = line_source("1 2 3\n4 5 6\n")
    assert list(source.iter_raw()) == [1.0, 2.0, 3.0]


def test_file_source(tmp_path):
    path = tmp_path / "batch.txt"
    path.write_text("9 8 7 6\nignored\n")

    assert list(FileSource(path).iter_raw()) == [9.0, 8.0, 7.0, 6.0]


def test_missing_file_is_transport_failure(tmp_path):
    source = FileSource(tmp_path / "nope.txt")

    with pytest.raises(TransportFailure) as exc_info:
        list(source.iter_raw())

    assert exc_info.value.kind == ErrorKind.TRANSPORT_FAILURE


def test_port_source_decodes_and_closes(fake_port):
    port = fake_port(b"1 2 3 4\r\n")
    source = PortSource(lambda: port)

    assert list(source.iter_raw()) == [1.0, 2.0, 3.0, 4.0]
    assert port.closed


def test_port_open_failure(fake_port):
    def opener():
        raise OSError("No such device: /dev/ttyUSB0")

    with pytest.raises(TransportFailure, match="Failed to open"):
        list(PortSource(opener).iter_raw())


def test_port_read_failure_still_closes(fake_port):
    port = fake_port(fail_on_read=True)

    with pytest.raises(TransportFailure, match="Failed to read"):
        list(PortSource(lambda: port).iter_raw())
    assert port.closed


def test_port_undecodable_bytes(fake_port):
    with pytest.raises(TransportFailure, match="Undecodable"):
        list(PortSource(lambda: fake_port(b"\xff\xfe 1 2")).iter_raw())


def test_text_stream_read_error():
    class Broken(io.StringIO):
        def readline(self, *args):
            raise OSError("stream closed")

    with pytest.raises(TransportFailure):
        list(TextLineSource(Broken()).iter_raw())


def test_source_from_config(make_config, tmp_path):
    assert isinstance(source_from_config(make_config()), StdinSource)

    source = source_from_config(make_config(source_path=str(tmp_path / "x.txt")))
    assert isinstance(source, FileSource)
    assert source.path == tmp_path / "x.txt"


def test_stdin_source(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 3 2 1\n"))
    assert list(StdinSource().iter_raw()) == [4.0, 3.0, 2.0, 1.0]
