from netledger.core.formatting import format_bytes, format_rate


def test_format_bytes():
    assert format_bytes(0) == "0 Bytes"
    assert format_bytes(1) == "1 Byte"
    assert format_bytes(1234) == "1.2 kB"
    assert format_bytes(82854982) == "82.9 MB"


def test_format_rate():
    assert format_rate(250.0) == "250 Bytes/s"
    assert format_rate(1_500_000.0) == "1.5 MB/s"
