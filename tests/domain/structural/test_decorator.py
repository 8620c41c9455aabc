import pytest

from patterncatalog.domain.structural.decorator import (
    CompressionDecorator,
    ConsoleDataSource,
    DataSource,
    DataSourceDecorator,
    EncryptionDecorator,
)


class TaggingDecorator(DataSourceDecorator):
    """Records the order in which it sees data on the way in and out."""

    def __init__(self, wrappee, tag, log):
        super().__init__(wrappee)
        self.tag = tag
        self.log = log

    def write_data(self, data):
        self.log.append(f"write:{self.tag}")
        super().write_data(data)

    def read_data(self):
        data = super().read_data()
        self.log.append(f"read:{self.tag}")
        return data


def test_encryption_round_trip():
    base = ConsoleDataSource()
    encrypted = EncryptionDecorator(base)

    encrypted.write_data("secret")

    assert base.read_data() == "c2VjcmV0"
    assert encrypted.read_data() == "secret"


def test_stacked_decorators_round_trip():
    base = ConsoleDataSource()
    stacked = CompressionDecorator(EncryptionDecorator(base))

    stacked.write_data("secret")

    assert base.read_data() != "secret"
    assert stacked.read_data() == "secret"


@pytest.mark.parametrize("value", ["", "secret", "héllo wörld ✓", "a" * 1000])
def test_decode_of_encode_is_identity(value):
    assert EncryptionDecorator.decode(EncryptionDecorator.encode(value)) == value


def test_stack_order_outer_first_on_write_and_last_on_read():
    # Arrange
    log = []
    base = ConsoleDataSource()
    inner = TaggingDecorator(base, "D1", log)
    outer = TaggingDecorator(inner, "D2", log)

    # Act
    outer.write_data("x")
    outer.read_data()

    # Assert
    assert log == ["write:D2", "write:D1", "read:D1", "read:D2"]


def test_plain_decorator_forwards_unchanged(transcript):
    base = ConsoleDataSource(transcript)
    wrapped = DataSourceDecorator(base)

    wrapped.write_data("Important info")

    assert wrapped.read_data() == "Important info"
    assert wrapped.wrappee is base
    assert isinstance(wrapped, DataSource)
    assert transcript.lines == ["Writing Important info into console"]


@pytest.mark.parametrize(
    "build",
    [
        lambda source: CompressionDecorator(source),
        lambda source: CompressionDecorator(EncryptionDecorator(source)),
        lambda source: EncryptionDecorator(CompressionDecorator(source)),
    ],
    ids=["compression", "compression_over_encryption", "encryption_over_compression"],
)
def test_reading_unwritten_source_returns_empty(build):
    data_source = build(ConsoleDataSource())

    assert data_source.read_data() == ""


def test_compression_round_trips_empty_string():
    data_source = CompressionDecorator(ConsoleDataSource())

    data_source.write_data("")

    assert data_source.read_data() == ""
