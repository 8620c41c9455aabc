"""Decorator - wrap a data source to transform what flows through it."""
from __future__ import annotations

import base64
import logging
import zlib
from abc import ABC, abstractmethod
from typing import Optional

from patterncatalog.domain.base.ports import NullOutput, OutputPort

logger = logging.getLogger(__name__)


class DataSource(ABC):
    @abstractmethod
    def write_data(self, data: str) -> None:
        pass

    @abstractmethod
    def read_data(self) -> str:
        pass


class ConsoleDataSource(DataSource):
    """The base source: keeps the last value written."""

    def __init__(self, output: Optional[OutputPort] = None):
        self._data = ""
        self.output = output if output is not None else NullOutput()

    def write_data(self, data: str) -> None:
        self._data = data
        self.output.write(f"Writing {data} into console")

    def read_data(self) -> str:
        return self._data


class DataSourceDecorator(DataSource):
    """
    Holds the wrapped source and forwards to it unchanged.

    Subclasses override only the direction they transform. When decorators are
    nested, the outermost transforms first on write and last on read.
    """

    def __init__(self, wrappee: DataSource):
        self._wrappee = wrappee

    @property
    def wrappee(self) -> DataSource:
        return self._wrappee

    def write_data(self, data: str) -> None:
        self._wrappee.write_data(data)

    def read_data(self) -> str:
        return self._wrappee.read_data()


class EncryptionDecorator(DataSourceDecorator):
    """Base64-encodes on write and decodes on read."""

    def write_data(self, data: str) -> None:
        self._wrappee.write_data(self.encode(data))

    def read_data(self) -> str:
        return self.decode(self._wrappee.read_data())

    @staticmethod
    def encode(data: str) -> str:
        return base64.b64encode(data.encode("utf-8")).decode("ascii")

    @staticmethod
    def decode(data: str) -> str:
        return base64.b64decode(data.encode("ascii")).decode("utf-8")


class CompressionDecorator(DataSourceDecorator):
    """Deflates on write and inflates on read; the wire form is Base64 text."""

    def __init__(self, wrappee: DataSource, level: int = 6):
        super().__init__(wrappee)
        self.level = level

    def write_data(self, data: str) -> None:
        compressed = zlib.compress(data.encode("utf-8"), self.level)
        logger.debug(f"Compressed {len(data)} chars to {len(compressed)} bytes")
        self._wrappee.write_data(base64.b64encode(compressed).decode("ascii"))

    def read_data(self) -> str:
        encoded = self._wrappee.read_data()
        if not encoded:
            return ""
        compressed = base64.b64decode(encoded.encode("ascii"))
        return zlib.decompress(compressed).decode("utf-8")
