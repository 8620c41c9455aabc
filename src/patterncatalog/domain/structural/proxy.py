"""Proxy - same interface as the real store, plus a decoding convenience."""
from __future__ import annotations

import base64
from abc import ABC, abstractmethod


class ThirdPartyFileStore(ABC):
    @abstractmethod
    def get_file(self) -> str:
        pass


class ThirdPartyFileStoreImpl(ThirdPartyFileStore):
    """Returns the file name Base64-encoded, as the third party does."""

    def __init__(self, file_name: str = "confidential.txt"):
        self._file_name = file_name

    def get_file(self) -> str:
        return base64.b64encode(self._file_name.encode("utf-8")).decode("ascii")


class ProxyFileStore(ThirdPartyFileStore):
    def __init__(self, third_party_file_store: ThirdPartyFileStore):
        self._store = third_party_file_store

    def get_file(self) -> str:
        return self._store.get_file()

    def get_file_and_decode(self) -> str:
        return base64.b64decode(self.get_file().encode("ascii")).decode("utf-8")
