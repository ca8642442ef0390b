from typing import Protocol

from gmsa_portal.domain.requests.entities import RequestRecord


class RequestStore(Protocol):
    def load_all(self) -> list[RequestRecord]:
        """Load the whole collection, in storage order"""
        ...

    def save_all(self, records: list[RequestRecord]) -> None:
        """Replace the whole collection"""
        ...
