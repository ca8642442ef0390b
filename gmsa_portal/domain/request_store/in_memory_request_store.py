from gmsa_portal.domain.requests.entities import RequestRecord


class InMemoryRequestStore:
    def __init__(self, records: list[RequestRecord] | None = None):
        self._records = list(records or [])
        self.saves = 0

    def load_all(self) -> list[RequestRecord]:
        return list(self._records)

    def save_all(self, records: list[RequestRecord]) -> None:
        self._records = list(records)
        self.saves += 1
