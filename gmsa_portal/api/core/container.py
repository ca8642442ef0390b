# --------------------------------
# DI container
# --------------------------------
from functools import lru_cache

from gmsa_portal.config import Settings, get_settings
from gmsa_portal.domain.request_store import FilesystemRequestStore, RequestStore
from gmsa_portal.domain.requests.service import RequestService
from gmsa_portal.observability.tracing import EventLogger


class Container:
    def __init__(
        self,
        settings: Settings | None = None,
        store: RequestStore | None = None,
    ):
        self._settings = settings or get_settings()
        self._store = store or FilesystemRequestStore(
            path=self._settings.requests_path
        )
        self._request_service = RequestService(
            store=self._store,
            script_extension=self._settings.script_extension,
            events=EventLogger(enabled=self._settings.log_events),
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def request_service(self) -> RequestService:
        return self._request_service


@lru_cache
def get_container():
    return Container()
