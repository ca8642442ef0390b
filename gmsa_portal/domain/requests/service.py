"""Request lifecycle: submit, look up, change status, download the script.

The service owns its store, lock, clock and id factory; nothing is kept
in module-level state. Every mutation is a locked read-modify-write of
the whole collection.
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from pydantic import ValidationError

from gmsa_portal.core.errors import RequestNotFoundError, RequestValidationError
from gmsa_portal.domain.request_store import RequestStore
from gmsa_portal.domain.scripts import ScriptGenerator
from gmsa_portal.observability.tracing import EventLogger, new_trace_id
from .entities import RequestInput, RequestRecord, RequestStatus, ScriptDownload


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_request_id() -> str:
    return "REQ-" + uuid.uuid4().hex[:8].upper()


def script_filename(record: RequestRecord, extension: str = "ps1") -> str:
    return f"Create-{record.account_type.value.upper()}-{record.account_name}.{extension}"


class RequestService:
    """CRUD over request records with script rendering on creation."""

    def __init__(
        self,
        *,
        store: RequestStore,
        generator: ScriptGenerator | None = None,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_request_id,
        script_extension: str = "ps1",
        events: EventLogger | None = None,
    ) -> None:
        self._store = store
        self._generator = generator or ScriptGenerator()
        self._clock = clock
        self._id_factory = id_factory
        self._script_extension = script_extension
        self._events = events or EventLogger()
        self._lock = threading.Lock()

    def list_all(self) -> list[RequestRecord]:
        """All records in storage (append) order."""
        return self._store.load_all()

    def get_by_id(self, request_id: str) -> RequestRecord:
        for record in self._store.load_all():
            if record.id == request_id:
                return record
        raise RequestNotFoundError(request_id)

    def create(self, fields: RequestInput | Mapping[str, Any]) -> RequestRecord:
        """Validate, render and persist a new request.

        Raises:
            RequestValidationError: If the fields fail structural validation.
            MissingRequiredFieldError: If the script cannot be rendered.
        """
        request_input = self._validate_input(fields)
        trace_id = new_trace_id()

        with self._events.span("request.create", trace_id=trace_id) as span, self._lock:
            records = self._store.load_all()
            now = self._clock()
            record = RequestRecord(
                **request_input.model_dump(include=set(RequestInput.model_fields)),
                id=self._id_factory(),
                status=RequestStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
            try:
                script = self._generator.render(record)
            except Exception as exc:
                self._events.log_event(
                    "request.create_failed",
                    trace_id=trace_id,
                    account_type=record.account_type.value,
                    account_name=record.account_name,
                    error=str(exc),
                )
                raise
            record = record.model_copy(update={"rendered_script": script})

            records.append(record)
            self._store.save_all(records)
            span.attributes["request_id"] = record.id

        self._events.log_event(
            "request.created",
            trace_id=trace_id,
            span=span,
            request_id=record.id,
            account_type=record.account_type.value,
            account_name=record.account_name,
            host_count=len(record.host_servers),
        )
        return record

    def update_status(
        self,
        request_id: str,
        status: RequestStatus | str,
        notes: str | None = None,
    ) -> RequestRecord:
        """Set status (and notes when given); the rendered script is left as is.

        Raises:
            RequestNotFoundError: If no record has ``request_id``.
            RequestValidationError: If ``status`` is not a known status.
        """
        try:
            new_status = RequestStatus(status)
        except ValueError as exc:
            raise RequestValidationError(f"Unknown status: {status}") from exc

        trace_id = new_trace_id()
        with self._events.span("request.update_status", trace_id=trace_id) as span, self._lock:
            records = self._store.load_all()
            index = next((i for i, r in enumerate(records) if r.id == request_id), None)
            if index is None:
                raise RequestNotFoundError(request_id)

            current = records[index]
            update: dict[str, Any] = {
                "status": new_status,
                "updated_at": max(self._clock(), current.created_at),
            }
            if notes:
                update["notes"] = notes
            updated = current.model_copy(update=update)

            records[index] = updated
            self._store.save_all(records)

        self._events.log_event(
            "request.status_updated",
            trace_id=trace_id,
            span=span,
            request_id=request_id,
            previous_status=current.status.value,
            status=new_status.value,
        )
        return updated

    def download_script(self, request_id: str) -> ScriptDownload:
        record = self.get_by_id(request_id)
        return ScriptDownload(
            filename=script_filename(record, self._script_extension),
            content=record.rendered_script,
        )

    @staticmethod
    def _validate_input(fields: RequestInput | Mapping[str, Any]) -> RequestInput:
        if isinstance(fields, RequestInput):
            return fields
        try:
            return RequestInput.model_validate(fields)
        except ValidationError as exc:
            raise RequestValidationError(f"Invalid request fields: {exc}") from exc
