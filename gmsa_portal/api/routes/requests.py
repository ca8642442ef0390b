import re
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Depends
from fastapi.responses import PlainTextResponse

from gmsa_portal.api.core.container import get_container
from gmsa_portal.api.schemas import StatusUpdate
from gmsa_portal.core.errors import (
    MissingRequiredFieldError,
    RequestNotFoundError,
    RequestValidationError,
)
from gmsa_portal.domain.requests.entities import RequestInput, RequestRecord
from gmsa_portal.domain.requests.service import RequestService

router = APIRouter(prefix="/requests", tags=["Requests"])


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback name and an RFC 6266 UTF-8 name.

    Header values are sent as Latin-1, so the plain ``filename`` keeps only
    printable ASCII and never a double quote or backslash.
    """
    fallback = re.sub(r'[^\x20-\x7e]|["\\]', "_", filename)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def get_request_service(container=Depends(get_container)) -> RequestService:
    return container.request_service


@router.get(
    "",
    summary="List service account requests",
    description="Returns every request in submission order.",
    response_model=list[RequestRecord],
)
async def list_requests(
    service: RequestService = Depends(get_request_service),
):
    return service.list_all()


@router.get("/{request_id}", response_model=RequestRecord)
async def get_request(
    request_id: str,
    service: RequestService = Depends(get_request_service),
):
    """Get a specific request."""
    try:
        return service.get_by_id(request_id)
    except RequestNotFoundError:
        raise HTTPException(status_code=404, detail="Request not found")


@router.post(
    "",
    status_code=201,
    summary="Submit a service account request",
    description="Stores the request and renders its creation script.",
    response_model=RequestRecord,
)
async def submit_request(
    payload: RequestInput,
    service: RequestService = Depends(get_request_service),
):
    try:
        return service.create(payload)
    except (MissingRequiredFieldError, RequestValidationError) as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.patch("/{request_id}/status", response_model=RequestRecord)
async def update_request_status(
    request_id: str,
    payload: StatusUpdate,
    service: RequestService = Depends(get_request_service),
):
    """Approve, reject or complete a request."""
    try:
        return service.update_status(request_id, payload.status, payload.notes)
    except RequestNotFoundError:
        raise HTTPException(status_code=404, detail="Request not found")


@router.get(
    "/{request_id}/script",
    summary="Download the generated script",
    response_class=PlainTextResponse,
)
async def download_request_script(
    request_id: str,
    service: RequestService = Depends(get_request_service),
):
    try:
        download = service.download_script(request_id)
    except RequestNotFoundError:
        raise HTTPException(status_code=404, detail="Request not found")

    return PlainTextResponse(
        download.content,
        headers={"Content-Disposition": content_disposition(download.filename)},
    )
