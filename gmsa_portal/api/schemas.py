from typing import Optional

from pydantic import BaseModel, Field

from gmsa_portal.domain.requests.entities import RequestStatus


class StatusUpdate(BaseModel):
    """
    Body for changing a request's status.

    Notes are optional; when omitted, any existing notes are kept.
    """

    status: RequestStatus = Field(
        description="New status for the request"
    )

    notes: Optional[str] = Field(
        default=None,
        description="Reviewer notes recorded with the status change"
    )
