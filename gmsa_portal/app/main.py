"""FastAPI service for managed service account requests.

Requestors submit the intake form here:
- the service validates inputs (Pydantic)
- each request is stored with its rendered creation script
- administrators change the status and download the script
"""

from __future__ import annotations

from fastapi import FastAPI

from gmsa_portal.api.routes import register_routes

tags_metadata = [
    {
        "name": "Requests",
        "description": "Submit, review and download gMSA / MSA provisioning requests"
    },
]

app = FastAPI(
    title='gMSA Request Portal',
    version='1.0.0',
    description='Intake portal for managed service account provisioning',
    openapi_tags=tags_metadata
)

# Register all API routes
register_routes(app)
