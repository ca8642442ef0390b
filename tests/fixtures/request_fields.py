# ------------------------------------------------------------------------------
# Shared request payloads and records
# ------------------------------------------------------------------------------
from datetime import datetime, timezone
from typing import Any

from gmsa_portal.domain.requests.entities import RequestRecord

CREATED_AT = datetime(2026, 1, 5, 9, 30, tzinfo=timezone.utc)


def gmsa_fields(**overrides: Any) -> dict[str, Any]:
    """Form payload for a gMSA request, as the browser posts it (camelCase)."""
    fields: dict[str, Any] = {
        "accountType": "gmsa",
        "accountName": "svcApp",
        "displayName": "App Service",
        "description": "Runs the app pool",
        "requestorName": "Dana Reyes",
        "requestorEmail": "dana.reyes@corp.local",
        "costCenter": "CC-1042",
        "targetOrganizationalUnit": "OU=Service Accounts,DC=corp,DC=local",
        "serviceType": "IIS",
        "dnsHostname": "web01.corp.local",
        "securityGroupName": "grpSvcApp",
        "createSecurityGroup": True,
        "hostServers": ["WEB01", "WEB02"],
        "passwordIntervalDays": 30,
        "encryptionTypes": ["AES256"],
        "servicePrincipalNames": "",
    }
    fields.update(overrides)
    return fields


def msa_fields(**overrides: Any) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "accountType": "msa",
        "accountName": "svcBatch",
        "description": "Nightly batch job",
        "requestorName": "Dana Reyes",
        "requestorEmail": "dana.reyes@corp.local",
        "targetOrganizationalUnit": "OU=Service Accounts,DC=corp,DC=local",
        "hostServers": ["APP01"],
    }
    fields.update(overrides)
    return fields


def make_record(fields: dict[str, Any], *, request_id: str = "REQ-1A2B3C4D") -> RequestRecord:
    """A record as the service would build it, before rendering."""
    return RequestRecord.model_validate(
        {
            **fields,
            "id": request_id,
            "createdAt": CREATED_AT,
            "updatedAt": CREATED_AT,
        }
    )
