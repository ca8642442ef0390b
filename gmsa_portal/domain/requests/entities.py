"""Request schemas for the service-account portal.

Pydantic does the structural validation:
- enum-like fields are closed ``str`` enums, unknown tokens are rejected
- an MSA is bound to exactly one host, so more than one host is rejected
- records serialize with camelCase keys and accept camelCase or snake_case
- the legacy form keys targetOU, passwordInterval and spns are accepted too
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


DEFAULT_PASSWORD_INTERVAL_DAYS = 30


class AccountType(str, Enum):
    """Kind of managed service account being requested.

    GMSA is the group-managed account usable from many hosts through a
    security group. MSA is the standalone account restricted to one host.
    """

    GMSA = "gmsa"
    MSA = "msa"

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            return cls._value2member_map_.get(value.lower())
        return None


class RequestStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            return cls._value2member_map_.get(value.upper())
        return None


class EncryptionType(str, Enum):
    """Kerberos encryption types accepted by New-ADServiceAccount."""

    RC4 = "RC4"
    AES128 = "AES128"
    AES256 = "AES256"


def _default_encryption_types() -> list[EncryptionType]:
    return [EncryptionType.AES256]


class RequestInput(BaseModel):
    """Fields a requestor submits through the intake form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    account_type: AccountType
    account_name: str = Field(min_length=1, description="sAMAccountName without the trailing $.")

    # Requestor / ownership
    display_name: str = ""
    description: str = ""
    requestor_name: str = ""
    requestor_email: str = ""
    cost_center: str = ""

    # Placement
    target_organizational_unit: str = Field(
        default="",
        validation_alias=AliasChoices("targetOrganizationalUnit", "targetOU", "target_organizational_unit"),
        serialization_alias="targetOrganizationalUnit",
    )
    service_type: str = ""
    dns_hostname: Optional[str] = None

    # Host access
    security_group_name: Optional[str] = None
    create_security_group: bool = False
    host_servers: list[str] = Field(default_factory=list)

    # Account configuration
    password_interval_days: int = Field(
        default=DEFAULT_PASSWORD_INTERVAL_DAYS,
        ge=1,
        validation_alias=AliasChoices("passwordIntervalDays", "passwordInterval", "password_interval_days"),
        serialization_alias="passwordIntervalDays",
    )
    encryption_types: list[EncryptionType] = Field(default_factory=_default_encryption_types)
    service_principal_names: str = Field(
        default="",
        description="One SPN per line.",
        validation_alias=AliasChoices("servicePrincipalNames", "spns", "service_principal_names"),
        serialization_alias="servicePrincipalNames",
    )

    # Delegation
    enable_delegation: bool = False
    delegation_type: Optional[str] = None
    delegated_services: Optional[str] = None

    @field_validator(
        "display_name",
        "description",
        "requestor_name",
        "requestor_email",
        "cost_center",
        "target_organizational_unit",
        "service_type",
        "service_principal_names",
        mode="before",
    )
    @classmethod
    def _none_as_empty_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("account_name")
    @classmethod
    def _account_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("accountName must not be blank")
        return value

    @field_validator("password_interval_days", mode="before")
    @classmethod
    def _default_interval(cls, value: Any) -> Any:
        if value is None or value == "":
            return DEFAULT_PASSWORD_INTERVAL_DAYS
        return value

    @field_validator("encryption_types", mode="before")
    @classmethod
    def _default_encryption(cls, value: Any) -> Any:
        if not value:
            return _default_encryption_types()
        return value

    @field_validator("encryption_types")
    @classmethod
    def _dedupe_encryption(cls, value: list[EncryptionType]) -> list[EncryptionType]:
        return list(dict.fromkeys(value))

    @field_validator("host_servers", mode="before")
    @classmethod
    def _none_as_no_hosts(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("host_servers")
    @classmethod
    def _clean_hosts(cls, value: list[str]) -> list[str]:
        hosts = [h.strip() for h in value if h and h.strip()]
        seen: set[str] = set()
        for host in hosts:
            key = host.lower()
            if key in seen:
                raise ValueError(f"Host server listed more than once: {host}")
            seen.add(key)
        return hosts

    @model_validator(mode="after")
    def _msa_single_host(self) -> "RequestInput":
        if self.account_type == AccountType.MSA and len(self.host_servers) > 1:
            raise ValueError("An MSA can only be bound to a single host server")
        return self

    def spn_list(self) -> list[str]:
        """SPN lines with blank and whitespace-only lines dropped."""
        return [line.strip() for line in self.service_principal_names.splitlines() if line.strip()]


class RequestRecord(RequestInput):
    """A persisted request: submitted fields plus system-assigned state."""

    id: str
    status: RequestStatus = RequestStatus.PENDING
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    rendered_script: str = ""

    def input_fields(self) -> RequestInput:
        """The submitted fields, without identifier, status or timestamps."""
        return RequestInput.model_validate(
            self.model_dump(include=set(RequestInput.model_fields))
        )


@dataclass(frozen=True)
class ScriptDownload:
    filename: str
    content: str
