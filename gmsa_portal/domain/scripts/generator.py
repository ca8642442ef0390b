"""Script generator: RequestRecord -> PowerShell text.

Rendering is pure. The generation timestamp comes from the record's
``created_at``, so rendering the same record twice is byte-identical.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from gmsa_portal.core.errors import MissingRequiredFieldError
from gmsa_portal.domain.requests.entities import AccountType, RequestRecord
from .renderer import ScriptRenderer
from .sections import ScriptContext, ScriptTemplate
from .templates import TEMPLATES


def quote_list(values: Iterable[str]) -> str:
    """Render values as a comma-joined, double-quoted sequence."""
    return ", ".join(f'"{v}"' for v in values)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def check_required_fields(record: RequestRecord) -> None:
    """Raise MissingRequiredFieldError for the first field rendering needs but lacks."""
    account_type = record.account_type.value
    if _is_blank(record.account_name):
        raise MissingRequiredFieldError("accountName", account_type)
    if not record.host_servers:
        raise MissingRequiredFieldError("hostServers", account_type)
    if record.account_type == AccountType.GMSA:
        if _is_blank(record.dns_hostname):
            raise MissingRequiredFieldError("dnsHostname", account_type)
        if _is_blank(record.security_group_name):
            raise MissingRequiredFieldError("securityGroupName", account_type)


def build_context(record: RequestRecord) -> ScriptContext:
    spns = record.spn_list()
    variables = {
        "request_id": record.id,
        "generated_at": record.created_at.isoformat(),
        "account_name": record.account_name,
        "requestor_name": record.requestor_name,
        "requestor_email": record.requestor_email,
        "description": record.description,
        "target_ou": record.target_organizational_unit,
        "dns_hostname": record.dns_hostname or "",
        "security_group_name": record.security_group_name or "",
        "password_interval": str(record.password_interval_days),
        "encryption_types": quote_list(e.value for e in record.encryption_types),
        "host_servers": quote_list(record.host_servers),
        "host_additions": "\n".join(
            f'Add-HostToSecurityGroup -Server "{host}"' for host in record.host_servers
        ),
        "host_computer": record.host_servers[0] if record.host_servers else "",
        "spns": quote_list(spns),
    }
    return ScriptContext(record=record, variables=variables, spns=spns)


class ScriptGenerator:
    """Select the template for a record's account type and render it."""

    def __init__(
        self,
        *,
        renderer: ScriptRenderer | None = None,
        templates: Mapping[AccountType, ScriptTemplate] | None = None,
    ) -> None:
        self._renderer = renderer or ScriptRenderer()
        self._templates = dict(templates or TEMPLATES)

    def template_for(self, account_type: AccountType) -> ScriptTemplate:
        return self._templates[AccountType(account_type)]

    def render(self, record: RequestRecord) -> str:
        """Render the creation script for ``record``.

        Raises:
            MissingRequiredFieldError: If the record lacks a field its template needs.
        """
        check_required_fields(record)
        template = self.template_for(record.account_type)
        return template.render(build_context(record), self._renderer)


def render_script(record: RequestRecord) -> str:
    return ScriptGenerator().render(record)
