from __future__ import annotations

import pytest
from pydantic import ValidationError

from gmsa_portal.domain.requests.entities import (
    AccountType,
    EncryptionType,
    RequestInput,
    RequestStatus,
)

from tests.fixtures.request_fields import gmsa_fields, msa_fields


def test_request_input_accepts_camel_case_payload() -> None:
    # Act
    request = RequestInput.model_validate(gmsa_fields())

    # Assert
    assert request.account_type == AccountType.GMSA
    assert request.dns_hostname == 'web01.corp.local'
    assert request.host_servers == ['WEB01', 'WEB02']
    assert request.encryption_types == [EncryptionType.AES256]


def test_request_input_accepts_snake_case_payload() -> None:
    request = RequestInput.model_validate(
        {'account_type': 'msa', 'account_name': 'svcBatch', 'host_servers': ['APP01']}
    )
    assert request.account_type == AccountType.MSA
    assert request.host_servers == ['APP01']


def test_request_input_dumps_camel_case() -> None:
    dumped = RequestInput.model_validate(msa_fields()).model_dump(by_alias=True, mode='json')
    assert dumped['accountType'] == 'msa'
    assert dumped['targetOrganizationalUnit'] == 'OU=Service Accounts,DC=corp,DC=local'
    assert 'account_type' not in dumped


def test_request_input_accepts_legacy_form_keys() -> None:
    # Arrange
    payload = gmsa_fields(
        targetOU='OU=Legacy,DC=corp,DC=local',
        passwordInterval='60',
        spns='HTTP/web01.corp.local\nHTTP/web01',
    )
    for key in ('targetOrganizationalUnit', 'passwordIntervalDays', 'servicePrincipalNames'):
        del payload[key]

    # Act
    request = RequestInput.model_validate(payload)
    dumped = request.model_dump(by_alias=True, mode='json')

    # Assert
    assert request.target_organizational_unit == 'OU=Legacy,DC=corp,DC=local'
    assert request.password_interval_days == 60
    assert request.spn_list() == ['HTTP/web01.corp.local', 'HTTP/web01']
    assert dumped['targetOrganizationalUnit'] == 'OU=Legacy,DC=corp,DC=local'
    assert dumped['passwordIntervalDays'] == 60
    assert 'targetOU' not in dumped and 'spns' not in dumped


def test_request_input_applies_defaults() -> None:
    # Arrange
    payload = msa_fields(passwordIntervalDays=None, encryptionTypes=None, servicePrincipalNames=None)

    # Act
    request = RequestInput.model_validate(payload)

    # Assert
    assert request.password_interval_days == 30
    assert request.encryption_types == [EncryptionType.AES256]
    assert request.service_principal_names == ''
    assert request.create_security_group is False


def test_request_input_rejects_unknown_account_type() -> None:
    with pytest.raises(ValidationError):
        RequestInput.model_validate(gmsa_fields(accountType='dmsa'))


def test_request_input_rejects_unknown_encryption_type() -> None:
    with pytest.raises(ValidationError):
        RequestInput.model_validate(gmsa_fields(encryptionTypes=['AES256', 'DES']))


def test_request_input_rejects_msa_with_two_hosts() -> None:
    with pytest.raises(ValidationError) as exc:
        RequestInput.model_validate(msa_fields(hostServers=['APP01', 'APP02']))
    assert 'single host server' in str(exc.value)


def test_request_input_rejects_duplicate_hosts() -> None:
    with pytest.raises(ValidationError):
        RequestInput.model_validate(gmsa_fields(hostServers=['WEB01', 'web01']))


def test_request_input_rejects_blank_account_name() -> None:
    with pytest.raises(ValidationError):
        RequestInput.model_validate(gmsa_fields(accountName='   '))


def test_request_input_rejects_non_positive_interval() -> None:
    with pytest.raises(ValidationError):
        RequestInput.model_validate(gmsa_fields(passwordIntervalDays=0))


def test_request_input_drops_blank_hosts_and_duplicate_encryption() -> None:
    request = RequestInput.model_validate(
        gmsa_fields(hostServers=[' WEB01 ', '', '  '], encryptionTypes=['AES256', 'AES128', 'AES256'])
    )
    assert request.host_servers == ['WEB01']
    assert request.encryption_types == [EncryptionType.AES256, EncryptionType.AES128]


def test_spn_list_drops_blank_lines() -> None:
    request = RequestInput.model_validate(
        gmsa_fields(servicePrincipalNames='HTTP/web01.corp.local\n   \n\nHTTP/web01 \n')
    )
    assert request.spn_list() == ['HTTP/web01.corp.local', 'HTTP/web01']


def test_status_lookup_is_case_insensitive() -> None:
    assert RequestStatus('approved') is RequestStatus.APPROVED
    assert AccountType('GMSA') is AccountType.GMSA
