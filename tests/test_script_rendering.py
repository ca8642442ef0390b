from gmsa_portal.domain.scripts import ScriptRenderer
import pytest


def test_script_rendering_ok() -> None:
    renderer = ScriptRenderer()
    rendered = renderer.render('$AccountName = "${account_name}"', {'account_name': 'svcApp'})
    assert rendered == '$AccountName = "svcApp"'


def test_script_rendering_keeps_powershell_variables() -> None:
    template = 'Write-Host "Account: $AccountName$ on $($HostServers -join \', \')" @{Add=$SPNs}'
    renderer = ScriptRenderer()
    assert renderer.render(template, {}) == template


def test_script_rendering_missing_variable() -> None:
    renderer = ScriptRenderer()
    with pytest.raises(ValueError):
        renderer.render('Hello ${name}', {})
