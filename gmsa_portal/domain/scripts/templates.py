"""PowerShell templates for the two account types.

Placeholders use the braced ``${slot}`` form and are filled from the
record; bare ``$Name`` tokens are PowerShell variables.
"""

from __future__ import annotations

from gmsa_portal.domain.requests.entities import AccountType
from .sections import ScriptContext, ScriptSection, ScriptTemplate


GROUP_REUSE_COMMENT = "# Using existing security group: $SecurityGroup"
SPN_SECTION_MARKER = "# Set Service Principal Names"


def wants_new_group(ctx: ScriptContext) -> bool:
    return ctx.record.create_security_group


def has_spns(ctx: ScriptContext) -> bool:
    return bool(ctx.spns)


# -----------------------------------------
# gMSA
# -----------------------------------------

GMSA_HEADER = ScriptSection(
    name="header",
    body="""
# gMSA Creation Script
# Generated: ${generated_at}
# Request ID: ${request_id}
# Account: ${account_name}$

<#
.SYNOPSIS
    Creates a Group Managed Service Account (gMSA) in Active Directory.
.DESCRIPTION
    This script creates the gMSA "${account_name}" with the specified configuration.
    Run on a Domain Controller or management workstation with RSAT-AD-PowerShell.
.NOTES
    Requestor: ${requestor_name} (${requestor_email})
    Purpose: ${description}
#>

#Requires -Modules ActiveDirectory
""",
)

GMSA_PREREQUISITES = ScriptSection(
    name="prerequisites",
    body="""
# Prerequisites Check
Write-Host "Checking prerequisites..." -ForegroundColor Cyan

$kdsKey = Get-KdsRootKey -ErrorAction SilentlyContinue
if (-not $kdsKey) {
    Write-Error "KDS Root Key not found! Run Create-KdsRootKey.ps1 first."
    exit 1
}
Write-Host "✓ KDS Root Key exists" -ForegroundColor Green
""",
)

GMSA_VARIABLES = ScriptSection(
    name="variables",
    body="""
# Variables
$AccountName = "${account_name}"
$DNSHostName = "${dns_hostname}"
$SecurityGroup = "${security_group_name}"
$TargetOU = "${target_ou}"
$PasswordInterval = ${password_interval}
$EncryptionTypes = @(${encryption_types})
$HostServers = @(${host_servers})
""",
)

GMSA_SECURITY_GROUP = ScriptSection(
    name="security_group",
    include=wants_new_group,
    body="""
# Create Security Group
Write-Host "Creating security group: $SecurityGroup" -ForegroundColor Cyan
$existingGroup = Get-ADGroup -Filter {Name -eq $SecurityGroup} -ErrorAction SilentlyContinue
if (-not $existingGroup) {
    $groupParams = @{
        Name = $SecurityGroup
        GroupScope = "Global"
        GroupCategory = "Security"
        Path = $TargetOU
        Description = "Computers allowed to use gMSA: $AccountName"
    }
    New-ADGroup @groupParams
    Write-Host "✓ Security group created" -ForegroundColor Green
} else {
    Write-Host "Security group already exists" -ForegroundColor Yellow
}
""",
    fallback=GROUP_REUSE_COMMENT,
)

GMSA_GROUP_MEMBERSHIP = ScriptSection(
    name="group_membership",
    body="""
# Add computers to security group
Write-Host "Adding computers to security group..." -ForegroundColor Cyan
function Add-HostToSecurityGroup {
    param([string]$Server)
    try {
        $computer = Get-ADComputer -Filter {Name -eq $Server} -ErrorAction Stop
        Add-ADGroupMember -Identity $SecurityGroup -Members $computer -ErrorAction SilentlyContinue
        Write-Host "✓ Added $Server" -ForegroundColor Green
    } catch {
        Write-Warning "Could not find computer: $Server"
    }
}

${host_additions}

# Wait for AD replication (optional)
Write-Host "Waiting 5 seconds for AD replication..." -ForegroundColor Yellow
Start-Sleep -Seconds 5
""",
)

GMSA_CREATE_ACCOUNT = ScriptSection(
    name="create_account",
    body="""
# Create gMSA
Write-Host "Creating gMSA: $AccountName" -ForegroundColor Cyan
$gmsaParams = @{
    Name = $AccountName
    DNSHostName = $DNSHostName
    PrincipalsAllowedToRetrieveManagedPassword = $SecurityGroup
    ManagedPasswordIntervalInDays = $PasswordInterval
    KerberosEncryptionType = $EncryptionTypes
    Path = $TargetOU
    Enabled = $true
}

try {
    New-ADServiceAccount @gmsaParams
    Write-Host "✓ gMSA created successfully!" -ForegroundColor Green
} catch {
    Write-Error "Failed to create gMSA: $_"
    exit 1
}
""",
)

GMSA_SERVICE_PRINCIPAL_NAMES = ScriptSection(
    name="service_principal_names",
    include=has_spns,
    body=SPN_SECTION_MARKER + """
$SPNs = @(${spns})
Write-Host "Setting SPNs..." -ForegroundColor Cyan
Set-ADServiceAccount -Identity $AccountName -ServicePrincipalNames @{Add=$SPNs}
Write-Host "✓ SPNs configured" -ForegroundColor Green
""",
)

GMSA_SUMMARY = ScriptSection(
    name="summary",
    body="""
# Summary
Write-Host "`n========================================" -ForegroundColor Cyan
Write-Host "gMSA Creation Complete!" -ForegroundColor Green
Write-Host "========================================" -ForegroundColor Cyan
Write-Host "Account Name: $AccountName$"
Write-Host "DNS Hostname: $DNSHostName"
Write-Host "Security Group: $SecurityGroup"
Write-Host "Host Servers: $($HostServers -join ', ')"

Write-Host "`nNext Steps:" -ForegroundColor Yellow
Write-Host "1. On each target server, run:"
Write-Host "   Install-ADServiceAccount -Identity $AccountName" -ForegroundColor Cyan
Write-Host "2. Test the installation:"
Write-Host "   Test-ADServiceAccount -Identity $AccountName" -ForegroundColor Cyan
Write-Host "3. Configure your service to use: DOMAIN\\$AccountName$" -ForegroundColor Cyan
""",
)

GMSA_TEMPLATE = ScriptTemplate(
    name="gmsa",
    account_type=AccountType.GMSA,
    sections=(
        GMSA_HEADER,
        GMSA_PREREQUISITES,
        GMSA_VARIABLES,
        GMSA_SECURITY_GROUP,
        GMSA_GROUP_MEMBERSHIP,
        GMSA_CREATE_ACCOUNT,
        GMSA_SERVICE_PRINCIPAL_NAMES,
        GMSA_SUMMARY,
    ),
)


# -----------------------------------------
# Standalone MSA
# -----------------------------------------

MSA_HEADER = ScriptSection(
    name="header",
    body="""
# MSA Creation Script
# Generated: ${generated_at}
# Request ID: ${request_id}
# Account: ${account_name}$

<#
.SYNOPSIS
    Creates a Managed Service Account (MSA) in Active Directory.
.DESCRIPTION
    This script creates the MSA "${account_name}" for use on a single computer.
.NOTES
    Requestor: ${requestor_name} (${requestor_email})
    Purpose: ${description}
#>

#Requires -Modules ActiveDirectory
""",
)

MSA_VARIABLES = ScriptSection(
    name="variables",
    body="""
# Variables
$AccountName = "${account_name}"
$TargetOU = "${target_ou}"
$HostComputer = "${host_computer}"
""",
)

MSA_CREATE_ACCOUNT = ScriptSection(
    name="create_account",
    body="""
# Create MSA
Write-Host "Creating MSA: $AccountName" -ForegroundColor Cyan
$msaParams = @{
    Name = $AccountName
    RestrictToSingleComputer = $true
    Path = $TargetOU
    Enabled = $true
}

try {
    New-ADServiceAccount @msaParams
    Write-Host "✓ MSA created successfully!" -ForegroundColor Green
} catch {
    Write-Error "Failed to create MSA: $_"
    exit 1
}
""",
)

MSA_ASSOCIATE_HOST = ScriptSection(
    name="associate_host",
    body="""
# Associate with computer
Write-Host "Associating MSA with computer: $HostComputer" -ForegroundColor Cyan
try {
    Add-ADComputerServiceAccount -Identity $HostComputer -ServiceAccount $AccountName
    Write-Host "✓ MSA associated with $HostComputer" -ForegroundColor Green
} catch {
    Write-Error "Failed to associate MSA: $_"
}
""",
)

MSA_SUMMARY = ScriptSection(
    name="summary",
    body="""
# Summary
Write-Host "`n========================================" -ForegroundColor Cyan
Write-Host "MSA Creation Complete!" -ForegroundColor Green
Write-Host "========================================" -ForegroundColor Cyan
Write-Host "Account Name: $AccountName$"
Write-Host "Target Computer: $HostComputer"

Write-Host "`nNext Steps:" -ForegroundColor Yellow
Write-Host "1. On the target server ($HostComputer), run:"
Write-Host "   Install-ADServiceAccount -Identity $AccountName" -ForegroundColor Cyan
Write-Host "2. Test the installation:"
Write-Host "   Test-ADServiceAccount -Identity $AccountName" -ForegroundColor Cyan
""",
)

MSA_TEMPLATE = ScriptTemplate(
    name="msa",
    account_type=AccountType.MSA,
    sections=(
        MSA_HEADER,
        MSA_VARIABLES,
        MSA_CREATE_ACCOUNT,
        MSA_ASSOCIATE_HOST,
        MSA_SUMMARY,
    ),
)


TEMPLATES: dict[AccountType, ScriptTemplate] = {
    AccountType.GMSA: GMSA_TEMPLATE,
    AccountType.MSA: MSA_TEMPLATE,
}
