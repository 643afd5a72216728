# agromart_ussd/domain/services/pii_masking.py
"""PII masking utilities for safe logging of KYC data.

All functions are synchronous string operations.  They never raise on
invalid input -- they return the value unchanged (or empty string) when
the format is unrecognised.
"""

import re
from typing import Dict, Mapping

# ---------------------------------------------------------------------------
# Mask character: bullet (•)
# ---------------------------------------------------------------------------
MASK_CHAR = "•"  # bullet •

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

# Hedera account id: shard.realm.num
_HEDERA_ACCOUNT_RE = re.compile(r"^(\d+\.\d+\.)(\d+)$")

# International phone: optional +, then 10-15 digits with optional separators
_PHONE_RE = re.compile(r"(?<![\w.])\+?\d[\d\s-]{8,17}\d(?![\w.])")

# KYC keys whose values are masked before logging
SENSITIVE_FIELDS = {
    "phone": "phone",
    "idNumber": "id",
    "hederaWallet": "wallet",
    "businessLicense": "id",
    "taxId": "id",
    "vehicleRegistration": "id",
    "insurancePolicy": "id",
    "drivingLicense": "id",
    "professionalLicense": "id",
}


# ---------------------------------------------------------------------------
# Individual masking helpers
# ---------------------------------------------------------------------------

def mask_phone(phone: str) -> str:
    """Mask a phone number, showing only last 4 digits.

    Example: ``+2341234567890`` -> ``•••••••••7890``
    """
    if not phone:
        return ""
    digits = re.sub(r"[^0-9]", "", phone)
    if len(digits) < 4:
        return MASK_CHAR * len(digits)
    return MASK_CHAR * (len(digits) - 4) + digits[-4:]


def mask_id_number(value: str) -> str:
    """Mask an identity / licence number, showing only last 3 characters.

    Example: ``BL123456789`` -> ``••••••••789``
    """
    if not value:
        return ""
    value = value.strip()
    if len(value) <= 3:
        return MASK_CHAR * len(value)
    return MASK_CHAR * (len(value) - 3) + value[-3:]


def mask_wallet(wallet: str) -> str:
    """Mask a Hedera account id, keeping shard/realm and last 2 digits.

    Example: ``0.0.123456`` -> ``0.0.••••56``
    Non-Hedera strings fall back to :func:`mask_id_number`.
    """
    if not wallet:
        return ""
    m = _HEDERA_ACCOUNT_RE.match(wallet.strip())
    if not m:
        return mask_id_number(wallet)
    prefix, num = m.groups()
    if len(num) <= 2:
        return prefix + num
    return prefix + MASK_CHAR * (len(num) - 2) + num[-2:]


_MASKERS = {
    "phone": mask_phone,
    "id": mask_id_number,
    "wallet": mask_wallet,
}


def mask_kyc_fields(fields: Mapping[str, str]) -> Dict[str, str]:
    """Return a copy of ``fields`` with sensitive values masked."""
    masked = {}
    for key, value in fields.items():
        kind = SENSITIVE_FIELDS.get(key)
        masked[key] = _MASKERS[kind](value) if kind else value
    return masked


# ---------------------------------------------------------------------------
# Freeform text masking (for logging)
# ---------------------------------------------------------------------------

def mask_for_log(text: str) -> str:
    """Mask phone-number-like digit runs in freeform text."""
    if not text:
        return text or ""
    return _PHONE_RE.sub(lambda m: mask_phone(m.group(0)), text)
