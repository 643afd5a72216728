# agromart_ussd/domain/services/kyc_roles.py
"""Per-role KYC step tables.

Each role is an ordered tuple of steps. Step ``n`` (1-based) consumes the
token the caller just entered, optionally stores it under ``field``, and
answers with ``prompt``. The last step always stores the wallet address and
closes the dialogue, so ``len(steps)`` is the role's terminal step.

Farmer and Distributor store the full name at step 1. Transporter, Buyer and
Veterinarian consume the step-1 token without storing it and go straight
to the phone prompt.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from agromart_ussd.domain.models.session import Role


@dataclass(frozen=True)
class KycStep:
    field: Optional[str]
    prompt: Optional[str] = None  # None on the terminal step


@dataclass(frozen=True)
class RoleSpec:
    role: Role
    steps: Tuple[KycStep, ...]

    @property
    def terminal_step(self) -> int:
        return len(self.steps)

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(s.field for s in self.steps if s.field)


FARMER = RoleSpec(
    role=Role.FARMER,
    steps=(
        KycStep("fullName", "Enter Phone Number:"),
        KycStep("phone", "Enter Country:"),
        KycStep("country", "Enter Farm Address:"),
        KycStep("address", "Enter ID Number:"),
        KycStep("idNumber", "Enter Farm Size (acres):"),
        KycStep("farmSize", "Enter Crop Types:"),
        KycStep("cropTypes", "Enter Hedera Wallet:"),
        KycStep("hederaWallet"),
    ),
)

DISTRIBUTOR = RoleSpec(
    role=Role.DISTRIBUTOR,
    steps=(
        KycStep("fullName", "Enter Phone Number:"),
        KycStep("phone", "Enter Country:"),
        KycStep("country", "Enter Business Address:"),
        KycStep("address", "Enter ID Number:"),
        KycStep("idNumber", "Enter Business License:"),
        KycStep("businessLicense", "Enter Tax ID (optional):"),
        KycStep("taxId", "Enter Storage Capacity (tons):"),
        KycStep("storageCapacity", "Enter Hedera Wallet:"),
        KycStep("hederaWallet"),
    ),
)

TRANSPORTER = RoleSpec(
    role=Role.TRANSPORTER,
    steps=(
        KycStep(None, "Enter Phone Number:"),
        KycStep("phone", "Enter Country:"),
        KycStep("country", "Enter Address:"),
        KycStep("address", "Enter ID Number:"),
        KycStep("idNumber", "Enter Vehicle Registration:"),
        KycStep("vehicleRegistration", "Enter Insurance Policy:"),
        KycStep("insurancePolicy", "Enter Driving License:"),
        KycStep("drivingLicense", "Enter Fleet Size:"),
        KycStep("fleetSize", "Enter Hedera Wallet:"),
        KycStep("hederaWallet"),
    ),
)

BUYER = RoleSpec(
    role=Role.BUYER,
    steps=(
        KycStep(None, "Enter Phone Number:"),
        KycStep("phone", "Enter Country:"),
        KycStep("country", "Enter Address:"),
        KycStep("address", "Enter ID Number:"),
        KycStep("idNumber", "Enter Business Type (optional):"),
        KycStep("businessType", "Enter Monthly Volume (kg):"),
        KycStep("monthlyVolume", "Enter Hedera Wallet:"),
        KycStep("hederaWallet"),
    ),
)

VETERINARIAN = RoleSpec(
    role=Role.VETERINARIAN,
    steps=(
        KycStep(None, "Enter Phone Number:"),
        KycStep("phone", "Enter Country:"),
        KycStep("country", "Enter Clinic Address:"),
        KycStep("address", "Enter ID Number:"),
        KycStep("idNumber", "Enter Professional License:"),
        KycStep("professionalLicense", "Enter Years of Experience:"),
        KycStep("yearsOfExperience", "Enter Specialization:"),
        KycStep("specialization", "Enter Hedera Wallet:"),
        KycStep("hederaWallet"),
    ),
)

ROLE_SPECS: Dict[Role, RoleSpec] = {
    spec.role: spec for spec in (FARMER, DISTRIBUTOR, TRANSPORTER, BUYER, VETERINARIAN)
}

# Digit the caller presses on the role menu
ROLE_BY_CHOICE: Dict[str, Role] = {
    "1": Role.FARMER,
    "2": Role.DISTRIBUTOR,
    "3": Role.TRANSPORTER,
    "4": Role.BUYER,
    "5": Role.VETERINARIAN,
}
