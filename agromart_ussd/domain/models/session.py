from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class Role(str, Enum):
    FARMER = "Farmer"
    DISTRIBUTOR = "Distributor"
    TRANSPORTER = "Transporter"
    BUYER = "Buyer"
    VETERINARIAN = "Veterinarian"


class UssdSession(BaseModel):
    """One caller's in-progress dialogue, keyed by the gateway session id."""

    session_id: str
    role: Optional[Role] = None
    kyc_data: Dict[str, str] = Field(default_factory=dict)
    # Informational only; the dialogue position is derived from the input path.
    step: int = 0
