from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UssdRequest(BaseModel):
    """Gateway callback body (Africa's Talking field names)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    service_code: Optional[str] = Field(default=None, alias="serviceCode")
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    text: str = ""
