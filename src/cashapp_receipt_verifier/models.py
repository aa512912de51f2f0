"""
Verification Models
===================

Request, receipt and result models shared by every verification stage.
All of them are created and discarded within a single ``verify()`` call.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import VERIFIED_MESSAGE

# Provider convention: the payer's $cashtag is the value of the fourth detail row.
PAYER_DETAIL_ROW_INDEX = 3


class VerificationStatus(str, Enum):
    """Outcome of a verification."""
    SUCCESS = "success"
    ERROR = "error"


class VerificationRequest(BaseModel):
    """What the caller claims about a payment."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., description="Username expected as the payer on the receipt")
    reference: str = Field(..., description="Note expected on the receipt")
    receipt_url: str = Field("", description="Public web receipt link")


class ReceiptLocator(BaseModel):
    """A receipt URL that passed structural validation."""

    model_config = ConfigDict(frozen=True)

    receipt_url: str
    transaction_token: str = Field(..., min_length=15)


class DetailRow(BaseModel):
    """One labelled attribute of a provider receipt."""

    model_config = ConfigDict(extra="allow")

    value: Optional[str] = None


class RemoteReceipt(BaseModel):
    """Read-only view of the provider's JSON receipt."""

    model_config = ConfigDict(extra="allow", frozen=True)

    notes: str = ""
    detail_rows: List[DetailRow] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "RemoteReceipt":
        """
        Build a receipt view from a decoded body without trusting its shape.

        Fields that are missing or of the wrong type are read as empty so a
        drifted provider format ends in a mismatch rather than an exception.
        """
        if not isinstance(payload, dict):
            return cls()

        notes = payload.get("notes")
        rows = payload.get("detail_rows")
        if not isinstance(rows, list):
            rows = []

        detail_rows = []
        for row in rows:
            value = row.get("value") if isinstance(row, dict) else None
            detail_rows.append(DetailRow(value=value if isinstance(value, str) else None))

        return cls(
            notes=notes if isinstance(notes, str) else "",
            detail_rows=detail_rows,
        )


def payer_identity_value(receipt: RemoteReceipt) -> str:
    """Return the payer identity recorded on the receipt, or an empty string."""
    if len(receipt.detail_rows) <= PAYER_DETAIL_ROW_INDEX:
        return ""
    return receipt.detail_rows[PAYER_DETAIL_ROW_INDEX].value or ""


class VerificationResult(BaseModel):
    """Uniform result returned to the caller."""

    model_config = ConfigDict(frozen=True)

    type: VerificationStatus
    message: str
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def success(cls, data: Dict[str, Any], message: str = VERIFIED_MESSAGE) -> "VerificationResult":
        return cls(type=VerificationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> "VerificationResult":
        return cls(type=VerificationStatus.ERROR, message=message)

    @property
    def ok(self) -> bool:
        return self.type == VerificationStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the ``{type, message, data?}`` wire shape."""
        result: Dict[str, Any] = {"type": self.type.value, "message": self.message}
        if self.data is not None:
            result["data"] = self.data
        return result
