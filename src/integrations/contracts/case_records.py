"""
Case record contract.

Only the contact reference of a case is read by this package. Records are
owned by the case-management system and are never written back.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CaseRecord(BaseModel):
    """Read-only projection of a support case."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    case_id: Optional[str] = Field(default=None, alias="caseId")
    contact_id: Optional[str] = Field(default=None, alias="contactId")
