from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date

from biztime.schemas.company_schema import CompanyOut


# ============================================================
# Create Schema
# ============================================================
class InvoiceCreate(BaseModel):
    comp_code: str
    amt: float = Field(allow_inf_nan=False)


# ============================================================
# Update Schema (amount is the only editable field)
# ============================================================
class InvoiceUpdate(BaseModel):
    amt: float = Field(allow_inf_nan=False)


# ============================================================
# OUT Schemas
# ============================================================
class InvoiceSummary(BaseModel):
    id: int
    comp_code: str

    class Config:
        from_attributes = True


class InvoiceOut(BaseModel):
    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None

    class Config:
        from_attributes = True


class InvoiceDetail(BaseModel):
    """
    Detail view: the owning company is nested under `company`
    and replaces the flat comp_code.
    """
    id: int
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None
    company: CompanyOut


# ============================================================
# Envelopes
# ============================================================
class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
