from pydantic import BaseModel, Field
from typing import List, Optional


# ============================================================
# Request bodies
# ============================================================
class CompanyCreate(BaseModel):
    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str


class CompanyUpdate(BaseModel):
    name: str = Field(min_length=1)
    description: str


# ============================================================
# Views
# ============================================================
class CompanySummary(BaseModel):
    """List view: description is left out."""
    code: str
    name: str

    class Config:
        from_attributes = True


class CompanyOut(BaseModel):
    code: str
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class CompanyDetail(CompanyOut):
    # ids of the company's invoices, ascending
    invoices: List[int] = []


# ============================================================
# Envelopes
# ============================================================
class CompanyListResponse(BaseModel):
    companies: List[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail
