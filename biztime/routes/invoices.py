from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from biztime.core.db import get_db
from biztime.models.company_model import Company
from biztime.models.invoice_model import Invoice
from biztime.schemas.company_schema import CompanyOut
from biztime.schemas.invoice_schema import (
    InvoiceCreate,
    InvoiceDetail,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceOut,
    InvoiceResponse,
    InvoiceSummary,
    InvoiceUpdate,
)
from biztime.schemas.status_schema import DeletedResponse
from biztime.services.invoice_service import invoice_service

router = APIRouter()

# ids are 64-bit integers in the store; anything outside is malformed input
MAX_INVOICE_ID = 2**63 - 1
InvoiceId = Annotated[int, Path(ge=0, le=MAX_INVOICE_ID)]


def _invoice_to_detail(invoice: Invoice, company: Company) -> InvoiceDetail:
    # comp_code is dropped; the nested company stands in for it
    return InvoiceDetail(
        id=invoice.id,
        amt=invoice.amt,
        paid=invoice.paid,
        add_date=invoice.add_date,
        paid_date=invoice.paid_date,
        company=CompanyOut.model_validate(company),
    )


@router.get("", response_model=InvoiceListResponse)
def list_invoices(db: Session = Depends(get_db)):
    invoices = invoice_service.get_all_invoices(db)
    return InvoiceListResponse(
        invoices=[InvoiceSummary.model_validate(i) for i in invoices],
    )


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: InvoiceId, db: Session = Depends(get_db)):
    invoice, company = invoice_service.get_invoice_with_company(db, invoice_id)
    return InvoiceDetailResponse(invoice=_invoice_to_detail(invoice, company))


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(payload: InvoiceCreate, db: Session = Depends(get_db)):
    invoice = invoice_service.create_invoice(db, payload)
    return InvoiceResponse(invoice=InvoiceOut.model_validate(invoice))


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(invoice_id: InvoiceId, payload: InvoiceUpdate, db: Session = Depends(get_db)):
    invoice = invoice_service.update_invoice(db, invoice_id, payload)
    return InvoiceResponse(invoice=InvoiceOut.model_validate(invoice))


@router.delete("/{invoice_id}", response_model=DeletedResponse)
def delete_invoice(invoice_id: InvoiceId, db: Session = Depends(get_db)):
    invoice_service.delete_invoice(db, invoice_id)
    return DeletedResponse()
