import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from biztime.core.errors import internal, not_found, validation_failure
from biztime.models.company_model import Company
from biztime.models.invoice_model import Invoice
from biztime.schemas.invoice_schema import InvoiceCreate, InvoiceUpdate
from biztime.services.persistence import commit_or_reject

logger = logging.getLogger(__name__)


class InvoiceService:
    """
    Data-access layer for invoices.

    Every lookup by id raises NotFound when the row is absent, so callers
    never see None.
    """

    # ------------------------------------------------------------
    # Fetch all invoices
    # ------------------------------------------------------------
    def get_all_invoices(self, db: Session) -> List[Invoice]:
        return db.query(Invoice).order_by(Invoice.id).all()

    # ------------------------------------------------------------
    # Fetch single invoice by ID
    # ------------------------------------------------------------
    def get_invoice(self, db: Session, invoice_id: int) -> Invoice:
        invoice = db.query(Invoice).filter(Invoice.id == invoice_id).first()
        if not invoice:
            raise self._missing(invoice_id)
        return invoice

    # ------------------------------------------------------------
    # Fetch invoice together with its company (one statement)
    # ------------------------------------------------------------
    def get_invoice_with_company(self, db: Session, invoice_id: int) -> Tuple[Invoice, Company]:
        """
        Invoice and owning company are read by a single outer join, so a
        company deleted between two separate reads can't produce a torn
        result.

        An invoice whose company is missing breaks the foreign key invariant;
        that is reported as an internal error, not as NotFound.
        """
        row = (
            db.query(Invoice, Company)
            .outerjoin(Company, Invoice.comp_code == Company.code)
            .filter(Invoice.id == invoice_id)
            .first()
        )
        if row is None:
            raise self._missing(invoice_id)

        invoice, company = row
        if company is None:
            logger.error(
                "Invoice %s references missing company %s",
                invoice_id,
                invoice.comp_code,
            )
            raise internal(f"Invoice {invoice_id} has no company {invoice.comp_code}")
        return invoice, company

    # ------------------------------------------------------------
    # Create (store assigns id, paid, add_date, paid_date)
    # ------------------------------------------------------------
    def create_invoice(self, db: Session, payload: InvoiceCreate) -> Invoice:
        # The foreign key still guards a company deleted after this check
        if db.get(Company, payload.comp_code) is None:
            logger.info("Invoice rejected, no company %s", payload.comp_code)
            raise validation_failure(f"Cannot find company for {payload.comp_code}!")

        invoice = Invoice(comp_code=payload.comp_code, amt=payload.amt)
        db.add(invoice)
        commit_or_reject(db, f"Invoice for company {payload.comp_code} violates a store constraint")
        db.refresh(invoice)
        logger.info("Created invoice %s for company %s", invoice.id, invoice.comp_code)
        return invoice

    # ------------------------------------------------------------
    # Update amount only
    # ------------------------------------------------------------
    def update_invoice(self, db: Session, invoice_id: int, payload: InvoiceUpdate) -> Invoice:
        invoice = self.get_invoice(db, invoice_id)
        invoice.amt = payload.amt
        commit_or_reject(db, f"Cannot update invoice {invoice_id}")
        db.refresh(invoice)
        logger.info("Updated invoice %s", invoice_id)
        return invoice

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------
    def delete_invoice(self, db: Session, invoice_id: int) -> None:
        invoice = self.get_invoice(db, invoice_id)
        db.delete(invoice)
        commit_or_reject(db, f"Cannot delete invoice {invoice_id}")
        logger.info("Deleted invoice %s", invoice_id)

    @staticmethod
    def _missing(invoice_id: int):
        logger.info("Invoice not found: %s", invoice_id)
        return not_found(f"Cannot find invoice for {invoice_id}!")


invoice_service = InvoiceService()
