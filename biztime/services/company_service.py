import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session
from biztime.core.errors import not_found
from biztime.models.company_model import Company
from biztime.schemas.company_schema import CompanyCreate, CompanyUpdate
from biztime.services.persistence import commit_or_reject

logger = logging.getLogger(__name__)


def _missing(code: str):
    logger.info("Company not found: %s", code)
    return not_found(f"Cannot find company for {code}!")


def _next_position():
    # Computed inside the INSERT; concurrent duplicates hit the unique constraint
    return select(func.coalesce(func.max(Company.position), 0) + 1).scalar_subquery()


def list_companies(db: Session) -> List[Company]:
    return (
        db.query(Company)
        .order_by(Company.position.is_(None), Company.position, Company.code)
        .all()
    )


def get_company(db: Session, code: str) -> Company:
    company = db.query(Company).filter(Company.code == code).first()
    if company is None:
        raise _missing(code)
    return company


def get_invoice_ids(company: Company) -> List[int]:
    return [invoice.id for invoice in company.invoices]


def create_company(db: Session, payload: CompanyCreate) -> Company:
    company = Company(
        code=payload.code,
        name=payload.name,
        description=payload.description,
        position=_next_position(),
    )
    db.add(company)
    commit_or_reject(db, f"Company code '{payload.code}' or name '{payload.name}' is already taken")
    db.refresh(company)
    logger.info("Created company %s", company.code)
    return company


def update_company(db: Session, code: str, payload: CompanyUpdate) -> Company:
    company = get_company(db, code)

    # code is the identity and never changes here
    company.name = payload.name
    company.description = payload.description

    commit_or_reject(db, f"Company name '{payload.name}' is already taken")
    db.refresh(company)
    logger.info("Updated company %s", code)
    return company


def delete_company(db: Session, code: str) -> None:
    """Deletes the company together with all of its invoices."""
    company = get_company(db, code)
    db.delete(company)
    commit_or_reject(db, f"Cannot delete company {code}")
    logger.info("Deleted company %s", code)
