from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from biztime.core.db import get_db
from biztime.schemas.company_schema import (
    CompanyCreate,
    CompanyDetail,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyOut,
    CompanyResponse,
    CompanySummary,
    CompanyUpdate,
)
from biztime.schemas.status_schema import DeletedResponse
from biztime.services.company_service import (
    create_company,
    delete_company,
    get_company,
    get_invoice_ids,
    list_companies,
    update_company,
)

router = APIRouter()


@router.get("", response_model=CompanyListResponse)
def list_companies_route(db: Session = Depends(get_db)):
    companies = list_companies(db)
    return CompanyListResponse(
        companies=[CompanySummary.model_validate(c) for c in companies],
    )


@router.get("/{code}", response_model=CompanyDetailResponse)
def get_company_route(code: str, db: Session = Depends(get_db)):
    company = get_company(db, code)
    return CompanyDetailResponse(
        company=CompanyDetail(
            code=company.code,
            name=company.name,
            description=company.description,
            invoices=get_invoice_ids(company),
        ),
    )


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company_route(payload: CompanyCreate, db: Session = Depends(get_db)):
    company = create_company(db, payload)
    return CompanyResponse(company=CompanyOut.model_validate(company))


@router.put("/{code}", response_model=CompanyResponse)
def update_company_route(code: str, payload: CompanyUpdate, db: Session = Depends(get_db)):
    company = update_company(db, code, payload)
    return CompanyResponse(company=CompanyOut.model_validate(company))


@router.delete("/{code}", response_model=DeletedResponse)
def delete_company_route(code: str, db: Session = Depends(get_db)):
    delete_company(db, code)
    return DeletedResponse()
