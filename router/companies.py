from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Optional

from models import Company
from schemas import CompanyCreate, CompanyOut
from db import get_db

router = APIRouter(prefix="/api/companies", tags=["Companies"])


@router.post("", response_model=CompanyOut, status_code=status.HTTP_201_CREATED)
def create_company(company: CompanyCreate, db: Session = Depends(get_db)):
    db_company = Company(**company.model_dump())
    db.add(db_company)
    db.commit()
    db.refresh(db_company)
    return db_company


@router.get("/{company_id}", response_model=Optional[CompanyOut])
def get_company(company_id: int, db: Session = Depends(get_db)):
    return db.query(Company).filter(Company.id == company_id).first()
