from datetime import date, datetime
from typing import Optional

from pydantic import Field, field_validator

from enrollment.common.domain import BaseDomain
from enrollment.core.customer.constants import EnrollmentStatus


class CustomerCreate(BaseDomain):
    first_name: str
    last_name: str
    email: str
    phone_number: str
    account_number: Optional[str] = None
    ssn: Optional[str] = None
    date_of_birth: date
    status: EnrollmentStatus = EnrollmentStatus.PENDING


class CustomerRead(CustomerCreate):
    id: int
    mfa_secret: Optional[str] = None
    is_mfa_enabled: bool = False
    mfa_enabled_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None


class CustomerLocateRequest(BaseDomain):
    """
    Inbound search terms for locating an existing enrollment. Failing validation
    here is the caller's bad request, a valid request that matches nothing is
    a not found.
    """

    account_number: str = Field(min_length=1)
    ssn: str = Field(min_length=1)
    birthdate: str = Field(min_length=1)

    @field_validator('account_number', 'ssn', 'birthdate')
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('must not be blank')
        return value
