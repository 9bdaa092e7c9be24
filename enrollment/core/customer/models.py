from datetime import date, datetime
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from enrollment.common.encrypted_field import EncryptedString
from enrollment.common.model import BaseModel
from enrollment.core.customer.constants import ACCOUNT_NUMBER_MAX_LENGTH, SSN_LENGTH, EnrollmentStatus
from enrollment.core.customer.domains import CustomerCreate, CustomerRead


class Customer(BaseModel[CustomerRead, CustomerCreate]):
    first_name: Mapped[str] = mapped_column(String(length=100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(length=100), nullable=False)
    email: Mapped[str] = mapped_column(String(length=255), nullable=False, index=True)
    phone_number: Mapped[str] = mapped_column(String(length=20), nullable=False)
    # Stored canonical, digits only
    account_number: Mapped[Optional[str]] = mapped_column(
        String(length=ACCOUNT_NUMBER_MAX_LENGTH), nullable=True, index=True
    )
    ssn: Mapped[Optional[str]] = mapped_column(String(length=SSN_LENGTH), nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[EnrollmentStatus] = mapped_column(
        Enum(EnrollmentStatus), nullable=False, default=EnrollmentStatus.PENDING
    )

    # Set while provisioned or enabled, cleared on disable
    mfa_secret: Mapped[Optional[str]] = mapped_column(EncryptedString, nullable=True)
    is_mfa_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    mfa_enabled_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    __read_domain__ = CustomerRead
    __create_domain__ = CustomerCreate
