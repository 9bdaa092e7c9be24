from enrollment.core.customer.constants import EnrollmentStatus
from enrollment.core.customer.domains import CustomerCreate, CustomerLocateRequest, CustomerRead
from enrollment.core.customer.exceptions import CustomerNotFound
from enrollment.core.customer.locator import IdentityLocator
from enrollment.core.customer.models import Customer
from enrollment.core.customer.service import CustomerService

__all__ = [
    'Customer',
    'CustomerCreate',
    'CustomerLocateRequest',
    'CustomerNotFound',
    'CustomerRead',
    'CustomerService',
    'EnrollmentStatus',
    'IdentityLocator',
]
