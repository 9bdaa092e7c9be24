from typing import Any, Optional

from loguru import logger

from enrollment.common.utils import digits_only, safe_iso_date_parse
from enrollment.core.customer.domains import CustomerRead
from enrollment.core.customer.models import Customer
from enrollment.core.customer.service import CustomerService


class IdentityLocator:
    """
    Finds the one customer whose account number, SSN and date of birth all match
    what an end user typed, used to resume an enrollment or block a duplicate one.

    Locating is total over its inputs: missing values, garbage and birthdates that
    aren't YYYY-MM-DD all come back as no match rather than an error, so malformed
    input can never match a real record nor leak why it didn't.
    """

    def __init__(self, customer_service: CustomerService | None = None):
        self._customer_service = customer_service

    @classmethod
    def factory(cls) -> 'IdentityLocator':
        return cls()

    @property
    def customer_service(self) -> CustomerService:
        if self._customer_service is None:
            self._customer_service = CustomerService.factory()
        return self._customer_service

    def locate(self, account_number: Any, ssn: Any, birthdate: Any) -> Optional[CustomerRead]:
        """
        Args:
            account_number: Free form, separators like "1234 5678-9012" are dropped
            ssn: Compared exactly as given
            birthdate: Must be YYYY-MM-DD

        Returns:
            The first matching customer by id, or None
        """
        account_digits = digits_only(account_number)
        parsed_birthdate = safe_iso_date_parse(birthdate)
        if not account_digits or not _is_ascii_digits(ssn) or parsed_birthdate is None:
            logger.debug('customer locate rejected incomplete or malformed search terms')
            return None

        matches = self.customer_service.list_matching(
            Customer.account_number == account_digits,
            Customer.ssn == ssn,
            Customer.date_of_birth == parsed_birthdate,
            limit=1,
        )
        if not matches:
            logger.debug('customer locate found no match')
            return None

        return matches[0]


def _is_ascii_digits(value: Any) -> bool:
    # Stored SSNs are canonical digits, anything else can't match and some
    # drivers reject characters like NUL outright
    return isinstance(value, str) and value.isascii() and value.isdigit()
