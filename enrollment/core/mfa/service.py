import binascii
from datetime import datetime
from typing import Callable, List

from loguru import logger

from enrollment import settings
from enrollment.common.utils import utc_now
from enrollment.core.customer.domains import CustomerRead
from enrollment.core.customer.exceptions import CustomerNotFound
from enrollment.core.customer.service import CustomerService
from enrollment.core.mfa import totp
from enrollment.core.mfa.domains import MfaSetupResult, MfaStatus
from enrollment.core.mfa.exceptions import MfaAlreadyEnabled


class MfaService:
    """
    Lifecycle of a customer's TOTP factor:

        no MFA -> provisioned (secret stored, unconfirmed) -> enabled -> no MFA

    Code checks are exact matches against the current 30 second step. A wrong
    code is an expected outcome and comes back as False, only a missing customer
    or setting up over an enabled factor raise.

    Mutations lock the customer row, commit/rollback belongs to the caller's
    session scope.
    """

    def __init__(
        self,
        customer_service: CustomerService | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._customer_service = customer_service
        self.clock = clock or utc_now
        self.issuer = settings.MFA_ISSUER

    @classmethod
    def factory(cls) -> 'MfaService':
        return cls()

    @property
    def customer_service(self) -> CustomerService:
        if self._customer_service is None:
            self._customer_service = CustomerService.factory()
        return self._customer_service

    def setup_mfa(self, customer_id: int) -> MfaSetupResult:
        """
        Provision a fresh secret for a customer. The secret is persisted right away
        while MFA stays disabled until `enable_mfa` confirms a code from it. Running
        setup again before enabling replaces the pending secret.

        Raises:
            CustomerNotFound: No customer with this id
            MfaAlreadyEnabled: Disable the active factor before provisioning a new one
        """
        customer = self.customer_service.get_for_update(customer_id)
        if customer is None:
            raise CustomerNotFound(message=f'Customer with ID {customer_id} not found.')
        if customer.is_mfa_enabled:
            raise MfaAlreadyEnabled()

        secret = totp.generate_secret()
        self.customer_service.update_customer(customer_id, mfa_secret=secret)
        logger.info(f'MFA secret provisioned for customer {customer_id}')

        return MfaSetupResult(
            customer_id=customer_id,
            secret=secret,
            qr_code_uri=self.generate_provisioning_uri(secret, customer.email),
            backup_codes=self.generate_backup_codes(),
        )

    def verify_mfa_code(self, customer_id: int, code: str) -> bool:
        customer = self.customer_service.get_or_none_for_id(customer_id)
        if customer is None or not customer.is_mfa_enabled or not customer.mfa_secret:
            return False

        return self._matches_current_code(customer, code)

    def enable_mfa(self, customer_id: int, code: str) -> bool:
        """
        Confirms possession of the provisioned secret and turns MFA on.
        Returns False without changing anything when the code doesn't match.
        """
        customer = self.customer_service.get_for_update(customer_id)
        if customer is None or not customer.mfa_secret:
            return False

        if not self._matches_current_code(customer, code):
            return False

        now = self.clock()
        self.customer_service.update_customer(
            customer_id,
            is_mfa_enabled=True,
            mfa_enabled_at=now,
            modified_at=now,
        )
        logger.info(f'MFA enabled for customer {customer_id}')
        return True

    def disable_mfa(self, customer_id: int, code: str) -> bool:
        """
        Turns MFA off and forgets the secret, the customer is back to no MFA.
        Returns False without changing anything when the code doesn't match.
        """
        customer = self.customer_service.get_for_update(customer_id)
        if customer is None or not customer.is_mfa_enabled or not customer.mfa_secret:
            return False

        if not self._matches_current_code(customer, code):
            return False

        self.customer_service.update_customer(
            customer_id,
            mfa_secret=None,
            is_mfa_enabled=False,
            mfa_enabled_at=None,
            modified_at=self.clock(),
        )
        logger.info(f'MFA disabled for customer {customer_id}')
        return True

    def get_mfa_status(self, customer_id: int) -> MfaStatus:
        """
        Raises:
            CustomerNotFound: No customer with this id
        """
        customer = self.customer_service.get_for_id(customer_id)

        qr_code_uri = None
        if customer.is_mfa_enabled and customer.mfa_secret:
            qr_code_uri = self.generate_provisioning_uri(customer.mfa_secret, customer.email)

        return MfaStatus(
            customer_id=customer_id,
            is_enabled=customer.is_mfa_enabled,
            enabled_at=customer.mfa_enabled_at,
            secret=customer.mfa_secret if settings.MFA_STATUS_INCLUDE_SECRET else None,
            qr_code_uri=qr_code_uri,
        )

    def generate_provisioning_uri(self, secret: str, account: str) -> str:
        return totp.build_provisioning_uri(secret=secret, account=account, issuer=self.issuer)

    def generate_qr_code(self, secret: str, account: str) -> str:
        """
        Base64 PNG of the provisioning URI for clients that can't render one
        """
        return totp.render_qr_code(self.generate_provisioning_uri(secret, account))

    def generate_backup_codes(self) -> List[str]:
        return totp.generate_backup_codes()

    def current_code(self, secret: str) -> str:
        return totp.derive_code(secret, self.clock())

    def _matches_current_code(self, customer: CustomerRead, code: str) -> bool:
        try:
            expected = self.current_code(customer.mfa_secret)
        except binascii.Error:
            # Secrets written outside the base32 alphabet can never produce a code
            logger.debug(f'MFA secret for customer {customer.id} is not valid base32')
            return False

        is_valid = totp.codes_match(code, expected)
        if not is_valid:
            logger.debug(f'MFA code rejected for customer {customer.id}')
        return is_valid
