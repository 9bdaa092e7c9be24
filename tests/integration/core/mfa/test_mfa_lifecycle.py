"""
Walks a customer through NoMfa -> Provisioned -> Enabled -> NoMfa the way the
enrollment wizard drives it.
"""

from enrollment.core.customer import Customer
from enrollment.core.mfa import MfaService


class TestMfaLifecycle:
    def test_full_lifecycle(self, frozen_clock, enrolled_customer):
        mfa_service = MfaService(clock=frozen_clock)
        customer_id = enrolled_customer.id

        status = mfa_service.get_mfa_status(customer_id)
        assert status.is_enabled is False
        assert status.secret is None

        # Provisioned
        setup = mfa_service.setup_mfa(customer_id)
        status = mfa_service.get_mfa_status(customer_id)
        assert status.is_enabled is False
        assert status.secret == setup.secret
        assert status.qr_code_uri is None

        # Enabled, a few seconds later while the authenticator shows the same code
        frozen_clock.tick(5)
        code = mfa_service.current_code(setup.secret)
        assert mfa_service.enable_mfa(customer_id, code) is True
        status = mfa_service.get_mfa_status(customer_id)
        assert status.is_enabled is True
        assert status.enabled_at == frozen_clock.now
        assert status.qr_code_uri == setup.qr_code_uri

        # Logging in a step later needs the new code
        frozen_clock.tick(30)
        assert mfa_service.verify_mfa_code(customer_id, code) is False
        assert mfa_service.verify_mfa_code(customer_id, mfa_service.current_code(setup.secret)) is True

        # Back to no MFA
        assert mfa_service.disable_mfa(customer_id, mfa_service.current_code(setup.secret)) is True
        status = mfa_service.get_mfa_status(customer_id)
        assert status.is_enabled is False
        assert status.enabled_at is None
        assert status.secret is None
        assert mfa_service.verify_mfa_code(customer_id, mfa_service.current_code(setup.secret)) is False

        # And can start over with a new secret
        again = mfa_service.setup_mfa(customer_id)
        assert again.secret != setup.secret
        assert Customer.get(id=customer_id).mfa_secret == again.secret

    def test_disabled_invariants_hold_after_each_step(self, mfa_service, enrolled_customer):
        customer_id = enrolled_customer.id
        setup = mfa_service.setup_mfa(customer_id)
        mfa_service.enable_mfa(customer_id, mfa_service.current_code(setup.secret))

        stored = Customer.get(id=customer_id)
        assert stored.is_mfa_enabled is True
        assert stored.mfa_secret is not None
        assert stored.mfa_enabled_at is not None

        mfa_service.disable_mfa(customer_id, mfa_service.current_code(setup.secret))

        stored = Customer.get(id=customer_id)
        assert stored.is_mfa_enabled is False
        assert stored.mfa_enabled_at is None
