"""MfaService helpers that never touch a customer record."""

from datetime import datetime
from urllib.parse import quote

from enrollment.core.mfa import MfaService
from tests.factories.core.mfa import RFC_6238_SECRET, FrozenClock


class TestMfaServiceHelpers:
    def test_current_code_follows_clock(self):
        clock = FrozenClock(datetime(1970, 1, 1, 0, 0, 59))
        service = MfaService(clock=clock)

        assert service.current_code(RFC_6238_SECRET) == '287082'

        clock.tick(30)
        assert service.current_code(RFC_6238_SECRET) != '287082'

    def test_provisioning_uri_uses_configured_issuer(self, mfa_service):
        uri = mfa_service.generate_provisioning_uri('JBSWY3DPEHPK3PXP', 'john.doe@example.com')

        assert uri.startswith(f'otpauth://totp/{quote(mfa_service.issuer, safe="")}:john.doe%40example.com?')
        assert 'secret=JBSWY3DPEHPK3PXP' in uri

    def test_qr_code_is_base64(self, mfa_service):
        image = mfa_service.generate_qr_code('JBSWY3DPEHPK3PXP', 'john.doe@example.com')

        assert isinstance(image, str)
        assert image.startswith('iVBORw0KGgo')

    def test_backup_codes(self, mfa_service):
        codes = mfa_service.generate_backup_codes()

        assert len(codes) == 10
        assert all(len(code) == 6 and code.isdigit() for code in codes)

    def test_defaults_to_wall_clock(self):
        service = MfaService()

        assert isinstance(service.clock(), datetime)
        assert service.clock().tzinfo is None
