from datetime import datetime

import pytest
from pydantic import ValidationError

from enrollment.core.mfa import MfaCodeSubmission, MfaStatus


class TestMfaCodeSubmission:
    def test_valid_submission(self):
        submission = MfaCodeSubmission(customer_id=1, code='012345')

        assert submission.code == '012345'

    @pytest.mark.parametrize('code', ['12345', '1234567', '12345a', ' 123456', '', '１２３４５６'])
    def test_code_must_be_six_ascii_digits(self, code):
        with pytest.raises(ValidationError):
            MfaCodeSubmission(customer_id=1, code=code)

    @pytest.mark.parametrize('customer_id', [0, -1])
    def test_customer_id_must_be_positive(self, customer_id):
        with pytest.raises(ValidationError):
            MfaCodeSubmission(customer_id=customer_id, code='123456')

    def test_camel_case_payload(self):
        submission = MfaCodeSubmission.model_validate({'customerId': 7, 'code': '123456'})

        assert submission.customer_id == 7


class TestMfaStatus:
    def test_api_dict_uses_camel_case(self):
        status = MfaStatus(customer_id=1, is_enabled=True, enabled_at=datetime(2024, 1, 15, 12, 0, 0))

        assert status.to_api_dict() == {
            'customerId': 1,
            'isEnabled': True,
            'enabledAt': '2024-01-15T12:00:00',
            'secret': None,
            'qrCodeUri': None,
        }
