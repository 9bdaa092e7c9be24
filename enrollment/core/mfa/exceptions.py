from enrollment.common.exceptions import InvalidStateException


class MfaInvalidState(InvalidStateException):
    default_detail = 'MFA is not in a valid state for this operation.'
    default_code = 'mfa_invalid_state'


class MfaAlreadyEnabled(MfaInvalidState):
    default_detail = 'MFA is already enabled for this customer.'
    default_code = 'mfa_already_enabled'
