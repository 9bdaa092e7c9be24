from enrollment.core.mfa.domains import MfaCodeSubmission, MfaSetupResult, MfaStatus
from enrollment.core.mfa.exceptions import MfaAlreadyEnabled, MfaInvalidState
from enrollment.core.mfa.service import MfaService

__all__ = [
    'MfaAlreadyEnabled',
    'MfaCodeSubmission',
    'MfaInvalidState',
    'MfaService',
    'MfaSetupResult',
    'MfaStatus',
]
