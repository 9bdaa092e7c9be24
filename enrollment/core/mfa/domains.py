from datetime import datetime
from typing import List, Optional

from pydantic import Field

from enrollment.common.domain import BaseDomain
from enrollment.core.mfa.constants import CODE_DIGITS


class MfaSetupResult(BaseDomain):
    customer_id: int
    secret: str
    qr_code_uri: str
    # Shown to the customer once, not stored
    backup_codes: List[str]


class MfaStatus(BaseDomain):
    customer_id: int
    is_enabled: bool
    enabled_at: Optional[datetime] = None
    secret: Optional[str] = None
    qr_code_uri: Optional[str] = None


class MfaCodeSubmission(BaseDomain):
    """
    Inbound payload for verify, enable and disable
    """

    customer_id: int = Field(gt=0)
    code: str = Field(pattern=rf'^[0-9]{{{CODE_DIGITS}}}$')
