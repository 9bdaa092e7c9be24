from enrollment.common.enum import BaseEnum


class EnrollmentStatus(BaseEnum):
    PENDING = 'PENDING'
    IN_PROGRESS = 'IN_PROGRESS'
    COMPLETED = 'COMPLETED'
    REJECTED = 'REJECTED'
    CANCELLED = 'CANCELLED'


ACCOUNT_NUMBER_MAX_LENGTH = 32
SSN_LENGTH = 9
