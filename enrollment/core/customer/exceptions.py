from enrollment.common.exceptions import NotFoundException


class CustomerNotFound(NotFoundException):
    default_detail = 'Customer not found.'
    default_code = 'customer_not_found'
