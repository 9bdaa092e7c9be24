from typing import Any, List, Optional

from enrollment.core.customer.domains import CustomerRead
from enrollment.core.customer.exceptions import CustomerNotFound
from enrollment.core.customer.models import Customer
from enrollment.network.database.repository.exceptions import RepositoryObjectNotFound


class CustomerService:
    """
    Record accessor the enrollment core reads and writes customers through. Runs
    inside the caller's `db` session scope which owns commit/rollback.
    """

    @classmethod
    def factory(cls) -> 'CustomerService':
        return cls()

    def get_for_id(self, customer_id: int) -> CustomerRead:
        """Get a customer by ID"""
        try:
            return Customer.get(Customer.id == customer_id)
        except RepositoryObjectNotFound:
            raise CustomerNotFound(message=f'Customer with ID {customer_id} not found.')

    def get_or_none_for_id(self, customer_id: int) -> Optional[CustomerRead]:
        return Customer.get_or_none(Customer.id == customer_id)

    def get_for_update(self, customer_id: int) -> Optional[CustomerRead]:
        """
        Locks the customer row for the rest of the transaction so concurrent MFA
        changes to the same customer apply one after another
        """
        return Customer.get_for_update(Customer.id == customer_id)

    def list_matching(self, *clauses: Any, limit: int | None = None) -> List[CustomerRead]:
        return Customer.list(*clauses, ordering=['id'], limit=limit)

    def update_customer(self, customer_id: int, **updates: Any) -> CustomerRead:
        try:
            return Customer.update(id=customer_id, **updates)
        except RepositoryObjectNotFound:
            raise CustomerNotFound(message=f'Customer with ID {customer_id} not found.')
