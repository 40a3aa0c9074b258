"""
Customer kinds
"""

from abc import ABC, abstractmethod
from typing import Optional

from .exceptions import InvalidArgument
from .sink import OutputSink


def _require_text(value, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field} is required")
    return value


class Customer(ABC):
    """
    Abstract base class for customers

    Attributes:
        customer_id: customer identifier
        full_name: name of the person, always present
    """

    def __init__(self, customer_id: int, full_name: str):
        if isinstance(customer_id, bool) or not isinstance(customer_id, int):
            raise InvalidArgument(f"Customer id must be an integer, got {customer_id!r}")
        self.customer_id = customer_id
        self.full_name = _require_text(full_name, "Customer full name")

    @abstractmethod
    def describe(self, sink: Optional[OutputSink] = None) -> str:
        """
        Build the customer description line

        Args:
            sink: Optional sink the line is also written to

        Returns the description text
        """
        pass

    def _emit(self, text: str, sink: Optional[OutputSink]) -> str:
        if sink is not None:
            sink.write(text)
        return text


class IndividualCustomer(Customer):
    """A private person identified by a national ID"""

    def __init__(self, customer_id: int, full_name: str, national_id: str):
        super().__init__(customer_id, full_name)
        self.national_id = _require_text(national_id, "National ID")

    def describe(self, sink: Optional[OutputSink] = None) -> str:
        return self._emit(
            f"Individual Customer - ID: {self.customer_id}, Name: {self.full_name}, "
            f"National ID: {self.national_id}",
            sink
        )


class CorporateCustomer(Customer):
    """A contact person buying on behalf of a company"""

    def __init__(self, customer_id: int, full_name: str, company_name: str):
        super().__init__(customer_id, full_name)
        self.company_name = _require_text(company_name, "Company name")

    def describe(self, sink: Optional[OutputSink] = None) -> str:
        return self._emit(
            f"Corporate Customer - ID: {self.customer_id}, Company: {self.company_name}, "
            f"Name: {self.full_name}",
            sink
        )
