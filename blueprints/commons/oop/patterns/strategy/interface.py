from abc import ABC, abstractmethod
from decimal import Decimal


class IPaymentStrategy(ABC):

    @abstractmethod
    def pay(self, amount: Decimal) -> str:
        """
        Meant to pay the given amount, returning a payment message.
        """


class IPaymentContext(ABC):

    @property
    @abstractmethod
    def payment_method(self):
        ...

    @payment_method.setter
    @abstractmethod
    def payment_method(self, other):
        ...

    @abstractmethod
    def checkout(self, amount) -> str:
        ...
