from . import IPaymentStrategy, IPaymentContext
from blueprints.commons.log_helper import get_logger
from blueprints.exceptions import InvalidTypeError, InvalidValueError

from decimal import Decimal, InvalidOperation
from typing import Union, Type

_LOG = get_logger(__name__)


class CreditCardPayment(IPaymentStrategy):

    def __init__(self, card_number: str):
        self._card_number = card_number

    @property
    def card_number(self) -> str:
        return self._card_number

    def pay(self, amount: Decimal) -> str:
        return f'Paid {amount} using Credit Card {self._card_number}'


class PayPalPayment(IPaymentStrategy):

    def __init__(self, email: str):
        self._email = email

    @property
    def email(self) -> str:
        return self._email

    def pay(self, amount: Decimal) -> str:
        return f'Paid {amount} using PayPal account {self._email}'


class BitcoinPayment(IPaymentStrategy):

    def __init__(self, wallet_address: str):
        self._wallet_address = wallet_address

    @property
    def wallet_address(self) -> str:
        return self._wallet_address

    def pay(self, amount: Decimal) -> str:
        return f'Paid {amount} using Bitcoin wallet {self._wallet_address}'


class NoPayment(IPaymentStrategy):
    """
    A null strategy, standing in while no payment method has been chosen.
    """

    def pay(self, amount: Decimal) -> str:
        return 'No payment method selected. Please choose one.'


class ShoppingCart(IPaymentContext):
    """
    A context class, which delegates checkout to an interchangeable
    payment strategy, defaulting to NoPayment.
    """

    def __init__(self, strategy: Union[IPaymentStrategy, Type[None]] = None):
        self._payment_method = None
        self.payment_method = strategy if strategy is not None \
            else NoPayment()

    @property
    def payment_method(self) -> IPaymentStrategy:
        """
        Returns the currently assigned payment strategy.
        :returns:IPaymentStrategy
        """
        return self._payment_method

    @payment_method.setter
    def payment_method(self, other: IPaymentStrategy):
        """
        Switches the payment strategy.
        :other:IPaymentStrategy
        :returns:None
        """
        if not isinstance(other, IPaymentStrategy):
            raise InvalidTypeError('A payment method must be of '
                                   'IPaymentStrategy class.')
        _LOG.debug(f'Payment method switched to {other.__class__.__name__}.')
        self._payment_method = other

    def checkout(self, amount) -> str:
        """
        Pays the amount using the current payment method.
        :amount:Union[Decimal, int, float, str]
        :returns:str
        """
        return self._payment_method.pay(self._to_decimal(amount))

    @staticmethod
    def _to_decimal(amount) -> Decimal:
        if isinstance(amount, Decimal):
            return amount
        try:
            return Decimal(str(amount))
        except InvalidOperation:
            raise InvalidValueError(f'Amount must be numeric, '
                                    f'not {amount!r}.')
