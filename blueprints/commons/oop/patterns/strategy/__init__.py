from .interface import IPaymentStrategy, IPaymentContext
from .concrete import (
    CreditCardPayment, PayPalPayment, BitcoinPayment, NoPayment,
    ShoppingCart
)
