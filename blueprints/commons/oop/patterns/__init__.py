from .builder import (
    IHouseBuilder, House, AbstractHouseBuilder, WoodenHouseBuilder,
    ConcreteHouseBuilder, HouseDirector
)
from .factory import (
    IBankAccount, IBankAccountFactory, AbstractBankAccount,
    AbstractBankAccountFactory, SavingsAccount, CurrentAccount,
    SavingsAccountFactory, CurrentAccountFactory
)
from .strategy import (
    IPaymentStrategy, IPaymentContext, CreditCardPayment, PayPalPayment,
    BitcoinPayment, NoPayment, ShoppingCart
)
