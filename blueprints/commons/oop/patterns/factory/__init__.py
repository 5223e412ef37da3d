from .interface import IBankAccount, IBankAccountFactory
from .abstract import AbstractBankAccount, AbstractBankAccountFactory
from .concrete import (
    SavingsAccount, CurrentAccount, SavingsAccountFactory,
    CurrentAccountFactory
)
