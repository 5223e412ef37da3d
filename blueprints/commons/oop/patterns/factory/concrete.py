from . import AbstractBankAccount, AbstractBankAccountFactory, IBankAccount


class SavingsAccount(AbstractBankAccount):

    @property
    def account_type(self) -> str:
        return 'Savings'


class CurrentAccount(AbstractBankAccount):

    @property
    def account_type(self) -> str:
        return 'Current'


class SavingsAccountFactory(AbstractBankAccountFactory):
    def _produce(self) -> IBankAccount:
        return SavingsAccount()


class CurrentAccountFactory(AbstractBankAccountFactory):
    def _produce(self) -> IBankAccount:
        return CurrentAccount()
