from . import IBankAccount, IBankAccountFactory
from blueprints.commons.log_helper import get_logger

from abc import abstractmethod

_LOG = get_logger(__name__)


class AbstractBankAccount(IBankAccount):
    def __init__(self):
        self._opened = False

    @property
    def opened(self) -> bool:
        return self._opened

    def open_account(self) -> str:
        """
        Opens the account, returning a confirmation message.
        :returns:str
        """
        self._opened = True
        return f'{self.account_type} Account has been opened.'


class AbstractBankAccountFactory(IBankAccountFactory):

    def create_account(self) -> IBankAccount:
        account = self._produce()
        _LOG.debug(f'{self.__class__.__name__} has created '
                   f'{account.__class__.__name__}.')
        return account

    @abstractmethod
    def _produce(self) -> IBankAccount:
        """
        The factory method, which concrete creators override to decide
        upon the class of the account.
        """
