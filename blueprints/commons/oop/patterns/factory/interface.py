from abc import ABC, abstractmethod


class IBankAccount(ABC):

    @property
    @abstractmethod
    def account_type(self) -> str:
        ...

    @property
    @abstractmethod
    def opened(self) -> bool:
        ...

    @abstractmethod
    def open_account(self) -> str:
        ...


class IBankAccountFactory(ABC):

    @abstractmethod
    def create_account(self) -> IBankAccount:
        """
        Meant to produce a new bank account instance.
        """
