from abc import ABC, abstractmethod


class IHouseBuilder(ABC):

    @abstractmethod
    def _reset(self):
        ...

    @abstractmethod
    def build_walls(self) -> 'IHouseBuilder':
        ...

    @abstractmethod
    def build_roof(self) -> 'IHouseBuilder':
        ...

    @abstractmethod
    def build_foundation(self) -> 'IHouseBuilder':
        ...

    @property
    @abstractmethod
    def product(self):
        ...
