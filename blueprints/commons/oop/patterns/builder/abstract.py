from . import IHouseBuilder, House
from blueprints.commons.log_helper import get_logger

from abc import abstractmethod

from .product import WALLS, ROOF, FOUNDATION

_LOG = get_logger(__name__)


class AbstractHouseBuilder(IHouseBuilder):
    """
    Retains a single in-progress House, which every step mutates
    attribute-wise. Concrete variants only declare the literal value
    each step assigns, by the means of the WALLS, ROOF and FOUNDATION
    class attributes.
    """

    def __init__(self):
        self._reset()

    @property
    @abstractmethod
    def WALLS(self) -> str:
        ...

    @property
    @abstractmethod
    def ROOF(self) -> str:
        ...

    @property
    @abstractmethod
    def FOUNDATION(self) -> str:
        ...

    def _reset(self):
        """
        Resets a builder to an empty house.
        """
        self._house = House()

    def build_walls(self) -> IHouseBuilder:
        return self._assign(WALLS, self.WALLS)

    def build_roof(self) -> IHouseBuilder:
        return self._assign(ROOF, self.ROOF)

    def build_foundation(self) -> IHouseBuilder:
        return self._assign(FOUNDATION, self.FOUNDATION)

    @property
    def product(self) -> House:
        """
        Produces the house assembled so far, whether complete or not,
        and resets the builder for the next construction.
        :returns:House
        """
        house = self._house
        self._reset()
        _LOG.debug(f'{self.__class__.__name__} has produced {house!r}.')
        return house

    def _assign(self, attribute: str, value: str) -> IHouseBuilder:
        """
        Assigns a value to an attribute of the in-progress house,
        overwriting any previously assigned one.
        :attribute:str
        :value:str
        :returns:IHouseBuilder
        """
        setattr(self._house, attribute, value)
        _LOG.debug(f'{self.__class__.__name__} has set `{attribute}` '
                   f'to {value!r}.')
        return self
