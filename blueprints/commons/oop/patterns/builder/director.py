from . import IHouseBuilder, House
from blueprints.exceptions import InvalidTypeError


class HouseDirector:
    """
    Encapsulates the order of construction steps, needed to produce
    a standard house, out of any builder it has been given.
    The builder is referenced, not owned: the director never resets
    nor replaces it.
    """

    def __init__(self, builder: IHouseBuilder):
        if not isinstance(builder, IHouseBuilder):
            raise InvalidTypeError('A builder must be of IHouseBuilder class, '
                                   f'not {type(builder).__name__}.')
        self._builder = builder

    @property
    def builder(self) -> IHouseBuilder:
        return self._builder

    def construct_house(self) -> House:
        """
        Lays the foundation, then the walls, then the roof and hands out
        the resulting product.
        :returns:House
        """
        return self._builder.build_foundation() \
            .build_walls() \
            .build_roof() \
            .product
