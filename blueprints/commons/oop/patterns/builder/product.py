from typing import Union, Type

WALLS = 'walls'
ROOF = 'roof'
FOUNDATION = 'foundation'

HOUSE_ATTRIBUTES = (WALLS, ROOF, FOUNDATION)


class House:
    """
    A product assembled by a house builder. Each attribute stays None
    until the respective construction step has been invoked.

    Attributes:
        - walls:Union[str, Type[None]]: material of the walls.
        - roof:Union[str, Type[None]]: material of the roof.
        - foundation:Union[str, Type[None]]: kind of the foundation.
    """

    def __init__(self, walls: Union[str, Type[None]] = None,
                 roof: Union[str, Type[None]] = None,
                 foundation: Union[str, Type[None]] = None):
        self.walls = walls
        self.roof = roof
        self.foundation = foundation

    def to_dict(self) -> dict:
        return {attribute: getattr(self, attribute)
                for attribute in HOUSE_ATTRIBUTES}

    def describe(self) -> str:
        """
        Returns a human readable description of the house.
        :returns:str
        """
        return (f'House with {self.walls} walls, {self.roof} roof, '
                f'and {self.foundation} foundation.')

    def __eq__(self, other):
        if not isinstance(other, House):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        attributes = ', '.join(f'{key}={value!r}'
                               for key, value in self.to_dict().items())
        return f'{self.__class__.__name__}({attributes})'
