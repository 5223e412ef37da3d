from .interface import IHouseBuilder
from .product import House, HOUSE_ATTRIBUTES, WALLS, ROOF, FOUNDATION
from .abstract import AbstractHouseBuilder
from .concrete import WoodenHouseBuilder, ConcreteHouseBuilder
from .director import HouseDirector
