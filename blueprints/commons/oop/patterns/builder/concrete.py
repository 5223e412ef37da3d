from . import AbstractHouseBuilder


class WoodenHouseBuilder(AbstractHouseBuilder):
    """
    A concrete Builder class, which assembles a house out of wood,
    standing on wooden pillars.
    """
    WALLS = 'Wooden'
    ROOF = 'Wooden'
    FOUNDATION = 'Wooden Pillars'


class ConcreteHouseBuilder(AbstractHouseBuilder):
    """
    A concrete Builder class, which assembles a house out of concrete,
    standing on a concrete slab.
    """
    WALLS = 'Concrete'
    ROOF = 'Concrete'
    FOUNDATION = 'Concrete Slab'
