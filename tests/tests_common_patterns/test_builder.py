import unittest
from itertools import permutations

from blueprints.commons.oop.patterns import (
    IHouseBuilder, House, HouseDirector, AbstractHouseBuilder,
    WoodenHouseBuilder,
    ConcreteHouseBuilder
)
from blueprints.exceptions import InvalidTypeError

WOODEN_HOUSE = House(walls='Wooden', roof='Wooden',
                     foundation='Wooden Pillars')
CONCRETE_HOUSE = House(walls='Concrete', roof='Concrete',
                       foundation='Concrete Slab')


class HouseBuilderProductionTest(unittest.TestCase):
    """
    Common behaviour every house builder variant must adhere to.
    """
    builder_class = None
    expected = None

    def setUp(self) -> None:
        if self.builder_class is None:
            self.skipTest('Abstract test case.')
        self.builder = self.builder_class()

    def test_empty_product(self):
        """
        Tests that a product retrieved before any step is empty.
        """
        self.assertEqual(self.builder.product, House())

    def test_order_independence(self):
        """
        Tests that every permutation of all steps yields the same house.
        """
        steps = ('build_walls', 'build_roof', 'build_foundation')
        for order in permutations(steps):
            for step in order:
                getattr(self.builder, step)()
            self.assertEqual(self.builder.product, self.expected, order)

    def test_fluent_chaining(self):
        """
        Tests that each step returns the builder itself.
        """
        self.assertIs(self.builder.build_walls(), self.builder)
        self.assertIs(self.builder.build_roof(), self.builder)
        self.assertIs(self.builder.build_foundation(), self.builder)

    def test_reset_after_production(self):
        """
        Tests that the builder starts anew, once a product is handed out.
        """
        self.builder.build_walls().build_roof().build_foundation()
        first = self.builder.product
        second = self.builder.product
        self.assertIsNot(first, second)
        self.assertEqual(first, self.expected)
        self.assertEqual(second, House())

    def test_partial_product(self):
        """
        Tests that a subset of steps yields a partially assembled house.
        """
        house = self.builder.build_roof().product
        self.assertEqual(house.roof, self.expected.roof)
        self.assertIsNone(house.walls)
        self.assertIsNone(house.foundation)

    def test_repeated_step(self):
        """
        Tests that invoking a step more than once is harmless.
        """
        house = self.builder.build_walls().build_walls().product
        self.assertEqual(house.walls, self.expected.walls)

    def test_director_equivalence(self):
        """
        Tests that a director produces the same house as invoking
        the steps directly.
        """
        directed = HouseDirector(self.builder_class()).construct_house()
        direct = self.builder.build_foundation().build_walls() \
            .build_roof().product
        self.assertEqual(directed, direct)


class WoodenHouseBuilderTest(HouseBuilderProductionTest):
    builder_class = WoodenHouseBuilder
    expected = WOODEN_HOUSE

    def test_wooden_scenario(self):
        house = self.builder.build_foundation().build_walls() \
            .build_roof().product
        self.assertEqual(house.to_dict(), {
            'walls': 'Wooden',
            'roof': 'Wooden',
            'foundation': 'Wooden Pillars'
        })


class ConcreteHouseBuilderTest(HouseBuilderProductionTest):
    builder_class = ConcreteHouseBuilder
    expected = CONCRETE_HOUSE


class HouseDirectorTest(unittest.TestCase):

    def test_concrete_scenario(self):
        house = HouseDirector(ConcreteHouseBuilder()).construct_house()
        self.assertEqual(house.to_dict(), {
            'walls': 'Concrete',
            'roof': 'Concrete',
            'foundation': 'Concrete Slab'
        })

    def test_abstract_builder(self):
        """
        Tests that the abstract builder, assigning no literals, cannot
        stand in for a variant.
        """
        self.assertRaises(TypeError, AbstractHouseBuilder)

    def test_missing_builder(self):
        self.assertRaises(InvalidTypeError, HouseDirector, None)

    def test_improper_builder(self):
        self.assertRaises(InvalidTypeError, HouseDirector, House())

    def test_builder_retained(self):
        """
        Tests that the director keeps the very same builder and may be
        reused for consecutive constructions.
        """
        builder = WoodenHouseBuilder()
        director = HouseDirector(builder)
        first = director.construct_house()
        second = director.construct_house()
        self.assertIs(director.builder, builder)
        self.assertIsInstance(director.builder, IHouseBuilder)
        self.assertIsNot(first, second)
        self.assertEqual(first, second)

    def test_step_order(self):
        """
        Tests the order the director invokes the steps in.
        """
        calls = []

        class RecordingBuilder(WoodenHouseBuilder):
            def _assign(self, attribute, value):
                calls.append(attribute)
                return super()._assign(attribute, value)

        HouseDirector(RecordingBuilder()).construct_house()
        self.assertEqual(calls, ['foundation', 'walls', 'roof'])


class HouseTest(unittest.TestCase):

    def test_describe(self):
        self.assertEqual(
            WOODEN_HOUSE.describe(),
            'House with Wooden walls, Wooden roof, and Wooden Pillars '
            'foundation.'
        )

    def test_inequality(self):
        self.assertNotEqual(WOODEN_HOUSE, CONCRETE_HOUSE)
        self.assertNotEqual(WOODEN_HOUSE, WOODEN_HOUSE.to_dict())


if __name__ == '__main__':
    unittest.main()
