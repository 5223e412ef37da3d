import unittest
from decimal import Decimal

from blueprints.commons.oop.patterns import (
    ShoppingCart, NoPayment, CreditCardPayment, PayPalPayment,
    BitcoinPayment
)
from blueprints.exceptions import InvalidTypeError, InvalidValueError


class ShoppingCartTest(unittest.TestCase):

    def setUp(self) -> None:
        self.cart = ShoppingCart()

    def test_default_strategy(self):
        self.assertIsInstance(self.cart.payment_method, NoPayment)
        self.assertEqual(self.cart.checkout(Decimal('100.00')),
                         'No payment method selected. Please choose one.')

    def test_switching_strategies(self):
        """
        Tests that the checkout follows the strategy assigned last.
        """
        self.cart.payment_method = CreditCardPayment('1234-5678-9876-5432')
        self.assertEqual(self.cart.checkout(Decimal('150.00')),
                         'Paid 150.00 using Credit Card 1234-5678-9876-5432')

        self.cart.payment_method = PayPalPayment('user@example.com')
        self.assertEqual(self.cart.checkout('80.50'),
                         'Paid 80.50 using PayPal account user@example.com')

        self.cart.payment_method = BitcoinPayment('1AaBbCcDdEeFfGg123456')
        self.assertEqual(
            self.cart.checkout(200.75),
            'Paid 200.75 using Bitcoin wallet 1AaBbCcDdEeFfGg123456'
        )

    def test_constructor_injection(self):
        strategy = PayPalPayment('user@example.com')
        self.assertIs(ShoppingCart(strategy).payment_method, strategy)

    def test_improper_strategy(self):
        with self.assertRaises(InvalidTypeError):
            self.cart.payment_method = 'paypal'
        self.assertIsInstance(self.cart.payment_method, NoPayment)

    def test_falsy_improper_strategy(self):
        self.assertRaises(InvalidTypeError, ShoppingCart, '')
        self.assertRaises(InvalidTypeError, ShoppingCart, 0)

    def test_non_numeric_amount(self):
        self.assertRaises(InvalidValueError, self.cart.checkout, 'plenty')


if __name__ == '__main__':
    unittest.main()
