import os
import shutil
import sys
import tempfile
import unittest

import yaml
from click.testing import CliRunner

from blueprints import __version__
from blueprints.core.constants import OK_RETURN_CODE, FAILED_RETURN_CODE
from blueprints.core.handlers import blueprints

WOODEN_DESCRIPTION = ('House with Wooden walls, Wooden roof, and '
                      'Wooden Pillars foundation.')
CONCRETE_DESCRIPTION = ('House with Concrete walls, Concrete roof, and '
                        'Concrete Slab foundation.')


class HandlersTestCase(unittest.TestCase):

    def setUp(self) -> None:
        self.runner = CliRunner()
        self.env = {'BLUEPRINTS_CONF': None}

    def invoke(self, *args):
        return self.runner.invoke(blueprints, list(args), env=self.env)


class GroupTest(HandlersTestCase):

    def test_no_arguments(self):
        """
        Tests that a bare invocation shows the usage, leaving the
        process arguments intact.
        """
        argv = list(sys.argv)
        result = self.invoke()
        self.assertIn('Usage', result.output)
        self.assertEqual(sys.argv, argv)

    def test_version(self):
        result = self.invoke('--version')
        self.assertEqual(result.exit_code, OK_RETURN_CODE, result.output)
        self.assertIn(__version__, result.output)


class HouseCommandTest(HandlersTestCase):

    def test_default_variant(self):
        result = self.invoke('house')
        self.assertEqual(result.exit_code, OK_RETURN_CODE, result.output)
        self.assertIn(WOODEN_DESCRIPTION, result.output)

    def test_director(self):
        result = self.invoke('house', '--variant', 'concrete')
        self.assertEqual(result.exit_code, OK_RETURN_CODE, result.output)
        self.assertIn(CONCRETE_DESCRIPTION, result.output)

    def test_custom_steps(self):
        result = self.invoke('house', '-V', 'concrete', '--step', 'walls',
                             '--step', 'roof')
        self.assertEqual(result.exit_code, OK_RETURN_CODE, result.output)
        self.assertIn('House with Concrete walls, Concrete roof, and None '
                      'foundation.', result.output)

    def test_unknown_variant(self):
        result = self.invoke('house', '--variant', 'straw')
        self.assertNotEqual(result.exit_code, OK_RETURN_CODE)


class VariantsCommandTest(HandlersTestCase):

    def test_listing(self):
        result = self.invoke('variants')
        self.assertEqual(result.exit_code, OK_RETURN_CODE, result.output)
        for value in ('wooden', 'concrete', 'Wooden Pillars',
                      'Concrete Slab'):
            self.assertIn(value, result.output)


class AccountCommandTest(HandlersTestCase):

    def test_default_type(self):
        result = self.invoke('account')
        self.assertEqual(result.exit_code, OK_RETURN_CODE, result.output)
        self.assertIn('Savings Account has been opened.', result.output)

    def test_current(self):
        result = self.invoke('account', '--type', 'current')
        self.assertIn('Current Account has been opened.', result.output)


class CheckoutCommandTest(HandlersTestCase):

    def test_no_payment(self):
        result = self.invoke('checkout', '--amount', '100.00')
        self.assertEqual(result.exit_code, OK_RETURN_CODE, result.output)
        self.assertIn('No payment method selected. Please choose one.',
                      result.output)

    def test_paypal(self):
        result = self.invoke('checkout', '-a', '80.50', '-m', 'paypal',
                             '--email', 'user@example.com')
        self.assertEqual(result.exit_code, OK_RETURN_CODE, result.output)
        self.assertIn('Paid 80.50 using PayPal account user@example.com',
                      result.output)

    def test_missing_detail(self):
        result = self.invoke('checkout', '-a', '10', '-m', 'bitcoin')
        self.assertEqual(result.exit_code, FAILED_RETURN_CODE)

    def test_non_numeric_amount(self):
        result = self.invoke('checkout', '--amount', 'plenty')
        self.assertEqual(result.exit_code, FAILED_RETURN_CODE)

    def test_missing_amount(self):
        result = self.invoke('checkout')
        self.assertNotEqual(result.exit_code, OK_RETURN_CODE)


class ConfiguredHandlersTest(HandlersTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.conf_dir = tempfile.mkdtemp()
        with open(os.path.join(self.conf_dir, 'blueprints.yml'), 'w') as file:
            yaml.dump({
                'house_variant': 'concrete',
                'account_type': 'current',
                'payment_method': 'credit_card',
                'credit_card_number': '1234-5678-9876-5432'
            }, file)
        self.env = {'BLUEPRINTS_CONF': self.conf_dir}

    def tearDown(self) -> None:
        shutil.rmtree(self.conf_dir, ignore_errors=True)

    def test_configured_variant(self):
        result = self.invoke('house')
        self.assertIn(CONCRETE_DESCRIPTION, result.output)

    def test_option_overrides_config(self):
        result = self.invoke('house', '--variant', 'wooden')
        self.assertIn(WOODEN_DESCRIPTION, result.output)

    def test_configured_account(self):
        result = self.invoke('account')
        self.assertIn('Current Account has been opened.', result.output)

    def test_configured_payment(self):
        result = self.invoke('checkout', '--amount', '150.00')
        self.assertEqual(result.exit_code, OK_RETURN_CODE, result.output)
        self.assertIn('Paid 150.00 using Credit Card 1234-5678-9876-5432',
                      result.output)


if __name__ == '__main__':
    unittest.main()
