"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
import click
from tabulate import tabulate

from blueprints import __version__
from blueprints.commons.log_helper import (configure_logging, get_logger,
                                           get_user_logger)
from blueprints.commons.oop.complements import (
    SharedInstanceRegistry, produce_house_builder, produce_directed_house,
    produce_custom_house, describe_house_builders, produce_account_factory,
    produce_payment_strategy, HOUSE_BUILDERS, HOUSE_STEPS,
    ACCOUNT_FACTORIES, PAYMENT_METHODS
)
from blueprints.commons.oop.patterns import ShoppingCart
from blueprints.core import initialize_config
from blueprints.core.constants import (HOUSE_ACTION, VARIANTS_ACTION,
                                       ACCOUNT_ACTION, CHECKOUT_ACTION,
                                       OK_RETURN_CODE, CONFIG_CONTEXT_KEY,
                                       REGISTRY_CONTEXT_KEY)
from blueprints.core.decorators import return_code_manager
from blueprints.core.helper import verbose_option, param_to_lower

_LOG = get_logger(__name__)
USER_LOG = get_user_logger()


@click.group(name='blueprints')
@return_code_manager
@click.version_option(version=__version__)
@click.pass_context
def blueprints(ctx):
    configure_logging()
    config = initialize_config()
    if config.config_path:
        USER_LOG.info('Configuration used: ' + config.config_path)
    ctx.obj = {
        CONFIG_CONTEXT_KEY: config,
        REGISTRY_CONTEXT_KEY: SharedInstanceRegistry()
    }


@blueprints.command(name=HOUSE_ACTION)
@return_code_manager
@click.option('--variant', '-V',
              type=click.Choice(list(HOUSE_BUILDERS), case_sensitive=False),
              callback=param_to_lower,
              help='Builder variant to construct the house with. '
                   'Defaults to the configured one or wooden')
@click.option('--step', '-s', 'steps', multiple=True,
              type=click.Choice(HOUSE_STEPS, case_sensitive=False),
              callback=param_to_lower,
              help='Construction step to invoke directly on the builder, '
                   'in the given order. Multiple values allowed. If none '
                   'specified, the director builds a standard house')
@verbose_option
@click.pass_context
def house(ctx, variant, steps):
    """
    Constructs a house step by step
    """
    config = ctx.obj[CONFIG_CONTEXT_KEY]
    variant = variant or config.house_variant
    builder = produce_house_builder(variant)
    if steps:
        USER_LOG.info(f'Building a {variant} house without a director, '
                      f'steps: {", ".join(steps)}')
        product = produce_custom_house(builder, steps)
    else:
        USER_LOG.info(f'Building a {variant} house using a director')
        product = produce_directed_house(builder)
    click.echo(product.describe())
    return OK_RETURN_CODE


@blueprints.command(name=VARIANTS_ACTION)
@return_code_manager
@verbose_option
def variants():
    """
    Lists the house builder variants
    """
    click.echo(tabulate(describe_house_builders(), headers='keys'))
    return OK_RETURN_CODE


@blueprints.command(name=ACCOUNT_ACTION)
@return_code_manager
@click.option('--type', '-t', 'account_type',
              type=click.Choice(list(ACCOUNT_FACTORIES),
                                case_sensitive=False),
              callback=param_to_lower,
              help='Type of the account to open. Defaults to the '
                   'configured one or savings')
@verbose_option
@click.pass_context
def account(ctx, account_type):
    """
    Opens a bank account using a factory method
    """
    config = ctx.obj[CONFIG_CONTEXT_KEY]
    factory = produce_account_factory(account_type or config.account_type)
    bank_account = factory.create_account()
    click.echo(bank_account.open_account())
    return OK_RETURN_CODE


@blueprints.command(name=CHECKOUT_ACTION)
@return_code_manager
@click.option('--amount', '-a', required=True, type=str,
              help='Amount to pay')
@click.option('--method', '-m',
              type=click.Choice(PAYMENT_METHODS, case_sensitive=False),
              callback=param_to_lower,
              help='Payment method. Defaults to the configured one or none')
@click.option('--card-number', type=str,
              help='Credit card number, used by the credit_card method')
@click.option('--email', type=str,
              help='PayPal account email, used by the paypal method')
@click.option('--wallet-address', type=str,
              help='Bitcoin wallet address, used by the bitcoin method')
@verbose_option
@click.pass_context
def checkout(ctx, amount, method, card_number, email, wallet_address):
    """
    Checks out a shopping cart using a payment strategy
    """
    config = ctx.obj[CONFIG_CONTEXT_KEY]
    registry = ctx.obj[REGISTRY_CONTEXT_KEY]
    strategy = produce_payment_strategy(
        method or config.payment_method, registry,
        card_number=card_number or config.credit_card_number,
        email=email or config.paypal_email,
        wallet_address=wallet_address or config.bitcoin_wallet_address
    )
    cart = ShoppingCart(strategy)
    _LOG.debug(f'Checking out {amount} with {strategy.__class__.__name__}')
    click.echo(cart.checkout(amount))
    return OK_RETURN_CODE
