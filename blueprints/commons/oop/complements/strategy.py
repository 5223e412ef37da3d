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

from ..patterns import (
    IPaymentStrategy, CreditCardPayment, PayPalPayment, BitcoinPayment,
    NoPayment
)
from .registry import SharedInstanceRegistry
from blueprints.exceptions import InvalidValueError

from typing import Union, Type

NO_PAYMENT = 'none'
CREDIT_CARD_PAYMENT = 'credit_card'
PAYPAL_PAYMENT = 'paypal'
BITCOIN_PAYMENT = 'bitcoin'

PAYMENT_METHODS = (NO_PAYMENT, CREDIT_CARD_PAYMENT, PAYPAL_PAYMENT,
                   BITCOIN_PAYMENT)

PAYMENT_DETAILS = {
    CREDIT_CARD_PAYMENT: 'card_number',
    PAYPAL_PAYMENT: 'email',
    BITCOIN_PAYMENT: 'wallet_address'
}


def register_paypal_payment(registry: SharedInstanceRegistry,
                            email: str) -> SharedInstanceRegistry:
    """
    Registers the single PayPal payment strategy of an application,
    given none has been registered yet.
    :registry:SharedInstanceRegistry
    :email:str
    :return:SharedInstanceRegistry
    """
    if PAYPAL_PAYMENT not in registry:
        registry.register(PAYPAL_PAYMENT, lambda: PayPalPayment(email))
    return registry


def produce_payment_strategy(
        method: str,
        registry: Union[SharedInstanceRegistry, Type[None]] = None,
        **details) -> IPaymentStrategy:
    """
    Produces a payment strategy of the named method, out of the
    respective detail: `card_number`, `email` or `wallet_address`.
    The PayPal strategy is resolved through the registry, given one
    is provided, so that every consumer shares the same instance.
    :method:str
    :registry:Union[SharedInstanceRegistry, Type[None]]
    :return:IPaymentStrategy
    """
    method = str(method).lower()
    if method not in PAYMENT_METHODS:
        raise InvalidValueError(f'Unknown payment method `{method}`, '
                                f'must be one of {list(PAYMENT_METHODS)}.')
    if method == NO_PAYMENT:
        return NoPayment()

    detail_name = PAYMENT_DETAILS[method]
    detail = details.get(detail_name)
    if not detail and not (method == PAYPAL_PAYMENT and registry
                           and PAYPAL_PAYMENT in registry):
        raise InvalidValueError(f'Payment method `{method}` requires '
                                f'`{detail_name}` to be provided.')

    if method == CREDIT_CARD_PAYMENT:
        return CreditCardPayment(detail)
    if method == BITCOIN_PAYMENT:
        return BitcoinPayment(detail)
    if registry is None:
        return PayPalPayment(detail)
    return register_paypal_payment(registry, detail).get(PAYPAL_PAYMENT)
