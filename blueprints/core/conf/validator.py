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
import re

from blueprints.commons.log_helper import get_user_logger
from blueprints.commons.oop.complements import (
    HOUSE_BUILDERS, ACCOUNT_FACTORIES, PAYMENT_METHODS
)

REQUIRED = 'required'
VALIDATOR = 'validator'

HOUSE_VARIANT_CFG = 'house_variant'
ACCOUNT_TYPE_CFG = 'account_type'
PAYMENT_METHOD_CFG = 'payment_method'
CREDIT_CARD_NUMBER_CFG = 'credit_card_number'
PAYPAL_EMAIL_CFG = 'paypal_email'
BITCOIN_WALLET_ADDRESS_CFG = 'bitcoin_wallet_address'

CREDIT_CARD_NUMBER_PATTERN = r'^\d{4}(-?\d{4}){3}$'
EMAIL_PATTERN = r'^[^@\s]+@[^@\s]+\.[^@\s]+$'
BITCOIN_WALLET_ADDRESS_PATTERN = r'^[A-Za-z0-9]{20,90}$'

REQUIRED_PARAM_ERROR = 'The required key {} is missing'
UNKNOWN_PARAM_MESSAGE = 'Unknown parameter(s) in the configuration file: {}'

USER_LOG = get_user_logger()


class ConfigValidator:

    def __init__(self, config_dict) -> None:
        self._config_dict = config_dict
        self._fields_validators_mapping = {
            HOUSE_VARIANT_CFG: {
                REQUIRED: False,
                VALIDATOR: self._validate_house_variant},
            ACCOUNT_TYPE_CFG: {
                REQUIRED: False,
                VALIDATOR: self._validate_account_type},
            PAYMENT_METHOD_CFG: {
                REQUIRED: False,
                VALIDATOR: self._validate_payment_method},
            CREDIT_CARD_NUMBER_CFG: {
                REQUIRED: False,
                VALIDATOR: self._validate_credit_card_number},
            PAYPAL_EMAIL_CFG: {
                REQUIRED: False,
                VALIDATOR: self._validate_paypal_email},
            BITCOIN_WALLET_ADDRESS_CFG: {
                REQUIRED: False,
                VALIDATOR: self._validate_bitcoin_wallet_address}
        }

    def validate(self):
        error_messages = {}
        unknown_params = set(self._config_dict.keys()) - set(
            self._fields_validators_mapping.keys())
        if unknown_params:
            USER_LOG.warning(UNKNOWN_PARAM_MESSAGE.format(unknown_params))

        for key, validation_rules in self._fields_validators_mapping.items():
            value = self._config_dict.get(key)
            is_required = validation_rules.get(REQUIRED)
            if is_required and not value:
                error_messages[key] = REQUIRED_PARAM_ERROR.format(key)
                continue
            if value is not None:
                validator_func = validation_rules.get(VALIDATOR)
                validation_errors = validator_func(key, value)
                if validation_errors:
                    error_messages[key] = validation_errors
        return error_messages

    def _validate_house_variant(self, key, value):
        return self._validate_choice(key, value, list(HOUSE_BUILDERS))

    def _validate_account_type(self, key, value):
        return self._validate_choice(key, value, list(ACCOUNT_FACTORIES))

    def _validate_payment_method(self, key, value):
        errors = self._validate_choice(key, value, list(PAYMENT_METHODS))
        if errors:
            return errors
        required_detail = {
            'credit_card': CREDIT_CARD_NUMBER_CFG,
            'paypal': PAYPAL_EMAIL_CFG,
            'bitcoin': BITCOIN_WALLET_ADDRESS_CFG
        }.get(value.lower())
        if required_detail and not self._config_dict.get(required_detail):
            return [f'{key} `{value}` requires {required_detail} '
                    f'to be specified']

    def _validate_credit_card_number(self, key, value):
        return self._validate_pattern(key, value, CREDIT_CARD_NUMBER_PATTERN)

    def _validate_paypal_email(self, key, value):
        return self._validate_pattern(key, value, EMAIL_PATTERN)

    def _validate_bitcoin_wallet_address(self, key, value):
        return self._validate_pattern(key, value,
                                      BITCOIN_WALLET_ADDRESS_PATTERN)

    def _validate_choice(self, key, value, choices):
        str_error = self._assert_value_is_str(key, value)
        if str_error:
            return [str_error]
        if value.lower() not in choices:
            return [f'{key} value must be one of {choices}, but is {value}']

    def _validate_pattern(self, key, value, pattern):
        str_error = self._assert_value_is_str(key, value)
        if str_error:
            return [str_error]
        if not re.match(pattern, value):
            return [f'{key} value {value} does not match '
                    f'the pattern {pattern}']

    @staticmethod
    def _assert_value_is_str(key, value):
        if type(value) != str:
            return f'{key} must be type of string, not {type(value)}'
