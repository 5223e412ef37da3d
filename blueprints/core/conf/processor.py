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
import os
from typing import Union

import yaml

from blueprints.commons.log_helper import get_logger
from blueprints.core.conf.validator import (
    ConfigValidator, HOUSE_VARIANT_CFG, ACCOUNT_TYPE_CFG, PAYMENT_METHOD_CFG,
    CREDIT_CARD_NUMBER_CFG, PAYPAL_EMAIL_CFG, BITCOIN_WALLET_ADDRESS_CFG
)
from blueprints.exceptions import ConfigurationError

CONFIG_FILE_NAME = 'blueprints.yml'

DEFAULT_HOUSE_VARIANT = 'wooden'
DEFAULT_ACCOUNT_TYPE = 'savings'
DEFAULT_PAYMENT_METHOD = 'none'

_LOG = get_logger(__name__)


class ConfigHolder:
    def __init__(self, dir_path: Union[str, None] = None):
        self._config_path = None
        self._config_dict = {}
        if dir_path:
            self._init_yaml_config(dir_path)

    def _assert_no_errors(self, errors: dict):
        if errors:
            raise ConfigurationError(f'The following error occurred '
                                     f'while {self._config_path} '
                                     f'parsing: {errors}')

    def _init_yaml_config(self, dir_path):
        con_path_yml = os.path.join(dir_path, CONFIG_FILE_NAME)
        con_path_yaml = os.path.join(dir_path,
                                     CONFIG_FILE_NAME.replace('yml', 'yaml'))
        con_path = con_path_yml if \
            os.path.exists(con_path_yml) else con_path_yaml
        if not os.path.isfile(con_path):
            raise ConfigurationError(
                f'{CONFIG_FILE_NAME} does not exist inside {dir_path} folder')
        self._config_path = con_path

        config_content = load_yaml_file_content(file_path=con_path) or {}
        if not isinstance(config_content, dict):
            raise ConfigurationError(f'{con_path} must contain a mapping')
        validator = ConfigValidator(config_content)
        self._assert_no_errors(validator.validate())

        _LOG.debug(f'Configuration has been loaded from {con_path}')
        self._config_dict = config_content

    def _resolve_variable(self, variable_name, default=None):
        value = self._config_dict.get(variable_name)
        return default if value is None else value

    @property
    def config_path(self):
        return self._config_path

    @property
    def house_variant(self) -> str:
        return self._resolve_variable(
            HOUSE_VARIANT_CFG, DEFAULT_HOUSE_VARIANT).lower()

    @property
    def account_type(self) -> str:
        return self._resolve_variable(
            ACCOUNT_TYPE_CFG, DEFAULT_ACCOUNT_TYPE).lower()

    @property
    def payment_method(self) -> str:
        return self._resolve_variable(
            PAYMENT_METHOD_CFG, DEFAULT_PAYMENT_METHOD).lower()

    @property
    def credit_card_number(self):
        return self._resolve_variable(CREDIT_CARD_NUMBER_CFG)

    @property
    def paypal_email(self):
        return self._resolve_variable(PAYPAL_EMAIL_CFG)

    @property
    def bitcoin_wallet_address(self):
        return self._resolve_variable(BITCOIN_WALLET_ADDRESS_CFG)


def load_yaml_file_content(file_path):
    if not os.path.isfile(file_path):
        raise ConfigurationError(f'There is no file by path: {file_path}')
    with open(file_path, 'r') as yaml_file:
        return yaml.load(yaml_file, Loader=yaml.FullLoader)
