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
    IBankAccountFactory, SavingsAccountFactory, CurrentAccountFactory
)
from blueprints.exceptions import InvalidValueError

from typing import Dict, Type

SAVINGS_ACCOUNT = 'savings'
CURRENT_ACCOUNT = 'current'

ACCOUNT_FACTORIES: Dict[str, Type[IBankAccountFactory]] = {
    SAVINGS_ACCOUNT: SavingsAccountFactory,
    CURRENT_ACCOUNT: CurrentAccountFactory
}


def produce_account_factory(account_type: str) -> IBankAccountFactory:
    """
    Produces a factory of the named account type.
    :account_type:str
    :return:IBankAccountFactory
    """
    factory_class = ACCOUNT_FACTORIES.get(str(account_type).lower())
    if not factory_class:
        raise InvalidValueError(f'Unknown account type `{account_type}`, '
                                f'must be one of {list(ACCOUNT_FACTORIES)}.')
    return factory_class()
