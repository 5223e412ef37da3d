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
from .registry import SharedInstanceRegistry
from .builder import (
    produce_house_builder, produce_directed_house, produce_custom_house,
    describe_house_builders, HOUSE_BUILDERS, HOUSE_STEPS
)
from .factory import produce_account_factory, ACCOUNT_FACTORIES
from .strategy import (
    produce_payment_strategy, register_paypal_payment, PAYMENT_METHODS
)
