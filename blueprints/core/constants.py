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

# == RETURN CODES =============================================================
OK_RETURN_CODE = 0
FAILED_RETURN_CODE = 1

# == COMMANDS =================================================================
HOUSE_ACTION = 'house'
VARIANTS_ACTION = 'variants'
ACCOUNT_ACTION = 'account'
CHECKOUT_ACTION = 'checkout'

# == CONTEXT ==================================================================
CONFIG_CONTEXT_KEY = 'config'
REGISTRY_CONTEXT_KEY = 'registry'
