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

from blueprints.commons.log_helper import get_logger
from blueprints.core.conf.processor import ConfigHolder

_LOG = get_logger(__name__)

CONF_PATH_ENV = 'BLUEPRINTS_CONF'


def initialize_config(conf_path=None) -> ConfigHolder:
    """
    Loads the configuration out of the given directory, or the one set in
    the BLUEPRINTS_CONF environment variable, falling back to an empty
    configuration, given neither is set.
    :rtype: ConfigHolder
    """
    conf_path = conf_path or os.environ.get(CONF_PATH_ENV)
    if not conf_path:
        _LOG.debug(f'{CONF_PATH_ENV} is not set, using default configuration')
        return ConfigHolder()
    return ConfigHolder(conf_path)
