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
from blueprints.commons.log_helper import get_logger
from blueprints.exceptions import InvalidValueError

from typing import Callable, Dict, Any

_LOG = get_logger(__name__)


class SharedInstanceRegistry:
    """
    Holds instances, which must be shared by every consumer, constructing
    each one lazily upon the first request. Whoever creates the registry
    owns the lifetime of the instances and passes the registry on
    explicitly.

    Public methods:
        - register(self, name:str, factory:Callable): Records a
            zero-argument factory under a name.
        - get(self, name:str): Returns the single instance of a name,
            constructing it at the first call.
    """

    def __init__(self):
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._instances: Dict[str, Any] = {}

    def register(self, name: str, factory: Callable[[], Any]):
        """
        Records a factory under a name, refusing to overwrite one.
        :name:str
        :factory:Callable
        :returns:None
        """
        if not callable(factory):
            raise InvalidValueError(f'A factory of `{name}` must be callable.')
        if name in self._factories:
            raise InvalidValueError(f'`{name}` has already been registered.')
        self._factories[name] = factory

    def get(self, name: str) -> Any:
        """
        Returns the shared instance of a name.
        :name:str
        :returns:Any
        """
        if name not in self._factories:
            raise InvalidValueError(f'`{name}` has not been registered.')
        if name not in self._instances:
            _LOG.debug(f'Constructing the shared instance of `{name}`.')
            self._instances[name] = self._factories[name]()
        return self._instances[name]

    def __contains__(self, name: str) -> bool:
        return name in self._factories
