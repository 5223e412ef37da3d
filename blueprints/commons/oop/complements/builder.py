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
    IHouseBuilder, House, HouseDirector, WoodenHouseBuilder,
    ConcreteHouseBuilder
)
from ..patterns.builder import WALLS, ROOF, FOUNDATION
from blueprints.exceptions import InvalidValueError

from typing import Iterable, Dict, Type

WOODEN_VARIANT = 'wooden'
CONCRETE_VARIANT = 'concrete'

HOUSE_BUILDERS: Dict[str, Type[IHouseBuilder]] = {
    WOODEN_VARIANT: WoodenHouseBuilder,
    CONCRETE_VARIANT: ConcreteHouseBuilder
}

HOUSE_STEPS = (FOUNDATION, WALLS, ROOF)


def produce_house_builder(variant: str) -> IHouseBuilder:
    """
    Produces a new builder of the named variant.
    :variant:str
    :return:IHouseBuilder
    """
    builder_class = HOUSE_BUILDERS.get(str(variant).lower())
    if not builder_class:
        raise InvalidValueError(f'Unknown house variant `{variant}`, '
                                f'must be one of {list(HOUSE_BUILDERS)}.')
    return builder_class()


def produce_directed_house(builder: IHouseBuilder) -> House:
    """
    Produces a standard house, delegating the order of steps to a director.
    :builder:IHouseBuilder
    :return:House
    """
    return HouseDirector(builder).construct_house()


def produce_custom_house(builder: IHouseBuilder,
                         steps: Iterable[str]) -> House:
    """
    Produces a house out of the named steps, invoked in the given order.
    Any subset of the steps is acceptable, including none.
    :builder:IHouseBuilder
    :steps:Iterable[str]
    :return:House
    """
    for step in steps:
        if step not in HOUSE_STEPS:
            raise InvalidValueError(f'Unknown construction step `{step}`, '
                                    f'must be one of {list(HOUSE_STEPS)}.')
        getattr(builder, f'build_{step}')()
    return builder.product


def describe_house_builders() -> list:
    """
    Describes each known variant by the values its steps assign.
    :return:list
    """
    return [
        {'variant': variant,
         **HouseDirector(builder_class()).construct_house().to_dict()}
        for variant, builder_class in HOUSE_BUILDERS.items()
    ]
