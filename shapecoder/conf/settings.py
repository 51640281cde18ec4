#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from enum import Enum
from pathlib import Path
from typing import Union, assert_never

from shapecoder.utils import pydantic
from shapecoder.utils.dict import MergeFunction, merge_deep, merge_shallow


class MergeStrategy(str, Enum):
    # merge nested mappings recursively, the right fragment wins on any other collision
    DEEP = 'deep'
    # only merge the top level, the right fragment wins on every collision
    SHALLOW = 'shallow'

    def merge_function(self) -> MergeFunction:
        match self:
            case MergeStrategy.DEEP:
                return merge_deep
            case MergeStrategy.SHALLOW:
                return merge_shallow
            case _:
                assert_never(self)


class ShapecoderSettings(pydantic.BaseModel):
    # Merge used by intersection encoders that are not given an explicit merge function.
    INTERSECTION_MERGE: MergeStrategy = MergeStrategy.DEEP

    # Build lazy encoders under a lock, so concurrent first uses converge on a single build. Single threaded
    # applications can turn this off.
    LAZY_THREAD_SAFE: bool = True

    # Accept sum encoders without any member, they fail on every value.
    SUM_ALLOW_EMPTY: bool = False

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'ShapecoderSettings':
        """Takes a filepath to a yaml file and returns a validated ShapecoderSettings instance."""
        from shapecoder.utils.yaml import dict_from_extended_yaml
        settings_dict = dict_from_extended_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
