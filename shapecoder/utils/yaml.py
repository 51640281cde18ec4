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
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from shapecoder.utils.dict import deep_merge

_EXTENDS_KEY = 'extends'


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Takes a filepath to a yaml file and returns a dictionary with its contents."""
    if not os.path.isfile(filepath):
        raise ValueError(f"'{filepath}' is not a file")

    with open(filepath, 'r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}

    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")

    return contents


def dict_from_extended_yaml(
    *,
    filepath: Union[Path, str],
    _visited: Optional[frozenset[Path]] = None,
) -> dict[str, Any]:
    """
    Takes a filepath to a yaml file and returns a dictionary with its contents.

    A file can extend another one (relative to its own directory) through the reserved 'extends' key, the base file is
    loaded first and the extending file is deep-merged on top of it. Bases can extend other files in turn, a chain that
    leads back to a file already being loaded is rejected.
    """
    resolved = Path(filepath).resolve()
    visited = (_visited or frozenset()) | {resolved}

    extension_dict = dict_from_yaml(filepath=filepath)
    base_file = extension_dict.pop(_EXTENDS_KEY, None)

    if not base_file:
        return extension_dict

    base_filepath = Path(filepath).parent / str(base_file)

    if not os.path.isfile(base_filepath):
        raise ValueError(f"'{base_filepath}' is not a file")

    if base_filepath.resolve() in visited:
        raise ValueError(f"'{filepath}' extends '{base_file}', which leads to a cycle")

    base_dict = dict_from_extended_yaml(filepath=base_filepath, _visited=visited)
    deep_merge(base_dict, extension_dict)
    return base_dict
