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
from typing import NamedTuple, Optional

from pydantic import ValidationError
from structlog import get_logger

from shapecoder.conf.settings import ShapecoderSettings as Settings
from shapecoder.exception import SettingsError

logger = get_logger()

SETTINGS_ENV_VAR = 'SHAPECODER_CONFIG_YAML'

# source reported when no yaml file is configured
DEFAULT_SETTINGS_SOURCE = '<defaults>'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: Settings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> Settings:
    """
    Returns the settings used by encoders built in this process.

    They are loaded from the yaml filepath in the 'SHAPECODER_CONFIG_YAML' env var the first time they are needed, if
    it is not set the defaults are used. Changing the env var after that results in a SettingsError.
    """
    settings_yaml_filepath = os.environ.get(SETTINGS_ENV_VAR)
    return _load_settings_singleton(settings_yaml_filepath)


def get_settings_source() -> str:
    """ Returns the path of the yaml file that was loaded, or DEFAULT_SETTINGS_SOURCE.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(filepath: Optional[str]) -> Settings:
    global _settings_singleton

    source = filepath or DEFAULT_SETTINGS_SOURCE

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise SettingsError('loading settings twice from a different source')

        return _settings_singleton.settings

    settings = _load_yaml_settings(filepath) if filepath else Settings()
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    logger.new().info('settings loaded', source=source)

    return settings


def _load_yaml_settings(filepath: str) -> Settings:
    try:
        return Settings.from_yaml(filepath=filepath)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f'invalid settings in {filepath!r}') from e
