# Copyright 2025 The Langsniff Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Language variant profiles, registries and dictionary lookups."""

from langsniff.profiles.dictionaries import (
    DEFAULT_DICTIONARY_PATHS,
    DictionaryProvider,
    DirectoryDictionaryProvider,
    StaticDictionaryProvider,
)
from langsniff.profiles.registry import (
    LanguageRegistry,
    LanguageVariant,
    RegistryError,
    builtin_registry,
    load_registry,
    variant_from_mapping,
)

__all__ = [
    "DEFAULT_DICTIONARY_PATHS",
    "DictionaryProvider",
    "DirectoryDictionaryProvider",
    "LanguageRegistry",
    "LanguageVariant",
    "RegistryError",
    "StaticDictionaryProvider",
    "builtin_registry",
    "load_registry",
    "variant_from_mapping",
]
