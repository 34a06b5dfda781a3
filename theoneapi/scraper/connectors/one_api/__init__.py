"""The One API (https://the-one-api.dev) connector.

Exports the connector facade and its building blocks for direct use.
"""

from .config import BASE_URL, SOURCE, TOKEN_ENV_VAR
from .rest.connector import OneApiRESTConnector
from .rest.endpoints import EntitySpec, get_entity_spec, list_entity_specs
from .rest.fetcher import PageFetcher
from .rest.resolver import NameResolver
from .rest.schemas import OneApiPage, OneApiRecord
from .rest.transformer import ItemTransformer

__all__ = [
    "BASE_URL",
    "SOURCE",
    "TOKEN_ENV_VAR",
    "OneApiRESTConnector",
    "EntitySpec",
    "get_entity_spec",
    "list_entity_specs",
    "PageFetcher",
    "NameResolver",
    "ItemTransformer",
    "OneApiPage",
    "OneApiRecord",
]
