"""Grid filter translation and remote page loading for filterable REST APIs."""

from __future__ import annotations

from .coercion import CoercionResult, coerce_value
from .config import RemoteDataConfig, TransportConfig
from .descriptors import (
    FilterClause,
    FilterDescriptor,
    LoadRequest,
    LoadResult,
    RangeValue,
)
from .envelope import PageEnvelope, PageMeta
from .exceptions import (
    CoercionError,
    NoResponseError,
    RemoteGridError,
    RequestNotSentError,
    ResponseShapeError,
    ServerResponseError,
    ServerValidationError,
    TranslationError,
    TransportError,
    UnknownOperatorError,
)
from .loader import FilterHook, RemoteDataLoader, identity_hook, use_remote_data
from .operators import Combinator, ComparisonOperator, GridOperator, ValueType
from .pagination import PageParams, PaginationBuilder
from .query_string import QueryStringBuilder
from .translator import FilterTranslator, translate
from .transport import HttpxTransport, InMemoryTransport, ITransport, RequestConfig

__all__ = [
    "CoercionError",
    "CoercionResult",
    "Combinator",
    "ComparisonOperator",
    "FilterClause",
    "FilterDescriptor",
    "FilterHook",
    "FilterTranslator",
    "GridOperator",
    "HttpxTransport",
    "ITransport",
    "InMemoryTransport",
    "LoadRequest",
    "LoadResult",
    "NoResponseError",
    "PageEnvelope",
    "PageMeta",
    "PageParams",
    "PaginationBuilder",
    "QueryStringBuilder",
    "RangeValue",
    "RemoteDataConfig",
    "RemoteDataLoader",
    "RemoteGridError",
    "RequestConfig",
    "RequestNotSentError",
    "ResponseShapeError",
    "ServerResponseError",
    "ServerValidationError",
    "TransportConfig",
    "TranslationError",
    "TransportError",
    "UnknownOperatorError",
    "ValueType",
    "coerce_value",
    "identity_hook",
    "translate",
    "use_remote_data",
]
