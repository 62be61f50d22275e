# semlog/__init__.py
"""
semlog - hierarchical semantic logging

Record nested operations as a tree and find out where the time went
("the request took 680ms because auth took 520ms").

Recording:
    >>> from semlog import SemanticLogger, Context
    >>> log = SemanticLogger()
    >>> req = log.open(Context.of("http_request", method="GET", uri="/users"))
    >>> auth = log.open(Context.of("authentication", method="jwt", token="t"))
    >>> log.close(Context.of("authentication_complete", executionTime=0.52), auth)
    'authentication_complete_1'
    >>> log.close(Context.of("http_response", statusCode=200, executionTime=0.68), req)
    'http_response_1'
    >>> document = log.flush()

Rendering:
    >>> from semlog import TreeRenderer, RenderConfig
    >>> print(TreeRenderer(RenderConfig(max_depth=3)).render(document))

Command line:
    stree --depth=3 --threshold=10ms log.json
"""

__version__ = "0.1.0"

from .core import (
    Context,
    SemanticLogger,
    IdAllocator,
    OperationStack,
    OpenEntry,
    EventEntry,
    LogDocument,
    SEMANTIC_LOG_SCHEMA_URL,
)
from .core.errors import (
    SemlogError,
    InvalidContextError,
    NoOpenOperationsError,
    InvalidOperationOrderError,
    UnclosedLogicError,
    NoLogSessionError,
    LogFileNotFoundError,
    MalformedDocumentError,
    InvalidOptionError,
)
from .tree import (
    TreeNode,
    OperationTree,
    ContextTypeRegistry,
    default_registry,
    build_tree,
    TreeRenderer,
)
from .config import RenderConfig, SemlogConfig, load_config
from .infra.storage import LogFileWriter, load_document

__all__ = [
    "__version__",
    # Engine
    "Context",
    "SemanticLogger",
    "IdAllocator",
    "OperationStack",
    # Document
    "OpenEntry",
    "EventEntry",
    "LogDocument",
    "SEMANTIC_LOG_SCHEMA_URL",
    # Errors
    "SemlogError",
    "InvalidContextError",
    "NoOpenOperationsError",
    "InvalidOperationOrderError",
    "UnclosedLogicError",
    "NoLogSessionError",
    "LogFileNotFoundError",
    "MalformedDocumentError",
    "InvalidOptionError",
    # Tree
    "TreeNode",
    "OperationTree",
    "ContextTypeRegistry",
    "default_registry",
    "build_tree",
    "TreeRenderer",
    # Config
    "RenderConfig",
    "SemlogConfig",
    "load_config",
    # Storage
    "LogFileWriter",
    "load_document",
]
