"""
Services — Operations over namespaces

- Aggregator: alter_docs(), the documentation generation run
- Loader: namespaces from YAML definition files
- Discovery: namespaces from imported Python modules
"""

from .aggregator import AlterStatus, alter_docs, alter_docs_in_all
from .loader import LoaderError, load_namespace, namespace_from_dict
from .discovery import namespace_from_module, get_public_names

__all__ = [
    'AlterStatus', 'alter_docs', 'alter_docs_in_all',
    'LoaderError', 'load_namespace', 'namespace_from_dict',
    'namespace_from_module', 'get_public_names',
]
