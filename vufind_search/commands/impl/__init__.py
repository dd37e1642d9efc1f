"""
Concrete search commands.
"""

from .call_method_command import CallMethodCommand
from .lookup_doi_command import LookupDoiCommand
from .lookup_issns_command import LookupIssnsCommand
from .retrieve_command import RetrieveBatchCommand, RetrieveCommand
from .search_command import SearchCommand
from .similar_command import SimilarCommand

__all__ = [
    "CallMethodCommand",
    "LookupDoiCommand",
    "LookupIssnsCommand",
    "RetrieveBatchCommand",
    "RetrieveCommand",
    "SearchCommand",
    "SimilarCommand",
]
