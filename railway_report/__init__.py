"""
Railway Report - render a repository's commit history as an interactive HTML railway diagram.
"""

from .models import CommitInfo, CommitData, CommitMessage, RepoMeta, Signature
from .errors import CyclicReferenceError, FetchError, ReportError, ResourceNotFoundError, SerializationError
from .parser import CommitParser
from .linker import IssueLinker
from .dates import pretty_date
from .commit_data import generate_commit_data
from .resources import ResourceStore, load_default_store
from .template import TemplateResolver
from .report import ReportAssembler
from .layout import commit_graph, compute_children, compute_positions, topological_order
from .drawing import draw_railway
from .fetcher import GitHubFetcher
from .main import main

__all__ = [
    'CommitInfo',
    'CommitData',
    'CommitMessage',
    'RepoMeta',
    'Signature',
    'CyclicReferenceError',
    'FetchError',
    'ReportError',
    'ResourceNotFoundError',
    'SerializationError',
    'CommitParser',
    'IssueLinker',
    'pretty_date',
    'generate_commit_data',
    'ResourceStore',
    'load_default_store',
    'TemplateResolver',
    'ReportAssembler',
    'commit_graph',
    'compute_children',
    'compute_positions',
    'topological_order',
    'draw_railway',
    'GitHubFetcher',
    'main',
]
