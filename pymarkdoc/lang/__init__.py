"""Documentation model for Python modules."""

from .base import DeclUnavailableError, Entity
from .doc import Block
from .example import Example
from .func import Func, Method
from .location import Location, Position, Repo
from .package import Package, PackageLoadError, discover_modules, sorted_by_name
from .repo import RepoInspector, RepoOverride, resolve_repo
from .type import Type
from .value import Value

__all__ = [
    "Block",
    "DeclUnavailableError",
    "Entity",
    "Example",
    "Func",
    "Location",
    "Method",
    "Package",
    "PackageLoadError",
    "Position",
    "Repo",
    "RepoInspector",
    "RepoOverride",
    "Type",
    "Value",
    "discover_modules",
    "resolve_repo",
    "sorted_by_name",
]
