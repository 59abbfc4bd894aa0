"""Program root and junk location discovery.

This module provides resolution of well-known system locations,
the system directory blacklist, architecture classification of
program roots and the memoized junk search directories.
"""

from uninstalltools.locations.blacklist import (
    DIRECTORY_BLACKLIST,
    QUESTIONABLE_DIRECTORY_NAMES,
    is_questionable_directory_name,
    is_system_dir,
    is_system_directory,
)
from uninstalltools.locations.icons import IconHandle, try_extract_associated_icon
from uninstalltools.locations.junk import JunkLocationCache
from uninstalltools.locations.models import ArchitectureHint, ClassifiedRoot, DirectoryRef
from uninstalltools.locations.pathtools import paths_equal
from uninstalltools.locations.program_roots import ProgramRootAggregator
from uninstalltools.locations.resolver import (
    EnvironmentPathResolver,
    KnownLocation,
    LocationError,
    MappingPathResolver,
    PathResolutionError,
    PathResolver,
    get_default_resolver,
)
from uninstalltools.locations.self_location import get_install_location

__all__ = [
    "DIRECTORY_BLACKLIST",
    "QUESTIONABLE_DIRECTORY_NAMES",
    "ArchitectureHint",
    "ClassifiedRoot",
    "DirectoryRef",
    "EnvironmentPathResolver",
    "IconHandle",
    "JunkLocationCache",
    "KnownLocation",
    "LocationError",
    "MappingPathResolver",
    "PathResolutionError",
    "PathResolver",
    "ProgramRootAggregator",
    "get_default_resolver",
    "get_install_location",
    "is_questionable_directory_name",
    "is_system_dir",
    "is_system_directory",
    "paths_equal",
    "try_extract_associated_icon",
]
