"""Discovery of directories that applications get installed into.

Combines the platform program files roots with user-defined roots,
removes path-equal duplicates and tags every surviving root with an
architecture hint.
"""

import logging
from collections.abc import Sequence

from uninstalltools.locations.models import ArchitectureHint, ClassifiedRoot, DirectoryRef
from uninstalltools.locations.pathtools import paths_equal
from uninstalltools.locations.resolver import KnownLocation, PathResolver

logger = logging.getLogger(__name__)


class ProgramRootAggregator:
    """Classifies program files roots by architecture.

    The alternate program files root always comes first and is tagged
    as 32-bit. The native root follows, tagged as 64-bit, unless both
    resolve to the same directory. Custom roots come last, in the order
    they were configured, tagged as unknown.

    Args:
        resolver: Source of the platform program files roots.
        custom_roots: User-defined program roots, in priority order.

    Example:
        >>> aggregator = ProgramRootAggregator(resolver, custom_roots=("D:\\\\Apps",))
        >>> [root.architecture for root in aggregator.get_program_roots(True)]
        [<ArchitectureHint.DEFINITELY_X86: 'x86'>, ...]
    """

    def __init__(self, resolver: PathResolver, custom_roots: Sequence[str] = ()) -> None:
        self._resolver = resolver
        self._custom_roots = tuple(custom_roots)

    @property
    def custom_roots(self) -> tuple[str, ...]:
        return self._custom_roots

    def get_program_roots(self, include_custom: bool) -> list[ClassifiedRoot]:
        """Get the existing program roots with their architecture hints.

        Candidates that do not exist or cannot be accessed are left out.

        Args:
            include_custom: Add the user-defined roots after the platform roots.

        Returns:
            Classified roots, platform roots first.

        Raises:
            PathResolutionError: If a platform program files root cannot be resolved.
        """
        candidates = self._platform_candidates()
        if include_custom:
            candidates.extend((custom, ArchitectureHint.UNKNOWN) for custom in self._custom_roots)

        roots: list[ClassifiedRoot] = []
        for path, hint in candidates:
            try:
                directory = DirectoryRef.from_path(path)
            except (OSError, ValueError) as e:
                # Removable drives, uninitialized custom roots, restricted ACLs
                logger.debug("Skipping program root %s: %s", path, e)
                continue

            # Compared after abspath so relative entries collapse too;
            # the earlier candidate keeps its tag
            if any(paths_equal(directory.path, root.path) for root in roots):
                logger.debug("Program root %s duplicates an earlier root", path)
                continue
            roots.append(ClassifiedRoot(directory=directory, architecture=hint))

        return roots

    def get_stock_program_files(self) -> list[str]:
        """Get the platform program files roots without existence checks.

        Returns:
            Distinct native and alternate program files paths.
        """
        return [path for path, _ in self._platform_candidates()]

    def get_all_program_files(self) -> list[str]:
        """Get platform and user-defined program roots without existence checks.

        Returns:
            Stock roots followed by all custom roots.
        """
        return [*self.get_stock_program_files(), *self._custom_roots]

    def _platform_candidates(self) -> list[tuple[str, ArchitectureHint]]:
        """Resolve the platform roots in emission order."""
        native = self._resolver.resolve(KnownLocation.PROGRAM_FILES)
        alternate = self._resolver.resolve(KnownLocation.PROGRAM_FILES_X86)

        candidates = [(alternate, ArchitectureHint.DEFINITELY_X86)]
        if not paths_equal(native, alternate):
            candidates.append((native, ArchitectureHint.DEFINITELY_X64))

        return candidates
