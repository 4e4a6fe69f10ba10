"""Unique temporary file and directory paths, with tracked cleanup.

The module-level functions operate on the default :data:`space`; build a
:class:`TempSpace` for an isolated root and registry.
"""

import sys
import types

from tmpkit.app import TempSpace, create_space, space
from tmpkit.core.errors import ConfigurationError, TmpkitError, ValidationError
from tmpkit.core.schemas import TempOptions
from tmpkit.services.registry_service import Registry

__version__ = "0.1.0"

file = space.file
file_async = space.file_async
directory = space.directory
directory_async = space.directory_async
write = space.write
write_sync = space.write_sync
temporary_file = space.temporary_file
temporary_directory = space.temporary_directory
temporary_file_async = space.temporary_file_async
temporary_directory_async = space.temporary_directory_async
job_file = space.job_file
job_file_async = space.job_file_async
job_directory = space.job_directory
job_directory_async = space.job_directory_async
clean = space.clean
clean_async = space.clean_async

__all__ = [
    "ConfigurationError", "Registry", "TempOptions", "TempSpace", "TmpkitError", "ValidationError",
    "clean", "clean_async", "create_space", "directory", "directory_async", "file", "file_async",
    "job_directory", "job_directory_async", "job_file", "job_file_async", "root", "space",
    "temporary_directory", "temporary_directory_async", "temporary_file", "temporary_file_async",
    "write", "write_sync",
]


class _Module(types.ModuleType):
    """Makes the module-level ``root`` read-only, like ``TempSpace.root``.

    A plain module attribute can always be rebound; a property only takes
    effect on the module's class.
    """

    @property
    def root(self) -> str:
        return space.root

    @root.setter
    def root(self, value) -> None:
        raise ConfigurationError("`root` is read-only")


sys.modules[__name__].__class__ = _Module
