__title__ = 'optmatch'
__author__ = 'optmatch contributors'
__license__ = 'BSD-2-Clause'
# Placeholder, modified by dynamic-versioning.
__version__ = "1.0.0"

from .convert import *
from .faults import *
from .options import *
from .outcomes import *
from .parser import *
from .render import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(1, 0, 0, "final", 0, "")

__all__ = (
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the option model
__all__ += options.__all__  # type: ignore[attr-defined]
# Load the exposed API of the outcomes
__all__ += outcomes.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parser
__all__ += parser.__all__  # type: ignore[attr-defined]
# Load the exposed API of the converters
__all__ += convert.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the views
__all__ += render.__all__  # type: ignore[attr-defined]
