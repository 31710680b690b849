"""gits - a parallel git repository for sensitive files.

Tracks files in a secondary ``.gits`` repository that shares the working
tree of the primary ``.git`` repository.
"""

__version__ = "0.1.0"
__author__ = "gits Team"

from gits.exceptions import GitsError
from gits.repo import InitResult, SecondaryRepo

__all__ = [
    "__version__",
    "GitsError",
    "InitResult",
    "SecondaryRepo",
]
