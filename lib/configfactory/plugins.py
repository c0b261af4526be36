"""Import side effects to populate the default builder registry."""

from __future__ import annotations

# Registration order decides dispatch priority
from .builders import toggle  # noqa: F401
from .builders import dropdown  # noqa: F401
from .builders import numeric  # noqa: F401
from .builders import text  # noqa: F401
from .builders import browse  # noqa: F401
