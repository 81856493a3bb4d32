"""HTTP middleware: timeout and request ID.

Applied in main app; order matters (first added = outermost).
Import and use from loresearch.main.
"""

from loresearch.middleware.request_id import RequestIDMiddleware
from loresearch.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
