from .domains import *  # noqa: F401, F403
from .validation import *  # noqa: F401, F403
from .element import *  # noqa: F401, F403
from .notation import *  # noqa: F401, F403
from .convert import *  # noqa: F401, F403
from .ops import *  # noqa: F401, F403

from . import domains as _domains
from . import validation as _validation
from . import element as _element
from . import notation as _notation
from . import convert as _convert
from . import ops as _ops

__all__ = [
    *_domains.__all__,
    *_validation.__all__,
    *_element.__all__,
    *_notation.__all__,
    *_convert.__all__,
    *_ops.__all__,
]
