"""forbidden_bands: fixed-length 8-bit strings and the PETSCII character set."""
# pylint: disable=wildcard-import,undefined-variable
from .error import *            # noqa
from .shift import *            # noqa
from .tables import *           # noqa
from .fixedstring import *      # noqa
from .codec import *            # noqa
from .debug import *            # noqa
from .screencode import *       # noqa
from . import encodings         # noqa

__all__ = (
    error.__all__ +
    shift.__all__ +
    tables.__all__ +
    fixedstring.__all__ +
    codec.__all__ +
    debug.__all__ +
    screencode.__all__
)  # noqa

__license__ = 'ISC'
__version__ = '0.2.0'
