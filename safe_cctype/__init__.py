"""Top-level package for safe-cctype.

This package wraps the platform `<ctype.h>` classification and case-conversion
routines so they can be called with any narrow character, including bytes
with the top bit set, without leaving the routines' defined domain.

Results follow the `LC_CTYPE` locale active in the process; the package never
sets or restores it. `ascii_to_upper`/`ascii_to_lower` are the
locale-independent alternative.
"""

from loguru import logger

from .ascii_fast import ascii_to_lower, ascii_to_upper
from .classify import (
    is_alnum,
    is_alpha,
    is_cntrl,
    is_digit,
    is_graph,
    is_print,
    is_punct,
    is_space,
    is_xdigit,
)
from .errors import (
    CharacterDomainError,
    CharacterSequenceError,
    FacilityError,
    FacilityUnavailableError,
    SafeCctypeError,
)
from .transform import (
    to_lower,
    to_lower_copy,
    to_lower_inplace,
    to_upper,
    to_upper_copy,
    to_upper_inplace,
)

logger.disable(__name__)

__all__ = [
    "to_upper",
    "to_lower",
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_space",
    "is_cntrl",
    "is_punct",
    "is_print",
    "is_graph",
    "is_xdigit",
    "to_upper_inplace",
    "to_lower_inplace",
    "to_upper_copy",
    "to_lower_copy",
    "ascii_to_upper",
    "ascii_to_lower",
    "SafeCctypeError",
    "CharacterDomainError",
    "CharacterSequenceError",
    "FacilityError",
    "FacilityUnavailableError",
    "__version__",
]

__version__ = "0.1.0"
