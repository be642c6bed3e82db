"""pubterm exception hierarchy.

All public exceptions inherit from PubTermError, giving callers a single
base class to catch when they want to handle any pubterm-specific failure
without swallowing unrelated errors.

The term algebra itself is total and never raises. Errors only surface at
the parsing edge, where text supplied by a user is turned into versions,
ranges and terms.
"""


class PubTermError(Exception):
    """Base exception for all pubterm errors."""


class VersionParseError(PubTermError, ValueError):
    """Raised when a version string cannot be parsed.

    Covers strings that do not follow the ``MAJOR.MINOR.PATCH`` format,
    including leading zeros and missing components.
    """


class ConstraintError(PubTermError, ValueError):
    """Raised when a constraint string cannot be parsed.

    Covers unknown operators, empty atoms and malformed compound
    constraints.
    """
