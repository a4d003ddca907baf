"""Load options for the OSM map loader."""
from dataclasses import dataclass
from enum import Enum


class DanglingPolicy(str, Enum):
    """What to do when a way references a node missing from the document."""
    ERROR = 'error'
    SKIP = 'skip'
    SENTINEL = 'sentinel'


class DuplicatePolicy(str, Enum):
    """Which node wins when several nodes share an id."""
    FIRST = 'first'
    LAST = 'last'


@dataclass(frozen=True)
class LoadOptions:
    """Options controlling parsing and post-processing.

    Attributes:
        dangling: Policy for way node refs without a matching node
        duplicates: Tie-break for repeated node ids in the lookup index
        strict: Raise MissingAttribute instead of leaving fields unset
        derive_fields: Run the post-processor (points and tag flags)
    """
    dangling: DanglingPolicy = DanglingPolicy.ERROR
    duplicates: DuplicatePolicy = DuplicatePolicy.LAST
    strict: bool = False
    derive_fields: bool = True

    @classmethod
    def from_args(cls, args) -> 'LoadOptions':
        """Build options from parsed CLI arguments.

        Missing attributes on ``args`` fall back to the defaults.
        """
        return cls(
            dangling=DanglingPolicy(getattr(args, 'dangling', None) or cls.dangling.value),
            duplicates=DuplicatePolicy(getattr(args, 'duplicates', None) or cls.duplicates.value),
            strict=bool(getattr(args, 'strict', False)),
        )
