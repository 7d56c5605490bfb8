"""Include/exclude filtering of table names."""

import re
from typing import Iterable, List, Optional, Pattern, Sequence, Union

from ..errors import ConfigurationError

PatternLike = Union[str, Pattern]


def compile_patterns(patterns: Optional[Iterable[PatternLike]]) -> List[Pattern]:
    """Compile a list of regex strings, passing compiled patterns through."""
    if not patterns:
        return []

    compiled = []
    for p in patterns:
        if isinstance(p, re.Pattern):
            compiled.append(p)
            continue
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            raise ConfigurationError(
                f'Invalid table pattern "{p}": {e}',
                details={"pattern": p},
            ) from e
    return compiled


class TableFilter:
    """Keeps table names matching the include patterns and none of the excludes.

    With no include patterns every table is a candidate; with no patterns
    at all nothing is filtered out.
    """

    def __init__(
        self,
        include: Optional[Iterable[PatternLike]] = None,
        exclude: Optional[Iterable[PatternLike]] = None,
    ):
        self.include = compile_patterns(include)
        self.exclude = compile_patterns(exclude)

    @property
    def active(self) -> bool:
        return bool(self.include or self.exclude)

    def matches(self, table_name: str) -> bool:
        if self.include and not any(p.search(table_name) for p in self.include):
            return False
        return not any(p.search(table_name) for p in self.exclude)

    def apply(self, table_names: Sequence[str]) -> List[str]:
        """Filter table names, preserving catalog order."""
        if not self.active:
            return list(table_names)
        return [name for name in table_names if self.matches(name)]
