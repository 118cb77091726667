"""
Immutable, normalised filesystem paths.

A Path is either absolute, or relative with a number of leading ``..`` steps
that could not be resolved. Internal ``.`` and ``..`` segments never survive
normalisation, so two paths naming the same location compare equal.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from .errors import (
    AbsoluteAppendError,
    EmptyComponent,
    EmptyPathString,
    InvalidComponent,
    InvalidRelativity,
    RootOverflow,
    RootOverflowOnConcat,
)

# Relativity value marking an absolute path.
ABSOLUTE = -1


@dataclass(frozen=True, repr=False)
class Path:
    """
    An immutable, normalised path.

    Build instances with Path.relative, Path.absolute or parse_path. All
    transformations return new instances.
    """
    relativity: int  # ABSOLUTE, or the number of leading '..' steps
    components: Tuple[str, ...] = ()

    def __post_init__(self):
        if (isinstance(self.relativity, bool) or not isinstance(self.relativity, int)
                or self.relativity < ABSOLUTE):
            raise InvalidRelativity(self.relativity)
        if isinstance(self.components, (str, bytes)):
            raise TypeError(
                "Path components must be a sequence of strings; "
                "use parse_path to parse a rendered path")
        components = tuple(self.components)
        for component in components:
            if not Path.is_component(component):
                raise InvalidComponent(component)
        object.__setattr__(self, 'components', components)

    @staticmethod
    def relative(components: Iterable[str], parent_steps: int = 0) -> 'Path':
        """Create a relative path starting with `parent_steps` ``..`` steps."""
        if (isinstance(parent_steps, bool) or not isinstance(parent_steps, int)
                or parent_steps < 0):
            raise InvalidRelativity(parent_steps)
        return Path(parent_steps, components)

    @staticmethod
    def absolute(components: Iterable[str]) -> 'Path':
        return Path(ABSOLUTE, components)

    @staticmethod
    def parse(text: str) -> 'Path':
        return parse_path(text)

    @staticmethod
    def from_pathish(pathish: 'Pathish') -> 'Path':
        if isinstance(pathish, Path):
            return pathish
        return parse_path(pathish)

    @staticmethod
    def is_component(s: object) -> bool:
        """
        Whether `s` is usable as a single path component.

        A component must not contain '/' and must not be '', '.' or '..'.
        """
        return isinstance(s, str) and '/' not in s and s not in ('', '.', '..')

    # Accessors

    def is_absolute(self) -> bool:
        return self.relativity == ABSOLUTE

    @property
    def parent_steps(self) -> int:
        """Number of leading '..' steps; always zero for absolute paths."""
        return 0 if self.is_absolute() else self.relativity

    @property
    def name(self) -> Optional[str]:
        return self.components[-1] if self.components else None

    def parent(self) -> Optional['Path']:
        """The path without its last component, or None if it has none."""
        if not self.components:
            return None
        return Path(self.relativity, self.components[:-1])

    # Comparison

    def equals(self, other: 'Pathish') -> bool:
        """Like ==, but parses `other` first if it is a string."""
        return self == Path.from_pathish(other)

    def prefixes(self, other: 'Pathish') -> bool:
        """Whether this path is a component-wise prefix of `other`."""
        other = Path.from_pathish(other)
        if self.relativity != other.relativity:
            return False
        return other.components[:len(self.components)] == self.components

    def is_prefixed_by(self, other: 'Pathish') -> bool:
        return Path.from_pathish(other).prefixes(self)

    # Composition

    def concat(self, other: 'Pathish') -> 'Path':
        """
        Append a relative path to this one.

        Each leading '..' of `other` cancels the last real component of the
        result, or becomes an unresolved leading step once none are left.
        An absolute result may not end up with unresolved steps; only the
        final step count is checked.
        """
        other = Path.from_pathish(other)
        if other.is_absolute():
            raise AbsoluteAppendError(other)

        relativity = self.relativity
        components = list(self.components)
        for _ in range(other.relativity):
            if components:
                components.pop()
            else:
                relativity += 1

        if self.is_absolute() and relativity > ABSOLUTE:
            raise RootOverflowOnConcat(self, other)

        components.extend(other.components)
        if self.is_absolute():
            return Path.absolute(components)
        return Path.relative(components, relativity)

    def __truediv__(self, other: 'Pathish') -> 'Path':
        return self.concat(other)

    def pop_front(self) -> Optional['Path']:
        """Drop the first component, or return None if there is none."""
        if not self.components:
            return None
        return Path(self.relativity, self.components[1:])

    # Rendering

    def __str__(self) -> str:
        if self.is_absolute():
            return '/' + '/'.join(self.components)
        if not self.components and self.relativity == 0:
            return '.'
        return '/'.join(['..'] * self.relativity + list(self.components))

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"


Pathish = Union[Path, str]


def parse_path(text: str) -> Path:
    """
    Parse a '/'-separated string into a Path.

    A leading '/' makes the path absolute. '.' segments are ignored and '..'
    removes the preceding component. A relative path keeps '..' steps it
    cannot resolve; an absolute path may not step above the root. Empty
    segments are rejected.
    """
    if text == '':
        raise EmptyPathString()
    if text == '/':
        return Path.absolute([])

    is_absolute = text.startswith('/')
    segments = text.split('/')
    if is_absolute:
        segments = segments[1:]

    parent_steps = 0
    components = []
    for segment in segments:
        if segment == '':
            raise EmptyComponent(text)
        elif segment == '.':
            continue
        elif segment == '..':
            if components:
                components.pop()
            elif is_absolute:
                raise RootOverflow(text)
            else:
                parent_steps += 1
        else:
            components.append(segment)

    if is_absolute:
        return Path.absolute(components)
    return Path.relative(components, parent_steps)
