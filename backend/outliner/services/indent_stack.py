from __future__ import annotations


class IndentStack:
    """Indent levels opened by descend markers within one sibling scope.

    The base level is never popped, so a dedent past the scope's start is a
    no-op rather than an error.
    """

    def __init__(self, level: int = 0):
        self._levels: list[int] = [level]

    @property
    def top(self) -> int:
        return self._levels[-1]

    @property
    def depth(self) -> int:
        return len(self._levels)

    def descend(self) -> int:
        new_level = self.top + 1
        self._levels.append(new_level)
        return new_level

    def return_(self) -> int:
        """Close the innermost level and return it.

        The closing item sits at the level it closes; the dedent shows on
        the next descend. At the base level this is a no-op.
        """
        if len(self._levels) > 1:
            return self._levels.pop()
        return self.top
