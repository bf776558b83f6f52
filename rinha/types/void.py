from __future__ import annotations


class VoidType:
    """The value of a print expression. Carries no data and has no rendering."""

    __slots__ = ()

    def __repr__(self): return "Void"

    # Void is equal only to Void
    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)


Void = VoidType()
