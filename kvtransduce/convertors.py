from collections.abc import Mapping
from types import MappingProxyType
from func_prototypes import typed, returned

@returned(list)
@typed(Mapping)
def to_list(canonical):
    return list(canonical.values())

@returned(set)
@typed(Mapping)
def to_set(canonical):
    return set(canonical.values())

@returned(frozenset)
@typed(Mapping)
def to_frozenset(canonical):
    return frozenset(canonical.values())

@returned(dict)
@typed(Mapping)
def to_dict(canonical):
    """
    Copy into a plain dict in iteration order.
    dicts have no prototype chain, so keys like '__proto__' are stored as is.
    """
    out = {}
    for (k, v) in canonical.items():
        out[k] = v
    return out

@returned(MappingProxyType)
@typed(Mapping)
def to_frozen_map(canonical):
    """Read-only view over a private copy, later changes to canonical don't leak in."""
    return MappingProxyType(dict(canonical))

@returned(tuple)
@typed(Mapping)
def to_tuple(canonical):
    return tuple(canonical.values())

@returned(dict)
@typed(Mapping)
def from_dict(obj):
    return dict(obj.items())
