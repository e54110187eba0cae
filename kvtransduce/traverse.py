from collections.abc import Mapping, Set, Sequence
from functools import singledispatch
from kvtransduce.errors import InputNotIterable

def _items_pairs(items):
    for (key, value) in items:
        yield (key, value)

@singledispatch
def pairs(coll):
    """
    Yield the (key, value) pairs of coll in traversal order.
    Mappings yield their items, sets yield (element, element),
    sequences and other iterables yield (index, element).
    Register new shapes with pairs.register(SomeType).
    """
    items = getattr(coll, 'items', None)
    if callable(items):
        return _items_pairs(items())
    try:
        it = iter(coll)
    except TypeError:
        raise InputNotIterable(coll)
    return enumerate(it)

@pairs.register(Mapping)
def _mapping_pairs(coll):
    return _items_pairs(coll.items())

@pairs.register(Set)
def _set_pairs(coll):
    return ((elem, elem) for elem in coll)

@pairs.register(Sequence)
def _sequence_pairs(coll):
    return enumerate(coll)
