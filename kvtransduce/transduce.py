# Worked out from https://raganwald.com/2017/04/30/transducers.html
# Generalized from plain values to (key, value) pairs.
from collections import namedtuple
from kvtransduce.reducers import as_reducer
from kvtransduce.traverse import pairs

def reduceWith(reducer, seed, iterable):
    """
    reduceWith takes reducer as first argument, computes a reduction over iterable.
    Think foldl from Haskell.
    reducer is (b -> a -> b)
    Seed is b
    iterable is [a]
    reduceWith is (b -> a -> b) -> b -> [a] -> b
    """
    accumulation = seed
    for value in iterable:
        accumulation = reducer(accumulation, value)
    return accumulation

mapping = lambda mapper: lambda reducing: lambda acc, kv: reducing(acc, mapper(kv))
mapping.__doc__ = \
"""
mapper is ((k, v) -> (k', v'))
Every pair is replaced by mapper(pair) and forwarded.
"""

filtering = lambda pred: \
        lambda reducing: \
        lambda acc, kv: reducing(acc, kv) if pred(kv) else acc
filtering.__doc__ = \
"""
pred is ((k, v) -> Bool)
Pairs failing pred are dropped, the accumulator passes through untouched.
"""

def mapping_values(fn):
    return mapping(lambda kv: (kv[0], fn(kv[1])))

def filtering_values(pred):
    return filtering(lambda kv: pred(kv[1]))

class Map(namedtuple('Map', ['mapper'])):
    """Pipeline stage which maps every pair."""
    __slots__ = ()

    def __call__(self, reducing):
        return mapping(self.mapper)(reducing)

class Filter(namedtuple('Filter', ['predicate'])):
    """Pipeline stage which keeps pairs matching predicate."""
    __slots__ = ()

    def __call__(self, reducing):
        return filtering(self.predicate)(reducing)

"""
Stages compose by wrapping the terminal step right to left, so
compose(a, b)(step) == a(b(step)) and a pair meets a first, then b.
"""
wrappedBy = lambda reducing, stage: stage(reducing)

def compose(*stages):
    def composed(reducing):
        return reduceWith(wrappedBy, reducing, reversed(stages))
    composed.stages = stages
    return composed

pipeline = compose

def transduce(coll, step, transformation=None):
    """
    coll is anything pairs() can traverse.
    step is a Reducer or a plain (acc, (k, v)) -> acc function.
    transformation is a combinator, (step -> step), optionally composed.
    Returns the reducer's completed accumulator.
    """
    reducer = as_reducer(step)
    transformedReducer = transformation(reducer) if transformation is not None else reducer
    accumulation = reducer.init()
    for kv in pairs(coll):
        accumulation = transformedReducer(accumulation, kv)
    return reducer.complete(accumulation)
