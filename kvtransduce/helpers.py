from kvtransduce.transduce import transduce
from kvtransduce.reducers import save_entries, fold_values
from kvtransduce.convertors import \
    from_dict,     \
    to_dict,       \
    to_frozen_map, \
    to_frozenset,  \
    to_list,       \
    to_set,        \
    to_tuple

def bind(engine_call, convertor):
    """Return a function calling engine_call and piping its result through convertor."""
    def bound(*args, **kwargs):
        return convertor(engine_call(*args, **kwargs))
    target = convertor.__name__
    if target.startswith("to_"):
        target = target[len("to_"):]
    bound.__name__ = engine_call.__name__ + "_to_" + target
    return bound

def trans(coll, transformation=None):
    return transduce(coll, save_entries, transformation)

def reduce(coll, fn, init, transformation=None):
    return transduce(coll, fold_values(fn, init), transformation)

transduce_to_list = bind(transduce, to_list)
transduce_to_set = bind(transduce, to_set)
transduce_to_frozenset = bind(transduce, to_frozenset)
transduce_to_dict = bind(transduce, to_dict)
transduce_to_frozen_map = bind(transduce, to_frozen_map)
transduce_to_tuple = bind(transduce, to_tuple)

def transduce_dict_to_dict(obj, step, transformation=None):
    return transduce_to_dict(from_dict(obj), step, transformation)
