from kvtransduce.errors import InputNotIterable
from kvtransduce.traverse import pairs
from kvtransduce.reducers import Reducer, FoldValues, as_reducer, save_entries, fold_values
from kvtransduce.transduce import \
    Filter,           \
    Map,              \
    compose,          \
    filtering,        \
    filtering_values, \
    mapping,          \
    mapping_values,   \
    pipeline,         \
    transduce
