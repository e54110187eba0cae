import pytest
from types import MappingProxyType
from kvtransduce.reducers import Reducer, FoldValues, as_reducer, save_entries, fold_values

plus = lambda acc, val: acc + val

def test_save_entries():
    acc = save_entries.init()
    assert acc == {}
    acc = save_entries(acc, ('a', 1))
    acc = save_entries(acc, ('b', 2))
    acc = save_entries(acc, ('a', 3))
    assert list(acc.items()) == [('a', 3), ('b', 2)]
    frozen = save_entries.complete(acc)
    assert isinstance(frozen, MappingProxyType)
    assert dict(frozen) == {'a': 3, 'b': 2}

def test_init_is_fresh():
    assert save_entries.init() is not save_entries.init()

def test_as_reducer():
    assert as_reducer(save_entries) is save_entries
    wrapped = as_reducer(lambda acc, kv: acc)
    assert isinstance(wrapped, Reducer)
    assert wrapped({'x': 1}, (0, 0)) == {'x': 1}
    with pytest.raises(TypeError):
        as_reducer(None)

def test_fold_values_ignores_keys():
    fold = fold_values(plus, 0)
    assert isinstance(fold, FoldValues)
    acc = fold.init()
    for kv in [('a', 1), ('a', 2), ('z', 3)]:
        acc = fold(acc, kv)
    assert fold.complete(acc) == 6

def test_fold_values_empty_is_init():
    fold = fold_values(plus, 100)
    assert fold.complete(fold.init()) == 100

def test_fold_values_falsy_prior_is_kept():
    """init seeds only the first value, a prior 0 is not replaced by init."""
    fold = fold_values(lambda acc, val: acc * val, 5)
    acc = fold.init()
    acc = fold(acc, (0, 0))
    assert acc == 0
    acc = fold(acc, (1, 7))
    assert fold.complete(acc) == 0

def test_fold_values_left_fold():
    fold = fold_values(lambda acc, val: acc + [val], [])
    acc = fold.init()
    for kv in enumerate('abc'):
        acc = fold(acc, kv)
    assert fold.complete(acc) == ['a', 'b', 'c']
