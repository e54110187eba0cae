from types import MappingProxyType

class Reducer:
    """
    Terminal reducing strategy.
    init() builds a fresh accumulator, step(acc, pair) folds one pair in,
    complete(acc) turns the final accumulator into the result.
    The default accumulator is an ordered dict which is frozen on completion.
    """
    def __init__(self, rf):
        self.rf = rf

    def init(self):
        return {}

    def step(self, acc, pair):
        return self.rf(acc, pair)

    def complete(self, acc):
        return MappingProxyType(acc)

    def __call__(self, acc, pair):
        return self.step(acc, pair)

def as_reducer(rf):
    if isinstance(rf, Reducer):
        return rf
    if not callable(rf):
        raise TypeError("Reducing step must be callable, got %s" % type(rf).__name__)
    return Reducer(rf)

def _save_entry(acc, pair):
    (key, value) = pair
    acc[key] = value
    return acc

save_entries = Reducer(_save_entry)
save_entries.__doc__ = \
"""
Store every pair into the accumulator. Later writes to a key win,
the key keeps the position of its first write.
"""

_nothing = object()

class FoldValues(Reducer):
    """
    Left fold over values only, keys are ignored.
    fn is (b -> v -> b), init is b and is only used for the first value.
    The result is the folded scalar, or init when nothing was folded.
    """
    def __init__(self, fn, init):
        super().__init__(fn)
        self.seed = init

    def init(self):
        return _nothing

    def step(self, acc, pair):
        (_, value) = pair
        current = self.seed if acc is _nothing else acc
        return self.rf(current, value)

    def complete(self, acc):
        return self.seed if acc is _nothing else acc

def fold_values(fn, init):
    return FoldValues(fn, init)
