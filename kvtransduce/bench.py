import timeit
from docopt import docopt, DocoptExit
from tabulate import tabulate
from kvtransduce.helpers import trans, reduce
from kvtransduce.transduce import Filter, Map, compose, filtering_values, mapping_values

USAGE = """
kvbench

Compare transduce against plain python for a filter+map workload.

Usage:
  kvbench [--size=<n>] [--number=<n>] [--workload=<name>]

Options:
  --size=<n>         Length of the input list [default: 10000].
  --number=<n>       timeit repetitions per case [default: 100].
  --workload=<name>  entries or fold [default: entries].
"""

def isEven(n):
    return n % 2 == 0

def square(n):
    return n * n

def plus(x, y):
    return x + y

def even_squares_loop(ns):
    out = {}
    for (i, n) in enumerate(ns):
        if isEven(n):
            out[i] = square(n)
    return out

def even_squares_comprehension(ns):
    return {i: square(n) for (i, n) in enumerate(ns) if isEven(n)}

def even_squares_builtins(ns):
    return dict(map(lambda kv: (kv[0], square(kv[1])), filter(lambda kv: isEven(kv[1]), enumerate(ns))))

even_squares = compose(Filter(lambda kv: isEven(kv[1])), Map(lambda kv: (kv[0], square(kv[1]))))
even_squares_values = compose(filtering_values(isEven), mapping_values(square))

def even_squares_transduce(ns):
    return trans(ns, even_squares)

def sum_even_squares_loop(ns):
    total = 0
    for n in ns:
        if isEven(n):
            total += square(n)
    return total

def sum_even_squares_comprehension(ns):
    return sum([square(n) for n in ns if isEven(n)])

def sum_even_squares_builtins(ns):
    return sum(map(square, filter(isEven, ns)))

def sum_even_squares_transduce(ns):
    return reduce(ns, plus, 0, even_squares_values)

WORKLOADS = {
    'entries': [
        even_squares_loop,
        even_squares_comprehension,
        even_squares_builtins,
        even_squares_transduce],
    'fold': [
        sum_even_squares_loop,
        sum_even_squares_comprehension,
        sum_even_squares_builtins,
        sum_even_squares_transduce],
}

def performance_compare(*cases, case_args=(), timeit_kwargs=None):
    """Time each case, returns rows of (name, time, scale against the fastest)."""
    timeit_kwargs = timeit_kwargs or {}
    results = {}
    for case in cases:
        time = timeit.timeit(lambda: case(*case_args), **timeit_kwargs)
        results[case.__name__] = time
    lowest = min(results.values())
    return [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]

def positive_int(args, option):
    try:
        value = int(args[option])
    except ValueError:
        raise DocoptExit("%s must be an integer, got %s" % (option, args[option]))
    if value <= 0:
        raise DocoptExit("%s must be positive, got %s" % (option, value))
    return value

def main(argv=None):
    args = docopt(USAGE, argv)
    size = positive_int(args, '--size')
    number = positive_int(args, '--number')
    workload = args['--workload']
    if workload not in WORKLOADS:
        raise DocoptExit("Unknown workload %s, expected one of %s" % (workload, ", ".join(sorted(WORKLOADS))))
    table = performance_compare(
        *WORKLOADS[workload],
        case_args=[list(range(size))],
        timeit_kwargs={'number': number})
    print(tabulate(table, headers=['case', 'time', 'scale']))
    return 0
