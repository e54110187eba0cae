from collections.abc import Mapping
import pytest
from docopt import DocoptExit
from kvtransduce.bench import WORKLOADS, main, performance_compare
from kvtransduce.convertors import to_dict

ns = list(range(20))

@pytest.mark.parametrize("workload", sorted(WORKLOADS))
def test_cases_agree(workload):
    results = [to_dict(r) if isinstance(r, Mapping) else r for r in (case(ns) for case in WORKLOADS[workload])]
    expected = results[0]
    for result in results[1:]:
        assert result == expected

def test_performance_compare():
    table = performance_compare(*WORKLOADS['fold'], case_args=[ns], timeit_kwargs={'number': 1})
    assert [name for (name, _, _) in table] == [case.__name__ for case in WORKLOADS['fold']]
    assert "1.00" in [scale for (_, _, scale) in table]

def test_main(capsys):
    assert main(['--size=10', '--number=1', '--workload=fold']) == 0
    out = capsys.readouterr().out
    assert "sum_even_squares_transduce" in out
    assert "scale" in out

@pytest.mark.parametrize(
    "argv",
    [
        ['--size=zero'],
        ['--number=0'],
        ['--workload=nope'],
    ])
def test_main_bad_args(argv):
    with pytest.raises(DocoptExit):
        main(argv)

def test_performance_compare_defaults():
    def noop():
        return None
    table = performance_compare(noop)
    assert [(name, scale) for (name, _, scale) in table] == [("noop", "1.00")]
