import builtins
import timeit
from functools import partial
from time import sleep
from tabulate import tabulate
from foldxf import arrayOf, compose, filter, into, map, pipeline, sequence, sumOf, transduce
from foldxf.util import consume

def isEven(n):
    return n % 2 == 0

def sum_even_loop(ns):
    total = 0
    for n in ns:
        if isEven(n):
            total += n
    return total

def sum_even_comprehension(ns):
    return sum([n for n in ns if isEven(n)])

def sum_even_filter(ns):
    return sum(builtins.filter(isEven, ns))

def sum_even_transduce(ns):
    return transduce(filter(isEven), sumOf, ns)

# args example: partial(inc_square_comprehension, hundredK)
# kwargs example number=1000
def performance_compare(*cases, case_args=[], timeit_kwargs={}):
    results = {}
    for case in cases:
        name = case.__name__
        case = partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))

def inc(x):
    return x + 1

def square(x):
    return x * x

def inc_square_comprehension(nums):
    return [(num + 1) * (num + 1) for num in nums]

def inc_square_loop(nums):
    out = []
    for n in nums:
        out.append((n + 1) * (n + 1))
    return out

inc_square = compose(map(inc), map(square))

def inc_square_transduce(nums):
    return transduce(inc_square, arrayOf, nums)

def inc_square_into(nums):
    return into([], inc_square, nums)

def inc_square_sequence(nums):
    return list(sequence(inc_square, nums))

def inc_square_pipeline(nums):
    return pipeline(4, inc_square, nums, arrayOf)


hundredK = range(100000)

def test_sum_even():
    performance_compare(
        sum_even_loop,
        sum_even_comprehension,
        sum_even_filter,
        sum_even_transduce,
        case_args=[list(range(1000))],
        timeit_kwargs={'number': 1000})

def test_transducers():
    performance_compare(inc_square_comprehension,
                        inc_square_loop,
                        inc_square_transduce,
                        inc_square_into,
                        inc_square_sequence,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})

def test_parallelism_short():
    performance_compare(inc_square_transduce,
                        inc_square_pipeline,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 1})

def sleepy(x):
    sleep(x)
    return x

def serial_io(delays):
    consume(sequence(map(sleepy), delays))

def pipeline_io(delays):
    pipeline(8, map(sleepy), delays, arrayOf)

def test_parallelism_io():
    performance_compare(serial_io,
                        pipeline_io,
                        case_args=[[.1] * 40],
                        timeit_kwargs={'number': 1})
