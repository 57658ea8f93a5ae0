from foldxf.reducer import \
    NOTHING,        \
    Reduced,        \
    Reducer,        \
    Reducible,      \
    arrayOf,        \
    as_reducer,     \
    ensure_reduced, \
    is_reduced,     \
    joinedWith,     \
    reduce,         \
    reduced,        \
    reducer,        \
    sumOf,          \
    unreduced
from foldxf.compose import Transducer, Wrapping, compose, lift
from foldxf.transducer import \
    cat,          \
    distinct,     \
    drop,         \
    dropWhile,    \
    filter,       \
    keep,         \
    map,          \
    mapcat,       \
    mapIndexed,   \
    partitionAll, \
    remove,       \
    take,         \
    takeWhile,    \
    windowed
from foldxf.transduce import into, sequence, transduce
from foldxf.eduction import Eduction, eduction
from foldxf.pipeline import pipeline, psequence
