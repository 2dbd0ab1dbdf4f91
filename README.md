# ckmeans

Optimal univariate clustering splits a sequence of numbers into groups so that
the within-group sum of squared deviations is as small as possible. This
package uses Wang and Song's Ckmeans algorithm, which works by dynamic
programming. Heuristic approaches such as Jenks natural breaks do not always
find the best grouping. This algorithm always does.

You must give the number of clusters. The package does not choose it for you.

## Installation

```
pip install .
```

The package needs no third-party libraries.

## Usage

```python
from ckmeans.clustering import ckmeans, roundbreaks

data = [
    1.0, 12.0, 13.0, 14.0, 15.0, 16.0, 2.0, 2.0, 3.0, 5.0, 7.0,
    1.0, 2.0, 5.0, 7.0, 1.0, 5.0, 82.0, 1.0, 1.3, 1.1, 78.0,
]

ckmeans(data, 3)
# [[1.0, 1.0, 1.0, 1.0, 1.1, 1.3, 2.0, 2.0, 2.0, 3.0, 5.0, 5.0, 5.0, 7.0, 7.0],
#  [12.0, 13.0, 14.0, 15.0, 16.0],
#  [78.0, 82.0]]
```

`ckmeans(data, nclusters)` returns a list of clusters in ascending order. Each
cluster is a sorted list of the input values.

You can pass integers as well as floats. If every value is an `int`, the costs
are computed in integer arithmetic with truncating division. Any other data is
computed with ordinary division.

Some inputs give fewer clusters than you asked for:

- If the data holds fewer distinct values than `nclusters`, you get at most one
  cluster per distinct value.
- If every value is the same, you get a single cluster that holds all of them.

### Breaks for legends

`roundbreaks(data, nclusters)` clusters the data as floats and returns one
break value between each pair of adjacent clusters. You usually get
`nclusters - 1` breaks, and fewer if there are fewer clusters.

Each break is the roundest number that separates the highest value of one
cluster from the lowest value of the next. That makes the breaks suitable for
labelling the classes in a map or chart legend.

### Early stopping

`ckmeans_dynamic_stop(data, nclusters, min_improvement)` returns rows of the
dynamic-programming cost matrix:

- Row `k` holds, for each prefix of the sorted data, the lowest total
  within-cluster sum of squares with `k + 1` clusters.
- Rows are added until adding one more cluster would lower the total cost of
  the whole data by less than `min_improvement`.

## Errors

The error classes live in `ckmeans.errors`. All of them derive from
`CkmeansError`. Each error carries a default message, which you can read from
its `message` attribute.

- `TooFewClassesError` is raised when `nclusters` is less than 1. It is also a
  `ValueError`.
- `TooManyClassesError` is raised when `nclusters` is larger than the number of
  data values. It is also a `ValueError`.
- `LowWindowError` and `HighWindowError` are raised by `roundbreaks` if one of
  two adjacent clusters is empty.
- `ConversionError` is defined for numeric conversion failures. The clustering
  functions do not currently raise it.

If the data contains NaN, the functions raise a plain `ValueError`.

## What this package does not do

This is a library only. It has no command-line tool. It does not choose the
number of clusters automatically.

## Running the tests

```
pip install ".[test]"
pytest
```