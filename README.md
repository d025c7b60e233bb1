# sqmatrix

`sqmatrix` works with square matrices of integers. It can add and multiply
them, sum their diagonals, swap their rows and columns, and read pairs of
matrices from plain text.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from sqmatrix.matrix import Matrix

a = Matrix([[0, 0, 8], [6, 7, 8], [4, 1, 6]])
b = Matrix([[6, 3, 7], [8, 6, 6], [3, 3, 5]])

total = a + b      # element-wise sum
product = a * b    # matrix product

print(product)                 # one row per line, each value followed by a space
print(a.size)                  # 3
print(a.sum_diagonal_major())  # 13, top left to bottom right
print(a.sum_diagonal_minor())  # 19, top right to bottom left

a.swap_rows(0, 1)
a.swap_cols(0, 2)
```

`Matrix(data)` takes any iterable of rows and raises `ValueError` if the data
is not square. `Matrix.zeros(n)` makes an `n`-by-`n` matrix of zeros.

Elements are read and written by a `(row, column)` pair:

```python
m = Matrix.zeros(3)
m[1, 2] = 5
print(m[1, 2])  # 5
```

Reading or writing an element outside the matrix, or swapping a row or column
outside it, raises `IndexError`. Adding or multiplying matrices of different
sizes raises `ValueError`.

The `size` property gives the number of rows (and columns); `len()` gives the
same. The `rows` property gives a copy of the contents as a list of rows, and
iterating over a matrix yields copies of its rows. Two matrices compare equal
when their contents are equal.

## Input format

A pair of matrices is written as the size `N`, followed by the `N * N` values
of the first matrix and then the `N * N` values of the second, all separated
by whitespace, row by row:

```
3
1 2 3
4 5 6
7 8 9
9 8 7
6 5 4
3 2 1
```

`read_matrices(path)` reads such a file and `parse_matrices(text)` reads the
same format from a string. Both return the two matrices, and raise
`ValueError` if the input is empty, holds something other than integers, has a
negative size or has too few values:

```python
from sqmatrix.matrix import read_matrices

first, second = read_matrices("input.txt")
```

## Command line

```
sqmatrix [FILE]
```

This reads a pair of matrices in the format above from `FILE`, or from
`input.txt` in the current directory when no file is given. It exits with
status 0 when the file is read, and with status 1 and a message on standard
error when the file cannot be opened or is not in the expected format.

## What it does not do

The command only checks that the input loads. It does not print the matrices
or any result computed from them; for that, use the library from Python.