"""Text patterns and reading and writing integer matrices."""

Matrix = list[list[int]]


def diamond(n: int) -> str:
    """Return a star diamond of height ``2 * n``; the widest row appears twice."""
    if n < 0:
        raise ValueError(f"size must be non-negative, got {n}")
    widths = [*range(1, n + 1), *range(n, 0, -1)]
    return "".join(" " * (n - i + 1) + "*" * (2 * i - 1) + "\n" for i in widths)


def parse_matrix(text: str) -> Matrix:
    """Read a row count, a column count and then that many integers, row by row.

    Anything after the last needed number is ignored.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("matrix text must start with a row count and a column count")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"matrix text holds a value that is not an integer: {exc}") from None
    rows, cols = numbers[0], numbers[1]
    if rows < 0 or cols < 0:
        raise ValueError(f"matrix dimensions must be non-negative, got {rows} x {cols}")
    cells = numbers[2:]
    if len(cells) < rows * cols:
        raise ValueError(f"expected {rows * cols} values, found {len(cells)}")
    return [cells[r * cols : (r + 1) * cols] for r in range(rows)]


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix with each value followed by a space, one row per line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)