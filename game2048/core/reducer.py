"""
Row reduction: slide the tiles of a single row towards its head and merge equal pairs.
"""

from numpy import array, ndarray, zeros_like


def slide_and_combine(row: ndarray) -> tuple[ndarray, int]:
    """
    Collapse a row towards index 0, merging adjacent equal tiles once each.

    Parameters
    ----------
    row : ndarray
        A 1D array of tile values, zeros being empty cells.

    Returns
    -------
    new_row : ndarray
        A new array of the same length with the surviving tiles packed to the left.
    score : int
        Sum of the values created by merges.

    Notes
    -----
    - Zeros are removed before merging, so tiles separated by gaps still merge.
    - Merging goes from the head of the row towards the tail.
    - A merged tile is never merged again in the same pass: ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``.
    """
    row = array(row)
    non_zero = row[row != 0]

    merged = []
    score = 0

    # ##: Walk the packed tiles pairwise.
    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            value = int(non_zero[i]) * 2
            merged.append(value)
            score += value
            i += 2
        else:
            merged.append(int(non_zero[i]))
            i += 1

    # ##: Pad with empty cells up to the original length.
    result = zeros_like(row)
    result[: len(merged)] = merged
    return result, score
