"""時刻順の並べ替えインデックス"""

from typing import List, Sequence

import numpy as np

from ..domain.errors import InputShapeError


def order(values: Sequence[float]) -> List[int]:
    """values を昇順に並べるインデックス列を返す

    同じ値どうしは元の位置の順に並ぶ（安定ソート）。
    values[i] for i in order(values) が昇順になる。

    Args:
        values: 1次元の実数列

    Returns:
        0..N-1 の置換

    Raises:
        InputShapeError: 1次元でない入力

    Examples:
        >>> order([5.0, 0.0, 5.0, 2.0])
        [1, 3, 0, 2]
        >>> order([])
        []
    """
    array = np.asarray(values, dtype=float)
    if array.ndim != 1:
        raise InputShapeError(f"1次元の列が必要です: ndim={array.ndim}")

    return np.argsort(array, kind="stable").tolist()
