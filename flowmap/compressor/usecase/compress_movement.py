"""移動履歴の圧縮

同じ場所で連続して観測されたレコードを1つの滞在セッションにまとめる。
"""

import math
from typing import List, Optional, Sequence

from ...shared.domain.errors import InputShapeError, InvalidTimestampError
from ...shared.domain.session import Session
from ...shared.utils.index_sorter import order
from ..domain.observation import Observation
from ..domain.open_session import OpenSession


def _validate_inputs(locations: Sequence[str], timestamps: Sequence[float]) -> None:
    """処理開始前に入力の形と時刻の有限性を検査する"""
    if len(locations) != len(timestamps):
        raise InputShapeError(
            f"locations と timestamps の長さが一致しません: "
            f"{len(locations)} != {len(timestamps)}"
        )

    for i, ts in enumerate(timestamps):
        if not math.isfinite(ts):
            raise InvalidTimestampError(f"有限でない時刻があります: index={i}, value={ts}")


def compress_movement(
    locations: Sequence[str],
    timestamps: Sequence[float],
    gap: float,
) -> List[Session]:
    """1エンティティの移動履歴を滞在セッション列に圧縮

    【処理フロー】
    1. 時刻の昇順インデックスを求める（同時刻は入力順）
    2. その順に観測を走査し、開いているセッションを1つ保持する
    3. 同じ場所かつ直前の観測から gap 秒以内なら延長、それ以外は閉じて新規に開く
    4. 走査後、最後に開いているセッションを必ず出力する

    gap < 0 は「一切まとめない」として扱う（エラーにはしない）。

    Args:
        locations: 場所ラベルの列
        timestamps: 観測時刻（秒）の列。locations と同じ長さ
        gap: 同じ場所の観測を1セッションにまとめる最大間隔（秒）

    Returns:
        start_time 昇順のセッションリスト。隣り合うセッションの場所は異なる
        （gap >= 0 の場合）。入力が空なら空リスト

    Raises:
        InputShapeError: locations と timestamps の長さが違う場合
        InvalidTimestampError: NaN / inf の時刻を含む場合

    Examples:
        >>> compress_movement(["A", "A", "B", "A"], [0, 5, 20, 25], gap=10)
        [Session(location='A', start_time=0, end_time=5), Session(location='B', start_time=20, end_time=20), Session(location='A', start_time=25, end_time=25)]
    """
    _validate_inputs(locations, timestamps)

    sessions: List[Session] = []
    current: Optional[OpenSession] = None

    for idx in order(timestamps):
        location = locations[idx]
        timestamp = timestamps[idx]

        if current is None:
            current = OpenSession.open(location, timestamp)
        elif current.can_extend(location, timestamp, gap):
            # 同じ滞在の続き
            current.extend(timestamp)
        else:
            # 新しい滞在
            sessions.append(current.close())
            current = OpenSession.open(location, timestamp)

    if current is not None:
        sessions.append(current.close())

    return sessions


def compress_observations(
    observations: Sequence[Observation],
    gap: float,
) -> List[Session]:
    """Observation のリストを圧縮（compress_movement のラッパー）

    Examples:
        >>> obs = [Observation("A", 0.0), Observation("A", 0.0)]
        >>> compress_observations(obs, gap=0.0)
        [Session(location='A', start_time=0.0, end_time=0.0)]
    """
    locations = [obs.location for obs in observations]
    timestamps = [obs.timestamp for obs in observations]
    return compress_movement(locations, timestamps, gap)
