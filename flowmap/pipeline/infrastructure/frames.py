"""データフレームとの相互変換

外部とのやり取りは3列（場所、開始、終了）と2列（エッジ、回数）の表で行う。
列名は loc / stime / etime と edge / flow。
"""

from typing import List

import pandas as pd

from ...shared.domain.errors import InputShapeError
from ...shared.domain.session import Session
from ...shared.utils.datetime_utils import parse_timestamp, to_epoch_seconds
from ...compressor.usecase.compress_movement import compress_movement
from ...flow.domain.flow_table import FlowTable
from ...flow.usecase.flow_statistics import flow_statistics

SESSION_COLUMNS = ["loc", "stime", "etime"]
FLOW_COLUMNS = ["edge", "flow"]


def require_columns(df: pd.DataFrame, columns: List[str]) -> None:
    """必要な列がすべてあるか確認する"""
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise InputShapeError(f"必要な列がありません: {missing}")


def timestamps_to_seconds(values: pd.Series) -> List[float]:
    """時刻列をエポック秒のリストに変換

    数値列はそのまま秒として扱い、文字列列は
    "YYYY-MM-DD HH:MM:SS[.mmm]" としてパースする。

    Examples:
        >>> timestamps_to_seconds(pd.Series([0, 5.5]))
        [0.0, 5.5]
        >>> timestamps_to_seconds(pd.Series(["1970-01-01 00:00:10"]))
        [10.0]
    """
    if pd.api.types.is_numeric_dtype(values):
        return values.astype(float).tolist()
    return [to_epoch_seconds(parse_timestamp(str(v))) for v in values]


def sessions_to_frame(sessions: List[Session]) -> pd.DataFrame:
    """セッションリストを loc / stime / etime の表に変換"""
    return pd.DataFrame(
        {
            "loc": [s.location for s in sessions],
            "stime": [s.start_time for s in sessions],
            "etime": [s.end_time for s in sessions],
        },
        columns=SESSION_COLUMNS,
    )


def frame_to_sessions(df: pd.DataFrame) -> List[Session]:
    """loc / stime / etime の表をセッションリストに戻す（行順を保つ）"""
    require_columns(df, SESSION_COLUMNS)
    return [
        Session(location=str(loc), start_time=float(stime), end_time=float(etime))
        for loc, stime, etime in zip(df["loc"], df["stime"], df["etime"])
    ]


def flow_table_to_frame(table: FlowTable) -> pd.DataFrame:
    """FlowTable を edge / flow の表に変換

    ファイル出力を再現可能にするため edge の文字列順に並べる。
    """
    rows = sorted(table.to_dict().items())
    df = pd.DataFrame(rows, columns=FLOW_COLUMNS)
    return df.astype({"edge": str, "flow": int})


def compress_frame(
    df: pd.DataFrame,
    gap: float,
    loc_col: str = "loc",
    time_col: str = "time",
) -> pd.DataFrame:
    """観測の表を圧縮してセッションの表を返す"""
    require_columns(df, [loc_col, time_col])
    locations = df[loc_col].astype(str).tolist()
    timestamps = timestamps_to_seconds(df[time_col])
    return sessions_to_frame(compress_movement(locations, timestamps, gap))


def flow_frame(df: pd.DataFrame, gap: float) -> pd.DataFrame:
    """セッションの表からエッジごとの回数の表を返す"""
    return flow_table_to_frame(flow_statistics(frame_to_sessions(df), gap))
