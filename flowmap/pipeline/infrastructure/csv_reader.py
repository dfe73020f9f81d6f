"""観測CSV読み込み"""

from typing import Optional

import pandas as pd

from .frames import require_columns


def read_observations(
    file_path: str,
    entity_col: Optional[str] = "entity_id",
    loc_col: str = "loc",
    time_col: str = "time",
) -> pd.DataFrame:
    """観測CSVを読み込む

    全列を文字列として読み（空文字の場所ラベルも NaN にせず残す）、
    時刻列だけは数値として読めれば数値に変換する。

    Args:
        file_path: CSVファイルのパス
        entity_col: エンティティIDの列名（None なら読まない）
        loc_col: 場所ラベルの列名
        time_col: 時刻の列名

    Returns:
        観測の表

    Raises:
        InputShapeError: 必要な列がない場合

    Examples:
        >>> df = read_observations("data/observations.csv")
        >>> list(df.columns)
        ['entity_id', 'loc', 'time']
    """
    df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    require_columns(df, [loc_col, time_col] + ([entity_col] if entity_col else []))

    # 時刻列は数値として読めれば秒として扱う
    try:
        df[time_col] = pd.to_numeric(df[time_col])
    except ValueError:
        # 日時文字列のまま残し、後段でパースする
        pass

    return df
