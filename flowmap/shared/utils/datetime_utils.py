"""日時処理ユーティリティ

パイプライン内部では時刻をエポック秒（float）で扱う。
CSV などの外部入力では "YYYY-MM-DD HH:MM:SS[.mmm]" 形式も受け付ける。
"""

from datetime import datetime, timezone

from ..domain.errors import InvalidTimestampError


def format_timestamp(dt: datetime) -> str:
    """タイムスタンプをミリ秒まで出力 (YYYY-MM-DD HH:MM:SS.mmm)

    Examples:
        >>> from datetime import datetime
        >>> dt = datetime(2024, 1, 14, 11, 0, 5, 123000)
        >>> format_timestamp(dt)
        '2024-01-14 11:00:05.123'
    """
    return dt.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def parse_timestamp(ts_str: str) -> datetime:
    """タイムスタンプ文字列をパース

    Args:
        ts_str: タイムスタンプ文字列 (ミリ秒あり/なし両対応)

    Returns:
        datetime オブジェクト

    Raises:
        InvalidTimestampError: どちらのフォーマットにも一致しない場合

    Examples:
        >>> parse_timestamp("2024-01-14 11:00:05.123")
        datetime.datetime(2024, 1, 14, 11, 0, 5, 123000)
        >>> parse_timestamp("2024-01-14 11:00:05")
        datetime.datetime(2024, 1, 14, 11, 0, 5)
    """
    try:
        # ミリ秒ありのフォーマット
        return datetime.strptime(ts_str, "%Y-%m-%d %H:%M:%S.%f")
    except ValueError:
        pass

    try:
        # ミリ秒なしのフォーマット
        return datetime.strptime(ts_str, "%Y-%m-%d %H:%M:%S")
    except ValueError as e:
        raise InvalidTimestampError(f"時刻を解釈できません: {ts_str!r}") from e


def to_epoch_seconds(dt: datetime) -> float:
    """datetime をエポック秒に変換（タイムゾーンなしは UTC とみなす）

    Examples:
        >>> to_epoch_seconds(datetime(1970, 1, 1, 0, 1, 30))
        90.0
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()

