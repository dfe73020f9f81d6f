"""観測レコード（Compressor用）"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Observation:
    """1回の検知イベント

    入力内の位置以外に識別子は持たない。

    Examples:
        >>> obs = Observation(location="A", timestamp=1705230005.123)
    """

    location: str  # 場所ラベル
    timestamp: float  # 観測時刻（エポック秒）
