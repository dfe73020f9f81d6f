"""滞在セッション (全モジュールで共通)"""

import math
from dataclasses import dataclass

from .errors import InvalidSessionError, InvalidTimestampError


@dataclass(frozen=True)
class Session:
    """1つの場所での連続した滞在

    Session Compressor が生成し、Flow Aggregator が読み取り専用で使う。
    同じエンティティのセッション列は start_time 昇順で、
    隣り合う2つのセッションの場所は必ず異なる。

    Examples:
        >>> session = Session(location="A", start_time=0.0, end_time=5.0)
        >>> session.duration_seconds
        5.0
        >>> Session(location="A", start_time=5.0, end_time=0.0)
        Traceback (most recent call last):
        ...
        flowmap.shared.domain.errors.InvalidSessionError: start_time > end_time: 5.0 > 0.0 (location='A')
    """

    location: str  # 場所ラベル（空文字も可）
    start_time: float  # 最初の観測時刻（秒）
    end_time: float  # 最後の観測時刻（秒）

    def __post_init__(self) -> None:
        if not (math.isfinite(self.start_time) and math.isfinite(self.end_time)):
            raise InvalidTimestampError(
                f"有限でない時刻があります: start_time={self.start_time}, "
                f"end_time={self.end_time} (location={self.location!r})"
            )
        if self.start_time > self.end_time:
            raise InvalidSessionError(
                f"start_time > end_time: {self.start_time} > {self.end_time} "
                f"(location={self.location!r})"
            )

    @property
    def duration_seconds(self) -> float:
        """滞在時間（秒）"""
        return self.end_time - self.start_time

    @property
    def midpoint(self) -> float:
        """滞在区間の中点時刻"""
        return (self.start_time + self.end_time) / 2.0

    def to_dict(self) -> dict:
        """辞書形式に変換"""
        return {
            "location": self.location,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }
