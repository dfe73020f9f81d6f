"""圧縮中の状態を管理するデータクラス"""

from dataclasses import dataclass

from ...shared.domain.session import Session


@dataclass
class OpenSession:
    """まだ閉じていない（延長中の）セッション

    時刻順の走査中に1つだけ保持され、同じ場所・ギャップ以内の観測が来るたびに
    end_time が伸びる。条件を満たさない観測が来たら close() して出力に追加する。

    Attributes:
        location: 滞在中の場所
        start_time: セッション開始時刻
        end_time: 直前に取り込んだ観測の時刻
    """

    location: str
    start_time: float
    end_time: float

    @classmethod
    def open(cls, location: str, timestamp: float) -> "OpenSession":
        """1件の観測から長さ0のセッションを開く"""
        return cls(location=location, start_time=timestamp, end_time=timestamp)

    def can_extend(self, location: str, timestamp: float, gap: float) -> bool:
        """この観測でセッションを延長できるか

        場所が同じで、直前の観測からの経過時間が gap 以下なら延長できる。
        gap < 0 の場合は（時刻順に走査している限り）常に False になる。
        """
        return location == self.location and timestamp - self.end_time <= gap

    def extend(self, timestamp: float) -> None:
        """end_time を timestamp まで伸ばす"""
        self.end_time = timestamp

    def close(self) -> Session:
        """確定したセッションを返す"""
        return Session(
            location=self.location,
            start_time=self.start_time,
            end_time=self.end_time,
        )
