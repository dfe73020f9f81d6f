"""エッジごとの移動回数テーブル"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from .edge import Edge


@dataclass
class FlowTable:
    """Edge -> 移動回数 の集計結果

    キーは一意で、並び順には意味がない。
    複数エンティティの結果は merge() で同じエッジの回数を足し合わせる。

    Attributes:
        counts: エッジごとの回数（0 以下のエントリは持たない）

    Examples:
        >>> table = FlowTable()
        >>> table.add(Edge("B", "A"))
        >>> table.to_dict()
        {'B->A': 1}
        >>> table[Edge("A", "B")]
        0
    """

    counts: Dict[Edge, int] = field(default_factory=dict)

    def add(self, edge: Edge, count: int = 1) -> None:
        """エッジの回数を加算"""
        if count < 0:
            raise ValueError(f"回数は非負である必要があります: {count}")
        if count == 0:
            return
        self.counts[edge] = self.counts.get(edge, 0) + count

    def merge(self, other: "FlowTable") -> "FlowTable":
        """2つのテーブルを足し合わせた新しいテーブルを返す（自身は変更しない）"""
        merged = FlowTable()
        for edge, count in self.items():
            merged.add(edge, count)
        for edge, count in other.items():
            merged.add(edge, count)
        return merged

    def total(self) -> int:
        """全エッジの回数の合計"""
        return sum(self.counts.values())

    def items(self) -> Iterator[Tuple[Edge, int]]:
        return iter(self.counts.items())

    def __getitem__(self, edge: Edge) -> int:
        return self.counts.get(edge, 0)

    def __contains__(self, edge: object) -> bool:
        return edge in self.counts

    def __len__(self) -> int:
        return len(self.counts)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.counts)

    def to_dict(self) -> Dict[str, int]:
        """複合キー文字列の辞書形式に変換"""
        return {edge.key: count for edge, count in self.counts.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> "FlowTable":
        """to_dict() の出力から復元"""
        table = cls()
        for key, count in data.items():
            table.add(Edge.from_key(key), int(count))
        return table
