"""有向エッジ（場所ペア）のドメインモデル"""

from dataclasses import dataclass

EDGE_SEPARATOR = "->"


@dataclass(frozen=True)
class Edge:
    """2つの場所を結ぶ有向エッジ

    Attributes:
        origin: 出発側セッションの場所（例: "A"）
        destination: 到着側セッションの場所（例: "B"）

    Examples:
        >>> edge = Edge(origin="A", destination="B")
        >>> edge.key
        'A->B'
        >>> Edge.from_key("A->B") == edge
        True
    """

    origin: str
    destination: str

    @property
    def key(self) -> str:
        """表形式出力用の複合キー（例: "A->B"）"""
        return f"{self.origin}{EDGE_SEPARATOR}{self.destination}"

    @property
    def is_self_loop(self) -> bool:
        """出発と到着が同じ場所か"""
        return self.origin == self.destination

    @classmethod
    def from_key(cls, key: str) -> "Edge":
        """複合キーからエッジを復元

        最初の区切り文字で分割する。区切り文字を含まないキーは ValueError。

        Examples:
            >>> Edge.from_key("->B")
            Edge(origin='', destination='B')
        """
        origin, sep, destination = key.partition(EDGE_SEPARATOR)
        if not sep:
            raise ValueError(f"エッジキーに '{EDGE_SEPARATOR}' がありません: {key!r}")
        return cls(origin=origin, destination=destination)
