"""連続するセッション間の移動回数の集計

時刻順のセッション列を前後2つずつ見て、間隔が gap 以内の遷移を
有向エッジとしてカウントする。
"""

from typing import Iterable, Sequence

from ...shared.domain.session import Session
from ..domain.edge import Edge
from ..domain.flow_table import FlowTable


def flow_statistics(sessions: Sequence[Session], gap: float) -> FlowTable:
    """エッジ（場所ペア）ごとの移動回数を集計

    【処理フロー】
    1. 2番目のセッションから順に (previous, current) のペアを作る
    2. delta = current.start_time - previous.end_time を計算
    3. delta <= gap のペアだけ Edge(previous.location, current.location) を作ってカウント

    入力は時刻順に並んでいる前提で、ここでは並べ替えない。
    同じ場所への遷移（A->A）もそのままカウントする。

    Args:
        sessions: start_time 昇順のセッション列
        gap: 2つのセッションを1回の移動とみなす最大間隔（秒）

    Returns:
        FlowTable。セッションが2つ未満なら空

    Examples:
        >>> sessions = [
        ...     Session("A", 0, 5),
        ...     Session("B", 20, 20),
        ...     Session("A", 25, 25),
        ... ]
        >>> flow_statistics(sessions, gap=10).to_dict()
        {'B->A': 1}
    """
    table = FlowTable()

    for i in range(1, len(sessions)):
        previous = sessions[i - 1]
        current = sessions[i]

        # gap が NaN の場合もつながない
        delta = current.start_time - previous.end_time
        if delta <= gap:
            table.add(Edge(origin=previous.location, destination=current.location))

    return table


def merge_flow_tables(tables: Iterable[FlowTable]) -> FlowTable:
    """複数の FlowTable を同じエッジの回数を足して1つにまとめる

    エンティティごとの集計結果を統合するのに使う。順序には依存しない。

    Examples:
        >>> t1 = FlowTable.from_dict({"A->B": 1})
        >>> t2 = FlowTable.from_dict({"A->B": 2, "B->C": 1})
        >>> merge_flow_tables([t1, t2]).to_dict()
        {'A->B': 3, 'B->C': 1}
    """
    merged = FlowTable()
    for table in tables:
        for edge, count in table.items():
            merged.add(edge, count)
    return merged

