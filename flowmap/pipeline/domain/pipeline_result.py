"""複数エンティティ処理の結果"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ...shared.domain.session import Session
from ...flow.domain.flow_table import FlowTable


@dataclass
class EntityResult:
    """1エンティティ分の圧縮・集計結果

    Attributes:
        entity_id: エンティティID（例: "walker_1"）
        sessions: 圧縮後のセッション列
        flow_table: このエンティティのエッジごとの回数
        num_observations: 入力観測数
        num_linked: gap 以内でつながった遷移の数（flow_table.total() と一致）
    """

    entity_id: str
    sessions: List[Session]
    flow_table: FlowTable
    num_observations: int
    num_linked: int

    @property
    def num_transitions(self) -> int:
        """連続するセッションペアの数（gap 判定前）"""
        return max(len(self.sessions) - 1, 0)


@dataclass
class PipelineResult:
    """全エンティティの結果と、マージ済みの FlowTable

    Attributes:
        gap: セッション圧縮に使った gap（秒）
        flow_gap: エッジ集計に使った gap（秒）
        entity_results: エンティティごとの結果（entity_id 順）
        flow_table: 全エンティティを足し合わせた FlowTable
    """

    gap: float
    flow_gap: float
    entity_results: List[EntityResult] = field(default_factory=list)
    flow_table: FlowTable = field(default_factory=FlowTable)

    @property
    def num_observations(self) -> int:
        return sum(r.num_observations for r in self.entity_results)

    @property
    def num_sessions(self) -> int:
        return sum(len(r.sessions) for r in self.entity_results)

    def summary(self) -> Dict[str, Any]:
        """ログ出力用のサマリー"""
        return {
            "gap_seconds": self.gap,
            "flow_gap_seconds": self.flow_gap,
            "num_entities": len(self.entity_results),
            "num_observations": self.num_observations,
            "num_sessions": self.num_sessions,
            "num_transitions": sum(r.num_transitions for r in self.entity_results),
            "num_linked": sum(r.num_linked for r in self.entity_results),
            "num_edges": len(self.flow_table),
            "total_flow": self.flow_table.total(),
        }
