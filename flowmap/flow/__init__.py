"""Flow Aggregator

時刻順のセッション列から、gap 以内の遷移を有向エッジごとに数える。
"""

from .domain.edge import Edge
from .domain.flow_table import FlowTable
from .usecase.flow_statistics import flow_statistics, merge_flow_tables

__all__ = [
    "Edge",
    "FlowTable",
    "flow_statistics",
    "merge_flow_tables",
]
