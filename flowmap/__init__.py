"""flowmap: 移動履歴の滞在セッション圧縮と場所間フロー集計

時刻付きの観測 (location, timestamp) を滞在セッションに圧縮し、
連続するセッション間の有向エッジごとの移動回数を集計する。
"""

from .shared.domain.errors import (
    FlowmapError,
    InputShapeError,
    InvalidTimestampError,
    InvalidSessionError,
    ConfigError,
)
from .shared.domain.session import Session
from .shared.utils.index_sorter import order
from .compressor import Observation, compress_movement, compress_observations
from .flow import Edge, FlowTable, flow_statistics, merge_flow_tables

__all__ = [
    # Domain
    "Session",
    "Observation",
    "Edge",
    "FlowTable",
    # Usecase
    "order",
    "compress_movement",
    "compress_observations",
    "flow_statistics",
    "merge_flow_tables",
    # Errors
    "FlowmapError",
    "InputShapeError",
    "InvalidTimestampError",
    "InvalidSessionError",
    "ConfigError",
]
