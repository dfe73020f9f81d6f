"""複数エンティティの圧縮・集計

エンティティごとに compress_movement -> flow_statistics を独立に実行し、
最後に FlowTable を足し合わせる。1回の呼び出しの中は逐次処理で、
並列化はエンティティ単位でのみ行う。
"""

from concurrent.futures import ProcessPoolExecutor
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from ...compressor.usecase.compress_movement import compress_movement
from ...flow.usecase.flow_statistics import flow_statistics, merge_flow_tables
from ..domain.pipeline_result import EntityResult, PipelineResult
from ..infrastructure.frames import require_columns, timestamps_to_seconds

SINGLE_ENTITY_ID = "all"


def process_entity(
    entity_id: str,
    locations: Sequence[str],
    timestamps: Sequence[float],
    gap: float,
    flow_gap: float,
) -> EntityResult:
    """1エンティティ分の圧縮と集計

    プロセスプールに渡すためモジュールトップレベルに置く。
    """
    sessions = compress_movement(locations, timestamps, gap)
    table = flow_statistics(sessions, flow_gap)
    return EntityResult(
        entity_id=entity_id,
        sessions=sessions,
        flow_table=table,
        num_observations=len(timestamps),
        num_linked=table.total(),
    )


def group_observations_by_entity(
    observations: pd.DataFrame,
    entity_col: Optional[str],
    loc_col: str,
    time_col: str,
) -> Dict[str, Tuple[List[str], List[float]]]:
    """観測の表をエンティティごとの (locations, timestamps) に分ける

    entity_col が None の場合は全体を1エンティティ（"all"）として扱う。
    各グループ内の並びは入力順のまま（並べ替えは compress_movement が行う）。

    Returns:
        entity_id -> (locations, timestamps)（entity_id の昇順）
    """
    columns = [loc_col, time_col] + ([entity_col] if entity_col else [])
    require_columns(observations, columns)

    if entity_col is None:
        return {
            SINGLE_ENTITY_ID: (
                observations[loc_col].astype(str).tolist(),
                timestamps_to_seconds(observations[time_col]),
            )
        }

    grouped = {}
    for entity_id, group in observations.groupby(entity_col, sort=True):
        grouped[str(entity_id)] = (
            group[loc_col].astype(str).tolist(),
            timestamps_to_seconds(group[time_col]),
        )
    return grouped


def run_pipeline(
    observations: pd.DataFrame,
    gap: float,
    flow_gap: Optional[float] = None,
    entity_col: Optional[str] = "entity_id",
    loc_col: str = "loc",
    time_col: str = "time",
    workers: int = 1,
) -> PipelineResult:
    """全エンティティを処理して結果をまとめる

    【処理フロー】
    1. 観測をエンティティごとにグループ化
    2. 各エンティティで compress_movement -> flow_statistics
       （workers > 1 の場合はプロセスプールで並列実行）
    3. エンティティごとの FlowTable を同じエッジの回数を足してマージ

    結果は workers の値に依存しない。

    Args:
        observations: 観測の表（entity_col, loc_col, time_col を含む）
        gap: セッション圧縮の gap（秒）
        flow_gap: エッジ集計の gap（秒）。省略時は gap と同じ
        entity_col: エンティティIDの列名。None なら全体を1エンティティとする
        loc_col: 場所ラベルの列名
        time_col: 時刻の列名（数値秒または日時文字列）
        workers: 並列プロセス数

    Returns:
        PipelineResult
    """
    if flow_gap is None:
        flow_gap = gap

    grouped = group_observations_by_entity(observations, entity_col, loc_col, time_col)
    entity_ids = list(grouped.keys())

    if workers > 1 and len(entity_ids) > 1:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(
                    process_entity, entity_id, *grouped[entity_id], gap, flow_gap
                )
                for entity_id in entity_ids
            ]
            entity_results = [f.result() for f in futures]
    else:
        entity_results = [
            process_entity(entity_id, *grouped[entity_id], gap, flow_gap)
            for entity_id in entity_ids
        ]

    return PipelineResult(
        gap=gap,
        flow_gap=flow_gap,
        entity_results=entity_results,
        flow_table=merge_flow_tables(r.flow_table for r in entity_results),
    )
