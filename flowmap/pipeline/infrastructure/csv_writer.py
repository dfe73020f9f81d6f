"""セッション表・エッジ表のCSV出力"""

from pathlib import Path

import pandas as pd

from ...flow.domain.flow_table import FlowTable
from ..domain.pipeline_result import PipelineResult
from .frames import SESSION_COLUMNS, flow_table_to_frame, sessions_to_frame


def build_sessions_frame(result: PipelineResult) -> pd.DataFrame:
    """全エンティティのセッションを entity_id 列付きの1つの表にまとめる"""
    frames = []
    for entity_result in result.entity_results:
        df = sessions_to_frame(entity_result.sessions)
        df.insert(0, "entity_id", entity_result.entity_id)
        frames.append(df)

    if not frames:
        return pd.DataFrame(columns=["entity_id"] + SESSION_COLUMNS)
    return pd.concat(frames, ignore_index=True)


def write_sessions_csv(result: PipelineResult, output_file: str) -> str:
    """セッション表をCSVに出力

    【出力カラム】
    - entity_id: エンティティID
    - loc: 場所ラベル
    - stime: セッション開始時刻（秒）
    - etime: セッション終了時刻（秒）

    Returns:
        出力したファイルパス
    """
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    build_sessions_frame(result).to_csv(output_path, index=False)
    return str(output_path)


def write_flow_csv(table: FlowTable, output_file: str) -> str:
    """エッジ表をCSVに出力

    【出力カラム】
    - edge: "出発->到着" 形式のエッジ
    - flow: 移動回数

    Returns:
        出力したファイルパス
    """
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    flow_table_to_frame(table).to_csv(output_path, index=False)
    return str(output_path)
