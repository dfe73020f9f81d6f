"""flowmap プログラマブルAPI

バッチ実行やテストからプログラム的に呼び出すためのインターフェース。
CLI（main.py）もこのモジュールを経由する。
"""

from pathlib import Path
from typing import Optional

from ..shared.infrastructure.config_loader import load_flowmap_settings
from .domain.pipeline_result import PipelineResult
from .infrastructure.csv_reader import read_observations
from .infrastructure.csv_writer import write_flow_csv, write_sessions_csv
from .infrastructure.logger import save_summary_log
from .usecase.run_pipeline import run_pipeline


def run_flowmap(
    input_file: str,
    output_dir: str,
    gap: Optional[float] = None,
    flow_gap: Optional[float] = None,
    workers: Optional[int] = None,
    config_dir: str = "config",
    verbose: bool = False,
) -> PipelineResult:
    """観測CSVを読み込み、セッション表とエッジ表を出力する

    引数で指定されなかった値は config/flowmap_settings.jsonc から読み込む。

    【出力ファイル】
    - {output_dir}/sessions.csv
    - {output_dir}/flows.csv
    - {output_dir}/logs/flowmap_summary_{timestamp}.md

    Args:
        input_file: 観測CSVのパス
        output_dir: 出力ディレクトリ
        gap: セッション圧縮の gap（秒）
        flow_gap: エッジ集計の gap（秒）。省略時、gap を指定していればその値、
            指定していなければ設定ファイルの flow_gap_seconds（null なら gap_seconds）
        workers: 並列プロセス数
        config_dir: 設定ファイルディレクトリ
        verbose: 進捗を表示するか

    Returns:
        PipelineResult

    Examples:
        >>> result = run_flowmap(
        ...     input_file="data/observations.csv",
        ...     output_dir="flowmap_result",
        ...     gap=600,
        ... )
    """
    settings = load_flowmap_settings(config_dir)
    if gap is None:
        gap = float(settings["gap_seconds"])
        # gap も設定ファイルから取るときだけ flow_gap_seconds を使う
        if flow_gap is None and settings["flow_gap_seconds"] is not None:
            flow_gap = float(settings["flow_gap_seconds"])
    if workers is None:
        workers = int(settings["workers"])

    observations = read_observations(
        input_file,
        entity_col=settings["entity_column"],
        loc_col=settings["location_column"],
        time_col=settings["time_column"],
    )
    if verbose:
        print(f"読み込んだ観測数: {len(observations)}")

    result = run_pipeline(
        observations,
        gap=gap,
        flow_gap=flow_gap,
        entity_col=settings["entity_column"],
        loc_col=settings["location_column"],
        time_col=settings["time_column"],
        workers=workers,
    )
    if verbose:
        print(f"エンティティ数: {len(result.entity_results)}")
        print(f"セッション数: {result.num_sessions}")
        print(f"エッジ数: {len(result.flow_table)} (移動回数合計: {result.flow_table.total()})")

    out = Path(output_dir)
    sessions_file = write_sessions_csv(result, str(out / "sessions.csv"))
    flows_file = write_flow_csv(result.flow_table, str(out / "flows.csv"))
    summary_file = save_summary_log(result, str(out / "logs"), input_file=input_file)

    if verbose:
        print(f"✓ セッション表: {sessions_file}")
        print(f"✓ エッジ表: {flows_file}")
        print(f"✓ サマリー: {summary_file}")

    return result
