"""実行ログの出力

責務: パイプラインの実行結果を人間が読みやすい Markdown で出力する。

【出力ファイル】
- flowmap_summary_{timestamp}.md
  - 実行パラメータ、全体集計、エンティティ別統計、上位エッジ
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from ...shared.utils.datetime_utils import format_timestamp
from ..domain.pipeline_result import PipelineResult

TOP_EDGES = 20


def save_summary_log(
    result: PipelineResult,
    log_dir: str = "flowmap_result/logs",
    input_file: Optional[str] = None,
) -> str:
    """実行サマリーを Markdown で保存

    ファイル名にはタイムスタンプが付与される。

    Args:
        result: パイプラインの結果
        log_dir: ログ出力ディレクトリ
        input_file: 入力ファイルパス（記録用）

    Returns:
        保存したファイルパス
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    summary_file = log_path / f"flowmap_summary_{timestamp}.md"

    summary = result.summary()

    with open(summary_file, "w", encoding="utf-8") as f:
        f.write("# flowmap 実行ログ\n\n")

        # ====================================================================
        # 1. 実行情報
        # ====================================================================
        f.write("## 実行情報\n\n")
        f.write(f"- **実行日時**: {format_timestamp(datetime.now())}\n")
        if input_file:
            f.write(f"- **入力ファイル**: `{input_file}`\n")
        f.write(f"- **セッション gap**: {summary['gap_seconds']}秒\n")
        f.write(f"- **フロー gap**: {summary['flow_gap_seconds']}秒\n")
        if summary["gap_seconds"] < 0 or summary["flow_gap_seconds"] < 0:
            f.write("- **注意**: 負の gap は「まとめない / つながない」として扱われます\n")
        f.write("\n")

        # ====================================================================
        # 2. 全体集計
        # ====================================================================
        f.write("## 全体集計\n\n")
        f.write("| 項目 | 値 |\n")
        f.write("|------|-----|\n")
        f.write(f"| エンティティ数 | {summary['num_entities']} |\n")
        f.write(f"| 観測数 | {summary['num_observations']} |\n")
        f.write(f"| セッション数 | {summary['num_sessions']} |\n")
        f.write(f"| 連続セッションペア数 | {summary['num_transitions']} |\n")
        f.write(f"| gap 以内の遷移数 | {summary['num_linked']} |\n")
        f.write(f"| エッジ数 | {summary['num_edges']} |\n")
        f.write(f"| 移動回数合計 | {summary['total_flow']} |\n\n")

        # ====================================================================
        # 3. エンティティ別統計
        # ====================================================================
        f.write("## エンティティ別\n\n")
        f.write("| エンティティ | 観測数 | セッション数 | 遷移数 |\n")
        f.write("|--------------|--------|--------------|--------|\n")
        for r in result.entity_results:
            f.write(
                f"| {r.entity_id} | {r.num_observations} | {len(r.sessions)} | {r.num_linked} |\n"
            )
        f.write("\n")

        # ====================================================================
        # 4. 上位エッジ
        # ====================================================================
        f.write(f"## 上位エッジ（最大{TOP_EDGES}件）\n\n")
        f.write("| エッジ | 回数 |\n")
        f.write("|--------|------|\n")
        ranked = sorted(result.flow_table.items(), key=lambda x: (-x[1], x[0].key))
        for edge, count in ranked[:TOP_EDGES]:
            f.write(f"| {edge.key} | {count} |\n")
        f.write("\n")

    return str(summary_file)
