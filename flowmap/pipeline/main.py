"""flowmap エントリーポイント

観測CSVから滞在セッション表とエッジごとの移動回数表を作成する。

Usage:
    python -m flowmap.pipeline.main --input data/observations.csv --output-dir flowmap_result/

Examples:
    # gap 10分でセッション化し、遷移も10分以内のものだけ数える
    python -m flowmap.pipeline.main \\
        --input data/observations.csv \\
        --output-dir flowmap_result/ \\
        --gap 600

    # エンティティ単位で4プロセス並列
    python -m flowmap.pipeline.main \\
        --input data/observations.csv \\
        --workers 4
"""

import argparse
import sys

from ..shared.domain.errors import FlowmapError
from .run import run_flowmap


def main(argv=None):
    """メイン関数"""
    parser = argparse.ArgumentParser(
        description="移動履歴を滞在セッションに圧縮し、場所間の移動回数を集計",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m flowmap.pipeline.main --input data/observations.csv --gap 600
  python -m flowmap.pipeline.main --input data/observations.csv --gap 600 --flow-gap 1800
        """,
    )
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="観測CSVファイル（entity_id, loc, time 列）",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="flowmap_result/",
        help="出力ディレクトリ（デフォルト: flowmap_result/）",
    )
    parser.add_argument(
        "--gap",
        type=float,
        default=None,
        help="セッション圧縮の gap 秒（省略時: 設定ファイル）",
    )
    parser.add_argument(
        "--flow-gap",
        type=float,
        default=None,
        help="エッジ集計の gap 秒（省略時: --gap 指定時はその値、なければ設定ファイル）",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="エンティティ単位の並列プロセス数（省略時: 設定ファイル）",
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        default="config",
        help="設定ファイルディレクトリ（デフォルト: config）",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="進捗を表示",
    )

    args = parser.parse_args(argv)

    try:
        result = run_flowmap(
            input_file=args.input,
            output_dir=args.output_dir,
            gap=args.gap,
            flow_gap=args.flow_gap,
            workers=args.workers,
            config_dir=args.config_dir,
            verbose=args.verbose,
        )
    except (FlowmapError, FileNotFoundError) as e:
        print(f"エラー: {e}", file=sys.stderr)
        return 1

    summary = result.summary()
    print()
    print("=" * 60)
    print("実行結果サマリー")
    print("=" * 60)
    print(f"  エンティティ数: {summary['num_entities']}")
    print(f"  観測数: {summary['num_observations']} -> セッション数: {summary['num_sessions']}")
    print(f"  エッジ数: {summary['num_edges']} (移動回数合計: {summary['total_flow']})")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
