"""設定ファイル読み込みモジュール"""

import json
import re
from pathlib import Path
from typing import Any, Dict

from ..domain.errors import ConfigError

SETTINGS_FILE = "flowmap_settings.jsonc"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "gap_seconds": 600.0,
    "flow_gap_seconds": None,
    "entity_column": "entity_id",
    "location_column": "loc",
    "time_column": "time",
    "workers": 1,
}


def load_jsonc(file_path: str) -> Dict[str, Any]:
    """JSONCファイルを読み込む（コメント付きJSON）

    Args:
        file_path: JSONCファイルのパス

    Returns:
        パースされた辞書
    """
    with open(file_path, "r", encoding="utf-8") as f:
        content = f.read()

    # 行コメント (//) を削除
    content = re.sub(r"//.*", "", content)
    # ブロックコメント (/* */) を削除
    content = re.sub(r"/\*.*?\*/", "", content, flags=re.DOTALL)

    return json.loads(content)


def load_flowmap_settings(config_dir: str = "config") -> Dict[str, Any]:
    """flowmap の設定を読み込む（gap_seconds, 列名等）

    設定ファイルが存在しない場合はデフォルト値のみを返す。
    flow_gap_seconds が null の場合は gap_seconds と同じ値を使う。

    Args:
        config_dir: 設定ファイルディレクトリ

    Returns:
        設定の辞書

    Raises:
        ConfigError: ファイルはあるが "flowmap_settings" セクションがない場合
    """
    settings_path = Path(config_dir) / SETTINGS_FILE
    if not settings_path.exists():
        return dict(DEFAULT_SETTINGS)

    data = load_jsonc(str(settings_path))
    if "flowmap_settings" not in data:
        raise ConfigError(f"{settings_path} に flowmap_settings セクションがありません")

    settings = dict(data["flowmap_settings"])
    # デフォルト値を設定
    for key, value in DEFAULT_SETTINGS.items():
        settings.setdefault(key, value)

    return settings
