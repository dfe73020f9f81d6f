"""flowmap 全体で共通の例外クラス

入力の構造的な不正は処理開始前に検出して送出する。
空入力はエラーではなく、空の結果を返す。
"""


class FlowmapError(ValueError):
    """flowmap の例外の基底クラス"""


class InputShapeError(FlowmapError):
    """並列シーケンスの長さ不一致など、入力の形が不正

    Examples:
        >>> raise InputShapeError("locations と timestamps の長さが一致しません: 3 != 2")
        Traceback (most recent call last):
        ...
        flowmap.shared.domain.errors.InputShapeError: locations と timestamps の長さが一致しません: 3 != 2
    """


class InvalidTimestampError(FlowmapError):
    """NaN / inf や解釈できない時刻文字列"""


class InvalidSessionError(FlowmapError):
    """start_time > end_time のセッション"""


class ConfigError(FlowmapError):
    """設定ファイルに必要なセクションがない"""
