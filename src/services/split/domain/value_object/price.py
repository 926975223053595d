import math
import re

# 先頭の数値部分のみを読む（"300abc" -> 300, "1_000" -> 1）
_LEADING_NUMBER = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)


def parse_price(value: object) -> float:
    """料金の入力値を数値に変換する

    文字列は先頭の数値部分だけを読む（ブラウザの parseFloat と同じ）。
    空文字・数値で始まらない値・有限でない値は 0 とする。
    負の値はそのまま通す。
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        price = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value).lstrip())
        if match is None:
            return 0.0
        price = float(match.group().replace("Infinity", "inf"))
    if not math.isfinite(price):
        return 0.0
    return price
