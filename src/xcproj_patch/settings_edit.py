"""
构建设置值的纯函数修改工具。

设计原则：
- 只处理字符串或字符串列表两种取值，其他类型抛出 `TypeError`。
- 所有修改都是幂等的，重复执行不会继续改变结果。
"""

from __future__ import annotations

from typing import Any

MARKER = "-G"

FLAG_KEYS = ("OTHER_CFLAGS", "OTHER_LDFLAGS", "OTHER_SWIFT_FLAGS")

FIXED_SETTINGS = {
    "IPHONEOS_DEPLOYMENT_TARGET": "14.0",
    "ENABLE_BITCODE": "NO",
    "COMPILER_INDEX_STORE_ENABLE": "NO",
}


def _check_list(value: list) -> None:
    for item in value:
        if not isinstance(item, str):
            raise TypeError(f"flag list contains non-string element: {item!r}")


def contains_marker(value: Any, marker: str = MARKER) -> bool:
    """判断设置值（字符串或字符串列表）中是否出现 `marker` 子串。"""
    if isinstance(value, str):
        return marker in value
    if isinstance(value, list):
        _check_list(value)
        return any(marker in item for item in value)
    raise TypeError(f"unsupported setting value type: {type(value).__name__}")


def _strip_all(text: str, marker: str) -> str:
    # 删除后两侧文本可能拼出新的 marker（如 `--GG`），需删到不再出现为止。
    while marker in text:
        text = text.replace(marker, "")
    return text


def strip_marker(value: Any, marker: str = MARKER) -> Any:
    """
    删除设置值中所有 `marker` 子串并返回新值。

    注意这是普通子串删除而非按 token 匹配：`"-Glibc -O2"` 会变成 `"libc -O2"`。
    列表取值逐元素处理，处理后为空的元素会被丢弃。
    删除会重复进行直到不再包含 `marker`：`"--GG"` 最终变为空串。
    """
    if isinstance(value, str):
        return _strip_all(value, marker)
    if isinstance(value, list):
        _check_list(value)
        out = [_strip_all(item, marker) for item in value]
        return [item for item in out if item]
    raise TypeError(f"unsupported setting value type: {type(value).__name__}")
