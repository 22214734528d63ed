"""
补丁流程与 CLI 共享的轻量类型定义。
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SettingChange:
    """描述一次实际生效的构建设置修改。"""

    target: str
    configuration: str
    key: str
    # `old` 为 `None` 表示修改前该键不存在。
    old: Any
    new: Any


@dataclass
class PatchResult:
    """一次 `run()` 的结果快照。"""

    project_path: str = ""
    changes: list[SettingChange] = field(default_factory=list)
    targets: int = 0
    configurations: int = 0
    saved: bool = False
    error: Exception | None = None
    trace: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None
