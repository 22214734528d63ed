"""
补丁流程的错误类型。

`run()` 捕获这些异常并放入 `PatchResult`，由 CLI 映射为退出码。
"""


class PatchError(Exception):
    """补丁流程中所有可预期失败的基类。"""


class NotFoundError(PatchError):
    """按 glob 模式找不到 Xcode 工程。"""


class ParseError(PatchError):
    """工程文件无法读取或解析。"""


class MutationError(PatchError):
    """构建配置结构不符合预期，无法修改。"""


class SaveError(PatchError):
    """修改后的工程写回磁盘失败。"""
