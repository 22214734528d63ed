"""
Xcode 工程文件的定位与读写。

- 定位：按 glob 模式查找 `.xcodeproj` 包或 `project.pbxproj` 文件。
- 读写：委托给 `pbxproj.XcodeProject`，失败统一转换为 `PatchError` 子类。
"""

from __future__ import annotations

import glob
import os

from pbxproj import XcodeProject

from .errors import NotFoundError, ParseError, SaveError

DEFAULT_PROJECT_GLOB = "ios/Runner.xcodeproj"
PBXPROJ_NAME = "project.pbxproj"


def pbxproj_path(project_path: str) -> str:
    """将 `.xcodeproj` 包路径映射为其中的 `project.pbxproj`；文件路径原样返回。"""
    if os.path.isdir(project_path):
        return os.path.join(project_path, PBXPROJ_NAME)
    return project_path


def find_project(pattern: str = DEFAULT_PROJECT_GLOB, *, cwd: str | None = None) -> str:
    """在 `cwd`（默认当前目录）下按 glob 模式定位工程，返回第一个匹配的绝对路径。"""
    root = os.path.abspath(cwd or os.getcwd())
    pattern = os.path.expanduser(pattern)
    full = pattern if os.path.isabs(pattern) else os.path.join(root, pattern)
    matches = sorted(glob.glob(full))
    if not matches:
        raise NotFoundError("Could not find the Xcode project")

    project_path = os.path.abspath(matches[0])
    if not os.path.isfile(pbxproj_path(project_path)):
        raise NotFoundError(
            f"Could not find the Xcode project: {PBXPROJ_NAME} missing in {project_path}"
        )
    return project_path


def load_project(project_path: str) -> XcodeProject:
    """读取并解析工程文件，任何读取/解析失败都抛出 `ParseError`。"""
    path = pbxproj_path(project_path)
    try:
        return XcodeProject.load(path)
    except Exception as e:
        raise ParseError(f"failed to parse {path}: {e}") from e


def save_project(project: XcodeProject) -> None:
    """将工程写回其加载时的 `project.pbxproj`，写入失败抛出 `SaveError`。"""
    try:
        project.save()
    except OSError as e:
        raise SaveError(f"failed to save project: {e}") from e
