"""
`xcproj-patch` 的命令行入口模块。

不带任何参数时：打开 `ios/Runner.xcodeproj`，清理 `-G` 编译参数并写入固定构建设置。
补丁流程本身不抛异常，由本模块负责打印错误与堆栈，并把错误类型映射为退出码。
"""

import argparse
import os
from collections.abc import Sequence

from .errors import MutationError, NotFoundError, ParseError, SaveError
from .patcher import run
from .project_file import DEFAULT_PROJECT_GLOB
from .types import PatchResult

EXIT_OK = 0
EXIT_UNEXPECTED = 1

# 按异常类型映射退出码；未列出的异常统一返回 `EXIT_UNEXPECTED`。
EXIT_CODES: dict[type, int] = {
    NotFoundError: 2,
    ParseError: 3,
    MutationError: 4,
    SaveError: 5,
}


def exit_code_for(error: Exception | None) -> int:
    """根据错误类型返回进程退出码。"""
    if error is None:
        return EXIT_OK
    for kind, code in EXIT_CODES.items():
        if isinstance(error, kind):
            return code
    return EXIT_UNEXPECTED


def _log_step(message: str) -> None:
    """输出简洁的流程阶段提示。"""
    print(f"[xcproj-patch] {message}")


def _app_root(project_path: str) -> str:
    """推导 Flutter 应用根目录：`<root>/ios/Runner.xcodeproj` 的 `<root>`。"""
    parent = os.path.dirname(project_path)
    if os.path.basename(parent) == "ios":
        return os.path.dirname(parent)
    return parent


def _print_next_steps(project_path: str) -> None:
    print("\nNext steps:")
    print(f"1. cd {_app_root(project_path)}")
    print("2. flutter clean")
    print("3. cd ios && rm -rf Pods Podfile.lock")
    print("4. cd .. && flutter pub get")
    print("5. flutter run")


def _print_changes(result: PatchResult) -> None:
    print("Changes:")
    if not result.changes:
        print("  (none)")
    for c in result.changes:
        print(f"  {c.target}/{c.configuration} {c.key}: {c.old!r} -> {c.new!r}")


def build_parser() -> argparse.ArgumentParser:
    """构建并返回 `xcproj-patch` 命令行参数解析器。"""
    p = argparse.ArgumentParser(
        prog="xcproj-patch",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Remove the -G flag from OTHER_CFLAGS / OTHER_LDFLAGS / OTHER_SWIFT_FLAGS and\n"
            "force IPHONEOS_DEPLOYMENT_TARGET=14.0, ENABLE_BITCODE=NO,\n"
            "COMPILER_INDEX_STORE_ENABLE=NO on every target build configuration."
        ),
    )
    p.add_argument(
        "-p",
        "--project",
        default=DEFAULT_PROJECT_GLOB,
        metavar="PATTERN",
        help=f"Glob pattern of the .xcodeproj (or project.pbxproj) to patch (default: {DEFAULT_PROJECT_GLOB})",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Apply edits in memory and report them without writing the project",
    )
    p.add_argument("--verbose", action="store_true", help="Print every applied setting change")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口：执行补丁流程，打印结果，并返回与错误类型对应的退出码。"""
    ns = build_parser().parse_args(argv)

    _log_step(f"Patching project: {ns.project}")
    if ns.dry_run:
        _log_step("Dry-run mode enabled (no file modifications)")
    result = run(ns.project, dry_run=bool(ns.dry_run))

    if ns.verbose and result.project_path:
        _print_changes(result)

    if not result.ok:
        print(f"Error: {result.error}")
        print(result.trace, end="")
        return exit_code_for(result.error)

    _log_step(
        f"{result.targets} target(s), {result.configurations} configuration(s), "
        f"{len(result.changes)} change(s)"
    )
    if result.saved:
        _print_next_steps(result.project_path)
    return EXIT_OK
