from __future__ import annotations

"""
Xcode project settings patching pipeline.

High-level flow:
1) Locate the project by glob pattern (default `ios/Runner.xcodeproj`).
2) Load `project.pbxproj` with `pbxproj.XcodeProject`.
3) For every target and every build configuration of that target:
   - strip the `-G` marker from the flag-list settings
     (`OTHER_CFLAGS` / `OTHER_LDFLAGS` / `OTHER_SWIFT_FLAGS`);
   - force the fixed settings (deployment target, bitcode, index store).
4) Save the project back in place (skipped in dry-run mode).

`run()` never raises; failures come back inside `PatchResult` so the caller
decides how to report them and which exit code to use.
"""

import traceback
from collections.abc import Iterator
from typing import Any

from .errors import MutationError
from .project_file import DEFAULT_PROJECT_GLOB, find_project, load_project, save_project
from .settings_edit import FIXED_SETTINGS, FLAG_KEYS, MARKER, contains_marker, strip_marker
from .types import PatchResult, SettingChange


def _name(obj: Any) -> str:
    """读取对象的 `name` 字段，缺失时返回空串。"""
    name = obj["name"]
    return name if isinstance(name, str) else ""


def iter_targets(project: Any) -> Iterator[tuple[Any, list[Any]]]:
    """按文档顺序产出 `(target, 构建配置列表)`，引用缺失时抛出 `MutationError`。"""
    # Same walk as `objects.get_configurations_on_targets`, but grouped per
    # target so progress lines can name it.
    objects = project.objects
    for target in objects.get_targets():
        config_list = objects[target["buildConfigurationList"]]
        if config_list is None:
            raise MutationError(f"target {_name(target)} has no build configuration list")
        configs = []
        for config_id in config_list["buildConfigurations"] or []:
            config = objects[config_id]
            if config is None:
                raise MutationError(
                    f"target {_name(target)} references missing build configuration {config_id}"
                )
            configs.append(config)
        yield target, configs


def patch_configuration(configuration: Any, *, target_name: str) -> list[SettingChange]:
    """对单个构建配置执行 `-G` 清理与固定值设置，返回实际发生的修改。"""
    config_name = _name(configuration)
    settings = configuration["buildSettings"]
    if settings is None:
        raise MutationError(
            f"build configuration {config_name} of target {target_name} has no buildSettings"
        )

    changes: list[SettingChange] = []
    key = ""
    try:
        for key in FLAG_KEYS:
            value = settings[key]
            if value is None or not contains_marker(value, MARKER):
                continue
            print(f"    Removing {MARKER} from {key}")
            new_value = strip_marker(value, MARKER)
            configuration.set_flags(key, new_value)
            changes.append(SettingChange(target_name, config_name, key, value, new_value))

        for key, new_value in FIXED_SETTINGS.items():
            old = settings[key]
            configuration.set_flags(key, new_value)
            if old != new_value:
                changes.append(SettingChange(target_name, config_name, key, old, new_value))
    except (AttributeError, TypeError, KeyError) as e:
        raise MutationError(
            f"cannot update {key} in build configuration {config_name} "
            f"of target {target_name}: {e}"
        ) from e
    return changes


def patch_project(project: Any, result: PatchResult | None = None) -> PatchResult:
    """遍历全部 target 与构建配置并打补丁，修改记录与统计累积到 `result`。"""
    if result is None:
        result = PatchResult()
    for target, configs in iter_targets(project):
        target_name = _name(target)
        print(f"Fixing target: {target_name}")
        result.targets += 1
        for config in configs:
            print(f"  Fixing build configuration: {_name(config)}")
            result.changes += patch_configuration(config, target_name=target_name)
            result.configurations += 1
    return result


def run(
    pattern: str = DEFAULT_PROJECT_GLOB,
    *,
    cwd: str | None = None,
    dry_run: bool = False,
) -> PatchResult:
    """定位、加载、修改并保存工程；所有异常都记录在返回的 `PatchResult` 中。"""
    result = PatchResult()
    try:
        result.project_path = find_project(pattern, cwd=cwd)
        print(f"Opening project at {result.project_path}...")
        project = load_project(result.project_path)

        patch_project(project, result)

        if dry_run:
            print("Dry-run: project not written")
            return result
        save_project(project)
        result.saved = True
        print("Project saved successfully")
    except Exception as e:
        result.error = e
        result.trace = "".join(traceback.format_exception(type(e), e, e.__traceback__))
    return result
