from pathlib import Path

import pytest

RUNNER_PBXPROJ = """// !$*UTF8*$!
{
	archiveVersion = 1;
	classes = {
	};
	objectVersion = 54;
	objects = {

/* Begin PBXGroup section */
		97C146E51CF9000F007C117D = {
			isa = PBXGroup;
			children = (
			);
			sourceTree = "<group>";
		};
/* End PBXGroup section */

/* Begin PBXNativeTarget section */
		97C146ED1CF9000F007C117D /* Runner */ = {
			isa = PBXNativeTarget;
			buildConfigurationList = 97C147051CF9000F007C117D /* Build configuration list for PBXNativeTarget "Runner" */;
			buildPhases = (
			);
			buildRules = (
			);
			dependencies = (
			);
			name = Runner;
			productName = Runner;
			productType = "com.apple.product-type.application";
		};
		331C8080294A63A400263BE5 /* RunnerTests */ = {
			isa = PBXNativeTarget;
			buildConfigurationList = 331C8087294A63A400263BE5 /* Build configuration list for PBXNativeTarget "RunnerTests" */;
			buildPhases = (
			);
			buildRules = (
			);
			dependencies = (
			);
			name = RunnerTests;
			productName = RunnerTests;
			productType = "com.apple.product-type.bundle.unit-test";
		};
/* End PBXNativeTarget section */

/* Begin PBXProject section */
		97C146E61CF9000F007C117D /* Project object */ = {
			isa = PBXProject;
			buildConfigurationList = 97C146E91CF9000F007C117D /* Build configuration list for PBXProject "Runner" */;
			compatibilityVersion = "Xcode 9.3";
			developmentRegion = en;
			hasScannedForEncodings = 0;
			mainGroup = 97C146E51CF9000F007C117D;
			projectDirPath = "";
			projectRoot = "";
			targets = (
				97C146ED1CF9000F007C117D /* Runner */,
				331C8080294A63A400263BE5 /* RunnerTests */,
			);
		};
/* End PBXProject section */

/* Begin XCBuildConfiguration section */
		97C147031CF9000F007C117D /* Debug */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				IPHONEOS_DEPLOYMENT_TARGET = 12.0;
				OTHER_CFLAGS = "-G -DDEBUG";
			};
			name = Debug;
		};
		97C147041CF9000F007C117D /* Release */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				IPHONEOS_DEPLOYMENT_TARGET = 12.0;
			};
			name = Release;
		};
		97C147061CF9000F007C117D /* Debug */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				ENABLE_BITCODE = YES;
				IPHONEOS_DEPLOYMENT_TARGET = 12.0;
				OTHER_CFLAGS = "-G -DDEBUG";
				OTHER_LDFLAGS = (
					"$(inherited)",
					"-G",
					"-ObjC",
				);
				OTHER_SWIFT_FLAGS = "-Glibc -O2";
				PRODUCT_BUNDLE_IDENTIFIER = com.example.runner;
			};
			name = Debug;
		};
		97C147071CF9000F007C117D /* Release */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				ENABLE_BITCODE = YES;
				OTHER_LDFLAGS = "$(inherited) -ObjC";
				PRODUCT_BUNDLE_IDENTIFIER = com.example.runner;
			};
			name = Release;
		};
		331C8088294A63A400263BE5 /* Debug */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				OTHER_SWIFT_FLAGS = "-G";
				PRODUCT_BUNDLE_IDENTIFIER = com.example.runner.RunnerTests;
			};
			name = Debug;
		};
/* End XCBuildConfiguration section */

/* Begin XCConfigurationList section */
		97C146E91CF9000F007C117D /* Build configuration list for PBXProject "Runner" */ = {
			isa = XCConfigurationList;
			buildConfigurations = (
				97C147031CF9000F007C117D /* Debug */,
				97C147041CF9000F007C117D /* Release */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		};
		97C147051CF9000F007C117D /* Build configuration list for PBXNativeTarget "Runner" */ = {
			isa = XCConfigurationList;
			buildConfigurations = (
				97C147061CF9000F007C117D /* Debug */,
				97C147071CF9000F007C117D /* Release */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		};
		331C8087294A63A400263BE5 /* Build configuration list for PBXNativeTarget "RunnerTests" */ = {
			isa = XCConfigurationList;
			buildConfigurations = (
				331C8088294A63A400263BE5 /* Debug */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		};
/* End XCConfigurationList section */
	};
	rootObject = 97C146E61CF9000F007C117D /* Project object */;
}
"""


def _write_runner_project(root: Path, content: str = RUNNER_PBXPROJ) -> Path:
    bundle = root / "ios" / "Runner.xcodeproj"
    bundle.mkdir(parents=True)
    (bundle / "project.pbxproj").write_text(content)
    return bundle


@pytest.fixture
def runner_project(tmp_path) -> Path:
    """`tmp_path/ios/Runner.xcodeproj`，内含两个 target 的最小 Flutter 工程。"""
    return _write_runner_project(tmp_path)


@pytest.fixture
def write_runner_project(tmp_path):
    """按给定内容写出 `ios/Runner.xcodeproj/project.pbxproj`。"""
    return lambda content: _write_runner_project(tmp_path, content)
