"""
Windows SDK discovery and environment materialization.
"""

from .locator import (
    INSTALLED_ROOTS_KEY,
    KITS_ROOT_VALUE,
    VERSION_POLICIES,
    SdkInstallation,
    discover,
    list_versions,
    locate_installation_root,
    select_version,
)

from .materializer import (
    DeploymentResult,
    DeploymentTask,
    EnvironmentVariableSet,
    apply_and_relaunch,
    build_deployment_tasks,
    compute_search_paths,
    deploy_module_maps,
    print_environment,
)

__all__ = [
    "INSTALLED_ROOTS_KEY",
    "KITS_ROOT_VALUE",
    "VERSION_POLICIES",
    "SdkInstallation",
    "discover",
    "list_versions",
    "locate_installation_root",
    "select_version",
    "DeploymentResult",
    "DeploymentTask",
    "EnvironmentVariableSet",
    "apply_and_relaunch",
    "build_deployment_tasks",
    "compute_search_paths",
    "deploy_module_maps",
    "print_environment",
]
