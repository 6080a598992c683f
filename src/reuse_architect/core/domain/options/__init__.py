from reuse_architect.core.domain.options.app_type import AppType
from reuse_architect.core.domain.options.architecture_pattern import ArchitecturePattern
from reuse_architect.core.domain.options.tech_stack import TechStack

DEFAULT_APP_TYPE = AppType.SAAS_PLATFORM
DEFAULT_TECH_STACK = TechStack.REACT_NODE
DEFAULT_ARCHITECTURE = ArchitecturePattern.CLEAN_ARCH

__all__ = [
    "AppType",
    "ArchitecturePattern",
    "TechStack",
    "DEFAULT_APP_TYPE",
    "DEFAULT_TECH_STACK",
    "DEFAULT_ARCHITECTURE",
]
