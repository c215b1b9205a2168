"""moltron-frontend scaffolder -- Next.js + shadcn/ui project initialization.

Quick usage::

    from moltron_frontend.scaffolder import ProjectConfig, ProjectInitializer

    config = ProjectConfig(name="my-site", aesthetic="brutalist", theme="dark")
    result = await ProjectInitializer(config).run()
    if not result.success:
        print(result.error)
"""

from moltron_frontend.scaffolder.generator import (
    InitResult,
    ProjectConfig,
    ProjectInitializer,
    ScaffoldError,
    parse_node_version,
)
from moltron_frontend.scaffolder.templates import TemplateRenderer

__all__ = [
    "InitResult",
    "ProjectConfig",
    "ProjectInitializer",
    "ScaffoldError",
    "TemplateRenderer",
    "parse_node_version",
]
