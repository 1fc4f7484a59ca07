from .container import ShufConfig, create_workflow
from .workflow import ShufWorkflow

__all__ = ["ShufConfig", "ShufWorkflow", "create_workflow"]
