"""kemet - recursive file content search."""

__version__ = "0.1.0"
