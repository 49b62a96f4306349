"""Administration client for deployed Elsa Data instances.

Runs an admin command through the command Lambda registered in Cloud Map and
prints the command's CloudWatch log output:
- Pipeline: from .pipeline import run_admin_command
- CLI: elsa-data-cli (see .scripts.admin_command)
"""

__version__ = "0.1.0"
