"""
CLI Commands.

One module per API operation group.
"""

from owo.cli.commands.objects import delete, list_files
from owo.cli.commands.shorten import shorten
from owo.cli.commands.upload import upload

__all__ = [
    "delete",
    "list_files",
    "shorten",
    "upload",
]
