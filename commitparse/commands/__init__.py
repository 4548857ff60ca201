"""CLI command implementations."""

from commitparse.commands.log import cmd_log
from commitparse.commands.parse import cmd_parse
from commitparse.commands.show import cmd_show

__all__ = ["cmd_log", "cmd_parse", "cmd_show"]
