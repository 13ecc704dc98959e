# topmark:header:start
#
#   project      : AxisConf
#   file         : __init__.py
#   file_relpath : src/axisconf/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``axisconf`` CLI group."""
