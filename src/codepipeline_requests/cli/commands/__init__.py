# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : __init__.py
#   file_relpath : src/codepipeline_requests/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Subcommands of the ``codepipeline-requests`` CLI."""
