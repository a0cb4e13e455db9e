# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : __main__.py
#   file_relpath : src/codepipeline_requests/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Module entry point for ``python -m codepipeline_requests``.

Delegates to `codepipeline_requests.cli.main.cli`, the same entry point as
the ``codepipeline-requests`` console script.

Examples:
    List the supported operations::

        python -m codepipeline_requests operations
"""

from __future__ import annotations

from codepipeline_requests.cli.main import cli

if __name__ == "__main__":
    cli()
