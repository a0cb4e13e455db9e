# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : __init__.py
#   file_relpath : src/codepipeline_requests/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Click-based command line interface for CodePipeline Requests."""
