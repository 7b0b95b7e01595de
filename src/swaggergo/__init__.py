"""swaggergo -- Publish OpenAPI definitions to SwaggerHub from the command line.

This package uploads a single OpenAPI definition file to the SwaggerHub
registry with one authenticated ``POST``. It is meant to run unattended in
CI pipelines, so every input can come from a flag or an environment
variable.

Typical usage::

    export SWAGGERHUB_ACCESS_TOKEN="..."
    swaggergo openapi.yml --api acme/widgets --oas 3.0.0

Modules:
    app: Typer application factory and CLI entry point.
    config: Option table and flag/environment/default resolution.
    publisher: Definition reading and the HTTP publish call.
    models: Pydantic models for options, requests, and results.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric process exit codes.
    output: stdout/stderr formatting system with Rich support.
"""

PROGRAM_NAME = "swaggergo"

__version__ = "1.0.0"
