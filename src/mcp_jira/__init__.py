import asyncio
import os

import click
from dotenv import load_dotenv

from .logging_config import log_operation, setup_logger

__version__ = "1.0.0"

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PATH = "/mcp"
DEFAULT_TRANSPORT = "streamable-http"
TRANSPORTS = ("stdio", "sse", "streamable-http")

logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(TRANSPORTS),
    help=f"Transport type (default: TRANSPORT env var or {DEFAULT_TRANSPORT})",
)
@click.option(
    "--port",
    type=int,
    help=f"Port to listen on for HTTP transports (default: PORT env var or {DEFAULT_PORT})",
)
@click.option(
    "--host",
    help=f"Host to bind for HTTP transports (default: HOST env var or {DEFAULT_HOST})",
)
@click.option(
    "--path",
    help=f"Endpoint path for the streamable HTTP transport (default: {DEFAULT_PATH})",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str | None,
    port: int | None,
    host: str | None,
    path: str | None,
    log_dir: str | None,
    log_to_file: bool,
) -> None:
    """MCP Jira Server - create, update and search Jira issues over MCP.

    Supports both Jira Cloud and Jira Data Center. Connection details are
    passed with every tool call; nothing is stored on the server.
    """
    # Load environment variables from file if specified, otherwise try default .env
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(level=logging_level, log_to_file=log_to_file, log_dir=log_dir)

    transport = transport or os.getenv("TRANSPORT", DEFAULT_TRANSPORT)
    if transport not in TRANSPORTS:
        raise click.BadParameter(
            f"Unsupported transport '{transport}'", param_hint="TRANSPORT"
        )

    run_kwargs: dict[str, str | int] = {"transport": transport}
    if transport != "stdio":
        run_kwargs["host"] = host or os.getenv("HOST", DEFAULT_HOST)
        try:
            run_kwargs["port"] = port or int(os.getenv("PORT", str(DEFAULT_PORT)))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="PORT") from e
        if transport == "streamable-http":
            run_kwargs["path"] = path or os.getenv("MCP_PATH", DEFAULT_PATH)

    with log_operation(logger, "application_startup", app_version=__version__):
        from .servers import main_mcp

        logger.info(
            f"Starting MCP Jira v{__version__} with {transport} transport"
            + (f" on port {run_kwargs['port']}" if "port" in run_kwargs else "")
        )

    asyncio.run(main_mcp.run_async(**run_kwargs))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
