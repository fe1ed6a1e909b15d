import contextlib
import logging
from collections.abc import Iterator

import typer

from .chains import ChainRegistry, ConfigurationError
from .runlib import init_all
from .settings import Settings
from .utils import json_dumps

LOGGER = logging.getLogger(__name__)


def _load_registry() -> ChainRegistry:
    return init_all(Settings())


@contextlib.contextmanager
def _exit_on_config_error() -> Iterator[None]:
    try:
        yield
    except ConfigurationError as exc:
        LOGGER.error("Chains configuration error: %s", exc)
        typer.echo(f"Chains configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def list_main_cli() -> None:
    """Print a summary of all the supported chains."""
    with _exit_on_config_error():
        registry = _load_registry()
        typer.echo(json_dumps(registry.summary(), indent=True))


def show_main_cli(chain_id: int) -> None:
    """Print the full configuration of a chain."""
    with _exit_on_config_error():
        registry = _load_registry()
        chain = registry.get_chain_by_id(chain_id)
    if chain is None:
        typer.echo(f"Chain {chain_id} is not supported", err=True)
        raise typer.Exit(code=1)
    typer.echo(json_dumps(chain.dump(), indent=True))


def default_main_cli() -> None:
    """Print the configuration of the default chain."""
    with _exit_on_config_error():
        registry = _load_registry()
        chain = registry.get_default_chain()
    typer.echo(json_dumps(chain.dump(), indent=True))


def check_main_cli(chain_id: int) -> None:
    """Exit with a non-zero code unless the chain is supported."""
    with _exit_on_config_error():
        registry = _load_registry()
        supported = registry.is_supported_chain(chain_id)
    typer.echo(json_dumps(supported))
    if not supported:
        raise typer.Exit(code=1)


CLI_APP = typer.Typer()
CLI_APP.command("list")(list_main_cli)
CLI_APP.command("show")(show_main_cli)
CLI_APP.command("default")(default_main_cli)
CLI_APP.command("check")(check_main_cli)


def main() -> None:
    CLI_APP()


if __name__ == "__main__":
    main()
