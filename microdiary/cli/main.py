"""Main CLI entry point for Micro Diary.

This module provides the main click group and lazy loading
of the command modules to keep startup fast.
"""

import click


class LazyGroup(click.Group):
    """A click Group whose subcommands are imported on first use.

    Each lazy subcommand is named by a ``"module:attribute"`` target, so
    ``microdiary --help`` never imports the storage or engine code.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to
                ``"module:attribute"`` targets.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted({*super().list_commands(ctx), *self._lazy_subcommands})

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        if cmd_name not in self.commands and cmd_name in self._lazy_subcommands:
            self.add_command(self._resolve(cmd_name), cmd_name)
        return super().get_command(ctx, cmd_name)

    def _resolve(self, cmd_name: str) -> click.Command:
        """Import the target registered for a subcommand."""
        import importlib

        target = self._lazy_subcommands[cmd_name]
        module_path, _, attr_name = target.partition(":")
        cmd = getattr(importlib.import_module(module_path), attr_name, None)
        if not isinstance(cmd, click.Command):
            raise click.ClickException(f"'{target}' is not a click command")
        return cmd


LAZY_SUBCOMMANDS = {
    # Writing
    "write": "microdiary.cli.entries:write",
    "today": "microdiary.cli.entries:today",
    "edit": "microdiary.cli.entries:edit",
    # History
    "history": "microdiary.cli.entries:history",
    "timeline": "microdiary.cli.entries:timeline",
    # Records
    "streak": "microdiary.cli.records:streak",
    "badges": "microdiary.cli.records:badges",
    "stats": "microdiary.cli.records:stats",
    "lookback": "microdiary.cli.records:lookback",
}


def get_service(ctx: click.Context):
    """Build the diary service from the loaded configuration.

    Uses the config stored on the context by the root group, loading it
    directly when a command is invoked on its own.
    """
    from microdiary.config import load_config
    from microdiary.db.store import DataStore
    from microdiary.engine import FeatureAccess
    from microdiary.service import DiaryService

    config = (ctx.obj or {}).get("config") or load_config()
    store = DataStore(config.db_path)
    return DiaryService(
        store,
        store,
        access=FeatureAccess(has_entitlement=config.premium.enabled),
    )


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="microdiary")
@click.option("-v", "--verbose", is_flag=True, help="Log at INFO level.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Micro Diary - one line a day.

    Write a short note and a satisfaction score each day, keep your
    streak alive and look back at how things were.

    \b
    Quick Start:
      microdiary write "Good run in the park" --score 80
      microdiary streak        # Current streak
      microdiary stats         # Last 7 days
    """
    from microdiary.config import load_config
    from microdiary.logging_config import configure_logging

    config = load_config()
    configure_logging("INFO" if verbose else config.logging.level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
