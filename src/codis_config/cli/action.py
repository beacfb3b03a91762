from __future__ import annotations

import typer

from codis_config.action import ActionOptions, NoAction, run_action, select_action
from codis_config.client import DashboardClient
from codis_config.config import GLOBAL_OPTIONS, Settings, load_settings
from codis_config.errors import ApiError, InvalidArgumentError, UsageError
from codis_config.logging_utils import logger

action_app = typer.Typer(
    no_args_is_help=True,
    help="Dashboard maintenance actions: gc, remove-lock, remove-fence.",
)

Num = typer.Option(
    None,
    "-n",
    "--num",
    metavar="<num>",
    help="Keep the last N actions.",
)
Seconds = typer.Option(
    None,
    "-s",
    "--seconds",
    metavar="<seconds>",
    help="Keep the actions of the last N seconds.",
)


def open_client(settings: Settings) -> DashboardClient:
    return DashboardClient(settings.dashboard_addr, timeout=settings.timeout)


def execute(ctx: typer.Context, options: ActionOptions) -> None:
    try:
        action = select_action(options)
    except UsageError as e:
        raise typer.BadParameter(str(e), ctx=ctx, param_hint="'-n' / '-s'") from e
    except InvalidArgumentError as e:
        logger.error(f"parse args failed: {e}")
        raise typer.Exit(code=1) from e

    if isinstance(action, NoAction):
        return

    try:
        settings = load_settings(
            GLOBAL_OPTIONS.config_path, dashboard_addr=GLOBAL_OPTIONS.dashboard_addr
        )
    except UsageError as e:
        raise typer.BadParameter(str(e), ctx=ctx, param_hint="'-c' / '--config'") from e
    except InvalidArgumentError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug(
        f"Using dashboard at {settings.dashboard_addr}"
        f" (product={settings.product}, zk={settings.zk})"
    )
    with open_client(settings) as client:
        try:
            run_action(action, client, typer.echo, pretty=GLOBAL_OPTIONS.pretty)
        except ApiError as e:
            logger.error(str(e))
            raise typer.Exit(code=1) from e


@action_app.command()
def gc(
    ctx: typer.Context,
    num: str | None = Num,
    seconds: str | None = Seconds,
) -> None:
    """Garbage-collect the dashboard's action log."""
    execute(ctx, ActionOptions(gc=True, num=num, seconds=seconds))


@action_app.command("remove-lock")
def remove_lock(ctx: typer.Context) -> None:
    """Force-remove the coordinator lock."""
    execute(ctx, ActionOptions(remove_lock=True))


@action_app.command("remove-fence")
def remove_fence(ctx: typer.Context) -> None:
    """Remove the proxy fence."""
    execute(ctx, ActionOptions(remove_fence=True))
