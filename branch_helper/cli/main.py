"""CLI entry point for branch-helper."""

import subprocess
import sys
from pathlib import Path

import typer
from loguru import logger
from rich.markup import escape
from typer import Exit

from branch_helper.core.branch import BranchManager
from branch_helper.core.publish import Publisher
from branch_helper.core.tools.git import GitController, describe_error
from branch_helper.models.config import DEFAULT_REMOTE, BranchHelperSettings
from branch_helper.ui.rich_ui import RichUI

app = typer.Typer(
    name="branch-helper",
    help="🌿 Prepare branches and publish generated content with git",
    no_args_is_help=True,
)


def _configure_logging(*, verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def _validate_path(repo_path: Path, ui: RichUI) -> None:
    """Validate that the repository path exists and is a directory."""
    if not repo_path.exists():
        ui.print_error(f"Path does not exist: {escape(str(repo_path))}")
        raise Exit(code=1)

    if not repo_path.is_dir():
        ui.print_error(f"Path is not a directory: {escape(str(repo_path))}")
        raise Exit(code=1)


def _settings(ctx: typer.Context) -> BranchHelperSettings:
    return ctx.ensure_object(BranchHelperSettings)


def _branch_manager(settings: BranchHelperSettings) -> BranchManager:
    return BranchManager(GitController(repo_path=settings.repo_path), unknown_branch=settings.unknown_branch)


def _publisher(settings: BranchHelperSettings) -> Publisher:
    return Publisher(
        GitController(repo_path=settings.repo_path),
        remote=settings.remote,
        author=settings.commit_author,
    )


def _fail(ui: RichUI, action: str, error: subprocess.CalledProcessError | OSError) -> Exit:
    logger.debug(f"Failed to {action}: {error!r}")
    ui.print_error(f"Failed to {action}: {escape(describe_error(error))}")
    return Exit(code=1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    path: str = typer.Option(
        ".",
        "--path",
        "-p",
        envvar="BRANCH_HELPER_REPO",
        help="Path to the git working copy",
    ),
    remote: str = typer.Option(
        DEFAULT_REMOTE,
        "--remote",
        "-r",
        envvar="BRANCH_HELPER_REMOTE",
        help="Remote to push to",
    ),
    author: str | None = typer.Option(
        None,
        "--author",
        envvar="BRANCH_HELPER_AUTHOR",
        help="Commit author, e.g. 'Bot <bot@example.com>'",
    ),
    verbose: bool = typer.Option(  # noqa: FBT001
        False,  # noqa: FBT003
        "--verbose",
        "-v",
        help="Show debug logs",
    ),
) -> None:
    """Prepare branches and publish generated content with git."""
    _configure_logging(verbose=verbose)
    settings = BranchHelperSettings(repo_path=Path(path), remote=remote, commit_author=author)
    _validate_path(settings.repo_path, RichUI())
    ctx.obj = settings


@app.command()
def branch(ctx: typer.Context, name: str = typer.Argument(..., help="Branch to create or check out")) -> None:
    """Check out a branch, creating it at HEAD if it does not exist."""
    ui = RichUI()
    manager = _branch_manager(_settings(ctx))
    try:
        manager.create_or_checkout(name)
    except (subprocess.CalledProcessError, OSError) as e:
        raise _fail(ui, f"create/switch branch {escape(name)}", e) from e
    ui.print_success(f"On branch: {escape(name)}")


@app.command()
def status(ctx: typer.Context) -> None:
    """Show the working tree status. Exits with code 1 when there are changes."""
    ui = RichUI()
    settings = _settings(ctx)
    try:
        tree_status = _branch_manager(settings).status()
    except (subprocess.CalledProcessError, OSError) as e:
        raise _fail(ui, "check git status", e) from e
    ui.print_status(tree_status, unknown_branch=settings.unknown_branch)
    if not tree_status.is_clean:
        raise Exit(code=1)


@app.command()
def current(ctx: typer.Context) -> None:
    """Print the name of the checked-out branch."""
    ui = RichUI()
    try:
        branch_name = _branch_manager(_settings(ctx)).current_branch()
    except (subprocess.CalledProcessError, OSError) as e:
        raise _fail(ui, "read the current branch", e) from e
    ui.print_info(escape(branch_name))


@app.command()
def commit(
    ctx: typer.Context,
    file_path: str = typer.Argument(..., help="File to stage and commit"),
    message: str = typer.Option(..., "--message", "-m", help="Commit message"),
) -> None:
    """Stage a single file and commit it."""
    ui = RichUI()
    try:
        _publisher(_settings(ctx)).commit(file_path, message)
    except (subprocess.CalledProcessError, OSError) as e:
        raise _fail(ui, "commit", e) from e
    ui.print_success(f"Committed: {escape(message)}")


@app.command()
def push(
    ctx: typer.Context,
    branch_name: str | None = typer.Argument(None, help="Branch to push. Defaults to the current branch"),
) -> None:
    """Push a branch and set its upstream."""
    ui = RichUI()
    settings = _settings(ctx)
    try:
        if branch_name is None:
            tree_status = _branch_manager(settings).status()
            if tree_status.current is None:
                ui.print_error("HEAD is detached, pass the branch to push explicitly")
                raise Exit(code=1)
            branch_name = tree_status.current
        _publisher(settings).push(branch_name)
    except (subprocess.CalledProcessError, OSError) as e:
        raise _fail(ui, "push", e) from e
    ui.print_success(f"Pushed to {escape(settings.remote)}/{escape(branch_name)}")


@app.command()
def publish(
    ctx: typer.Context,
    file_path: str = typer.Argument(..., help="File to commit and push"),
    message: str = typer.Option(..., "--message", "-m", help="Commit message"),
    branch_name: str = typer.Option(..., "--branch", "-b", help="Branch to publish on"),
    require_clean: bool = typer.Option(  # noqa: FBT001
        False,  # noqa: FBT003
        "--require-clean",
        help="Refuse to run when the working copy has changes besides FILE_PATH",
    ),
) -> None:
    """Switch to a branch, then commit and push a single file on it."""
    ui = RichUI()
    settings = _settings(ctx)
    manager = _branch_manager(settings)
    try:
        if require_clean:
            ui.print_cyan("Checking git status...")
            pending = manager.status()
            other_changes = {*pending.staged, *pending.unstaged, *pending.untracked} - {file_path}
            if other_changes:
                ui.print_error(
                    "Git working directory is not clean. Please commit or stash your changes: "
                    + escape(", ".join(sorted(other_changes)))
                )
                raise Exit(code=1)

        ui.print_cyan(f"Creating/switching to branch: {escape(branch_name)}")
        manager.create_or_checkout(branch_name)
        _publisher(settings).commit_and_push(file_path, message, branch_name)
    except (subprocess.CalledProcessError, OSError) as e:
        raise _fail(ui, "publish", e) from e
    ui.print_success(f"Published {escape(file_path)} to {escape(settings.remote)}/{escape(branch_name)}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
