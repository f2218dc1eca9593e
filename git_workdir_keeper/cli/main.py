"""Command-line entry point for git-workdir-keeper"""

import sys
from rich.console import Console
from rich.markup import escape

from git_workdir_keeper.cli.args import parse_args
from git_workdir_keeper.config import Config
from git_workdir_keeper.logging_config import setup_logging
from git_workdir_keeper.services.git import CacheRegistry, GitExecutor, WorkingDir

console = Console()


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = parse_args(argv)

    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config.from_env(
            cache_dir=parsed_args.cache_dir,
            git_executable=parsed_args.git_executable,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if config.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        executor = GitExecutor(config.git_executable)
        registry = CacheRegistry(config.cache_dir, executor=executor)
        working_dir = WorkingDir(
            parsed_args.ref,
            parsed_args.remote,
            parsed_args.basedir,
            parsed_args.dirname,
            cache=registry.get(parsed_args.remote),
            executor=executor,
            remote_alias=config.remote_alias,
        )

        result = working_dir.sync()
        console.print(f"[green]Synced[/green] {escape(str(result))}")
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
