# cli/main.py
import logging
import click
from .commands.db import db
from .commands.work import work

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='SQLAlchemy database URL (default: sqlite:///catalog.db)')
@click.option('--verbose', is_flag=True, help='Show debug logging')
@click.pass_context
def cli(ctx: click.Context, database_url: str, verbose: bool):
    """Library catalog CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    ctx.ensure_object(dict)
    ctx.obj['database_url'] = database_url

cli.add_command(db)
cli.add_command(work)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
