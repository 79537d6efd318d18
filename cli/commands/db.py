import click
from ..utils import get_database

@click.group()
def db():
    """Database commands"""
    pass

@db.command()
@click.pass_context
def init(ctx: click.Context):
    """Create the catalog tables if they do not exist"""
    database = get_database(ctx)
    database.init_db()
    click.echo(click.style("Initialized database at ", fg='green') +
               click.style(database.connection_string, fg='cyan'))
