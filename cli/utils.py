import click
from typing import List, Optional
from catalog.exceptions import PersistenceError, ValidationError
from catalog.models import Work
from catalog.sa.database import Database

def get_database(ctx: click.Context) -> Database:
    """Build the Database for this invocation from the group options"""
    obj = ctx.ensure_object(dict)
    if obj.get('database') is None:
        obj['database'] = Database(obj.get('database_url'))
    return obj['database']

def report_validation_error(error: ValidationError) -> None:
    """Show a validation problem next to the field it concerns"""
    click.echo(click.style("Validation: ", fg='yellow') +
               click.style(str(error), fg='yellow'), err=True)

def report_storage_error(error: PersistenceError) -> None:
    """Show a storage failure without the driver details"""
    click.echo(click.style("Database error: ", fg='red') +
               click.style(error.message, fg='red'), err=True)

def _cell(value: Optional[object]) -> str:
    return "" if value is None else str(value)

def print_works(works: List[Work]) -> None:
    """Print works one per line, in the order given"""
    if not works:
        click.echo(click.style("No works found", fg='yellow'))
        return

    header = ["ID", "Kind", "Title", "Author", "Year", "Publisher",
              "Call number", "Edition", "Volume", "ISBN/ISSN"]
    click.echo(click.style(" | ".join(header), fg='blue'))
    for work in works:
        cells = [
            work.id, work.kind.value, work.title, work.author_name,
            work.publication_year, work.publisher_name, work.call_number,
            work.issue_number or work.edition, work.volume, work.identifier_code,
        ]
        click.echo(" | ".join(_cell(cell) for cell in cells))
