import click
from typing import Any, Callable
from catalog.exceptions import PersistenceError, ValidationError
from catalog.forms import parse_work_form
from catalog.sa.repositories.work import WorkRepository
from ..utils import get_database, report_validation_error, report_storage_error, print_works

def form_options(f: Callable) -> Callable:
    """Attach the work form fields as options"""
    options = [
        click.option('--title', default=None, help='Title of the work'),
        click.option('--author', default=None, help='Author name'),
        click.option('--kind', default=None, help='Book, OnlineBook, Magazine or Newspaper'),
        click.option('--year', 'publication_year', default=None, help='Publication year (1500-2100)'),
        click.option('--publisher', default=None, help='Publisher name'),
        click.option('--call-number', default=None, help='Library call number'),
        click.option('--edition', default=None, help='Edition, or issue number for magazines and newspapers'),
        click.option('--identifier', '--isbn', '--issn', 'identifier', default=None,
                     help='ISBN for books, ISSN for magazines and newspapers'),
        click.option('--volume', default=None, help='Volume (magazines only)'),
    ]
    for option in reversed(options):
        f = option(f)
    return f

def _save(ctx: click.Context, fields: dict[str, Any], update: bool) -> None:
    try:
        work_obj = parse_work_form(**fields)
    except ValidationError as e:
        report_validation_error(e)
        ctx.exit(2)

    repo = WorkRepository(get_database(ctx))
    try:
        if update:
            repo.update(work_obj)
        else:
            repo.create(work_obj)
    except ValidationError as e:
        report_validation_error(e)
        ctx.exit(2)
    except PersistenceError as e:
        report_storage_error(e)
        ctx.exit(1)

    click.echo(click.style("Saved work ", fg='green') +
               click.style(str(work_obj.id), fg='cyan') +
               click.style(f": {work_obj.title}", fg='green'))

@click.group()
def work():
    """Catalog work commands"""
    pass

@work.command()
@form_options
@click.pass_context
def add(ctx: click.Context, **fields: Any):
    """Add a new work to the catalog

    Example:
        library-catalog work add --title "Dom Casmurro" --author "Machado de Assis" \\
            --kind Book --year 1899 --publisher Garnier --call-number "869.3 M149d" --isbn 9788535910663
    """
    _save(ctx, fields, update=False)

@work.command()
@click.argument('work_id')
@form_options
@click.pass_context
def update(ctx: click.Context, work_id: str, **fields: Any):
    """Replace the details of an existing work"""
    _save(ctx, {'id': work_id, **fields}, update=True)

@work.command()
@click.argument('work_id', type=int)
@click.option('--yes', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def delete(ctx: click.Context, work_id: int, yes: bool):
    """Delete a work and everything stored for it"""
    if not yes:
        click.confirm(f"Delete work {work_id}?", abort=True)

    repo = WorkRepository(get_database(ctx))
    try:
        repo.delete(work_id)
    except PersistenceError as e:
        report_storage_error(e)
        ctx.exit(1)

    click.echo(click.style("Deleted work ", fg='green') + click.style(str(work_id), fg='cyan'))

@work.command(name='list')
@click.pass_context
def list_works(ctx: click.Context):
    """List all works, newest first"""
    repo = WorkRepository(get_database(ctx))
    try:
        works = repo.list_all()
    except PersistenceError as e:
        report_storage_error(e)
        ctx.exit(1)

    print_works(works)
