# pantry/cli.py
import click
from flask.cli import with_appcontext

from .services.catalog_service import seed_default_products
from .services.sales_service import export_daily_breakdown

@click.command("seed-products")
@with_appcontext
def seed_products():
    """Insert the default catalog if there are no products yet."""
    n = seed_default_products()
    if not n:
        click.echo("Products already present, nothing to do"); return
    click.echo(f"{n} default products inserted")

@click.command("export-sales")
@with_appcontext
@click.option("--out", "out_path", default="daily_sales.csv", show_default=True,
              help="Destination file; .xlsx writes Excel, anything else CSV.")
def export_sales(out_path):
    n = export_daily_breakdown(out_path)
    click.echo(f"{n} days exported to {out_path}")

def register_cli(app):
    app.cli.add_command(seed_products)
    app.cli.add_command(export_sales)
