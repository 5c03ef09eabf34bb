"""CLI entrypoint: Typer app definition and command registration"""

import typer

from folio.cli.commands import build_cmd, catalog_cmd, list_cmd, show_cmd, sitemap_cmd


app = typer.Typer(name="folio", no_args_is_help=True, help="Blog post catalog and sitemap builder")

app.command(name="build")(build_cmd)
app.command(name="catalog")(catalog_cmd)
app.command(name="sitemap")(sitemap_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
