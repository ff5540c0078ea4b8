from plangeom.cli import cli

cli()
