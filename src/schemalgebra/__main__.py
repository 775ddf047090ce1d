from schemalgebra.cli import cli

cli()
