from import_audit.cli import cli

cli()
