from sqlprompt.main import cli

cli()
