from mkservice.cli.app import app

app()
