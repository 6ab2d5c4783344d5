from jsonconv.cli.cli import app

app()
