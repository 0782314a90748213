from matchbook.cli import app

app()
