from baus.cli import app

app(prog_name="baus")
